from .parser import DecafParser
from .transformer import DecafTransformer

"""Parsing module for Decaf."""


__all__ = ["DecafParser", "DecafTransformer"]
