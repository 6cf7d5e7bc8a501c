"""Semantic analysis package for Decaf."""

from .analyzer import SemanticAnalyzer, analyze
from .context import AnalysisContext
from .diagnostics import SemanticErrorKind
from .exceptions import SemanticError
from .scope_builder import ScopeBuilder, build_symbol_tables
from .symbol_table import ScopeKind, Symbol, SymbolTable, SymbolType

__all__ = [
    "SemanticAnalyzer",
    "analyze",
    "AnalysisContext",
    "SemanticErrorKind",
    "SemanticError",
    "ScopeBuilder",
    "build_symbol_tables",
    "ScopeKind",
    "Symbol",
    "SymbolTable",
    "SymbolType",
]
