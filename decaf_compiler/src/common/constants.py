"""Shared constants and configuration across the compiler front end."""

from dataclasses import dataclass

# Name of the function every program must define
ENTRY_POINT_NAME = "main"

# Scalars and functions occupy a single element
SCALAR_LENGTH = 1


@dataclass(frozen=True)
class AnalyzerConfig:
    """Settings that tune semantic analysis.

    ``entry_point`` is the function every program must define; variables may
    not take its name. With ``check_literal_indices`` disabled, array bounds
    are left to run-time checks even for constant indices.
    """

    entry_point: str = ENTRY_POINT_NAME
    check_literal_indices: bool = True


DEFAULT_CONFIG = AnalyzerConfig()
