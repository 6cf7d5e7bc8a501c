"""Common utilities shared across compiler stages."""

from .diagnostics import Diagnostic, ProgramDiagnostics, DiagnosticSeverity
from .source_location import SourceLocation
from .constants import *

__all__ = [
    "Diagnostic",
    "ProgramDiagnostics",
    "DiagnosticSeverity",
    "SourceLocation",
    # Constants
    "AnalyzerConfig",
    "DEFAULT_CONFIG",
    "ENTRY_POINT_NAME",
    "SCALAR_LENGTH",
]
