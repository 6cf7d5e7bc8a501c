from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator, List, Optional

from .source_location import SourceLocation

"""Unified diagnostic collection for the compiler front end."""


class DiagnosticSeverity(Enum):
    """Severity levels for compiler diagnostics."""

    DEBUG = "debug"  # Internal compiler information
    INFO = "info"  # Informational messages for users
    WARNING = "warning"  # Issues that don't prevent compilation
    ERROR = "error"  # Issues that prevent code generation


_SEVERITY_ORDER = [
    DiagnosticSeverity.DEBUG,
    DiagnosticSeverity.INFO,
    DiagnosticSeverity.WARNING,
    DiagnosticSeverity.ERROR,
]


@dataclass
class Diagnostic:
    """A single diagnostic message with context."""

    severity: DiagnosticSeverity
    message: str
    stage: str  # parsing, semantic
    line: int = 0
    column: int = 0
    source_file: Optional[str] = None
    node: Optional[Any] = None  # ASTNode reference if available
    kind: Optional[Enum] = None  # stage-specific category, e.g. SemanticErrorKind

    @property
    def location(self) -> SourceLocation:
        return SourceLocation(self.source_file, self.line, self.column)


class ProgramDiagnostics:
    """Ordered, append-only diagnostic collection for one compilation.

    Diagnostics keep the order in which they were reported. Code generation
    may only run when the collection is empty.

    Usage:
        diagnostics = ProgramDiagnostics()
        diagnostics.error("Undefined symbol 'x'", stage="semantic", line=10)
        if diagnostics.has_errors():
            print(diagnostics.format_for_user())
    """

    def __init__(self, verbose: bool = False, debug: bool = False):
        self.diagnostics: List[Diagnostic] = []
        self.verbose = verbose
        self.debug = debug
        self._error_count = 0
        self._warning_count = 0
        self.default_stage = "unknown"

    def __len__(self) -> int:
        return len(self.diagnostics)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.diagnostics)

    def info(
        self,
        message: str,
        stage: str | None = None,
        line: int = 0,
        column: int = 0,
        source_file: Optional[str] = None,
        node: Optional[Any] = None,
    ) -> None:
        """Add an informational message (kept in verbose mode only)."""
        if self.verbose:
            self._add(
                DiagnosticSeverity.INFO, message, stage, line, column, source_file, node
            )

    def warning(
        self,
        message: str,
        stage: str | None = None,
        line: int = 0,
        column: int = 0,
        source_file: Optional[str] = None,
        node: Optional[Any] = None,
    ) -> None:
        """Add a warning (always shown, doesn't stop compilation)."""
        self._add(
            DiagnosticSeverity.WARNING, message, stage, line, column, source_file, node
        )
        self._warning_count += 1

    def error(
        self,
        message: str,
        stage: str | None = None,
        line: int = 0,
        column: int = 0,
        source_file: Optional[str] = None,
        node: Optional[Any] = None,
        kind: Optional[Enum] = None,
    ) -> None:
        """Add an error (always shown, blocks code generation)."""
        self._add(
            DiagnosticSeverity.ERROR,
            message,
            stage,
            line,
            column,
            source_file,
            node,
            kind,
        )
        self._error_count += 1

    def _add(
        self,
        severity: DiagnosticSeverity,
        message: str,
        stage: str | None,
        line: int,
        column: int,
        source_file: Optional[str],
        node: Optional[Any],
        kind: Optional[Enum] = None,
    ) -> None:
        """Internal method to add a diagnostic."""
        # Extract location from node if provided and location not specified
        if node is not None and line == 0:
            where = SourceLocation.of(node)
            line, column = where.line, where.column
            if source_file is None:
                source_file = where.file

        diag = Diagnostic(
            severity=severity,
            message=message,
            stage=stage or self.default_stage,
            line=line,
            column=column,
            source_file=source_file,
            node=node,
            kind=kind,
        )
        self.diagnostics.append(diag)

    def has_errors(self) -> bool:
        """Check if any errors have been recorded."""
        return self._error_count > 0

    def error_count(self) -> int:
        """Get the number of errors."""
        return self._error_count

    def warning_count(self) -> int:
        """Get the number of warnings."""
        return self._warning_count

    def of_kind(self, kind: Enum) -> List[Diagnostic]:
        """Return the diagnostics reported with the given category."""
        return [diag for diag in self.diagnostics if diag.kind == kind]

    def get_messages(
        self, min_severity: DiagnosticSeverity = DiagnosticSeverity.WARNING
    ) -> List[str]:
        """Get formatted messages at or above the specified severity level."""
        threshold = _SEVERITY_ORDER.index(min_severity)
        return [
            self._format_diagnostic(diag)
            for diag in self.diagnostics
            if _SEVERITY_ORDER.index(diag.severity) >= threshold
        ]

    def _format_diagnostic(self, diag: Diagnostic) -> str:
        """Format a single diagnostic for display."""
        # Format: SEVERITY [stage:file:line:col]: message
        location = diag.stage
        if diag.location.is_known:
            location = f"{diag.stage}:{diag.location}"
        return f"{diag.severity.value.upper()} [{location}]: {diag.message}"

    def format_for_user(self) -> str:
        """Format all diagnostics for user-friendly output."""
        if not self.diagnostics:
            return "No diagnostics."

        if self.debug:
            min_severity = DiagnosticSeverity.DEBUG
        elif self.verbose:
            min_severity = DiagnosticSeverity.INFO
        else:
            min_severity = DiagnosticSeverity.WARNING

        messages = self.get_messages(min_severity)

        summary = f"\nAnalysis summary: {self._error_count} error(s), {self._warning_count} warning(s)"

        return "\n".join(messages) + summary
