from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

"""Source location utilities for tracking code positions."""


@dataclass
class SourceLocation:
    """Represents a location in source code."""

    file: Optional[str] = None
    line: int = 0
    column: int = 0

    @property
    def is_known(self) -> bool:
        return bool(self.file) or self.line > 0

    def __str__(self) -> str:
        """Format as file:line:col."""
        parts = []
        if self.file:
            parts.append(Path(self.file).name)
        if self.line > 0:
            parts.append(str(self.line))
            if self.column > 0:
                parts.append(str(self.column))
        return ":".join(parts) if parts else "unknown"

    @classmethod
    def of(cls, node: Optional[Any]) -> "SourceLocation":
        """Build the location of an AST node (or an unknown location for None)."""
        if node is None:
            return cls()
        return cls(
            file=getattr(node, "source_file", None),
            line=getattr(node, "line", 0) or 0,
            column=getattr(node, "column", 0) or 0,
        )
