"""
Tests for common/source_location.py - Source location tracking.
"""

from decaf_compiler.src.ast import Literal
from decaf_compiler.src.common.source_location import SourceLocation


class TestSourceLocation:
    """Tests for SourceLocation dataclass."""

    def test_default_is_unknown(self):
        loc = SourceLocation()
        assert str(loc) == "unknown"
        assert not loc.is_known

    def test_full_location(self):
        loc = SourceLocation(file="/path/to/prog.decaf", line=10, column=5)
        assert str(loc) == "prog.decaf:10:5"
        assert loc.is_known

    def test_line_only(self):
        assert str(SourceLocation(line=3)) == "3"

    def test_column_needs_line(self):
        """A column without a line is not shown."""
        assert str(SourceLocation(file="a.decaf", column=4)) == "a.decaf"

    def test_of_node(self):
        node = Literal(1, line=2, column=9)
        loc = SourceLocation.of(node)
        assert (loc.file, loc.line, loc.column) == (None, 2, 9)

    def test_of_none(self):
        assert not SourceLocation.of(None).is_known
