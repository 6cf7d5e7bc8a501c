from __future__ import annotations
from typing import List, Optional
from .base import ASTNode

"""Expression node definitions for Decaf."""


class Expr(ASTNode):
    """Base class for all expressions."""

    def __init__(
        self, line: int = 0, column: int = 0, raw_text: Optional[str] = None
    ) -> None:
        super().__init__(line, column, raw_text=raw_text)


class BinaryOp(Expr):
    """Binary operation: left op right"""

    def __init__(
        self, op: str, left: "Expr", right: "Expr", line: int = 0, column: int = 0
    ) -> None:
        super().__init__(line, column)
        self.op = op  # ||, &&, ==, !=, <, <=, >, >=, +, -, *, /, %
        self.left = left
        self.right = right


class UnaryOp(Expr):
    """Unary operation: op child"""

    def __init__(self, op: str, child: "Expr", line: int = 0, column: int = 0) -> None:
        super().__init__(line, column)
        self.op = op  # -, !
        self.child = child


class Location(Expr):
    """Variable reference, optionally indexed: name or name[index].

    Also serves as the target of an assignment.
    """

    def __init__(
        self,
        name: str,
        index: Optional["Expr"] = None,
        line: int = 0,
        column: int = 0,
        raw_text: Optional[str] = None,
    ) -> None:
        super().__init__(line, column, raw_text=raw_text)
        self.name = name
        self.index = index


class FuncCall(Expr):
    """Function call: name(args...). Valid both as expression and statement."""

    def __init__(
        self, name: str, arguments: List["Expr"], line: int = 0, column: int = 0
    ) -> None:
        super().__init__(line, column)
        self.name = name
        self.arguments = arguments
