from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional, Union
from .base import ASTNode
from .expressions import Expr, FuncCall, Location
from .types import DecafType

if TYPE_CHECKING:
    from decaf_compiler.src.semantic.symbol_table import SymbolTable

"""Declaration and statement node definitions for Decaf."""


@dataclass
class Parameter:
    """A typed function parameter."""

    type_name: DecafType
    name: str
    line: int = 0
    column: int = 0


class Program(ASTNode):
    """Root node: global variable and function declarations in source order."""

    def __init__(
        self,
        declarations: List[Union["VarDecl", "FuncDecl"]],
        line: int = 0,
        column: int = 0,
    ) -> None:
        super().__init__(line, column)
        self.declarations = declarations
        self.symbol_table: Optional["SymbolTable"] = None

    @property
    def variables(self) -> List["VarDecl"]:
        return [decl for decl in self.declarations if isinstance(decl, VarDecl)]

    @property
    def functions(self) -> List["FuncDecl"]:
        return [decl for decl in self.declarations if isinstance(decl, FuncDecl)]


class Statement(ASTNode):
    """Base class for all statements."""

    def __init__(
        self, line: int = 0, column: int = 0, raw_text: Optional[str] = None
    ) -> None:
        super().__init__(line, column, raw_text=raw_text)


class VarDecl(Statement):
    """type name; or type name[length];"""

    def __init__(
        self,
        type_name: DecafType,
        name: str,
        is_array: bool = False,
        array_length: int = 1,
        line: int = 0,
        column: int = 0,
    ) -> None:
        super().__init__(line, column)
        self.type_name = type_name
        self.name = name
        self.is_array = is_array
        self.array_length = array_length


class Block(Statement):
    """{ declarations... statements... }"""

    def __init__(
        self,
        variables: List[VarDecl],
        statements: List["StatementOrCall"],
        line: int = 0,
        column: int = 0,
    ) -> None:
        super().__init__(line, column)
        self.variables = variables
        self.statements = statements
        self.symbol_table: Optional["SymbolTable"] = None


class FuncDecl(Statement):
    """def type name(params...) { ... }"""

    def __init__(
        self,
        name: str,
        return_type: DecafType,
        parameters: List[Parameter],
        body: Block,
        line: int = 0,
        column: int = 0,
    ) -> None:
        super().__init__(line, column)
        self.name = name
        self.return_type = return_type
        self.parameters = parameters
        self.body = body
        self.symbol_table: Optional["SymbolTable"] = None


class Assignment(Statement):
    """location = value;"""

    def __init__(
        self, location: Location, value: Expr, line: int = 0, column: int = 0
    ) -> None:
        super().__init__(line, column)
        self.location = location
        self.value = value


class Conditional(Statement):
    """if (condition) { ... } [else { ... }]"""

    def __init__(
        self,
        condition: Expr,
        if_block: Block,
        else_block: Optional[Block] = None,
        line: int = 0,
        column: int = 0,
    ) -> None:
        super().__init__(line, column)
        self.condition = condition
        self.if_block = if_block
        self.else_block = else_block


class WhileLoop(Statement):
    """while (condition) { ... }"""

    def __init__(
        self, condition: Expr, body: Block, line: int = 0, column: int = 0
    ) -> None:
        super().__init__(line, column)
        self.condition = condition
        self.body = body


class Break(Statement):
    """break;"""


class Continue(Statement):
    """continue;"""


class Return(Statement):
    """return [value];"""

    def __init__(
        self, value: Optional[Expr] = None, line: int = 0, column: int = 0
    ) -> None:
        super().__init__(line, column)
        self.value = value


# A call used for its side effects is a statement on its own.
StatementOrCall = Union[Statement, FuncCall]
