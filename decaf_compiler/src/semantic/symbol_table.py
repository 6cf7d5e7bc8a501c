import weakref
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional
from decaf_compiler.src.ast.statements import ASTNode, Parameter
from decaf_compiler.src.ast.types import DecafType
from decaf_compiler.src.common.constants import SCALAR_LENGTH

"""Symbol table implementation for semantic analysis."""


class SymbolType(Enum):
    """Kinds of declared symbols."""

    SCALAR = "scalar"
    ARRAY = "array"
    FUNCTION = "function"


class ScopeKind(Enum):
    """Program text regions that introduce a scope."""

    PROGRAM = "program"
    FUNCTION = "function"
    BLOCK = "block"


@dataclass
class Symbol:
    """Symbol table entry.

    For functions ``value_type`` is the declared return type.
    """

    name: str
    symbol_type: SymbolType
    value_type: DecafType
    length: int = SCALAR_LENGTH
    parameters: List[Parameter] = field(default_factory=list)
    defined_at: Optional[ASTNode] = None

    @property
    def is_array(self) -> bool:
        return self.symbol_type == SymbolType.ARRAY

    @property
    def is_function(self) -> bool:
        return self.symbol_type == SymbolType.FUNCTION

    @property
    def return_type(self) -> Optional[DecafType]:
        return self.value_type if self.is_function else None

    @property
    def param_types(self) -> List[DecafType]:
        return [param.type_name for param in self.parameters]


class SymbolTable:
    """Hierarchical symbol table supporting lexical scoping.

    Local symbols are kept in declaration order and duplicates are retained so
    that semantic analysis can report them. The parent link is a weak reference:
    scopes are owned top-down, by their parent's ``children`` and by the AST
    node that introduces them.
    """

    def __init__(
        self,
        scope_kind: ScopeKind = ScopeKind.PROGRAM,
        parent: Optional["SymbolTable"] = None,
    ) -> None:
        self.scope_kind = scope_kind
        self._parent_ref = weakref.ref(parent) if parent is not None else None
        self.symbols: List[Symbol] = []
        self.children: List["SymbolTable"] = []

    @property
    def parent(self) -> Optional["SymbolTable"]:
        return self._parent_ref() if self._parent_ref is not None else None

    @property
    def root(self) -> "SymbolTable":
        """The outermost (program) scope of this chain."""
        scope = self
        while scope.parent is not None:
            scope = scope.parent
        return scope

    def define(self, symbol: Symbol) -> None:
        """Define a symbol in the current scope."""
        self.symbols.append(symbol)

    def lookup_local(self, name: str) -> Optional[Symbol]:
        """Return the first symbol named ``name`` declared in this scope only."""
        for symbol in self.symbols:
            if symbol.name == name:
                return symbol
        return None

    def count_local(self, name: str) -> int:
        """Number of declarations of ``name`` in this scope (ignoring parents)."""
        return sum(1 for symbol in self.symbols if symbol.name == name)

    def lookup(self, name: str) -> Optional[Symbol]:
        """Look up a symbol by name, searching parent scopes as needed."""
        scope: Optional[SymbolTable] = self
        while scope is not None:
            symbol = scope.lookup_local(name)
            if symbol is not None:
                return symbol
            scope = scope.parent
        return None

    def create_child_scope(self, scope_kind: ScopeKind = ScopeKind.BLOCK) -> "SymbolTable":
        """Create and return a child scope."""
        child = SymbolTable(scope_kind, parent=self)
        self.children.append(child)
        return child

    def __repr__(self) -> str:
        names = ", ".join(symbol.name for symbol in self.symbols)
        return f"SymbolTable({self.scope_kind.value}: {names})"
