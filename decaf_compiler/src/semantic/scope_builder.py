"""Builds and attaches the nested symbol tables semantic analysis consumes."""

from contextlib import contextmanager
from typing import Any, Iterator, Optional

from decaf_compiler.src.ast import ASTNode, ASTWalker, Block, FuncDecl, Program, VarDecl

from .symbol_table import ScopeKind, Symbol, SymbolTable, SymbolType


class ScopeBuilder(ASTWalker):
    """Attach a ``SymbolTable`` to every Program, FuncDecl and Block node.

    Each declaration is defined in the scope that contains it, in source
    order. Duplicates are kept; reporting them is left to the analyzer.
    """

    def __init__(self) -> None:
        self.current_scope: Optional[SymbolTable] = None

    def build(self, program: Program) -> SymbolTable:
        self.current_scope = None
        self.walk(program)
        return program.symbol_table

    @contextmanager
    def _open_scope(self, node: ASTNode, kind: ScopeKind) -> Iterator[SymbolTable]:
        if self.current_scope is None:
            table = SymbolTable(kind)
        else:
            table = self.current_scope.create_child_scope(kind)
        node.symbol_table = table

        old_scope = self.current_scope
        self.current_scope = table
        try:
            yield table
        finally:
            self.current_scope = old_scope

    def descend_Program(self, node: Program, _: Any):
        return self._open_scope(node, ScopeKind.PROGRAM)

    def descend_Block(self, node: Block, _: Any):
        return self._open_scope(node, ScopeKind.BLOCK)

    @contextmanager
    def descend_FuncDecl(self, node: FuncDecl, _: Any) -> Iterator[SymbolTable]:
        with self._open_scope(node, ScopeKind.FUNCTION) as table:
            for param in node.parameters:
                table.define(
                    Symbol(
                        name=param.name,
                        symbol_type=SymbolType.SCALAR,
                        value_type=param.type_name,
                        defined_at=node,
                    )
                )
            yield table

    def previsit_VarDecl(self, node: VarDecl, _: Any) -> None:
        self._define(
            Symbol(
                name=node.name,
                symbol_type=SymbolType.ARRAY if node.is_array else SymbolType.SCALAR,
                value_type=node.type_name,
                length=node.array_length if node.is_array else 1,
                defined_at=node,
            )
        )

    def previsit_FuncDecl(self, node: FuncDecl, _: Any) -> None:
        self._define(
            Symbol(
                name=node.name,
                symbol_type=SymbolType.FUNCTION,
                value_type=node.return_type,
                parameters=list(node.parameters),
                defined_at=node,
            )
        )

    def _define(self, symbol: Symbol) -> None:
        if self.current_scope is None:
            raise ValueError(f"Declaration of '{symbol.name}' outside of any scope")
        self.current_scope.define(symbol)


def build_symbol_tables(program: Program) -> SymbolTable:
    """Attach symbol tables to ``program`` and return the program scope."""
    return ScopeBuilder().build(program)
