"""Mutable state threaded through one semantic analysis run."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Dict, Iterator, Optional, Set

from decaf_compiler.src.ast import ASTNode, FuncDecl
from decaf_compiler.src.common.constants import DEFAULT_CONFIG, AnalyzerConfig
from decaf_compiler.src.common.diagnostics import ProgramDiagnostics

from .diagnostics import SemanticErrorKind
from .symbol_table import Symbol, SymbolTable


@dataclass
class AnalysisContext:
    """State carried through the walk: active scope, enclosing function, loop depth.

    Scoped state is only changed through the ``scope``, ``function`` and
    ``loop`` context managers, which restore the previous value when the
    subtree is left.
    """

    diagnostics: ProgramDiagnostics = field(default_factory=ProgramDiagnostics)
    config: AnalyzerConfig = DEFAULT_CONFIG
    active_scope: Optional[SymbolTable] = None
    current_function: Optional[FuncDecl] = None
    loop_depth: int = 0
    # Names already declared in each scope, in walk order
    declared: Dict[SymbolTable, Set[str]] = field(default_factory=dict)

    @contextmanager
    def scope(self, table: SymbolTable) -> Iterator[SymbolTable]:
        previous = self.active_scope
        self.active_scope = table
        try:
            yield table
        finally:
            self.active_scope = previous

    @contextmanager
    def function(self, node: FuncDecl) -> Iterator[FuncDecl]:
        # Functions do not nest, so leaving one always clears the slot.
        self.current_function = node
        try:
            yield node
        finally:
            self.current_function = None

    @contextmanager
    def loop(self) -> Iterator[int]:
        self.loop_depth += 1
        try:
            yield self.loop_depth
        finally:
            self.loop_depth -= 1

    @property
    def in_loop(self) -> bool:
        return self.loop_depth > 0

    def resolve(self, name: str) -> Optional[Symbol]:
        """Find the nearest declaration of ``name``, innermost scope first."""
        if self.active_scope is None:
            return None
        return self.active_scope.lookup(name)

    def resolve_with_reporting(self, node: ASTNode, name: str) -> Optional[Symbol]:
        """Like ``resolve``, but records an undefined-symbol error on failure."""
        symbol = self.resolve(name)
        if symbol is None:
            self.error(
                SemanticErrorKind.UNDEFINED_SYMBOL,
                f"Undefined symbol '{name}' on line {node.line}",
                node,
            )
        return symbol

    def mark_declared(self, name: str) -> bool:
        """Record a declaration of ``name`` in the active scope.

        Returns True when an earlier declaration of the same name in the same
        scope has already been visited.
        """
        if self.active_scope is None:
            return False
        seen = self.declared.setdefault(self.active_scope, set())
        if name in seen:
            return True
        seen.add(name)
        return False

    def error(
        self, kind: SemanticErrorKind, message: str, node: Optional[ASTNode] = None
    ) -> None:
        self.diagnostics.error(message, stage="semantic", node=node, kind=kind)
