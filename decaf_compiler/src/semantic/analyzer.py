"""Semantic analysis for Decaf."""

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from decaf_compiler.src.ast.base import ASTNode, ASTWalker
from decaf_compiler.src.ast.expressions import BinaryOp, FuncCall, Location, UnaryOp
from decaf_compiler.src.ast.literals import Literal
from decaf_compiler.src.ast.statements import (
    Assignment,
    Block,
    Break,
    Conditional,
    Continue,
    FuncDecl,
    Program,
    Return,
    VarDecl,
    WhileLoop,
)
from decaf_compiler.src.ast.types import DecafType
from decaf_compiler.src.common.constants import DEFAULT_CONFIG, AnalyzerConfig
from decaf_compiler.src.common.diagnostics import ProgramDiagnostics

from .context import AnalysisContext
from .diagnostics import SemanticErrorKind
from .exceptions import SemanticError
from .symbol_table import SymbolTable
from .type_system import (
    binary_operands_valid,
    binary_result_type,
    describe_binary_signature,
    unary_result_type,
)

VOID = DecafType.VOID


class SemanticAnalyzer(ASTWalker):
    """Pre/post-order rules that infer types and check Decaf's static semantics.

    Pre-order hooks set each node's ``inferred_type`` before its children are
    visited; post-order hooks compare it against the children's types. A
    ``void`` operand that comes from a failed resolution is treated as
    "already diagnosed" and suppresses the checks that consume it.
    """

    def __init__(self, config: AnalyzerConfig = DEFAULT_CONFIG):
        self.config = config

    def analyze(
        self,
        tree: Optional[Program],
        diagnostics: Optional[ProgramDiagnostics] = None,
    ) -> ProgramDiagnostics:
        """Check ``tree`` and return every diagnostic found, in traversal order."""
        if diagnostics is None:
            diagnostics = ProgramDiagnostics()
        diagnostics.default_stage = "semantic"
        context = AnalysisContext(diagnostics=diagnostics, config=self.config)

        if tree is None:
            context.error(
                SemanticErrorKind.MISSING_TREE, "Missing syntax tree: nothing to analyze"
            )
            return diagnostics

        logging.debug("Semantic analysis of %s", tree.source_file or "<string>")
        self.walk(tree, context)
        logging.debug(
            "Semantic analysis finished with %d diagnostic(s)", len(diagnostics)
        )
        return diagnostics

    @staticmethod
    def _table_of(node: ASTNode) -> SymbolTable:
        table = getattr(node, "symbol_table", None)
        if table is None:
            raise SemanticError(
                f"{type(node).__name__} has no attached symbol table", node
            )
        return table

    # Scope and control context

    def descend_Program(self, node: Program, context: AnalysisContext):
        return context.scope(self._table_of(node))

    def descend_Block(self, node: Block, context: AnalysisContext):
        return context.scope(self._table_of(node))

    @contextmanager
    def descend_FuncDecl(
        self, node: FuncDecl, context: AnalysisContext
    ) -> Iterator[None]:
        with context.function(node), context.scope(self._table_of(node)):
            yield

    def descend_WhileLoop(self, node: WhileLoop, context: AnalysisContext):
        return context.loop()

    # Declarations

    def previsit_VarDecl(self, node: VarDecl, context: AnalysisContext) -> None:
        node.inferred_type = node.type_name

        if node.type_name is VOID:
            context.error(
                SemanticErrorKind.INVALID_DECLARATION,
                f"Void variable '{node.name}' on line {node.line}",
                node,
            )
        if node.name == self.config.entry_point:
            context.error(
                SemanticErrorKind.INVALID_DECLARATION,
                f"Invalid variable name '{node.name}' on line {node.line}",
                node,
            )
        if node.is_array and node.array_length <= 0:
            context.error(
                SemanticErrorKind.INVALID_DECLARATION,
                f"Invalid array declaration '{node.name}' on line {node.line}: "
                f"array length must be greater than 0 but was {node.array_length}",
                node,
            )

    def postvisit_VarDecl(self, node: VarDecl, context: AnalysisContext) -> None:
        self._check_duplicate(node, node.name, context)

    def previsit_FuncDecl(self, node: FuncDecl, context: AnalysisContext) -> None:
        node.inferred_type = node.return_type
        # still in the enclosing scope here
        self._check_duplicate(node, node.name, context)

        table = self._table_of(node)
        seen = set()
        for param in node.parameters:
            if param.name in seen and table.count_local(param.name) > 1:
                context.error(
                    SemanticErrorKind.DUPLICATE_SYMBOL,
                    f"Duplicate parameter '{param.name}' of '{node.name}' on line {node.line}",
                    node,
                )
            seen.add(param.name)

    def _check_duplicate(
        self, node: ASTNode, name: str, context: AnalysisContext
    ) -> None:
        """Report each redundant declaration of ``name`` in the active scope once."""
        already_declared = context.mark_declared(name)
        if context.active_scope is None:
            return
        if already_declared and context.active_scope.count_local(name) > 1:
            context.error(
                SemanticErrorKind.DUPLICATE_SYMBOL,
                f"Duplicate symbol '{name}' on line {node.line}",
                node,
            )

    def postvisit_Program(self, node: Program, context: AnalysisContext) -> None:
        """Every program needs a parameterless entry point in program scope."""
        entry = self.config.entry_point
        symbol = next(
            (
                candidate
                for candidate in self._table_of(node).symbols
                if candidate.name == entry and candidate.is_function
            ),
            None,
        )

        if symbol is None:
            context.error(
                SemanticErrorKind.MISSING_ENTRY_POINT,
                f"Program does not contain a '{entry}' function",
                node,
            )
        elif symbol.parameters:
            line = symbol.defined_at.line if symbol.defined_at is not None else node.line
            context.error(
                SemanticErrorKind.MISSING_ENTRY_POINT,
                f"'{entry}' function on line {line} should not have any parameters",
                symbol.defined_at or node,
            )

    # Locations and assignment

    def previsit_Location(self, node: Location, context: AnalysisContext) -> None:
        symbol = context.resolve(node.name)
        if symbol is None or symbol.is_function:
            node.inferred_type = VOID
        else:
            node.inferred_type = symbol.value_type

    def postvisit_Location(self, node: Location, context: AnalysisContext) -> None:
        if node.index is None:
            symbol = context.resolve_with_reporting(node, node.name)
            if symbol is None:
                return
            if symbol.is_function:
                context.error(
                    SemanticErrorKind.INVALID_LOCATION,
                    f"Function '{node.name}' used as a variable on line {node.line}",
                    node,
                )
            elif symbol.is_array:
                context.error(
                    SemanticErrorKind.INVALID_LOCATION,
                    f"Invalid array access on line {node.line}: "
                    f"array '{node.name}' used without an index",
                    node,
                )
            return

        symbol = context.resolve(node.name)
        if symbol is None:
            context.error(
                SemanticErrorKind.UNDEFINED_SYMBOL,
                f"Invalid array access on line {node.line}: "
                f"symbol '{node.name}' is undefined",
                node,
            )
            return
        if not symbol.is_array:
            context.error(
                SemanticErrorKind.INVALID_LOCATION,
                f"Invalid array access on line {node.line}: '{node.name}' is not an array",
                node,
            )
            return

        index_type = node.index.inferred_type
        if index_type not in (DecafType.INT, VOID):
            context.error(
                SemanticErrorKind.TYPE_MISMATCH,
                f"Invalid array index on line {node.line}. "
                f"Expected index of '{node.name}' to be of type 'int', but was '{index_type}'",
                node,
            )
        elif self.config.check_literal_indices:
            index = self._constant_index(node.index)
            if index is not None and not 0 <= index < symbol.length:
                context.error(
                    SemanticErrorKind.INVALID_LOCATION,
                    f"Array access '{node.name}[{index}]' on line {node.line} is invalid: "
                    f"index out of bounds for length {symbol.length}",
                    node,
                )

    @staticmethod
    def _constant_index(index) -> Optional[int]:
        """Value of an integer literal index, or of a negated one ('-1')."""
        if isinstance(index, Literal) and index.literal_type is DecafType.INT:
            return index.value
        if (
            isinstance(index, UnaryOp)
            and index.op == "-"
            and isinstance(index.child, Literal)
            and index.child.literal_type is DecafType.INT
        ):
            return -index.child.value
        return None

    def postvisit_Assignment(self, node: Assignment, context: AnalysisContext) -> None:
        expected = node.location.inferred_type
        actual = node.value.inferred_type
        if VOID in (expected, actual):
            return
        if expected != actual:
            context.error(
                SemanticErrorKind.TYPE_MISMATCH,
                f"Type mismatch on line {node.line}. Expected '{node.location.name}' "
                f"to be of type '{expected}', but was '{actual}'",
                node,
            )

    # Control flow

    def previsit_Conditional(self, node: Conditional, context: AnalysisContext) -> None:
        node.inferred_type = DecafType.BOOL

    def postvisit_Conditional(self, node: Conditional, context: AnalysisContext) -> None:
        self._check_condition(node, context)

    def previsit_WhileLoop(self, node: WhileLoop, context: AnalysisContext) -> None:
        node.inferred_type = DecafType.BOOL

    def postvisit_WhileLoop(self, node: WhileLoop, context: AnalysisContext) -> None:
        self._check_condition(node, context)

    def _check_condition(self, node, context: AnalysisContext) -> None:
        actual = node.condition.inferred_type
        if actual is VOID or actual == node.inferred_type:
            return
        context.error(
            SemanticErrorKind.TYPE_MISMATCH,
            f"Invalid condition on line {node.line}. Expected condition to be of type "
            f"'{node.inferred_type}', but was '{actual}'",
            node,
        )

    def previsit_Break(self, node: Break, context: AnalysisContext) -> None:
        if not context.in_loop:
            context.error(
                SemanticErrorKind.INVALID_CONTROL,
                f"Invalid break on line {node.line}",
                node,
            )

    def previsit_Continue(self, node: Continue, context: AnalysisContext) -> None:
        if not context.in_loop:
            context.error(
                SemanticErrorKind.INVALID_CONTROL,
                f"Invalid continue on line {node.line}",
                node,
            )

    def previsit_Return(self, node: Return, context: AnalysisContext) -> None:
        if context.current_function is None:
            context.error(
                SemanticErrorKind.INVALID_CONTROL,
                f"Return statement outside of a function on line {node.line}",
                node,
            )
            node.inferred_type = VOID
            return

        node.inferred_type = context.current_function.return_type

    def postvisit_Return(self, node: Return, context: AnalysisContext) -> None:
        if context.current_function is None:
            return
        expected = node.inferred_type
        if node.value is None:
            actual = VOID
        else:
            actual = node.value.inferred_type
            if actual is VOID:
                return
        if actual != expected:
            context.error(
                SemanticErrorKind.TYPE_MISMATCH,
                f"Type mismatch on line {node.line}. Expected method to return "
                f"type '{expected}', but was '{actual}'",
                node,
            )

    # Operators

    def previsit_BinaryOp(self, node: BinaryOp, context: AnalysisContext) -> None:
        node.inferred_type = binary_result_type(node.op)

    def postvisit_BinaryOp(self, node: BinaryOp, context: AnalysisContext) -> None:
        left = node.left.inferred_type
        right = node.right.inferred_type
        if VOID in (left, right):
            return
        if not binary_operands_valid(node.op, left, right):
            context.error(
                SemanticErrorKind.TYPE_MISMATCH,
                f"Invalid binary operation on line {node.line}. Expected "
                f"{describe_binary_signature(node.op)} but was '{left} {node.op} {right}'",
                node,
            )

    def previsit_UnaryOp(self, node: UnaryOp, context: AnalysisContext) -> None:
        node.inferred_type = unary_result_type(node.op)

    def postvisit_UnaryOp(self, node: UnaryOp, context: AnalysisContext) -> None:
        actual = node.child.inferred_type
        if actual is VOID or actual == node.inferred_type:
            return
        context.error(
            SemanticErrorKind.TYPE_MISMATCH,
            f"Invalid unary operation on line {node.line}. Expected "
            f"'{node.op}{node.inferred_type}' but was '{node.op}{actual}'",
            node,
        )

    # Calls and literals

    def previsit_FuncCall(self, node: FuncCall, context: AnalysisContext) -> None:
        symbol = context.resolve(node.name)
        if symbol is None or not symbol.is_function:
            node.inferred_type = VOID
        else:
            node.inferred_type = symbol.return_type

    def postvisit_FuncCall(self, node: FuncCall, context: AnalysisContext) -> None:
        symbol = context.resolve_with_reporting(node, node.name)
        if symbol is None:
            return
        if not symbol.is_function:
            context.error(
                SemanticErrorKind.INVALID_CALL,
                f"'{node.name}' on line {node.line} is not a function",
                node,
            )
            return

        expected_types = symbol.param_types
        if len(node.arguments) != len(expected_types):
            context.error(
                SemanticErrorKind.INVALID_CALL,
                f"Invalid call to '{node.name}' on line {node.line}: expected "
                f"{len(expected_types)} argument(s), got {len(node.arguments)}",
                node,
            )
            return

        for position, (argument, expected) in enumerate(
            zip(node.arguments, expected_types), start=1
        ):
            actual = argument.inferred_type
            if actual is VOID or actual == expected:
                continue
            context.error(
                SemanticErrorKind.TYPE_MISMATCH,
                f"Invalid argument type on line {node.line}. Expected argument "
                f"{position} of '{node.name}' to be of type '{expected}', but was '{actual}'",
                node,
            )

    def previsit_Literal(self, node: Literal, context: AnalysisContext) -> None:
        node.inferred_type = node.literal_type


def analyze(
    tree: Optional[Program],
    config: AnalyzerConfig = DEFAULT_CONFIG,
    diagnostics: Optional[ProgramDiagnostics] = None,
) -> ProgramDiagnostics:
    """Run semantic analysis on ``tree`` and return the diagnostics found."""
    return SemanticAnalyzer(config).analyze(tree, diagnostics)
