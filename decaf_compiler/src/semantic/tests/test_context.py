"""
Tests for semantic/context.py - scoped analysis state and symbol resolution.
"""

import pytest

from decaf_compiler.src.ast import Block, DecafType, FuncDecl, Location
from decaf_compiler.src.semantic.context import AnalysisContext
from decaf_compiler.src.semantic.diagnostics import SemanticErrorKind
from decaf_compiler.src.semantic.symbol_table import (
    ScopeKind,
    Symbol,
    SymbolTable,
    SymbolType,
)


@pytest.fixture
def scopes():
    """program { g, f() } -> function { p } -> block { x }"""
    program = SymbolTable(ScopeKind.PROGRAM)
    program.define(Symbol("g", SymbolType.SCALAR, DecafType.BOOL))
    program.define(Symbol("f", SymbolType.FUNCTION, DecafType.INT))
    function = program.create_child_scope(ScopeKind.FUNCTION)
    function.define(Symbol("p", SymbolType.SCALAR, DecafType.INT))
    block = function.create_child_scope(ScopeKind.BLOCK)
    block.define(Symbol("x", SymbolType.SCALAR, DecafType.INT))
    block.define(Symbol("f", SymbolType.SCALAR, DecafType.BOOL))
    return program, function, block


class TestScopedState:
    """Tests for the scope/function/loop context managers."""

    def test_scope_is_restored(self, scopes):
        program, function, block = scopes
        context = AnalysisContext()
        with context.scope(program):
            with context.scope(block):
                assert context.active_scope is block
            assert context.active_scope is program
        assert context.active_scope is None

    def test_scope_restored_after_exception(self, scopes):
        program, _, block = scopes
        context = AnalysisContext()
        with context.scope(program):
            with pytest.raises(RuntimeError):
                with context.scope(block):
                    raise RuntimeError("boom")
            assert context.active_scope is program

    def test_function_slot_cleared(self):
        node = FuncDecl("f", DecafType.INT, [], Block([], []))
        context = AnalysisContext()
        with context.function(node) as entered:
            assert entered is node
            assert context.current_function is node
        assert context.current_function is None

    def test_nested_loops_compose(self):
        context = AnalysisContext()
        assert not context.in_loop
        with context.loop() as outer:
            assert outer == 1
            with context.loop() as inner:
                assert inner == 2
            assert context.loop_depth == 1
            assert context.in_loop
        assert context.loop_depth == 0

    def test_loop_depth_restored_after_exception(self):
        context = AnalysisContext()
        with pytest.raises(ValueError):
            with context.loop():
                raise ValueError()
        assert context.loop_depth == 0


class TestResolution:
    """Tests for resolve and resolve_with_reporting."""

    def test_resolve_without_scope(self):
        assert AnalysisContext().resolve("x") is None

    def test_resolve_walks_outward(self, scopes):
        program, _, block = scopes
        context = AnalysisContext()
        with context.scope(block):
            assert context.resolve("x").value_type is DecafType.INT
            assert context.resolve("p").value_type is DecafType.INT
            assert context.resolve("g") is program.lookup_local("g")

    def test_resolve_innermost_wins(self, scopes):
        _, _, block = scopes
        context = AnalysisContext()
        with context.scope(block):
            assert context.resolve("f").symbol_type is SymbolType.SCALAR

    def test_non_reporting_variant_is_silent(self, scopes):
        _, _, block = scopes
        context = AnalysisContext()
        with context.scope(block):
            assert context.resolve("missing") is None
        assert len(context.diagnostics) == 0

    def test_reporting_variant_records_one_error(self, scopes):
        _, _, block = scopes
        context = AnalysisContext()
        node = Location("missing", line=12)
        with context.scope(block):
            assert context.resolve_with_reporting(node, "missing") is None
        errors = context.diagnostics.of_kind(SemanticErrorKind.UNDEFINED_SYMBOL)
        assert len(errors) == 1
        assert errors[0].message == "Undefined symbol 'missing' on line 12"
        assert errors[0].stage == "semantic"


class TestDeclarationTracking:
    """Tests for mark_declared."""

    def test_second_declaration_is_flagged(self, scopes):
        program, _, block = scopes
        context = AnalysisContext()
        with context.scope(program):
            assert context.mark_declared("x") is False
            assert context.mark_declared("x") is True
        with context.scope(block):
            assert context.mark_declared("x") is False
