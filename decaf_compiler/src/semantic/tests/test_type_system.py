"""
Tests for semantic/type_system.py - Operator typing rules.
"""

import pytest

from decaf_compiler.src.ast import DecafType
from decaf_compiler.src.semantic.type_system import (
    ARITHMETIC_OPS,
    EQUALITY_OPS,
    LOGICAL_OPS,
    RELATIONAL_OPS,
    binary_operand_type,
    binary_operands_valid,
    binary_result_type,
    describe_binary_signature,
    unary_result_type,
)

INT = DecafType.INT
BOOL = DecafType.BOOL


class TestBinaryResultType:
    """Tests for binary_result_type."""

    @pytest.mark.parametrize("op", sorted(ARITHMETIC_OPS))
    def test_arithmetic_is_int(self, op):
        assert binary_result_type(op) is INT

    @pytest.mark.parametrize("op", sorted(LOGICAL_OPS | EQUALITY_OPS | RELATIONAL_OPS))
    def test_others_are_bool(self, op):
        assert binary_result_type(op) is BOOL

    def test_unknown_operator(self):
        with pytest.raises(ValueError):
            binary_result_type("<<")


class TestBinaryOperands:
    """Tests for operand requirements."""

    def test_logical_requires_bool(self):
        assert binary_operands_valid("&&", BOOL, BOOL)
        assert not binary_operands_valid("||", BOOL, INT)

    def test_equality_requires_same_type(self):
        assert binary_operands_valid("==", INT, INT)
        assert binary_operands_valid("!=", BOOL, BOOL)
        assert not binary_operands_valid("==", INT, BOOL)
        assert binary_operand_type("==") is None

    def test_relational_requires_int(self):
        assert binary_operands_valid("<=", INT, INT)
        assert not binary_operands_valid(">", BOOL, BOOL)

    def test_arithmetic_requires_int(self):
        assert binary_operands_valid("%", INT, INT)
        assert not binary_operands_valid("+", INT, BOOL)

    def test_signatures(self):
        assert describe_binary_signature("&&") == "'bool && bool'"
        assert describe_binary_signature("-") == "'int - int'"
        assert describe_binary_signature("==") == "values of the same type"


class TestUnaryResultType:
    """Tests for unary_result_type."""

    def test_negation_is_int(self):
        assert unary_result_type("-") is INT

    def test_not_is_bool(self):
        assert unary_result_type("!") is BOOL

    def test_unknown_operator(self):
        with pytest.raises(ValueError):
            unary_result_type("~")
