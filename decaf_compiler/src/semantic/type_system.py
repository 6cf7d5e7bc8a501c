from typing import Dict, Optional
from decaf_compiler.src.ast.types import DecafType

"""Operator typing rules used by semantic analysis."""

LOGICAL_OPS = {"||", "&&"}
EQUALITY_OPS = {"==", "!="}
RELATIONAL_OPS = {"<", "<=", ">", ">="}
ARITHMETIC_OPS = {"+", "-", "*", "/", "%"}

UNARY_RESULT_TYPES: Dict[str, DecafType] = {
    "-": DecafType.INT,
    "!": DecafType.BOOL,
}


def binary_result_type(op: str) -> DecafType:
    """Type produced by a binary operator."""
    if op in ARITHMETIC_OPS:
        return DecafType.INT
    if op in LOGICAL_OPS or op in EQUALITY_OPS or op in RELATIONAL_OPS:
        return DecafType.BOOL
    raise ValueError(f"Unknown binary operator '{op}'")


def binary_operand_type(op: str) -> Optional[DecafType]:
    """Type both operands of ``op`` must have, or None when any equal pair is accepted."""
    if op in LOGICAL_OPS:
        return DecafType.BOOL
    if op in EQUALITY_OPS:
        return None
    return DecafType.INT


def binary_operands_valid(op: str, left: DecafType, right: DecafType) -> bool:
    """Check operand types against the operator's requirements."""
    required = binary_operand_type(op)
    if required is None:
        return left == right
    return left == required and right == required


def describe_binary_signature(op: str) -> str:
    """Human readable form of what ``op`` expects, for diagnostics."""
    required = binary_operand_type(op)
    if required is None:
        return "values of the same type"
    return f"'{required} {op} {required}'"


def unary_result_type(op: str) -> DecafType:
    """Type produced (and required of the operand) by a unary operator."""
    try:
        return UNARY_RESULT_TYPES[op]
    except KeyError:
        raise ValueError(f"Unknown unary operator '{op}'") from None
