"""Categories of semantic diagnostics."""

from enum import Enum


class SemanticErrorKind(Enum):
    """Taxonomy attached to every semantic error as ``Diagnostic.kind``."""

    UNDEFINED_SYMBOL = "undefined-symbol"
    DUPLICATE_SYMBOL = "duplicate-symbol"
    INVALID_DECLARATION = "invalid-declaration"  # void / reserved name / bad array length
    INVALID_LOCATION = "invalid-location"  # scalar-as-array, array-as-scalar, bad index
    TYPE_MISMATCH = "type-mismatch"
    INVALID_CONTROL = "invalid-control"  # break/continue outside a loop
    INVALID_CALL = "invalid-call"  # non-function callee, wrong arity
    MISSING_ENTRY_POINT = "missing-entry-point"
    MISSING_TREE = "missing-tree"
