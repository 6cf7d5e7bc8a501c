from typing import Optional
from decaf_compiler.src.ast import ASTNode

"""Semantic analysis exceptions."""


class SemanticError(Exception):
    """Raised when the tree handed to analysis breaks its input contract.

    Rule violations in the analyzed program are never raised; they are
    reported as diagnostics.
    """

    def __init__(self, message: str, node: Optional[ASTNode] = None) -> None:
        self.message = message
        self.node = node
        location = f" at {node.line}:{node.column}" if node and node.line > 0 else ""
        super().__init__(f"{message}{location}")
