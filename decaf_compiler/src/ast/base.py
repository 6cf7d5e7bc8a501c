"""Base classes and utilities for AST traversal."""

from __future__ import annotations

from abc import ABC
from contextlib import nullcontext
from typing import Any, Dict, Iterator, Optional

from .types import DecafType

# Fields that hold analysis results or bookkeeping rather than structure.
_NON_STRUCTURAL_FIELDS = ("line", "column", "source_file", "raw_text", "symbol_table")


class ASTNode(ABC):
    """Base class for all AST nodes."""

    def __init__(
        self,
        line: int = 0,
        column: int = 0,
        source_file: Optional[str] = None,
        raw_text: Optional[str] = None,
    ) -> None:
        self.line = line
        self.column = column
        self.source_file = source_file
        self.raw_text = raw_text
        # Written once by the analyzer's pre-order hooks.
        self.inferred_type: Optional[DecafType] = None


def iter_child_nodes(node: ASTNode) -> Iterator[ASTNode]:
    """Yield the direct children of ``node`` in field-declaration order."""
    for field_value in vars(node).values():
        if isinstance(field_value, ASTNode):
            yield field_value
        elif isinstance(field_value, list):
            for item in field_value:
                if isinstance(item, ASTNode):
                    yield item


class ASTWalker:
    """Depth-first walker with optional pre- and post-order hooks per node kind.

    For a node of class ``Kind`` the walker calls ``previsit_Kind(node, context)``,
    walks the children inside ``descend_Kind(node, context)`` (a context manager,
    used to bind scoped state for the subtree), then calls
    ``postvisit_Kind(node, context)``. Any hook may be missing; children are
    visited regardless.
    """

    def walk(self, node: ASTNode, context: Any = None) -> None:
        kind = type(node).__name__

        previsit = getattr(self, f"previsit_{kind}", None)
        if previsit is not None:
            previsit(node, context)

        descend = getattr(self, f"descend_{kind}", None)
        with descend(node, context) if descend is not None else nullcontext():
            for child in iter_child_nodes(node):
                self.walk(child, context)

        postvisit = getattr(self, f"postvisit_{kind}", None)
        if postvisit is not None:
            postvisit(node, context)


def ast_to_dict(node: ASTNode) -> Any:
    """Convert AST node to dictionary representation for debugging."""
    if not isinstance(node, ASTNode):
        if isinstance(node, DecafType):
            return str(node)
        return node

    result: Dict[str, Any] = {"type": type(node).__name__}
    for field_name, field_value in node.__dict__.items():
        if field_name in _NON_STRUCTURAL_FIELDS:
            continue
        if isinstance(field_value, list):
            result[field_name] = [ast_to_dict(item) for item in field_value]
        else:
            result[field_name] = ast_to_dict(field_value)

    return result


def print_ast(node: ASTNode, indent: int = 0) -> None:
    """Pretty-print AST structure for debugging."""
    spaces = "  " * indent
    print(f"{spaces}{type(node).__name__}")

    for field_name, field_value in node.__dict__.items():
        if field_name in _NON_STRUCTURAL_FIELDS:
            continue
        if field_value is None or field_value == []:
            continue
        print(f"{spaces}  {field_name}:", end="")
        if isinstance(field_value, ASTNode):
            print()
            print_ast(field_value, indent + 2)
        elif isinstance(field_value, list):
            print()
            for item in field_value:
                if isinstance(item, ASTNode):
                    print_ast(item, indent + 2)
                else:
                    print(f"{spaces}    {item}")
        else:
            print(f" {field_value}")
