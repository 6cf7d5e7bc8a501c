"""AST node definitions for Decaf."""

from .base import ASTNode, ASTWalker, ast_to_dict, iter_child_nodes, print_ast
from .expressions import (
    Expr,
    BinaryOp,
    UnaryOp,
    Location,
    FuncCall,
)
from .statements import (
    Parameter,
    Program,
    Statement,
    VarDecl,
    FuncDecl,
    Block,
    Assignment,
    Conditional,
    WhileLoop,
    Break,
    Continue,
    Return,
)
from .literals import Literal
from .types import DecafType

__all__ = [
    # Base classes
    "ASTNode",
    "ASTWalker",
    "ast_to_dict",
    "iter_child_nodes",
    "print_ast",
    # Expressions
    "Expr",
    "BinaryOp",
    "UnaryOp",
    "Location",
    "FuncCall",
    # Declarations and statements
    "Parameter",
    "Program",
    "Statement",
    "VarDecl",
    "FuncDecl",
    "Block",
    "Assignment",
    "Conditional",
    "WhileLoop",
    "Break",
    "Continue",
    "Return",
    # Literals
    "Literal",
    # Types
    "DecafType",
]
