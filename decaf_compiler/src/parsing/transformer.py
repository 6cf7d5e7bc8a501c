"""Parse tree transformer producing AST nodes."""

from __future__ import annotations

from typing import List, Optional

from lark import Token, Transformer, v_args
from lark.tree import Meta

from decaf_compiler.src.ast.expressions import BinaryOp, Expr, FuncCall, Location, UnaryOp
from decaf_compiler.src.ast.literals import Literal
from decaf_compiler.src.ast.statements import (
    ASTNode,
    Assignment,
    Block,
    Break,
    Conditional,
    Continue,
    FuncDecl,
    Parameter,
    Program,
    Return,
    VarDecl,
    WhileLoop,
)
from decaf_compiler.src.ast.types import DecafType

# Grammar aliases for binary operators
BINARY_OPERATORS = {
    "logical_or": "||",
    "logical_and": "&&",
    "equal": "==",
    "not_equal": "!=",
    "less": "<",
    "less_equal": "<=",
    "greater": ">",
    "greater_equal": ">=",
    "add": "+",
    "subtract": "-",
    "multiply": "*",
    "divide": "/",
    "modulo": "%",
}


@v_args(meta=True)
class DecafTransformer(Transformer):
    """Transforms Lark parse tree into typed AST nodes."""

    @staticmethod
    def _parse_number(text: str) -> int:
        """Parse a decimal or hexadecimal integer literal ("42", "0x2A")."""
        text = text.strip()
        if text.startswith(("0x", "0X")):
            return int(text, 16)
        return int(text, 10)

    @staticmethod
    def _set_position(node: ASTNode, source) -> ASTNode:
        """Copy line/column from a Lark token or rule meta onto an AST node."""
        line = getattr(source, "line", None)
        if line is not None:
            node.line = line
            node.column = getattr(source, "column", 0) or 0
        return node

    def start(self, meta: Meta, children) -> Program:
        """start: (var_decl | func_decl)*"""
        return Program(declarations=list(children), line=1, column=1)

    def type_name(self, meta: Meta, children) -> DecafType:
        """type_name: "int" | "bool" | "void" """
        return DecafType.from_name(str(children[0]))

    def var_decl(self, meta: Meta, children) -> VarDecl:
        """var_decl: type_name NAME ["[" INT_LITERAL "]"] ";" """
        type_name, name, length = children
        if length is None:
            node = VarDecl(type_name, str(name))
        else:
            node = VarDecl(
                type_name,
                str(name),
                is_array=True,
                array_length=self._parse_number(str(length)),
            )
        return self._set_position(node, name)

    def parameter(self, meta: Meta, children) -> Parameter:
        """parameter: type_name NAME"""
        type_name, name = children
        return Parameter(type_name, str(name), line=name.line, column=name.column)

    def parameters(self, meta: Meta, children) -> List[Parameter]:
        return list(children)

    def func_decl(self, meta: Meta, children) -> FuncDecl:
        """func_decl: "def" type_name NAME "(" [parameters] ")" block"""
        return_type, name, parameters, body = children
        node = FuncDecl(
            name=str(name),
            return_type=return_type,
            parameters=parameters or [],
            body=body,
        )
        return self._set_position(node, name)

    def block(self, meta: Meta, children) -> Block:
        """block: "{" var_decl* statement* "}" """
        variables = [child for child in children if isinstance(child, VarDecl)]
        statements = [child for child in children if not isinstance(child, VarDecl)]
        return self._set_position(Block(variables, statements), meta)

    def assignment(self, meta: Meta, children) -> Assignment:
        """assignment: location "=" expr ";" """
        location, value = children
        return self._set_position(Assignment(location, value), location)

    def conditional(self, meta: Meta, children) -> Conditional:
        """conditional: IF "(" expr ")" block ["else" block]"""
        keyword, condition, if_block, else_block = children
        return self._set_position(Conditional(condition, if_block, else_block), keyword)

    def while_loop(self, meta: Meta, children) -> WhileLoop:
        """while_loop: WHILE "(" expr ")" block"""
        keyword, condition, body = children
        return self._set_position(WhileLoop(condition, body), keyword)

    def return_stmt(self, meta: Meta, children) -> Return:
        """return_stmt: RETURN [expr] ";" """
        keyword, value = children
        return self._set_position(Return(value), keyword)

    def break_stmt(self, meta: Meta, children) -> Break:
        return self._set_position(Break(), children[0])

    def continue_stmt(self, meta: Meta, children) -> Continue:
        return self._set_position(Continue(), children[0])

    def location(self, meta: Meta, children) -> Location:
        """location: NAME ["[" expr "]"]"""
        name, index = children
        return self._set_position(Location(str(name), index), name)

    def func_call(self, meta: Meta, children) -> FuncCall:
        """func_call: NAME "(" [arguments] ")" """
        name, arguments = children
        return self._set_position(FuncCall(str(name), arguments or []), name)

    def arguments(self, meta: Meta, children) -> List[Expr]:
        return list(children)

    def negate(self, meta: Meta, children) -> UnaryOp:
        return self._set_position(UnaryOp("-", children[0]), meta)

    def logical_not(self, meta: Meta, children) -> UnaryOp:
        return self._set_position(UnaryOp("!", children[0]), meta)

    def literal(self, meta: Meta, children) -> Literal:
        """literal: INT_LITERAL | TRUE | FALSE"""
        token: Token = children[0]
        if token.type == "TRUE":
            node = Literal(True, DecafType.BOOL, raw_text=str(token))
        elif token.type == "FALSE":
            node = Literal(False, DecafType.BOOL, raw_text=str(token))
        else:
            node = Literal(
                self._parse_number(str(token)), DecafType.INT, raw_text=str(token)
            )
        return self._set_position(node, token)

    def __default__(self, data, children, meta):
        """Binary operator rules share one shape: left op right."""
        op: Optional[str] = BINARY_OPERATORS.get(str(data))
        if op is None:
            return super().__default__(data, children, meta)
        left, right = children
        node = BinaryOp(op, left, right)
        return self._set_position(node, left)
