"""Parser entry point for Decaf."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from lark import Lark
from lark.exceptions import LexError, ParseError, VisitError

from decaf_compiler.src.ast import ASTNode, Program
from decaf_compiler.src.semantic.scope_builder import build_symbol_tables
from .transformer import DecafTransformer


class DecafParser:
    """Parses Decaf source into an AST with symbol tables attached."""

    def __init__(self, grammar_path: Optional[Path] = None):
        """Initialize parser with grammar file."""
        if grammar_path is None:
            grammar_path = (
                Path(__file__).resolve().parent.parent.parent / "grammar" / "decaf.lark"
            )

        self.grammar_path = grammar_path
        self.parser = None
        self.transformer = DecafTransformer()
        self._load_grammar()

    def _load_grammar(self) -> None:
        """Load and compile the Lark grammar."""
        try:
            with open(self.grammar_path, "r") as handle:
                grammar_text = handle.read()

            self.parser = Lark(
                grammar_text,
                parser="lalr",
                propagate_positions=True,
                start="start",
            )
        except FileNotFoundError as exc:
            raise FileNotFoundError(
                f"Grammar file not found: {self.grammar_path}"
            ) from exc

    def parse(self, source_code: str, filename: str = "<string>") -> Program:
        """Parse Decaf source code into an AST ready for semantic analysis.

        Args:
            source_code: The source code text to parse
            filename: Source file path for error reporting

        Returns:
            Program AST node with symbol tables attached to every scope

        Raises:
            SyntaxError: If the source code has parse errors
            RuntimeError: If parser is not initialized or tree building fails
        """
        if self.parser is None:
            raise RuntimeError("Parser not initialized")

        try:
            tree = self.parser.parse(source_code)
        except (ParseError, LexError) as exc:
            raise SyntaxError(f"Parse error in {filename}: {exc}") from exc

        try:
            program = self.transformer.transform(tree)
        except VisitError as exc:
            raise RuntimeError(
                f"Unexpected error building AST for {filename}: {exc.orig_exc}"
            ) from exc

        if not isinstance(program, Program):
            raise RuntimeError(f"Expected Program AST node, got {type(program)}")

        if filename != "<string>":
            self._attach_source_file(program, filename)
        build_symbol_tables(program)
        logging.debug(
            "Parsed %s: %d top-level declaration(s)", filename, len(program.declarations)
        )
        return program

    def parse_file(self, file_path: Path) -> Program:
        """Parse a Decaf file into an AST."""
        try:
            with open(file_path, "r") as handle:
                source_code = handle.read()
        except FileNotFoundError as exc:
            raise FileNotFoundError(f"Source file not found: {file_path}") from exc
        return self.parse(source_code, str(file_path))

    def _attach_source_file(self, node: ASTNode, filename: str) -> None:
        """Recursively annotate AST nodes with their originating filename."""
        if not isinstance(node, ASTNode):
            return

        node.source_file = filename

        for attr in vars(node).values():
            if isinstance(attr, ASTNode):
                self._attach_source_file(attr, filename)
            elif isinstance(attr, list):
                for item in attr:
                    if isinstance(item, ASTNode):
                        self._attach_source_file(item, filename)
