#!/usr/bin/env python3
"""
decaf-check CLI - Command-line interface for the Decaf semantic analyzer.

This module provides the entry point for the 'decaf-check' command installed via pip.

Usage:
    decaf-check program.decaf                     # Check a file
    decaf-check --input "def int main() { return 0; }"  # Check a string
    decaf-check program.decaf --print-ast         # Dump the annotated AST
    decaf-check program.decaf --entry-point start # Use another entry point
"""

import logging
import sys
from pathlib import Path

import click

from decaf_compiler.src.ast import print_ast
from decaf_compiler.src.common.constants import DEFAULT_CONFIG, AnalyzerConfig
from decaf_compiler.src.common.diagnostics import ProgramDiagnostics
from decaf_compiler.src.parsing.parser import DecafParser
from decaf_compiler.src.semantic.analyzer import SemanticAnalyzer


def check_decaf_source(
    source_code: str,
    source_name: str = "<string>",
    config: AnalyzerConfig = DEFAULT_CONFIG,
    print_tree: bool = False,
    log_level: str = "error",
) -> tuple[bool, str, list]:
    """
    Parse and semantically check Decaf source code.

    Args:
        source_code: The Decaf source code to check
        source_name: Name of the source (for error messages)
        config: Analyzer configuration settings
        print_tree: Print the annotated AST after analysis
        log_level: Logging verbosity level

    Returns:
        (ready_for_codegen: bool, summary: str, diagnostics: list)

    Raises:
        SyntaxError: If the source does not parse
    """
    verbose = log_level in ["debug", "info"]
    diagnostics = ProgramDiagnostics(verbose=verbose, debug=log_level == "debug")

    parser = DecafParser()
    program = parser.parse(source_code, source_name)

    SemanticAnalyzer(config).analyze(program, diagnostics)

    if print_tree:
        print_ast(program)

    # Code generation is gated on a completely empty diagnostic list
    if len(diagnostics) > 0:
        return (
            False,
            f"Semantic analysis failed with {diagnostics.error_count()} error(s)",
            diagnostics.get_messages(),
        )
    return True, "Semantic analysis passed", diagnostics.get_messages()


def setup_logging(level: str) -> None:
    """Setup logging configuration."""
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level}")
    logging.basicConfig(level=numeric_level, format="%(levelname)s: %(message)s")


@click.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path), required=False)
@click.option(
    "-i",
    "--input",
    "input_string",
    type=str,
    help="Check source given as a string instead of a file",
)
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    default="warning",
    help="Set the logging level",
)
@click.option("--print-ast", "show_ast", is_flag=True, help="Print the annotated AST after analysis")
@click.option(
    "--entry-point",
    type=str,
    default=DEFAULT_CONFIG.entry_point,
    show_default=True,
    help="Name of the function every program must define",
)
@click.option(
    "--no-index-checks",
    is_flag=True,
    help="Leave constant array indices to run-time bounds checks",
)
def main(input_file, input_string, log_level, show_ast, entry_point, no_index_checks):
    """Check Decaf source files or strings for semantic errors."""
    setup_logging(log_level)

    if input_file and input_string:
        click.echo("Error: Cannot specify both input file and --input string", err=True)
        sys.exit(1)

    if not input_file and not input_string:
        click.echo("Error: Must specify either an input file or --input string", err=True)
        sys.exit(1)

    if input_string:
        source_code = input_string
        source_name = "<string>"
    else:
        try:
            source_code = input_file.read_text(encoding="utf-8")
            source_name = str(input_file.resolve())
        except OSError as e:
            click.echo(f"Failed to read input file: {e}", err=True)
            sys.exit(1)

    config = AnalyzerConfig(
        entry_point=entry_point, check_literal_indices=not no_index_checks
    )

    try:
        success, summary, messages = check_decaf_source(
            source_code,
            source_name=source_name,
            config=config,
            print_tree=show_ast,
            log_level=log_level,
        )
    except SyntaxError as e:
        click.echo(str(e), err=True)
        sys.exit(1)

    for message in messages:
        click.echo(message, err=True)

    if not success:
        click.echo(summary, err=True)
        sys.exit(1)

    if log_level in ["debug", "info"]:
        click.echo(summary, err=True)


if __name__ == "__main__":
    main()
