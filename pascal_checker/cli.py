#!/usr/bin/env python3
"""
pascal-check CLI - Command-line interface for the Pascal subset checker.

This module provides the entry point for the 'pascal-check' command installed via pip.

Usage:
    pascal-check program.pas                 # Check a file
    pascal-check --input "VAR x: INTEGER; BEGIN x := 1; END."
    pascal-check                             # Check ./code.pas
    pascal-check program.pas --dump-ast      # Print symbol table and ASTs as JSON
"""

import json
import logging
import sys
from pathlib import Path

import click

from pascal_checker.src.ast import ast_to_dict
from pascal_checker.src.common.constants import DEFAULT_CONFIG, LOG_LEVELS, CheckerConfig
from pascal_checker.src.common.diagnostics import ProgramDiagnostics
from pascal_checker.src.pipeline import AnalysisResult, analyze_program

SUCCESS_MESSAGE = "Validation passed: no errors."


def dump_analysis(result: AnalysisResult) -> str:
    """Render the symbol table and checked statements as JSON."""
    payload = {
        "source": result.source_name,
        "symbol_table": result.symbol_table.as_dict() if result.symbol_table else {},
        "statements": [
            {
                "line": checked.instruction.line,
                "instruction": checked.instruction.text,
                "type": checked.result.value_type.value,
                "ast": ast_to_dict(checked.statement),
            }
            for checked in result.statements
        ],
    }
    return json.dumps(payload, indent=2)


def check_pascal_source(
    source_code: str,
    source_name: str = "<string>",
    log_level: str = "error",
    dump_ast: bool = False,
    config: CheckerConfig = DEFAULT_CONFIG,
) -> tuple[bool, str, list]:
    """
    Validate program source code.

    Args:
        source_code: The program text to check
        source_name: Name of the source (for error messages)
        log_level: Minimum severity of recorded diagnostics
        dump_ast: If True, return a JSON dump of the analysis instead of the success message
        config: Checker configuration settings

    Returns:
        (success: bool, result: str, diagnostics: list)
    """
    diagnostics = ProgramDiagnostics(log_level=log_level)
    result = analyze_program(
        source_code, source_name=source_name, diagnostics=diagnostics, config=config
    )

    messages = diagnostics.get_messages(diagnostics.min_severity)

    if not result.ok:
        message = result.error.message
        if result.error.is_internal:
            message = f"Internal error: {message}"
        return False, message, messages

    if dump_ast:
        try:
            return True, dump_analysis(result), messages
        except RecursionError:
            messages.append("WARNING [cli]: AST too deeply nested to dump as JSON")
    return True, SUCCESS_MESSAGE, messages


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
    help="Check a program given as a string instead of a file",
)
@click.option(
    "--log-level",
    type=click.Choice(list(LOG_LEVELS), case_sensitive=False),
    default=DEFAULT_CONFIG.default_log_level,
    help="Set the logging level",
)
@click.option(
    "--dump-ast",
    is_flag=True,
    help="Print the symbol table and each statement's AST as JSON",
)
def main(input_file, input_string, log_level, dump_ast):
    """Check Pascal-subset programs for declaration, syntax and type errors."""
    setup_logging(log_level)

    # Validate input source
    if input_file and input_string:
        click.echo("Error: Cannot specify both input file and --input string", err=True)
        sys.exit(1)

    if not input_file and not input_string:
        default_path = Path(DEFAULT_CONFIG.default_source_path)
        if not default_path.exists():
            click.echo(
                f"Error: Must specify either an input file or --input string "
                f"(no {default_path} in the current directory)",
                err=True,
            )
            sys.exit(1)
        input_file = default_path

    # Read source code
    if input_string:
        source_code = input_string
        source_name = "<string>"
    else:
        try:
            source_code = input_file.read_text(encoding="utf-8")
            source_name = str(input_file.resolve())
        except (OSError, UnicodeDecodeError) as e:
            click.echo(f"Failed to read input file: {e}", err=True)
            sys.exit(1)

    if log_level in ["debug", "info"]:
        click.echo(f"Checking {source_name}...", err=True)

    success, result, diagnostic_messages = check_pascal_source(
        source_code,
        source_name=source_name,
        log_level=log_level,
        dump_ast=dump_ast,
    )

    if diagnostic_messages:
        for msg in diagnostic_messages:
            click.echo(msg, err=True)

    if not success:
        click.echo(f"Validation failed: {result}", err=True)
        sys.exit(1)

    click.echo(result)


if __name__ == "__main__":
    main()
