"""Shared constants and configuration for the checker."""

from dataclasses import dataclass

# Structural keywords (case-sensitive)
VAR_KEYWORD = "VAR"
BEGIN_KEYWORD = "BEGIN"
END_KEYWORD = "END."
IF_KEYWORD = "IF"
THEN_KEYWORD = "THEN"
ELSE_KEYWORD = "ELSE"
WHILE_KEYWORD = "WHILE"
DO_KEYWORD = "DO"
WRITE_KEYWORD = "WRITELN"

# Type names accepted in a VAR block
DECLARABLE_TYPE_NAMES = ("INTEGER", "REAL", "BOOLEAN", "CHAR")

# Operator tiers, scanned in this order
COMPARISON_OPERATORS = ("<", "<=", ">", ">=", "=", "<>")
ARITHMETIC_OPERATORS = ("+", "-", "*", "/")

LOG_LEVELS = ("debug", "info", "warning", "error")


@dataclass(frozen=True)
class CheckerConfig:
    """Settings shared by the CLI and the validation pipeline."""

    default_source_path: str = "code.pas"
    default_log_level: str = "warning"
    strip_trailing_semicolon: bool = True


DEFAULT_CONFIG = CheckerConfig()
