"""Error taxonomy shared by every analysis stage."""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional


class ErrorKind(Enum):
    """Discriminant carried by every analysis error."""

    MISSING_VAR_SECTION = "missing_var_section"
    MISSING_PROGRAM_BODY = "missing_program_body"
    DUPLICATE_DECLARATION = "duplicate_declaration"
    UNKNOWN_INSTRUCTION = "unknown_instruction"
    MALFORMED_EXPRESSION = "malformed_expression"
    NESTING_TOO_DEEP = "nesting_too_deep"
    UNDECLARED_VARIABLE = "undeclared_variable"
    ASSIGNMENT_TYPE_MISMATCH = "assignment_type_mismatch"
    ARITHMETIC_TYPE_ERROR = "arithmetic_type_error"
    COMPARISON_TYPE_MISMATCH = "comparison_type_mismatch"
    CONDITION_TYPE_ERROR = "condition_type_error"
    UNKNOWN_NODE_KIND = "unknown_node_kind"

    @property
    def is_internal(self) -> bool:
        """True for parser/analyzer mismatches rather than bad input."""
        return self is ErrorKind.UNKNOWN_NODE_KIND

    @property
    def stage(self) -> str:
        return _STAGES[self]


_STAGES = {
    ErrorKind.MISSING_VAR_SECTION: "declarations",
    ErrorKind.DUPLICATE_DECLARATION: "declarations",
    ErrorKind.MISSING_PROGRAM_BODY: "segmentation",
    ErrorKind.UNKNOWN_INSTRUCTION: "parsing",
    ErrorKind.MALFORMED_EXPRESSION: "parsing",
    ErrorKind.NESTING_TOO_DEEP: "parsing",
    ErrorKind.UNDECLARED_VARIABLE: "semantic",
    ErrorKind.ASSIGNMENT_TYPE_MISMATCH: "semantic",
    ErrorKind.ARITHMETIC_TYPE_ERROR: "semantic",
    ErrorKind.COMPARISON_TYPE_MISMATCH: "semantic",
    ErrorKind.CONDITION_TYPE_ERROR: "semantic",
    ErrorKind.UNKNOWN_NODE_KIND: "internal",
}


class AnalysisError(Exception):
    """Base class for errors that abort the analysis of a program."""

    kind: ErrorKind

    def __init__(
        self,
        message: str,
        node: Optional[Any] = None,
        line: int = 0,
        column: int = 0,
    ) -> None:
        self.message = message
        self.node = node
        if node is not None and line == 0:
            line = getattr(node, "line", 0)
            column = getattr(node, "column", 0)
        self.line = line
        self.column = column
        super().__init__(f"{message}{_location(line, column)}")

    @property
    def is_internal(self) -> bool:
        return self.kind.is_internal

    def with_line(self, line: int) -> "AnalysisError":
        """Attach a source line when the raising stage did not know it."""
        if self.line == 0 and line > 0:
            self.line = line
            self.args = (f"{self.message}{_location(line, self.column)}",)
        return self


def _location(line: int, column: int) -> str:
    if line <= 0:
        return ""
    if column > 0:
        return f" at {line}:{column}"
    return f" at line {line}"
