from __future__ import annotations
from typing import Optional, Tuple
from .base import ASTNode, NodeKind

"""Expression node definitions for the Pascal subset."""


class Expr(ASTNode):
    """Base class for all expressions."""

    def __init__(
        self, line: int = 0, column: int = 0, raw_text: Optional[str] = None
    ) -> None:
        super().__init__(line, column, raw_text=raw_text)


class BinaryOp(Expr):
    """Binary operation: left op right"""

    def __init__(
        self,
        op: str,
        left: "Expr",
        right: "Expr",
        line: int = 0,
        column: int = 0,
        raw_text: Optional[str] = None,
    ) -> None:
        super().__init__(line, column, raw_text=raw_text)
        self.op = op
        self.left = left
        self.right = right

    @property
    def children(self) -> Tuple[ASTNode, ...]:
        return (self.left, self.right)


class ComparisonOp(BinaryOp):
    """Comparison: <, <=, >, >=, =, <>"""

    kind = NodeKind.COMPARISON


class ArithmeticOp(BinaryOp):
    """Arithmetic: +, -, *, /"""

    kind = NodeKind.ARITHMETIC


class VariableRef(Expr):
    """Variable reference in expression context."""

    kind = NodeKind.VARIABLE

    def __init__(
        self, name: str, line: int = 0, column: int = 0, raw_text: Optional[str] = None
    ) -> None:
        super().__init__(line, column, raw_text=raw_text)
        self.name = name
