"""Literal node definitions."""

from __future__ import annotations

from typing import Optional

from .base import NodeKind
from .expressions import Expr


class Literal(Expr):
    """Base class for literal values."""

    def __init__(
        self, line: int = 0, column: int = 0, raw_text: Optional[str] = None
    ) -> None:
        super().__init__(line, column, raw_text=raw_text)


class IntegerLiteral(Literal):
    """Unsigned integer literal: 42"""

    kind = NodeKind.INTEGER

    def __init__(
        self,
        value: int,
        line: int = 0,
        column: int = 0,
        raw_text: Optional[str] = None,
    ) -> None:
        super().__init__(line, column, raw_text=raw_text)
        self.value = value


class StringLiteral(Literal):
    """Single-quoted string literal: 'hello', stored without quotes"""

    kind = NodeKind.STRING

    def __init__(
        self,
        value: str,
        line: int = 0,
        column: int = 0,
        raw_text: Optional[str] = None,
    ) -> None:
        super().__init__(line, column, raw_text=raw_text)
        self.value = value
