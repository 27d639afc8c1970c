from __future__ import annotations
from typing import List, Optional, Tuple
from .base import ASTNode, NodeKind
from .expressions import Expr

"""Statement node definitions for the Pascal subset."""


class Statement(ASTNode):
    """Base class for all statements."""

    def __init__(
        self, line: int = 0, column: int = 0, raw_text: Optional[str] = None
    ) -> None:
        super().__init__(line, column, raw_text=raw_text)


class AssignStmt(Statement):
    """target := expression"""

    kind = NodeKind.ASSIGNMENT

    def __init__(
        self,
        target: str,
        value: Expr,
        line: int = 0,
        column: int = 0,
        raw_text: Optional[str] = None,
    ) -> None:
        super().__init__(line, column, raw_text=raw_text)
        self.target = target
        self.value = value

    @property
    def children(self) -> Tuple[ASTNode, ...]:
        return (self.value,)


class IfStmt(Statement):
    """IF condition THEN statement

    Always binary: a following ELSE line is parsed as its own ElseStmt.
    """

    kind = NodeKind.IF

    def __init__(
        self,
        condition: Expr,
        then_branch: Statement,
        line: int = 0,
        column: int = 0,
        raw_text: Optional[str] = None,
    ) -> None:
        super().__init__(line, column, raw_text=raw_text)
        self.condition = condition
        self.then_branch = then_branch

    @property
    def children(self) -> Tuple[ASTNode, ...]:
        return (self.condition, self.then_branch)


class ElseStmt(Statement):
    """ELSE statement (standalone, never attached to an IfStmt)"""

    kind = NodeKind.ELSE

    def __init__(
        self,
        body: Statement,
        line: int = 0,
        column: int = 0,
        raw_text: Optional[str] = None,
    ) -> None:
        super().__init__(line, column, raw_text=raw_text)
        self.body = body

    @property
    def children(self) -> Tuple[ASTNode, ...]:
        return (self.body,)


class WhileStmt(Statement):
    """WHILE condition DO statement"""

    kind = NodeKind.WHILE

    def __init__(
        self,
        condition: Expr,
        body: Statement,
        line: int = 0,
        column: int = 0,
        raw_text: Optional[str] = None,
    ) -> None:
        super().__init__(line, column, raw_text=raw_text)
        self.condition = condition
        self.body = body

    @property
    def children(self) -> Tuple[ASTNode, ...]:
        return (self.condition, self.body)


class WriteStmt(Statement):
    """WRITELN(expr, expr, ...)"""

    kind = NodeKind.WRITE

    def __init__(
        self,
        args: List[Expr],
        line: int = 0,
        column: int = 0,
        raw_text: Optional[str] = None,
    ) -> None:
        super().__init__(line, column, raw_text=raw_text)
        self.args = tuple(args)

    @property
    def children(self) -> Tuple[ASTNode, ...]:
        return self.args
