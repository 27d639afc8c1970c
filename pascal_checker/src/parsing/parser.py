"""Parser entry point for single instructions and expressions."""

from __future__ import annotations

from functools import lru_cache
from typing import Callable, Dict, List, Optional, Sequence

from lark import Token

from pascal_checker.src.ast import (
    ArithmeticOp,
    AssignStmt,
    ComparisonOp,
    ElseStmt,
    Expr,
    IfStmt,
    IntegerLiteral,
    Statement,
    StringLiteral,
    VariableRef,
    WhileStmt,
    WriteStmt,
)
from pascal_checker.src.common.constants import (
    ARITHMETIC_OPERATORS,
    COMPARISON_OPERATORS,
    DO_KEYWORD,
    ELSE_KEYWORD,
    IF_KEYWORD,
    THEN_KEYWORD,
    WHILE_KEYWORD,
    WRITE_KEYWORD,
)
from .exceptions import MalformedExpressionError, UnknownInstructionError
from .tokenizer import Tokenizer, is_keyword, is_operator, span_text

Tokens = Sequence[Token]


class InstructionParser:
    """Parses one instruction at a time into a statement tree.

    Statements are dispatched on their leading keyword. Expressions are split
    by operator tier: the first comparison operator (in
    ``COMPARISON_OPERATORS`` order) present anywhere in the expression wins
    and the expression is split at its first occurrence; arithmetic operators
    are only considered when no comparison operator is present. This makes
    chains of one operator right-associative (``1 - 2 - 3`` is
    ``1 - (2 - 3)``) and gives arithmetic operators no precedence beyond
    their scan order.
    """

    OPERATOR_TIERS = (
        (COMPARISON_OPERATORS, ComparisonOp),
        (ARITHMETIC_OPERATORS, ArithmeticOp),
    )

    def __init__(self, tokenizer: Optional[Tokenizer] = None):
        self.tokenizer = tokenizer or Tokenizer()
        self._keyword_rules: Dict[
            str, Callable[[str, Tokens, int], Optional[Statement]]
        ] = {
            IF_KEYWORD: self._parse_if,
            ELSE_KEYWORD: self._parse_else,
            WHILE_KEYWORD: self._parse_while,
            WRITE_KEYWORD: self._parse_write,
        }

    def parse(self, instruction: str, line: int = 0) -> Statement:
        """Parse one instruction (trailing ``;`` already removed).

        Raises:
            UnknownInstructionError: If no statement form matches
            MalformedExpressionError: If an operator is missing an operand
        """
        tokens = self.tokenizer.tokenize(instruction)
        return self._parse_statement(instruction, tokens, line)

    def parse_expression(self, expression: str, line: int = 0) -> Expr:
        """Parse an expression string into an expression tree."""
        tokens = self.tokenizer.tokenize(expression)
        return self._parse_expression(expression, tokens, line)

    # Statements ------------------------------------------------------------

    def _parse_statement(self, text: str, tokens: Tokens, line: int) -> Statement:
        statement = self._parse_assignment(text, tokens, line)
        if statement is None and tokens and tokens[0].type == "NAME":
            rule = self._keyword_rules.get(tokens[0].value)
            if rule is not None:
                statement = rule(text, tokens, line)

        if statement is None:
            raise UnknownInstructionError(span_text(text, tokens), line)
        return statement

    def _parse_assignment(
        self, text: str, tokens: Tokens, line: int
    ) -> Optional[Statement]:
        """IDENT := EXPR"""
        if len(tokens) < 3 or tokens[0].type != "NAME" or tokens[1].type != "ASSIGN":
            return None
        value = self._parse_expression(text, tokens[2:], line)
        return AssignStmt(
            tokens[0].value, value, line=line, raw_text=span_text(text, tokens)
        )

    def _parse_if(self, text: str, tokens: Tokens, line: int) -> Optional[Statement]:
        """IF COND THEN STMT"""
        split = self._split_on_keyword(tokens, THEN_KEYWORD)
        if split is None:
            return None
        condition, then_tokens = split
        return IfStmt(
            self._parse_expression(text, condition, line),
            self._parse_statement(text, then_tokens, line),
            line=line,
            raw_text=span_text(text, tokens),
        )

    def _parse_else(self, text: str, tokens: Tokens, line: int) -> Optional[Statement]:
        """ELSE STMT, kept as a statement of its own"""
        if len(tokens) < 2:
            return None
        return ElseStmt(
            self._parse_statement(text, tokens[1:], line),
            line=line,
            raw_text=span_text(text, tokens),
        )

    def _parse_while(self, text: str, tokens: Tokens, line: int) -> Optional[Statement]:
        """WHILE COND DO STMT"""
        split = self._split_on_keyword(tokens, DO_KEYWORD)
        if split is None:
            return None
        condition, body = split
        return WhileStmt(
            self._parse_expression(text, condition, line),
            self._parse_statement(text, body, line),
            line=line,
            raw_text=span_text(text, tokens),
        )

    def _parse_write(self, text: str, tokens: Tokens, line: int) -> Optional[Statement]:
        """WRITELN(EXPR, EXPR, ...)"""
        if (
            len(tokens) < 4
            or tokens[1].type != "LPAR"
            or tokens[-1].type != "RPAR"
        ):
            return None

        inner = tokens[2:-1]
        args: List[Expr] = []
        start = 0
        for index, token in enumerate(list(inner) + [None]):
            if token is None or token.type == "COMMA":
                arg_tokens = inner[start:index]
                if not arg_tokens:
                    raise MalformedExpressionError(span_text(text, inner), line)
                args.append(self._parse_expression(text, arg_tokens, line))
                start = index + 1

        return WriteStmt(args, line=line, raw_text=span_text(text, tokens))

    @staticmethod
    def _split_on_keyword(tokens: Tokens, keyword: str):
        """Split ``KW1 head KW2 tail`` at the first ``keyword``.

        Returns (head, tail) or None when either part would be empty.
        """
        for index in range(2, len(tokens) - 1):
            if is_keyword(tokens[index], keyword):
                return tokens[1:index], tokens[index + 1 :]
        return None

    # Expressions -----------------------------------------------------------

    def _parse_expression(self, text: str, tokens: Tokens, line: int) -> Expr:
        raw = span_text(text, tokens)
        if not tokens:
            raise MalformedExpressionError(raw, line)

        for operators, node_class in self.OPERATOR_TIERS:
            for op in operators:
                if self._find_operator(tokens, op) is not None:
                    return self._parse_chain(text, tokens, op, node_class, line)

        if len(tokens) == 1 and tokens[0].type == "NUMBER":
            return IntegerLiteral(int(tokens[0].value), line=line, raw_text=raw)
        if len(tokens) == 1 and tokens[0].type == "STRING":
            return StringLiteral(tokens[0].value[1:-1], line=line, raw_text=raw)
        return VariableRef(raw, line=line, raw_text=raw)

    def _parse_chain(
        self, text: str, tokens: Tokens, op: str, node_class, line: int
    ) -> Expr:
        """Split at every ``op`` and fold the operands from the right.

        Equivalent to splitting at the first occurrence and recursing into
        the remainder.
        """
        operands = []
        start = 0
        index = self._find_operator(tokens, op)
        while index is not None:
            if index == start or index == len(tokens) - 1:
                raise MalformedExpressionError(span_text(text, tokens[start:]), line)
            operands.append(
                (start, self._parse_expression(text, tokens[start:index], line))
            )
            start = index + 1
            index = self._find_operator(tokens, op, start)

        expr = self._parse_expression(text, tokens[start:], line)
        for operand_start, operand in reversed(operands):
            expr = node_class(
                op,
                operand,
                expr,
                line=line,
                raw_text=span_text(text, tokens[operand_start:]),
            )
        return expr

    @staticmethod
    def _find_operator(tokens: Tokens, op: str, start: int = 0) -> Optional[int]:
        for index in range(start, len(tokens)):
            if is_operator(tokens[index], op):
                return index
        return None


@lru_cache(maxsize=None)
def default_parser() -> InstructionParser:
    """Shared parser instance; the compiled lexer is read-only."""
    return InstructionParser()


def parse_instruction(instruction: str, line: int = 0) -> Statement:
    """Parse one instruction with the shared parser."""
    return default_parser().parse(instruction, line)


def parse_expression(expression: str, line: int = 0) -> Expr:
    """Parse one expression with the shared parser."""
    return default_parser().parse_expression(expression, line)
