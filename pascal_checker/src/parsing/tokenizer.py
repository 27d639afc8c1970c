"""Lark-backed tokenizer for instruction and expression text."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence

from lark import Lark, Token
from lark.exceptions import LexError

from .exceptions import UnknownInstructionError

OPERATOR_TOKEN_TYPES = frozenset(
    {"LE", "GE", "NE", "LT", "GT", "EQ", "PLUS", "MINUS", "STAR", "SLASH"}
)


class Tokenizer:
    """Turns text into a flat token stream with source spans."""

    def __init__(self, grammar_path: Optional[Path] = None):
        """Initialize tokenizer with grammar file."""
        if grammar_path is None:
            grammar_path = (
                Path(__file__).resolve().parent.parent.parent / "grammar" / "tokens.lark"
            )

        self.grammar_path = grammar_path
        self.lexer: Optional[Lark] = None
        self._load_grammar()

    def _load_grammar(self) -> None:
        """Load and compile the Lark token grammar."""
        try:
            with open(self.grammar_path, "r") as handle:
                grammar_text = handle.read()

            self.lexer = Lark(
                grammar_text,
                parser="lalr",
                lexer="basic",
                start="start",
                debug=False,
            )
        except FileNotFoundError as exc:
            raise FileNotFoundError(
                f"Grammar file not found: {self.grammar_path}"
            ) from exc

    def tokenize(self, text: str) -> List[Token]:
        """Split ``text`` into tokens; whitespace is dropped."""
        if self.lexer is None:
            raise RuntimeError("Tokenizer not initialized")

        try:
            return list(self.lexer.lex(text))
        except LexError as exc:
            raise UnknownInstructionError(text.strip()) from exc


def is_operator(token: Token, op: str) -> bool:
    return token.type in OPERATOR_TOKEN_TYPES and token.value == op


def is_keyword(token: Token, keyword: str) -> bool:
    return token.type == "NAME" and token.value == keyword


def span_text(text: str, tokens: Sequence[Token]) -> str:
    """Source text covered by ``tokens``, trimmed."""
    if not tokens:
        return ""
    return text[tokens[0].start_pos : tokens[-1].end_pos].strip()
