"""
Tests for parsing/tokenizer.py - Lark token stream.
"""

import pytest

from pascal_checker.src.parsing.tokenizer import (
    Tokenizer,
    is_keyword,
    is_operator,
    span_text,
)


@pytest.fixture(scope="module")
def tokenizer():
    return Tokenizer()


def types(tokens):
    return [token.type for token in tokens]


class TestTokenizer:
    """Tests for Tokenizer class."""

    def test_missing_grammar_file(self, tmp_path):
        """A bad grammar path fails loudly."""
        with pytest.raises(FileNotFoundError, match="Grammar file not found"):
            Tokenizer(tmp_path / "missing.lark")

    def test_assignment_tokens(self, tokenizer):
        tokens = tokenizer.tokenize("x := 42")
        assert types(tokens) == ["NAME", "ASSIGN", "NUMBER"]
        assert [t.value for t in tokens] == ["x", ":=", "42"]

    def test_whitespace_is_optional(self, tokenizer):
        assert types(tokenizer.tokenize("x:=y+1")) == [
            "NAME",
            "ASSIGN",
            "NAME",
            "PLUS",
            "NUMBER",
        ]

    @pytest.mark.parametrize(
        "text,expected",
        [("a <= b", "LE"), ("a >= b", "GE"), ("a <> b", "NE"), ("a < b", "LT")],
    )
    def test_two_character_operators_are_single_tokens(self, tokenizer, text, expected):
        assert types(tokenizer.tokenize(text)) == ["NAME", expected, "NAME"]

    def test_string_literal_is_one_token(self, tokenizer):
        """Operators inside quotes stay inside the string."""
        tokens = tokenizer.tokenize("'a + b < c'")
        assert types(tokens) == ["STRING"]
        assert tokens[0].value == "'a + b < c'"

    def test_writeln_call(self, tokenizer):
        assert types(tokenizer.tokenize("WRITELN(x, 'y')")) == [
            "NAME",
            "LPAR",
            "NAME",
            "COMMA",
            "STRING",
            "RPAR",
        ]

    def test_unknown_characters_are_kept(self, tokenizer):
        """Characters outside the vocabulary become OTHER tokens."""
        tokens = tokenizer.tokenize("1.5")
        assert types(tokens) == ["NUMBER", "OTHER", "NUMBER"]

    def test_empty_text(self, tokenizer):
        assert tokenizer.tokenize("   ") == []


class TestHelpers:
    """Tests for token helper functions."""

    def test_is_operator(self, tokenizer):
        plus, number = tokenizer.tokenize("+ 1")
        assert is_operator(plus, "+")
        assert not is_operator(plus, "-")
        assert not is_operator(number, "1")

    def test_is_operator_ignores_strings(self, tokenizer):
        (string,) = tokenizer.tokenize("'+'")
        assert not is_operator(string, "+")

    def test_is_keyword_is_case_sensitive(self, tokenizer):
        upper, lower = tokenizer.tokenize("THEN then")
        assert is_keyword(upper, "THEN")
        assert not is_keyword(lower, "THEN")

    def test_span_text(self, tokenizer):
        text = "IF a  <  b THEN x := 1"
        tokens = tokenizer.tokenize(text)
        assert span_text(text, tokens[1:4]) == "a  <  b"
        assert span_text(text, []) == ""


class TestUnicodeWhitespace:
    """Any Unicode whitespace separates tokens."""

    @pytest.mark.parametrize("space", ["\xa0", "\t", " "])
    def test_unicode_space_is_ignored(self, tokenizer, space):
        tokens = tokenizer.tokenize(f"x := 1{space}+ 2")
        assert types(tokens) == ["NAME", "ASSIGN", "NUMBER", "PLUS", "NUMBER"]
