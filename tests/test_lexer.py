"""Tests for the tokenizer and integer literal recognizer."""

from __future__ import annotations

from matter_test_shell.grammar.lexer import Token, is_digit_run, parse_u64, tokenize
from matter_test_shell.grammar.models import U64_MAX


class TestTokenize:
    def test_positions(self):
        assert tokenize("scan  42") == [Token("scan", 0), Token("42", 6)]

    def test_tabs_and_newline(self):
        assert tokenize("\ttest\t1\n") == [Token("test", 1), Token("1", 6)]

    def test_blank(self):
        assert tokenize("   ") == []


class TestDigitRun:
    def test_ascii_digits(self):
        assert is_digit_run("0")
        assert is_digit_run("0123456789")

    def test_rejects_other_forms(self):
        assert not is_digit_run("")
        assert not is_digit_run("-1")
        assert not is_digit_run("1.5")
        assert not is_digit_run("1_000")
        assert not is_digit_run("٣")


class TestParseU64:
    def test_values(self):
        assert parse_u64("0") == 0
        assert parse_u64("000") == 0
        assert parse_u64("007") == 7
        assert parse_u64(str(U64_MAX)) == U64_MAX

    def test_overflow(self):
        assert parse_u64(str(U64_MAX + 1)) is None
        assert parse_u64("1" * 21) is None
