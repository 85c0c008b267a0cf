"""Whitespace tokenizer and integer literal recognizer."""

from __future__ import annotations

import re
from dataclasses import dataclass

from matter_test_shell.grammar.models import U64_MAX

_TOKEN_RE = re.compile(r"\S+")
_DIGIT_RUN_RE = re.compile(r"[0-9]+", re.ASCII)
_U64_MAX_DIGITS = len(str(U64_MAX))


@dataclass(frozen=True)
class Token:
    text: str
    position: int


def tokenize(line: str) -> list[Token]:
    """Split a line on whitespace, keeping each token's character offset."""
    return [Token(m.group(), m.start()) for m in _TOKEN_RE.finditer(line)]


def is_digit_run(text: str) -> bool:
    """True if ``text`` is one or more ASCII decimal digits."""
    return _DIGIT_RUN_RE.fullmatch(text) is not None


def parse_u64(text: str) -> int | None:
    """Convert a digit-run to an int, or None if it exceeds 2**64 - 1.

    The length check runs before int() so very long runs never reach the
    interpreter's int/str conversion limit.
    """
    significant = text.lstrip("0") or "0"
    if len(significant) > _U64_MAX_DIGITS:
        return None
    value = int(significant)
    if value > U64_MAX:
        return None
    return value
