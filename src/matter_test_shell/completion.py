"""Keyword completion for the shell prompt."""

from __future__ import annotations

KEYWORDS: tuple[str, ...] = ("list", "scan", "exit", "quit", "help", "test")


def all_strings() -> list[str]:
    """All command keywords, in prompt display order."""
    return list(KEYWORDS)


def candidates(prefix: str) -> list[str]:
    """Keywords starting with ``prefix``."""
    return [keyword for keyword in KEYWORDS if keyword.startswith(prefix)]


def complete(prefix: str) -> str | None:
    """Return the keyword only when ``prefix`` selects exactly one."""
    matches = candidates(prefix)
    if len(matches) == 1:
        return matches[0]
    return None
