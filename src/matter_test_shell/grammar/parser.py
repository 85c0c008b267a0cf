"""Command-line grammar for the test shell."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from matter_test_shell.grammar.errors import (
    ArgumentOverflow,
    MalformedArgument,
    ParseError,
    TrailingInput,
    UnrecognizedCommand,
)
from matter_test_shell.grammar.lexer import Token, is_digit_run, parse_u64, tokenize
from matter_test_shell.grammar.models import Command, Exit, Help, List, Scan, Test

logger = logging.getLogger(__name__)

# keyword -> (factory, takes an integer argument)
PRODUCTIONS: dict[str, tuple[Callable[..., Command], bool]] = {
    "scan": (Scan, True),
    "exit": (Exit, False),
    "quit": (Exit, False),
    "help": (Help, False),
    "list": (List, False),
    "test": (Test, True),
}


@dataclass(frozen=True)
class ParseResult:
    """Outcome of parsing one line: exactly one of command/error is set."""

    line: str
    command: Optional[Command] = None
    error: Optional[ParseError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class CommandParser:
    """Match one line against the fixed keyword productions."""

    def __init__(self) -> None:
        self._productions = dict(PRODUCTIONS)

    def parse(self, line: str) -> Command:
        """Parse a line into a Command. Raises a ParseError subclass on failure."""
        try:
            command = self._parse(line)
        except ParseError as e:
            logger.info("Rejected input %r: %s", line, e)
            raise
        logger.debug("Parsed %r -> %r", line, command)
        return command

    def _parse(self, line: str) -> Command:
        tokens = tokenize(line)
        if not tokens:
            raise UnrecognizedCommand("Empty command", line=line, position=0)

        head, rest = tokens[0], tokens[1:]
        production = self._productions.get(head.text)
        if production is None:
            raise UnrecognizedCommand(
                f"Unknown command: {head.text!r}",
                line=line,
                token=head.text,
                position=head.position,
            )

        factory, takes_argument = production
        if not takes_argument:
            if rest:
                raise TrailingInput(
                    f"'{head.text}' takes no arguments, got {rest[0].text!r}",
                    line=line,
                    token=rest[0].text,
                    position=rest[0].position,
                )
            return factory()

        return factory(self._argument(head, rest, line))

    def _argument(self, head: Token, rest: list[Token], line: str) -> int:
        if not rest:
            raise MalformedArgument(
                f"'{head.text}' expects a non-negative integer argument",
                line=line,
                position=len(line.rstrip()),
            )
        if len(rest) > 1:
            raise MalformedArgument(
                f"'{head.text}' expects exactly one argument, got {len(rest)}",
                line=line,
                token=rest[1].text,
                position=rest[1].position,
            )

        arg = rest[0]
        if not is_digit_run(arg.text):
            raise MalformedArgument(
                f"'{head.text}' argument must be a non-negative integer, got {arg.text!r}",
                line=line,
                token=arg.text,
                position=arg.position,
            )

        value = parse_u64(arg.text)
        if value is None:
            raise ArgumentOverflow(
                f"'{head.text}' argument exceeds the unsigned 64-bit range",
                line=line,
                token=arg.text,
                position=arg.position,
            )
        return value


command_parser = CommandParser()


def parse_command(line: str) -> Command:
    """Parse a line with the shared parser instance."""
    return command_parser.parse(line)


def try_parse(line: str) -> ParseResult:
    """Parse a line, reporting failure in the result instead of raising."""
    try:
        return ParseResult(line=line, command=command_parser.parse(line))
    except ParseError as e:
        return ParseResult(line=line, error=e)
