"""Shell command grammar: command values, parse errors and the parser."""

from matter_test_shell.grammar.errors import (
    ArgumentOverflow,
    MalformedArgument,
    ParseError,
    TrailingInput,
    UnrecognizedCommand,
)
from matter_test_shell.grammar.models import U64_MAX, Command, Exit, Help, List, Scan, Test
from matter_test_shell.grammar.parser import CommandParser, ParseResult, command_parser, parse_command, try_parse

__all__ = [
    "ArgumentOverflow",
    "Command",
    "CommandParser",
    "Exit",
    "Help",
    "List",
    "MalformedArgument",
    "ParseError",
    "ParseResult",
    "Scan",
    "Test",
    "TrailingInput",
    "U64_MAX",
    "UnrecognizedCommand",
    "command_parser",
    "parse_command",
    "try_parse",
]
