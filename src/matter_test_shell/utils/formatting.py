"""Human-readable rendering of commands, parse errors and usage."""

from __future__ import annotations

from matter_test_shell.completion import all_strings
from matter_test_shell.grammar.errors import ParseError
from matter_test_shell.grammar.models import Command, Exit, Help, List, Scan, Test

SYNTAX_LINES: list[str] = [
    "scan <number_of_seconds>",
    "test <list_device_index>",
]


def format_duration(seconds: int) -> str:
    """Format a second count as e.g. ``45s``, ``2m 5s`` or ``1h 2m 3s``."""
    if seconds < 60:
        return f"{seconds}s"
    minutes, secs = divmod(seconds, 60)
    if minutes < 60:
        return f"{minutes}m {secs}s"
    hours, minutes = divmod(minutes, 60)
    return f"{hours}h {minutes}m {secs}s"


def describe_command(command: Command) -> str:
    """One-line description of what a command asks the shell to do."""
    if isinstance(command, Scan):
        return f"Scan for {format_duration(command.seconds)}"
    if isinstance(command, Test):
        return f"Test device #{command.count}"
    if isinstance(command, Exit):
        return "Exit"
    if isinstance(command, Help):
        return "Help"
    if isinstance(command, List):
        return "List"
    raise TypeError(f"Not a command: {command!r}")


def format_error(error: ParseError) -> str:
    """Format a parse error, with a caret under the offending column when known."""
    text = f"{error.kind}: {error.message}"
    if error.position is None or not error.line.strip():
        return text
    line = error.line.rstrip("\r\n")
    pad = "".join("\t" if ch == "\t" else " " for ch in line[: error.position])
    return f"{text}\n  {line}\n  {pad}^"


def usage_text() -> str:
    """The help listing shown by the shell."""
    lines = [f"Available commands: {', '.join(all_strings())}", "Some specific syntaxes:"]
    lines.extend(f"   {syntax}" for syntax in SYNTAX_LINES)
    return "\n".join(lines)
