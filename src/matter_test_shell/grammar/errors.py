"""Parse failures raised by the command grammar."""

from __future__ import annotations


class ParseError(ValueError):
    """A line that does not match any command production.

    Carries the full input ``line``, the offending ``token`` (empty when the
    failure is about a missing token) and its 0-based character ``position``
    in the line.
    """

    kind = "ParseError"

    def __init__(self, message: str, line: str = "", token: str = "", position: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.line = line
        self.token = token
        self.position = position

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, token={self.token!r}, position={self.position!r})"


class UnrecognizedCommand(ParseError):
    """Leading token is not a known keyword."""

    kind = "UnrecognizedCommand"


class MalformedArgument(ParseError):
    """``scan``/``test`` not followed by exactly one digit-run."""

    kind = "MalformedArgument"


class ArgumentOverflow(ParseError):
    """Digit-run does not fit in an unsigned 64-bit integer."""

    kind = "ArgumentOverflow"


class TrailingInput(ParseError):
    """Extra tokens after a complete zero-argument command."""

    kind = "TrailingInput"
