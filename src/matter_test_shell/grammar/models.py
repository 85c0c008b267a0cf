"""Command values produced by the shell grammar."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import ClassVar, Union

U64_MAX = 2**64 - 1


def _check_u64(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if not 0 <= value <= U64_MAX:
        raise ValueError(f"{name} out of unsigned 64-bit range: {value}")


@dataclass(frozen=True)
class Scan:
    """Scan for advertising devices for ``seconds`` seconds."""

    seconds: int
    keyword: ClassVar[str] = "scan"

    def __post_init__(self) -> None:
        _check_u64("seconds", self.seconds)

    @property
    def duration(self) -> timedelta:
        """Scan window as a timedelta. Raises OverflowError past timedelta's range."""
        return timedelta(seconds=self.seconds)

    @property
    def argument(self) -> int:
        return self.seconds

    def to_text(self) -> str:
        return f"scan {self.seconds}"

    def __str__(self) -> str:
        return self.to_text()


@dataclass(frozen=True)
class Exit:
    """Leave the shell. Spelled ``exit`` or ``quit``."""

    keyword: ClassVar[str] = "exit"
    argument: ClassVar[None] = None

    def to_text(self) -> str:
        return self.keyword

    def __str__(self) -> str:
        return self.to_text()


@dataclass(frozen=True)
class Help:
    keyword: ClassVar[str] = "help"
    argument: ClassVar[None] = None

    def to_text(self) -> str:
        return self.keyword

    def __str__(self) -> str:
        return self.to_text()


@dataclass(frozen=True)
class List:
    keyword: ClassVar[str] = "list"
    argument: ClassVar[None] = None

    def to_text(self) -> str:
        return self.keyword

    def __str__(self) -> str:
        return self.to_text()


@dataclass(frozen=True)
class Test:
    """Run a connection test against a device. ``count`` is kept as-is."""

    count: int
    keyword: ClassVar[str] = "test"
    __test__ = False

    def __post_init__(self) -> None:
        _check_u64("count", self.count)

    @property
    def argument(self) -> int:
        return self.count

    def to_text(self) -> str:
        return f"test {self.count}"

    def __str__(self) -> str:
        return self.to_text()


Command = Union[Scan, Exit, Help, List, Test]
