from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True, slots=True, order=True)
class InputIndex:
    """Opaque UTF-8 byte offset into the parser input."""

    value: int

    def __post_init__(self):
        if self.value < 0:
            raise ValueError("InputIndex cannot be negative")

    def advance(self, length: int) -> "InputIndex":
        """Return the index `length` bytes further into the input."""
        return InputIndex(self.value + length)

    def __repr__(self) -> str:
        return f"InputIndex({self.value})"

    def __str__(self) -> str:
        return str(self.value)


START: Final[InputIndex] = InputIndex(0)
"""Constant representing the start of the input."""


@dataclass(frozen=True, slots=True, order=True)
class LogIndex:
    """Opaque position of an entry in a trace event log."""

    value: int

    def __post_init__(self):
        if self.value < 0:
            raise ValueError("LogIndex cannot be negative")

    def __repr__(self) -> str:
        return f"LogIndex({self.value})"

    def __str__(self) -> str:
        return str(self.value)
