"""Parser modes and configuration options."""

from dataclasses import dataclass, field
from enum import StrEnum
import sys

FRAMES_PER_ATTEMPT = 2
"""Interpreter frames one nested rule attempt costs (`Parser.parse` + `rule.parse`)."""

CALLER_FRAME_HEADROOM = 200


def default_max_depth() -> int:
    """Deepest rule nesting that fits under the current interpreter recursion limit."""
    return max(1, (sys.getrecursionlimit() - CALLER_FRAME_HEADROOM) // FRAMES_PER_ATTEMPT)


class ParseMode(StrEnum):
    """Top-level engine behavior profile."""

    TRACE = "trace"
    PACKRAT = "packrat"


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Switches controlling memoization and the recursion guard.

    `max_depth` caps how many rule attempts may be open at once. Each `+` or
    `*` in the input nests about two more attempts, so the default (400
    under the stock recursion limit of 1000) rejects expressions with more
    than roughly 195 operators with `ParseDepthError`. Raise
    `sys.setrecursionlimit` before building the options to allow more.
    `None` turns the guard off and leaves the interpreter's own
    `RecursionError` as the only bound.
    """

    mode: ParseMode = ParseMode.TRACE
    memoize: bool = False
    max_depth: int | None = field(default_factory=default_max_depth)

    def __post_init__(self):
        if self.max_depth is not None and self.max_depth < 1:
            raise ValueError("max_depth must be positive or None")

    @staticmethod
    def for_mode(mode: ParseMode) -> "ParserOptions":
        if mode == ParseMode.PACKRAT:
            return ParserOptions(mode=mode, memoize=True)

        return ParserOptions(mode=mode, memoize=False)
