"""Backtracking cursor and the transactional rule attempt."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import TYPE_CHECKING

from descentpy.parser.options import ParserOptions
from descentpy.parser.sink import Sink
from descentpy.text import START, InputIndex, LogIndex

if TYPE_CHECKING:
    from descentpy.parser.rule import GrammarRule

logger = logging.getLogger(__name__)

ENCODING = "utf-8"
ENCODING_ERRORS = "surrogatepass"


class ParseDepthError(RecursionError):
    """Raised when nested rule attempts exceed `ParserOptions.max_depth`."""

    def __init__(self, max_depth: int, position: InputIndex) -> None:
        super().__init__(f"Rule nesting exceeded max_depth={max_depth} at input offset {position}")
        self.max_depth = max_depth
        self.position = position


@dataclass(frozen=True, slots=True)
class ParserCheckpoint:
    position: InputIndex


@dataclass(frozen=True, slots=True)
class CachedAttempt:
    """Outcome of a finished attempt, reused in packrat mode."""

    matched: bool
    end: InputIndex
    start: LogIndex


def _codepoint_width(lead: int) -> int:
    if lead < 0x80:
        return 1
    if lead < 0xE0:
        return 2
    if lead < 0xF0:
        return 3
    return 4


class Parser:
    """Cursor over a read-only input.

    Offsets are UTF-8 byte offsets. Lone surrogates are carried through
    (`surrogatepass`) so any `str` can be parsed. The cursor is the only
    state that backtracking saves and restores.
    """

    def __init__(self, text: str, options: ParserOptions | None = None) -> None:
        self._text = text
        self._data = text.encode(ENCODING, errors=ENCODING_ERRORS)
        self._position = START
        self._options = options or ParserOptions()
        self._depth = 0
        self._results: dict[tuple[str, InputIndex], CachedAttempt] = {}
        self._results_sink: Sink | None = None

    @property
    def text(self) -> str:
        return self._text

    @property
    def options(self) -> ParserOptions:
        return self._options

    @property
    def position(self) -> InputIndex:
        return self._position

    @property
    def depth(self) -> int:
        return self._depth

    @property
    def end(self) -> InputIndex:
        return InputIndex(len(self._data))

    def is_at_end(self) -> bool:
        return self._position.value >= len(self._data)

    def remaining(self) -> str:
        return self._data[self._position.value :].decode(ENCODING, errors=ENCODING_ERRORS)

    def peek(self) -> str:
        """Next codepoint, or an empty string at end of input."""
        pos = self._position.value
        if pos >= len(self._data):
            return ""
        width = _codepoint_width(self._data[pos])
        return self._data[pos : pos + width].decode(ENCODING, errors=ENCODING_ERRORS)

    def checkpoint(self) -> ParserCheckpoint:
        return ParserCheckpoint(position=self._position)

    def rewind(self, checkpoint: ParserCheckpoint) -> None:
        self._position = checkpoint.position

    def eat(self, token: str, sink: Sink) -> bool:
        encoded = token.encode(ENCODING, errors=ENCODING_ERRORS)
        if self._data.startswith(encoded, self._position.value):
            sink.consume(token)
            self._position = self._position.advance(len(encoded))
            return True
        return False

    def parse(self, sink: Sink, rule: GrammarRule) -> bool:
        """Attempt `rule` here; on failure the cursor is put back where it was.

        The same holds when a `RecursionError` (including `ParseDepthError`)
        escapes: every attempt it passes through rewinds before re-raising.
        """
        name = rule.name()
        key = (name, self._position)

        if self._options.memoize:
            cached = self._results_for(sink).get(key)
            if cached is not None:
                logger.debug("Reusing %s at %s from log entry %s", name, self._position, cached.start)
                sink.reference(cached.start)
                if cached.matched:
                    self._position = cached.end
                return cached.matched

        checkpoint = self.checkpoint()
        self._check_depth()
        self._depth += 1
        try:
            start = LogIndex(len(sink))
            sink.start(name, checkpoint.position)
            matched = rule.parse(self, sink)
        except RecursionError:
            # no spare frames for a method call when the interpreter limit is hit
            self._position = checkpoint.position
            raise
        finally:
            self._depth -= 1

        if matched:
            sink.commit()
        else:
            sink.abort()
            self.rewind(checkpoint)

        if self._options.memoize:
            self._results[key] = CachedAttempt(matched=matched, end=self._position, start=start)
        return matched

    def _results_for(self, sink: Sink) -> dict[tuple[str, InputIndex], CachedAttempt]:
        # cached log indices only make sense inside the sink that recorded them
        if sink is not self._results_sink:
            self._results.clear()
            self._results_sink = sink
        return self._results

    def _check_depth(self) -> None:
        max_depth = self._options.max_depth
        if max_depth is not None and self._depth >= max_depth:
            logger.warning("Rule depth limit %d reached at input offset %s", max_depth, self._position)
            raise ParseDepthError(max_depth, self._position)
