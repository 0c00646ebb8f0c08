"""Outcome of one top-level parse run."""

from dataclasses import dataclass

from descentpy.parser.sink import Sink
from descentpy.text import InputIndex


@dataclass(frozen=True, slots=True)
class ParsedTrace:
    matched: bool
    end: InputIndex
    text_len: InputIndex
    sink: Sink

    @property
    def is_full_match(self) -> bool:
        return self.matched and self.end == self.text_len
