"""Parse carrier that derives diagnostics and trace views on demand."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from descentpy.diagnostics import (
    PARSER_NO_MATCH,
    PARSER_TRAILING_INPUT,
    Diagnostic,
    has_errors,
)
from descentpy.parser.options import ParserOptions
from descentpy.parser.parsed_trace import ParsedTrace
from descentpy.text import START

if TYPE_CHECKING:
    from descentpy.parser.trace_tree import TraceElement


@dataclass(slots=True)
class TraceParseResult:
    """Parse-once/inspect-many result for a single expression."""

    source_text: str
    parsed: ParsedTrace
    options: ParserOptions
    _diagnostics: list[Diagnostic] | None = field(default=None, init=False, repr=False)
    _trace_tree: tuple[TraceElement, ...] | None = field(default=None, init=False, repr=False)

    @property
    def matched(self) -> bool:
        return self.parsed.matched

    @property
    def is_full_match(self) -> bool:
        return self.parsed.is_full_match

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics())

    def diagnostics(self) -> list[Diagnostic]:
        if self._diagnostics is None:
            if not self.parsed.matched:
                self._diagnostics = [Diagnostic.from_spec(PARSER_NO_MATCH, START)]
            elif not self.parsed.is_full_match:
                self._diagnostics = [Diagnostic.from_spec(PARSER_TRAILING_INPUT, self.parsed.end)]
            else:
                self._diagnostics = []
        return self._diagnostics

    def trace_text(self, *, sort_memo: bool = False) -> str:
        return self.parsed.sink.render(sort_memo=sort_memo)

    def trace_tree(self) -> tuple[TraceElement, ...]:
        if self._trace_tree is None:
            from descentpy.parser.trace_tree import build_trace_tree

            self._trace_tree = build_trace_tree(self.parsed.sink.log)
        return self._trace_tree
