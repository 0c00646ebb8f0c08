"""Grammar rule contract."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from descentpy.parser.parser import Parser
    from descentpy.parser.sink import Sink


class GrammarRule(Protocol):
    """Anything with a stable name and a parse step.

    `parse` reports whether the rule matched at the parser's current
    position. It may only move the cursor through `Parser.eat` or through
    nested `Parser.parse` calls.
    """

    def name(self) -> str: ...

    def parse(self, parser: Parser, sink: Sink) -> bool: ...
