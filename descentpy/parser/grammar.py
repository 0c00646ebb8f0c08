"""Arithmetic grammar expressed as ordered-choice rules.

    term      = factor "+" term | factor
    factor    = primitive "*" factor | primitive
    primitive = "0" | "1" | ... | "9"

Each binary rule is split into its sequence form (`Term1`, `Factor1`) and
its single form (`Term2`, `Factor2`). The combining rule tries them in that
order, so a sequence that fails halfway is rewound before the fallback runs.
"""

from dataclasses import dataclass
from typing import Final

from descentpy.parser.parser import Parser
from descentpy.parser.sink import Sink

DIGITS: Final[frozenset[str]] = frozenset("0123456789")


@dataclass(frozen=True, slots=True)
class Primitive:
    def name(self) -> str:
        return "prim"

    def parse(self, parser: Parser, sink: Sink) -> bool:
        ch = parser.peek()
        if ch in DIGITS:
            return parser.eat(ch, sink)
        return False


@dataclass(frozen=True, slots=True)
class Factor1:
    def name(self) -> str:
        return "factor(1)"

    def parse(self, parser: Parser, sink: Sink) -> bool:
        return (
            parser.parse(sink, Primitive())
            and parser.eat("*", sink)
            and parser.parse(sink, Factor())
        )


@dataclass(frozen=True, slots=True)
class Factor2:
    def name(self) -> str:
        return "factor(2)"

    def parse(self, parser: Parser, sink: Sink) -> bool:
        return parser.parse(sink, Primitive())


@dataclass(frozen=True, slots=True)
class Factor:
    def name(self) -> str:
        return "factor"

    def parse(self, parser: Parser, sink: Sink) -> bool:
        return parser.parse(sink, Factor1()) or parser.parse(sink, Factor2())


@dataclass(frozen=True, slots=True)
class Term1:
    def name(self) -> str:
        return "term(1)"

    def parse(self, parser: Parser, sink: Sink) -> bool:
        return (
            parser.parse(sink, Factor())
            and parser.eat("+", sink)
            and parser.parse(sink, Term())
        )


@dataclass(frozen=True, slots=True)
class Term2:
    def name(self) -> str:
        return "term(2)"

    def parse(self, parser: Parser, sink: Sink) -> bool:
        return parser.parse(sink, Factor())


@dataclass(frozen=True, slots=True)
class Term:
    def name(self) -> str:
        return "term"

    def parse(self, parser: Parser, sink: Sink) -> bool:
        return parser.parse(sink, Term1()) or parser.parse(sink, Term2())
