"""Top-level parse entrypoints for arithmetic expressions."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from descentpy.parser.grammar import Term
from descentpy.parser.options import ParseMode, ParserOptions
from descentpy.parser.parsed_trace import ParsedTrace
from descentpy.parser.parser import Parser
from descentpy.parser.sink import Sink

if TYPE_CHECKING:
    from descentpy.parser.rule import GrammarRule
    from descentpy.pipeline import TraceParseResult

logger = logging.getLogger(__name__)


def _resolve_options(
    options: ParserOptions | None,
    mode: ParseMode | None,
) -> ParserOptions:
    if mode is not None and options is not None:
        raise ValueError("Pass either options or mode, not both")

    if options is not None:
        return options

    if mode is not None:
        return ParserOptions.for_mode(mode)

    return ParserOptions()


def parse(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
    rule: GrammarRule | None = None,
) -> ParsedTrace:
    resolved_options = _resolve_options(options=options, mode=mode)
    top_rule = rule if rule is not None else Term()

    parser = Parser(text, options=resolved_options)
    sink = Sink()
    matched = parser.parse(sink, top_rule)

    logger.debug(
        "Parsed %r with %s: matched=%s end=%s events=%d",
        text,
        top_rule.name(),
        matched,
        parser.position,
        len(sink),
    )
    return ParsedTrace(
        matched=matched,
        end=parser.position,
        text_len=parser.end,
        sink=sink,
    )


def parse_result(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
    rule: GrammarRule | None = None,
) -> TraceParseResult:
    from descentpy.pipeline import TraceParseResult

    resolved_options = _resolve_options(options=options, mode=mode)
    parsed = parse(text, options=resolved_options, rule=rule)
    return TraceParseResult(
        source_text=text,
        parsed=parsed,
        options=resolved_options,
    )
