"""Parser infrastructure (trace events + sink + backtracking cursor + grammar)."""

from descentpy.parser.arithmetic import parse, parse_result
from descentpy.parser.event import (
    AbortEvent,
    CommitEvent,
    ConsumeEvent,
    Event,
    ReferenceEvent,
    StartEvent,
    TraceVisitor,
    process_events,
)
from descentpy.parser.grammar import Factor, Factor1, Factor2, Primitive, Term, Term1, Term2
from descentpy.parser.options import ParseMode, ParserOptions, default_max_depth
from descentpy.parser.parsed_trace import ParsedTrace
from descentpy.parser.parser import ParseDepthError, Parser, ParserCheckpoint
from descentpy.parser.rule import GrammarRule
from descentpy.parser.sink import Sink, TraceRenderer
from descentpy.parser.trace_tree import (
    ConsumedToken,
    Outcome,
    TraceElement,
    TraceNode,
    TraceReference,
    TraceTreeBuilder,
    build_trace_tree,
)

__all__ = [
    "AbortEvent",
    "CommitEvent",
    "ConsumeEvent",
    "ConsumedToken",
    "Event",
    "Factor",
    "Factor1",
    "Factor2",
    "GrammarRule",
    "Outcome",
    "ParseDepthError",
    "ParseMode",
    "ParsedTrace",
    "Parser",
    "ParserCheckpoint",
    "ParserOptions",
    "Primitive",
    "ReferenceEvent",
    "Sink",
    "StartEvent",
    "Term",
    "Term1",
    "Term2",
    "TraceElement",
    "TraceNode",
    "TraceReference",
    "TraceRenderer",
    "TraceTreeBuilder",
    "TraceVisitor",
    "build_trace_tree",
    "default_max_depth",
    "parse",
    "parse_result",
    "process_events",
]
