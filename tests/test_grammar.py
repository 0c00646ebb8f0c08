import textwrap

import pytest

from descentpy.parser import (
    ConsumedToken,
    ConsumeEvent,
    Factor,
    Parser,
    Primitive,
    Sink,
    StartEvent,
    Term,
    TraceNode,
    build_trace_tree,
    parse,
)
from descentpy.text import InputIndex
from tests._debug import debug_dump_trace
from tests._shared_cases import EXPRESSION_CASES, ExpressionCase, case_id

EXPECTED_PRODUCT_TRACE = textwrap.dedent(
    """\
    START[term, 0]
      START[term(1), 0]
        START[factor, 0]
          START[factor(1), 0]
            START[prim, 0]
              CONSUME[1]
            COMMIT
            CONSUME[*]
            START[factor, 2]
              START[factor(1), 2]
                START[prim, 2]
                  CONSUME[3]
                COMMIT
              ABORT
              START[factor(2), 2]
                START[prim, 2]
                  CONSUME[3]
                COMMIT
              COMMIT
            COMMIT
          COMMIT
        COMMIT
      ABORT
      START[term(2), 0]
        START[factor, 0]
          START[factor(1), 0]
            START[prim, 0]
              CONSUME[1]
            COMMIT
            CONSUME[*]
            START[factor, 2]
              START[factor(1), 2]
                START[prim, 2]
                  CONSUME[3]
                COMMIT
              ABORT
              START[factor(2), 2]
                START[prim, 2]
                  CONSUME[3]
                COMMIT
              COMMIT
            COMMIT
          COMMIT
        COMMIT
      COMMIT
    COMMIT

    [factor, 0] -> 24
    [factor, 2] -> 30
    [factor(1), 0] -> 25
    [factor(1), 2] -> 31
    [factor(2), 2] -> 36
    [prim, 0] -> 26
    [prim, 2] -> 37
    [term, 0] -> 0
    [term(1), 0] -> 1
    [term(2), 0] -> 23
    """
)


def _committed_tokens(node: TraceNode) -> list[str]:
    tokens: list[str] = []
    for child in node.children:
        if isinstance(child, TraceNode) and child.committed:
            tokens.extend(_committed_tokens(child))
        elif isinstance(child, ConsumedToken):
            tokens.append(child.token)
    return tokens


@pytest.mark.parametrize("case", EXPRESSION_CASES, ids=case_id)
def test_term_cases(case: ExpressionCase) -> None:
    parser = Parser(case.source)
    sink = Sink()

    matched = parser.parse(sink, Term())
    debug_dump_trace(case.name, case.source, sink)

    assert matched is case.matched
    assert parser.position == InputIndex(case.end)
    assert (matched and parser.is_at_end()) is case.is_full_match


def test_product_trace_matches_golden_output() -> None:
    parsed = parse("1*3")

    assert parsed.matched
    assert parsed.is_full_match
    assert parsed.sink.render(sort_memo=True) == EXPECTED_PRODUCT_TRACE


def test_product_commits_digits_one_at_a_time() -> None:
    parsed = parse("1*3")

    (root,) = build_trace_tree(parsed.sink.log)
    assert isinstance(root, TraceNode)
    assert _committed_tokens(root) == ["1", "*", "3"]
    digits = [token for token in _committed_tokens(root) if token.isdigit()]
    assert digits == ["1", "3"]


def test_sum_tries_sequence_form_first() -> None:
    parsed = parse("2+3*4")
    starts = [event for event in parsed.sink.log if isinstance(event, StartEvent)]

    assert parsed.is_full_match
    assert parsed.end == InputIndex(5)
    assert starts[0] == StartEvent("term", InputIndex(0))
    assert starts[1] == StartEvent("term(1)", InputIndex(0))
    # the sequence form wins at the top, so the fallback is never tried there
    assert StartEvent("term(2)", InputIndex(0)) not in starts
    assert starts.index(StartEvent("term(1)", InputIndex(2))) < starts.index(
        StartEvent("term(2)", InputIndex(2))
    )


def test_leading_operator_fails_without_progress() -> None:
    parser = Parser("*3")
    sink = Sink()

    assert parser.parse(sink, Term()) is False
    assert parser.position == InputIndex(0)
    assert not any(isinstance(event, ConsumeEvent) for event in sink.log)


def test_empty_input_fails() -> None:
    parsed = parse("")

    assert parsed.matched is False
    assert parsed.end == InputIndex(0)
    assert parsed.sink.render_trace().splitlines()[0] == "START[term, 0]"


def test_adjacent_digits_are_a_partial_match() -> None:
    parsed = parse("12")

    assert parsed.matched
    assert parsed.end == InputIndex(1)
    assert parsed.is_full_match is False


def test_primitive_accepts_only_ascii_digits() -> None:
    for source in ("0", "9"):
        parser = Parser(source)
        assert parser.parse(Sink(), Primitive())
        assert parser.is_at_end()

    for source in ("a", "+", "٣", ""):
        parser = Parser(source)
        sink = Sink()
        assert parser.parse(sink, Primitive()) is False
        assert parser.position == InputIndex(0)
        assert len(sink) == 2


def test_factor_can_be_the_top_rule() -> None:
    parsed = parse("2*3+4", rule=Factor())

    assert parsed.matched
    assert parsed.end == InputIndex(3)
    assert parsed.sink.log[0] == StartEvent("factor", InputIndex(0))
