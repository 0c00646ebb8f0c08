"""Immutable call tree of rule attempts rebuilt from a trace log."""

from dataclasses import dataclass
from enum import StrEnum

from descentpy.parser.event import Event, process_events
from descentpy.text import InputIndex, LogIndex


class Outcome(StrEnum):
    COMMIT = "commit"
    ABORT = "abort"


@dataclass(frozen=True, slots=True)
class ConsumedToken:
    token: str


@dataclass(frozen=True, slots=True)
class TraceReference:
    reference: LogIndex


@dataclass(frozen=True, slots=True)
class TraceNode:
    name: str
    position: InputIndex
    outcome: Outcome
    children: tuple["TraceElement", ...]

    @property
    def committed(self) -> bool:
        return self.outcome == Outcome.COMMIT

    def attempts(self) -> tuple["TraceNode", ...]:
        return tuple(child for child in self.children if isinstance(child, TraceNode))

    def consumed(self) -> str:
        """Concatenated tokens consumed by this attempt and its committed sub-attempts."""
        parts: list[str] = []
        for child in self.children:
            if isinstance(child, ConsumedToken):
                parts.append(child.token)
            elif isinstance(child, TraceNode) and child.committed:
                parts.append(child.consumed())
        return "".join(parts)


type TraceElement = TraceNode | ConsumedToken | TraceReference


class TraceTreeBuilder:
    """Trace visitor that nests events into `TraceNode`s."""

    def __init__(self) -> None:
        self._stack: list[tuple[str, InputIndex, list[TraceElement]]] = []
        self._roots: list[TraceElement] = []

    def start(self, name: str, position: InputIndex) -> None:
        self._stack.append((name, position, []))

    def commit(self) -> None:
        self._close(Outcome.COMMIT)

    def abort(self) -> None:
        self._close(Outcome.ABORT)

    def consume(self, token: str) -> None:
        self._push_element(ConsumedToken(token=token))

    def reference(self, reference: LogIndex) -> None:
        self._push_element(TraceReference(reference=reference))

    def finish(self) -> tuple[TraceElement, ...]:
        if self._stack:
            raise RuntimeError("Cannot finish trace tree: unclosed rule attempts remain on stack")
        return tuple(self._roots)

    def _close(self, outcome: Outcome) -> None:
        if not self._stack:
            raise RuntimeError("Rule attempt closed with empty builder stack")

        name, position, children = self._stack.pop()
        self._push_element(
            TraceNode(name=name, position=position, outcome=outcome, children=tuple(children))
        )

    def _push_element(self, element: TraceElement) -> None:
        if self._stack:
            self._stack[-1][2].append(element)
            return
        self._roots.append(element)


def build_trace_tree(events: list[Event]) -> tuple[TraceElement, ...]:
    builder = TraceTreeBuilder()
    process_events(builder, events)
    return builder.finish()
