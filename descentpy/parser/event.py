"""Trace events."""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

from descentpy.text import InputIndex, LogIndex


@dataclass(frozen=True, slots=True)
class StartEvent:
    name: str
    position: InputIndex


@dataclass(frozen=True, slots=True)
class CommitEvent:
    pass


@dataclass(frozen=True, slots=True)
class AbortEvent:
    pass


@dataclass(frozen=True, slots=True)
class ConsumeEvent:
    token: str


@dataclass(frozen=True, slots=True)
class ReferenceEvent:
    reference: LogIndex


Event = StartEvent | CommitEvent | AbortEvent | ConsumeEvent | ReferenceEvent


class TraceVisitor(Protocol):
    def start(self, name: str, position: InputIndex) -> None: ...

    def commit(self) -> None: ...

    def abort(self) -> None: ...

    def consume(self, token: str) -> None: ...

    def reference(self, reference: LogIndex) -> None: ...


def process_events(visitor: TraceVisitor, events: Iterable[Event]) -> None:
    """Replay `events` into `visitor`, checking that closes match opens.

    Starts left open at the end are not an error here; a log cut short by a
    depth-limit failure still replays.
    """
    open_starts = 0
    for idx, event in enumerate(events):
        if isinstance(event, StartEvent):
            open_starts += 1
            visitor.start(event.name, event.position)
        elif isinstance(event, (CommitEvent, AbortEvent)):
            if open_starts == 0:
                raise RuntimeError(f"Event {idx} closes a rule but no rule is open")
            open_starts -= 1
            if isinstance(event, CommitEvent):
                visitor.commit()
            else:
                visitor.abort()
        elif isinstance(event, ConsumeEvent):
            visitor.consume(event.token)
        else:
            visitor.reference(event.reference)
