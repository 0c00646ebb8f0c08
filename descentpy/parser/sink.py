"""Append-only trace sink and its text renderer."""

from descentpy.parser.event import (
    AbortEvent,
    CommitEvent,
    ConsumeEvent,
    Event,
    ReferenceEvent,
    StartEvent,
    process_events,
)
from descentpy.text import InputIndex, LogIndex

INDENT = "  "

type MemoKey = tuple[str, InputIndex]


class Sink:
    """Owns the event log and the (rule, position) -> latest start table.

    The memo table only ever points at the most recent `StartEvent` for a
    key. Nothing in the engine reads it back while parsing.
    """

    def __init__(self) -> None:
        self._log: list[Event] = []
        self._memo: dict[MemoKey, LogIndex] = {}

    @property
    def log(self) -> list[Event]:
        return self._log

    @property
    def memo(self) -> dict[MemoKey, LogIndex]:
        return self._memo

    def __len__(self) -> int:
        return len(self._log)

    def start(self, name: str, position: InputIndex) -> None:
        self._memo[(name, position)] = LogIndex(len(self._log))
        self._log.append(StartEvent(name=name, position=position))

    def commit(self) -> None:
        self._log.append(CommitEvent())

    def abort(self) -> None:
        self._log.append(AbortEvent())

    def consume(self, token: str) -> None:
        self._log.append(ConsumeEvent(token=token))

    def reference(self, reference: LogIndex) -> None:
        self._log.append(ReferenceEvent(reference=reference))

    def render_trace(self) -> str:
        renderer = TraceRenderer()
        process_events(renderer, self._log)
        return renderer.finish()

    def render_memo(self, *, sort_memo: bool = False) -> str:
        entries = sorted(self._memo.items()) if sort_memo else self._memo.items()
        return "".join(f"[{name}, {position}] -> {log_index}\n" for (name, position), log_index in entries)

    def render(self, *, sort_memo: bool = False) -> str:
        return f"{self.render_trace()}\n{self.render_memo(sort_memo=sort_memo)}"

    def __str__(self) -> str:
        return self.render()


class TraceRenderer:
    """Formats replayed events as an indented, line-per-event trace."""

    def __init__(self) -> None:
        self._lines: list[str] = []
        self._level = 0

    def start(self, name: str, position: InputIndex) -> None:
        self._emit(f"START[{name}, {position}]")
        self._level += 1

    def commit(self) -> None:
        self._level -= 1
        self._emit("COMMIT")

    def abort(self) -> None:
        self._level -= 1
        self._emit("ABORT")

    def consume(self, token: str) -> None:
        self._emit(f"CONSUME[{token}]")

    def reference(self, reference: LogIndex) -> None:
        self._emit(f"REFERENCE[{reference}]")

    def finish(self) -> str:
        return "".join(f"{line}\n" for line in self._lines)

    def _emit(self, text: str) -> None:
        self._lines.append(f"{INDENT * self._level}{text}")
