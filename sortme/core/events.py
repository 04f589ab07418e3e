"""
Event model for replayable sorting runs.

Every runner describes its work using only the seven event kinds defined here.
An event carries no ordering information beyond its position in the log.
"""

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Any, ClassVar, Dict, Iterator, Tuple, Type, Union

from .canonical import digest
from .errors import EventLogError


class EventKind(str, Enum):
    """Wire tags for the event variants."""

    COMPARE = "compare"
    SWAP = "swap"
    WRITE = "write"
    PIVOT = "pivot"
    MARK_SORTED = "markSorted"
    MARK_RANGE_SORTED = "markRangeSorted"
    DONE = "done"


class _EventBase:
    kind: ClassVar[EventKind]

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"type": self.kind.value}
        data.update(asdict(self))  # type: ignore[call-overload]
        return data

    def indices(self) -> Tuple[int, ...]:
        """Positions this event refers to (used for bounds checks)."""
        return ()


@dataclass(frozen=True)
class Compare(_EventBase):
    """Positions i and j were compared."""

    kind: ClassVar[EventKind] = EventKind.COMPARE
    i: int
    j: int

    def indices(self) -> Tuple[int, ...]:
        return (self.i, self.j)


@dataclass(frozen=True)
class Swap(_EventBase):
    """Positions i and j exchanged values."""

    kind: ClassVar[EventKind] = EventKind.SWAP
    i: int
    j: int

    def indices(self) -> Tuple[int, ...]:
        return (self.i, self.j)


@dataclass(frozen=True)
class Write(_EventBase):
    """Position i overwritten with value (no exchange)."""

    kind: ClassVar[EventKind] = EventKind.WRITE
    i: int
    value: Any

    def indices(self) -> Tuple[int, ...]:
        return (self.i,)


@dataclass(frozen=True)
class Pivot(_EventBase):
    """Position i designated as pivot. Advisory only."""

    kind: ClassVar[EventKind] = EventKind.PIVOT
    i: int

    def indices(self) -> Tuple[int, ...]:
        return (self.i,)


@dataclass(frozen=True)
class MarkSorted(_EventBase):
    kind: ClassVar[EventKind] = EventKind.MARK_SORTED
    i: int

    def indices(self) -> Tuple[int, ...]:
        return (self.i,)


@dataclass(frozen=True)
class MarkRangeSorted(_EventBase):
    """Inclusive range [l, r] is in final sorted place."""

    kind: ClassVar[EventKind] = EventKind.MARK_RANGE_SORTED
    l: int  # noqa: E741
    r: int

    def indices(self) -> Tuple[int, ...]:
        return (self.l, self.r)


@dataclass(frozen=True)
class Done(_EventBase):
    kind: ClassVar[EventKind] = EventKind.DONE


Event = Union[Compare, Swap, Write, Pivot, MarkSorted, MarkRangeSorted, Done]

_EVENT_TYPES: Dict[str, Type[_EventBase]] = {
    cls.kind.value: cls
    for cls in (Compare, Swap, Write, Pivot, MarkSorted, MarkRangeSorted, Done)
}


def event_from_dict(data: Dict[str, Any]) -> Event:
    """
    Rebuild an event from its to_dict() form.

    Raises:
        EventLogError: If the type tag is unknown or fields do not match
    """
    if not isinstance(data, dict):
        raise EventLogError(f"event must be an object, got {type(data).__name__}")
    fields = dict(data)
    tag = fields.pop("type", None)
    cls = _EVENT_TYPES.get(tag)  # type: ignore[arg-type]
    if cls is None:
        raise EventLogError(f"Unknown event type: {tag!r}")
    try:
        ev = cls(**fields)
    except TypeError as e:
        raise EventLogError(f"Bad fields for {tag} event: {e}") from e
    for idx in ev.indices():
        if not _is_index(idx):
            raise EventLogError(f"{tag} event has non-integer index {idx!r}")
    return ev  # type: ignore[return-value]


def _is_index(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class EventLog:
    """
    Immutable, ordered record of one algorithm run.

    Fields:
        algorithm: Name of the runner that produced the log
        events: Events in the order they were performed

    Invariant: ends with exactly one Done and contains nothing after it.
    """

    algorithm: str
    events: Tuple[Event, ...]

    def __post_init__(self) -> None:
        events = tuple(self.events)
        object.__setattr__(self, "events", events)
        if not events or not isinstance(events[-1], Done):
            raise EventLogError(f"{self.algorithm} log does not end with a Done event")
        for pos, ev in enumerate(events[:-1]):
            if isinstance(ev, Done):
                raise EventLogError(
                    f"{self.algorithm} log has a Done event at {pos} of {len(events)}"
                )

    def __len__(self) -> int:
        return len(self.events)

    def __getitem__(self, index: int) -> Event:
        return self.events[index]

    def __iter__(self) -> Iterator[Event]:
        return iter(self.events)

    def check_bounds(self, size: int) -> None:
        """
        Ensure every index the log refers to exists in a sequence of this size.

        Raises:
            EventLogError: On the first non-integer or out-of-range index
        """
        for pos, ev in enumerate(self.events):
            for idx in ev.indices():
                if not _is_index(idx):
                    raise EventLogError(
                        f"event {pos} ({ev.kind.value}) index {idx!r} is not an integer"
                    )
                if not 0 <= idx < size:
                    raise EventLogError(
                        f"event {pos} ({ev.kind.value}) index {idx} outside [0, {size})"
                    )
            if isinstance(ev, MarkRangeSorted) and ev.l > ev.r:
                raise EventLogError(f"event {pos} has empty range [{ev.l}, {ev.r}]")

    def counts(self) -> Dict[str, int]:
        """Number of events per kind."""
        out: Dict[str, int] = {}
        for ev in self.events:
            out[ev.kind.value] = out.get(ev.kind.value, 0) + 1
        return out

    def to_dicts(self) -> list:
        return [ev.to_dict() for ev in self.events]

    def digest(self) -> str:
        """SHA-256 of the canonical log; equal digests mean byte-identical logs."""
        return digest({"algorithm": self.algorithm, "events": self.to_dicts()})
