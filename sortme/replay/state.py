"""
ReplayState: a cursor over an event log and the state it implies.

Invariant: applying events [0, cursor) of the log to the original sequence, in
order, reproduces the live sequence, the counters and the sorted set exactly.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, List, Optional, Sequence, Set, Tuple

from ..core.canonical import digest
from ..core.errors import ReplayExhaustedError, ReplayInvariantError
from ..core.events import (
    Compare,
    Done,
    Event,
    EventLog,
    MarkRangeSorted,
    MarkSorted,
    Pivot,
    Swap,
    Write,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Highlight:
    """
    What a renderer should emphasise after one event.

    Fields:
        sorted: Cumulative sorted-index set (always present)
        compare: Pair of indices under comparison
        swap: Pair swapped, or single index written
        pivot: Pivot index, if the event designated one
        event: The event that was applied (None for a plain redraw)
    """

    sorted: FrozenSet[int] = frozenset()
    compare: Tuple[int, ...] = ()
    swap: Tuple[int, ...] = ()
    pivot: Optional[int] = None
    event: Optional[Event] = None


@dataclass(frozen=True)
class ReplaySnapshot:
    """Immutable copy of everything derived from the cursor position."""

    values: Tuple[Any, ...]
    cursor: int
    total: int
    comparisons: int
    writes: int
    sorted_indices: FrozenSet[int] = field(default_factory=frozenset)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "values": list(self.values),
            "cursor": self.cursor,
            "total": self.total,
            "comparisons": self.comparisons,
            "writes": self.writes,
            "sorted_indices": sorted(self.sorted_indices),
        }

    def state_hash(self) -> str:
        """SHA-256 of the canonical snapshot."""
        return digest(self.to_dict())


class ReplayState:
    """
    Live array, event log, cursor, counters and sorted set for one run.

    Usage:
        state = ReplayState([5, 3, 1], generate_log("selection", [5, 3, 1]))
        while not state.finished:
            highlight = state.apply_next()
    """

    def __init__(self, values: Sequence[Any] = (), log: Optional[EventLog] = None) -> None:
        self._original: Tuple[Any, ...] = tuple(values)
        self._log: Optional[EventLog] = None
        self._values: List[Any] = list(self._original)
        self._cursor = 0
        self._comparisons = 0
        self._writes = 0
        self._sorted: Set[int] = set()
        if log is not None:
            self.load(values, log)

    def load(self, values: Sequence[Any], log: EventLog) -> None:
        """
        Replace the original sequence and log, then reset.

        Raises:
            EventLogError: If the log refers to positions outside values
        """
        log.check_bounds(len(values))
        self._original = tuple(values)
        self._log = log
        self.reset()

    def reset(self) -> None:
        """Rewind to cursor 0. The log is kept."""
        self._values = list(self._original)
        self._cursor = 0
        self._comparisons = 0
        self._writes = 0
        self._sorted = set()

    @property
    def log(self) -> Optional[EventLog]:
        return self._log

    @property
    def original(self) -> Tuple[Any, ...]:
        return self._original

    @property
    def values(self) -> List[Any]:
        """Copy of the live sequence."""
        return list(self._values)

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def total(self) -> int:
        return len(self._log) if self._log is not None else 0

    @property
    def comparisons(self) -> int:
        return self._comparisons

    @property
    def writes(self) -> int:
        return self._writes

    @property
    def sorted_indices(self) -> FrozenSet[int]:
        return frozenset(self._sorted)

    @property
    def finished(self) -> bool:
        return self._log is not None and self._cursor >= len(self._log)

    def peek(self) -> Optional[Event]:
        """Event the next apply_next() will apply, or None at the end."""
        if self._log is None or self._cursor >= len(self._log):
            return None
        return self._log[self._cursor]

    def apply_next(self) -> Highlight:
        """
        Apply the event at the cursor and advance by one.

        Returns:
            Highlight describing the event plus the cumulative sorted set

        Raises:
            ReplayExhaustedError: If there is no log or the cursor is at its end
        """
        ev = self.peek()
        if ev is None:
            raise ReplayExhaustedError(f"no event at cursor {self._cursor} of {self.total}")

        compare: Tuple[int, ...] = ()
        swap: Tuple[int, ...] = ()
        pivot: Optional[int] = None

        if isinstance(ev, Compare):
            self._comparisons += 1
            compare = (ev.i, ev.j)
        elif isinstance(ev, Swap):
            self._writes += 1
            self._values[ev.i], self._values[ev.j] = self._values[ev.j], self._values[ev.i]
            swap = (ev.i, ev.j)
        elif isinstance(ev, Write):
            self._writes += 1
            self._values[ev.i] = ev.value
            swap = (ev.i,)
        elif isinstance(ev, Pivot):
            pivot = ev.i
        elif isinstance(ev, MarkSorted):
            self._sorted.add(ev.i)
        elif isinstance(ev, MarkRangeSorted):
            self._sorted.update(range(ev.l, ev.r + 1))
        elif isinstance(ev, Done):
            self._sorted.update(range(len(self._values)))
        else:
            raise ReplayInvariantError(f"unsupported event at {self._cursor}: {ev!r}")

        self._cursor += 1
        return Highlight(
            sorted=frozenset(self._sorted),
            compare=compare,
            swap=swap,
            pivot=pivot,
            event=ev,
        )

    def highlight(self) -> Highlight:
        """Highlight for a plain redraw: sorted set only."""
        return Highlight(sorted=frozenset(self._sorted))

    def snapshot(self) -> ReplaySnapshot:
        return ReplaySnapshot(
            values=tuple(self._values),
            cursor=self._cursor,
            total=self.total,
            comparisons=self._comparisons,
            writes=self._writes,
            sorted_indices=frozenset(self._sorted),
        )

    def state_hash(self) -> str:
        return self.snapshot().state_hash()

    def verify(self) -> None:
        """
        Re-apply events [0, cursor) to the original and compare.

        Raises:
            ReplayInvariantError: If the rebuilt state differs from the live one
        """
        if self._log is None:
            return
        fresh = ReplayState(self._original, self._log)
        for _ in range(self._cursor):
            fresh.apply_next()
        expected, actual = fresh.snapshot(), self.snapshot()
        if expected != actual:
            logger.error(
                "Replay invariant broken at cursor %d (%s log)", self._cursor, self._log.algorithm
            )
            raise ReplayInvariantError(
                f"live state diverged from replay at cursor {self._cursor}: "
                f"expected {expected.to_dict()}, got {actual.to_dict()}"
            )
