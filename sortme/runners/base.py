"""
AlgorithmRunner: simulate a sort once and record what it did.

A runner never touches the caller's sequence. It sorts a private copy and
records every elementary operation through an EventRecorder.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Sequence

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


class EventRecorder:
    """
    Collects events while a runner works on its private copy.

    swap() and write() mutate the working array and record the event in one
    call, so the recorded log cannot drift from what the simulation did.
    """

    def __init__(self, values: List[Any]) -> None:
        self.a = values
        self.events: List[Event] = []

    def compare(self, i: int, j: int) -> None:
        self.events.append(Compare(i, j))

    def swap(self, i: int, j: int) -> None:
        self.a[i], self.a[j] = self.a[j], self.a[i]
        self.events.append(Swap(i, j))

    def write(self, i: int, value: Any) -> None:
        self.a[i] = value
        self.events.append(Write(i, value))

    def pivot(self, i: int) -> None:
        self.events.append(Pivot(i))

    def mark_sorted(self, i: int) -> None:
        self.events.append(MarkSorted(i))

    def mark_range_sorted(self, l: int, r: int) -> None:  # noqa: E741
        self.events.append(MarkRangeSorted(l, r))


class AlgorithmRunner(ABC):
    """
    Base class for the sorting algorithm variants.

    Subclasses set `name` and implement simulate(). Adding an algorithm means
    adding a subclass and registering it; nothing else branches on the name.
    """

    name: str = ""

    def generate_log(self, values: Sequence[Any]) -> EventLog:
        """
        Run the algorithm against a copy of values.

        Args:
            values: Input sequence (left untouched)

        Returns:
            EventLog ending in a single Done event. Inputs shorter than two
            elements produce a log holding only Done.
        """
        rec = EventRecorder(list(values))
        if len(rec.a) > 1:
            self.simulate(rec)
        rec.events.append(Done())
        return EventLog(algorithm=self.name, events=tuple(rec.events))

    @abstractmethod
    def simulate(self, rec: EventRecorder) -> None:
        """
        Sort rec.a in place, recording every operation on rec.

        Must leave every index covered by a MarkSorted/MarkRangeSorted event.
        Called only for inputs with at least two elements.
        """
        ...
