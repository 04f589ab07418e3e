"""
Collaborator interfaces consumed by the playback core.

The core never draws or generates data itself:
- RandomSource supplies the initial unsorted sequence
- Renderer receives a Frame whenever the visible state changes
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, List, Tuple

from .replay.state import Highlight


@dataclass(frozen=True)
class Frame:
    """
    Everything a renderer needs for one redraw.

    Fields:
        values: Current live sequence
        highlight: Indices to emphasise plus the cumulative sorted set
        comparisons: Compare events applied so far
        writes: Swap + Write events applied so far
        cursor: Events applied so far
        total: Events in the log
        label: Status label (Idle, Running, Paused, Done, Stepping)
        algorithm: Name of the algorithm being replayed
    """
    values: Tuple[Any, ...]
    highlight: Highlight
    comparisons: int
    writes: int
    cursor: int
    total: int
    label: str
    algorithm: str = ""

    @property
    def progress(self) -> str:
        return f"{self.cursor}/{self.total}"


class RandomSource(ABC):
    """Produces the initial unsorted sequence."""

    @abstractmethod
    def generate(self, n: int) -> List[Any]:
        """
        Return n values within the source's bounded positive range.

        Args:
            n: Number of values
        """
        ...


class Renderer(ABC):
    """Draws frames. Must not mutate anything it is handed."""

    @abstractmethod
    def render(self, frame: Frame) -> None:
        ...
