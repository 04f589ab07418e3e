"""
PlaybackController: drives a ReplayState forward at a timed cadence.

STATE MACHINE:

    IDLE ──start──► RUNNING ──pause──► PAUSED
     ▲  ◄──reset──┐   │  ◄──resume───┘  │
     │            │   │ (Done applied)  │ step (Done applied)
     │            │   ▼                 ▼
     └───reset─── DONE ◄────────────────┘

    step:   IDLE/PAUSED only; applies one event, state unchanged unless it was Done
    reset:  anything but RUNNING
    select_algorithm / load / regenerate: anything but RUNNING, always lands in IDLE

Illegal requests are rejected (the method returns False) rather than raised
or queued. The driving loop re-checks the state before every tick, so leaving
RUNNING is all it takes to stop it.
"""

import asyncio
import time
from enum import Enum
from typing import Any, Callable, List, Optional, Sequence

from ..core.events import Done, EventLog
from ..interfaces import Frame, RandomSource, Renderer
from ..logging_config import get_logger
from ..random_source import UniformRandomSource
from ..replay.state import Highlight, ReplayState
from ..runners.registry import get_runner
from .speed import clamp_speed, delay_from_speed

DEFAULT_ALGORITHM = "bubble"
DEFAULT_SIZE = 40
DEFAULT_SPEED = 60


class PlaybackState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    DONE = "done"


class PlaybackController:
    """
    Owns one ReplayState and the playback state machine around it.

    Usage:
        ctl = PlaybackController([5, 3, 1], algorithm="quick", renderer=my_renderer)
        ctl.start()
        ctl.run()            # blocks, sleeping between ticks
        # or drive manually: while ctl.tick(): ...
    """

    def __init__(
        self,
        values: Optional[Sequence[Any]] = None,
        algorithm: str = DEFAULT_ALGORITHM,
        speed: int = DEFAULT_SPEED,
        renderer: Optional[Renderer] = None,
        random_source: Optional[RandomSource] = None,
        size: int = DEFAULT_SIZE,
    ) -> None:
        self._algorithm = get_runner(algorithm).name
        self._speed = clamp_speed(speed)
        self._renderer = renderer
        self._random_source = random_source or UniformRandomSource()
        self._size = size
        self._replay = ReplayState()
        self._state = PlaybackState.IDLE
        self._stepping = False
        self._log = get_logger(__name__)

        if values is None:
            values = self._random_source.generate(size)
        self._rebuild(values)

    # ------------------------------------------------------------------ views

    @property
    def state(self) -> PlaybackState:
        return self._state

    @property
    def label(self) -> str:
        """Status label for display: Idle, Running, Paused, Done or Stepping."""
        if self._state is PlaybackState.DONE:
            return "Done"
        if self._state is PlaybackState.RUNNING:
            return "Running"
        if self._stepping:
            return "Stepping"
        return self._state.value.title()

    @property
    def algorithm(self) -> str:
        return self._algorithm

    @property
    def speed(self) -> int:
        return self._speed

    @property
    def delay_ms(self) -> int:
        """Delay before the next tick, sampled from the current speed."""
        return delay_from_speed(self._speed)

    @property
    def replay(self) -> ReplayState:
        return self._replay

    @property
    def event_log(self) -> Optional[EventLog]:
        return self._replay.log

    @property
    def values(self) -> List[Any]:
        return self._replay.values

    @property
    def original(self) -> List[Any]:
        return list(self._replay.original)

    def frame(self, highlight: Optional[Highlight] = None) -> Frame:
        rs = self._replay
        return Frame(
            values=tuple(rs.values),
            highlight=highlight or rs.highlight(),
            comparisons=rs.comparisons,
            writes=rs.writes,
            cursor=rs.cursor,
            total=rs.total,
            label=self.label,
            algorithm=self._algorithm,
        )

    # ------------------------------------------------------------ transitions

    def start(self) -> bool:
        """IDLE -> RUNNING. From PAUSED this is a resume."""
        if self._state is PlaybackState.PAUSED:
            return self.resume()
        if self._state is not PlaybackState.IDLE:
            return self._reject("start")
        if self._replay.log is None:
            self._rebuild(self._replay.original)
        self._enter(PlaybackState.RUNNING)
        return True

    def pause(self) -> bool:
        if self._state is not PlaybackState.RUNNING:
            return self._reject("pause")
        self._enter(PlaybackState.PAUSED)
        return True

    def resume(self) -> bool:
        if self._state is not PlaybackState.PAUSED:
            return self._reject("resume")
        self._enter(PlaybackState.RUNNING)
        return True

    def toggle_pause(self) -> bool:
        if self._state is PlaybackState.RUNNING:
            return self.pause()
        return self.resume()

    def tick(self) -> Optional[Highlight]:
        """
        Apply one event if RUNNING.

        This is the scheduling primitive: timers, the run() loops and tests
        all advance playback through it.

        Returns:
            Highlight for the applied event, or None if not RUNNING
        """
        if self._state is not PlaybackState.RUNNING:
            return None
        return self._advance()

    def step(self) -> Optional[Highlight]:
        """
        Apply exactly one event from IDLE or PAUSED.

        Returns:
            Highlight for the applied event, or None if rejected
        """
        if self._state not in (PlaybackState.IDLE, PlaybackState.PAUSED):
            self._reject("step")
            return None
        if self._replay.log is None:
            self._rebuild(self._replay.original)
        self._stepping = True
        return self._advance()

    def reset(self) -> bool:
        """Rewind to the original sequence. Rejected while RUNNING."""
        if self._state is PlaybackState.RUNNING:
            return self._reject("reset")
        self._replay.reset()
        self._enter(PlaybackState.IDLE)
        return True

    def select_algorithm(self, name: str) -> bool:
        """
        Switch algorithm, rebuilding the log for the current input.

        Raises:
            UnknownAlgorithmError: If name is not registered
        """
        if self._state is PlaybackState.RUNNING:
            return self._reject("select_algorithm")
        self._algorithm = get_runner(name).name
        self._rebuild(self._replay.original)
        return True

    def load(self, values: Sequence[Any]) -> bool:
        """Replace the input sequence and rebuild."""
        if self._state is PlaybackState.RUNNING:
            return self._reject("load")
        self._rebuild(values)
        return True

    def regenerate(self, size: Optional[int] = None) -> bool:
        """Pull a fresh sequence from the random source and rebuild."""
        if self._state is PlaybackState.RUNNING:
            return self._reject("regenerate")
        if size is not None:
            self._size = size
        self._rebuild(self._random_source.generate(self._size))
        return True

    def set_speed(self, speed: int) -> bool:
        """Legal in every state; takes effect on the next tick."""
        self._speed = clamp_speed(speed)
        return True

    # ---------------------------------------------------------------- driving

    def run(self, sleep: Callable[[float], Any] = time.sleep) -> int:
        """
        Tick until the controller leaves RUNNING.

        sleep is called between ticks with the live delay in seconds. It is
        the only suspension point, and may itself pause or reset playback.

        Returns:
            Number of events applied
        """
        applied = 0
        while self._state is PlaybackState.RUNNING:
            self.tick()
            applied += 1
            if self._state is PlaybackState.RUNNING:
                sleep(self.delay_ms / 1000.0)
        return applied

    async def run_async(self) -> int:
        """asyncio variant of run()."""
        applied = 0
        while self._state is PlaybackState.RUNNING:
            self.tick()
            applied += 1
            if self._state is PlaybackState.RUNNING:
                await asyncio.sleep(self.delay_ms / 1000.0)
        return applied

    def play(self, sleep: Callable[[float], Any] = time.sleep) -> int:
        """start() followed by run()."""
        if not self.start():
            return 0
        return self.run(sleep=sleep)

    def play_to_end(self) -> int:
        """Run the remaining log with no delay between ticks."""
        return self.play(sleep=lambda _seconds: None)

    # --------------------------------------------------------------- internal

    def _advance(self) -> Highlight:
        highlight = self._replay.apply_next()
        if isinstance(highlight.event, Done):
            self._state = PlaybackState.DONE
            self._stepping = False
            self._log.info(
                "Playback done: %d comparisons, %d writes",
                self._replay.comparisons,
                self._replay.writes,
            )
        self._render(highlight)
        return highlight

    def _enter(self, state: PlaybackState) -> None:
        self._log.debug("Playback %s -> %s at %d/%d", self._state.value, state.value,
                        self._replay.cursor, self._replay.total)
        self._state = state
        self._stepping = False
        self._render()

    def _rebuild(self, values: Sequence[Any]) -> None:
        log = get_runner(self._algorithm).generate_log(values)
        self._replay.load(values, log)
        self._state = PlaybackState.IDLE
        self._stepping = False
        self._log = get_logger(__name__, run_id=f"{log.algorithm}-{log.digest()[:12]}")
        self._log.info("Built %s log: %d events for %d values", log.algorithm, len(log), len(values))
        self._render()

    def _reject(self, op: str) -> bool:
        self._log.debug("Ignoring %s while %s", op, self._state.value)
        return False

    def _render(self, highlight: Optional[Highlight] = None) -> None:
        if self._renderer is not None:
            self._renderer.render(self.frame(highlight))
