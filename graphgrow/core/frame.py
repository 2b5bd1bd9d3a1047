"""
Frame State

Immutable state describing one tick, plus the fixed-interval pacer
that caps the loop rate.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable
import time


@dataclass(frozen=True)
class FrameState:
    """
    Immutable frame information for one tick.
    """
    frame_id: int   # Monotonically increasing tick counter
    dt: float       # Delta time since last tick (seconds)
    t: float        # Total elapsed time (seconds)

    @property
    def fps(self) -> float:
        """Estimated FPS from delta time."""
        return 1.0 / max(1e-6, self.dt)


class FramePacer:
    """
    Sleeps a fixed interval at the end of every tick.

    The interval is a ceiling on the tick rate. Time spent inside the tick
    is NOT subtracted from the sleep.
    """

    def __init__(
        self,
        interval: float,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.perf_counter,
    ):
        if interval < 0:
            raise ValueError(f"Pacer interval must be >= 0, got {interval}")
        self.interval = interval
        self._sleep = sleep
        self._clock = clock
        self._start = clock()
        self._last = self._start
        self._frame_id = 0

    def begin(self) -> FrameState:
        """Stamp the start of a tick."""
        now = self._clock()
        dt = max(1e-6, now - self._last)
        self._last = now
        self._frame_id += 1
        return FrameState(frame_id=self._frame_id, dt=dt, t=now - self._start)

    def wait(self):
        """Block for the full interval."""
        self._sleep(self.interval)

    @property
    def frame_id(self) -> int:
        return self._frame_id
