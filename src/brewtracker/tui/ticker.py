"""Tick clock for the render/poll loop.

The loop waits at most `tick_rate` seconds for input before redrawing. The
reference instant rolls forward on each timeout-driven redraw, so key presses
never postpone the periodic redraw.
"""

from __future__ import annotations

import time
from typing import Callable


DEFAULT_TICK_RATE = 0.25


class TickClock:
    def __init__(
        self,
        tick_rate: float = DEFAULT_TICK_RATE,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.tick_rate = tick_rate
        self._clock = clock
        self._last_tick = clock()

    def elapsed(self) -> float:
        """Seconds since the last tick."""
        return self._clock() - self._last_tick

    def timeout(self) -> float:
        """Time left before the next tick is due, floored at zero."""
        return max(self.tick_rate - self.elapsed(), 0.0)

    def advance(self) -> None:
        """Mark a tick; the next timeout is measured from now."""
        self._last_tick = self._clock()
