"""
scheduler.py — Playback Tick Scheduler
========================================
The Ticker is the ONE timer that drives a race's playback.  It owns no
thread: the caller's event loop (here, the browser polling the Flask app)
calls pump(), and the Ticker fires its callback once for every full period
that has elapsed since the previous fire.

State machine:
    DISARMED  →  start()   →  ARMED
    ARMED     →  cancel()  →  DISARMED
    ARMED     →  callback returns False  →  DISARMED

Guarantees:
  - At most one callback is armed.  start() on an armed Ticker raises, so
    the caller must cancel() first and two timers can never coexist.
  - pump() is not re-entrant.  A callback that pumps again is a bug and
    raises RuntimeError instead of nesting ticks.
  - Ticks are atomic: each callback call runs to completion before the
    next one starts.
"""

import time
from typing import Callable, Optional


# ---------------------------------------------------------------------------
# Tick periods (seconds per tick) per race family
# ---------------------------------------------------------------------------
TICK_PERIODS = {
    "pathfinding": 0.025,
    "sorting":     0.015,
}


# ---------------------------------------------------------------------------
# Speed presets (multiplier applied to the period)
# ---------------------------------------------------------------------------
SPEED_PRESETS = {
    "slow":   4.0,
    "medium": 1.0,
    "fast":   0.5,
}


TickCallback = Callable[[float], bool]


class Ticker:
    """
    Attributes:
        period  : Seconds between ticks while armed.
        clock   : Zero-arg callable returning seconds (monotonic).
        fired   : Number of ticks fired since the last start().
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self.clock:   Callable[[], float]     = clock
        self.period:  float                   = 0.0
        self.fired:   int                     = 0

        self._callback:  Optional[TickCallback] = None
        self._last_tick: float                  = 0.0
        self._pumping:   bool                   = False

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start(self, callback: TickCallback, period: float) -> None:
        """
        Arm the ticker.  `callback(now)` is called once per elapsed period
        and returns False when it wants no more ticks.
        """
        if self._callback is not None:
            raise RuntimeError("Ticker already armed; cancel() it first.")
        if period <= 0:
            raise ValueError(f"Tick period must be positive, got {period}")
        self._callback  = callback
        self.period     = period
        self.fired      = 0
        self._last_tick = self.clock()

    def cancel(self) -> None:
        """Disarm.  Safe to call when already disarmed."""
        self._callback = None

    @property
    def armed(self) -> bool:
        return self._callback is not None

    # ------------------------------------------------------------------
    # Pump  (call this from your event loop / request handler)
    # ------------------------------------------------------------------
    def pump(self, now: Optional[float] = None) -> int:
        """
        Fire every tick that is due at `now` (defaults to the clock).
        Returns the number of ticks fired.
        """
        if self._pumping:
            raise RuntimeError("Ticker.pump() is not re-entrant.")
        if now is None:
            now = self.clock()

        fired = 0
        self._pumping = True
        try:
            while self._callback is not None and now - self._last_tick >= self.period:
                self._last_tick += self.period
                fired += 1
                self.fired += 1
                if not self._callback(self._last_tick):
                    self._callback = None
        finally:
            self._pumping = False
        return fired
