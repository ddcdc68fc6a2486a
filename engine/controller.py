"""
controller.py — Race Controller
=================================
The top-level object one visualizer session talks to.  It owns:

    • the active mode          ("pathfinding" or "sorting")
    • the user inputs          (grid size, wall probability, array size)
    • the current instances    (one GridConfig, one array)
    • one race per family      (PathfindingRace, SortingRace)
    • the single Ticker        that drives playback of the active race

Rules:
  - Inputs and mode are LOCKED while the active race is running;
    changing them raises InputsLockedError.
  - Changing an input while unlocked regenerates that family's instance
    immediately and resets its race to IDLE.
  - Anything that stops a race (new_race, set_mode) cancels the ticker
    BEFORE new state is set up, so two tickers never coexist.
"""

import logging
import math
import random
import time
from typing import Any, Callable, Dict, List, Optional

from algorithms import PATHFINDING, SORTING, get_algorithm
from engine.race import InputsLockedError, PathfindingRace, Race, SortingRace
from engine.scheduler import SPEED_PRESETS, TICK_PERIODS, Ticker
from problems import GridConfig, generate_array, generate_grid


log = logging.getLogger(__name__)


MODES = (PATHFINDING, SORTING)

# ---------------------------------------------------------------------------
# Input limits: values outside are clamped, not rejected
# ---------------------------------------------------------------------------
INPUT_LIMITS = {
    "grid_size":        (5, 25),
    "wall_probability": (0.0, 0.5),
    "array_size":       (10, 100),
}

DEFAULT_INPUTS = {
    "grid_size":        15,
    "wall_probability": 0.2,
    "array_size":       30,
}


def clamp_input(name: str, value) -> Any:
    lo, hi = INPUT_LIMITS[name]
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"{name} must be a finite number, got {value!r}")
    cast = float if isinstance(lo, float) else int
    return min(hi, max(lo, cast(number)))


class RaceController:
    """
    Attributes:
        mode     : Active race family.
        inputs   : Current (clamped) input values.
        grid     : GridConfig the next / current pathfinding race runs on.
        array    : Array the next / current sorting race runs on.
        races    : {family: Race}.
        ticker   : The one playback Ticker.
        speed    : Key into SPEED_PRESETS.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        clock: Callable[[], float] = time.monotonic,
        speed: str = "medium",
        **inputs,
    ):
        if speed not in SPEED_PRESETS:
            raise ValueError(f"Unknown speed preset: {speed}")

        self.rng:    random.Random   = random.Random(seed)
        self.clock:  Callable[[], float] = clock
        self.ticker: Ticker          = Ticker(clock)
        self.speed:  str             = speed
        self.mode:   str             = PATHFINDING

        self.inputs: Dict[str, Any] = dict(DEFAULT_INPUTS)
        for name, value in inputs.items():
            if name not in INPUT_LIMITS:
                raise ValueError(f"Unknown input: {name}")
            self.inputs[name] = clamp_input(name, value)

        self.races: Dict[str, Race] = {
            PATHFINDING: PathfindingRace(),
            SORTING:     SortingRace(),
        }
        self.grid:  GridConfig = self._new_grid()
        self.array: List[int]  = self._new_array()

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    @property
    def race(self) -> Race:
        """The race of the active mode."""
        return self.races[self.mode]

    @property
    def pathfinding(self) -> PathfindingRace:
        return self.races[PATHFINDING]

    @property
    def sorting(self) -> SortingRace:
        return self.races[SORTING]

    @property
    def locked(self) -> bool:
        return self.race.is_running

    # ------------------------------------------------------------------
    # Inputs & mode
    # ------------------------------------------------------------------
    def set_inputs(self, **changes) -> Dict[str, Any]:
        """Clamp and apply input changes; regenerate affected instances."""
        if self.locked:
            raise InputsLockedError("Inputs are locked while a race is running")

        for name in changes:
            if name not in INPUT_LIMITS:
                raise ValueError(f"Unknown input: {name}")

        # nothing is applied unless every value clamps
        staged = {name: clamp_input(name, value) for name, value in changes.items()}
        changed = {name for name, value in staged.items() if value != self.inputs[name]}
        self.inputs.update(staged)

        if changed & {"grid_size", "wall_probability"}:
            self.grid = self._new_grid()
            self.pathfinding.reset()
        if "array_size" in changed:
            self.array = self._new_array()
            self.sorting.reset()
        return dict(self.inputs)

    def set_mode(self, mode: str) -> None:
        if mode not in MODES:
            raise ValueError(f"Unknown mode: {mode}")
        if self.locked:
            raise InputsLockedError("Cannot switch mode while a race is running")
        if mode == self.mode:
            return
        self.ticker.cancel()
        self.mode = mode
        self._regenerate()
        log.info("Switched to %s mode", mode)

    def set_speed(self, speed: str) -> None:
        """Applies from the next start()."""
        if speed not in SPEED_PRESETS:
            raise ValueError(f"Unknown speed preset: {speed}")
        self.speed = speed

    # ------------------------------------------------------------------
    # Race lifecycle
    # ------------------------------------------------------------------
    def start(self) -> None:
        """
        Compute all four traces for the active mode and arm the ticker.
        Raises RaceInProgressError if the active race is already running.
        """
        race = self.race
        instance = self.grid if self.mode == PATHFINDING else self.array
        race.start(instance, now=self.clock())
        self.ticker.cancel()
        self.ticker.start(race.tick, self.tick_period)

    def new_race(self) -> None:
        """Stop whatever is playing and set up a fresh instance."""
        self.ticker.cancel()
        self._regenerate()

    def pump(self, now: Optional[float] = None) -> int:
        """Fire due ticks.  Returns how many fired."""
        return self.ticker.pump(now)

    @property
    def tick_period(self) -> float:
        return TICK_PERIODS[self.mode] * SPEED_PRESETS[self.speed]

    # ------------------------------------------------------------------
    # View
    # ------------------------------------------------------------------
    def state(self) -> Dict[str, Any]:
        """JSON-able view of everything the renderer needs besides traces."""
        race = self.race
        data: Dict[str, Any] = {
            "mode":    self.mode,
            "inputs":  dict(self.inputs),
            "speed":   self.speed,
            "locked":  self.locked,
            "race":    race.snapshot(),
            "results": None,
        }
        if self.mode == PATHFINDING:
            data["grid"] = self.grid.to_dict()
            winners = self.pathfinding.winners()
            if winners is not None:
                data["results"] = winners.to_dict()
        else:
            data["array"] = list(self.array)
            if self.sorting.is_complete:
                data["results"] = [
                    {"key": key, "label": get_algorithm(key).label, "seconds": seconds}
                    for key, seconds in self.sorting.rankings()
                ]
        return data

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _regenerate(self) -> None:
        if self.mode == PATHFINDING:
            self.grid = self._new_grid()
        else:
            self.array = self._new_array()
        self.race.reset()

    def _new_grid(self) -> GridConfig:
        return generate_grid(
            self.inputs["grid_size"], self.inputs["wall_probability"], rng=self.rng,
        )

    def _new_array(self) -> List[int]:
        return generate_array(self.inputs["array_size"], rng=self.rng)
