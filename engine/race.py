"""
race.py — Race Playback & Results
===================================
A race runs all four algorithms of one family on the SAME input, to
completion, before anything is animated.  Playback is then a pure replay:
each tick advances every algorithm's cursor by one step.

Usage:
    race = SortingRace()
    race.start(array, now=clock())     # computes the four traces
    while race.tick(now=clock()):      # one call per scheduler tick
        ...
    race.rankings()                    # [("quick", 0.41), ("merge", 0.52), …]

State machine (per family):
    IDLE     →  start()              →  RUNNING
    RUNNING  →  (all cursors at end) →  COMPLETE
    any      →  reset()              →  IDLE

start() while RUNNING raises RaceInProgressError; it never overlaps two
sets of traces.  tick() outside RUNNING is a no-op.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Generic, List, Optional, Sequence, Tuple, TypeVar

from algorithms import (
    PATHFINDING_REGISTRY,
    SORTING_REGISTRY,
    PathfindingResult,
    SortStep,
    run_pathfinding,
    run_sorting,
)
from problems import GridConfig


log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# States & errors
# ---------------------------------------------------------------------------
class RaceState(Enum):
    IDLE     = "idle"
    RUNNING  = "running"
    COMPLETE = "complete"


class RaceError(RuntimeError):
    """Base class for race lifecycle misuse."""


class RaceInProgressError(RaceError):
    """start() was called while the race is already running."""


class InputsLockedError(RaceError):
    """Inputs or mode were changed while a race is running."""


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class PathfindingWinners:
    """
    Attributes:
        fastest          : Key of the algorithm with the fewest explored cells
                           among those that found a path (None if none did).
        fastest_explored : Its explored count.
        shortest         : Keys tied for the shortest non-empty path.
        shortest_length  : That path length in cells (0 if nothing found).
    """

    fastest:          Optional[str]   = None
    fastest_explored: int             = 0
    shortest:         Tuple[str, ...] = ()
    shortest_length:  int             = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "fastest":          self.fastest,
            "fastest_explored": self.fastest_explored,
            "shortest":         list(self.shortest),
            "shortest_length":  self.shortest_length,
        }


def pathfinding_winners(results: Dict[str, PathfindingResult]) -> PathfindingWinners:
    """Rank completed searches.  Ties go to the earlier registry entry."""
    found = [(key, results[key]) for key in PATHFINDING_REGISTRY if results[key].found]
    if not found:
        return PathfindingWinners()

    fastest_key, fastest = found[0]
    for key, res in found[1:]:
        if res.explored_count < fastest.explored_count:
            fastest_key, fastest = key, res

    min_len = min(res.path_length for _, res in found)
    shortest = tuple(key for key, res in found if res.path_length == min_len)

    return PathfindingWinners(
        fastest=fastest_key,
        fastest_explored=fastest.explored_count,
        shortest=shortest,
        shortest_length=min_len,
    )


# ---------------------------------------------------------------------------
# Race base
# ---------------------------------------------------------------------------
InstanceT = TypeVar("InstanceT")   # problem instance
TraceT    = TypeVar("TraceT")      # per-algorithm trace


class Race(Generic[InstanceT, TraceT]):
    """
    Attributes:
        family     : "pathfinding" or "sorting".
        state      : Current RaceState.
        instance   : The input every algorithm ran on (None while IDLE).
        traces     : {algo_key: trace} computed by start().
        started_at : Clock reading passed to start().
    """

    family: str = ""

    def __init__(self):
        self.state:      RaceState            = RaceState.IDLE
        self.instance:   Optional[InstanceT]  = None
        self.traces:     Dict[str, TraceT]    = {}
        self.started_at: float                = 0.0

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start(self, instance: InstanceT, now: float = 0.0) -> None:
        """Compute all traces synchronously, zero the cursors, go RUNNING."""
        if self.state is RaceState.RUNNING:
            log.warning("Rejected %s race start: a race is already running", self.family)
            raise RaceInProgressError(f"{self.family} race already running")

        self.instance   = instance
        self.traces     = self._compute(instance)
        self.started_at = now
        self._reset_cursors()
        self.state      = RaceState.RUNNING
        log.info("Started %s race (%s)", self.family, self._describe())

    def reset(self) -> None:
        """Back to IDLE, dropping traces and cursors."""
        self.state      = RaceState.IDLE
        self.instance   = None
        self.traces     = {}
        self.started_at = 0.0
        self._reset_cursors()
        log.debug("Reset %s race", self.family)

    def tick(self, now: float = 0.0) -> bool:
        """
        Advance every cursor one step.  Returns True while the race is
        still running afterwards, False once it is (or already was) over.
        """
        if self.state is not RaceState.RUNNING:
            return False
        self._advance(now)
        if self._all_done():
            self._complete()
            return False
        return True

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def is_running(self) -> bool:
        return self.state is RaceState.RUNNING

    @property
    def is_complete(self) -> bool:
        return self.state is RaceState.COMPLETE

    def snapshot(self) -> Dict[str, Any]:
        """JSON-able state for the rendering collaborator."""
        return {
            "family":  self.family,
            "state":   self.state.value,
            "cursors": self._cursors(),
        }

    # ------------------------------------------------------------------
    # Internal: subclasses fill these in
    # ------------------------------------------------------------------
    def _compute(self, instance: InstanceT) -> Dict[str, TraceT]:
        raise NotImplementedError

    def _reset_cursors(self) -> None:
        raise NotImplementedError

    def _advance(self, now: float) -> None:
        raise NotImplementedError

    def _all_done(self) -> bool:
        raise NotImplementedError

    def _cursors(self) -> Dict[str, Any]:
        raise NotImplementedError

    def _describe(self) -> str:
        return ""

    def _complete(self) -> None:
        self.state = RaceState.COMPLETE
        log.info("Completed %s race", self.family)


# ---------------------------------------------------------------------------
# Pathfinding race
# ---------------------------------------------------------------------------
class PathfindingRace(Race[GridConfig, PathfindingResult]):
    """
    Cursors per algorithm:
        explored_up_to : number of explored cells revealed so far
        path_up_to     : number of path cells revealed so far

    Each tick reveals one explored cell, or, once the explored list is
    exhausted, one path cell.
    """

    family = "pathfinding"

    def __init__(self):
        self.explored_up_to: Dict[str, int] = {}
        self.path_up_to:     Dict[str, int] = {}
        super().__init__()

    def winners(self) -> Optional[PathfindingWinners]:
        """Winners summary, or None until the race is complete."""
        if not self.is_complete:
            return None
        return pathfinding_winners(self.traces)

    # -- internal --
    def _compute(self, instance: GridConfig) -> Dict[str, PathfindingResult]:
        return run_pathfinding(instance)

    def _reset_cursors(self) -> None:
        self.explored_up_to = {key: 0 for key in PATHFINDING_REGISTRY}
        self.path_up_to     = {key: 0 for key in PATHFINDING_REGISTRY}

    def _advance(self, now: float) -> None:
        for key, res in self.traces.items():
            if self.explored_up_to[key] < len(res.explored):
                self.explored_up_to[key] += 1
            elif self.path_up_to[key] < len(res.path):
                self.path_up_to[key] += 1

    def _all_done(self) -> bool:
        return all(
            self.explored_up_to[key] >= len(res.explored)
            and self.path_up_to[key] >= len(res.path)
            for key, res in self.traces.items()
        )

    def _cursors(self) -> Dict[str, Any]:
        return {
            key: {
                "explored_up_to": self.explored_up_to.get(key, 0),
                "path_up_to":     self.path_up_to.get(key, 0),
            }
            for key in PATHFINDING_REGISTRY
        }

    def _describe(self) -> str:
        cfg = self.instance
        return f"{cfg.rows}x{cfg.cols}, {len(cfg.walls)} walls, {cfg.start} -> {cfg.end}"


# ---------------------------------------------------------------------------
# Sorting race
# ---------------------------------------------------------------------------
class SortingRace(Race[List[int], List[SortStep]]):
    """
    Cursors per algorithm:
        step_index   : index of the step currently shown

    finish_times[key] is latched (seconds since start) the first tick the
    cursor sits on the final step, and never changes afterwards.
    """

    family = "sorting"

    def __init__(self):
        self.step_index:   Dict[str, int]             = {}
        self.finish_times: Dict[str, Optional[float]] = {}
        super().__init__()

    def rankings(self) -> List[Tuple[str, float]]:
        """Finished algorithms, fastest first; ties keep registry order."""
        order = {key: pos for pos, key in enumerate(SORTING_REGISTRY)}
        finished = [(key, t) for key, t in self.finish_times.items() if t is not None]
        return sorted(finished, key=lambda kv: (kv[1], order[kv[0]]))

    def current_step(self, key: str) -> Optional[SortStep]:
        steps = self.traces.get(key) or []
        idx = self.step_index.get(key, 0)
        return steps[idx] if 0 <= idx < len(steps) else None

    # -- internal --
    def _compute(self, instance: Sequence[int]) -> Dict[str, List[SortStep]]:
        return run_sorting(list(instance))

    def _reset_cursors(self) -> None:
        self.step_index   = {key: 0 for key in SORTING_REGISTRY}
        self.finish_times = {key: None for key in SORTING_REGISTRY}

    def _advance(self, now: float) -> None:
        for key, steps in self.traces.items():
            last = len(steps) - 1
            if self.step_index[key] < last:
                self.step_index[key] += 1
            if self.step_index[key] == last and self.finish_times[key] is None:
                self.finish_times[key] = now - self.started_at

    def _all_done(self) -> bool:
        return all(
            self.step_index[key] >= len(steps) - 1 and self.finish_times[key] is not None
            for key, steps in self.traces.items()
        )

    def _cursors(self) -> Dict[str, Any]:
        return {
            key: {
                "step_index":  self.step_index.get(key, 0),
                "total_steps": len(self.traces.get(key) or []),
                "finish_time": self.finish_times.get(key),
            }
            for key in SORTING_REGISTRY
        }

    def _describe(self) -> str:
        return f"{len(self.instance)} values"
