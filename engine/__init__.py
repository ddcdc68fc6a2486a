"""
engine/
-------
Race coordination layer.

    from engine import RaceController
    from engine import PathfindingRace, SortingRace, Ticker
"""

from engine.scheduler  import Ticker, TICK_PERIODS, SPEED_PRESETS
from engine.race       import (
    Race,
    RaceState,
    RaceError,
    RaceInProgressError,
    InputsLockedError,
    PathfindingRace,
    PathfindingWinners,
    SortingRace,
    pathfinding_winners,
)
from engine.controller import RaceController, MODES, INPUT_LIMITS, DEFAULT_INPUTS

__all__ = [
    "Ticker",
    "TICK_PERIODS",
    "SPEED_PRESETS",
    "Race",
    "RaceState",
    "RaceError",
    "RaceInProgressError",
    "InputsLockedError",
    "PathfindingRace",
    "PathfindingWinners",
    "SortingRace",
    "pathfinding_winners",
    "RaceController",
    "MODES",
    "INPUT_LIMITS",
    "DEFAULT_INPUTS",
]
