"""
Shared fixtures for the race tests.

- Hand-built grids (open 5x5, walled-off target)
- Small arrays with known sorted forms
- FakeClock for driving the Ticker and races deterministically
"""

import random

import pytest

from problems import GridConfig


class FakeClock:
    """Callable clock whose time only moves when a test says so."""

    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> float:
        self.now += seconds
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def open_grid():
    """5x5 grid, no walls, corner to corner."""
    return GridConfig(rows=5, cols=5, start=(0, 0), end=(4, 4))


@pytest.fixture
def blocked_grid():
    """End at (4, 4) sealed off by walls on (3, 4) and (4, 3)."""
    return GridConfig(rows=5, cols=5, start=(0, 0), end=(4, 4), walls={(3, 4), (4, 3)})


@pytest.fixture
def detour_grid():
    """A wall column forces the path around the bottom."""
    walls = {(0, 2), (1, 2), (2, 2), (3, 2)}
    return GridConfig(rows=5, cols=5, start=(0, 0), end=(0, 4), walls=walls)


@pytest.fixture
def reversed_array():
    return [5, 4, 3, 2, 1]


@pytest.fixture
def rng():
    return random.Random(1234)
