"""
grid.py — Grid Instance & Generator
=====================================
The grid every pathfinding algorithm races on.

    config = generate_grid(grid_size=15, wall_probability=0.2)
    config.is_walkable((3, 4))

Design decisions:
  - GridConfig is a frozen dataclass.  Once handed to the engine it is
    never mutated; a new race builds a new one.
  - Cells are plain (row, col) tuples and walls a frozenset of them, so
    membership tests are O(1) and the config is hashable.
  - Construction validates the invariants (bounds, start != end, start /
    end walkable).  A config that breaks them is a programming error and
    raises ValueError immediately instead of failing mid-search.
"""

import math
import random
from dataclasses import dataclass, field
from typing import FrozenSet, List, Optional, Tuple


Cell = Tuple[int, int]


# ---------------------------------------------------------------------------
# GridConfig
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class GridConfig:
    """
    Attributes:
        rows, cols : Grid dimensions (positive).
        start      : Source cell.
        end        : Target cell.
        walls      : Blocked cells.  Never contains start or end.
    """

    rows:   int
    cols:   int
    start:  Cell
    end:    Cell
    walls:  FrozenSet[Cell] = field(default_factory=frozenset)

    def __post_init__(self):
        if self.rows < 1 or self.cols < 1:
            raise ValueError(f"Grid dimensions must be positive, got {self.rows}x{self.cols}")
        # accept any iterable of cells; store a frozenset of tuples
        object.__setattr__(self, "start", tuple(self.start))
        object.__setattr__(self, "end",   tuple(self.end))
        object.__setattr__(self, "walls", frozenset(tuple(w) for w in self.walls))

        for name, cell in (("start", self.start), ("end", self.end)):
            if not self.in_bounds(cell):
                raise ValueError(f"{name} {cell} is outside the {self.rows}x{self.cols} grid")
            if cell in self.walls:
                raise ValueError(f"{name} {cell} is a wall")
        if self.start == self.end:
            raise ValueError(f"start and end must differ, both are {self.start}")

    # -- queries --
    def in_bounds(self, cell: Cell) -> bool:
        r, c = cell
        return 0 <= r < self.rows and 0 <= c < self.cols

    def is_wall(self, cell: Cell) -> bool:
        return cell in self.walls

    def is_walkable(self, cell: Cell) -> bool:
        return self.in_bounds(cell) and cell not in self.walls

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def to_dict(self) -> dict:
        return {
            "rows":  self.rows,
            "cols":  self.cols,
            "start": list(self.start),
            "end":   list(self.end),
            "walls": [list(w) for w in sorted(self.walls)],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "GridConfig":
        return cls(
            rows=data["rows"],
            cols=data["cols"],
            start=tuple(data["start"]),
            end=tuple(data["end"]),
            walls=frozenset(tuple(w) for w in data.get("walls", [])),
        )


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def generate_grid(
    grid_size: int,
    wall_probability: float,
    rng: Optional[random.Random] = None,
) -> GridConfig:
    """
    Square grid with independently placed walls.

    Start is picked from the walkable cells of the top-left quadrant,
    end from the walkable cells of the bottom-right quadrant.  Whatever
    cell is picked is cleared of walls.  Start and end are NOT guaranteed
    to be connected; unreachable instances are valid races.

    Args:
        grid_size        : Side length, at least 2 (start and end must differ).
        wall_probability : Chance in [0, 1] that a cell becomes a wall.
        rng              : Randomness source; the `random` module if None.
    """
    if grid_size < 2:
        raise ValueError(f"grid_size must be at least 2, got {grid_size}")
    if not 0.0 <= wall_probability <= 1.0:
        raise ValueError(f"wall_probability must be in [0, 1], got {wall_probability}")

    rng = rng if rng is not None else random
    n = grid_size

    walls = set()
    for r in range(n):
        for c in range(n):
            if rng.random() < wall_probability:
                walls.add((r, c))

    # -- start: top-left quadrant --
    half_up = math.ceil(n / 2)
    start_candidates: List[Cell] = [
        (r, c)
        for r in range(half_up)
        for c in range(half_up)
        if (r, c) not in walls
    ]
    start: Cell = rng.choice(start_candidates) if start_candidates else (0, 0)
    walls.discard(start)

    # -- end: bottom-right quadrant, never the start --
    half_down = n // 2
    end_candidates: List[Cell] = [
        (r, c)
        for r in range(half_down, n)
        for c in range(half_down, n)
        if (r, c) not in walls and (r, c) != start
    ]
    end: Cell = rng.choice(end_candidates) if end_candidates else (n - 1, n - 1)
    walls.discard(end)

    return GridConfig(rows=n, cols=n, start=start, end=end, walls=frozenset(walls))
