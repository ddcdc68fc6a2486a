"""
grid_search.py — Shared Grid Search Pieces
============================================
Everything the four pathfinding algorithms have in common:

    • PathfindingResult  – what every search returns
    • neighbours()       – 4-directional adjacency (up, down, left, right)
    • reconstruct_path() – walk the came-from map back from the target
    • manhattan()        – A* heuristic

The neighbour order is FIXED.  Changing it changes every exploration
trace, and therefore every race result and test fixture.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Tuple

from problems import Cell, GridConfig


# up, down, left, right
DIRECTIONS: Tuple[Cell, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class PathfindingResult:
    """
    Attributes:
        explored : Cells in the order the algorithm visited them.  This is
                   both the animation timeline and the speed metric.
        path     : Cells from start to end inclusive; empty if unreachable.
    """

    explored: Tuple[Cell, ...] = field(default_factory=tuple)
    path:     Tuple[Cell, ...] = field(default_factory=tuple)

    @property
    def found(self) -> bool:
        return bool(self.path)

    @property
    def explored_count(self) -> int:
        return len(self.explored)

    @property
    def path_length(self) -> int:
        return len(self.path)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "explored": [list(c) for c in self.explored],
            "path":     [list(c) for c in self.path],
        }


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def neighbours(cell: Cell, config: GridConfig) -> Iterator[Cell]:
    """Yield walkable 4-neighbours of `cell` in up, down, left, right order."""
    row, col = cell
    for dr, dc in DIRECTIONS:
        nxt = (row + dr, col + dc)
        if config.is_walkable(nxt):
            yield nxt


def reconstruct_path(came_from: Dict[Cell, Cell], end: Cell) -> Tuple[Cell, ...]:
    path: List[Cell] = []
    cur = end
    while cur is not None:
        path.append(cur)
        cur = came_from.get(cur)
    path.reverse()
    return tuple(path)


def manhattan(a: Cell, b: Cell) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])
