"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every algorithm the races know about.

    from algorithms import run_pathfinding, run_sorting, run_sort_algorithm
    from algorithms import PATHFINDING_REGISTRY, SORTING_REGISTRY, get_algorithm

Two families, each in a FIXED order.  Registry order is the order
quadrants are drawn in and the order ties are broken in, so do not
reorder entries casually.

    pathfinding : dijkstra, astar, bfs, dfs   — fn(GridConfig) -> PathfindingResult
    sorting     : bubble, selection, quick, merge — fn(array) -> Generator[SortStep]
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence

from problems import GridConfig
from algorithms.step        import SortStep, StepKind
from algorithms.grid_search import PathfindingResult

# ---------------------------------------------------------------------------
# Import all algorithm modules
# ---------------------------------------------------------------------------
from algorithms.dijkstra       import dijkstra       as _dijkstra,  PSEUDOCODE as _dij_pc
from algorithms.astar          import astar          as _astar,     PSEUDOCODE as _ast_pc
from algorithms.bfs            import bfs            as _bfs,       PSEUDOCODE as _bfs_pc
from algorithms.dfs            import dfs            as _dfs,       PSEUDOCODE as _dfs_pc
from algorithms.bubble_sort    import bubble_sort    as _bubble,    PSEUDOCODE as _bub_pc
from algorithms.selection_sort import selection_sort as _selection, PSEUDOCODE as _sel_pc
from algorithms.quick_sort     import quick_sort     as _quick,     PSEUDOCODE as _qck_pc
from algorithms.merge_sort     import merge_sort     as _merge,     PSEUDOCODE as _mrg_pc


PATHFINDING = "pathfinding"
SORTING     = "sorting"


class UnknownAlgorithmError(KeyError):
    """Raised when a registry key does not name an algorithm."""


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class AlgoInfo:
    key:              str              # registry key, e.g. "bfs"
    label:            str              # human label, e.g. "BFS"
    family:           str              # PATHFINDING or SORTING
    fn:               Callable         # search function / step generator
    pseudocode:       List[str]        # lines for the side-panel
    complexity_time:  str  = ""        # e.g. "O(V + E)"
    complexity_space: str  = ""        # e.g. "O(V)"
    optimal:          bool = True      # pathfinding: guaranteed shortest path?
    description:      str  = ""        # one-liner for the UI card

    def to_dict(self) -> dict:
        return {
            "key":              self.key,
            "label":            self.label,
            "family":           self.family,
            "pseudocode":       list(self.pseudocode),
            "complexity_time":  self.complexity_time,
            "complexity_space": self.complexity_space,
            "optimal":          self.optimal,
            "description":      self.description,
        }


# ---------------------------------------------------------------------------
# THE REGISTRIES
# ---------------------------------------------------------------------------
PATHFINDING_REGISTRY: Dict[str, AlgoInfo] = {

    "dijkstra": AlgoInfo(
        key="dijkstra", label="Dijkstra", family=PATHFINDING, fn=_dijkstra, pseudocode=_dij_pc,
        complexity_time="O((V + E) log V)", complexity_space="O(V)",
        description="Expands the closest cell first. Optimal on the unit-cost grid.",
    ),

    "astar": AlgoInfo(
        key="astar", label="A*", family=PATHFINDING, fn=_astar, pseudocode=_ast_pc,
        complexity_time="O((V + E) log V)", complexity_space="O(V)",
        description="Dijkstra + Manhattan heuristic. Usually explores far fewer cells.",
    ),

    "bfs": AlgoInfo(
        key="bfs", label="BFS", family=PATHFINDING, fn=_bfs, pseudocode=_bfs_pc,
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Explores layer by layer. Shortest path by cell count.",
    ),

    "dfs": AlgoInfo(
        key="dfs", label="DFS", family=PATHFINDING, fn=_dfs, pseudocode=_dfs_pc,
        complexity_time="O(V + E)", complexity_space="O(V)", optimal=False,
        description="Dives deep before backtracking. Does NOT guarantee shortest path.",
    ),
}


SORTING_REGISTRY: Dict[str, AlgoInfo] = {

    "bubble": AlgoInfo(
        key="bubble", label="Bubble Sort", family=SORTING, fn=_bubble, pseudocode=_bub_pc,
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Swaps adjacent inversions; the largest value bubbles to the end each pass.",
    ),

    "selection": AlgoInfo(
        key="selection", label="Selection Sort", family=SORTING, fn=_selection, pseudocode=_sel_pc,
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Finds the minimum of the unsorted rest and swaps it into place.",
    ),

    "quick": AlgoInfo(
        key="quick", label="Quick Sort", family=SORTING, fn=_quick, pseudocode=_qck_pc,
        complexity_time="O(n log n) avg", complexity_space="O(log n)",
        description="Lomuto partition around the last element, then recurse on both sides.",
    ),

    "merge": AlgoInfo(
        key="merge", label="Merge Sort", family=SORTING, fn=_merge, pseudocode=_mrg_pc,
        complexity_time="O(n log n)", complexity_space="O(n)",
        description="Sort both halves, then merge them through an auxiliary buffer.",
    ),
}


REGISTRY: Dict[str, AlgoInfo] = {**PATHFINDING_REGISTRY, **SORTING_REGISTRY}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def list_algorithms(family: Optional[str] = None) -> List[AlgoInfo]:
    """Return registered algorithms in registry order, optionally one family only."""
    return [a for a in REGISTRY.values() if family is None or a.family == family]


# ---------------------------------------------------------------------------
# Runners — compute complete traces eagerly
# ---------------------------------------------------------------------------
def run_pathfinding(config: GridConfig) -> Dict[str, PathfindingResult]:
    """Run all four searches on the same grid, in registry order."""
    return {key: info.fn(config) for key, info in PATHFINDING_REGISTRY.items()}


def run_sort_algorithm(key: str, array: Sequence[int]) -> List[SortStep]:
    """Exhaust one sorting generator into a list.  `array` is never mutated."""
    info = SORTING_REGISTRY.get(key)
    if info is None:
        raise UnknownAlgorithmError(key)
    return list(info.fn(array))


def run_sorting(array: Sequence[int]) -> Dict[str, List[SortStep]]:
    """Run all four sorts on the same input, in registry order."""
    return {key: run_sort_algorithm(key, array) for key in SORTING_REGISTRY}


__all__ = [
    "AlgoInfo",
    "PATHFINDING",
    "SORTING",
    "PATHFINDING_REGISTRY",
    "SORTING_REGISTRY",
    "REGISTRY",
    "PathfindingResult",
    "SortStep",
    "StepKind",
    "UnknownAlgorithmError",
    "get_algorithm",
    "list_algorithms",
    "run_pathfinding",
    "run_sort_algorithm",
    "run_sorting",
]
