"""
astar.py — A* Search
======================
Dijkstra guided by the Manhattan distance to the target:

    f(cell) = g(cell) + h(cell)

Heap entries are (f, counter, cell); ties pop in push order.  An improved
g pushes a fresh entry (lazy deletion, as in Dijkstra).

Closed cells are never reopened.  That is only correct because every grid
step costs exactly 1 and Manhattan distance is consistent on a
4-connected grid.  If weighted cells are ever introduced, closed cells
must be reopened when a cheaper route to them turns up.
"""

import heapq
from itertools import count
from typing import Dict, List, Tuple

from problems import Cell, GridConfig
from algorithms.grid_search import PathfindingResult, manhattan, neighbours, reconstruct_path


PSEUDOCODE: List[str] = [
    "def AStar(grid, start, end):",                 # 0
    "    g[start] ← 0",                             # 1
    "    open ← [(h(start), start)]",               # 2
    "    while open is not empty:",                 # 3
    "        cell ← open.pop_min()",                # 4
    "        if cell closed: continue",             # 5
    "        close cell",                           # 6
    "        if cell == end: return path",          # 7
    "        for nbr in adj(cell):",                # 8
    "            if nbr closed: continue",          # 9
    "            if g[cell] + 1 < g[nbr]:",         # 10
    "                parent[nbr] = cell",           # 11
    "                g[nbr] ← g[cell] + 1",         # 12
    "                open.push((g + h, nbr))",      # 13
    "    return NOT FOUND",                         # 14
]


def astar(config: GridConfig) -> PathfindingResult:
    end = config.end
    explored: List[Cell] = []
    came_from: Dict[Cell, Cell] = {}
    g_score: Dict[Cell, int] = {config.start: 0}

    tiebreak = count()
    open_heap: List[Tuple[int, int, Cell]] = [
        (manhattan(config.start, end), next(tiebreak), config.start)
    ]
    closed: set = set()

    while open_heap:
        _, _, cell = heapq.heappop(open_heap)
        if cell in closed:
            continue
        closed.add(cell)
        explored.append(cell)

        if cell == end:
            return PathfindingResult(tuple(explored), reconstruct_path(came_from, end))

        for nbr in neighbours(cell, config):
            if nbr in closed:
                continue
            g = g_score[cell] + 1
            old = g_score.get(nbr)
            if old is None or g < old:
                came_from[nbr] = cell
                g_score[nbr] = g
                heapq.heappush(open_heap, (g + manhattan(nbr, end), next(tiebreak), nbr))

    return PathfindingResult(tuple(explored), ())
