"""
dijkstra.py — Dijkstra's Shortest-Path Algorithm
==================================================
Min-heap Dijkstra over the grid with every step costing 1.

Heap entries are (distance, counter, cell).  The counter is the push
order, so equal distances pop in the order they were discovered and the
exploration trace is reproducible.

Lazy deletion: a relaxation pushes a fresh entry instead of decreasing a
key; entries for already-visited cells are skipped when popped.
"""

import heapq
from itertools import count
from typing import Dict, List, Tuple

from problems import Cell, GridConfig
from algorithms.grid_search import PathfindingResult, neighbours, reconstruct_path


PSEUDOCODE: List[str] = [
    "def Dijkstra(grid, start, end):",          # 0
    "    dist[start] ← 0",                      # 1
    "    pq ← [(0, start)]",                    # 2
    "    while pq is not empty:",               # 3
    "        (d, cell) ← pq.pop_min()",         # 4
    "        if cell visited: continue",        # 5
    "        mark cell visited",                # 6
    "        if cell == end: return path",      # 7
    "        for nbr in adj(cell):",            # 8
    "            if d + 1 < dist[nbr]:",        # 9
    "                dist[nbr] ← d + 1",        # 10
    "                parent[nbr] = cell",       # 11
    "                pq.push((d + 1, nbr))",    # 12
    "    return NOT FOUND",                     # 13
]


def dijkstra(config: GridConfig) -> PathfindingResult:
    explored: List[Cell] = []
    came_from: Dict[Cell, Cell] = {}
    dist: Dict[Cell, int] = {config.start: 0}
    tiebreak = count()
    pq: List[Tuple[int, int, Cell]] = [(0, next(tiebreak), config.start)]
    visited: set = set()

    while pq:
        d, _, cell = heapq.heappop(pq)
        if cell in visited:
            continue
        visited.add(cell)
        explored.append(cell)

        if cell == config.end:
            return PathfindingResult(tuple(explored), reconstruct_path(came_from, config.end))

        for nbr in neighbours(cell, config):
            if nbr in visited:
                continue
            nd = d + 1
            old = dist.get(nbr)
            if old is None or nd < old:
                dist[nbr] = nd
                came_from[nbr] = cell
                heapq.heappush(pq, (nd, next(tiebreak), nbr))

    return PathfindingResult(tuple(explored), ())
