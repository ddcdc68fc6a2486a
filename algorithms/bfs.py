"""
bfs.py — Breadth-First Search
==============================
Level-order search with a FIFO frontier.  Every edge costs 1 on the grid,
so the first time the target is dequeued the path is shortest by cell
count.

A cell enters the came-from map at most once ("discovered once"), which
keeps duplicates out of the queue.
"""

from collections import deque
from typing import Dict, List

from problems import Cell, GridConfig
from algorithms.grid_search import PathfindingResult, neighbours, reconstruct_path


# ---------------------------------------------------------------------------
# Pseudocode — each string is one displayed line
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def BFS(grid, start, end):",               # 0
    "    queue ← [start]",                      # 1
    "    parent ← {}",                          # 2
    "    while queue is not empty:",            # 3
    "        cell ← queue.dequeue()",           # 4
    "        if cell visited: continue",        # 5
    "        mark cell visited",                # 6
    "        if cell == end: return path",      # 7
    "        for nbr in adj(cell):",            # 8
    "            if nbr not discovered:",       # 9
    "                parent[nbr] = cell",       # 10
    "                queue.enqueue(nbr)",       # 11
    "    return NOT FOUND",                     # 12
]


def bfs(config: GridConfig) -> PathfindingResult:
    explored: List[Cell] = []
    came_from: Dict[Cell, Cell] = {}
    queue = deque([config.start])
    visited: set = set()

    while queue:
        cell = queue.popleft()
        if cell in visited:
            continue
        visited.add(cell)
        explored.append(cell)

        if cell == config.end:
            return PathfindingResult(tuple(explored), reconstruct_path(came_from, config.end))

        for nbr in neighbours(cell, config):
            if nbr not in visited and nbr not in came_from:
                came_from[nbr] = cell
                queue.append(nbr)

    return PathfindingResult(tuple(explored), ())
