"""
dfs.py — Depth-First Search
=============================
Iterative DFS with an explicit LIFO stack (no Python recursion limit
issues).

Same discovered-once rule as BFS: a cell's parent is fixed the first time
it is pushed.  The path DFS finds is therefore whatever branch it dived
into first and is NOT guaranteed shortest.  That is the point of racing
it against the others.
"""

from typing import Dict, List

from problems import Cell, GridConfig
from algorithms.grid_search import PathfindingResult, neighbours, reconstruct_path


PSEUDOCODE: List[str] = [
    "def DFS(grid, start, end):",               # 0
    "    stack ← [start]",                      # 1
    "    parent ← {}",                          # 2
    "    while stack is not empty:",            # 3
    "        cell ← stack.pop()",               # 4
    "        if cell visited: continue",        # 5
    "        mark cell visited",                # 6
    "        if cell == end: return path",      # 7
    "        for nbr in adj(cell):",            # 8
    "            if nbr not discovered:",       # 9
    "                parent[nbr] = cell",       # 10
    "                stack.push(nbr)",          # 11
    "    return NOT FOUND",                     # 12
]


def dfs(config: GridConfig) -> PathfindingResult:
    explored: List[Cell] = []
    came_from: Dict[Cell, Cell] = {}
    stack: List[Cell] = [config.start]
    visited: set = set()

    while stack:
        cell = stack.pop()
        if cell in visited:
            continue
        visited.add(cell)
        explored.append(cell)

        if cell == config.end:
            return PathfindingResult(tuple(explored), reconstruct_path(came_from, config.end))

        for nbr in neighbours(cell, config):
            if nbr not in visited and nbr not in came_from:
                came_from[nbr] = cell
                stack.append(nbr)

    return PathfindingResult(tuple(explored), ())
