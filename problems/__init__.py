"""
problems/
---------
Problem instances the races run on.  Public API:

    from problems import GridConfig, Cell, generate_grid
    from problems import generate_array
"""

from problems.grid  import Cell, GridConfig, generate_grid
from problems.array import generate_array, MIN_VALUE, MAX_VALUE

__all__ = [
    "Cell",
    "GridConfig",
    "generate_grid",
    "generate_array",
    "MIN_VALUE",
    "MAX_VALUE",
]
