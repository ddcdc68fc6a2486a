"""
canvas.py — SVG Quadrant Renderers
====================================
Pure rendering functions: instance + trace + cursor → SVG string.

    render_grid(config, result, explored_up_to, path_up_to)
    render_bars(steps, step_index, initial_array)

Design decisions:
  - NO mutation.  These functions are stateless; the caller passes in
    everything it needs and gets back a string.
  - Coloring is a dict lookup on a cell / bar state, resolved by a fixed
    precedence (see _cell_state / _bar_state).
  - Sorting bars only need the CURRENT step's snapshot for heights; the
    colors need the sorted / merged ranges and the latest partition seen
    up to the cursor, which are collected in one forward scan.
"""

from typing import Dict, List, Optional, Sequence, Set, Tuple

from algorithms import PathfindingResult, SortStep, StepKind
from problems import Cell, GridConfig


# ---------------------------------------------------------------------------
# Visual Config — color palette, dimensions
# ---------------------------------------------------------------------------
class CanvasConfig:
    # canvas
    width:  int = 360
    height: int = 360
    bg:     str = "#0d1117"
    gap:    int = 1

    # cell colors (state → fill)
    cell_colors: Dict[str, str] = {
        "empty":    "#0f0f0f",
        "wall":     "#4b5563",
        "start":    "#22c55e",
        "end":      "#ef4444",
        "explored": "#a855f7",
        "path":     "#facc15",
    }

    # bar colors (state → fill)
    bar_colors: Dict[str, str] = {
        "default":         "#0f0f0f",
        "comparing":       "#facc15",
        "sorted":          "#22c55e",
        "left_partition":  "#ef4444",
        "right_partition": "#3b82f6",
        "merged":          "#a855f7",
    }
    bar_stroke: str = "#30363d"


CONFIG = CanvasConfig()


def _open_svg(config: CanvasConfig, css_class: str) -> List[str]:
    return [
        f'<svg class="{css_class}" width="{config.width}" height="{config.height}" '
        f'viewBox="0 0 {config.width} {config.height}" '
        f'xmlns="http://www.w3.org/2000/svg">',
        f'<rect width="{config.width}" height="{config.height}" fill="{config.bg}"/>',
    ]


# ---------------------------------------------------------------------------
# Pathfinding grid
# ---------------------------------------------------------------------------
def render_grid(
    grid: GridConfig,
    result: Optional[PathfindingResult] = None,
    explored_up_to: int = 0,
    path_up_to: int = 0,
    config: CanvasConfig = CONFIG,
) -> str:
    """
    Returns an SVG string of the grid with the first `explored_up_to`
    explored cells and the first `path_up_to` path cells revealed.
    """
    explored: Set[Cell] = set()
    path:     Set[Cell] = set()
    if result is not None:
        explored = set(result.explored[:explored_up_to])
        path     = set(result.path[:path_up_to])

    cell_w = config.width / grid.cols
    cell_h = config.height / grid.rows

    parts = _open_svg(config, "grid")
    for r in range(grid.rows):
        for c in range(grid.cols):
            state = _cell_state((r, c), grid, explored, path)
            parts.append(
                f'<rect class="cell {state}" data-cell="{r},{c}" '
                f'x="{c * cell_w:.2f}" y="{r * cell_h:.2f}" '
                f'width="{cell_w - config.gap:.2f}" height="{cell_h - config.gap:.2f}" '
                f'fill="{config.cell_colors[state]}"/>'
            )
    parts.append("</svg>")
    return "\n".join(parts)


def _cell_state(cell: Cell, grid: GridConfig, explored: Set[Cell], path: Set[Cell]) -> str:
    if cell in path:
        return "path"
    if cell in explored:
        return "explored"
    if grid.is_wall(cell):
        return "wall"
    if cell == grid.start:
        return "start"
    if cell == grid.end:
        return "end"
    return "empty"


# ---------------------------------------------------------------------------
# Sorting bars
# ---------------------------------------------------------------------------
def render_bars(
    steps: Sequence[SortStep],
    step_index: int,
    initial_array: Sequence[int],
    config: CanvasConfig = CONFIG,
) -> str:
    """Returns an SVG bar chart of the array as of `steps[step_index]`."""
    step = steps[step_index] if 0 <= step_index < len(steps) else None
    values = list(step.array) if step is not None else list(initial_array)

    sorted_ranges: List[Tuple[int, int]] = []
    merged_ranges: List[Tuple[int, int]] = []
    partition: Optional[SortStep] = None
    for s in steps[: step_index + 1]:
        if s.kind is StepKind.SORTED:
            sorted_ranges.append((s.start, s.end))
        elif s.kind is StepKind.MERGED:
            merged_ranges.append((s.start, s.end))
        elif s.kind is StepKind.PARTITION:
            partition = s
    comparing = set(step.indices) if step is not None else set()

    parts = _open_svg(config, "bars")
    if not values:
        parts.append("</svg>")
        return "\n".join(parts)

    max_val = max(max(values), 1)
    bar_w = config.width / len(values)
    for idx, val in enumerate(values):
        state = _bar_state(idx, sorted_ranges, merged_ranges, partition, comparing)
        h = config.height * val / max_val
        parts.append(
            f'<rect class="bar {state}" data-index="{idx}" '
            f'x="{idx * bar_w:.2f}" y="{config.height - h:.2f}" '
            f'width="{max(bar_w - config.gap, 1):.2f}" height="{h:.2f}" '
            f'fill="{config.bar_colors[state]}" stroke="{config.bar_stroke}"/>'
        )
    parts.append("</svg>")
    return "\n".join(parts)


def _in_ranges(idx: int, ranges: List[Tuple[int, int]]) -> bool:
    return any(start <= idx < end for start, end in ranges)


def _bar_state(
    idx: int,
    sorted_ranges: List[Tuple[int, int]],
    merged_ranges: List[Tuple[int, int]],
    partition: Optional[SortStep],
    comparing: Set[int],
) -> str:
    if _in_ranges(idx, sorted_ranges):
        return "sorted"
    if idx in comparing:
        return "comparing"
    if partition is not None:
        # partition ranges are inclusive on both ends
        if partition.left[0] <= idx <= partition.left[1]:
            return "left_partition"
        if partition.right[0] <= idx <= partition.right[1]:
            return "right_partition"
    if _in_ranges(idx, merged_ranges):
        return "merged"
    return "default"
