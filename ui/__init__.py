"""
ui/
---
Presentation layer.

    from ui import render_grid, render_bars
    from ui import input_panel, race_controls, quadrant, race_results_panel
"""

from ui.canvas import render_grid, render_bars, CanvasConfig

from ui.controls import (
    input_panel,
    race_controls,
    quadrant,
    race_results_panel,
)

__all__ = [
    "render_grid",
    "render_bars",
    "CanvasConfig",
    "input_panel",
    "race_controls",
    "quadrant",
    "race_results_panel",
]
