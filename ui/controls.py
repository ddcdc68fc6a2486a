"""
controls.py — UI Control Panels
=================================
Every UI panel is a pure function that takes state and returns HTML.

Panels:
  • input_panel         – grid size / wall % or array size, locked while running
  • race_controls       – start / new race / mode switch buttons
  • quadrant            – one algorithm's titled SVG tile
  • race_results_panel  – winners (pathfinding) or rankings (sorting)

Design:
  - All panels are stateless render functions.
  - State is passed in as kwargs.
  - Output is raw HTML strings (no templating engine).
  - The main app stitches them together.
"""

from html import escape
from typing import Any, Dict, List, Optional

from algorithms import PATHFINDING, get_algorithm
from engine import INPUT_LIMITS


def _label(key: str) -> str:
    info = get_algorithm(key)
    return info.label if info else key


# ---------------------------------------------------------------------------
# Input Panel
# ---------------------------------------------------------------------------
def input_panel(mode: str, inputs: Dict[str, Any], locked: bool = False) -> str:
    disabled = "disabled" if locked else ""
    if mode == PATHFINDING:
        g_lo, g_hi = INPUT_LIMITS["grid_size"]
        w_lo, w_hi = INPUT_LIMITS["wall_probability"]
        fields = f"""
        <label>Grid size
          <input type="number" id="input-grid-size" min="{g_lo}" max="{g_hi}"
                 value="{inputs['grid_size']}" {disabled}>
        </label>
        <label>Wall %
          <input type="number" id="input-wall-probability" min="{w_lo}" max="{w_hi}" step="0.05"
                 value="{inputs['wall_probability']}" {disabled}>
        </label>
        """
    else:
        a_lo, a_hi = INPUT_LIMITS["array_size"]
        fields = f"""
        <label>Array size
          <input type="number" id="input-array-size" min="{a_lo}" max="{a_hi}"
                 value="{inputs['array_size']}" {disabled}>
        </label>
        """

    return f"""
    <div class="inputs">
      {fields}
    </div>
    """


# ---------------------------------------------------------------------------
# Race Controls
# ---------------------------------------------------------------------------
def race_controls(mode: str, locked: bool = False) -> str:
    disabled = "disabled" if locked else ""
    other = "Sorting Race" if mode == PATHFINDING else "Pathfinding Race"
    return f"""
    <div class="controls">
      <button id="btn-start" class="btn btn-start" {disabled}>Start</button>
      <button id="btn-new" class="btn btn-new">New Race</button>
      <button id="btn-mode" class="btn btn-mode" {disabled}>{other}</button>
    </div>
    """


# ---------------------------------------------------------------------------
# Quadrant
# ---------------------------------------------------------------------------
def quadrant(key: str, svg: str, caption: str = "") -> str:
    caption_html = f'<p class="quadrant-caption">{escape(caption)}</p>' if caption else ""
    return f"""
    <div class="quadrant" data-algo="{key}">
      <h3 class="quadrant-title">{escape(_label(key))}</h3>
      <div class="quadrant-grid-wrapper">{svg}</div>
      {caption_html}
    </div>
    """


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------
def race_results_panel(mode: str, results: Optional[Any] = None) -> str:
    """`results` is the controller state's "results" entry (None until complete)."""
    if results is None:
        return ""

    lines: List[str] = []
    if mode == PATHFINDING:
        if results["fastest"] is None:
            lines.append('<p class="result-line">No algorithm reached the target.</p>')
        else:
            lines.append(
                f'<p class="result-line"><span class="result-label">Fastest:</span> '
                f'{escape(_label(results["fastest"]))} '
                f'(explored {results["fastest_explored"]} cells)</p>'
            )
            names = ", ".join(escape(_label(k)) for k in results["shortest"])
            lines.append(
                f'<p class="result-line"><span class="result-label">Shortest path:</span> '
                f'{names} ({results["shortest_length"]} steps)</p>'
            )
    else:
        for rank, entry in enumerate(results, start=1):
            lines.append(
                f'<p class="result-line">{rank}. {escape(entry["label"])} '
                f'({entry["seconds"]:.2f}s)</p>'
            )

    return f"""
    <div class="race-results">
      {''.join(lines)}
    </div>
    """
