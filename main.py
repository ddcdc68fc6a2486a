"""
main.py — Algorithm Race Flask App
====================================
The web server that powers the race visualizer.

Routes:
  GET  /                  – main UI
  GET  /api/algorithms    – registry cards for both families
  GET  /api/state         – pump due ticks, return state + rendered quadrants
  POST /api/inputs        – change grid size / wall % / array size
  POST /api/mode          – switch between pathfinding and sorting
  POST /api/speed         – playback speed preset for the next race
  POST /api/start         – compute all four traces and start playback
  POST /api/new_race      – stop playback, fresh instance

State management:
  Each browser session holds only a random id in the Flask session.
  The id maps to one in-process RaceController (traces carry full array
  snapshots, far too big for a cookie).  Playback is cooperative: the
  page polls /api/state and every poll fires the ticks that fell due
  since the last one, so the dev server runs single-threaded.

Configuration (environment, prefix ALGORACE_):
  ALGORACE_SECRET_KEY   – session signing key (random per process if unset)
  ALGORACE_SPEED        – default speed preset for new sessions
  ALGORACE_SEED         – seed new sessions' generators (reproducible races)
  ALGORACE_MAX_SESSIONS – controllers kept in memory (least recently used evicted)
"""

from flask import Flask, render_template_string, request, jsonify, session
import secrets
from collections import OrderedDict
from typing import Dict

from algorithms import PATHFINDING, PATHFINDING_REGISTRY, SORTING_REGISTRY, list_algorithms
from engine import RaceController, RaceError
from ui import (
    input_panel,
    quadrant,
    race_controls,
    race_results_panel,
    render_bars,
    render_grid,
)


app = Flask(__name__)
app.config.update(
    SECRET_KEY=secrets.token_hex(32),
    SPEED="medium",
    SEED=None,
    MAX_SESSIONS=64,
)
app.config.from_prefixed_env("ALGORACE")

# least recently used first
_controllers: "OrderedDict[str, RaceController]" = OrderedDict()


# ---------------------------------------------------------------------------
# Session State Helpers
# ---------------------------------------------------------------------------
def get_controller() -> RaceController:
    """
    Return this session's controller, creating one on first use.
    At most MAX_SESSIONS controllers are kept; the least recently used
    one is dropped to make room.
    """
    sid = session.get("sid")
    if sid is not None and sid in _controllers:
        _controllers.move_to_end(sid)
        return _controllers[sid]

    sid = secrets.token_hex(8)
    session["sid"] = sid
    _controllers[sid] = RaceController(
        seed=app.config["SEED"],
        speed=app.config["SPEED"],
    )
    app.logger.info("New race session %s", sid)
    while len(_controllers) > max(1, app.config["MAX_SESSIONS"]):
        evicted, _ = _controllers.popitem(last=False)
        app.logger.info("Evicted idle race session %s", evicted)
    return _controllers[sid]


def render_quadrants(ctl: RaceController) -> Dict[str, str]:
    """One titled SVG tile per algorithm of the active mode."""
    tiles = {}
    if ctl.mode == PATHFINDING:
        race = ctl.pathfinding
        for key in PATHFINDING_REGISTRY:
            result = race.traces.get(key)
            explored = race.explored_up_to.get(key, 0)
            path = race.path_up_to.get(key, 0)
            svg = render_grid(ctl.grid, result, explored, path)
            caption = f"explored {explored}" + (f" · path {path}" if path else "")
            tiles[key] = quadrant(key, svg, caption if result else "")
    else:
        race = ctl.sorting
        for key in SORTING_REGISTRY:
            steps = race.traces.get(key) or []
            idx = race.step_index.get(key, 0)
            svg = render_bars(steps, idx, ctl.array)
            caption = f"step {idx + 1} / {len(steps)}" if steps else ""
            tiles[key] = quadrant(key, svg, caption)
    return tiles


def state_payload(ctl: RaceController) -> dict:
    state = ctl.state()
    state["html"] = {
        "inputs":    input_panel(ctl.mode, ctl.inputs, ctl.locked),
        "controls":  race_controls(ctl.mode, ctl.locked),
        "quadrants": render_quadrants(ctl),
        "results":   race_results_panel(ctl.mode, state["results"]),
    }
    return state


def json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def error(message: str, status: int):
    return jsonify({"error": message}), status


# ---------------------------------------------------------------------------
# Main UI Route
# ---------------------------------------------------------------------------
@app.route("/")
def index():
    ctl = get_controller()
    payload = state_payload(ctl)
    html = payload["html"]
    return render_template_string(
        INDEX_TEMPLATE,
        inputs=html["inputs"],
        controls=html["controls"],
        quadrants="".join(html["quadrants"].values()),
        results=html["results"],
    )


# ---------------------------------------------------------------------------
# API: Registry & State
# ---------------------------------------------------------------------------
@app.route("/api/algorithms")
def api_algorithms():
    return jsonify([info.to_dict() for info in list_algorithms()])


@app.route("/api/state")
def api_state():
    ctl = get_controller()
    ctl.pump()
    return jsonify(state_payload(ctl))


# ---------------------------------------------------------------------------
# API: Config Changes
# ---------------------------------------------------------------------------
@app.route("/api/inputs", methods=["POST"])
def api_inputs():
    ctl = get_controller()
    data = json_body()
    try:
        ctl.set_inputs(**data)
    except RaceError as e:
        return error(str(e), 409)
    except (TypeError, ValueError) as e:
        return error(str(e), 400)
    return jsonify(state_payload(ctl))


@app.route("/api/mode", methods=["POST"])
def api_mode():
    ctl = get_controller()
    data = json_body()
    try:
        ctl.set_mode(data.get("mode", ""))
    except RaceError as e:
        return error(str(e), 409)
    except ValueError as e:
        return error(str(e), 400)
    return jsonify(state_payload(ctl))


@app.route("/api/speed", methods=["POST"])
def api_speed():
    ctl = get_controller()
    data = json_body()
    try:
        ctl.set_speed(data.get("speed", ""))
    except ValueError as e:
        return error(str(e), 400)
    return jsonify({"speed": ctl.speed})


# ---------------------------------------------------------------------------
# API: Race Lifecycle
# ---------------------------------------------------------------------------
@app.route("/api/start", methods=["POST"])
def api_start():
    ctl = get_controller()
    try:
        ctl.start()
    except RaceError as e:
        return error(str(e), 409)
    return jsonify(state_payload(ctl))


@app.route("/api/new_race", methods=["POST"])
def api_new_race():
    ctl = get_controller()
    ctl.new_race()
    return jsonify(state_payload(ctl))


# ---------------------------------------------------------------------------
# HTML Template
# ---------------------------------------------------------------------------
INDEX_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Algorithm Race</title>
  <style>
    * { margin: 0; padding: 0; box-sizing: border-box; }

    :root {
      --bg-dark: #0d1117;
      --bg-darker: #010409;
      --bg-panel: #161b22;
      --border: #30363d;
      --text-primary: #e6edf3;
      --text-secondary: #7d8590;
      --accent-cyan: #0ea5e9;
      --accent-emerald: #10b981;
      --accent-amber: #f59e0b;
    }

    body {
      font-family: -apple-system, BlinkMacSystemFont, sans-serif;
      background: var(--bg-darker);
      color: var(--text-primary);
      min-height: 100vh;
    }

    .header {
      display: flex;
      flex-wrap: wrap;
      align-items: center;
      gap: 24px;
      padding: 16px 24px;
      background: var(--bg-dark);
      border-bottom: 1px solid var(--border);
    }
    .header h1 { font-size: 20px; }

    .inputs, .controls { display: flex; gap: 12px; align-items: center; }
    .inputs label { font-size: 13px; color: var(--text-secondary); }
    .inputs input {
      width: 72px;
      margin-left: 6px;
      background: var(--bg-panel);
      color: var(--text-primary);
      border: 1px solid var(--border);
      border-radius: 6px;
      padding: 4px 6px;
    }

    .btn {
      padding: 8px 14px;
      border-radius: 8px;
      border: 1px solid var(--border);
      background: var(--bg-panel);
      color: var(--text-primary);
      cursor: pointer;
    }
    .btn:disabled { opacity: 0.4; cursor: not-allowed; }
    .btn-start { border-color: var(--accent-emerald); }
    .btn-new { border-color: var(--accent-cyan); }
    .btn-mode { border-color: var(--accent-amber); }

    .race-results {
      margin: 12px 24px 0;
      padding: 12px 16px;
      background: var(--bg-panel);
      border: 1px solid var(--border);
      border-radius: 10px;
    }
    .result-line { font-size: 14px; line-height: 1.6; }
    .result-label { color: var(--accent-amber); font-weight: 700; }

    #quadrants {
      display: grid;
      grid-template-columns: repeat(2, minmax(0, 1fr));
      gap: 16px;
      padding: 16px 24px;
    }
    .quadrant {
      background: var(--bg-panel);
      border: 1px solid var(--border);
      border-radius: 12px;
      padding: 12px;
    }
    .quadrant-title { font-size: 14px; margin-bottom: 8px; }
    .quadrant-grid-wrapper svg { width: 100%; height: auto; display: block; }
    .quadrant-caption { font-size: 12px; color: var(--text-secondary); margin-top: 6px; }
  </style>
</head>
<body>
  <div class="header">
    <h1>Algorithm Race</h1>
    <div id="inputs">{{ inputs|safe }}</div>
    <div id="controls">{{ controls|safe }}</div>
  </div>

  <div id="results">{{ results|safe }}</div>
  <div id="quadrants">{{ quadrants|safe }}</div>

  <script>
    const POLL_MS = 50;
    let polling = null;

    async function post(url, data) {
      const res = await fetch(url, {
        method: 'POST',
        headers: {'Content-Type': 'application/json'},
        body: JSON.stringify(data || {}),
      });
      return await res.json();
    }

    function render(state) {
      if (!state || state.error) return;
      document.getElementById('inputs').innerHTML = state.html.inputs;
      document.getElementById('controls').innerHTML = state.html.controls;
      document.getElementById('results').innerHTML = state.html.results;
      document.getElementById('quadrants').innerHTML = Object.values(state.html.quadrants).join('');
      if (state.race.state === 'running' && !polling) {
        polling = setInterval(poll, POLL_MS);
      } else if (state.race.state !== 'running' && polling) {
        clearInterval(polling);
        polling = null;
      }
    }

    async function poll() {
      const res = await fetch('/api/state');
      render(await res.json());
    }

    document.addEventListener('click', async (e) => {
      if (e.target.id === 'btn-start') render(await post('/api/start'));
      if (e.target.id === 'btn-new') render(await post('/api/new_race'));
      if (e.target.id === 'btn-mode') {
        const current = (await (await fetch('/api/state')).json()).mode;
        render(await post('/api/mode', {mode: current === 'pathfinding' ? 'sorting' : 'pathfinding'}));
      }
    });

    document.addEventListener('change', async (e) => {
      const fields = {
        'input-grid-size': 'grid_size',
        'input-wall-probability': 'wall_probability',
        'input-array-size': 'array_size',
      };
      const name = fields[e.target.id];
      if (name) render(await post('/api/inputs', {[name]: +e.target.value}));
    });
  </script>
</body>
</html>
"""


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    print("=" * 60)
    print("  Algorithm Race")
    print("  Starting Flask server...")
    print("  Open http://localhost:5000")
    print("=" * 60)
    app.run(debug=False, threaded=False)
