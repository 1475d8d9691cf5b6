"""
main.py — Maze Pathfinding Visualizer Flask App
================================================
The web server that powers the visualizer.

Routes:
  GET  /                       – main UI
  GET  /api/state              – current grid + settings + metrics
  POST /api/cell               – paint one cell with the current (or given) mode
  POST /api/config/mode        – select paint mode
  POST /api/config/algo        – select search algorithm
  POST /api/config/speed       – set animation speed (1..100)
  POST /api/solve              – run the search, arm the animation
  POST /api/tick               – pull the next animation frame
  POST /api/grid/reset         – blank grid
  POST /api/grid/random        – sprinkle random walls
  POST /api/grid/clear         – clear visited / path overlay
  POST /api/grid/resize        – rebuild at a new size

State management:
  One MazeController per app, kept in `app.extensions["maze"]`.  It is
  single-user: every browser tab talks to the same grid.

Animation:
  /api/solve runs the search and returns.  The page then calls /api/tick
  in a loop, waiting the `delay_ms` each tick returns before the next.
  While a run is in progress every mutating route answers 409.
"""

import logging
from typing import Any, Dict, Optional

from flask import Blueprint, Flask, current_app, jsonify, render_template_string, request

from maze import PaintMode, DEFAULT_ROWS, DEFAULT_COLS, MIN_ROWS, MIN_COLS, MAX_ROWS, MAX_COLS
from algorithms import get_algorithm, list_algorithms
from engine import (
    MazeController,
    MazeError,
    RunInProgressError,
    MissingEndpointError,
    UnknownAlgorithmError,
    Frame,
    DEFAULT_SPEED,
    DEFAULT_DENSITY,
    DEFAULT_ALGO,
)
from ui import (
    render_grid,
    CanvasConfig,
    mode_selector,
    algorithm_selector,
    speed_control,
    action_buttons,
    status_panel,
    metrics_panel,
    algorithm_info,
    pseudocode_viewer,
)


DEFAULT_CONFIG: Dict[str, Any] = {
    "GRID_ROWS":      DEFAULT_ROWS,
    "GRID_COLS":      DEFAULT_COLS,
    "MIN_ROWS":       MIN_ROWS,
    "MIN_COLS":       MIN_COLS,
    "MAX_ROWS":       MAX_ROWS,
    "MAX_COLS":       MAX_COLS,
    "DEFAULT_SPEED":  DEFAULT_SPEED,
    "DEFAULT_ALGO":   DEFAULT_ALGO,
    "RANDOM_DENSITY": DEFAULT_DENSITY,
}


# ---------------------------------------------------------------------------
# App factory
# ---------------------------------------------------------------------------
def create_app(config: Optional[Dict[str, Any]] = None) -> Flask:
    """
    Build the app.  Settings come from DEFAULT_CONFIG, then MAZE_* env
    vars (e.g. MAZE_GRID_ROWS=20), then the `config` argument.
    """
    app = Flask(__name__)
    app.config.from_mapping(DEFAULT_CONFIG)
    app.config.from_prefixed_env("MAZE")
    if config:
        app.config.update(config)

    app.extensions["maze"] = MazeController(
        rows=app.config["GRID_ROWS"],
        cols=app.config["GRID_COLS"],
        speed=app.config["DEFAULT_SPEED"],
        algo=app.config["DEFAULT_ALGO"],
        min_rows=app.config["MIN_ROWS"],
        min_cols=app.config["MIN_COLS"],
        max_rows=app.config["MAX_ROWS"],
        max_cols=app.config["MAX_COLS"],
    )

    _register_error_handlers(app)
    app.register_blueprint(bp)
    return app


# ---------------------------------------------------------------------------
# State Helpers
# ---------------------------------------------------------------------------
def get_controller() -> MazeController:
    return current_app.extensions["maze"]


def get_payload() -> Dict[str, Any]:
    return request.get_json(silent=True) or {}


def state_response(ctrl: MazeController, **extra) -> Dict[str, Any]:
    """Everything the page needs to redraw after an action."""
    state = ctrl.state()
    state["svg"]     = render_grid(ctrl.grid)
    state["status"]  = status_panel(ctrl.mode, ctrl.grid.rows, ctrl.grid.cols, ctrl.running)
    state.update(extra)
    return state


def frame_to_dict(frame: Frame, line: int = -1) -> Dict[str, Any]:
    return {
        "line":    line,
        "index":   frame.index,
        "phase":   frame.phase,
        "row":     frame.coord[0],
        "col":     frame.coord[1],
        "cell":    frame.cell.name.lower(),
        "color":   CanvasConfig.cell_colors[frame.cell],
        "changed": frame.changed,
    }


# ---------------------------------------------------------------------------
# Error Handlers
# ---------------------------------------------------------------------------
def _register_error_handlers(app: Flask) -> None:

    @app.errorhandler(RunInProgressError)
    def _run_in_progress(err):
        app.logger.warning("rejected request to %s: %s", request.path, err)
        return jsonify({"error": str(err)}), 409

    @app.errorhandler(MissingEndpointError)
    def _missing_endpoint(err):
        ctrl = get_controller()
        return jsonify(state_response(ctrl, error=str(err))), 400

    @app.errorhandler(UnknownAlgorithmError)
    def _unknown_algo(err):
        return jsonify({"error": str(err)}), 400

    @app.errorhandler(MazeError)
    def _maze_error(err):
        return jsonify({"error": str(err)}), 400


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------
bp = Blueprint("maze", __name__)


# -- Main UI --
@bp.route("/")
def index():
    ctrl = get_controller()
    algo_info = get_algorithm(ctrl.algo)
    html = render_template_string(
        INDEX_TEMPLATE,
        svg=render_grid(ctrl.grid),
        modes=mode_selector(ctrl.mode, ctrl.running),
        algo_selector=algorithm_selector(list_algorithms(), ctrl.algo, ctrl.running),
        speed=speed_control(ctrl.speed, ctrl.running),
        actions=action_buttons(ctrl.running, ctrl.grid.rows, ctrl.grid.cols),
        status=status_panel(ctrl.mode, ctrl.grid.rows, ctrl.grid.cols, ctrl.running),
        metrics=metrics_panel(ctrl.metrics),
        algo_info=algorithm_info(algo_info),
        pseudocode=pseudocode_viewer(algo_info.pseudocode, algo_label=algo_info.label),
    )
    return html


@bp.route("/api/state", methods=["GET"])
def api_state():
    return jsonify(state_response(get_controller()))


# -- Painting --
@bp.route("/api/cell", methods=["POST"])
def api_cell():
    ctrl = get_controller()
    data = get_payload()
    try:
        coord = (int(data["row"]), int(data["col"]))
        mode = PaintMode(data["mode"]) if data.get("mode") else None
    except (KeyError, TypeError, ValueError) as e:
        return jsonify({"error": f"Bad cell request: {e}"}), 400

    if not ctrl.grid.in_bounds(coord):
        return jsonify({"error": f"Cell {coord} is outside the grid"}), 400

    changed = ctrl.paint(coord, mode)
    return jsonify(state_response(ctrl, changed=changed))


# -- Config Changes --
@bp.route("/api/config/mode", methods=["POST"])
def api_config_mode():
    ctrl = get_controller()
    try:
        ctrl.set_mode(get_payload().get("mode", "wall"))
    except ValueError as e:
        return jsonify({"error": str(e)}), 400
    return jsonify(state_response(ctrl))


@bp.route("/api/config/algo", methods=["POST"])
def api_config_algo():
    ctrl = get_controller()
    algo_key = ctrl.set_algo(get_payload().get("algo_key", DEFAULT_ALGO))
    algo_info = get_algorithm(algo_key)
    return jsonify(state_response(
        ctrl,
        algo_info=algorithm_info(algo_info),
        pseudocode=pseudocode_viewer(algo_info.pseudocode, algo_label=algo_info.label),
    ))


@bp.route("/api/config/speed", methods=["POST"])
def api_config_speed():
    ctrl = get_controller()
    try:
        ctrl.set_speed(int(get_payload().get("speed", DEFAULT_SPEED)))
    except (TypeError, ValueError):
        return jsonify({"error": "Speed must be an integer between 1 and 100"}), 400
    return jsonify(state_response(ctrl))


# -- Solve & Animate --
@bp.route("/api/solve", methods=["POST"])
def api_solve():
    ctrl = get_controller()
    animator = ctrl.solve()
    return jsonify(state_response(
        ctrl,
        total_frames=animator.total_frames,
        visit_delay_ms=animator.visit_delay_ms,
        path_delay_ms=animator.path_delay_ms,
    ))


@bp.route("/api/tick", methods=["POST"])
def api_tick():
    ctrl = get_controller()
    frame = ctrl.advance()
    if frame is not None:
        # cheap response: the page patches one cell
        return jsonify({
            "frame":    frame_to_dict(frame, get_algorithm(ctrl.algo).line_for_phase(frame.phase)),
            "delay_ms": frame.delay_ms,
            "running":  True,
            "metrics":  ctrl.metrics.to_dict(),
        })
    return jsonify(state_response(ctrl, frame=None, delay_ms=0, alert=ctrl.pop_notice()))


# -- Grid Actions --
@bp.route("/api/grid/reset", methods=["POST"])
def api_grid_reset():
    ctrl = get_controller()
    ctrl.reset()
    return jsonify(state_response(ctrl))


@bp.route("/api/grid/random", methods=["POST"])
def api_grid_random():
    ctrl = get_controller()
    data = get_payload()
    try:
        density = float(data.get("density", current_app.config["RANDOM_DENSITY"]))
        ctrl.randomize(density, seed=data.get("seed"))
    except (TypeError, ValueError) as e:
        return jsonify({"error": str(e)}), 400
    return jsonify(state_response(ctrl))


@bp.route("/api/grid/clear", methods=["POST"])
def api_grid_clear():
    ctrl = get_controller()
    ctrl.clear_overlay()
    return jsonify(state_response(ctrl))


@bp.route("/api/grid/resize", methods=["POST"])
def api_grid_resize():
    ctrl = get_controller()
    data = get_payload()
    resized = ctrl.resize(data.get("rows"), data.get("cols"))
    if not resized:
        current_app.logger.info("resize to %r x %r ignored", data.get("rows"), data.get("cols"))
    return jsonify(state_response(ctrl, resized=resized))



# ---------------------------------------------------------------------------
# HTML Template
# ---------------------------------------------------------------------------
INDEX_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Maze Pathfinding Visualizer</title>
  <link rel="preconnect" href="https://fonts.googleapis.com">
  <link rel="preconnect" href="https://fonts.gstatic.com" crossorigin>
  <link href="https://fonts.googleapis.com/css2?family=JetBrains+Mono:wght@400;500;700&family=DM+Sans:wght@400;500;700&display=swap" rel="stylesheet">
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
      --accent-teal: #06b6d4;
      --accent-emerald: #10b981;
      --accent-rose: #f43f5e;
      --glow-cyan: rgba(14, 165, 233, 0.4);
    }

    body {
      font-family: 'DM Sans', -apple-system, BlinkMacSystemFont, sans-serif;
      background: var(--bg-darker);
      color: var(--text-primary);
      display: flex;
      height: 100vh;
      overflow: hidden;
    }

    /* Sidebar */
    #sidebar {
      width: 340px;
      background: linear-gradient(180deg, var(--bg-dark) 0%, var(--bg-darker) 100%);
      border-right: 1px solid var(--border);
      overflow-y: auto;
      padding: 24px 16px;
    }

    /* Main area */
    #main {
      flex: 1;
      display: flex;
      flex-direction: column;
      overflow: auto;
    }

    header { text-align: center; padding: 20px; }
    header p { color: var(--text-secondary); margin-top: 6px; }

    #canvas-container {
      flex: 1;
      display: flex;
      align-items: center;
      justify-content: center;
      padding: 20px;
    }

    #canvas-svg rect.cell { cursor: pointer; }

    #bottom-panel {
      display: grid;
      grid-template-columns: 1fr 1fr;
      gap: 20px;
      padding: 20px;
      background: var(--bg-dark);
      border-top: 1px solid var(--border);
    }

    .code-block {
      background: var(--bg-darker);
      border: 1px solid var(--border);
      border-radius: 8px;
      padding: 16px;
      font-family: 'JetBrains Mono', 'Courier New', monospace;
      font-size: 13px;
      line-height: 1.6;
      white-space: pre;
    }

    .code-line { padding: 2px 10px; border-radius: 4px; }
    .code-line.highlight {
      background: linear-gradient(90deg, rgba(6, 182, 212, 0.15) 0%, transparent 100%);
      border-left: 3px solid var(--accent-cyan);
      padding-left: 7px;
    }
    .algo-description { font-size: 13px; color: var(--text-secondary); margin-bottom: 10px; }

    .info-row { display: flex; justify-content: space-between; gap: 12px; font-size: 14px; }
    .status-solving { color: var(--accent-rose); }
    .status-idle { color: var(--accent-emerald); }

    /* Panels */
    .panel {
      background: var(--bg-panel);
      border: 1px solid var(--border);
      border-radius: 12px;
      padding: 18px;
      margin-bottom: 16px;
    }

    .panel h3 {
      font-size: 13px;
      font-weight: 700;
      margin-bottom: 14px;
      text-transform: uppercase;
      letter-spacing: 0.5px;
    }

    /* Buttons */
    .button-row { display: flex; flex-wrap: wrap; gap: 8px; margin: 8px 0; }

    button {
      background: linear-gradient(135deg, var(--accent-cyan), var(--accent-teal));
      color: #fff;
      border: none;
      padding: 10px 16px;
      border-radius: 8px;
      cursor: pointer;
      font-size: 13px;
      font-weight: 600;
      font-family: 'DM Sans', sans-serif;
    }

    button[disabled], select[disabled], input[disabled] { opacity: 0.5; cursor: not-allowed; }
    button.mode-btn.active { outline: 2px solid var(--text-primary); }
    .btn-primary { background: linear-gradient(135deg, var(--accent-emerald), #059669); width: 100%; }

    select, input[type="number"], input[type="range"] {
      width: 100%;
      padding: 8px 10px;
      margin: 6px 0;
      background: var(--bg-darker);
      border: 1px solid var(--border);
      border-radius: 8px;
      color: var(--text-primary);
    }

    label { display: block; margin: 8px 0 4px; font-size: 12px; color: var(--text-secondary); }

    table { width: 100%; font-size: 13px; }
    table td:last-child { text-align: right; color: var(--accent-cyan); font-family: 'JetBrains Mono', monospace; }
  </style>
</head>
<body>
  <div id="sidebar">
    <div id="modes">{{ modes|safe }}</div>
    <div id="algo">{{ algo_selector|safe }}</div>
    <div id="algo-info">{{ algo_info|safe }}</div>
    <div id="speed">{{ speed|safe }}</div>
    <div id="actions">{{ actions|safe }}</div>
    <div id="metrics">{{ metrics|safe }}</div>
  </div>

  <div id="main">
    <header>
      <h1>🌀 Maze Pathfinding Visualizer</h1>
      <p>Draw walls, set start/end, choose an algorithm, and click Solve.</p>
    </header>
    <div id="canvas-container">
      <div id="canvas-svg">{{ svg|safe }}</div>
    </div>

    <div id="bottom-panel">
      <div id="status">{{ status|safe }}</div>
      <div id="pseudocode">{{ pseudocode|safe }}</div>
    </div>
  </div>

  <script>
    async function post(url, data) {
      const res = await fetch(url, {
        method: 'POST',
        headers: {'Content-Type': 'application/json'},
        body: JSON.stringify(data || {}),
      });
      return await res.json();
    }

    function setRunning(running) {
      document.querySelectorAll('#sidebar button, #sidebar select, #sidebar input')
        .forEach(el => { el.disabled = running; });
    }

    function showMetrics(m) {
      if (!m) return;
      document.getElementById('m-visited').textContent = m.visited;
      document.getElementById('m-pathlen').textContent = m.pathLen;
      document.getElementById('m-time').textContent = m.timeMs + ' ms';
    }

    function apply(data) {
      if (data.svg) document.getElementById('canvas-svg').innerHTML = data.svg;
      if (data.status) document.getElementById('status').innerHTML = data.status;
      if (data.pseudocode) document.getElementById('pseudocode').innerHTML = data.pseudocode;
      if (data.algo_info) document.getElementById('algo-info').innerHTML = data.algo_info;
      showMetrics(data.metrics);
      if (data.running !== undefined) setRunning(data.running);
      if (data.mode) {
        document.querySelectorAll('.mode-btn').forEach(b => {
          b.classList.toggle('active', b.dataset.mode === data.mode);
        });
      }
      if (data.error) alert(data.error);
    }

    function highlightLine(line) {
      document.querySelectorAll('.code-line').forEach(el => {
        el.classList.toggle('highlight', +el.dataset.line === line);
      });
    }

    function patchCell(f) {
      const sel = 'rect.cell[data-row="' + f.row + '"][data-col="' + f.col + '"]';
      const rect = document.querySelector(sel);
      if (rect) rect.setAttribute('fill', f.color);
    }

    async function animate() {
      const data = await post('/api/tick');
      if (data.frame) {
        patchCell(data.frame);
        highlightLine(data.frame.line);
        showMetrics(data.metrics);
        setTimeout(animate, data.delay_ms);
        return;
      }
      highlightLine(-1);
      apply(data);
      if (data.alert) alert(data.alert);
    }

    // Grid clicks
    document.getElementById('canvas-svg').addEventListener('click', async (e) => {
      const rect = e.target.closest('rect.cell');
      if (!rect) return;
      apply(await post('/api/cell', {row: +rect.dataset.row, col: +rect.dataset.col}));
    });

    // Paint mode
    document.querySelectorAll('.mode-btn').forEach(btn => {
      btn.addEventListener('click', async () => {
        apply(await post('/api/config/mode', {mode: btn.dataset.mode}));
      });
    });

    // Algorithm & speed
    document.getElementById('algo-selector')?.addEventListener('change', async (e) => {
      apply(await post('/api/config/algo', {algo_key: e.target.value}));
    });
    document.getElementById('speed-slider')?.addEventListener('change', async (e) => {
      document.getElementById('speed-val').textContent = e.target.value;
      apply(await post('/api/config/speed', {speed: +e.target.value}));
    });

    // Actions
    document.getElementById('btn-solve')?.addEventListener('click', async () => {
      const data = await post('/api/solve');
      apply(data);
      if (!data.error && data.running) animate();
    });
    document.getElementById('btn-random')?.addEventListener('click', async () => {
      apply(await post('/api/grid/random', {}));
    });
    document.getElementById('btn-reset')?.addEventListener('click', async () => {
      apply(await post('/api/grid/reset'));
    });
    document.getElementById('btn-clear')?.addEventListener('click', async () => {
      apply(await post('/api/grid/clear'));
    });
    document.getElementById('btn-resize')?.addEventListener('click', async () => {
      apply(await post('/api/grid/resize', {
        rows: document.getElementById('resize-rows').value,
        cols: document.getElementById('resize-cols').value,
      }));
    });
  </script>
</body>
</html>
"""


app = create_app()


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(name)s - %(message)s")
    print("=" * 60)
    print("  Maze Pathfinding Visualizer")
    print("  Starting Flask server...")
    print("  Open http://localhost:5000")
    print("=" * 60)
    app.run(debug=True, host="0.0.0.0", port=5000)
