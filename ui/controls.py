"""
controls.py — UI Control Panels
=================================
Every UI panel is a pure function that takes state and returns HTML.

Panels:
  • mode_selector       – wall / erase / start / end paint buttons
  • algorithm_selector  – BFS / A* dropdown
  • speed_control       – 1..100 slider
  • action_buttons      – solve / random / reset / clear path / resize
  • status_panel        – mode, grid size, idle / solving
  • metrics_panel       – visited, path length, search time
  • algorithm_info      – complexity, heuristic and summary of the selection
  • pseudocode_viewer   – the selected algorithm's pseudocode, live line highlighting

Design:
  - All panels are stateless render functions.
  - State is passed in as kwargs.
  - Output is raw HTML strings (no templating engine).
  - The main app stitches them together.
"""

from html import escape
from typing import List, Optional

from maze import PaintMode, MIN_ROWS, MIN_COLS, MAX_ROWS, MAX_COLS
from algorithms import AlgoInfo
from engine import RunMetrics


MODE_LABELS = {
    PaintMode.WALL:  "🧱 Draw Walls",
    PaintMode.ERASE: "🧹 Erase",
    PaintMode.START: "🟢 Set Start",
    PaintMode.END:   "🔴 Set End",
}


def _disabled(running: bool) -> str:
    return "disabled" if running else ""


# ---------------------------------------------------------------------------
# Paint Mode Buttons
# ---------------------------------------------------------------------------
def mode_selector(mode: PaintMode = PaintMode.WALL, running: bool = False) -> str:
    buttons = []
    for m, label in MODE_LABELS.items():
        pressed = "true" if m is mode else "false"
        active = "active" if m is mode else ""
        buttons.append(
            f'<button class="mode-btn {active}" data-mode="{m.value}" '
            f'aria-pressed="{pressed}" {_disabled(running)}>{label}</button>'
        )
    return f"""
    <div class="panel mode-selector">
      <h3>🖌 Paint</h3>
      <div class="button-row">
        {''.join(buttons)}
      </div>
    </div>
    """


# ---------------------------------------------------------------------------
# Algorithm Selector
# ---------------------------------------------------------------------------
def algorithm_selector(
    algorithms: List[AlgoInfo],
    selected_key: str = "bfs",
    running: bool = False,
) -> str:
    options = []
    for algo in algorithms:
        sel = 'selected' if algo.key == selected_key else ''
        options.append(f'<option value="{algo.key}" {sel}>{escape(algo.label)}</option>')

    return f"""
    <div class="panel algorithm-selector">
      <h3>🧠 Algorithm</h3>
      <select id="algo-selector" {_disabled(running)}>
        {''.join(options)}
      </select>
    </div>
    """


# ---------------------------------------------------------------------------
# Speed Slider
# ---------------------------------------------------------------------------
def speed_control(speed: int = 50, running: bool = False) -> str:
    return f"""
    <div class="panel speed-control">
      <h3>⏩ Speed</h3>
      <input type="range" id="speed-slider" min="1" max="100" value="{speed}" {_disabled(running)}>
      <span id="speed-val">{speed}</span>
    </div>
    """


# ---------------------------------------------------------------------------
# Action Buttons
# ---------------------------------------------------------------------------
def action_buttons(running: bool = False, rows: int = 0, cols: int = 0) -> str:
    d = _disabled(running)
    return f"""
    <div class="panel action-buttons">
      <h3>⚙ Actions</h3>
      <button id="btn-solve" class="btn-primary" {d}>▶ Solve</button>
      <div class="button-row">
        <button id="btn-random" {d}>🎲 Random</button>
        <button id="btn-reset" {d}>♻ Reset</button>
        <button id="btn-clear" {d}>🧾 Clear Path</button>
      </div>
      <div class="resize-row">
        <label>Rows ({MIN_ROWS} - {MAX_ROWS}) <input type="number" id="resize-rows" value="{rows}" min="{MIN_ROWS}" max="{MAX_ROWS}"></label>
        <label>Cols ({MIN_COLS} - {MAX_COLS}) <input type="number" id="resize-cols" value="{cols}" min="{MIN_COLS}" max="{MAX_COLS}"></label>
        <button id="btn-resize" class="btn-small" {d}>🔧 Resize</button>
      </div>
    </div>
    """


# ---------------------------------------------------------------------------
# Status Row
# ---------------------------------------------------------------------------
def status_panel(mode: PaintMode, rows: int, cols: int, running: bool = False) -> str:
    status = "Solving..." if running else "Idle"
    status_cls = "solving" if running else "idle"
    return f"""
    <div class="info-row">
      <div>Mode: <b>{mode.value}</b></div>
      <div>Grid: <b>{rows} × {cols}</b></div>
      <div>Status: <b class="status-{status_cls}">{status}</b></div>
    </div>
    """


# ---------------------------------------------------------------------------
# Metrics Panel
# ---------------------------------------------------------------------------
def metrics_panel(metrics: Optional[RunMetrics] = None) -> str:
    metrics = metrics or RunMetrics()
    return f"""
    <div class="panel metrics-panel">
      <h3>📊 Metrics</h3>
      <table>
        <tr><td>Visited:</td><td><strong id="m-visited">{metrics.visited}</strong></td></tr>
        <tr><td>Path length:</td><td><strong id="m-pathlen">{metrics.path_len}</strong></td></tr>
        <tr><td>Time:</td><td><strong id="m-time">{metrics.time_ms} ms</strong></td></tr>
      </table>
    </div>
    """


# ---------------------------------------------------------------------------
# Algorithm Info Card
# ---------------------------------------------------------------------------
def algorithm_info(info: AlgoInfo) -> str:
    heuristic = "Manhattan distance" if info.has_heuristic else "none"
    return f"""
    <div class="panel algorithm-info">
      <h3>📘 {escape(info.label)}</h3>
      <p class="algo-description">{escape(info.description)}</p>
      <table>
        <tr><td>Time:</td><td>{escape(info.complexity_time)}</td></tr>
        <tr><td>Space:</td><td>{escape(info.complexity_space)}</td></tr>
        <tr><td>Heuristic:</td><td>{heuristic}</td></tr>
      </table>
    </div>
    """


# ---------------------------------------------------------------------------
# Pseudocode Viewer
# ---------------------------------------------------------------------------
def pseudocode_viewer(
    pseudocode_lines: List[str],
    current_line: int = -1,
    algo_label: str = "",
) -> str:
    if not pseudocode_lines:
        return """
        <div class="code-block">
          <div style="color: #7d8590; padding: 20px; text-align: center;">
            Select an algorithm to view pseudocode
          </div>
        </div>
        """

    lines_html = []
    for i, line in enumerate(pseudocode_lines):
        highlight = "highlight" if i == current_line else ""
        lines_html.append(f'<div class="code-line {highlight}" data-line="{i}">{escape(line)}</div>')

    return f"""
    <div class="code-block" title="{escape(algo_label)}">
      {''.join(lines_html)}
    </div>
    """
