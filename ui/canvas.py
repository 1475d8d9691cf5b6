"""
canvas.py — SVG Grid Renderer
==============================
Pure rendering function: Grid → SVG string.

The renderer consumes:
  • grid   – the Grid (dimensions + cell states)
  • frame  – optionally the animation Frame just applied (gets a ring)
  • config – visual config (cell size, colors, …)

And produces an SVG string ready to inject into the DOM.

Design decisions:
  - NO mutation.  Stateless, the caller passes everything in.
  - Cell coloring is a dict lookup: Cell → hex color.
  - Every <rect> carries data-row / data-col so the page can turn a
    click into a /api/cell request.
"""

from typing import Dict, Optional

from maze import Grid, Cell
from engine import Frame


# ---------------------------------------------------------------------------
# Visual Config: color palette and dimensions
# ---------------------------------------------------------------------------
class CanvasConfig:
    bg:         str = "#0d1117"
    cell_size:  int = 28
    cell_gap:   int = 2
    radius:     int = 4
    padding:    int = 10

    cell_colors: Dict[Cell, str] = {
        Cell.EMPTY:   "#1c2128",   # dark grey
        Cell.WALL:    "#484f58",   # slate
        Cell.START:   "#10b981",   # emerald
        Cell.END:     "#f43f5e",   # rose
        Cell.VISITED: "#0ea5e9",   # cyan
        Cell.PATH:    "#f59e0b",   # amber
    }

    cell_stroke:        str = "#30363d"
    current_stroke:     str = "#e6edf3"
    current_stroke_w:   int = 2


CONFIG = CanvasConfig()


# ---------------------------------------------------------------------------
# Main Render Function
# ---------------------------------------------------------------------------
def render_grid(
    grid: Grid,
    frame: Optional[Frame] = None,
    config: CanvasConfig = CONFIG,
) -> str:
    """
    Returns an SVG string.

    Args:
        grid   : The grid to render.
        frame  : Last animation frame (its cell is outlined), or None.
        config : Visual config.
    """
    step = config.cell_size + config.cell_gap
    width  = config.padding * 2 + grid.cols * step - config.cell_gap
    height = config.padding * 2 + grid.rows * step - config.cell_gap

    svg_parts = [
        f'<svg width="{width}" height="{height}" '
        f'viewBox="0 0 {width} {height}" '
        f'xmlns="http://www.w3.org/2000/svg" style="background: {config.bg};">',
        f'<rect width="{width}" height="{height}" fill="{config.bg}"/>',
    ]

    current = frame.coord if frame else None
    for r, c in grid.coords():
        svg_parts.append(_render_cell(grid.get((r, c)), r, c, (r, c) == current, config))

    svg_parts.append("</svg>")
    return "\n".join(svg_parts)


# ---------------------------------------------------------------------------
# Cell Rendering
# ---------------------------------------------------------------------------
def _render_cell(cell: Cell, r: int, c: int, is_current: bool, config: CanvasConfig) -> str:
    step = config.cell_size + config.cell_gap
    x = config.padding + c * step
    y = config.padding + r * step

    fill = config.cell_colors.get(cell, config.cell_colors[Cell.EMPTY])
    stroke = config.current_stroke if is_current else config.cell_stroke
    stroke_width = config.current_stroke_w if is_current else 1

    return (
        f'<rect class="cell cell-{cell.name.lower()}" data-row="{r}" data-col="{c}" '
        f'x="{x}" y="{y}" width="{config.cell_size}" height="{config.cell_size}" '
        f'rx="{config.radius}" fill="{fill}" stroke="{stroke}" stroke-width="{stroke_width}">'
        f'<title>({r},{c})</title></rect>'
    )
