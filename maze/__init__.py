"""
maze/
-----
Core data layer.  Public API:

    from maze import Grid, Cell, PaintMode, Coord
"""

from maze.cell import Cell, PaintMode, Coord
from maze.grid import (
    Grid,
    DEFAULT_ROWS, DEFAULT_COLS,
    MIN_ROWS, MIN_COLS, MAX_ROWS, MAX_COLS,
)

__all__ = [
    "Cell",      "PaintMode",   "Coord",
    "Grid",
    "DEFAULT_ROWS", "DEFAULT_COLS",
    "MIN_ROWS", "MIN_COLS", "MAX_ROWS", "MAX_COLS",
]
