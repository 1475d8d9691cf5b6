"""
cell.py — Cell States & Paint Modes
====================================
The closed set of states a grid cell can hold, plus the paint modes the
user can apply with a click.

Cell values are the small integers the grid is serialised with, so the
wire format (`Grid.to_dict`) and the enum never drift apart.
"""

from enum import Enum, IntEnum
from typing import Dict, Tuple


# A (row, col) pair, 0-indexed.
Coord = Tuple[int, int]


# ---------------------------------------------------------------------------
# Cell State Enum, maps 1-to-1 with the visual encoding palette
# ---------------------------------------------------------------------------
class Cell(IntEnum):
    EMPTY   = 0   # traversable, unvisited
    WALL    = 1   # impassable
    START   = 2   # search origin
    END     = 3   # search target
    VISITED = 4   # overlay: expanded during the last search
    PATH    = 5   # overlay: on the last reconstructed path

    @property
    def is_marker(self) -> bool:
        return self in (Cell.START, Cell.END)

    @property
    def is_overlay(self) -> bool:
        return self in (Cell.VISITED, Cell.PATH)


# ---------------------------------------------------------------------------
# Paint Mode: what a click on a cell does
# ---------------------------------------------------------------------------
class PaintMode(Enum):
    WALL  = "wall"
    ERASE = "erase"
    START = "start"
    END   = "end"


# text picture glyphs, used by Grid.from_text / to_text
GLYPHS: Dict[str, Cell] = {
    ".": Cell.EMPTY,
    "#": Cell.WALL,
    "S": Cell.START,
    "E": Cell.END,
    "v": Cell.VISITED,
    "*": Cell.PATH,
}

CELL_GLYPHS: Dict[Cell, str] = {cell: ch for ch, cell in GLYPHS.items()}
