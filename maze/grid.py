"""
grid.py — Grid Container
=========================
Single source of truth for the maze.  The search engine, the animator
and the renderer all talk to this object.

Responsibilities:
  1. Cell lookup / mutation                 (get / set / in_bounds)
  2. Adjacency queries                      (neighbours, 4-connected)
  3. Paint actions                          (wall toggle, erase, start, end)
  4. Whole-grid actions                     (reset, randomize, resize)
  5. Overlay clearing                       (visited / path → empty)
  6. Serialisation round-trip               (to_dict / from_dict, text pictures)

Design decisions:
  - Cells live in ONE flat row-major list indexed by row * cols + col and
    are mutated in place.  No copy-per-update.
  - `on_change(coord, cell)` fires after every single-cell mutation;
    whole-grid rebuilds fire it once with coord=None.
  - Start and End default to the two opposite corners (0, 0) and
    (rows-1, cols-1).
"""

import random
from typing import Callable, Iterator, List, Optional

from maze.cell import Cell, Coord, PaintMode, GLYPHS, CELL_GLYPHS


DEFAULT_ROWS = 12
DEFAULT_COLS = 18

# UI policy bounds; the grid itself only refuses dimensions < 1
MIN_ROWS = 6
MIN_COLS = 6
MAX_ROWS = 30
MAX_COLS = 50

# down, up, right, left: fixes the tie-breaking order of both searches
DIRECTIONS = [(1, 0), (-1, 0), (0, 1), (0, -1)]

ChangeCallback = Callable[[Optional[Coord], Optional[Cell]], None]


class Grid:
    """
    Attributes:
        rows, cols : Dimensions.
        cells      : Flat row-major list of Cell values.
        on_change  : Optional callback(coord, cell) fired after mutations.
    """

    def __init__(self, rows: int = DEFAULT_ROWS, cols: int = DEFAULT_COLS,
                 on_change: Optional[ChangeCallback] = None):
        self.on_change: Optional[ChangeCallback] = on_change
        self._allocate(rows, cols)
        self._place_default_markers()

    # ==================================================================
    # CELL ACCESS
    # ==================================================================
    def in_bounds(self, coord: Coord) -> bool:
        r, c = coord
        return 0 <= r < self.rows and 0 <= c < self.cols

    def get(self, coord: Coord) -> Cell:
        return self.cells[self._index(coord)]

    def set(self, coord: Coord, cell: Cell) -> None:
        idx = self._index(coord)
        if self.cells[idx] == cell:
            return
        self.cells[idx] = cell
        self._notify(coord, cell)

    def coords(self) -> Iterator[Coord]:
        """All coordinates in row-major order."""
        for r in range(self.rows):
            for c in range(self.cols):
                yield (r, c)

    def is_wall(self, coord: Coord) -> bool:
        return self.get(coord) == Cell.WALL

    # ==================================================================
    # ADJACENCY QUERIES
    # ==================================================================
    def neighbours(self, coord: Coord) -> List[Coord]:
        """In-bounds orthogonal neighbours in down, up, right, left order."""
        r, c = coord
        result = []
        for dr, dc in DIRECTIONS:
            nxt = (r + dr, c + dc)
            if self.in_bounds(nxt):
                result.append(nxt)
        return result

    def locate(self, marker: Cell) -> Optional[Coord]:
        """First coordinate (row-major) holding `marker`, or None."""
        try:
            idx = self.cells.index(marker)
        except ValueError:
            return None
        return divmod(idx, self.cols)

    @property
    def start(self) -> Optional[Coord]:
        return self.locate(Cell.START)

    @property
    def end(self) -> Optional[Coord]:
        return self.locate(Cell.END)

    @property
    def corners(self) -> List[Coord]:
        return [(0, 0), (self.rows - 1, self.cols - 1)]

    # ==================================================================
    # PAINT
    # ==================================================================
    def paint(self, coord: Coord, mode: PaintMode) -> bool:
        """
        Apply a paint mode to one cell.  Returns True if the grid changed.

          WALL   – toggles Empty ↔ Wall, never touches Start / End
          ERASE  – forces Empty, never touches Start / End
          START  – moves the Start marker here, refused on the End cell
          END    – moves the End marker here, refused on the Start cell
        """
        cell = self.get(coord)

        if mode is PaintMode.WALL:
            if cell.is_marker:
                return False
            self.set(coord, Cell.EMPTY if cell == Cell.WALL else Cell.WALL)
            return True

        if mode is PaintMode.ERASE:
            if cell.is_marker or cell == Cell.EMPTY:
                return False
            self.set(coord, Cell.EMPTY)
            return True

        if mode is PaintMode.START:
            return self._move_marker(coord, Cell.START, blocked_by=Cell.END)

        if mode is PaintMode.END:
            return self._move_marker(coord, Cell.END, blocked_by=Cell.START)

        raise ValueError(f"Unknown paint mode: {mode!r}")

    def _move_marker(self, coord: Coord, marker: Cell, blocked_by: Cell) -> bool:
        if self.get(coord) == blocked_by:
            return False
        if self.get(coord) == marker:
            return False
        previous = self.locate(marker)
        if previous is not None:
            self.set(previous, Cell.EMPTY)
        self.set(coord, marker)
        return True

    # ==================================================================
    # OVERLAY
    # ==================================================================
    def clear_overlay(self, repair: bool = True) -> None:
        """
        Visited / Path → Empty.  With `repair`, put Start / End back on
        their default corners if either is missing.
        """
        for idx, cell in enumerate(self.cells):
            if cell.is_overlay:
                self.cells[idx] = Cell.EMPTY
                self._notify(divmod(idx, self.cols), Cell.EMPTY)
        if repair:
            top_left, bottom_right = self.corners
            if self.locate(Cell.START) is None:
                self.set(top_left, Cell.START)
            if self.locate(Cell.END) is None:
                self.set(bottom_right, Cell.END)

    def has_overlay(self) -> bool:
        return any(cell.is_overlay for cell in self.cells)

    # ==================================================================
    # WHOLE-GRID ACTIONS
    # ==================================================================
    def reset(self) -> None:
        """Blank grid, same dimensions, markers on the corners."""
        self.resize(self.rows, self.cols)

    def resize(self, rows: int, cols: int) -> None:
        self._allocate(rows, cols)
        self._place_default_markers()
        self._notify(None, None)

    def randomize(self, density: float, rng: Optional[random.Random] = None) -> None:
        """
        Sprinkle walls uniformly: each non-corner cell becomes a Wall with
        probability `density`.  Corners always end up as Start / End.
        """
        if not 0.0 <= density <= 1.0:
            raise ValueError(f"density must be in [0, 1], got {density}")
        rng = rng or random.Random()

        corners = set(self.corners)
        for idx in range(len(self.cells)):
            if divmod(idx, self.cols) in corners:
                continue
            self.cells[idx] = Cell.WALL if rng.random() < density else Cell.EMPTY
        self._place_default_markers()
        self._notify(None, None)

    def snapshot(self) -> "Grid":
        """Independent copy for a search run (no change callback)."""
        copy = Grid.__new__(Grid)
        copy.on_change = None
        copy.rows = self.rows
        copy.cols = self.cols
        copy.cells = list(self.cells)
        return copy

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def to_dict(self) -> dict:
        return {
            "rows":  self.rows,
            "cols":  self.cols,
            "cells": [
                [int(cell) for cell in self.cells[r * self.cols:(r + 1) * self.cols]]
                for r in range(self.rows)
            ],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Grid":
        rows, cols = data["rows"], data["cols"]
        cells = data.get("cells", [])
        if len(cells) != rows or any(len(row) != cols for row in cells):
            raise ValueError(f"cells do not match a {rows}x{cols} grid")
        g = cls(rows, cols)
        g.cells = [Cell(v) for row in cells for v in row]
        return g

    @classmethod
    def from_text(cls, text: str) -> "Grid":
        """
        Parse a text picture, one line per row:

            S..#
            .#..
            ...E

        `.` empty, `#` wall, `S` start, `E` end, `v` visited, `*` path.
        Markers are NOT added if the picture omits them.
        """
        lines = [ln.strip() for ln in text.strip().splitlines() if ln.strip()]
        if not lines:
            raise ValueError("empty grid picture")
        cols = len(lines[0])
        if any(len(ln) != cols for ln in lines):
            raise ValueError("grid picture rows must all have the same width")

        g = cls(len(lines), cols)
        cells: List[Cell] = []
        for ln in lines:
            for ch in ln:
                if ch not in GLYPHS:
                    raise ValueError(f"unknown grid glyph: {ch!r}")
                cells.append(GLYPHS[ch])
        g.cells = cells
        return g

    def to_text(self) -> str:
        return "\n".join(
            "".join(CELL_GLYPHS[cell] for cell in self.cells[r * self.cols:(r + 1) * self.cols])
            for r in range(self.rows)
        )

    # ==================================================================
    # UTILITY
    # ==================================================================
    def count(self, cell: Cell) -> int:
        return self.cells.count(cell)

    def _allocate(self, rows: int, cols: int) -> None:
        if rows < 1 or cols < 1:
            raise ValueError(f"grid dimensions must be positive, got {rows}x{cols}")
        self.rows:  int        = rows
        self.cols:  int        = cols
        self.cells: List[Cell] = [Cell.EMPTY] * (rows * cols)

    def _place_default_markers(self) -> None:
        top_left, bottom_right = self.corners
        self.cells[self._index(top_left)] = Cell.START
        self.cells[self._index(bottom_right)] = Cell.END

    def _index(self, coord: Coord) -> int:
        if not self.in_bounds(coord):
            raise IndexError(f"{coord} is outside a {self.rows}x{self.cols} grid")
        r, c = coord
        return r * self.cols + c

    def _notify(self, coord: Optional[Coord], cell: Optional[Cell]) -> None:
        if self.on_change:
            self.on_change(coord, cell)

    def __eq__(self, other) -> bool:
        return (
            isinstance(other, Grid)
            and self.rows == other.rows
            and self.cols == other.cols
            and self.cells == other.cells
        )

    def __repr__(self) -> str:
        return f"Grid(rows={self.rows}, cols={self.cols}, walls={self.count(Cell.WALL)})"
