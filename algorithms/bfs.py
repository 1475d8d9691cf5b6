"""
bfs.py — Breadth-First Search
==============================
Grid BFS where every queue entry carries the whole path from start to
that cell, so reaching the end hands back the path with no backtrace.

  1. A cell is marked seen the moment it is ENQUEUED (no duplicates).
  2. Visitation order is recorded when a cell is DEQUEUED (expansion order).
  3. Walls are never enqueued.

All edges cost 1, so the first time the end is dequeued its path is a
shortest one by cell count.
"""

from collections import deque
from typing import Deque, List, Set

from maze import Grid, Coord
from algorithms.result import SearchResult


# ---------------------------------------------------------------------------
# Pseudocode: each string is one displayed line
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def BFS(grid, start, end):",                 # 0
    "    queue ← [[start]]",                      # 1
    "    seen ← {start}",                         # 2
    "    while queue is not empty:",              # 3
    "        path ← queue.dequeue()",             # 4
    "        cell ← last(path); expand(cell)",    # 5
    "        if cell == end: return path",        # 6
    "        for nbr in down, up, right, left:",  # 7
    "            if nbr not seen and not wall:",  # 8
    "                seen.add(nbr)",              # 9
    "                queue.enqueue(path + [nbr])",# 10
    "    return NOT FOUND",                       # 11
]


def bfs(grid: Grid, start: Coord, end: Coord) -> SearchResult:
    """
    Args:
        grid  : Read-only grid snapshot.
        start : Origin coordinate.
        end   : Target coordinate.

    Returns:
        SearchResult with the shortest path (or []) and the expansion order.
    """
    queue: Deque[List[Coord]] = deque([[start]])
    seen:  Set[Coord]         = {start}
    visited_order: List[Coord] = []

    while queue:
        path = queue.popleft()
        cell = path[-1]
        visited_order.append(cell)

        if cell == end:
            return SearchResult(path=path, visited_order=visited_order)

        for nbr in grid.neighbours(cell):
            if nbr in seen or grid.is_wall(nbr):
                continue
            seen.add(nbr)
            queue.append(path + [nbr])

    return SearchResult(path=[], visited_order=visited_order)
