"""
astar.py — A* Search
=====================
Grid A* with the Manhattan heuristic  h = |Δrow| + |Δcol|, which is
admissible and consistent on a 4-connected unit-cost grid, so the first
time the end is expanded its path is optimal.

The open set is a binary heap of (f, seq, coord).  `seq` is a running
insertion counter: equal-f entries pop in the order they were pushed.
Improving a cell's g pushes a fresh entry; the stale one is skipped
when it surfaces (lazy deletion).
"""

import heapq
from typing import Dict, List, Set, Tuple

from maze import Grid, Coord
from algorithms.result import SearchResult


# ---------------------------------------------------------------------------
# Heuristic
# ---------------------------------------------------------------------------
def manhattan(a: Coord, b: Coord) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def AStar(grid, start, end):",                # 0
    "    g[start] ← 0",                            # 1
    "    f[start] ← h(start, end)",                # 2
    "    open_set ← [(f[start], start)]",          # 3
    "    parent ← {}",                             # 4
    "    while open_set:",                         # 5
    "        cell ← open_set.pop_min_f()",         # 6
    "        expand(cell)",                        # 7
    "        if cell == end: return path",         # 8
    "        for nbr in down, up, right, left:",   # 9
    "            if wall(nbr): continue",          # 10
    "            tentative_g ← g[cell] + 1",       # 11
    "            if tentative_g < g[nbr]:",        # 12
    "                parent[nbr] ← cell",          # 13
    "                g[nbr] ← tentative_g",        # 14
    "                f[nbr] ← g[nbr] + h(nbr)",    # 15
    "                open_set.push((f[nbr], nbr))",# 16
    "    return NOT FOUND",                        # 17
]


def astar(grid: Grid, start: Coord, end: Coord) -> SearchResult:
    """
    Args:
        grid  : Read-only grid snapshot.
        start : Origin coordinate.
        end   : Target coordinate.

    Returns:
        SearchResult with an optimal path (or []) and the expansion order.
    """
    INF = float("inf")

    g_score: Dict[Coord, float] = {start: 0}
    parent:  Dict[Coord, Coord] = {}
    closed:  Set[Coord]         = set()
    visited_order: List[Coord]  = []

    seq = 0
    open_set: List[Tuple[float, int, Coord]] = [(manhattan(start, end), seq, start)]

    while open_set:
        f, _, cell = heapq.heappop(open_set)

        if cell in closed:
            continue
        if f > g_score[cell] + manhattan(cell, end):
            continue    # superseded by a cheaper push

        closed.add(cell)
        visited_order.append(cell)

        if cell == end:
            return SearchResult(path=_reconstruct(parent, end), visited_order=visited_order)

        tentative_g = g_score[cell] + 1
        for nbr in grid.neighbours(cell):
            if grid.is_wall(nbr) or nbr in closed:
                continue
            if tentative_g < g_score.get(nbr, INF):
                parent[nbr]  = cell
                g_score[nbr] = tentative_g
                seq += 1
                heapq.heappush(open_set, (tentative_g + manhattan(nbr, end), seq, nbr))

    return SearchResult(path=[], visited_order=visited_order)


# ---------------------------------------------------------------------------
# Helper
# ---------------------------------------------------------------------------
def _reconstruct(parent: Dict[Coord, Coord], end: Coord) -> List[Coord]:
    path = [end]
    cur = end
    while cur in parent:
        cur = parent[cur]
        path.append(cur)
    path.reverse()
    return path
