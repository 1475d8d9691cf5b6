"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every search the visualizer knows about.

    from algorithms import REGISTRY, get_algorithm

REGISTRY is a dict:
    {
        "bfs":   AlgoInfo(key, label, fn, pseudocode, …),
        "astar": AlgoInfo(…),
    }

Every `fn` has the same signature:  fn(grid, start, end) -> SearchResult.
Adding a search is: write the function, add one entry here.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from maze import Grid, Coord
from algorithms.result import SearchResult
from algorithms.bfs   import bfs   as _bfs,   PSEUDOCODE as _bfs_pc
from algorithms.astar import astar as _astar, PSEUDOCODE as _ast_pc


SearchFn = Callable[[Grid, Coord, Coord], SearchResult]


# ---------------------------------------------------------------------------
# AlgoInfo: metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:               str              # registry key, e.g. "bfs"
    label:             str              # human label for the selector
    fn:                SearchFn         # the search function
    pseudocode:        List[str]        # lines for the side-panel
    visit_line:        int  = -1        # pseudocode line lit during visit frames
    path_line:         int  = -1        # pseudocode line lit during path frames
    has_heuristic:     bool = False
    complexity_time:   str  = ""
    complexity_space:  str  = ""
    description:       str  = ""

    def line_for_phase(self, phase: str) -> int:
        return self.visit_line if phase == "visit" else self.path_line


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "bfs": AlgoInfo(
        key="bfs", label="BFS (Shortest path on unweighted)", fn=_bfs, pseudocode=_bfs_pc,
        visit_line=5, path_line=6,
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Explores ring by ring from the start. Shortest path by step count.",
    ),

    "astar": AlgoInfo(
        key="astar", label="A* (Heuristic search)", fn=_astar, pseudocode=_ast_pc,
        visit_line=7, path_line=8,
        has_heuristic=True,
        complexity_time="O(E log V)", complexity_space="O(V)",
        description="Expands the cell with the lowest g + Manhattan distance. Optimal and usually visits fewer cells.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "SearchResult",
    "get_algorithm",
    "list_algorithms",
]
