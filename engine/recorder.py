"""
recorder.py — Search Recorder & Run Metrics
=============================================
Runs one search against a grid snapshot, times it, and keeps the
result for the animator.

Usage:
    rec = Recorder()
    metrics = rec.run("astar", grid.snapshot(), start, end)
    rec.result.visited_order, rec.result.path

Only the search itself is timed; the animation that follows is not.
"""

import logging
import time
from dataclasses import dataclass
from typing import Dict, Optional

from maze import Grid, Coord
from algorithms import get_algorithm, AlgoInfo, SearchResult
from engine.errors import UnknownAlgorithmError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Metrics dataclass: what the metrics panel renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    visited:  int = 0          # len(visited_order)
    path_len: int = 0          # cells on the path, endpoints included
    time_ms:  int = 0          # wall-clock time of the search step alone

    def to_dict(self) -> Dict[str, int]:
        return {"visited": self.visited, "pathLen": self.path_len, "timeMs": self.time_ms}


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        result  : SearchResult of the last run (None before the first run).
        metrics : RunMetrics of the last run.
    """

    def __init__(self):
        self.result:  Optional[SearchResult] = None
        self.metrics: Optional[RunMetrics]   = None
        self.algo:    Optional[AlgoInfo]     = None

    def run(self, algo_key: str, grid: Grid, start: Coord, end: Coord) -> RunMetrics:
        """Run the search to completion and compute metrics."""
        info = get_algorithm(algo_key)
        if info is None:
            raise UnknownAlgorithmError(algo_key)

        t0 = time.perf_counter()
        result = info.fn(grid, start, end)
        elapsed_ms = (time.perf_counter() - t0) * 1000

        self.algo    = info
        self.result  = result
        self.metrics = RunMetrics(
            visited=len(result.visited_order),
            path_len=0,
            time_ms=round(elapsed_ms),
        )
        logger.info(
            "%s %s -> %s: visited %d cells, path %d cells, %.2f ms",
            info.key, start, end, len(result.visited_order), len(result.path), elapsed_ms,
        )
        return self.metrics
