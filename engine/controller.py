"""
controller.py — Interaction Controller
=======================================
The one object that owns the application state:

    • grid      – the live Grid (the only mutable resource)
    • mode      – current PaintMode
    • algo      – selected registry key
    • speed     – slider value 1..100
    • metrics   – RunMetrics shown in the UI
    • animator  – the run in progress, if any
    • notice    – pending user-facing alert ("No path found.")

Every user action is a method here.  While a run is in progress every
action that mutates the grid or the run settings raises
RunInProgressError, so the animation is the only writer.

Thread safety:
  One controller serves every request of the app, and the Flask dev
  server runs requests on several threads.  Every public method holds
  `_lock` for its whole body, so the running check and the state change
  it protects happen as one step.
"""

import logging
import random
import threading
import time
from typing import Callable, Optional

from maze import (
    Grid, Cell, Coord, PaintMode,
    DEFAULT_ROWS, DEFAULT_COLS, MIN_ROWS, MIN_COLS, MAX_ROWS, MAX_COLS,
)
from algorithms import get_algorithm
from engine.animator import Animator, Frame, clamp_speed, delays_for_speed
from engine.errors import (
    MissingEndpointError,
    RunInProgressError,
    UnknownAlgorithmError,
    NO_PATH_MESSAGE,
)
from engine.recorder import Recorder, RunMetrics

logger = logging.getLogger(__name__)


DEFAULT_SPEED   = 50
DEFAULT_DENSITY = 0.30
DEFAULT_ALGO    = "bfs"


class MazeController:
    """
    Attributes:
        grid      : The live Grid.
        mode      : PaintMode applied by paint() when none is given.
        algo      : Registry key of the selected search.
        speed     : Animation speed, 1..100.
        metrics   : RunMetrics of the current / last run.
        animator  : Animator of the current / last run (None before any).
        notice    : Message for the UI to alert once, or None.
        revision  : Incremented on every grid change.
    """

    def __init__(
        self,
        rows: int = DEFAULT_ROWS,
        cols: int = DEFAULT_COLS,
        speed: int = DEFAULT_SPEED,
        algo: str = DEFAULT_ALGO,
        min_rows: int = MIN_ROWS,
        min_cols: int = MIN_COLS,
        max_rows: int = MAX_ROWS,
        max_cols: int = MAX_COLS,
    ):
        self._lock = threading.RLock()
        self.revision: int               = 0
        self.grid:     Grid              = Grid(rows, cols, on_change=self._on_grid_change)
        self.mode:     PaintMode         = PaintMode.WALL
        self.algo:     str               = DEFAULT_ALGO
        self.speed:    int               = clamp_speed(speed)
        self.metrics:  RunMetrics        = RunMetrics()
        self.animator: Optional[Animator] = None
        self.notice:   Optional[str]     = None
        self.min_rows: int               = min_rows
        self.min_cols: int               = min_cols
        self.max_rows: int               = max_rows
        self.max_cols: int               = max_cols
        self.set_algo(algo)

    # ------------------------------------------------------------------
    # Run state
    # ------------------------------------------------------------------
    @property
    def running(self) -> bool:
        return self.animator is not None and not self.animator.is_finished

    def _guard(self, action: str) -> None:
        if self.running:
            raise RunInProgressError(action)

    def _on_grid_change(self, coord: Optional[Coord], cell: Optional[Cell]) -> None:
        self.revision += 1

    # ------------------------------------------------------------------
    # Settings
    # ------------------------------------------------------------------
    def set_mode(self, mode) -> PaintMode:
        with self._lock:
            self._guard("change the paint mode")
            self.mode = PaintMode(mode)
            return self.mode

    def set_algo(self, key: str) -> str:
        with self._lock:
            self._guard("change the algorithm")
            if not isinstance(key, str) or get_algorithm(key) is None:
                raise UnknownAlgorithmError(key)
            self.algo = key
            return self.algo

    def set_speed(self, speed: int) -> int:
        with self._lock:
            self._guard("change the speed")
            self.speed = clamp_speed(speed)
            return self.speed

    # ------------------------------------------------------------------
    # Grid actions
    # ------------------------------------------------------------------
    def paint(self, coord: Coord, mode: Optional[PaintMode] = None) -> bool:
        with self._lock:
            self._guard("paint")
            return self.grid.paint(coord, mode or self.mode)

    def reset(self) -> None:
        with self._lock:
            self._guard("reset")
            self.grid.reset()
            self.metrics = RunMetrics()
            self.notice  = None

    def randomize(self, density: float = DEFAULT_DENSITY, seed: Optional[int] = None) -> None:
        with self._lock:
            self._guard("randomize")
            self.grid.randomize(density, random.Random(seed))

    def clear_overlay(self) -> None:
        with self._lock:
            self._guard("clear the path")
            self.grid.clear_overlay(repair=True)

    def resize(self, rows, cols) -> bool:
        """
        Rebuild the grid at a new size.  Non-numeric input, or a size
        outside min_rows..max_rows by min_cols..max_cols, is ignored and
        leaves the grid as it was; returns False in that case.
        """
        with self._lock:
            self._guard("resize")
            try:
                rows, cols = int(rows), int(cols)
            except (TypeError, ValueError):
                logger.debug("ignoring resize to %r x %r: not numeric", rows, cols)
                return False
            if rows < self.min_rows or cols < self.min_cols:
                logger.debug("ignoring resize to %d x %d: below minimum", rows, cols)
                return False
            if rows > self.max_rows or cols > self.max_cols:
                logger.debug("ignoring resize to %d x %d: above maximum", rows, cols)
                return False
            self.grid.resize(rows, cols)
            return True

    # ------------------------------------------------------------------
    # Solve & animate
    # ------------------------------------------------------------------
    def solve(self) -> Animator:
        """
        Start a run: clear the old overlay, check the endpoints, run the
        selected search on a snapshot and arm the animator.
        """
        with self._lock:
            self._guard("solve")
            self.metrics = RunMetrics()
            self.notice  = None

            self.grid.clear_overlay(repair=False)
            start = self.grid.locate(Cell.START)
            end   = self.grid.locate(Cell.END)
            if start is None or end is None:
                raise MissingEndpointError()

            recorder = Recorder()
            self.metrics  = recorder.run(self.algo, self.grid.snapshot(), start, end)
            self.animator = Animator(self.grid, recorder.result, self.speed)
            logger.debug("run armed: %d frames at speed %d", self.animator.total_frames, self.speed)
            return self.animator

    def advance(self) -> Optional[Frame]:
        """Pull one animation frame; finalises the run when none are left."""
        with self._lock:
            if self.animator is None or self.animator.is_finished:
                return None
            frame = self.animator.advance()
            if frame is None:
                self._finish()
            return frame

    def run_to_completion(self, sleep: Callable[[float], None] = time.sleep) -> RunMetrics:
        """Solve and play the whole animation synchronously."""
        self.solve()
        while True:
            frame = self.advance()
            if frame is None:
                break
            sleep(frame.delay_ms / 1000)
        return self.metrics

    def _finish(self) -> None:
        result = self.animator.result
        if result.found:
            self.metrics.path_len = len(result.path)
        else:
            self.notice = NO_PATH_MESSAGE

    def pop_notice(self) -> Optional[str]:
        with self._lock:
            notice, self.notice = self.notice, None
            return notice

    # ------------------------------------------------------------------
    # Snapshot for the UI
    # ------------------------------------------------------------------
    @property
    def delays(self):
        return delays_for_speed(self.speed)

    def state(self) -> dict:
        with self._lock:
            return {
                "grid":     self.grid.to_dict(),
                "rows":     self.grid.rows,
                "cols":     self.grid.cols,
                "mode":     self.mode.value,
                "algo":     self.algo,
                "speed":    self.speed,
                "running":  self.running,
                "metrics":  self.metrics.to_dict(),
                "revision": self.revision,
            }
