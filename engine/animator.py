"""
animator.py — Search Replay Engine
===================================
Replays a finished SearchResult onto the live grid, one cell per frame:

    1. every coordinate of `visited_order`  →  VISITED  (only if EMPTY)
    2. if the path is empty                 →  stop, `no_path` is set
    3. every coordinate of `path`           →  PATH     (unless START / END)

The replay is a generator.  Each `Frame` it yields is one grid mutation
plus the delay to wait before the next one; the consumer decides how to
wait (a browser poll, `time.sleep`, nothing at all in tests).

State machine:
    IDLE  →  first advance()  →  RUNNING  →  (frames exhausted)  →  FINISHED

There is no cancellation.  Once started, a run plays to the end.

Thread safety:
  This class is NOT thread-safe.  Drive it from a single thread.
"""

import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterator, Optional, Tuple

from maze import Grid, Cell, Coord
from algorithms import SearchResult

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class AnimatorState(Enum):
    IDLE     = "idle"
    RUNNING  = "running"
    FINISHED = "finished"


# ---------------------------------------------------------------------------
# Speed → per-step delays (milliseconds)
# ---------------------------------------------------------------------------
MIN_SPEED = 1
MAX_SPEED = 100

VISIT_DELAY_FLOOR_MS = 8
PATH_DELAY_FLOOR_MS  = 12


def clamp_speed(speed: int) -> int:
    return max(MIN_SPEED, min(MAX_SPEED, int(speed)))


def delays_for_speed(speed: int) -> Tuple[float, float]:
    """
    Slider value 1..100 (higher = faster) → (visit_delay_ms, path_delay_ms).
    Floors keep the delays positive at the top of the range.
    """
    speed = clamp_speed(speed)
    visit_ms = max(VISIT_DELAY_FLOOR_MS, 120 - speed)
    path_ms  = max(PATH_DELAY_FLOOR_MS, 160 - speed * 1.5)
    return visit_ms, path_ms


# ---------------------------------------------------------------------------
# Frame
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Frame:
    """
    Attributes:
        index    : 0-based position in the whole replay.
        phase    : "visit" or "path".
        coord    : The cell this frame is about.
        cell     : State of that cell after the frame.
        changed  : False when the cell was protected (wall / marker / already set).
        delay_ms : How long to wait before the next frame.
    """

    index:    int
    phase:    str
    coord:    Coord
    cell:     Cell
    changed:  bool
    delay_ms: float


# ---------------------------------------------------------------------------
# Animator
# ---------------------------------------------------------------------------
class Animator:
    """
    Attributes:
        state    : Current AnimatorState.
        frame    : Last Frame produced (None before the first).
        no_path  : True once the replay ended without a path.
        on_frame : Optional callback(Frame) fired after every frame.
    """

    def __init__(
        self,
        grid: Grid,
        result: SearchResult,
        speed: int,
        on_frame: Optional[Callable[[Frame], None]] = None,
    ):
        self.grid:     Grid           = grid
        self.result:   SearchResult   = result
        self.visit_delay_ms, self.path_delay_ms = delays_for_speed(speed)
        self.on_frame: Optional[Callable[[Frame], None]] = on_frame

        self.state:    AnimatorState  = AnimatorState.IDLE
        self.frame:    Optional[Frame] = None
        self.no_path:  bool           = False
        self._frames:  Optional[Iterator[Frame]] = None

    # ------------------------------------------------------------------
    # The replay
    # ------------------------------------------------------------------
    def frames(self) -> Iterator[Frame]:
        index = 0

        for coord in self.result.visited_order:
            changed = self.grid.get(coord) == Cell.EMPTY
            if changed:
                self.grid.set(coord, Cell.VISITED)
            yield Frame(index, "visit", coord, self.grid.get(coord), changed, self.visit_delay_ms)
            index += 1

        if not self.result.path:
            self.no_path = True
            logger.info("replay finished: no path after %d visited cells", len(self.result.visited_order))
            return

        for coord in self.result.path:
            changed = not self.grid.get(coord).is_marker
            if changed:
                self.grid.set(coord, Cell.PATH)
            yield Frame(index, "path", coord, self.grid.get(coord), changed, self.path_delay_ms)
            index += 1

        logger.info("replay finished: path of %d cells", len(self.result.path))

    # ------------------------------------------------------------------
    # Driving
    # ------------------------------------------------------------------
    def advance(self) -> Optional[Frame]:
        """Pull one frame.  Returns None once the replay is finished."""
        if self.state == AnimatorState.FINISHED:
            return None
        if self._frames is None:
            self._frames = self.frames()
            self.state   = AnimatorState.RUNNING
        try:
            frame = next(self._frames)
        except StopIteration:
            self.state = AnimatorState.FINISHED
            return None
        self.frame = frame
        if self.on_frame:
            self.on_frame(frame)
        return frame

    def play(self, sleep: Callable[[float], None] = time.sleep) -> None:
        """Drive the replay to completion, sleeping between frames."""
        while True:
            frame = self.advance()
            if frame is None:
                break
            sleep(frame.delay_ms / 1000)

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def is_finished(self) -> bool:
        return self.state == AnimatorState.FINISHED

    @property
    def total_frames(self) -> int:
        if not self.result.path:
            return len(self.result.visited_order)
        return len(self.result.visited_order) + len(self.result.path)
