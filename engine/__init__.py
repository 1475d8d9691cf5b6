"""
engine/
-------
Run & playback layer.

    from engine import MazeController, Animator, Recorder
"""

from engine.errors     import (
    MazeError,
    RunInProgressError,
    MissingEndpointError,
    UnknownAlgorithmError,
    MISSING_ENDPOINT_MESSAGE,
    NO_PATH_MESSAGE,
)
from engine.animator   import Animator, AnimatorState, Frame, delays_for_speed
from engine.recorder   import Recorder, RunMetrics
from engine.controller import MazeController, DEFAULT_SPEED, DEFAULT_DENSITY, DEFAULT_ALGO

__all__ = [
    "MazeError",
    "RunInProgressError",
    "MissingEndpointError",
    "UnknownAlgorithmError",
    "MISSING_ENDPOINT_MESSAGE",
    "NO_PATH_MESSAGE",
    "Animator",
    "AnimatorState",
    "Frame",
    "delays_for_speed",
    "Recorder",
    "RunMetrics",
    "MazeController",
    "DEFAULT_SPEED",
    "DEFAULT_DENSITY",
    "DEFAULT_ALGO",
]
