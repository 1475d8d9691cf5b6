"""
errors.py — Error Taxonomy
===========================
Everything here is recoverable by further user action.  The web layer
maps each class to an HTTP status and shows the message as an alert.
"""

MISSING_ENDPOINT_MESSAGE = "Please ensure both Start and End are set."
NO_PATH_MESSAGE          = "No path found."


class MazeError(Exception):
    """Base class for controller-level failures."""


class RunInProgressError(MazeError):
    """A grid-mutating action was attempted while an animation is running."""

    def __init__(self, action: str = "action"):
        super().__init__(f"Cannot {action} while a run is in progress.")
        self.action = action


class MissingEndpointError(MazeError):
    """Solve was requested without both a Start and an End cell."""

    def __init__(self, message: str = MISSING_ENDPOINT_MESSAGE):
        super().__init__(message)


class UnknownAlgorithmError(MazeError, ValueError):
    def __init__(self, key: str):
        super().__init__(f"Unknown algorithm: {key}")
        self.key = key
