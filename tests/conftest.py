import pytest

from main import create_app
from engine import MazeController


class SleepRecorder:
    """Stands in for time.sleep; remembers every requested pause."""

    def __init__(self):
        self.calls = []

    def __call__(self, seconds):
        self.calls.append(seconds)


@pytest.fixture
def sleeper():
    return SleepRecorder()


@pytest.fixture
def controller():
    return MazeController(rows=6, cols=6)


@pytest.fixture
def app():
    return create_app({"TESTING": True})


@pytest.fixture
def client(app):
    return app.test_client()


def drain(client, limit=10000):
    """Tick the running animation until it stops; return the final payload."""
    for _ in range(limit):
        data = client.post("/api/tick").get_json()
        if not data["running"]:
            return data
    raise AssertionError("animation did not finish")
