import logging
import threading

import pytest

from maze import Cell, PaintMode
from engine import (
    MazeController,
    MissingEndpointError,
    RunInProgressError,
    UnknownAlgorithmError,
    NO_PATH_MESSAGE,
)


def test_defaults():
    ctrl = MazeController()
    assert (ctrl.grid.rows, ctrl.grid.cols) == (12, 18)
    assert ctrl.mode is PaintMode.WALL
    assert ctrl.algo == "bfs"
    assert ctrl.speed == 50
    assert ctrl.delays == (70, 85.0)
    assert not ctrl.running
    assert ctrl.metrics.to_dict() == {"visited": 0, "pathLen": 0, "timeMs": 0}


@pytest.mark.parametrize("algo", ["bfs", "astar"])
def test_run_to_completion_fills_metrics(controller, sleeper, algo):
    controller.set_algo(algo)
    metrics = controller.run_to_completion(sleep=sleeper)
    assert metrics.path_len == 11          # 6x6 corner to corner
    assert 11 <= metrics.visited <= 36
    assert metrics.time_ms >= 0
    assert not controller.running
    assert controller.pop_notice() is None
    assert controller.grid.count(Cell.PATH) == 9


def test_metrics_path_length_is_published_last(controller):
    controller.solve()
    assert controller.metrics.visited > 0
    assert controller.metrics.path_len == 0
    while controller.advance() is not None:
        assert controller.metrics.path_len == 0
    assert controller.metrics.path_len == 11


def test_actions_are_refused_while_running(controller):
    controller.solve()
    controller.advance()
    assert controller.running
    with pytest.raises(RunInProgressError):
        controller.paint((2, 2))
    with pytest.raises(RunInProgressError):
        controller.solve()
    with pytest.raises(RunInProgressError):
        controller.reset()
    with pytest.raises(RunInProgressError):
        controller.set_speed(10)
    with pytest.raises(RunInProgressError):
        controller.resize(8, 8)

    while controller.advance() is not None:
        pass
    assert controller.paint((2, 2))


def test_missing_end_is_reported(controller):
    controller.grid.set((5, 5), Cell.EMPTY)
    with pytest.raises(MissingEndpointError) as exc:
        controller.solve()
    assert str(exc.value) == "Please ensure both Start and End are set."
    assert not controller.running


def test_blocked_end_leaves_a_notice(controller, sleeper):
    for col in range(6):
        controller.paint((3, col), PaintMode.WALL)
    metrics = controller.run_to_completion(sleep=sleeper)
    assert metrics.path_len == 0
    assert metrics.visited == 18
    assert controller.pop_notice() == NO_PATH_MESSAGE
    assert controller.pop_notice() is None


def test_solve_clears_the_previous_overlay(controller, sleeper):
    controller.run_to_completion(sleep=sleeper)
    assert controller.grid.has_overlay()
    controller.paint((1, 0), PaintMode.WALL)
    controller.solve()
    assert not controller.grid.has_overlay()
    assert controller.grid.get((1, 0)) == Cell.WALL


def test_clear_overlay_keeps_walls(controller, sleeper):
    controller.paint((2, 2), PaintMode.WALL)
    controller.run_to_completion(sleep=sleeper)
    controller.clear_overlay()
    assert not controller.grid.has_overlay()
    assert controller.grid.get((2, 2)) == Cell.WALL


def test_paint_uses_selected_mode(controller):
    controller.set_mode("start")
    assert controller.paint((3, 3))
    assert controller.grid.locate(Cell.START) == (3, 3)
    assert controller.paint((4, 4), PaintMode.WALL)
    assert controller.grid.get((4, 4)) == Cell.WALL
    with pytest.raises(ValueError):
        controller.set_mode("flood")


def test_reset_zeroes_metrics(controller, sleeper):
    controller.paint((2, 2), PaintMode.WALL)
    controller.run_to_completion(sleep=sleeper)
    controller.reset()
    assert controller.metrics.to_dict() == {"visited": 0, "pathLen": 0, "timeMs": 0}
    assert controller.grid.count(Cell.WALL) == 0


@pytest.mark.parametrize("rows, cols", [(5, 10), (10, 3), ("x", 10), (None, None), (31, 10), (10, 51), (100000, 100000)])
def test_resize_ignores_invalid_sizes(controller, rows, cols):
    assert not controller.resize(rows, cols)
    assert (controller.grid.rows, controller.grid.cols) == (6, 6)


def test_resize_rebuilds_grid(controller):
    assert controller.resize("8", 9)
    assert (controller.grid.rows, controller.grid.cols) == (8, 9)
    assert controller.grid.locate(Cell.END) == (7, 8)


def test_randomize_is_seedable(controller):
    controller.randomize(0.4, seed=7)
    first = controller.grid.snapshot()
    controller.randomize(0.4, seed=7)
    assert controller.grid == first


def test_revision_counts_grid_changes(controller):
    before = controller.revision
    controller.paint((1, 1))
    controller.paint((1, 1))
    controller.randomize(0.0)
    assert controller.revision == before + 3


def test_settings_validation(controller):
    with pytest.raises(UnknownAlgorithmError):
        controller.set_algo("dijkstra")
    assert controller.algo == "bfs"
    assert controller.set_speed(500) == 100
    assert controller.set_speed(-3) == 1


def test_search_is_logged(controller, sleeper, caplog):
    with caplog.at_level(logging.INFO, logger="engine.recorder"):
        controller.run_to_completion(sleep=sleeper)
    records = [r for r in caplog.records if r.name == "engine.recorder"]
    assert len(records) == 1
    assert "bfs" in records[0].getMessage()
    assert "path 11 cells" in records[0].getMessage()


def test_set_algo_rejects_non_string_keys(controller):
    with pytest.raises(UnknownAlgorithmError):
        controller.set_algo(["bfs"])
    assert controller.algo == "bfs"


def _race(n, target):
    """Release n threads into `target` at once; collect results or errors."""
    barrier = threading.Barrier(n)
    outcomes = []

    def worker():
        barrier.wait()
        try:
            outcomes.append(target())
        except Exception as e:
            outcomes.append(e)

    threads = [threading.Thread(target=worker) for _ in range(n)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    return outcomes


def test_concurrent_solves_start_a_single_run():
    ctrl = MazeController(rows=30, cols=50)
    outcomes = _race(4, ctrl.solve)
    armed = [o for o in outcomes if not isinstance(o, Exception)]
    refused = [o for o in outcomes if isinstance(o, RunInProgressError)]
    assert len(armed) == 1
    assert len(refused) == 3
    assert ctrl.animator is armed[0]


def test_concurrent_ticks_share_one_replay():
    ctrl = MazeController(rows=30, cols=50)
    animator = ctrl.solve()
    pulled = []

    def tick_until_done():
        while True:
            frame = ctrl.advance()
            if frame is None:
                return len(pulled)
            pulled.append(frame.index)

    outcomes = _race(4, tick_until_done)
    assert not any(isinstance(o, Exception) for o in outcomes)
    assert sorted(pulled) == list(range(animator.total_frames))
    assert ctrl.metrics.path_len == 30 + 50 - 1
