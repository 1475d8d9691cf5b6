import pytest

from maze import Grid, Cell
from algorithms.bfs import bfs
from algorithms import SearchResult
from engine import Animator, AnimatorState, delays_for_speed


@pytest.mark.parametrize("speed, expected", [
    (50, (70, 85.0)),
    (100, (20, 12)),
    (1, (119, 158.5)),
    (0, (119, 158.5)),      # clamped up to 1
    (250, (20, 12)),        # clamped down to 100
])
def test_delays_for_speed(speed, expected):
    assert delays_for_speed(speed) == expected


def test_delays_never_increase_with_speed():
    pairs = [delays_for_speed(s) for s in range(1, 101)]
    for slower, faster in zip(pairs, pairs[1:]):
        assert faster[0] <= slower[0]
        assert faster[1] <= slower[1]
        assert faster[0] >= 8 and faster[1] >= 12


def _armed(text, speed=50, **kwargs):
    grid = Grid.from_text(text)
    result = bfs(grid.snapshot(), grid.locate(Cell.START), grid.locate(Cell.END))
    return grid, result, Animator(grid, result, speed, **kwargs)


def test_play_paints_visited_then_path_and_sleeps_per_frame(sleeper):
    grid, result, anim = _armed("""
        S..
        ...
        ..E
    """)
    anim.play(sleep=sleeper)

    assert anim.state is AnimatorState.FINISHED
    assert len(sleeper.calls) == anim.total_frames == len(result.visited_order) + len(result.path)
    n = len(result.visited_order)
    assert sleeper.calls[:n] == [0.070] * n
    assert sleeper.calls[n:] == [0.085] * len(result.path)

    assert grid.get((0, 0)) == Cell.START
    assert grid.get((2, 2)) == Cell.END
    for coord in result.path[1:-1]:
        assert grid.get(coord) == Cell.PATH
    for coord in set(result.visited_order) - set(result.path):
        assert grid.get(coord) == Cell.VISITED


def test_no_path_stops_after_visits(sleeper):
    grid, result, anim = _armed("""
        S..
        ###
        ..E
    """)
    anim.play(sleep=sleeper)
    assert anim.no_path
    assert len(sleeper.calls) == len(result.visited_order) == 3
    assert grid.count(Cell.PATH) == 0
    assert grid.count(Cell.VISITED) == 2
    assert grid.count(Cell.WALL) == 3


def test_frames_report_protected_cells_as_unchanged():
    grid, result, anim = _armed("S.\n.E")
    frames = list(anim.frames())
    assert [f.phase for f in frames] == ["visit"] * 4 + ["path"] * 3
    assert [f.index for f in frames] == list(range(7))

    first_visit, first_path, last_path = frames[0], frames[4], frames[-1]
    assert first_visit.coord == (0, 0) and not first_visit.changed
    assert first_path.cell == Cell.START and not first_path.changed
    assert last_path.cell == Cell.END and not last_path.changed
    assert frames[5].changed and frames[5].cell == Cell.PATH


def test_visit_never_overwrites_walls_or_existing_overlay():
    grid = Grid.from_text("S#\n.E")
    result = SearchResult(path=[], visited_order=[(0, 0), (0, 1), (1, 0), (1, 0)])
    anim = Animator(grid, result, 50)
    frames = list(anim.frames())
    assert grid.get((0, 1)) == Cell.WALL
    assert [f.changed for f in frames] == [False, False, True, False]


def test_advance_walks_the_state_machine():
    seen = []
    grid, result, anim = _armed("S.\n.E", on_frame=seen.append)
    assert anim.state is AnimatorState.IDLE

    first = anim.advance()
    assert anim.state is AnimatorState.RUNNING
    assert anim.frame is first and seen == [first]

    while anim.advance() is not None:
        pass
    assert anim.is_finished
    assert len(seen) == anim.total_frames
    assert anim.advance() is None
