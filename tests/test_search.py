import random

import pytest

from maze import Grid, Cell
from algorithms import REGISTRY, SearchResult, get_algorithm, list_algorithms
from algorithms.astar import astar, manhattan
from algorithms.bfs import bfs


SEARCHES = [bfs, astar]


def _endpoints(grid):
    return grid.locate(Cell.START), grid.locate(Cell.END)


def _is_valid_path(grid, path, start, end):
    if not path or path[0] != start or path[-1] != end:
        return False
    for a, b in zip(path, path[1:]):
        if manhattan(a, b) != 1:
            return False
    return not any(grid.is_wall(c) for c in path)


@pytest.mark.parametrize("search", SEARCHES)
def test_open_three_by_three(search):
    g = Grid(3, 3)
    start, end = _endpoints(g)
    result = search(g, start, end)
    assert len(result.path) == 5
    assert _is_valid_path(g, result.path, start, end)
    assert len(result.visited_order) <= 9


@pytest.mark.parametrize("search", SEARCHES)
def test_adjacent_endpoints(search):
    g = Grid.from_text("SE..\n....")
    result = search(g, (0, 0), (0, 1))
    assert result.path == [(0, 0), (0, 1)]
    assert result.steps == 1


@pytest.mark.parametrize("search", SEARCHES)
def test_walled_off_end_reports_no_path(search):
    g = Grid.from_text("""
        S...
        ####
        ...E
    """)
    start, end = _endpoints(g)
    result = search(g, start, end)
    assert result.path == []
    assert not result.found
    assert sorted(result.visited_order) == [(0, 0), (0, 1), (0, 2), (0, 3)]


@pytest.mark.parametrize("search", SEARCHES)
def test_path_goes_around_walls(search):
    g = Grid.from_text("""
        S.#...
        .##.#.
        ....#E
    """)
    start, end = _endpoints(g)
    result = search(g, start, end)
    assert _is_valid_path(g, result.path, start, end)
    assert len(result.path) == 12


@pytest.mark.parametrize("seed", range(8))
def test_searches_agree_on_random_grids(seed):
    g = Grid(10, 14)
    g.randomize(0.3, random.Random(seed))
    start, end = _endpoints(g)

    by_bfs = bfs(g, start, end)
    by_astar = astar(g, start, end)

    assert len(by_bfs.path) == len(by_astar.path)
    for result in (by_bfs, by_astar):
        assert len(result.visited_order) == len(set(result.visited_order))
        assert not any(g.is_wall(c) for c in result.visited_order)
        assert result.visited_order[0] == start
        if result.found:
            assert _is_valid_path(g, result.path, start, end)
            assert result.visited_order[-1] == end
            assert set(result.path) <= set(result.visited_order)


def test_bfs_expands_in_down_up_right_left_rings():
    g = Grid(3, 3)
    result = bfs(g, (0, 0), (2, 2))
    assert result.visited_order == [
        (0, 0), (1, 0), (0, 1), (2, 0), (1, 1), (0, 2), (2, 1), (1, 2), (2, 2),
    ]
    assert result.path == [(0, 0), (1, 0), (2, 0), (2, 1), (2, 2)]


def test_astar_heads_straight_for_the_goal():
    g = Grid(5, 5)
    by_astar = astar(g, (0, 0), (0, 4))
    by_bfs = bfs(g, (0, 0), (0, 4))
    assert by_astar.visited_order == [(0, 0), (0, 1), (0, 2), (0, 3), (0, 4)]
    assert len(by_bfs.visited_order) > len(by_astar.visited_order)
    assert len(by_bfs.path) == len(by_astar.path) == 5


def test_start_equals_end():
    g = Grid(6, 6)
    for search in SEARCHES:
        result = search(g, (2, 2), (2, 2))
        assert result.path == [(2, 2)]
        assert result.visited_order == [(2, 2)]


def test_searches_do_not_mutate_the_grid():
    g = Grid.from_text("S.#\n...\n#.E")
    before = g.snapshot()
    for search in SEARCHES:
        search(g, (0, 0), (2, 2))
    assert g == before


def test_manhattan():
    assert manhattan((0, 0), (0, 0)) == 0
    assert manhattan((1, 5), (4, 1)) == 7


def test_search_result_properties():
    assert SearchResult().steps == 0
    assert not SearchResult(visited_order=[(0, 0)]).found
    assert SearchResult(path=[(0, 0), (0, 1), (1, 1)]).steps == 2


def test_registry_lists_both_searches():
    assert [a.key for a in list_algorithms()] == ["bfs", "astar"]
    assert get_algorithm("astar").has_heuristic
    assert not get_algorithm("bfs").has_heuristic
    assert get_algorithm("dfs") is None
    for info in REGISTRY.values():
        assert info.pseudocode
        assert info.fn in SEARCHES
