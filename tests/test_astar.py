import io

import pytest

from ailabkit.astar import a_star_search, format_path, heuristic_distance, is_valid, main


def _assert_valid_path(grid, path, start, goal):
    assert path[0] == start
    assert path[-1] == goal
    for (x1, y1), (x2, y2) in zip(path, path[1:]):
        assert abs(x1 - x2) + abs(y1 - y2) == 1
    for x, y in path[1:]:
        assert grid[x][y] == 0
    assert len(set(path)) == len(path)


def test_is_valid_checks_bounds_and_obstacles():
    grid = [[0, 1], [0, 0]]
    assert is_valid(0, 0, grid) is True
    assert is_valid(0, 1, grid) is False
    assert is_valid(-1, 0, grid) is False
    assert is_valid(2, 0, grid) is False
    assert is_valid(1, 2, grid) is False


def test_heuristic_distance_is_manhattan():
    assert heuristic_distance(0, 3, 0, 4) == 7
    assert heuristic_distance(2, 2, 5, 5) == 0


def test_open_grid_path_is_shortest():
    grid = [[0] * 5 for _ in range(4)]
    path = a_star_search(grid, (0, 0), (3, 4))
    _assert_valid_path(grid, path, (0, 0), (3, 4))
    assert len(path) - 1 == heuristic_distance(0, 3, 0, 4)


def test_detour_around_wall():
    grid = [
        [0, 0, 0],
        [1, 1, 0],
        [0, 0, 0],
    ]
    path = a_star_search(grid, (0, 0), (2, 0))
    assert path == [(0, 0), (0, 1), (0, 2), (1, 2), (2, 2), (2, 1), (2, 0)]


def test_start_equals_goal():
    assert a_star_search([[0]], (0, 0), (0, 0)) == [(0, 0)]


def test_blocked_goal_gives_none():
    grid = [[0, 1], [1, 0]]
    assert a_star_search(grid, (0, 0), (1, 1)) is None


def test_goal_on_obstacle_gives_none():
    grid = [[0, 0], [0, 1]]
    assert a_star_search(grid, (0, 0), (1, 1)) is None


def test_empty_grid_raises():
    with pytest.raises(ValueError):
        a_star_search([], (0, 0), (0, 0))


def test_start_outside_grid_raises():
    with pytest.raises(ValueError):
        a_star_search([[0, 0]], (3, 0), (0, 1))


def test_format_path():
    assert format_path([(0, 0), (0, 1), (1, 1)]) == "(0,0)(0,1)(1,1)"
    assert format_path([]) == ""


def test_main_runs_search_and_exits(monkeypatch, capsys):
    stdin = "2 2\n0 0\n0 0\n0 0\n1 1\n1\n2\n3\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(stdin))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Grid:" in out
    assert "Path is: (0,0)" in out
    assert "(1,1)" in out
    assert "Exiting..." in out


def test_main_reports_no_path(monkeypatch, capsys):
    stdin = "1 3\n0 1 0\n0 0\n0 2\n2\n9\n3\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(stdin))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "No path found." in out
    assert "Invalid choice!" in out