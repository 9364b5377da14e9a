"""Tests for grid neighbour queries, grid search and rendering."""

from puzzlekit import Grid, grid_shortest_path, neighbors, parse_grid, render_grid


def char_grid(text):
    return parse_grid(lambda position, char: char, text, out_of_bounds="#").grid


def test_neighbors_stay_in_bounds():
    grid = Grid.new(3, 3, 0)

    assert sorted(neighbors(grid, (0, 0))) == [(0, 1), (1, 0)]
    assert sorted(neighbors(grid, (1, 1))) == [(0, 1), (1, 0), (1, 2), (2, 1)]
    assert len(list(neighbors(grid, (1, 1), diagonal=True))) == 8
    assert len(list(neighbors(grid, (2, 2), diagonal=True))) == 3


def test_grid_shortest_path_avoids_walls():
    grid = char_grid(
        "....\n"
        ".##.\n"
        "....\n"
    )

    path = grid_shortest_path(grid, (0, 1), (3, 1), can_step=lambda here, there: there == ".")

    assert path is not None
    assert path[-1] == (3, 1)
    assert (1, 1) not in path and (2, 1) not in path
    assert len(path) == 5


def test_grid_shortest_path_unreachable_and_trivial():
    grid = char_grid(".#.\n.#.\n")
    walkable = lambda here, there: there == "."

    assert grid_shortest_path(grid, (0, 0), (2, 0), can_step=walkable) is None
    assert grid_shortest_path(grid, (0, 0), (0, 0), can_step=walkable) == []


def test_grid_shortest_path_with_climb_rule():
    # Heights may rise by at most one per step.
    grid = parse_grid(lambda position, char: ord(char) - ord("a"), "abc\nzzd\nfed\n").grid
    climb = lambda here, there: there <= here + 1

    path = grid_shortest_path(grid, (0, 0), (0, 2), can_step=climb)

    assert path == [(1, 0), (2, 0), (2, 1), (2, 2), (1, 2), (0, 2)]


def test_grid_shortest_path_custom_weight():
    grid = Grid.new(3, 2, ".")
    # Moving along the top row is expensive.
    weight = lambda src, dst: 5.0 if dst[1] == 0 else 1.0

    path = grid_shortest_path(grid, (0, 0), (2, 0), weight=weight)

    assert path == [(0, 1), (1, 1), (2, 1), (2, 0)]


def test_render_grid():
    grid = Grid([True, False, False, True], 2, 2, False)

    assert render_grid(grid, lambda cell: "#" if cell else ".") == "#.\n.#"
