"""Tests for the generic A* search."""

from puzzlekit import AStar, Grid, find_path, neighbors, parse_grid


def chain_neighbors(low, high):
    def visit_neighbors(node, visit):
        for candidate in (node - 1, node + 1):
            if low <= candidate <= high:
                visit(candidate, 1.0)

    return visit_neighbors


def test_chain_graph_path_excludes_start():
    path = find_path(0, 4, lambda n: abs(4 - n), chain_neighbors(0, 4))

    assert path == [1, 2, 3, 4]


def test_start_equal_to_goal_is_empty_path():
    assert find_path(2, 2, lambda n: 0.0, chain_neighbors(0, 4)) == []


def test_unreachable_goal_returns_none():
    # node 9 is disconnected from the 0..4 chain
    search = AStar(0, 9, lambda n: 0.0, chain_neighbors(0, 4))

    assert search.find_path() is None
    assert search.path_cost is None
    assert search.expanded == 5


def test_prefers_cheaper_weighted_route():
    edges = {
        "a": [("b", 1.0), ("c", 5.0)],
        "b": [("d", 1.0)],
        "c": [("goal", 1.0)],
        "d": [("goal", 1.0)],
        "goal": [],
    }

    def visit_neighbors(node, visit):
        for neighbor, weight in edges[node]:
            visit(neighbor, weight)

    search = AStar("a", "goal", lambda n: 0.0, visit_neighbors)

    assert search.find_path() == ["b", "d", "goal"]
    assert search.path_cost == 3.0


def test_relaxes_node_when_better_route_found_later():
    # 'x' is first reached at cost 10, then improved to 2 via 'y'
    edges = {
        "s": [("x", 10.0), ("y", 1.0)],
        "y": [("x", 1.0)],
        "x": [("g", 1.0)],
        "g": [],
    }

    def visit_neighbors(node, visit):
        for neighbor, weight in edges[node]:
            visit(neighbor, weight)

    search = AStar("s", "g", lambda n: 0.0, visit_neighbors)

    assert search.find_path() == ["y", "x", "g"]
    assert search.path_cost == 3.0


def test_cycles_terminate():
    def visit_neighbors(node, visit):
        visit((node + 1) % 5, 1.0)
        visit((node - 1) % 5, 1.0)

    assert find_path(0, 3, lambda n: 0.0, visit_neighbors) == [4, 3]


def test_repeated_runs_give_identical_paths():
    grid = Grid.new(6, 6, ".")

    def visit_neighbors(position, visit):
        for candidate in neighbors(grid, position):
            visit(candidate, 1.0)

    def heuristic(position):
        return float(abs(5 - position[0]) + abs(5 - position[1]))

    first = find_path((0, 0), (5, 5), heuristic, visit_neighbors)
    second = find_path((0, 0), (5, 5), heuristic, visit_neighbors)

    assert first == second
    assert len(first) == 10


def test_ties_break_on_smallest_node():
    # Two equal-cost routes to 'z'; 'a' sorts before 'b'.
    edges = {"s": [("b", 1.0), ("a", 1.0)], "a": [("z", 1.0)], "b": [("z", 1.0)], "z": []}

    def visit_neighbors(node, visit):
        for neighbor, weight in edges[node]:
            visit(neighbor, weight)

    assert find_path("s", "z", lambda n: 0.0, visit_neighbors) == ["a", "z"]


class WallMaze:
    """SearchProblem over a parsed '#'/'.' grid."""

    def __init__(self, text, goal):
        self.grid = parse_grid(lambda position, char: char if char in "#." else None, text).grid
        self.goal = goal

    def estimate(self, node):
        return float(abs(self.goal[0] - node[0]) + abs(self.goal[1] - node[1]))

    def expand(self, node, visit):
        for candidate in neighbors(self.grid, node):
            if self.grid[candidate] == ".":
                visit(candidate, 1.0)


def test_wall_separating_start_and_goal_blocks_search():
    maze = WallMaze("..#..\n..#..\n..#..", goal=(4, 1))

    assert AStar.from_problem((0, 1), (4, 1), maze).find_path() is None

    maze.grid.set(2, 2, ".")
    path = AStar.from_problem((0, 1), (4, 1), maze).find_path()

    assert path is not None
    assert (2, 2) in path
    assert path[-1] == (4, 1)
    assert len(path) == 6
