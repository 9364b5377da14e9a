"""Utilities that combine grids with neighbour queries and A* search."""

from __future__ import annotations

from typing import Any, Callable, Iterator, List, Optional

from ..astar import AStar
from ..geometry import DIAGONAL, ORTHOGONAL, Position, manhattan
from .bitmap import Grid

StepRule = Callable[[Any, Any], bool]
StepWeight = Callable[[Position, Position], float]


def neighbors(grid: Grid, position: Position, *, diagonal: bool = False) -> Iterator[Position]:
    """Yield in-bounds neighbours of ``position`` (4-connected, or 8 with ``diagonal``)."""
    x, y = position
    directions = ORTHOGONAL + DIAGONAL if diagonal else ORTHOGONAL
    for dx, dy in directions:
        nx, ny = x + dx, y + dy
        if grid.is_in_bounds(nx, ny):
            yield nx, ny


def grid_shortest_path(
    grid: Grid,
    start: Position,
    goal: Position,
    *,
    can_step: Optional[StepRule] = None,
    weight: Optional[StepWeight] = None,
) -> Optional[List[Position]]:
    """Find a 4-connected path from ``start`` to ``goal`` with A*.

    ``can_step(here, there)`` receives the two cell values and decides whether
    the move is allowed (default: always). ``weight(from_pos, to_pos)`` gives
    the step cost (default: 1). The Manhattan heuristic is only admissible when
    every step costs at least 1.

    Returns the positions after ``start`` up to ``goal``, ``[]`` when they are
    equal, or ``None`` when ``goal`` cannot be reached.
    """

    def heuristic(position: Position) -> float:
        return float(manhattan(position, goal))

    def visit_neighbors(position: Position, visit) -> None:
        here = grid[position]
        # Four-directional movement only. neighbors() already drops off-grid cells.
        for candidate in neighbors(grid, position):
            # Caller's rule decides passability (walls, climb limits, ...)
            if can_step is not None and not can_step(here, grid[candidate]):
                continue
            # Unit cost unless the caller weights the step
            cost = 1.0 if weight is None else weight(position, candidate)
            visit(candidate, cost)

    # Manhattan distance never overestimates on a 4-connected grid with unit steps
    return AStar(start, goal, heuristic, visit_neighbors).find_path()


def render_grid(grid: Grid, symbol: Callable[[Any], str] = str) -> str:
    """Render rows top to bottom, one line per row, using ``symbol`` per cell."""
    return "\n".join("".join(symbol(cell) for cell in row) for row in grid.rows())
