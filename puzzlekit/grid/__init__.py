"""Dense 2D grids: storage, text parsing, neighbour queries and snapshots."""

from .bitmap import Grid, OutOfBoundsError
from .parser import (
    ElementParser,
    GridParseError,
    InvalidElementError,
    ParsedGrid,
    WidthMismatchError,
    parse_grid,
)
from .helpers import grid_shortest_path, neighbors, render_grid
from .schemas import GridSnapshot, PathReport

__all__ = [
    "Grid",
    "OutOfBoundsError",
    "ElementParser",
    "GridParseError",
    "InvalidElementError",
    "ParsedGrid",
    "WidthMismatchError",
    "parse_grid",
    "grid_shortest_path",
    "neighbors",
    "render_grid",
    "GridSnapshot",
    "PathReport",
]
