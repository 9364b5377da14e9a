"""
Puzzlekit - support library for daily programming-puzzle solvers.

Dense 2D grids parsed from text, a generic A* search, and a small CLI
harness that loads input files and reports errors with file context.
"""

__version__ = "0.1.0"

from .astar import AStar, SearchProblem, find_path
from .geometry import DIAGONAL, ORTHOGONAL, Position, Size, euclidean, manhattan
from .grid import (
    ElementParser,
    Grid,
    GridParseError,
    GridSnapshot,
    InvalidElementError,
    OutOfBoundsError,
    ParsedGrid,
    PathReport,
    WidthMismatchError,
    grid_shortest_path,
    neighbors,
    parse_grid,
    render_grid,
)
from .challenge import (
    Challenge,
    ChallengeError,
    InputFile,
    load_challenge,
    print_answer,
    wrap_main,
)
from .config import Config

__all__ = [
    "AStar",
    "SearchProblem",
    "find_path",
    "DIAGONAL",
    "ORTHOGONAL",
    "Position",
    "Size",
    "euclidean",
    "manhattan",
    "ElementParser",
    "Grid",
    "GridParseError",
    "GridSnapshot",
    "InvalidElementError",
    "OutOfBoundsError",
    "ParsedGrid",
    "PathReport",
    "WidthMismatchError",
    "grid_shortest_path",
    "neighbors",
    "parse_grid",
    "render_grid",
    "Challenge",
    "ChallengeError",
    "InputFile",
    "load_challenge",
    "print_answer",
    "wrap_main",
    "Config",
]
