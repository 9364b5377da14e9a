"""Dense 2D grid storage.

A ``Grid`` stores ``width * height`` cells in a flat list, indexed row-major
(``x + y * width``). Reads outside the grid never raise: they return the
``out_of_bounds`` sentinel instead, so callers can probe neighbours without
doing their own range checks. Writes outside the grid raise
``OutOfBoundsError`` and leave storage untouched.

Usage pattern:
    grid = Grid.new(10, 4, ".")
    grid.set(3, 2, "#")
    grid[3, 2]            # "#"
    grid[-1, 0]           # "." (sentinel)
"""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING, Any, Callable, Generic, Iterator, List, Tuple, TypeVar

from ..geometry import Position, Size

if TYPE_CHECKING:
    from .parser import ParsedGrid, ParserLike

T = TypeVar("T")


class OutOfBoundsError(IndexError):
    """Raised when a write targets a coordinate outside the grid."""

    def __init__(self, position: Position, width: int, height: int):
        self.position = position
        self.width = width
        self.height = height
        x, y = position
        super().__init__(f"position ({x}, {y}) is outside a {width}x{height} grid")


class Grid(Generic[T]):
    """Rectangular dense array of homogeneous cells with a read sentinel."""

    __slots__ = ("elements", "width", "height", "out_of_bounds")

    def __init__(self, elements: List[T], width: int, height: int, out_of_bounds: T):
        if width < 0 or height < 0:
            raise ValueError(f"grid dimensions must be non-negative, got {width}x{height}")
        if len(elements) != width * height:
            raise ValueError(
                f"expected {width * height} elements for a {width}x{height} grid, got {len(elements)}"
            )
        self.elements = elements
        self.width = width
        self.height = height
        self.out_of_bounds = out_of_bounds

    @classmethod
    def new(cls, width: int, height: int, fill: T) -> "Grid[T]":
        """Create a grid with every cell set to ``fill``.

        Cells share the ``fill`` object, so pass an immutable value. The
        sentinel is a shallow copy of ``fill``.
        """
        return cls([fill] * (width * height), width, height, copy.copy(fill))

    @staticmethod
    def parse(parser: "ParserLike", text: str, *, out_of_bounds: Any = None) -> "ParsedGrid":
        """Shorthand for :func:`puzzlekit.grid.parser.parse_grid`."""
        # parser.py imports this module, so the import is deferred.
        from .parser import parse_grid

        return parse_grid(parser, text, out_of_bounds=out_of_bounds)

    # -------------------- geometry --------------------

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    def flatten_index(self, x: int, y: int) -> int:
        return x + y * self.width

    def is_in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def positions(self) -> Iterator[Position]:
        """Yield every coordinate, rows outer and columns inner."""
        for y in range(self.height):
            for x in range(self.width):
                yield x, y

    # -------------------- access --------------------

    def get(self, x: int, y: int) -> T:
        if self.is_in_bounds(x, y):
            return self.elements[self.flatten_index(x, y)]
        return self.out_of_bounds

    def set(self, x: int, y: int, value: T) -> None:
        if not self.is_in_bounds(x, y):
            raise OutOfBoundsError((x, y), self.width, self.height)
        self.elements[self.flatten_index(x, y)] = value

    def __getitem__(self, position: Position) -> T:
        x, y = position
        return self.get(x, y)

    def __setitem__(self, position: Position, value: T) -> None:
        x, y = position
        self.set(x, y, value)

    def __contains__(self, position: Position) -> bool:
        x, y = position
        return self.is_in_bounds(x, y)

    def __len__(self) -> int:
        return len(self.elements)

    def items(self) -> Iterator[Tuple[Position, T]]:
        for position in self.positions():
            yield position, self.elements[self.flatten_index(*position)]

    def find(self, predicate: Callable[[T], bool]) -> Iterator[Position]:
        """Yield positions whose cell satisfies ``predicate``."""
        for position, value in self.items():
            if predicate(value):
                yield position

    def rows(self) -> List[List[T]]:
        return [
            self.elements[y * self.width:(y + 1) * self.width] for y in range(self.height)
        ]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and self.elements == other.elements
            and self.out_of_bounds == other.out_of_bounds
        )

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height}, out_of_bounds={self.out_of_bounds!r})"
