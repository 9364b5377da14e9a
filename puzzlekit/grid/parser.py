"""Character-grid parsing.

``parse_grid`` turns a block of equal-length text lines into a ``Grid`` by
asking a parser to map each character to a cell value. The parser is either
an object implementing ``ElementParser`` or a plain callable with the same
``(position, char)`` signature. Parser objects may record auxiliary data
while scanning (e.g. where a start marker was seen); that object is handed
back alongside the grid in a ``ParsedGrid``.
"""

from __future__ import annotations

from typing import Any, Callable, List, NamedTuple, Optional, Protocol, TypeVar, Union

from ..geometry import Position
from .bitmap import Grid

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


class GridParseError(ValueError):
    """Base class for grid text that cannot be turned into a grid."""


class WidthMismatchError(GridParseError):
    """A line's length differs from the first line's length."""

    def __init__(self, line_number: int, expected: int, actual: int, line: str):
        self.line_number = line_number
        self.expected = expected
        self.actual = actual
        self.line = line
        super().__init__(
            f"line {line_number} has width {actual}, but all lines must match the "
            f"first line's width of {expected}: {line!r}"
        )


class InvalidElementError(GridParseError):
    """The parser produced no element for a character."""

    def __init__(self, char: str, position: Position):
        self.char = char
        self.position = position
        x, y = position
        super().__init__(f"{char!r} at ({x}, {y}) is not a valid grid element")


class ElementParser(Protocol[T_co]):
    """Maps a single character at a position to a cell value, or ``None``."""

    def parse_element(self, position: Position, char: str) -> Optional[T_co]:
        ...


ParserLike = Union[ElementParser[T], Callable[[Position, str], Optional[T]]]


class ParsedGrid(NamedTuple):
    """Result of ``parse_grid``: the grid and the parser that built it."""

    grid: Grid
    parser: Any


def _element_fn(parser: Any) -> Callable[[Position, str], Any]:
    parse_element = getattr(parser, "parse_element", None)
    if parse_element is not None:
        return parse_element
    if callable(parser):
        return parser
    raise TypeError(f"{type(parser).__name__} is neither an ElementParser nor callable")


def split_lines(text: str) -> List[str]:
    r"""Split on "\n" only, dropping one trailing "\r" per line and a final empty line."""
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def parse_grid(parser: ParserLike, text: str, *, out_of_bounds: Any = None) -> ParsedGrid:
    """Parse ``text`` into a grid.

    Raises ``WidthMismatchError`` on the first line whose length differs from
    the first line's, and ``InvalidElementError`` on the first character the
    parser rejects. No partial grid is produced in either case.

    The sentinel is ``out_of_bounds`` if given, otherwise the parser's own
    ``out_of_bounds`` attribute when it has one.
    """
    parse_element = _element_fn(parser)
    if out_of_bounds is None:
        out_of_bounds = getattr(parser, "out_of_bounds", None)

    width: Optional[int] = None
    height = 0
    elements: List[Any] = []
    for y, line in enumerate(split_lines(text)):
        if width is not None and len(line) != width:
            raise WidthMismatchError(y + 1, width, len(line), line)
        for x, char in enumerate(line):
            element = parse_element((x, y), char)
            if element is None:
                raise InvalidElementError(char, (x, y))
            elements.append(element)
        width = len(line)
        height += 1

    grid = Grid(elements, width or 0, height, out_of_bounds)
    return ParsedGrid(grid, parser)
