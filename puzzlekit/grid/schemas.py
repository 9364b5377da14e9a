"""Pydantic schemas for grid snapshots and path reports.

These models mirror the in-memory ``Grid`` and search results but stay
JSON-serializable, so a solver can dump its state for inspection.
"""

from __future__ import annotations

from typing import Any, Callable, List, Optional, Tuple

from pydantic import BaseModel, Field, model_validator

from .bitmap import Grid
from .parser import ParserLike, parse_grid


class GridSnapshot(BaseModel):
    """Text rendering of a grid plus its dimensions."""

    width: int = Field(..., ge=0)
    height: int = Field(..., ge=0)
    rows: List[str] = Field(
        default_factory=list,
        description="One string per row, top to bottom; each exactly `width` characters",
    )

    @model_validator(mode="after")
    def _check_dimensions(self) -> "GridSnapshot":
        if len(self.rows) != self.height:
            raise ValueError(f"expected {self.height} rows, got {len(self.rows)}")
        for index, row in enumerate(self.rows):
            if len(row) != self.width:
                raise ValueError(f"row {index} has width {len(row)}, expected {self.width}")
        return self

    @classmethod
    def from_grid(cls, grid: Grid, symbol: Callable[[Any], str] = str) -> "GridSnapshot":
        rows = ["".join(symbol(cell) for cell in row) for row in grid.rows()]
        return cls(width=grid.width, height=grid.height, rows=rows)

    def to_grid(self, parser: ParserLike, *, out_of_bounds: Any = None) -> Grid:
        return parse_grid(parser, "\n".join(self.rows), out_of_bounds=out_of_bounds).grid


class PathReport(BaseModel):
    """Outcome of a single path search."""

    start: Tuple[int, int]
    goal: Tuple[int, int]
    found: bool
    length: Optional[int] = Field(None, description="Number of steps; None when not found")
    cost: Optional[float] = None
    path: List[Tuple[int, int]] = Field(default_factory=list)

    @classmethod
    def from_path(
        cls,
        start: Tuple[int, int],
        goal: Tuple[int, int],
        path: Optional[List[Tuple[int, int]]],
        cost: Optional[float] = None,
    ) -> "PathReport":
        if path is None:
            return cls(start=start, goal=goal, found=False)
        return cls(start=start, goal=goal, found=True, length=len(path), cost=cost, path=list(path))
