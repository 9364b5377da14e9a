"""Small geometric value types shared by grid callers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

Position = Tuple[int, int]  # (x, y)

# Four-directional movement (left, right, up, down).
ORTHOGONAL: Tuple[Position, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
DIAGONAL: Tuple[Position, ...] = ((-1, -1), (1, -1), (-1, 1), (1, 1))


@dataclass(frozen=True)
class Size:
    """Width/height pair."""

    width: int
    height: int

    @property
    def area(self) -> int:
        return self.width * self.height

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height


def manhattan(a: Position, b: Position) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def euclidean(a: Position, b: Position) -> float:
    dx = b[0] - a[0]
    dy = b[1] - a[1]
    return math.sqrt(dx * dx + dy * dy)
