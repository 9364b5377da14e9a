"""
Maze solver built on the puzzlekit harness.

Input is a rectangular block of text: '#' walls, '.' open floor, 'S' the start
and 'E' the exit. Prints the length of the shortest S -> E path and how many
open cells have any path to E.

Run: python examples/maze/run.py examples/maze/sample.txt -d path
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Optional, Tuple

from puzzlekit import (
    Challenge,
    GridSnapshot,
    PathReport,
    grid_shortest_path,
    parse_grid,
    print_answer,
    wrap_main,
)

WALL = "#"
FLOOR = "."


@dataclass
class MazeParser:
    """Maps maze characters to cells and remembers the S/E markers."""

    start: Optional[Tuple[int, int]] = None
    goal: Optional[Tuple[int, int]] = None
    out_of_bounds: str = WALL

    def parse_element(self, position: Tuple[int, int], char: str) -> Optional[str]:
        if char == "S":
            self.start = position
            return FLOOR
        if char == "E":
            self.goal = position
            return FLOOR
        if char in (WALL, FLOOR):
            return char
        return None


def walkable(here: str, there: str) -> bool:
    return there == FLOOR


def solve(challenge: Challenge) -> None:
    for input_file in challenge.each_input():
        grid, parser = parse_grid(MazeParser(), input_file.text)
        if parser.start is None:
            raise ValueError("maze is missing a start point 'S'")
        if parser.goal is None:
            raise ValueError("maze is missing an exit 'E'")

        challenge.debug("grid", "\n" + "\n".join(GridSnapshot.from_grid(grid).rows))

        path = grid_shortest_path(grid, parser.start, parser.goal, can_step=walkable)
        if challenge.has_flag("json"):
            print(PathReport.from_path(parser.start, parser.goal, path).model_dump_json())
        if path is None:
            raise ValueError("no path from start to exit")
        challenge.debug("path", f"{path}")
        print_answer(1, len(path))

        reachable = sum(
            1
            for position in grid.find(lambda cell: cell == FLOOR)
            if grid_shortest_path(grid, position, parser.goal, can_step=walkable) is not None
        )
        print_answer(2, reachable)


if __name__ == "__main__":
    wrap_main(solve, sys.argv[1:])
