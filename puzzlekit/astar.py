"""A* shortest-path search over an implicitly defined graph.

Nodes can be any hashable, totally ordered value (tuples of ints work well).
The graph is never materialised: the caller supplies a heuristic and a
neighbour-expansion callback, either as two functions or as an object
implementing ``SearchProblem``.

Frontier selection picks the lowest ``f = g + h``. Among equal ``f`` values
the smallest node by its natural ordering wins, so repeated runs over the
same inputs always return the same path.

Usage pattern:
    path = find_path(
        start=0,
        goal=4,
        heuristic=lambda n: abs(4 - n),
        visit_neighbors=lambda n, visit: [visit(m, 1.0) for m in (n - 1, n + 1) if 0 <= m <= 4],
    )
    # path == [1, 2, 3, 4]; start is not included

An unreachable goal yields ``None``. Heuristic admissibility and
non-negative edge weights are the caller's responsibility.
"""

from __future__ import annotations

import heapq
from dataclasses import dataclass, field
from math import inf
from typing import Any, Callable, Dict, Generic, Hashable, List, Optional, Protocol, Set, Tuple, TypeVar

Node = TypeVar("Node", bound=Hashable)

Visit = Callable[[Any, float], None]
Heuristic = Callable[[Any], float]
VisitNeighbors = Callable[[Any, Visit], None]


class SearchProblem(Protocol):
    """Capability interface for callers that prefer a strategy object."""

    def estimate(self, node: Any) -> float:
        """Non-negative estimate of the remaining cost from ``node`` to the goal."""
        ...

    def expand(self, node: Any, visit: Visit) -> None:
        """Call ``visit(neighbor, weight)`` once per neighbour of ``node``."""
        ...


@dataclass
class AStar(Generic[Node]):
    """One A* search from ``start`` to ``goal``.

    The instance holds no state between searches apart from ``path_cost`` and
    ``expanded``, which describe the most recent ``find_path`` call.
    """

    start: Node
    goal: Node
    heuristic: Heuristic
    visit_neighbors: VisitNeighbors

    path_cost: Optional[float] = field(default=None, init=False)
    expanded: int = field(default=0, init=False)

    @classmethod
    def from_problem(cls, start: Node, goal: Node, problem: SearchProblem) -> "AStar[Node]":
        return cls(start, goal, problem.estimate, problem.expand)

    @staticmethod
    def _reconstruct_path(came_from: Dict[Node, Node], current: Node) -> List[Node]:
        # Walks back to start; start itself has no predecessor and is left out.
        path = [current]
        while current in came_from:
            current = came_from[current]
            path.append(current)
        path.pop()
        path.reverse()
        return path

    def find_path(self) -> Optional[List[Node]]:
        """Return the nodes after ``start`` up to and including ``goal``, or ``None``."""
        self.path_cost = None
        self.expanded = 0

        came_from: Dict[Node, Node] = {}
        g_score: Dict[Node, float] = {self.start: 0.0}
        f_score: Dict[Node, float] = {self.start: float(self.heuristic(self.start))}
        open_set: Set[Node] = {self.start}
        # (f, node); stale entries are skipped when popped.
        open_heap: List[Tuple[float, Node]] = [(f_score[self.start], self.start)]

        while open_heap:
            # Lowest f first; equal f falls back to the node's own ordering, so
            # the same inputs always expand nodes in the same order.
            f_current, current = heapq.heappop(open_heap)
            # A node pushed again with a better score leaves its old entry behind.
            # Skip entries for nodes already expanded or whose f has since changed.
            if current not in open_set or f_current != f_score[current]:
                continue

            # Goal selected from the frontier - its g score can no longer improve
            if current == self.goal:
                self.path_cost = g_score[current]
                return self._reconstruct_path(came_from, current)

            open_set.remove(current)
            self.expanded += 1
            g_current = g_score[current]

            def visit(neighbor: Node, weight: float) -> None:
                # Cost of reaching neighbor through current. Unknown nodes count as infinite.
                tentative_g = g_current + weight
                if tentative_g < g_score.get(neighbor, inf):
                    # Strictly better route: remember it and (re)admit neighbor
                    # to the frontier with its new estimate.
                    came_from[neighbor] = current
                    g_score[neighbor] = tentative_g
                    f_neighbor = tentative_g + self.heuristic(neighbor)
                    f_score[neighbor] = f_neighbor
                    open_set.add(neighbor)
                    heapq.heappush(open_heap, (f_neighbor, neighbor))

            # Caller reports each neighbor synchronously through visit()
            self.visit_neighbors(current, visit)

        # Frontier exhausted without selecting the goal - it is unreachable
        return None


def find_path(
    start: Node,
    goal: Node,
    heuristic: Heuristic,
    visit_neighbors: VisitNeighbors,
) -> Optional[List[Node]]:
    """Run a single A* search; see ``AStar.find_path``."""
    return AStar(start, goal, heuristic, visit_neighbors).find_path()
