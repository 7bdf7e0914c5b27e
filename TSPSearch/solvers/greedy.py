"""
Nearest-neighbour greedy tour builder.

Produces a feasible tour (when one is reachable greedily) and its closed-tour
weight, used as the initial upper bound for the exact search.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple, Union

from ..core.matrix import CostMatrix
from ..core.utils import GREEDY_BANNER, INF, SHORTEST_PATH, WEIGHT, is_finite

MatrixLike = Union[CostMatrix, Iterable[Iterable[float]]]

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class GreedyResult:
    """Tour built by the greedy pass; `weight` includes the return edge to vertex 0."""
    tour: Tuple[int, ...]
    weight: float

    @property
    def feasible(self) -> bool:
        return is_finite(self.weight)


def as_cost_matrix(matrix: MatrixLike) -> CostMatrix:
    return matrix if isinstance(matrix, CostMatrix) else CostMatrix(matrix)


class GreedyAlgorithm:
    """
    Greedy nearest-neighbour search for a short tour in a weighted digraph.

    The tour starts at vertex 0 and repeatedly moves to the cheapest unvisited
    vertex. Among equally cheap candidates the one appearing last in ascending
    vertex order wins.
    """

    def __init__(self, matrix: MatrixLike, logger: Optional[logging.Logger] = None):
        """
        Args:
            matrix: A CostMatrix, or any N x N nested sequence of numbers.
            logger: Sink for the progress lines; defaults to the module logger.
        """
        self.matrix = as_cost_matrix(matrix)
        self.logger = logger or _log
        self.min_path: List[int] = [0]
        self.min_weight = 0.0

    def find_path(self) -> GreedyResult:
        """
        Runs the greedy pass. An infinite weight means no greedy tour exists.
        """
        self.logger.info(GREEDY_BANNER)
        rows = self.matrix.rows()
        self.min_path = [0]
        self.min_weight = 0.0
        open_vertex = list(range(1, self.matrix.size))

        while open_vertex:
            last_row = rows[self.min_path[-1]]
            chosen = 0
            current_min = INF
            for index, vertex in enumerate(open_vertex):
                if last_row[vertex] <= current_min:
                    chosen = index
                    current_min = last_row[vertex]
            self.min_path.append(open_vertex.pop(chosen))
            self.min_weight += current_min

        self.min_weight += rows[self.min_path[-1]][0]
        self.logger.info(SHORTEST_PATH, self.min_path)
        self.logger.info(WEIGHT, self.min_weight)
        return GreedyResult(tour=tuple(self.min_path), weight=self.min_weight)


def greedy_tour(matrix: MatrixLike, logger: Optional[logging.Logger] = None) -> GreedyResult:
    """Convenience wrapper: build a GreedyAlgorithm and run it once."""
    return GreedyAlgorithm(matrix, logger=logger).find_path()
