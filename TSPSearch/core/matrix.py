"""
Dense cost matrix shared by the greedy and exact TSP solvers.

Rows are the `from` vertex, columns the `to` vertex. Non-traversable edges
are stored as +inf; the diagonal is always +inf.
"""

from __future__ import annotations

from typing import Iterable, Sequence, Tuple

import numpy as np

from .utils import INF


class MatrixError(ValueError):
    """Raised when a cost matrix cannot be built from the supplied values."""


class CostMatrix:
    """
    Immutable square matrix of edge costs in the extended reals.

    Vertex 0 is the depot: every tour starts there (for single-start
    searches) and every tour is closed by the edge back to it.
    """

    def __init__(self, values: Iterable[Iterable[float]]):
        """
        Args:
            values: N x N nested sequence (or ndarray) of numbers convertible
                to float. Use `float("inf")` for missing edges.

        Raises:
            MatrixError: if the values are not a square, non-negative,
                NaN-free matrix with at least two vertices.
        """
        try:
            array = np.array(values, dtype=float)
        except (TypeError, ValueError) as exc:
            raise MatrixError(f"cost matrix must contain numbers: {exc}") from exc

        if array.ndim != 2 or array.shape[0] != array.shape[1]:
            raise MatrixError(f"cost matrix must be square, got shape {array.shape}")
        if array.shape[0] < 2:
            raise MatrixError("cost matrix needs at least 2 vertices")
        if np.isnan(array).any():
            raise MatrixError("cost matrix must not contain NaN")
        if (array < 0).any():
            raise MatrixError("cost matrix entries must be >= 0 or +inf")

        np.fill_diagonal(array, INF)
        array.setflags(write=False)
        self._values = array
        self._rows: Tuple[Tuple[float, ...], ...] = tuple(tuple(row) for row in array.tolist())

    @classmethod
    def from_edges(cls, size: int, edges: Iterable[Tuple[int, int, float]]) -> "CostMatrix":
        """Build a matrix from (from, to, cost) triples; unlisted edges are +inf."""
        if size < 2:
            raise MatrixError("cost matrix needs at least 2 vertices")
        array = np.full((size, size), INF)
        for i, j, cost in edges:
            if not (0 <= i < size and 0 <= j < size):
                raise MatrixError(f"edge ({i}, {j}) is outside a {size}-vertex matrix")
            array[i, j] = cost
        return cls(array)

    @property
    def size(self) -> int:
        return self._values.shape[0]

    def __len__(self) -> int:
        return self.size

    @property
    def values(self) -> np.ndarray:
        """Read-only view of the underlying float array."""
        return self._values

    def rows(self) -> Tuple[Tuple[float, ...], ...]:
        """Immutable Python rows, used by the search loops for fast scalar access."""
        return self._rows

    def row(self, vertex: int) -> Tuple[float, ...]:
        return self._rows[vertex]

    def edge(self, start: int, end: int) -> float:
        return self._rows[start][end]

    def tour_cost(self, tour: Sequence[int]) -> float:
        """
        Closed-tour weight of `tour`: the edges along the sequence plus the
        edge from its last vertex back to vertex 0.
        """
        if not tour:
            return 0.0
        total = 0.0
        for current, following in zip(tour, tour[1:]):
            total += self._rows[current][following]
        return total + self._rows[tour[-1]][0]

    def is_symmetric(self) -> bool:
        return bool(np.array_equal(self._values, self._values.T))

    def scaled(self, factor: float) -> "CostMatrix":
        """Return a new matrix with every finite entry multiplied by `factor`."""
        if factor < 0:
            raise MatrixError("scale factor must be non-negative")
        array = np.array(self._values)
        finite = np.isfinite(array)
        array[finite] *= factor
        return CostMatrix(array)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CostMatrix):
            return NotImplemented
        return bool(np.array_equal(self._values, other._values))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"CostMatrix(size={self.size})"
