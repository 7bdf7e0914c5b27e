"""
Exact TSP search template.

Seeds the best cost with the greedy tour, then enumerates tours by
depth-first backtracking, pruning any branch whose running cost already
reaches the best known cost. Every tour matching the optimum is kept.

Derived problem variants take part through three nullary hooks instead of
subclassing:

- `on_strict_improvement` fires when a complete tour beats the best cost;
- `on_equal_cost` fires when a complete tour ties the best cost;
- `solve_sub_problem` fires once after all start vertices are searched.

Hook return values are ignored. Hooks may read the template's public
attributes (`matrix`, `best_tour`, `best_cost`, `all_best_tours`,
`closed_vertices`, `open_vertices`) but must not modify them.

All tours are closed through vertex 0 (the depot), whatever the start
vertex. With a start vertex other than 0 the reported tour is therefore a
path that begins at the start vertex and is charged the edge from its last
vertex to 0.
"""

from __future__ import annotations

import dataclasses
import logging
import math
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Set, Tuple

from ..core.config import SearchConfig
from ..core.utils import EXACT_BANNER, TIME, is_finite
from .greedy import GreedyAlgorithm, GreedyResult, MatrixLike, as_cost_matrix

Hook = Callable[[], Any]

_log = logging.getLogger(__name__)


def _noop() -> None:
    return None


def _check_hook(name: str, hook: Optional[Hook]) -> Hook:
    if hook is None:
        return _noop
    if not callable(hook):
        raise TypeError(f"{name} must be callable, got {type(hook).__name__}")
    return hook


@dataclass(frozen=True)
class SearchResult:
    """Outcome of one `ExactSolution.solve` call. `elapsed_time` is in milliseconds."""
    best_tour: Tuple[int, ...]
    best_cost: float
    all_best_tours: Tuple[Tuple[int, ...], ...]
    elapsed_time: float
    greedy: GreedyResult
    problem_name: str
    max_start_vertex: int

    @property
    def feasible(self) -> bool:
        return is_finite(self.best_cost)

    def to_json_dict(self) -> Dict[str, Any]:
        return {
            "problem_name": self.problem_name,
            "max_start_vertex": self.max_start_vertex,
            "best_tour": list(self.best_tour),
            "best_cost": self.best_cost,
            "all_best_tours": [list(tour) for tour in self.all_best_tours],
            "elapsed_time_ms": self.elapsed_time,
            "greedy_tour": list(self.greedy.tour),
            "greedy_weight": self.greedy.weight,
        }


class ExactSolution:
    """
    Depth-first backtracking search for minimum-cost tours in an N x N matrix.

    One instance may be solved several times; each `solve` call starts from a
    fresh greedy seed, so repeated calls give identical results.
    """

    def __init__(self, matrix: MatrixLike, logger: Optional[logging.Logger] = None):
        self.matrix = as_cost_matrix(matrix)
        self.logger = logger or _log
        self._rows = self.matrix.rows()

        self.open_vertices: List[int] = []
        self.closed_vertices: List[int] = []
        self.best_tour: List[int] = []
        self.all_best_tours: List[List[int]] = []
        self.best_cost = 0.0
        self.elapsed_time = 0.0
        self.greedy_result: Optional[GreedyResult] = None

        self._seen_best: Set[Tuple[int, ...]] = set()
        self._record_all_best = True
        self._on_strict_improvement: Hook = _noop
        self._on_equal_cost: Hook = _noop

    def solve(
        self,
        problem_name: Optional[str] = None,
        max_start_vertex: Optional[int] = None,
        solve_sub_problem: Optional[Hook] = None,
        on_strict_improvement: Optional[Hook] = None,
        on_equal_cost: Optional[Hook] = None,
        *,
        config: Optional[SearchConfig] = None,
    ) -> SearchResult:
        """
        Finds the optimal tours, starting from vertices 0..max_start_vertex.

        Args:
            problem_name: Label for the log banner; overrides `config.problem_name`.
            max_start_vertex: Highest start vertex (inclusive); overrides
                `config.max_start_vertex`. Defaults to 0, a single start at the depot.
            solve_sub_problem: Called once after the search over all start vertices.
            on_strict_improvement: Called when a tour strictly beats the best cost.
            on_equal_cost: Called when a tour ties the best cost.
            config: Base configuration; defaults to `SearchConfig()`.

        Returns:
            The SearchResult. An infeasible matrix gives `best_cost == inf`.

        Raises:
            ValueError: if max_start_vertex is outside 0..N-1.
            TypeError: if a hook is not callable.
        """
        config = config or SearchConfig()
        overrides: Dict[str, Any] = {}
        if problem_name is not None:
            overrides["problem_name"] = problem_name
        if max_start_vertex is not None:
            overrides["max_start_vertex"] = max_start_vertex
        if overrides:
            config = dataclasses.replace(config, **overrides)
        if config.max_start_vertex >= self.matrix.size:
            raise ValueError(
                f"max_start_vertex {config.max_start_vertex} is out of range for {self.matrix.size} vertices"
            )

        sub_problem = _check_hook("solve_sub_problem", solve_sub_problem)
        self._on_strict_improvement = _check_hook("on_strict_improvement", on_strict_improvement)
        self._on_equal_cost = _check_hook("on_equal_cost", on_equal_cost)
        self._record_all_best = config.record_all_best

        self.logger.info(EXACT_BANNER, config.problem_name)
        self._seed(GreedyAlgorithm(self.matrix, logger=self.logger).find_path())

        start_time = time.perf_counter()
        self._init_solve(config.max_start_vertex)
        sub_problem()
        self.elapsed_time = (time.perf_counter() - start_time) * 1000.0
        self.logger.info(TIME, self.elapsed_time / config.time_denominator)

        return SearchResult(
            best_tour=tuple(self.best_tour),
            best_cost=self.best_cost,
            all_best_tours=tuple(tuple(tour) for tour in self.all_best_tours),
            elapsed_time=self.elapsed_time,
            greedy=self.greedy_result,
            problem_name=config.problem_name,
            max_start_vertex=config.max_start_vertex,
        )

    def _seed(self, greedy: GreedyResult) -> None:
        self.greedy_result = greedy
        self.best_tour = list(greedy.tour)
        self.best_cost = greedy.weight
        self.all_best_tours = [list(greedy.tour)]
        self._seen_best = {greedy.tour}

    def _init_solve(self, max_start_vertex: int) -> None:
        """Runs the depth-first search once per start vertex."""
        for start in range(max_start_vertex + 1):
            self.closed_vertices = [start]
            self.open_vertices = [vertex for vertex in range(self.matrix.size) if vertex != start]
            self._search(0.0)

    def _search(self, running_cost: float) -> None:
        closed = self.closed_vertices
        open_vertices = self.open_vertices

        if not open_vertices:
            self._finish_tour(running_cost + self._rows[closed[-1]][0])
            return

        last_row = self._rows[closed[-1]]
        for index in range(len(open_vertices)):
            if running_cost >= self.best_cost:
                break
            weight = last_row[open_vertices[index]]
            if math.isinf(weight):
                continue
            closed.append(open_vertices.pop(index))
            self._search(running_cost + weight)
            open_vertices.insert(index, closed.pop())

    def _finish_tour(self, total: float) -> None:
        # An infinite total never becomes the best, even against an infinite bound.
        if math.isinf(total) or total > self.best_cost:
            return
        previous = self.best_cost
        self.best_cost = total
        self.best_tour = list(self.closed_vertices)

        if total < previous:
            # Older tours no longer cost best_cost, whatever record_all_best says.
            self.all_best_tours = [list(self.best_tour)]
            self._seen_best = {tuple(self.best_tour)}
            self._on_strict_improvement()
        else:
            if self._record_all_best:
                key = tuple(self.best_tour)
                if key not in self._seen_best:
                    self._seen_best.add(key)
                    self.all_best_tours.append(list(self.best_tour))
            self._on_equal_cost()
