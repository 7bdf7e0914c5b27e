"""
TSP problem adapter.
Wraps a CostMatrix to implement core.problem.ProblemInterface and ties it to
the greedy and exact solvers.
"""

import logging
from typing import Any, Dict, Optional

from ..core.config import SearchConfig
from ..core.matrix import CostMatrix
from ..core.problem import ProblemInterface, Solution
from ..solvers.exact import ExactSolution, Hook, SearchResult
from ..solvers.greedy import GreedyAlgorithm, GreedyResult, MatrixLike, as_cost_matrix


class TSPProblem(ProblemInterface):
    """
    Travelling-salesman problem over a dense directed cost matrix.

    Tours are lists of 0-based vertex indices, closed by the edge back to
    vertex 0.
    """

    def __init__(self, matrix: MatrixLike, *, name: str = "tsp", logger: Optional[logging.Logger] = None):
        self.matrix: CostMatrix = as_cost_matrix(matrix)
        self.name = name
        self.logger = logger
        self._greedy: Optional[GreedyResult] = None

    def evaluate(self, solution: Solution) -> float:
        return self.matrix.tour_cost(solution.representation)

    def greedy(self) -> GreedyResult:
        """Greedy tour for this instance, computed once."""
        if self._greedy is None:
            self._greedy = GreedyAlgorithm(self.matrix, logger=self.logger).find_path()
        return self._greedy

    def get_initial_solution(self) -> Solution:
        """The greedy nearest-neighbour tour, already evaluated."""
        greedy = self.greedy()
        solution = Solution(list(greedy.tour), self)
        solution.fitness = greedy.weight
        return solution

    def get_problem_info(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'dimension': self.matrix.size,
            'problem_type': 'permutation',
            'symmetric': self.matrix.is_symmetric(),
        }

    def get_bounds(self) -> Dict[str, float]:
        return {"lower_bound": 0.0, "upper_bound": self.greedy().weight}

    def solve_exact(
        self,
        config: Optional[SearchConfig] = None,
        *,
        solve_sub_problem: Optional[Hook] = None,
        on_strict_improvement: Optional[Hook] = None,
        on_equal_cost: Optional[Hook] = None,
    ) -> SearchResult:
        config = config or SearchConfig(problem_name=self.name)
        solver = ExactSolution(self.matrix, logger=self.logger)
        return solver.solve(
            solve_sub_problem=solve_sub_problem,
            on_strict_improvement=on_strict_improvement,
            on_equal_cost=on_equal_cost,
            config=config,
        )

    def best_solution(self, result: SearchResult) -> Solution:
        """Wrap the best tour of `result` as an evaluated Solution."""
        solution = Solution(list(result.best_tour), self)
        solution.fitness = result.best_cost
        return solution
