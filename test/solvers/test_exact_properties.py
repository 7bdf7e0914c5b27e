"""
Randomised checks of the exact search against brute-force enumeration, plus
a secondary-objective variant assembled purely from hooks.
"""

import itertools
import sys
from pathlib import Path
from typing import List, Optional

import numpy as np
import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from TSPSearch.core.matrix import CostMatrix
from TSPSearch.solvers.exact import ExactSolution

SEEDS = [0, 1, 7, 42]
SIZES = [4, 5, 6]


def random_matrix(n: int, seed: int, symmetric: bool = False) -> CostMatrix:
    rng = np.random.default_rng(seed)
    values = rng.integers(1, 20, size=(n, n)).astype(float)
    if symmetric:
        values = np.triu(values) + np.triu(values, 1).T
    return CostMatrix(values)


def brute_force(matrix: CostMatrix):
    costs = {}
    for perm in itertools.permutations(range(1, matrix.size)):
        tour = (0,) + perm
        costs[tour] = matrix.tour_cost(tour)
    best = min(costs.values())
    return best, {tour for tour, cost in costs.items() if cost == best}


@pytest.mark.parametrize("seed", SEEDS)
@pytest.mark.parametrize("n", SIZES)
class TestAgainstBruteForce:
    def test_cost_and_optimal_set(self, n, seed):
        matrix = random_matrix(n, seed)
        best, optimal = brute_force(matrix)
        result = ExactSolution(matrix).solve("random")
        assert result.best_cost == best
        assert set(result.all_best_tours) == optimal
        assert len(result.all_best_tours) == len(optimal)

    def test_greedy_is_upper_bound(self, n, seed):
        result = ExactSolution(random_matrix(n, seed)).solve("random")
        assert result.greedy.weight >= result.best_cost

    def test_single_start_tour_shape(self, n, seed):
        result = ExactSolution(random_matrix(n, seed)).solve("random")
        assert result.best_tour[0] == 0
        assert sorted(result.best_tour) == list(range(n))

    def test_multi_start_tours_cost_best(self, n, seed):
        matrix = random_matrix(n, seed)
        result = ExactSolution(matrix).solve("random", max_start_vertex=n - 1)
        assert sorted(result.best_tour) == list(range(n))
        for tour in result.all_best_tours:
            assert matrix.tour_cost(tour) == result.best_cost
        # More start vertices can only lower the depot-closed cost.
        assert result.best_cost <= brute_force(matrix)[0]

    def test_doubling_costs(self, n, seed):
        matrix = random_matrix(n, seed)
        base = ExactSolution(matrix).solve("base")
        doubled = ExactSolution(matrix.scaled(2)).solve("doubled")
        assert doubled.best_cost == 2 * base.best_cost
        assert doubled.best_tour == base.best_tour
        assert doubled.all_best_tours == base.all_best_tours

    def test_symmetric_reversal(self, n, seed):
        matrix = random_matrix(n, seed, symmetric=True)
        assert matrix.is_symmetric()
        result = ExactSolution(matrix).solve("symmetric")
        tours = set(result.all_best_tours)
        for tour in tours:
            reversed_tour = (0,) + tuple(reversed(tour[1:]))
            assert reversed_tour in tours


def test_infinite_edges_are_never_used():
    matrix = random_matrix(6, 3).values.copy()
    matrix[0, 1] = np.inf
    matrix[2, 3] = np.inf
    matrix[4, 0] = np.inf
    cost_matrix = CostMatrix(matrix)
    best, optimal = brute_force(cost_matrix)
    result = ExactSolution(cost_matrix).solve("sparse")
    assert result.best_cost == best
    assert set(result.all_best_tours) == optimal


class SecondaryObjectiveVariant:
    """
    Picks, among the optimal tours of the primary matrix, the one that is
    cheapest under a second matrix. Built only from the template's hooks.
    """

    def __init__(self, primary: CostMatrix, secondary: CostMatrix):
        self.secondary = secondary
        self.solver = ExactSolution(primary)
        self.candidates: List[List[int]] = []
        self.sub_best: Optional[List[int]] = None

    def _reset(self):
        self.candidates = [list(self.solver.best_tour)]

    def _keep(self):
        self.candidates.append(list(self.solver.best_tour))

    def _pick(self):
        self.sub_best = min(self.candidates, key=self.secondary.tour_cost)

    def run(self):
        self.solver.solve("dependent", 0, self._pick, self._reset, self._keep)
        return self.sub_best


def test_secondary_objective_variant():
    primary = CostMatrix([[np.inf if i == j else 1 for j in range(4)] for i in range(4)])
    secondary = CostMatrix([
        [np.inf, 1, 9, 9],
        [9, np.inf, 1, 9],
        [9, 9, np.inf, 1],
        [1, 9, 9, np.inf],
    ])
    variant = SecondaryObjectiveVariant(primary, secondary)
    assert variant.run() == [0, 1, 2, 3]
    assert variant.solver.best_cost == 4.0
