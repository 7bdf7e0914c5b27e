"""
TSPSearch

Minimum-cost Hamiltonian tours over dense directed cost matrices: a
nearest-neighbour greedy bound plus a bounded depth-first exact search with
caller hooks for derived problem variants.
"""

from .core import CostMatrix, INF, MatrixError, ProblemInterface, SearchConfig, Solution, setup_logging
from .problems import TSPProblem
from .solvers import ExactSolution, GreedyAlgorithm, GreedyResult, SearchResult, greedy_tour

__version__ = "0.1.0"
__all__ = [
    'CostMatrix', 'MatrixError', 'INF',
    'ProblemInterface', 'Solution', 'SearchConfig', 'setup_logging',
    'GreedyAlgorithm', 'GreedyResult', 'greedy_tour',
    'ExactSolution', 'SearchResult',
    'TSPProblem',
    '__version__'
]
