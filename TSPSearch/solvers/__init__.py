"""
Greedy and exact tour solvers.
"""

from .exact import ExactSolution, Hook, SearchResult
from .greedy import GreedyAlgorithm, GreedyResult, greedy_tour

__all__ = [
    'ExactSolution',
    'GreedyAlgorithm',
    'GreedyResult',
    'Hook',
    'SearchResult',
    'greedy_tour',
]
