"""
Shared building blocks: cost matrix, problem abstractions, config and logging.
"""

from .config import SearchConfig
from .matrix import CostMatrix, MatrixError
from .problem import ProblemInterface, Solution
from .utils import INF, setup_logging

__all__ = [
    'CostMatrix',
    'MatrixError',
    'ProblemInterface',
    'Solution',
    'SearchConfig',
    'INF',
    'setup_logging',
]
