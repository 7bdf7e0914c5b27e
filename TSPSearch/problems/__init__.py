"""
Problem adapters.
"""

from .tsp import TSPProblem

__all__ = ['TSPProblem']
