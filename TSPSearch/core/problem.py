import abc
import copy
from itertools import count
from typing import Any, Dict, List, Optional


class Solution:
    """A candidate tour together with its (lazily computed) cost."""
    _id_counter = count()

    def __init__(self, representation: List[int], problem: 'ProblemInterface', *, solution_id: Optional[int] = None):
        self.representation = representation
        self.problem = problem
        self.fitness: Optional[float] = None
        self.id: int = int(next(self._id_counter) if solution_id is None else solution_id)

    def evaluate(self) -> float:
        """Calculates and stores the cost of this tour."""
        if self.fitness is None:
            self.fitness = self.problem.evaluate(self)
        return self.fitness

    def copy(self, *, preserve_id: bool = True) -> 'Solution':
        """Creates a copy of this solution.

        Args:
            preserve_id: When True (default), the clone keeps the same `id`.
                Set to False if the copy represents a genuinely new tour.
        """
        new_id = self.id if preserve_id else None
        if isinstance(self.representation, list):
            new_repr = self.representation.copy()
        else:
            new_repr = copy.deepcopy(self.representation)
        new_solution = Solution(new_repr, self.problem, solution_id=new_id)
        new_solution.fitness = self.fitness
        return new_solution

    def __lt__(self, other: 'Solution') -> bool:
        """Orders by cost (minimization)."""
        if self.fitness is None or other.fitness is None:
            return False
        return self.fitness < other.fitness

    def __gt__(self, other: 'Solution') -> bool:
        if self.fitness is None or other.fitness is None:
            return False
        return self.fitness > other.fitness

    def __eq__(self, other: object) -> bool:
        """Two solutions are equal when they describe the same tour."""
        if not isinstance(other, Solution):
            return NotImplemented
        return list(self.representation) == list(other.representation)

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return f"Solution({self.representation}, Fitness: {self.fitness})"


class ProblemInterface(abc.ABC):
    """Contract a path problem offers to the tour solvers."""

    @abc.abstractmethod
    def evaluate(self, solution: Solution) -> float:
        """
        Closed-tour cost of `solution.representation`; +inf when the tour
        uses a missing edge.
        """
        pass

    @abc.abstractmethod
    def get_initial_solution(self) -> Solution:
        """A starting tour, e.g. the greedy one, ideally with fitness filled in."""
        pass

    @abc.abstractmethod
    def get_problem_info(self) -> Dict[str, Any]:
        """Descriptive metadata: at least 'dimension' (vertex count) and 'problem_type'."""
        pass

    def get_bounds(self) -> Dict[str, Any]:
        """'lower_bound' / 'upper_bound' on the optimal tour cost, when known."""
        return {}

    def get_initial_population(self, size: int) -> List[Solution]:
        return [self.get_initial_solution() for _ in range(size)]
