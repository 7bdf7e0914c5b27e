"""
Configuration surface for the exact search template.
"""

from __future__ import annotations

import numbers
from dataclasses import asdict, dataclass, fields
from typing import Any, Dict


@dataclass(frozen=True)
class SearchConfig:
    """Parameters of one `ExactSolution.solve` invocation.

    Notes:
    - `max_start_vertex` selects start vertices 0..max_start_vertex inclusive;
      it is checked against the matrix size when the search starts.
    - `time_denominator` divides the elapsed milliseconds for the `time:` log
      line (1000.0 reports seconds).
    """

    problem_name: str = "tsp"
    max_start_vertex: int = 0
    record_all_best: bool = True
    time_denominator: float = 1000.0

    def __post_init__(self) -> None:
        if isinstance(self.max_start_vertex, bool) or not isinstance(self.max_start_vertex, numbers.Integral):
            raise ValueError(f"max_start_vertex must be an int, got {self.max_start_vertex!r}")
        if self.max_start_vertex < 0:
            raise ValueError(f"max_start_vertex must be >= 0, got {self.max_start_vertex}")
        if self.time_denominator <= 0:
            raise ValueError("time_denominator must be positive")

    def to_json_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SearchConfig":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown search config keys: {unknown}")
        return cls(**data)
