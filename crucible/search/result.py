"""
Route Result Module - Outcome of a constrained route search.
"""

from dataclasses import dataclass, field
from typing import Optional

from ..geometry import Path


@dataclass
class SearchMetrics:
    """
    Performance metrics for a route search.

    Attributes:
        computation_time_ms: Time taken in milliseconds
        states_popped: States taken off the frontier
        states_settled: Distinct (location, run) pairs expanded
        states_pushed: States added to the frontier
        peak_frontier: Largest frontier size observed
    """
    computation_time_ms: float = 0.0
    states_popped: int = 0
    states_settled: int = 0
    states_pushed: int = 0
    peak_frontier: int = 0


@dataclass
class RouteResult:
    """
    Result of a route search.

    Exactly one of three outcomes holds: a route was found (cost is set),
    no route exists (cost is None, not cancelled), or the search was
    cancelled (cost is None, was_cancelled is True).

    Attributes:
        cost: Minimum accumulated entry cost, or None
        path: Points from start to target inclusive, or None
        was_cancelled: True if stopped before completion
        metrics: Performance statistics
    """
    cost: Optional[int] = None
    path: Optional[Path] = None
    was_cancelled: bool = False
    metrics: SearchMetrics = field(default_factory=SearchMetrics)

    @property
    def found(self) -> bool:
        """True if a legal route was found."""
        return self.cost is not None
