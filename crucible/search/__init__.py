"""
Search Package - Run-length constrained minimum-cost routing on a weighted grid.

Public API:
    - search(): Minimum route cost, or None if no route exists
    - find_route(): Full RouteResult with path, metrics and cancellation
    - Location, SearchState: State-space model
    - SearchContext: Cancellation, timeout and progress hooks
    - RouteResult, SearchMetrics: Search outcome

Usage:
    from crucible.geometry import Point, WeightedGrid
    from crucible.search import search

    grid = WeightedGrid.from_lines(text)
    cost = search(grid, Point(0, 0), Point(grid.width - 1, grid.height - 1),
                  min_run=4, max_run=10)
    if cost is None:
        print("No route")
"""

from .model import Location, SearchState
from .context import SearchContext
from .result import RouteResult, SearchMetrics
from .engine import search, find_route

__all__ = [
    "Location",
    "SearchState",
    "SearchContext",
    "RouteResult",
    "SearchMetrics",
    "search",
    "find_route",
]
