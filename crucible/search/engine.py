"""
Route Search Engine - Dijkstra over (position, heading, run) states.

Finds the minimum-cost route across a WeightedGrid for a vehicle that:
    1. never reverses direction
    2. must travel at least min_run cells in a heading before turning
    3. may travel at most max_run cells in a heading before it must turn

The plain cell graph is augmented with the current heading and the
number of consecutive steps taken in it. Every entry cost is
non-negative, so the first time a (location, run) pair comes off the
frontier its cost is final and it is never expanded again.
"""

import heapq
import logging
import time
from typing import Iterator, List, Optional

import numpy as np

from ..geometry import Heading, Path, Point, WeightedGrid
from .context import SearchContext
from .model import Location, SearchState
from .result import RouteResult, SearchMetrics

logger = logging.getLogger(__name__)

# Frontier pops between cancellation checks
CANCEL_CHECK_INTERVAL = 1024


def search(
    grid: WeightedGrid,
    start: Point,
    target: Point,
    min_run: int,
    max_run: int,
) -> Optional[int]:
    """
    Minimum entry cost of a legal route from start to target.

    Args:
        grid: Cost map; the start cell's own cost is never charged
        start: Starting cell
        target: Destination cell
        min_run: Steps required in a heading before a turn (0 = turn freely)
        max_run: Steps allowed in a heading before a turn is mandatory

    Returns:
        The cost, or None if no legal route exists

    Raises:
        ValueError: If the run limits or endpoints are invalid
    """
    return find_route(grid, start, target, min_run, max_run).cost


def find_route(
    grid: WeightedGrid,
    start: Point,
    target: Point,
    min_run: int,
    max_run: int,
    context: Optional[SearchContext] = None,
) -> RouteResult:
    """
    Search for the cheapest legal route and return it with metrics.

    A state only counts as arriving at the target once its run has
    reached min_run; passing through the target mid-run keeps searching.

    Args:
        grid: Cost map
        start: Starting cell
        target: Destination cell
        min_run: Steps required in a heading before a turn
        max_run: Steps allowed in a heading before a turn is mandatory
        context: Optional cancellation / progress context

    Returns:
        RouteResult with cost and path, an empty result if no route
        exists, or was_cancelled=True if the context stopped the search

    Raises:
        ValueError: If the run limits or endpoints are invalid
    """
    _validate(grid, start, target, min_run, max_run)
    start_time = time.perf_counter()
    metrics = SearchMetrics()

    logger.debug(
        f"Searching {grid.width}x{grid.height} grid from {start} to {target}, "
        f"runs {min_run}..{max_run}"
    )

    # Standing still only counts as arriving when no minimum run applies;
    # otherwise the route has to loop back to the start.
    if start == target and min_run == 0:
        return _build_result(metrics, start_time, cost=0, path=Path.from_points([start]))

    # settled[y, x, heading, run]
    settled = np.zeros((grid.height, grid.width, len(Heading), max_run + 1), dtype=bool)
    state_space = grid.width * grid.height * len(Heading) * max_run

    frontier: List[SearchState] = []
    for heading in Heading:
        first = grid.step(start, heading)
        if first is not None:
            heapq.heappush(frontier, SearchState(grid.cost_at(first), Location(first, heading), 1))
    metrics.states_pushed = len(frontier)
    metrics.peak_frontier = len(frontier)

    while frontier:
        if context is not None and metrics.states_popped % CANCEL_CHECK_INTERVAL == 0:
            if context.is_cancelled():
                logger.warning(
                    f"Search cancelled after {metrics.states_settled} settled states"
                )
                return _build_result(metrics, start_time, was_cancelled=True)
            context.report_progress(
                metrics.states_settled / state_space,
                f"{metrics.states_settled} states settled",
            )

        state = heapq.heappop(frontier)
        metrics.states_popped += 1

        if state.position == target and state.run >= min_run:
            path = Path.from_points([start] + state.trail())
            logger.debug(f"Route found: cost={state.cost}, steps={path.step_count}")
            return _build_result(metrics, start_time, cost=state.cost, path=path)

        key = (state.position.y, state.position.x, state.heading.value, state.run)
        if settled[key]:
            continue
        settled[key] = True
        metrics.states_settled += 1

        for successor in _successors(grid, state, min_run, max_run):
            heapq.heappush(frontier, successor)
            metrics.states_pushed += 1
        metrics.peak_frontier = max(metrics.peak_frontier, len(frontier))

    logger.debug(f"No route after settling {metrics.states_settled} states")
    return _build_result(metrics, start_time)


def _successors(
    grid: WeightedGrid,
    state: SearchState,
    min_run: int,
    max_run: int,
) -> Iterator[SearchState]:
    """Forward while under max_run, left and right once min_run is met. Never back."""
    headings: List[Heading] = []
    if state.run < max_run:
        headings.append(state.heading)
    if state.run >= min_run:
        headings.append(state.heading.rotate_clockwise())
        headings.append(state.heading.rotate_anticlockwise())

    for heading in headings:
        position = grid.step(state.position, heading)
        if position is not None:
            yield state.advance(position, heading, grid.cost_at(position))


def _validate(
    grid: WeightedGrid,
    start: Point,
    target: Point,
    min_run: int,
    max_run: int,
) -> None:
    if min_run < 0:
        raise ValueError(f"min_run must be non-negative, got {min_run}")
    if max_run < 1:
        raise ValueError(f"max_run must be at least 1, got {max_run}")
    if min_run > max_run:
        raise ValueError(f"min_run ({min_run}) exceeds max_run ({max_run})")
    if not grid.in_bounds(start):
        raise ValueError(f"Start {start} is outside the grid")
    if not grid.in_bounds(target):
        raise ValueError(f"Target {target} is outside the grid")


def _build_result(
    metrics: SearchMetrics,
    start_time: float,
    cost: Optional[int] = None,
    path: Optional[Path] = None,
    was_cancelled: bool = False,
) -> RouteResult:
    """Build RouteResult object from computation results."""
    metrics.computation_time_ms = (time.perf_counter() - start_time) * 1000
    return RouteResult(cost=cost, path=path, was_cancelled=was_cancelled, metrics=metrics)
