"""
Clumsy Crucible - Route a crucible of lava across the city for least heat loss.

Each city block is a single digit: the heat lost when the crucible
enters it. The crucible starts in the top-left block and must reach the
bottom-right block. It cannot reverse, and the run-length rules differ
per part:
    part one: a regular crucible, at most 3 blocks in a straight line
    part two: an ultra crucible, 4 to 10 blocks before turning or stopping
"""

import logging
from typing import Dict, Optional

from ...debug import save_route_image
from ...geometry import Path, Point, WeightedGrid
from ...search import SearchContext, find_route
from ..base import PuzzleSolver
from ..factory import register_puzzle

logger = logging.getLogger(__name__)

REGULAR_RUNS = (0, 3)
ULTRA_RUNS = (4, 10)


@register_puzzle
class ClumsyCrucibleSolver(PuzzleSolver):
    """
    Minimum heat loss route for the regular and ultra crucibles.
    """
    name = "day17"
    description = "Clumsy Crucible - Run-length constrained least-heat route"
    timeout_sec = 60.0

    def solve_part_one(self, text: str, visualise: bool = False,
                       context: Optional[SearchContext] = None) -> Optional[int]:
        return self._least_heat_loss(text, *REGULAR_RUNS, visualise, context)

    def solve_part_two(self, text: str, visualise: bool = False,
                       context: Optional[SearchContext] = None) -> Optional[int]:
        return self._least_heat_loss(text, *ULTRA_RUNS, visualise, context)

    def _least_heat_loss(self, text: str, min_run: int, max_run: int,
                         visualise: bool,
                         context: Optional[SearchContext]) -> Optional[int]:
        """
        Route from the top-left to the bottom-right corner.

        Raises:
            TimeoutError: If the context cancelled the search
        """
        city = WeightedGrid.from_lines(text)
        start = Point(0, 0)
        target = Point(city.width - 1, city.height - 1)

        result = find_route(city, start, target, min_run, max_run, context=context)
        if result.was_cancelled:
            raise TimeoutError(
                f"{self.name} route search cancelled after "
                f"{result.metrics.computation_time_ms:.0f}ms"
            )

        logger.info(
            f"Runs {min_run}..{max_run}: heat loss {result.cost}, "
            f"{result.metrics.states_settled} states in "
            f"{result.metrics.computation_time_ms:.1f}ms"
        )

        if result.path is not None:
            if visualise:
                print(render_route(city, result.path))
            if self.debug:
                image_path = save_route_image(city, result.path)
                logger.info(f"Debug image saved: {image_path}")
        return result.cost


def render_route(city: WeightedGrid, path: Path) -> str:
    """
    Draw the city with the route marked by heading arrows.

    Blocks the route enters show the arrow of the step into them;
    every other block shows its heat loss digit.
    """
    arrows: Dict[Point, str] = {
        point: heading.arrow
        for point, heading in zip(path.points[1:], path.headings())
    }
    return city.visualise(lambda cost, point: arrows.get(point, str(cost)))
