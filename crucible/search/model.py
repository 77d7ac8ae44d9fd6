"""
State Model Module - Node identity and frontier ordering for route search.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from ..geometry import Heading, Point


@dataclass(frozen=True)
class Location:
    """
    Standing at a cell, facing a heading.

    Run-length is not part of a Location; it is tracked
    alongside it in SearchState.

    Attributes:
        position: Cell the vehicle occupies
        heading: Direction the vehicle is travelling
    """
    position: Point
    heading: Heading


@dataclass(frozen=True)
class SearchState:
    """
    Entry on the search frontier.

    Ordering is by accumulated cost alone, so a binary heap always
    yields the cheapest unexpanded state first.

    Attributes:
        cost: Accumulated entry cost from the start
        location: Position and heading
        run: Consecutive steps taken in the current heading
        previous: State this one was generated from (None for seeds)
    """
    cost: int
    location: Location
    run: int
    previous: Optional["SearchState"] = field(default=None, compare=False, repr=False)

    def __lt__(self, other: "SearchState") -> bool:
        """Min-heap ordering: lower cost = higher priority."""
        return self.cost < other.cost

    @property
    def position(self) -> Point:
        return self.location.position

    @property
    def heading(self) -> Heading:
        return self.location.heading

    def advance(self, position: Point, heading: Heading, entry_cost: int) -> "SearchState":
        """
        Successor state after stepping into `position` travelling `heading`.

        The run continues when the heading is unchanged and resets to 1
        after a turn.
        """
        run = self.run + 1 if heading is self.heading else 1
        return SearchState(
            cost=self.cost + entry_cost,
            location=Location(position, heading),
            run=run,
            previous=self,
        )

    def trail(self) -> List[Point]:
        """Positions from the first seeded step to this state, in order."""
        points: List[Point] = []
        state: Optional[SearchState] = self
        while state is not None:
            points.append(state.position)
            state = state.previous
        points.reverse()
        return points
