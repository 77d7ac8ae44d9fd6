"""
Path Module - Ordered sequence of grid points forming a route.
"""

from dataclasses import dataclass
from typing import List, Tuple

from .point import Bounds, Heading, Point


@dataclass(frozen=True)
class Path:
    """
    Immutable route through a grid.

    A path holds at least one point. Consecutive points are expected to
    be orthogonal neighbours for headings() and runs(); bounds() and
    length() accept any points.

    Attributes:
        points: Tuple of points from first to last (inclusive)
    """
    points: Tuple[Point, ...]

    def __post_init__(self):
        if not self.points:
            raise ValueError("Path needs at least one point")

    @classmethod
    def from_points(cls, points: List[Point]) -> "Path":
        """Create a Path from a list of points."""
        return cls(points=tuple(points))

    @property
    def start(self) -> Point:
        return self.points[0]

    @property
    def end(self) -> Point:
        return self.points[-1]

    @property
    def step_count(self) -> int:
        """Number of moves along the path."""
        return max(0, len(self.points) - 1)

    def bounds(self) -> Bounds:
        """Smallest bounds containing every point on the path."""
        xs = [p.x for p in self.points]
        ys = [p.y for p in self.points]
        return Bounds(min=Point(min(xs), min(ys)), max=Point(max(xs), max(ys)))

    def length(self) -> int:
        """Distance covered travelling point to point."""
        return sum(a.manhattan(b) for a, b in zip(self.points, self.points[1:]))

    def headings(self) -> List[Heading]:
        """
        Heading of each step along the path.

        Returns:
            List with one heading per step (step_count entries)

        Raises:
            ValueError: If two consecutive points are not neighbours
        """
        return [a.heading_to(b) for a, b in zip(self.points, self.points[1:])]

    def runs(self) -> List[Tuple[Heading, int]]:
        """
        Collapse the path into maximal straight runs.

        Returns:
            List of (heading, steps) tuples in travel order
        """
        runs: List[Tuple[Heading, int]] = []
        for heading in self.headings():
            if runs and runs[-1][0] is heading:
                runs[-1] = (heading, runs[-1][1] + 1)
            else:
                runs.append((heading, 1))
        return runs

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self):
        return iter(self.points)
