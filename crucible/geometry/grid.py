"""
Weighted Grid Module - Immutable 2D map of per-cell entry costs.

Costs are stored in a read-only numpy array indexed [row, col],
i.e. [y, x]. Points outside the array are out of bounds; the grid
never wraps and never steps diagonally.
"""

from typing import Callable, Iterator, List, Optional, Sequence, Union

import numpy as np

from .path import Path
from .point import Bounds, Heading, Point


CostRows = Union[np.ndarray, Sequence[Sequence[int]]]


class WeightedGrid:
    """
    Immutable grid of non-negative integer traversal costs.

    The cost of a cell is charged when a route enters it, never
    when it leaves.

    Attributes:
        width: Number of columns
        height: Number of rows
        bounds: Inclusive bounds from (0, 0) to (width-1, height-1)
    """

    def __init__(self, costs: CostRows):
        """
        Create a grid from rows of costs.

        Args:
            costs: 2D numpy array or sequence of equal-length rows

        Raises:
            ValueError: If the grid is empty, ragged, non-integer or
                contains negative costs
        """
        if not isinstance(costs, np.ndarray):
            rows = [list(row) for row in costs]
            if not rows or not rows[0]:
                raise ValueError("Grid must have at least one cell")
            widths = {len(row) for row in rows}
            if len(widths) != 1:
                raise ValueError(f"Grid rows have differing widths: {sorted(widths)}")
            costs = np.array(rows)

        if costs.ndim != 2 or costs.size == 0:
            raise ValueError(f"Grid must be a non-empty 2D array, got shape {costs.shape}")
        if not np.issubdtype(costs.dtype, np.integer):
            raise ValueError(f"Grid costs must be integers, got {costs.dtype}")
        if (costs < 0).any():
            raise ValueError("Grid costs must be non-negative")

        self._costs = costs.astype(np.int64)
        self._costs.setflags(write=False)
        self.height, self.width = self._costs.shape
        self.bounds = Bounds(min=Point(0, 0), max=Point(self.width - 1, self.height - 1))

    @classmethod
    def from_lines(cls, text: str) -> "WeightedGrid":
        """
        Parse a grid from lines of decimal digits, one digit per cell.

        Blank lines are ignored.

        Args:
            text: Puzzle input text

        Returns:
            WeightedGrid instance

        Raises:
            ValueError: If a line contains a non-digit character
        """
        rows: List[List[int]] = []
        for line_no, line in enumerate(text.splitlines(), start=1):
            line = line.strip()
            if not line:
                continue
            if not line.isdigit() or not line.isascii():
                raise ValueError(f"Line {line_no} contains non-digit characters: {line!r}")
            rows.append([int(ch) for ch in line])
        return cls(rows)

    @property
    def costs(self) -> np.ndarray:
        """Read-only view of the cost array, indexed [y, x]."""
        return self._costs

    def in_bounds(self, point: Point) -> bool:
        return self.bounds.contains(point)

    def cost_at(self, point: Point) -> Optional[int]:
        """
        Get the entry cost of a cell.

        Args:
            point: Cell position

        Returns:
            Cost, or None if the point is out of bounds
        """
        if not self.in_bounds(point):
            return None
        return int(self._costs[point.y, point.x])

    def step(self, point: Point, heading: Heading) -> Optional[Point]:
        """Point one cell away in `heading`, or None if that leaves the grid."""
        return point.travel_bounded(heading, self.bounds)

    def adjacent(self, point: Point) -> List[Point]:
        """In-bounds orthogonal neighbours of a point."""
        return point.adjacent_bounded(self.bounds)

    def points(self) -> Iterator[Point]:
        """Iterate over all cells row by row."""
        for y in range(self.height):
            for x in range(self.width):
                yield Point(x, y)

    def find_first(self, predicate: Callable[[int], bool]) -> Optional[Point]:
        """First cell (row-wise) whose cost satisfies `predicate`."""
        return next((p for p in self.points() if predicate(self.cost_at(p))), None)

    def total_cost(self, path: Path) -> int:
        """
        Entry cost of following a path.

        The first point is where the route starts, so its cost is not charged.

        Raises:
            ValueError: If any point on the path is out of bounds
        """
        total = 0
        for point in path.points[1:]:
            cost = self.cost_at(point)
            if cost is None:
                raise ValueError(f"Path leaves the grid at {point}")
            total += cost
        return total

    def visualise(self, to_str: Callable[[int, Point], str]) -> str:
        """
        Render the grid as text, one line per row.

        Args:
            to_str: Maps (cost, point) to the text shown for that cell

        Returns:
            Multi-line string
        """
        return "\n".join(
            "".join(to_str(int(self._costs[y, x]), Point(x, y)) for x in range(self.width))
            for y in range(self.height)
        )

    def __repr__(self) -> str:
        return f"WeightedGrid(width={self.width}, height={self.height})"
