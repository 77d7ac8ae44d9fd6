"""
Point Module - 2D grid coordinates, headings, shift vectors and bounds.

Coordinate convention: x grows east (column), y grows south (row),
so NORTH decreases y.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional


class Heading(Enum):
    """
    Cardinal direction of travel on a 2D grid.

    Values follow clockwise order starting at NORTH, so a heading's
    value doubles as its index in per-heading arrays.
    """
    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    def invert(self) -> "Heading":
        """Heading after a 180 degree turn."""
        return self.rotate_clockwise().rotate_clockwise()

    def rotate_clockwise(self) -> "Heading":
        """Heading after a 90 degree turn to the right."""
        return Heading((self.value + 1) % 4)

    def rotate_anticlockwise(self) -> "Heading":
        """Heading after a 90 degree turn to the left."""
        return self.rotate_clockwise().invert()

    @property
    def arrow(self) -> str:
        """Single character used when drawing routes."""
        return _ARROWS[self]


_ARROWS = {
    Heading.NORTH: "^",
    Heading.EAST: ">",
    Heading.SOUTH: "v",
    Heading.WEST: "<",
}


@dataclass(frozen=True)
class Vector:
    """A change in 2D space."""
    x: int
    y: int

    @classmethod
    def of(cls, heading: Heading, distance: int = 1) -> "Vector":
        """
        Create the shift for moving `distance` cells in `heading`.

        Args:
            heading: Direction of travel
            distance: Number of cells (default 1)

        Returns:
            Vector instance
        """
        if heading is Heading.NORTH:
            return cls(0, -distance)
        if heading is Heading.EAST:
            return cls(distance, 0)
        if heading is Heading.SOUTH:
            return cls(0, distance)
        return cls(-distance, 0)


@dataclass(frozen=True, order=True)
class Point:
    """
    A single cell position on a 2D grid.

    Attributes:
        x: Column index
        y: Row index
    """
    x: int
    y: int

    def apply(self, shift: Vector) -> "Point":
        """Apply a shift vector to this point."""
        return Point(self.x + shift.x, self.y + shift.y)

    def apply_bounded(self, shift: Vector, bounds: "Bounds") -> Optional["Point"]:
        """Apply a shift, returning None if the result lies outside bounds."""
        moved = self.apply(shift)
        return moved if bounds.contains(moved) else None

    def travel(self, heading: Heading) -> "Point":
        """Point exactly one cell away in the given heading."""
        return self.apply(Vector.of(heading))

    def travel_bounded(self, heading: Heading, bounds: "Bounds") -> Optional["Point"]:
        """Point one cell away in the given heading, if within bounds."""
        return self.apply_bounded(Vector.of(heading), bounds)

    def adjacent(self) -> List["Point"]:
        """Orthogonal neighbours (no diagonals)."""
        return [self.travel(h) for h in Heading]

    def adjacent_bounded(self, bounds: "Bounds") -> List["Point"]:
        """Orthogonal neighbours that lie within bounds."""
        return [p for p in self.adjacent() if bounds.contains(p)]

    def manhattan(self, other: "Point") -> int:
        """Taxicab distance to another point."""
        return abs(self.x - other.x) + abs(self.y - other.y)

    def heading_to(self, other: "Point") -> Heading:
        """
        Heading of a single orthogonal step from this point to `other`.

        Raises:
            ValueError: If `other` is not an orthogonal neighbour
        """
        for heading in Heading:
            if self.travel(heading) == other:
                return heading
        raise ValueError(f"{other} is not adjacent to {self}")


@dataclass(frozen=True)
class Bounds:
    """Rectangular grid boundaries, inclusive on both ends."""
    min: Point
    max: Point

    def contains(self, point: Point) -> bool:
        return (self.min.x <= point.x <= self.max.x
                and self.min.y <= point.y <= self.max.y)

    def expand(self, amount: int) -> "Bounds":
        """Bounds grown by `amount` cells on every side."""
        return Bounds(
            min=Point(self.min.x - amount, self.min.y - amount),
            max=Point(self.max.x + amount, self.max.y + amount),
        )

    def area(self) -> int:
        """Number of cells inside these bounds."""
        return (self.max.x + 1 - self.min.x) * (self.max.y + 1 - self.min.y)
