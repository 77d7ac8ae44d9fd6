"""
Tests for the geometry helpers

Covers:
1. Heading rotation invariants
2. Point travel, bounds checks and adjacency
3. Path headings and straight runs
4. WeightedGrid construction, stepping and rendering
"""

import sys
from pathlib import Path as FilePath

import numpy as np
import pytest

# Add project root to path
sys.path.insert(0, str(FilePath(__file__).parent.parent))

from crucible.geometry import Bounds, Heading, Path, Point, Vector, WeightedGrid


# ------------------------------------------------------------------ #
# Heading
# ------------------------------------------------------------------ #

def test_heading_clockwise_is_order_four_bijection():
    """Four clockwise turns return to the start and visit every heading."""
    for heading in Heading:
        seen = [heading]
        current = heading
        for _ in range(3):
            current = current.rotate_clockwise()
            seen.append(current)
        assert set(seen) == set(Heading)
        assert current.rotate_clockwise() is heading


def test_heading_invert_is_two_clockwise_turns():
    assert Heading.NORTH.invert() is Heading.SOUTH
    assert Heading.EAST.invert() is Heading.WEST
    for heading in Heading:
        assert heading.invert() is heading.rotate_clockwise().rotate_clockwise()


def test_heading_anticlockwise_undoes_clockwise():
    assert Heading.NORTH.rotate_anticlockwise() is Heading.WEST
    assert Heading.WEST.rotate_anticlockwise() is Heading.SOUTH
    for heading in Heading:
        assert heading.rotate_clockwise().rotate_anticlockwise() is heading


# ------------------------------------------------------------------ #
# Point / Vector / Bounds
# ------------------------------------------------------------------ #

def test_point_travel():
    point = Point(3, 4)
    assert point.travel(Heading.NORTH) == Point(3, 3)
    assert point.travel(Heading.EAST) == Point(4, 4)
    assert point.travel(Heading.SOUTH) == Point(3, 5)
    assert point.travel(Heading.WEST) == Point(2, 4)

    origin = Point(0, 0)
    assert origin.travel(Heading.NORTH) == Point(0, -1)
    assert origin.travel(Heading.WEST) == Point(-1, 0)


def test_vector_of_distance():
    assert Vector.of(Heading.EAST, 3) == Vector(3, 0)
    assert Vector.of(Heading.NORTH, 2) == Vector(0, -2)
    assert Point(1, 1).apply(Vector.of(Heading.SOUTH, 4)) == Point(1, 5)


def test_point_bounded_travel_and_adjacency():
    bounds = Bounds(min=Point(0, 0), max=Point(2, 3))
    assert Point(2, 3).travel_bounded(Heading.EAST, bounds) is None
    assert Point(2, 3).travel_bounded(Heading.WEST, bounds) == Point(1, 3)
    assert sorted(Point(0, 0).adjacent_bounded(bounds)) == [Point(0, 1), Point(1, 0)]
    assert len(Point(1, 1).adjacent()) == 4


def test_point_heading_to():
    assert Point(1, 1).heading_to(Point(1, 0)) is Heading.NORTH
    assert Point(1, 1).heading_to(Point(0, 1)) is Heading.WEST
    with pytest.raises(ValueError):
        Point(1, 1).heading_to(Point(2, 2))


def test_bounds_area_and_expand():
    bounds = Bounds(min=Point(0, 0), max=Point(2, 3))
    assert bounds.area() == 12
    grown = bounds.expand(1)
    assert grown == Bounds(min=Point(-1, -1), max=Point(3, 4))
    assert grown.contains(Point(-1, 4))
    assert not bounds.contains(Point(-1, 4))


# ------------------------------------------------------------------ #
# Path
# ------------------------------------------------------------------ #

def test_path_runs_and_headings():
    path = Path.from_points([
        Point(0, 0), Point(1, 0), Point(2, 0), Point(2, 1), Point(3, 1),
    ])
    assert path.step_count == 4
    assert path.length() == 4
    assert path.headings() == [Heading.EAST, Heading.EAST, Heading.SOUTH, Heading.EAST]
    assert path.runs() == [(Heading.EAST, 2), (Heading.SOUTH, 1), (Heading.EAST, 1)]
    assert path.bounds() == Bounds(min=Point(0, 0), max=Point(3, 1))


def test_path_single_point():
    path = Path.from_points([Point(2, 2)])
    assert path.start == path.end == Point(2, 2)
    assert path.headings() == []
    assert path.runs() == []
    assert path.length() == 0


def test_path_rejects_empty():
    with pytest.raises(ValueError):
        Path.from_points([])


# ------------------------------------------------------------------ #
# WeightedGrid
# ------------------------------------------------------------------ #

def test_grid_height_and_width():
    grid = WeightedGrid([[0] * 3 for _ in range(4)])
    assert grid.width == 3
    assert grid.height == 4
    assert grid.bounds == Bounds(min=Point(0, 0), max=Point(2, 3))


def test_grid_step_never_leaves_bounds():
    grid = WeightedGrid([[0] * 3 for _ in range(4)])

    point = Point(2, 3)
    assert grid.step(point, Heading.WEST) == Point(1, 3)
    assert grid.step(point, Heading.EAST) is None
    assert grid.step(point, Heading.NORTH) == Point(2, 2)
    assert grid.step(point, Heading.SOUTH) is None

    origin = Point(0, 0)
    assert grid.step(origin, Heading.NORTH) is None
    assert grid.step(origin, Heading.EAST) == Point(1, 0)
    assert grid.step(origin, Heading.SOUTH) == Point(0, 1)
    assert grid.step(origin, Heading.WEST) is None


def test_grid_points_iterate_by_row():
    grid = WeightedGrid([[0] * 3 for _ in range(2)])
    assert list(grid.points()) == [
        Point(0, 0), Point(1, 0), Point(2, 0),
        Point(0, 1), Point(1, 1), Point(2, 1),
    ]


def test_grid_cost_lookup():
    grid = WeightedGrid.from_lines("123\n456\n")
    assert grid.cost_at(Point(0, 0)) == 1
    assert grid.cost_at(Point(2, 1)) == 6
    assert grid.cost_at(Point(3, 0)) is None
    assert grid.cost_at(Point(0, -1)) is None
    assert grid.find_first(lambda cost: cost > 4) == Point(1, 1)
    assert sorted(grid.adjacent(Point(0, 0))) == [Point(0, 1), Point(1, 0)]


def test_grid_is_read_only():
    source = np.array([[1, 2], [3, 4]])
    grid = WeightedGrid(source)
    source[0, 0] = 9
    assert grid.cost_at(Point(0, 0)) == 1
    with pytest.raises(ValueError):
        grid.costs[0, 0] = 5


def test_grid_total_cost_skips_start():
    grid = WeightedGrid.from_lines("19\n23")
    path = Path.from_points([Point(0, 0), Point(0, 1), Point(1, 1)])
    assert grid.total_cost(path) == 2 + 3


@pytest.mark.parametrize("rows", [
    [],
    [[]],
    [[1, 2], [3]],
    [[1, -1]],
    [[1.5, 2.0]],
])
def test_grid_rejects_malformed_input(rows):
    with pytest.raises(ValueError):
        WeightedGrid(rows)


def test_from_lines_rejects_non_digits():
    with pytest.raises(ValueError):
        WeightedGrid.from_lines("12\n1x\n")


def test_from_lines_ignores_blank_lines():
    grid = WeightedGrid.from_lines("\n12\n\n34\n\n")
    assert (grid.width, grid.height) == (2, 2)


def test_grid_visualise():
    grid = WeightedGrid.from_lines("12\n34")
    text = grid.visualise(lambda cost, point: "#" if point == Point(1, 0) else str(cost))
    assert text == "1#\n34"
