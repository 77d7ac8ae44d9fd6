"""
Geometry Package - 2D grid helper types shared by the puzzle solvers.

Public API:
    - Point: Cell coordinate (x = column, y = row)
    - Heading: Cardinal direction with rotation helpers
    - Vector: Shift between points
    - Bounds: Inclusive rectangle
    - Path: Ordered route through the grid
    - WeightedGrid: Immutable grid of per-cell entry costs
"""

from .point import Point, Heading, Vector, Bounds
from .path import Path
from .grid import WeightedGrid

__all__ = [
    "Point",
    "Heading",
    "Vector",
    "Bounds",
    "Path",
    "WeightedGrid",
]
