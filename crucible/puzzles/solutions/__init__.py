"""
Solutions Package - Concrete puzzle solver implementations.

Import this module to register all built-in puzzles.
"""

from .clumsy_crucible import ClumsyCrucibleSolver

__all__ = [
    "ClumsyCrucibleSolver",
]
