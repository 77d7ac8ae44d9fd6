"""
Base Puzzle Module - Abstract base class for puzzle solvers.
"""

from abc import ABC, abstractmethod
from typing import Optional

from ..search import SearchContext


class PuzzleSolver(ABC):
    """
    Abstract base class for all puzzle solvers.

    Subclasses must implement solve_part_one() and solve_part_two()
    and define name and description class attributes.

    Attributes:
        name: Registry identifier (e.g. "day17")
        description: Human-readable description for listings
        timeout_sec: Default time limit for each part
    """
    name: str = "base"
    description: str = "Base puzzle"
    timeout_sec: float = 60.0

    def __init__(self, debug: bool = False):
        """
        Initialize the solver.

        Args:
            debug: Save debug images of solutions
        """
        self.debug = debug

    @abstractmethod
    def solve_part_one(self, text: str, visualise: bool = False,
                       context: Optional[SearchContext] = None) -> Optional[int]:
        """
        Calculate the part one answer for the given input.

        Args:
            text: Raw puzzle input
            visualise: Print a rendering of the solution
            context: Optional cancellation / timeout context

        Returns:
            The answer, or None if the puzzle has no solution
        """
        pass

    @abstractmethod
    def solve_part_two(self, text: str, visualise: bool = False,
                       context: Optional[SearchContext] = None) -> Optional[int]:
        """
        Calculate the part two answer for the given input.

        Args:
            text: Raw puzzle input
            visualise: Print a rendering of the solution
            context: Optional cancellation / timeout context

        Returns:
            The answer, or None if the puzzle has no solution
        """
        pass

    def create_context(self, timeout_sec: Optional[float] = None) -> SearchContext:
        """
        Fresh context for solving one part.

        Args:
            timeout_sec: Time limit (default: this solver's timeout_sec)
        """
        if timeout_sec is None:
            timeout_sec = self.timeout_sec
        return SearchContext(timeout_sec=timeout_sec)
