"""
Puzzle Factory Module - Registry and factory for puzzle solvers.
"""

from typing import Any, Dict, List, Type

from .base import PuzzleSolver


# Global registry of puzzle solvers
_PUZZLES: Dict[str, Type[PuzzleSolver]] = {}


def register_puzzle(cls: Type[PuzzleSolver]) -> Type[PuzzleSolver]:
    """
    Decorator to register a puzzle solver class.

    Usage:
        @register_puzzle
        class MyPuzzle(PuzzleSolver):
            name = "day99"
            ...

    Args:
        cls: Solver class to register

    Returns:
        The same class (for decorator chaining)
    """
    _PUZZLES[cls.name] = cls
    return cls


def resolve_puzzle_name(identifier: str) -> str:
    """
    Normalise a puzzle identifier to its registry name.

    Bare day numbers are accepted, so "17" and "day17" both
    resolve to "day17".

    Args:
        identifier: Name or day number

    Returns:
        Registry name (may not be registered)
    """
    identifier = identifier.strip().lower()
    if identifier.isdigit():
        return f"day{int(identifier)}"
    return identifier


def create_solver(name: str, **kwargs: Any) -> PuzzleSolver:
    """
    Create a solver instance by name.

    Args:
        name: Puzzle name or day number (e.g. "day17", "17")
        **kwargs: Additional arguments passed to solver constructor

    Returns:
        Solver instance

    Raises:
        ValueError: If puzzle name not found
    """
    key = resolve_puzzle_name(name)
    if key not in _PUZZLES:
        available = ", ".join(_PUZZLES.keys())
        raise ValueError(f"Unknown puzzle: {name}. Available: {available}")
    return _PUZZLES[key](**kwargs)


def get_puzzle_names() -> List[str]:
    """
    Get list of available puzzle names.

    Returns:
        List of registered puzzle names
    """
    return list(_PUZZLES.keys())


def get_puzzle_info() -> List[Dict[str, str]]:
    """
    Get name and description for all registered puzzles.

    Returns:
        List of dicts with 'name' and 'description' keys
    """
    return [
        {"name": cls.name, "description": cls.description}
        for cls in _PUZZLES.values()
    ]
