"""
Puzzles Package - Dispatch table of single-shot puzzle solvers.

Each puzzle registers itself under an identifier and exposes a part one
and a part two solution over the raw puzzle input.

Public API:
    - PuzzleSolver: Abstract base for puzzles
    - register_puzzle(): Registration decorator
    - create_solver(): Factory function
    - get_puzzle_names(): List available puzzles
    - get_puzzle_info(): Get puzzle metadata
    - resolve_puzzle_name(): Normalise "17" to "day17"
    - load_input(), load_answers(): Read inputs and known answers

Usage:
    from crucible.puzzles import create_solver, load_input

    solver = create_solver("17")
    text = load_input(solver.name)
    print(solver.solve_part_one(text), solver.solve_part_two(text))
"""

from .base import PuzzleSolver
from .factory import (
    create_solver,
    get_puzzle_names,
    get_puzzle_info,
    register_puzzle,
    resolve_puzzle_name,
)
from .inputs import load_input, load_answers

# Import solutions to register them
from . import solutions

__all__ = [
    "PuzzleSolver",
    "create_solver",
    "get_puzzle_names",
    "get_puzzle_info",
    "register_puzzle",
    "resolve_puzzle_name",
    "load_input",
    "load_answers",
]
