"""
Crucible - Single-shot puzzle solvers built around a run-length
constrained route search.

Subpackages:
    - geometry: Points, headings, paths and the weighted cost grid
    - search: Minimum-cost route search over (position, heading, run) states
    - puzzles: Dispatch table of puzzle solvers
"""

__version__ = "0.1.0"
