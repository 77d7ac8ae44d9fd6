"""
Benchmark script for the route search engine.
Times find_route on random digit grids across a range of sizes and run limits.

Usage:
    python tools/benchmark_search.py
    python tools/benchmark_search.py --sizes 20 80 141 --seed 7
"""

import argparse
import sys
from pathlib import Path

import numpy as np

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from crucible.geometry import Point, WeightedGrid
from crucible.search import find_route

RUN_LIMITS = [(0, 3), (4, 10)]


def random_grid(size: int, rng: np.random.Generator) -> WeightedGrid:
    """Square grid of uniformly random digits 1-9."""
    return WeightedGrid(rng.integers(1, 10, size=(size, size)))


def benchmark(sizes, seed: int):
    """Run the search for every size and run limit and print metrics."""
    rng = np.random.default_rng(seed)

    print(f"\n{'='*72}")
    print(f"{'size':>6} {'runs':>7} {'cost':>7} {'settled':>9} {'pushed':>9} "
          f"{'frontier':>9} {'time ms':>9}")
    print(f"{'='*72}")

    for size in sizes:
        grid = random_grid(size, rng)
        target = Point(grid.width - 1, grid.height - 1)
        for min_run, max_run in RUN_LIMITS:
            result = find_route(grid, Point(0, 0), target, min_run, max_run)
            m = result.metrics
            cost = result.cost if result.found else "-"
            print(f"{size:>6} {f'{min_run}..{max_run}':>7} {cost:>7} {m.states_settled:>9} "
                  f"{m.states_pushed:>9} {m.peak_frontier:>9} {m.computation_time_ms:>9.1f}")


def main():
    parser = argparse.ArgumentParser(description="Benchmark the route search engine")
    parser.add_argument("--sizes", type=int, nargs="+", default=[10, 40, 80, 141])
    parser.add_argument("--seed", type=int, default=2023)
    args = parser.parse_args()
    benchmark(args.sizes, args.seed)


if __name__ == "__main__":
    main()
