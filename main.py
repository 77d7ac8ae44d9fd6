"""
Crucible Puzzle Runner - Entry Point

Loads a puzzle input, dispatches to the registered solver and prints
the answers to both parts.

Example:
    python main.py 17
    python main.py day17 --input example.txt --visualise
    python main.py --list
"""

import sys
import logging
import argparse
from pathlib import Path
from typing import List, Optional

from crucible.puzzles import (
    create_solver,
    get_puzzle_info,
    load_answers,
    load_input,
    resolve_puzzle_name,
)
from crucible.settings import load_settings, save_settings


logger = logging.getLogger(__name__)


def configure_logging(debug: bool = False) -> None:
    """Log to both console and file."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=[
            logging.StreamHandler(),  # Console output
            logging.FileHandler("crucible.log", mode='w', encoding='utf-8')  # File output
        ]
    )


def parse_args(argv: Optional[List[str]] = None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Crucible - run a puzzle solver against its input"
    )
    parser.add_argument(
        "puzzle",
        nargs="?",
        help="Puzzle name or day number (default: from config.json)"
    )
    parser.add_argument(
        "--input", "-i",
        help="Input file (default: <input_dir>/<puzzle name>)"
    )
    parser.add_argument(
        "--visualise", "-v",
        action="store_true",
        help="Print a rendering of each solution"
    )
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help="Enable debug mode (verbose logging, save route images)"
    )
    parser.add_argument(
        "--timeout", "-t",
        type=float,
        help="Time limit per part in seconds (default: from config.json)"
    )
    parser.add_argument(
        "--list", "-l",
        action="store_true",
        help="List available puzzles and exit"
    )
    parser.add_argument(
        "--save",
        action="store_true",
        help="Save this run's puzzle, timeout and debug mode as defaults"
    )
    return parser.parse_args(argv)


def run_puzzle(name: str, text: str, visualise: bool, debug: bool,
               timeout_sec: Optional[float], answers_dir: str) -> int:
    """
    Solve both parts of a puzzle and print the answers.

    Returns:
        Exit code (0 on success, 1 on failure or wrong answer)
    """
    solver = create_solver(name, debug=debug)
    expected = load_answers(solver.name, answers_dir)
    exit_code = 0

    print(f"\nRunning puzzle: {solver.name} ({solver.description})")
    parts = ((1, solver.solve_part_one), (2, solver.solve_part_two))
    for (part, solve), known in zip(parts, expected):
        if visualise:
            print()
        context = solver.create_context(timeout_sec)
        try:
            answer = solve(text, visualise=visualise, context=context)
        except TimeoutError as e:
            logger.error(f"Part {part} timed out: {e}")
            return 1

        print(f"\nPart {part}: {answer if answer is not None else 'no route'}")
        if known is not None and answer != known:
            logger.error(f"Part {part} answer {answer} does not match expected {known}")
            exit_code = 1

    return exit_code


def main(argv: Optional[List[str]] = None) -> int:
    """Run the requested puzzle."""
    args = parse_args(argv)
    settings = load_settings()
    debug = args.debug or settings.get("debug_enabled", False)
    configure_logging(debug)

    if args.list:
        for info in get_puzzle_info():
            print(f"  {info['name']:<10} {info['description']}")
        return 0

    name = resolve_puzzle_name(args.puzzle or settings["puzzle_name"])
    timeout_sec = args.timeout if args.timeout is not None else settings["timeout_sec"]

    try:
        if args.input:
            text = Path(args.input).read_text(encoding="utf-8")
        else:
            text = load_input(name, settings["input_dir"])
        exit_code = run_puzzle(name, text, args.visualise, debug,
                               timeout_sec, settings["answers_dir"])
    except (OSError, ValueError) as e:
        logger.error(f"{name}: {e}")
        return 1

    if args.save:
        settings.update({
            "puzzle_name": name,
            "timeout_sec": timeout_sec,
            "debug_enabled": debug,
        })
        save_settings(settings)
        logger.info("Defaults saved")

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
