"""
Puzzle Inputs Module - Loading puzzle inputs and known answers from disk.

Inputs live at <input_dir>/<puzzle name>, answers at <answers_dir>/<puzzle name>
with the part one answer on the first line and part two on the second.
"""

import logging
from pathlib import Path
from typing import Optional, Tuple, Union

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def load_input(name: str, input_dir: PathLike = "inputs") -> str:
    """
    Read the input text for a puzzle.

    Args:
        name: Registry name of the puzzle
        input_dir: Directory holding input files

    Returns:
        File contents

    Raises:
        FileNotFoundError: If no input file exists
    """
    path = Path(input_dir) / name
    logger.debug(f"Loading input: {path}")
    return path.read_text(encoding="utf-8")


def load_answers(name: str, answers_dir: PathLike = "answers") -> Tuple[Optional[int], Optional[int]]:
    """
    Read known answers for a puzzle, if recorded.

    Args:
        name: Registry name of the puzzle
        answers_dir: Directory holding answer files

    Returns:
        (part one, part two); either is None when not recorded
    """
    path = Path(answers_dir) / name
    if not path.exists():
        return None, None

    answers = [int(line) for line in path.read_text(encoding="utf-8").split()]
    part_one = answers[0] if len(answers) > 0 else None
    part_two = answers[1] if len(answers) > 1 else None
    return part_one, part_two
