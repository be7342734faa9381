"""
Module: solvers.calories

Purpose:
    Calorie counting: find the elf carrying the most calories and the
    combined calories of the top-K elves.
"""

from __future__ import annotations

import logging
from typing import Sequence

from puzzle_toolkit.config import SolverConfig
from puzzle_toolkit.core.models import Elf
from puzzle_toolkit.engines.aggregate import max_by_key, top_k_sum
from puzzle_toolkit.loading.parser import parse_elves

from .result import Answer, PuzzleResult

logger = logging.getLogger(__name__)

NAME = "calories"


def elf_with_most_calories(elves: Sequence[Elf]) -> Elf:
    """
    Raises:
        EmptyGroup: If there are no elves
    """
    return max_by_key(elves, key=lambda elf: elf.total_calories)


def top_elves_calories(elves: Sequence[Elf], k: int = 3) -> int:
    return top_k_sum((elf.total_calories for elf in elves), k)


def solve(lines: Sequence[str], config: SolverConfig = SolverConfig()) -> PuzzleResult:
    """
    Solve both parts of the calorie puzzle.

    Raises:
        ParseError: On a non-numeric line
        EmptyGroup: If the input holds no calorie values at all
    """
    elves = parse_elves(lines)
    chad = elf_with_most_calories(elves)
    logger.info("Elf #%d carries the most calories (%d)", chad.number, chad.total_calories)

    return PuzzleResult(
        puzzle=NAME,
        answers=(
            Answer(1, "Elf carrying the most calories", chad.number),
            Answer(1, "Most calories carried", chad.total_calories),
            Answer(2, f"Top {config.top_k} elves calories", top_elves_calories(elves, config.top_k)),
        ),
    )
