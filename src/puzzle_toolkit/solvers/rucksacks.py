"""
Module: solvers.rucksacks

Purpose:
    Rucksack reorganisation. Part 1 sums the priorities of the items
    found in both compartments of each rucksack; part 2 sums the
    priorities of the badge shared by each group of consecutive rucksacks.
"""

from __future__ import annotations

import logging
from typing import Sequence

from puzzle_toolkit.config import SolverConfig
from puzzle_toolkit.core.models import Rucksack
from puzzle_toolkit.core.priorities import DEFAULT_PRIORITIES, PriorityMap
from puzzle_toolkit.loading.grouping import chunk_exact
from puzzle_toolkit.loading.parser import parse_rucksacks

from .result import Answer, PuzzleResult

logger = logging.getLogger(__name__)

NAME = "rucksacks"


def cumulated_priority_sum(
    rucksacks: Sequence[Rucksack], priorities: PriorityMap = DEFAULT_PRIORITIES
) -> int:
    """Sum over rucksacks of the priorities of their compartment overlap."""
    return sum(rucksack.common_items().cumulated_priorities(priorities) for rucksack in rucksacks)


def group_badge_priority_sum(
    rucksacks: Sequence[Rucksack],
    priorities: PriorityMap = DEFAULT_PRIORITIES,
    *,
    group_size: int = 3,
    drop_incomplete: bool = True,
) -> int:
    """
    Sum over groups of ``group_size`` consecutive rucksacks of their badge priorities.

    Raises:
        ParseError: If the last group is incomplete and drop_incomplete is False
    """
    total = 0
    for first, *others in chunk_exact(rucksacks, group_size, drop_incomplete=drop_incomplete):
        badge = first.common_items_with_group(*others)
        if len(badge) != 1:
            logger.debug("Group badge %r does not hold exactly one item", badge.items)
        total += badge.cumulated_priorities(priorities)
    return total


def solve(lines: Sequence[str], config: SolverConfig = SolverConfig()) -> PuzzleResult:
    """
    Solve both parts of the rucksack puzzle.

    Raises:
        ParseError: On a non-letter record, or an incomplete group in strict mode
        OddLengthRecord: On an odd-length record
    """
    rucksacks = parse_rucksacks(lines)
    logger.debug("Parsed %d rucksacks", len(rucksacks))

    return PuzzleResult(
        puzzle=NAME,
        answers=(
            Answer(1, "Cumulated priorities", cumulated_priority_sum(rucksacks)),
            Answer(
                2,
                "Group badge cumulated priorities",
                group_badge_priority_sum(
                    rucksacks,
                    group_size=config.badge_group_size,
                    drop_incomplete=config.drop_incomplete_groups,
                ),
            ),
        ),
    )
