"""
Module: solvers.strategy

Purpose:
    Rock/Paper/Scissors strategy guide. Part 1 reads the second column as
    our choice; part 2 reads it as the outcome to force and resolves our
    choice from it.
"""

from __future__ import annotations

import logging
from typing import Sequence

from puzzle_toolkit.config import SolverConfig
from puzzle_toolkit.engines.aggregate import points_scored
from puzzle_toolkit.loading.parser import parse_strategy_guide

from .result import Answer, PuzzleResult

logger = logging.getLogger(__name__)

NAME = "strategy"


def solve(lines: Sequence[str], config: SolverConfig = SolverConfig()) -> PuzzleResult:
    """
    Solve both parts of the strategy guide.

    Raises:
        ParseError: On any malformed line
    """
    step1 = points_scored(parse_strategy_guide(lines))
    step2 = points_scored(parse_strategy_guide(lines, as_outcome=True))
    logger.info("Step 1: me %d vs opponent %d", step1.me, step1.opponent)
    logger.info("Step 2: me %d vs opponent %d", step2.me, step2.opponent)

    return PuzzleResult(
        puzzle=NAME,
        answers=(
            Answer(1, "My score", step1.me),
            Answer(1, "Opponent score", step1.opponent),
            Answer(2, "My score", step2.me),
            Answer(2, "Opponent score", step2.opponent),
        ),
    )
