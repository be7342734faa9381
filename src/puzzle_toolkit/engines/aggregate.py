"""
Module: engines.aggregate

Purpose:
    Reduction policies over finite in-memory sequences of scored units.

Key Functions:
    - max_by_key(units, key): Unit with the highest score
    - top_k_sum(scores, k): Sum of the k highest scores
    - score_match(match): Points earned by each side for one match
    - points_scored(matches): Per-side totals across a strategy guide

Used By:
    - solvers.calories
    - solvers.strategy
"""

from __future__ import annotations

import heapq
import logging
from typing import Callable, Iterable, Sequence, TypeVar

from puzzle_toolkit.errors import EmptyGroup
from puzzle_toolkit.core.models.choices import Match, MatchResult, Outcome
from puzzle_toolkit.engines.rules import outcome_of

logger = logging.getLogger(__name__)

T = TypeVar("T")


def max_by_key(units: Sequence[T], key: Callable[[T], int]) -> T:
    """
    Unit with the maximum score. Ties resolve to the earliest unit.

    Raises:
        EmptyGroup: If units is empty
    """
    if not units:
        raise EmptyGroup("Cannot pick a maximum from an empty group")
    return max(units, key=key)


def top_k_sum(scores: Iterable[int], k: int) -> int:
    """
    Sum of the ``k`` largest scores.

    Fewer than ``k`` scores are summed as they are, without error.

    Raises:
        ValueError: If k is negative
    """
    if k < 0:
        raise ValueError(f"k must be non-negative: {k}")
    return sum(heapq.nlargest(k, scores))


def score_match(match: Match) -> MatchResult:
    """
    Points for both sides of a single match.

    Each side scores its own choice value; the winner also scores the Win
    value and both sides score the Draw value on a draw.
    """
    me = match.me.points
    opponent = match.opponent.points
    outcome = outcome_of(match.opponent, match.me)
    if outcome == Outcome.WIN:
        me += Outcome.WIN.points
    elif outcome == Outcome.LOSS:
        opponent += Outcome.WIN.points
    else:
        me += Outcome.DRAW.points
        opponent += Outcome.DRAW.points
    return MatchResult(me=me, opponent=opponent)


def points_scored(matches: Iterable[Match]) -> MatchResult:
    """Per-side totals over a sequence of matches, in order."""
    result = MatchResult()
    count = 0
    for match in matches:
        result = result + score_match(match)
        count += 1
    logger.debug("Scored %d matches: me=%d opponent=%d", count, result.me, result.opponent)
    return result
