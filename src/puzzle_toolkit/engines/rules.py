"""
Module: engines.rules

Purpose:
    Deterministic rule resolution for Rock/Paper/Scissors matches.

Key Functions:
    - beats(choice): The choice that ``choice`` defeats
    - beaten_by(choice): The choice that defeats ``choice``
    - outcome_of(opponent, me): Outcome of a match for ``me``
    - resolve(opponent, desired): The choice giving ``desired`` against ``opponent``

Used By:
    - engines.aggregate.score_match
    - solvers.strategy
"""

from __future__ import annotations

from typing import Dict

from puzzle_toolkit.core.models.choices import Choice, Outcome

# key beats value
BEATS: Dict[Choice, Choice] = {
    Choice.ROCK: Choice.SCISSORS,
    Choice.PAPER: Choice.ROCK,
    Choice.SCISSORS: Choice.PAPER,
}
BEATEN_BY: Dict[Choice, Choice] = {loser: winner for winner, loser in BEATS.items()}


def beats(choice: Choice) -> Choice:
    return BEATS[choice]


def beaten_by(choice: Choice) -> Choice:
    return BEATEN_BY[choice]


def outcome_of(opponent: Choice, me: Choice) -> Outcome:
    """
    Outcome of a match, seen from ``me``.

    Example:
        >>> outcome_of(Choice.ROCK, Choice.PAPER)
        <Outcome.WIN: 6>
    """
    if opponent == me:
        return Outcome.DRAW
    if BEATS[me] == opponent:
        return Outcome.WIN
    return Outcome.LOSS


def resolve(opponent: Choice, desired: Outcome) -> Choice:
    """
    The unique choice that produces ``desired`` against ``opponent``.

    Example:
        >>> resolve(Choice.PAPER, Outcome.LOSS)
        <Choice.ROCK: 1>
    """
    if desired == Outcome.DRAW:
        return opponent
    if desired == Outcome.WIN:
        return BEATEN_BY[opponent]
    return BEATS[opponent]
