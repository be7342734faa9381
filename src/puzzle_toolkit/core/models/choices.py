"""
Module: choices

Purpose:
    Value types for the strategy guide: the three hand shapes, the three
    match outcomes, a single match and the per-side point totals.

Key Classes:
    - Choice: Rock/Paper/Scissors; value is the shape's point value
    - Outcome: Loss/Draw/Win; value is the outcome's point value
    - Match: (opponent, me) pair; outcome is derived in engines.rules
    - MatchResult: Running totals for both sides

Used By:
    - loading.parser.parse_match_line
    - engines.rules
    - engines.aggregate
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict


class Choice(IntEnum):
    """Hand shape. The integer value is the points scored for playing it."""
    ROCK = 1
    PAPER = 2
    SCISSORS = 3

    @property
    def points(self) -> int:
        return int(self)

    @classmethod
    def parse(cls, token: str) -> Choice:
        """
        Parse a choice from either alphabet (A/B/C or X/Y/Z).

        Raises:
            ValueError: If token is not one of the six choice symbols
        """
        try:
            return _CHOICE_TOKENS[token]
        except KeyError:
            raise ValueError(f"Invalid choice token: {token!r}") from None

    def __str__(self) -> str:
        return self.name.capitalize()


class Outcome(IntEnum):
    """Match outcome from one side's perspective. Value is the points awarded."""
    LOSS = 0
    DRAW = 3
    WIN = 6

    @property
    def points(self) -> int:
        return int(self)

    @classmethod
    def parse(cls, token: str) -> Outcome:
        """
        Parse an outcome directive (X=Loss, Y=Draw, Z=Win).

        Raises:
            ValueError: If token is not X, Y or Z
        """
        try:
            return _OUTCOME_TOKENS[token]
        except KeyError:
            raise ValueError(f"Invalid outcome token: {token!r}") from None

    def __str__(self) -> str:
        return self.name.capitalize()


OPPONENT_TOKENS: Dict[str, Choice] = {"A": Choice.ROCK, "B": Choice.PAPER, "C": Choice.SCISSORS}
SELF_TOKENS: Dict[str, Choice] = {"X": Choice.ROCK, "Y": Choice.PAPER, "Z": Choice.SCISSORS}
_CHOICE_TOKENS: Dict[str, Choice] = {**OPPONENT_TOKENS, **SELF_TOKENS}
_OUTCOME_TOKENS: Dict[str, Outcome] = {"X": Outcome.LOSS, "Y": Outcome.DRAW, "Z": Outcome.WIN}


@dataclass(frozen=True, slots=True)
class Match:
    """
    One round of the strategy guide.

    Attributes:
        opponent: What the opponent plays
        me: What we play
    """
    opponent: Choice
    me: Choice


@dataclass(frozen=True, slots=True)
class MatchResult:
    """
    Points accumulated by each side (immutable).

    Invariants:
        - me >= 0 and opponent >= 0
    """
    me: int = 0
    opponent: int = 0

    def __post_init__(self) -> None:
        if self.me < 0 or self.opponent < 0:
            raise ValueError(f"Points cannot be negative: {self.me}/{self.opponent}")

    def __add__(self, other: MatchResult) -> MatchResult:
        if not isinstance(other, MatchResult):
            return NotImplemented
        return MatchResult(me=self.me + other.me, opponent=self.opponent + other.opponent)
