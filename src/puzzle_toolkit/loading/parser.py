"""
Module: loading.parser

Purpose:
    Parse raw input lines into typed records for each puzzle grammar.

Key Functions:
    - parse_calorie_value(): One unsigned integer line
    - parse_elves(): Blank-line separated groups into Elf records
    - parse_match_line(): "A Y" line into its two tokens, checked per column
    - parse_strategy_guide(): Lines into Matches (choice or directive reading)
    - parse_rucksacks(): Lines into Rucksack records

Dependencies:
    - loading.grouping: Blank-line grouping
    - core.models: Typed records
"""

from __future__ import annotations

import logging
import re
from typing import Iterable, List, Optional, Tuple

from puzzle_toolkit.errors import OddLengthRecord, ParseError
from puzzle_toolkit.core.models import Choice, Elf, Match, Outcome, Rucksack
from puzzle_toolkit.core.models.choices import OPPONENT_TOKENS, SELF_TOKENS
from puzzle_toolkit.engines.rules import resolve

from .grouping import non_blank, split_on_blank

logger = logging.getLogger(__name__)

_UNSIGNED = re.compile(r"[0-9]+")
_LETTERS = re.compile(r"[A-Za-z]*")


# ─────────────────────────────────────────────────────────────────────────────
# Calorie list
# ─────────────────────────────────────────────────────────────────────────────

def parse_calorie_value(line: str, line_number: Optional[int] = None) -> int:
    """
    Parse one base-10 unsigned integer.

    Raises:
        ParseError: If the line is not made of ASCII digits only
    """
    token = line.strip()
    if not _UNSIGNED.fullmatch(token):
        raise ParseError(f"Expected an unsigned integer, got {line!r}", line_number)
    return int(token)


def parse_elves(lines: Iterable[str]) -> List[Elf]:
    """
    Parse a calorie list into Elf records numbered from 1.

    Raises:
        ParseError: On any non-numeric line
    """
    elves = [
        Elf.from_group(index, (parse_calorie_value(text, number) for number, text in group))
        for index, group in enumerate(split_on_blank(lines), start=1)
    ]
    logger.debug("Parsed %d elves", len(elves))
    return elves


# ─────────────────────────────────────────────────────────────────────────────
# Strategy guide
# ─────────────────────────────────────────────────────────────────────────────

def parse_match_line(line: str, line_number: Optional[int] = None) -> Tuple[Choice, str]:
    """
    Split a strategy line into the opponent choice and the raw second token.

    The second token is returned raw because its meaning (a Choice or an
    Outcome directive) depends on which part of the puzzle is solved.

    Raises:
        ParseError: If the line is not two tokens from {A,B,C} and {X,Y,Z}
    """
    tokens = line.split()
    if len(tokens) != 2:
        raise ParseError(f"Expected two tokens, got {line!r}", line_number)

    first, second = tokens
    if first not in OPPONENT_TOKENS:
        raise ParseError(f"Opponent token must be one of A, B, C: {first!r}", line_number)
    if second not in SELF_TOKENS:
        raise ParseError(f"Second token must be one of X, Y, Z: {second!r}", line_number)
    return OPPONENT_TOKENS[first], second


def parse_strategy_guide(lines: Iterable[str], *, as_outcome: bool = False) -> List[Match]:
    """
    Parse a strategy guide into matches.

    Args:
        lines: Raw input lines; blank lines are skipped
        as_outcome: Read the second column as the desired Outcome and
            resolve our choice from it, instead of reading it as a Choice

    Raises:
        ParseError: On any malformed line
    """
    matches = []
    for number, text in non_blank(lines):
        opponent, token = parse_match_line(text, number)
        try:
            if as_outcome:
                me = resolve(opponent, Outcome.parse(token))
            else:
                me = Choice.parse(token)
        except ValueError as e:
            raise ParseError(str(e), number) from e
        matches.append(Match(opponent=opponent, me=me))
    return matches


# ─────────────────────────────────────────────────────────────────────────────
# Rucksacks
# ─────────────────────────────────────────────────────────────────────────────

def parse_rucksacks(lines: Iterable[str]) -> List[Rucksack]:
    """
    Parse one rucksack per non-blank line.

    Raises:
        ParseError: If a line holds anything but letters
        OddLengthRecord: If a line has odd length
    """
    rucksacks = []
    for number, text in non_blank(lines):
        record = text.strip()
        if not _LETTERS.fullmatch(record):
            raise ParseError(f"Rucksack record must contain letters only: {record!r}", number)
        try:
            rucksacks.append(Rucksack.from_record(record))
        except OddLengthRecord as e:
            raise OddLengthRecord(record, number) from e
    return rucksacks
