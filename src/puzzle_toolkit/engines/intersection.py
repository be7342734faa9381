"""
Module: engines.intersection

Purpose:
    Split text records into equal halves and compute the symbols common
    to every member of a group of ranges.

Key Functions:
    - split(record): Two equal-length halves
    - intersect_all(ranges): Deduplicated common symbols, first-range order

Used By:
    - core.models.rucksack
"""

from __future__ import annotations

from typing import Sequence, Tuple

from puzzle_toolkit.errors import EmptyGroup, OddLengthRecord


def split(record: str) -> Tuple[str, str]:
    """
    Split a record into two halves of equal length.

    An empty record gives two empty halves.

    Raises:
        OddLengthRecord: If len(record) is odd

    Example:
        >>> split("abCD")
        ('ab', 'CD')
    """
    if len(record) % 2 != 0:
        raise OddLengthRecord(record)
    half = len(record) // 2
    return record[:half], record[half:]


def intersect_all(ranges: Sequence[str]) -> str:
    """
    Symbols present in every range.

    Each common symbol appears once, in the order it first occurs in
    ranges[0]. Repeats inside a range never change membership.

    Args:
        ranges: Two or more text ranges (a single range returns its
            own distinct symbols)

    Returns:
        The common symbols as a string

    Raises:
        EmptyGroup: If no ranges are given

    Example:
        >>> intersect_all(["vJrwpWtwJgWr", "hcsFMMfFFhFp"])
        'p'
    """
    if not ranges:
        raise EmptyGroup("Cannot intersect an empty group of ranges")

    first, *others = ranges
    presence = [frozenset(other) for other in others]
    seen = set()
    common = []
    for symbol in first:
        if symbol in seen:
            continue
        seen.add(symbol)
        if all(symbol in present for present in presence):
            common.append(symbol)
    return "".join(common)
