"""
Module: rucksack

Purpose:
    Provides the Container and Rucksack dataclasses. A rucksack is one
    text record split into two equal compartments; common items between
    compartments (or between rucksacks of a group) are Containers too.

Key Functions:
    - Rucksack.from_record(record): Split a raw record into compartments
    - Rucksack.common_items(): Items present in both compartments
    - Rucksack.common_items_with_group(*others): Badge of a group
    - Container.cumulated_priorities(): Sum of item priorities

Dependencies:
    - engines.intersection: split / intersect_all
    - core.priorities: PriorityMap

Used By:
    - loading.parser.parse_rucksack_line
    - solvers.rucksacks
"""

from __future__ import annotations

from dataclasses import dataclass

from puzzle_toolkit.core.priorities import DEFAULT_PRIORITIES, PriorityMap
from puzzle_toolkit.engines.intersection import intersect_all, split


@dataclass(frozen=True, slots=True)
class Container:
    """A run of item symbols, either a compartment or a common-item result."""

    items: str

    def cumulated_priorities(self, priorities: PriorityMap = DEFAULT_PRIORITIES) -> int:
        """
        Sum of the priorities of every item in the container.

        Raises:
            OutOfRangeSymbol: If an item is outside the priority alphabet
        """
        return priorities.cumulated(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __str__(self) -> str:
        return self.items


@dataclass(frozen=True, slots=True)
class Rucksack:
    """
    One rucksack record (immutable).

    Attributes:
        c1: First compartment
        c2: Second compartment

    Invariants:
        - len(c1) == len(c2)

    Example:
        >>> Rucksack.from_record("vJrwpWtwJgWrhcsFMMfFFhFp").common_items().items
        'p'
    """

    c1: Container
    c2: Container

    def __post_init__(self) -> None:
        if len(self.c1) != len(self.c2):
            raise ValueError(
                f"Compartments must have equal size: {len(self.c1)} != {len(self.c2)}"
            )

    @classmethod
    def from_record(cls, record: str) -> Rucksack:
        """
        Split a record into its two compartments.

        Raises:
            OddLengthRecord: If the record length is odd
        """
        left, right = split(record)
        return cls(c1=Container(left), c2=Container(right))

    @property
    def contents(self) -> str:
        """The whole record, compartments concatenated back together."""
        return self.c1.items + self.c2.items

    def common_items(self) -> Container:
        """Items found in both compartments, each once, in first-compartment order."""
        return Container(intersect_all([self.c1.items, self.c2.items]))

    def common_items_with_group(self, *others: Rucksack) -> Container:
        """Items carried by this rucksack and every other rucksack of the group."""
        return Container(intersect_all([self.contents, *(other.contents for other in others)]))
