"""
Module: calories

Purpose:
    Provides the Elf dataclass - one numeric group of food calorie values
    read between blank lines of the calorie list.

Key Functions:
    - Elf.total_calories: Property summing the carried items
    - Elf.from_group(number, values): Build from a parsed group

Used By:
    - loading.grouping.group_calories
    - solvers.calories
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple


@dataclass(frozen=True, slots=True)
class Elf:
    """
    One group of calorie values (immutable).

    Attributes:
        number: 1-based position of the group in the input
        food_carried: Calorie value of each item, in input order

    Invariants:
        - number >= 1
        - every calorie value >= 0

    Example:
        >>> Elf(4, (7000, 8000, 9000)).total_calories
        24000
    """

    number: int
    food_carried: Tuple[int, ...]

    def __post_init__(self) -> None:
        if self.number < 1:
            raise ValueError(f"Elf number must be positive: {self.number}")
        negative = [value for value in self.food_carried if value < 0]
        if negative:
            raise ValueError(f"Calorie values cannot be negative: {negative}")

    @classmethod
    def from_group(cls, number: int, values: Iterable[int]) -> Elf:
        return cls(number=number, food_carried=tuple(values))

    @property
    def total_calories(self) -> int:
        """Sum of calories carried. Calculated, never stored."""
        return sum(self.food_carried)

    def __repr__(self) -> str:
        return f"Elf(#{self.number}, {self.total_calories} cal)"
