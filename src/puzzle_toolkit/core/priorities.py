"""
Module: core.priorities

Purpose:
    Fixed bijection between the 52-symbol item alphabet and integer
    priorities: a..z map to 1..26, A..Z map to 27..52.

Key Classes:
    - PriorityMap: Immutable symbol -> priority lookup

Key Functions:
    - priority_of(symbol): Priority through the default map

Used By:
    - core.models.rucksack.Container
    - solvers.rucksacks
"""

from __future__ import annotations

import string
from dataclasses import dataclass, field
from typing import Dict, Iterable

from puzzle_toolkit.errors import OutOfRangeSymbol

ALPHABET = string.ascii_lowercase + string.ascii_uppercase


@dataclass(frozen=True)
class PriorityMap:
    """
    Symbol-to-priority lookup built once from a fixed alphabet.

    Attributes:
        symbols: Alphabet in priority order; position + 1 is the priority

    Invariants:
        - symbols has exactly 52 distinct characters
        - order never changes after construction

    Example:
        >>> PriorityMap().priority_of("p")
        16
        >>> PriorityMap().priority_of("L")
        38
    """

    symbols: str = ALPHABET
    _ranks: Dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if len(self.symbols) != 52 or len(set(self.symbols)) != 52:
            raise ValueError(f"Priority alphabet must hold 52 distinct symbols: {self.symbols!r}")
        object.__setattr__(
            self, "_ranks", {symbol: rank for rank, symbol in enumerate(self.symbols, start=1)}
        )

    def priority_of(self, symbol: str) -> int:
        """
        Priority of a single symbol.

        Raises:
            OutOfRangeSymbol: If symbol is not in the alphabet
        """
        try:
            return self._ranks[symbol]
        except (KeyError, TypeError):
            raise OutOfRangeSymbol(symbol) from None

    def cumulated(self, symbols: Iterable[str]) -> int:
        """Sum of priorities of every symbol given."""
        return sum(self.priority_of(symbol) for symbol in symbols)

    def __len__(self) -> int:
        return len(self.symbols)


DEFAULT_PRIORITIES = PriorityMap()


def priority_of(symbol: str) -> int:
    """Priority of ``symbol`` under the default a-z, A-Z ordering."""
    return DEFAULT_PRIORITIES.priority_of(symbol)
