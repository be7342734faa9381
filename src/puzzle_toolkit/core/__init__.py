"""
Puzzle Toolkit Core Package

Shared data models and the priority map, re-exporting the error taxonomy. These are
the single source of truth for every loader, engine and solver.

1. **Immutable Data Models**
   - Frozen dataclasses and IntEnums, new instances for any change

2. **Calculated Values (Never Stored)**
   - Elf totals, match outcomes and common items are always derived

3. **One Error Hierarchy**
   - Every failure is a PuzzleError subclass from puzzle_toolkit.errors
"""

from puzzle_toolkit.errors import (
    EmptyGroup,
    InputError,
    OddLengthRecord,
    OutOfRangeSymbol,
    ParseError,
    PuzzleError,
    UnknownPuzzleError,
)
from .models import Choice, Container, Elf, Match, MatchResult, Outcome, Rucksack
from .priorities import PriorityMap, priority_of

__all__ = [
    "PuzzleError",
    "ParseError",
    "OddLengthRecord",
    "OutOfRangeSymbol",
    "EmptyGroup",
    "InputError",
    "UnknownPuzzleError",
    "Elf",
    "Choice",
    "Outcome",
    "Match",
    "MatchResult",
    "Container",
    "Rucksack",
    "PriorityMap",
    "priority_of",
]
