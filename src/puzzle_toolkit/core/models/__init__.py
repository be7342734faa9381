"""
Core Models Package

Immutable value types shared by the loaders, engines and solvers.

All models are frozen dataclasses or IntEnums:
1. No accidental mutation between pipeline stages
2. Usable as dict keys or in sets
3. Derived values (totals, outcomes) are calculated, never stored
"""

from .calories import Elf
from .choices import Choice, Match, MatchResult, Outcome
from .rucksack import Container, Rucksack

__all__ = [
    "Elf",
    "Choice",
    "Outcome",
    "Match",
    "MatchResult",
    "Container",
    "Rucksack",
]
