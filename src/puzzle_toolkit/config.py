"""
Module: config

Purpose:
    Configuration dataclass for the solvers. Immutable configuration
    with validation on construction.

Key Classes:
    - SolverConfig: Tunables shared by every puzzle solver

Used By:
    - solvers.*: Read top_k / badge settings
    - cli: Built from command-line flags
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SolverConfig:
    """
    Configuration for solving puzzles (immutable).

    Attributes:
        top_k: Number of largest calorie groups summed in part 2
        badge_group_size: Consecutive rucksacks sharing one badge
        drop_incomplete_groups: Drop a trailing badge group shorter than
            badge_group_size (True) or reject it as a ParseError (False)

    Example:
        >>> config = SolverConfig(top_k=5)
        >>> config.badge_group_size
        3
    """

    top_k: int = 3
    badge_group_size: int = 3
    drop_incomplete_groups: bool = True

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.top_k < 0:
            raise ValueError(f"top_k must be non-negative: {self.top_k}")
        if self.badge_group_size < 2:
            raise ValueError(f"badge_group_size must be at least 2: {self.badge_group_size}")
