"""
Module: solvers

Purpose:
    One solver per puzzle and the registry mapping puzzle names to them.
    Every solver takes the raw input lines and a SolverConfig and returns
    a PuzzleResult.

Key Functions:
    - get_solver(name): Solver callable for a puzzle name
    - list_puzzles(): Registered puzzle names
    - solve(name, lines, config): Convenience wrapper
"""

from __future__ import annotations

from typing import Callable, Dict, List, Sequence

from puzzle_toolkit.config import SolverConfig
from puzzle_toolkit.errors import UnknownPuzzleError

from . import calories, rucksacks, strategy
from .result import Answer, PuzzleResult

Solver = Callable[[Sequence[str], SolverConfig], PuzzleResult]

_REGISTRY: Dict[str, Solver] = {
    calories.NAME: calories.solve,
    strategy.NAME: strategy.solve,
    rucksacks.NAME: rucksacks.solve,
}


def list_puzzles() -> List[str]:
    return list(_REGISTRY)


def get_solver(name: str) -> Solver:
    """
    Raises:
        UnknownPuzzleError: If no solver is registered under name
    """
    try:
        return _REGISTRY[name]
    except KeyError:
        raise UnknownPuzzleError(
            f"Unknown puzzle {name!r}; expected one of {', '.join(_REGISTRY)}"
        ) from None


def solve(name: str, lines: Sequence[str], config: SolverConfig = SolverConfig()) -> PuzzleResult:
    return get_solver(name)(lines, config)


__all__ = [
    "Answer",
    "PuzzleResult",
    "get_solver",
    "list_puzzles",
    "solve",
]
