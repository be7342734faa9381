"""
Module: solvers.result

Purpose:
    Result types returned by every solver.

Key Classes:
    - Answer: One labelled integer answer for one puzzle part
    - PuzzleResult: All answers of one puzzle run
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from puzzle_toolkit.core.schemas.validator import RESULT_SCHEMA_VERSION


@dataclass(frozen=True, slots=True)
class Answer:
    """
    One labelled answer.

    Attributes:
        part: Puzzle part (1 or 2)
        label: Human-readable description of the value
        value: The computed integer
    """
    part: int
    label: str
    value: int

    def to_dict(self) -> Dict[str, Any]:
        return {"part": self.part, "label": self.label, "value": self.value}


@dataclass(frozen=True)
class PuzzleResult:
    """
    Complete result of one puzzle run (immutable).

    Example:
        >>> result = PuzzleResult("calories", (Answer(2, "Top 3 calories", 45000),))
        >>> result.value("Top 3 calories")
        45000
    """
    puzzle: str
    answers: Tuple[Answer, ...]

    def value(self, label: str, part: Optional[int] = None) -> int:
        """Value of the first answer with the given label (and part, if given)."""
        for answer in self.answers:
            if answer.label == label and part in (None, answer.part):
                return answer.value
        raise KeyError(label)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "schema_version": RESULT_SCHEMA_VERSION,
            "puzzle": self.puzzle,
            "answers": [answer.to_dict() for answer in self.answers],
        }
