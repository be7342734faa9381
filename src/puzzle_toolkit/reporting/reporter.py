"""
Module: reporting.reporter

Purpose:
    Render a PuzzleResult for display: plain text with one labelled
    integer per line, or JSON validated against result.schema.json.

Key Functions:
    - format_text(): Text lines
    - format_json(): Validated JSON document
    - report(): Write either form to a stream
"""

from __future__ import annotations

import json
import logging
import sys
from typing import List, Optional, TextIO

from puzzle_toolkit.core.schemas.validator import validate_result
from puzzle_toolkit.solvers.result import PuzzleResult

logger = logging.getLogger(__name__)


def format_text(result: PuzzleResult) -> List[str]:
    """
    One line per answer.

    An answer with part 2, label "Top 3 elves calories" and value 45000
    renders as ``[Part 2] Top 3 elves calories: 45000``.
    """
    return [f"[Part {answer.part}] {answer.label}: {answer.value}" for answer in result.answers]


def format_json(result: PuzzleResult, *, indent: Optional[int] = 2) -> str:
    """
    Serialize a result to JSON after validating it.

    Raises:
        ResultValidationError: If the serialized result breaks the schema
    """
    data = result.to_dict()
    validate_result(data)
    return json.dumps(data, indent=indent)


def report(result: PuzzleResult, *, as_json: bool = False, stream: Optional[TextIO] = None) -> None:
    """Write a result to ``stream`` (stdout by default)."""
    out = stream if stream is not None else sys.stdout
    if as_json:
        out.write(format_json(result) + "\n")
    else:
        for line in format_text(result):
            out.write(line + "\n")
    logger.debug("Reported %d answers for %s", len(result.answers), result.puzzle)
