"""
Module: errors

Purpose:
    Error taxonomy shared by every stage of the puzzle pipeline. All
    errors derive from PuzzleError so the CLI can stop on any of them
    with a single handler.

Key Classes:
    - PuzzleError: Base class
    - ParseError: A line does not match the puzzle grammar
    - OddLengthRecord: A text record cannot be split evenly
    - OutOfRangeSymbol: A symbol is not part of the 52-symbol alphabet
    - EmptyGroup: An aggregate was requested over zero elements
    - InputError: The input file cannot be read
    - UnknownPuzzleError: No solver registered under a name

Used By:
    - core.priorities, core.schemas, engines.*, loading.*, solvers.*, cli
"""

from __future__ import annotations

from typing import Optional


class PuzzleError(Exception):
    """Base class for all puzzle failures."""


class ParseError(PuzzleError):
    """A line does not match the expected grammar."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number


class OddLengthRecord(PuzzleError):
    """Record length is odd, so it cannot be split into two compartments."""

    def __init__(self, record: str, line_number: Optional[int] = None):
        message = f"Record {record!r} has odd length {len(record)}; cannot split into compartments"
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.record = record
        self.line_number = line_number


class OutOfRangeSymbol(PuzzleError):
    """Symbol is not one of the 52 recognised characters."""

    def __init__(self, symbol: str):
        super().__init__(f"Out of range priority symbol: {symbol!r}")
        self.symbol = symbol


class EmptyGroup(PuzzleError):
    """Aggregate requested over an empty sequence."""


class InputError(PuzzleError):
    """Input file is missing or unreadable."""


class UnknownPuzzleError(PuzzleError):
    """Raised when a puzzle name is not registered."""
