"""
Module: loading.grouping

Purpose:
    Partition an ordered line sequence into logical groups before the
    engines see it.

Key Functions:
    - split_on_blank(): Groups delimited by blank lines
    - chunk_exact(): Fixed-size chunks, incomplete remainder handled by policy
    - non_blank(): Numbered non-blank lines for line-per-record grammars
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Sequence, Tuple, TypeVar

from puzzle_toolkit.errors import ParseError

logger = logging.getLogger(__name__)

T = TypeVar("T")

NumberedLine = Tuple[int, str]


def is_blank(line: str) -> bool:
    return not line.strip()


def split_on_blank(lines: Iterable[str]) -> List[List[NumberedLine]]:
    """
    Group lines between blank-line delimiters.

    The group still open at end of input is kept even without a final
    blank line. Runs of blank lines close at most one group, so no empty
    group is ever produced.

    Returns:
        Groups of (1-based line number, line) pairs, in input order

    Example:
        >>> [[text for _, text in g] for g in split_on_blank(["1", "2", "", "3"])]
        [['1', '2'], ['3']]
    """
    groups: List[List[NumberedLine]] = []
    current: List[NumberedLine] = []
    for number, line in enumerate(lines, start=1):
        if is_blank(line):
            if current:
                groups.append(current)
                current = []
            continue
        current.append((number, line))
    if current:
        groups.append(current)
    return groups


def non_blank(lines: Iterable[str]) -> Iterator[NumberedLine]:
    """Yield (1-based line number, line) for every non-blank line."""
    for number, line in enumerate(lines, start=1):
        if not is_blank(line):
            yield number, line


def chunk_exact(items: Sequence[T], size: int, *, drop_incomplete: bool = True) -> List[Tuple[T, ...]]:
    """
    Split items into consecutive chunks of exactly ``size``.

    Args:
        items: Items to chunk, in order
        size: Chunk size (must be positive)
        drop_incomplete: Drop a trailing partial chunk (True) or raise

    Raises:
        ValueError: If size is not positive
        ParseError: If a partial chunk remains and drop_incomplete is False
    """
    if size <= 0:
        raise ValueError(f"Chunk size must be positive: {size}")

    full = len(items) - len(items) % size
    chunks = [tuple(items[i:i + size]) for i in range(0, full, size)]

    remainder = len(items) - full
    if remainder:
        if not drop_incomplete:
            raise ParseError(
                f"{len(items)} records do not form complete groups of {size} "
                f"({remainder} left over)"
            )
        logger.warning(
            "Dropping %d trailing record(s) that do not form a group of %d", remainder, size
        )
    return chunks
