"""
Module: loading.reader

Purpose:
    Input source for every puzzle: read a text file into an ordered,
    fully materialised tuple of lines.

Key Functions:
    - read_lines(): Lines of a file with line endings stripped
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Tuple

from puzzle_toolkit.errors import InputError

logger = logging.getLogger(__name__)


def read_lines(path: Path) -> Tuple[str, ...]:
    """
    Read a puzzle input file.

    Args:
        path: Path to a UTF-8 text file

    Returns:
        Lines in file order, without trailing newline characters

    Raises:
        InputError: If the file is missing or cannot be decoded
    """
    path = Path(path)
    if not path.is_file():
        raise InputError(f"Input file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InputError(f"Cannot read {path}: {e}") from e

    lines = tuple(text.splitlines())
    logger.debug("Read %d lines from %s", len(lines), path)
    return lines
