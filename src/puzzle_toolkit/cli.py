"""
Command-line entry point.

Usage:
    puzzle-toolkit calories input.txt
    puzzle-toolkit rucksacks input.txt --json --strict-groups
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from puzzle_toolkit import __version__
from puzzle_toolkit.config import SolverConfig
from puzzle_toolkit.errors import PuzzleError
from puzzle_toolkit.loading.reader import read_lines
from puzzle_toolkit.reporting import report
from puzzle_toolkit.solvers import get_solver, list_puzzles

logger = logging.getLogger("puzzle_toolkit")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="puzzle-toolkit", description="Solve line-oriented text puzzles"
    )
    parser.add_argument("puzzle", choices=list_puzzles(), help="Puzzle to solve")
    parser.add_argument("input", type=Path, help="Path to the puzzle input file")
    parser.add_argument("--top-k", type=int, default=3, help="Calorie groups summed in part 2")
    parser.add_argument(
        "--group-size", type=int, default=3, help="Rucksacks sharing one badge"
    )
    parser.add_argument(
        "--strict-groups",
        action="store_true",
        help="Fail instead of dropping an incomplete trailing badge group",
    )
    parser.add_argument("--json", action="store_true", help="Emit validated JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(message)s",
    )

    try:
        config = SolverConfig(
            top_k=args.top_k,
            badge_group_size=args.group_size,
            drop_incomplete_groups=not args.strict_groups,
        )
    except ValueError as e:
        parser.error(str(e))

    try:
        lines = read_lines(args.input)
        result = get_solver(args.puzzle)(lines, config)
        report(result, as_json=args.json)
    except PuzzleError as e:
        logger.error("Error: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
