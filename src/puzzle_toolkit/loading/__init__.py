"""
Module: loading

Purpose:
    Input reading, grouping and parsing for the three puzzle grammars.

Key Functions:
    - read_lines(): Read an input file
    - split_on_blank() / chunk_exact(): Grouping pipeline
    - parse_elves(), parse_strategy_guide(), parse_rucksacks(): Grammars

Used By:
    - solvers.*
"""

from .reader import read_lines
from .grouping import chunk_exact, non_blank, split_on_blank
from .parser import (
    parse_calorie_value,
    parse_elves,
    parse_match_line,
    parse_rucksacks,
    parse_strategy_guide,
)

__all__ = [
    "read_lines",
    "split_on_blank",
    "chunk_exact",
    "non_blank",
    "parse_calorie_value",
    "parse_elves",
    "parse_match_line",
    "parse_strategy_guide",
    "parse_rucksacks",
]
