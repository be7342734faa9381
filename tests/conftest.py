import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import puzzle_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())


CALORIE_LINES = [
    "1000", "2000", "3000", "",
    "4000", "",
    "5000", "6000", "",
    "7000", "8000", "9000", "",
    "10000",
]

STRATEGY_LINES = ["A Y", "B X", "C Z"]

RUCKSACK_LINES = [
    "vJrwpWtwJgWrhcsFMMfFFhFp",
    "jqHRNqRjqzjGDLGLrsFMfFZSrLrFZsSL",
    "PmmdzqPrVvPwwTWBwg",
    "wMqvLMZHhHMvwLHjbvcjnnSBnvTQFn",
    "ttgJtRGJQctTZtZT",
    "CrZsJsPPZsGzwwsLwLmpwMDw",
]


# Common test fixtures
@pytest.fixture
def calorie_lines():
    """Sample calorie list; the last group has no trailing blank line."""
    return list(CALORIE_LINES)


@pytest.fixture
def strategy_lines():
    """Sample strategy guide."""
    return list(STRATEGY_LINES)


@pytest.fixture
def rucksack_lines():
    """Sample rucksack list (two badge groups)."""
    return list(RUCKSACK_LINES)


@pytest.fixture
def write_input(tmp_path: Path):
    """Write lines to an input file and return its path."""
    def _write(lines, name: str = "input.txt") -> Path:
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path
    return _write
