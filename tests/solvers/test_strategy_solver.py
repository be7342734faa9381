"""
Tests for the strategy guide solver.
"""

import pytest

from puzzle_toolkit.errors import ParseError
from puzzle_toolkit.solvers import strategy


class TestStrategySolver:
    """Tests for solvers.strategy."""

    def test_solve_when_sample_then_part1_fifteen_each(self, strategy_lines):
        result = strategy.solve(strategy_lines)
        assert result.value("My score", part=1) == 15
        assert result.value("Opponent score", part=1) == 15

    def test_solve_when_sample_then_part2_resolves_choices(self, strategy_lines):
        result = strategy.solve(strategy_lines)
        assert result.value("My score", part=2) == 12
        assert result.value("Opponent score", part=2) == 15

    def test_solve_when_empty_guide_then_zero_scores(self):
        result = strategy.solve([])
        assert [a.value for a in result.answers] == [0, 0, 0, 0]

    def test_solve_when_malformed_token_then_raises_parse_error(self):
        with pytest.raises(ParseError):
            strategy.solve(["A Y", "B W"])
