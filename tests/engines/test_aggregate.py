"""
Unit Tests for the Aggregator

Tests for max_by_key(), top_k_sum(), score_match() and points_scored().
"""

import pytest

from puzzle_toolkit.errors import EmptyGroup
from puzzle_toolkit.core.models import Choice, Elf, Match, MatchResult
from puzzle_toolkit.engines.aggregate import max_by_key, points_scored, score_match, top_k_sum


@pytest.fixture
def sample_elves():
    groups = [[1000, 2000, 3000], [4000], [5000, 6000], [7000, 8000, 9000], [10000]]
    return [Elf.from_group(i, g) for i, g in enumerate(groups, start=1)]


class TestMaxByKey:
    """Tests for max_by_key()."""

    def test_max_when_sample_elves_then_fourth_elf(self, sample_elves):
        chad = max_by_key(sample_elves, key=lambda e: e.total_calories)
        assert chad.number == 4
        assert chad.total_calories == 24000

    def test_max_when_tie_then_first_unit(self):
        elves = [Elf(1, (5,)), Elf(2, (5,))]
        assert max_by_key(elves, key=lambda e: e.total_calories).number == 1

    def test_max_when_empty_then_raises_empty_group(self):
        with pytest.raises(EmptyGroup):
            max_by_key([], key=lambda e: e)


class TestTopKSum:
    """Tests for top_k_sum()."""

    def test_top_k_when_sample_totals_then_sums_three_largest(self, sample_elves):
        assert top_k_sum((e.total_calories for e in sample_elves), 3) == 45000

    def test_top_k_when_fewer_than_k_then_sums_all(self):
        assert top_k_sum([10, 20], 3) == 30

    def test_top_k_when_empty_then_zero(self):
        assert top_k_sum([], 3) == 0

    def test_top_k_when_k_zero_then_zero(self):
        assert top_k_sum([1, 2, 3], 0) == 0

    def test_top_k_when_negative_k_then_raises_error(self):
        with pytest.raises(ValueError, match="non-negative"):
            top_k_sum([1], -1)


class TestScoring:
    """Tests for per-side point accumulation."""

    def test_score_match_when_win_then_winner_gets_six(self):
        result = score_match(Match(opponent=Choice.ROCK, me=Choice.PAPER))
        assert result == MatchResult(me=2 + 6, opponent=1)

    def test_score_match_when_loss_then_opponent_gets_six(self):
        result = score_match(Match(opponent=Choice.PAPER, me=Choice.ROCK))
        assert result == MatchResult(me=1, opponent=2 + 6)

    def test_score_match_when_draw_then_both_get_three(self):
        result = score_match(Match(opponent=Choice.SCISSORS, me=Choice.SCISSORS))
        assert result == MatchResult(me=6, opponent=6)

    def test_points_scored_when_sample_guide_then_fifteen_each(self):
        matches = [
            Match(Choice.ROCK, Choice.PAPER),
            Match(Choice.PAPER, Choice.ROCK),
            Match(Choice.SCISSORS, Choice.SCISSORS),
        ]
        assert points_scored(matches) == MatchResult(me=15, opponent=15)

    def test_points_scored_when_no_matches_then_zero(self):
        assert points_scored([]) == MatchResult()
