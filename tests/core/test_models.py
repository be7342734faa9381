"""
Unit Tests for Core Models

Tests for Elf, Choice, Outcome, MatchResult, Container and Rucksack.
"""

import pytest

from puzzle_toolkit.errors import OddLengthRecord, OutOfRangeSymbol
from puzzle_toolkit.core.models import (
    Choice,
    Container,
    Elf,
    MatchResult,
    Outcome,
    Rucksack,
)


class TestElf:
    """Tests for Elf dataclass."""

    def test_total_calories_when_items_then_sums_them(self):
        assert Elf(4, (7000, 8000, 9000)).total_calories == 24000

    def test_total_calories_when_no_items_then_zero(self):
        assert Elf(1, ()).total_calories == 0

    def test_from_group_when_iterable_then_stores_tuple(self):
        elf = Elf.from_group(2, iter([1, 2]))
        assert elf.food_carried == (1, 2)
        assert elf.number == 2

    def test_init_when_negative_calories_then_raises_error(self):
        with pytest.raises(ValueError, match="cannot be negative"):
            Elf(1, (5, -1))

    def test_init_when_zero_number_then_raises_error(self):
        with pytest.raises(ValueError, match="must be positive"):
            Elf(0, (1,))

    def test_repr_when_called_then_shows_number_and_total(self):
        assert repr(Elf(3, (1, 2))) == "Elf(#3, 3 cal)"


class TestChoiceAndOutcome:
    """Tests for the Choice and Outcome enums."""

    @pytest.mark.parametrize(
        "token, expected",
        [
            ("A", Choice.ROCK), ("B", Choice.PAPER), ("C", Choice.SCISSORS),
            ("X", Choice.ROCK), ("Y", Choice.PAPER), ("Z", Choice.SCISSORS),
        ],
    )
    def test_choice_parse_when_either_alphabet_then_maps_variant(self, token, expected):
        assert Choice.parse(token) is expected

    def test_choice_parse_when_unknown_token_then_raises_value_error(self):
        with pytest.raises(ValueError, match="Invalid choice token"):
            Choice.parse("D")

    def test_choice_points_when_read_then_fixed_values(self):
        assert [c.points for c in Choice] == [1, 2, 3]

    @pytest.mark.parametrize(
        "token, expected", [("X", Outcome.LOSS), ("Y", Outcome.DRAW), ("Z", Outcome.WIN)]
    )
    def test_outcome_parse_when_valid_token_then_maps_variant(self, token, expected):
        assert Outcome.parse(token) is expected

    def test_outcome_parse_when_opponent_token_then_raises_value_error(self):
        with pytest.raises(ValueError, match="Invalid outcome token"):
            Outcome.parse("A")

    def test_outcome_points_when_read_then_fixed_values(self):
        assert [o.points for o in Outcome] == [0, 3, 6]

    def test_str_when_called_then_capitalized_name(self):
        assert str(Choice.SCISSORS) == "Scissors"
        assert str(Outcome.WIN) == "Win"


class TestMatchResult:
    """Tests for MatchResult."""

    def test_add_when_two_results_then_sums_each_side(self):
        total = MatchResult(8, 1) + MatchResult(1, 8)
        assert total == MatchResult(me=9, opponent=9)

    def test_default_when_created_then_zero(self):
        assert MatchResult() == MatchResult(0, 0)

    def test_init_when_negative_then_raises_error(self):
        with pytest.raises(ValueError, match="cannot be negative"):
            MatchResult(me=-1)


class TestRucksack:
    """Tests for Rucksack and Container."""

    def test_from_record_when_even_then_splits_in_half(self):
        rucksack = Rucksack.from_record("vJrwpWtwJgWrhcsFMMfFFhFp")
        assert rucksack.c1 == Container("vJrwpWtwJgWr")
        assert rucksack.c2 == Container("hcsFMMfFFhFp")

    def test_from_record_when_odd_then_raises_odd_length(self):
        with pytest.raises(OddLengthRecord, match="odd length"):
            Rucksack.from_record("abc")

    def test_contents_when_split_then_concatenates_back(self):
        record = "jqHRNqRjqzjGDLGLrsFMfFZSrLrFZsSL"
        assert Rucksack.from_record(record).contents == record

    @pytest.mark.parametrize(
        "record, expected",
        [
            ("vJrwpWtwJgWrhcsFMMfFFhFp", "p"),
            ("jqHRNqRjqzjGDLGLrsFMfFZSrLrFZsSL", "L"),
            ("PmmdzqPrVvPwwTWBwg", "P"),
            ("wMqvLMZHhHMvwLHjbvcjnnSBnvTQFn", "v"),
            ("ttgJtRGJQctTZtZT", "t"),
            ("CrZsJsPPZsGzwwsLwLmpwMDw", "s"),
        ],
    )
    def test_common_items_when_sample_record_then_single_item(self, record, expected):
        assert Rucksack.from_record(record).common_items().items == expected

    def test_common_items_with_group_when_sample_group_then_badge(self, rucksack_lines):
        a, b, c = (Rucksack.from_record(r) for r in rucksack_lines[:3])
        assert a.common_items_with_group(b, c).items == "r"

    def test_cumulated_priorities_when_container_then_sums_items(self):
        assert Container("pL").cumulated_priorities() == 16 + 38

    def test_cumulated_priorities_when_bad_symbol_then_raises(self):
        with pytest.raises(OutOfRangeSymbol):
            Container("a1").cumulated_priorities()

    def test_init_when_unequal_compartments_then_raises_error(self):
        with pytest.raises(ValueError, match="equal size"):
            Rucksack(Container("ab"), Container("c"))
