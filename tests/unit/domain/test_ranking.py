"""Unit tests for the feed ranking functions."""

import math
import random
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

import pytest

from forum.domain.error import DomainError, InvalidVotableError
from forum.domain.model.votable import Votable
from forum.domain.ranking import (
    REFERENCE_EPOCH,
    controversy_score,
    hot_score,
    net_score,
    rank,
    rising_score,
    sort_controversial,
    sort_hot,
    sort_new,
    sort_rising,
    sort_top,
)
from forum.domain.value import SortMode, TimeWindow

NOW = datetime(2024, 1, 1, tzinfo=timezone.utc)


@dataclass
class Item:
    """Minimal votable used to exercise the ranking functions."""

    name: str
    upvotes: int
    downvotes: int
    created_at: datetime


def names(items: list[Item]) -> list[str]:
    return [item.name for item in items]


@pytest.fixture
def scenario() -> dict[str, Item]:
    """A and B share a net score of 8, B is two days older; C nets 2."""
    return {
        "A": Item("A", 10, 2, NOW),
        "B": Item("B", 10, 2, NOW - timedelta(hours=48)),
        "C": Item("C", 3, 1, NOW - timedelta(hours=1)),
    }


@pytest.fixture
def mixed_items() -> list[Item]:
    return [
        Item("old-popular", 120, 10, NOW - timedelta(days=3)),
        Item("fresh", 4, 0, NOW - timedelta(minutes=5)),
        Item("contested", 40, 38, NOW - timedelta(hours=6)),
        Item("buried", 1, 15, NOW - timedelta(hours=2)),
        Item("untouched", 0, 0, NOW - timedelta(hours=12)),
        Item("steady", 25, 5, NOW - timedelta(hours=20)),
    ]


class TestVotableProtocol:
    """Ranking accepts anything shaped like a votable."""

    def test_plain_dataclass_satisfies_protocol(self):
        assert isinstance(Item("x", 1, 0, NOW), Votable)


class TestConcreteScenario:
    """The A/B/C scenario across the sort modes."""

    def test_new_orders_by_creation_time(self, scenario):
        # Act
        result = sort_new([scenario["B"], scenario["C"], scenario["A"]])

        # Assert
        assert names(result) == ["A", "C", "B"]

    def test_top_all_orders_by_net_score(self, scenario):
        # Act
        result = sort_top(
            [scenario["A"], scenario["B"], scenario["C"]], TimeWindow.ALL, now=NOW
        )

        # Assert
        assert [net_score(item) for item in result] == [8, 8, 2]
        assert set(names(result[:2])) == {"A", "B"}
        assert result[2].name == "C"

    def test_hot_scores_match_formula(self, scenario):
        # Arrange
        def expected(score: int, created_at: datetime) -> float:
            order = math.log10(max(abs(score), 1))
            sign = 1 if score > 0 else -1 if score < 0 else 0
            return sign * order + (created_at.timestamp() - 1134028003) / 45000

        # Assert
        for item in scenario.values():
            assert hot_score(item) == pytest.approx(
                expected(net_score(item), item.created_at)
            )

        # 2024-01-01 is 570039197 seconds past the reference epoch
        assert hot_score(scenario["A"]) == pytest.approx(
            math.log10(8) + 570039197 / 45000
        )
        assert hot_score(scenario["B"]) == pytest.approx(
            math.log10(8) + (570039197 - 48 * 3600) / 45000
        )
        assert hot_score(scenario["C"]) == pytest.approx(
            math.log10(2) + (570039197 - 3600) / 45000
        )

    def test_hot_ranks_a_then_c_then_b(self, scenario):
        # C loses 0.602 on score but only 0.08 on age against A, while B
        # loses 3.84 on age against A.

        # Act
        result = sort_hot([scenario["B"], scenario["C"], scenario["A"]])

        # Assert
        assert names(result) == ["A", "C", "B"]

    def test_reference_epoch_is_preserved(self):
        assert REFERENCE_EPOCH == 1134028003


class TestSortNew:
    """Tests for sort_new."""

    def test_output_is_non_increasing_in_created_at(self, mixed_items):
        result = sort_new(mixed_items)

        for earlier, later in zip(result, result[1:]):
            assert earlier.created_at >= later.created_at

    def test_naive_datetimes_are_treated_as_utc(self):
        # Arrange
        naive = Item("naive", 1, 0, datetime(2024, 1, 1, 12, 0))
        aware = Item("aware", 1, 0, datetime(2024, 1, 1, 11, 0, tzinfo=timezone.utc))

        # Act
        result = sort_new([aware, naive])

        # Assert
        assert names(result) == ["naive", "aware"]


class TestSortTop:
    """Tests for sort_top windowing."""

    @pytest.fixture
    def aged(self) -> list[Item]:
        return [
            Item("now", 1, 0, NOW),
            Item("two-hours", 5, 0, NOW - timedelta(hours=2)),
            Item("two-days", 9, 0, NOW - timedelta(days=2)),
        ]

    def test_hour_window_keeps_only_recent_item(self, aged):
        result = sort_top(aged, TimeWindow.HOUR, now=NOW)

        assert names(result) == ["now"]

    def test_day_window_keeps_first_two(self, aged):
        result = sort_top(aged, TimeWindow.DAY, now=NOW)

        assert names(result) == ["two-hours", "now"]

    def test_all_window_keeps_everything_by_score(self, aged):
        result = sort_top(aged, TimeWindow.ALL, now=NOW)

        assert names(result) == ["two-days", "two-hours", "now"]

    def test_window_bound_is_inclusive(self):
        # Arrange
        edge = Item("edge", 1, 0, NOW - timedelta(hours=1))
        past = Item("past", 1, 0, NOW - timedelta(hours=1, milliseconds=1))

        # Act
        result = sort_top([edge, past], TimeWindow.HOUR, now=NOW)

        # Assert
        assert names(result) == ["edge"]

    @pytest.mark.parametrize(
        "window, days",
        [
            (TimeWindow.WEEK, 7),
            (TimeWindow.MONTH, 30),
            (TimeWindow.YEAR, 365),
        ],
    )
    def test_long_windows_use_fixed_day_counts(self, window, days):
        # Arrange
        inside = Item("inside", 1, 0, NOW - timedelta(days=days))
        outside = Item("outside", 1, 0, NOW - timedelta(days=days, seconds=1))

        # Act
        result = sort_top([inside, outside], window, now=NOW)

        # Assert
        assert names(result) == ["inside"]

    def test_window_accepts_string_values(self, aged):
        result = sort_top(aged, "day", now=NOW)

        assert names(result) == ["two-hours", "now"]

    def test_future_items_are_kept(self):
        future = Item("future", 1, 0, NOW + timedelta(minutes=10))

        assert names(sort_top([future], TimeWindow.HOUR, now=NOW)) == ["future"]


class TestSortHot:
    """Tests for sort_hot."""

    def test_recent_item_beats_older_item_with_same_score(self):
        # Arrange
        older = Item("older", 6, 1, NOW - timedelta(hours=24))
        newer = Item("newer", 6, 1, NOW)

        # Act
        result = sort_hot([older, newer])

        # Assert
        assert names(result) == ["newer", "older"]

    def test_negative_score_sinks_below_zero_score(self):
        # Arrange
        zero = Item("zero", 0, 0, NOW)
        negative = Item("negative", 0, 10, NOW)

        # Assert
        assert hot_score(negative) < hot_score(zero)
        assert names(sort_hot([negative, zero])) == ["zero", "negative"]

    def test_zero_score_has_no_magnitude_term(self):
        item = Item("zero", 3, 3, NOW)

        assert hot_score(item) == pytest.approx(570039197 / 45000)


class TestSortRising:
    """Tests for sort_rising."""

    def test_younger_item_ranks_higher_with_same_score(self):
        # Arrange
        younger = Item("younger", 10, 0, NOW - timedelta(hours=1))
        older = Item("older", 10, 0, NOW - timedelta(hours=10))

        # Act
        result = sort_rising([older, younger], now=NOW)

        # Assert
        assert names(result) == ["younger", "older"]

    def test_rising_score_formula(self):
        item = Item("x", 12, 2, NOW - timedelta(hours=7))

        assert rising_score(item, NOW) == pytest.approx(10 / (7 + 2) ** 1.5)

    def test_future_item_is_treated_as_brand_new(self):
        future = Item("future", 8, 0, NOW + timedelta(hours=3))

        assert rising_score(future, NOW) == pytest.approx(8 / 2**1.5)


class TestSortControversial:
    """Tests for sort_controversial."""

    def test_one_sided_votes_score_zero(self):
        assert controversy_score(Item("up", 5, 0, NOW)) == 0
        assert controversy_score(Item("down", 0, 5, NOW)) == 0
        assert controversy_score(Item("none", 0, 0, NOW)) == 0

    def test_even_split_beats_lopsided_split(self):
        # Arrange
        even = Item("even", 5, 5, NOW)
        lopsided = Item("lopsided", 9, 1, NOW)

        # Act
        result = sort_controversial([lopsided, even])

        # Assert
        assert names(result) == ["even", "lopsided"]
        assert controversy_score(even) == pytest.approx(25 / 10**1.2)

    def test_uncontested_items_sink_to_the_end(self):
        # Arrange
        items = [
            Item("up-only", 50, 0, NOW),
            Item("contested", 2, 1, NOW),
        ]

        # Act
        result = sort_controversial(items)

        # Assert
        assert names(result) == ["contested", "up-only"]


class TestRank:
    """Tests for the rank dispatcher."""

    @pytest.mark.parametrize("mode", list(SortMode))
    def test_rank_is_a_permutation_of_input(self, mode, mixed_items):
        result = rank(mixed_items, mode, TimeWindow.ALL, now=NOW)

        assert sorted(names(result)) == sorted(names(mixed_items))

    @pytest.mark.parametrize("mode", list(SortMode))
    def test_rank_is_idempotent(self, mode, mixed_items):
        first = rank(mixed_items, mode, TimeWindow.WEEK, now=NOW)
        second = rank(mixed_items, mode, TimeWindow.WEEK, now=NOW)

        assert names(first) == names(second)

    @pytest.mark.parametrize("mode", list(SortMode))
    def test_rank_does_not_mutate_input(self, mode, mixed_items):
        before = list(mixed_items)

        rank(mixed_items, mode, now=NOW)

        assert mixed_items == before

    @pytest.mark.parametrize("mode", list(SortMode))
    def test_empty_and_single_inputs(self, mode):
        single = Item("only", 1, 0, NOW)

        assert rank([], mode, now=NOW) == []
        assert rank([single], mode, now=NOW) == [single]

    def test_rank_matches_individual_sorts(self, mixed_items):
        assert rank(mixed_items, SortMode.NEW) == sort_new(mixed_items)
        assert rank(mixed_items, SortMode.HOT) == sort_hot(mixed_items)
        assert rank(mixed_items, SortMode.CONTROVERSIAL) == sort_controversial(
            mixed_items
        )
        assert rank(mixed_items, SortMode.RISING, now=NOW) == sort_rising(
            mixed_items, now=NOW
        )
        assert rank(mixed_items, SortMode.TOP, TimeWindow.DAY, now=NOW) == sort_top(
            mixed_items, TimeWindow.DAY, now=NOW
        )

    def test_window_ignored_outside_top(self, mixed_items):
        assert rank(mixed_items, SortMode.NEW, TimeWindow.HOUR, now=NOW) == sort_new(
            mixed_items
        )

    def test_rank_accepts_string_mode(self, mixed_items):
        assert rank(mixed_items, "hot") == sort_hot(mixed_items)

    def test_unknown_mode_raises_value_error(self, mixed_items):
        with pytest.raises(ValueError):
            rank(mixed_items, "best")

    def test_ties_keep_input_order(self):
        # Arrange
        items = [Item(f"tie-{i}", 3, 1, NOW) for i in range(5)]
        random.Random(7).shuffle(items)

        # Act
        result = rank(items, SortMode.HOT)

        # Assert
        assert names(result) == names(items)


class TestMalformedItems:
    """Ranking fails fast on items that break the votable contract."""

    @pytest.mark.parametrize(
        "item",
        [
            Item("negative-up", -1, 0, NOW),
            Item("negative-down", 0, -3, NOW),
            Item("float-up", 1.5, 0, NOW),  # type: ignore[arg-type]
            Item("bool-down", 1, True, NOW),  # type: ignore[arg-type]
            Item("string-date", 1, 0, "2024-01-01"),  # type: ignore[arg-type]
        ],
    )
    @pytest.mark.parametrize("mode", list(SortMode))
    def test_invalid_item_raises(self, item, mode):
        with pytest.raises(InvalidVotableError):
            rank([Item("fine", 1, 0, NOW), item], mode, now=NOW)

    def test_missing_attributes_raise(self):
        class NotVotable:
            created_at = NOW

        with pytest.raises(InvalidVotableError, match="upvotes"):
            sort_hot([NotVotable()])  # type: ignore[list-item]

    def test_invalid_votable_is_a_domain_error(self):
        error = InvalidVotableError(Item("x", -1, 0, NOW), "upvotes must be >= 0")

        assert isinstance(error, DomainError)
        assert "Item" in str(error)
