"""Unit tests for randomization utilities."""

from datetime import datetime
from random import Random

import pytest

from fauxcv.utils.randomization import (
    PRESENT,
    bound_faker,
    coin,
    date_range,
    pick_many,
    pick_one,
    random_int,
)
from fauxcv.utils.timestamp import month_year, shift_months


@pytest.mark.unit
class TestRandomInt:
    def test_stays_within_inclusive_bounds(self):
        rng = Random(0)
        values = {random_int(rng, 3, 6) for _ in range(500)}
        assert values == {3, 4, 5, 6}

    def test_equal_bounds_is_deterministic(self):
        rng = Random(0)
        assert all(random_int(rng, 4, 4) == 4 for _ in range(20))

    def test_inverted_bounds_raise(self):
        with pytest.raises(ValueError, match="Empty range"):
            random_int(Random(0), 5, 2)


@pytest.mark.unit
class TestPickOne:
    def test_returns_member(self):
        items = ["a", "b", "c"]
        rng = Random(1)
        assert all(pick_one(rng, items) in items for _ in range(50))

    def test_empty_sequence_returns_none(self):
        assert pick_one(Random(1), []) is None

    def test_reaches_every_element(self):
        rng = Random(2)
        assert {pick_one(rng, "xyz") for _ in range(200)} == {"x", "y", "z"}


@pytest.mark.unit
class TestPickMany:
    @pytest.mark.parametrize(
        "size, min_count, max_count",
        [(10, 3, 6), (4, 2, 8), (2, 5, 8), (0, 1, 3), (5, 0, 0), (6, 6, 6)],
    )
    def test_count_bounds_and_distinct_members(self, size, min_count, max_count):
        items = [f"item{i}" for i in range(size)]
        for seed in range(100):
            picked = pick_many(Random(seed), items, min_count, max_count)
            assert min(min_count, size) <= len(picked) <= min(max_count, size)
            assert len(set(picked)) == len(picked)
            assert set(picked) <= set(items)

    def test_short_sequence_returns_everything(self):
        picked = pick_many(Random(3), ["a", "b"], 5, 8)
        assert sorted(picked) == ["a", "b"]

    def test_does_not_modify_input(self):
        items = ["a", "b", "c", "d"]
        pick_many(Random(4), items, 2, 3)
        assert items == ["a", "b", "c", "d"]


@pytest.mark.unit
def test_coin_threshold_extremes():
    rng = Random(5)
    assert not any(coin(rng, 1.0) for _ in range(100))
    assert all(coin(rng, -0.1) for _ in range(100))


@pytest.mark.unit
class TestDateRange:
    def test_current_job(self, fixed_clock):
        dates = date_range(2, 0, is_current=True, clock=fixed_clock)
        assert dates.start_date == "March 2022"
        assert dates.end_date == PRESENT

    def test_current_job_ignores_months_ago(self, fixed_clock):
        dates = date_range(1, 7, is_current=True, clock=fixed_clock)
        assert dates.start_date == "March 2023"
        assert dates.end_date == "Present"

    def test_past_job(self, fixed_clock):
        dates = date_range(1, 3, clock=fixed_clock)
        assert dates.end_date == "December 2023"
        assert dates.start_date == "December 2022"

    def test_zero_length_range(self, fixed_clock):
        dates = date_range(0, 24, clock=fixed_clock)
        assert dates.start_date == dates.end_date == "March 2022"


@pytest.mark.unit
class TestTimestampHelpers:
    def test_month_year(self):
        assert month_year(datetime(2021, 11, 2)) == "November 2021"

    def test_shift_months_clamps_day(self):
        assert shift_months(datetime(2024, 3, 31), 1) == datetime(2024, 2, 29)

    def test_shift_months_across_year(self):
        assert shift_months(datetime(2024, 1, 10), 13) == datetime(2022, 12, 10)


@pytest.mark.unit
def test_bound_faker_follows_rng_seed():
    first = bound_faker(Random(42))
    second = bound_faker(Random(42))
    assert [first.last_name() for _ in range(5)] == [second.last_name() for _ in range(5)]
