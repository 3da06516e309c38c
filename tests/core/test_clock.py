"""Tests for clock implementations."""

from datetime import datetime, timezone

from stockledger.core.clock import DeterministicClock, SystemClock


class TestSystemClock:
    def test_returns_aware_utc(self):
        now = SystemClock().now()
        assert now.tzinfo is not None
        assert now.utcoffset().total_seconds() == 0


class TestDeterministicClock:
    def test_fixed_until_advanced(self):
        start = datetime(2024, 1, 15, 10, 0, tzinfo=timezone.utc)
        clock = DeterministicClock(start)
        assert clock.now() == start
        assert clock.now() == start
        clock.advance(30)
        assert (clock.now() - start).total_seconds() == 30

    def test_set_time_resets_advance(self):
        clock = DeterministicClock()
        clock.advance(100)
        target = datetime(2024, 2, 1, tzinfo=timezone.utc)
        clock.set_time(target)
        assert clock.now() == target

    def test_set_time_naive_treated_as_utc(self):
        clock = DeterministicClock()
        clock.set_time(datetime(2024, 2, 1))
        assert clock.now().tzinfo == timezone.utc
