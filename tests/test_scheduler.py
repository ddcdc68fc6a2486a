"""Tests for the playback Ticker."""

import pytest

from engine import SPEED_PRESETS, TICK_PERIODS, Ticker


class Recorder:
    """Tick callback that records fire times and stops after `limit` ticks."""

    def __init__(self, limit=None):
        self.times = []
        self.limit = limit

    def __call__(self, now):
        self.times.append(now)
        return self.limit is None or len(self.times) < self.limit


class TestTicker:
    def test_periods_and_presets(self):
        assert TICK_PERIODS == {"pathfinding": 0.025, "sorting": 0.015}
        assert SPEED_PRESETS["medium"] == 1.0

    def test_fires_once_per_elapsed_period(self, clock):
        ticker = Ticker(clock)
        rec = Recorder()
        ticker.start(rec, 0.25)

        assert ticker.pump(0.125) == 0
        assert ticker.pump(0.75) == 3
        assert rec.times == [0.25, 0.5, 0.75]
        assert ticker.fired == 3

    def test_pump_defaults_to_clock(self, clock):
        ticker = Ticker(clock)
        rec = Recorder()
        ticker.start(rec, 0.5)
        clock.advance(1.0)
        assert ticker.pump() == 2

    def test_callback_returning_false_disarms(self, clock):
        ticker = Ticker(clock)
        rec = Recorder(limit=2)
        ticker.start(rec, 0.25)

        assert ticker.pump(10.0) == 2
        assert not ticker.armed
        assert ticker.pump(20.0) == 0

    def test_cancel_stops_ticks(self, clock):
        ticker = Ticker(clock)
        rec = Recorder()
        ticker.start(rec, 0.25)
        ticker.cancel()
        assert not ticker.armed
        assert ticker.pump(5.0) == 0
        assert rec.times == []
        # cancelling twice is harmless
        ticker.cancel()

    def test_second_start_requires_cancel(self, clock):
        ticker = Ticker(clock)
        ticker.start(Recorder(), 0.25)
        with pytest.raises(RuntimeError):
            ticker.start(Recorder(), 0.25)

        ticker.cancel()
        ticker.start(Recorder(), 0.5)
        assert ticker.armed
        assert ticker.period == 0.5

    def test_restart_counts_from_the_current_clock(self, clock):
        ticker = Ticker(clock)
        ticker.start(Recorder(), 0.25)
        ticker.cancel()
        clock.advance(10.0)
        rec = Recorder()
        ticker.start(rec, 0.25)
        assert ticker.pump(10.5) == 2
        assert rec.times == [10.25, 10.5]

    @pytest.mark.parametrize("period", [0, -0.1])
    def test_rejects_non_positive_period(self, clock, period):
        with pytest.raises(ValueError):
            Ticker(clock).start(Recorder(), period)

    def test_pump_is_not_reentrant(self, clock):
        ticker = Ticker(clock)

        def nested(now):
            ticker.pump(now + 1.0)
            return True

        ticker.start(nested, 0.25)
        with pytest.raises(RuntimeError):
            ticker.pump(0.25)
        # the guard is released after the failure
        ticker.cancel()
        assert ticker.pump(1.0) == 0
