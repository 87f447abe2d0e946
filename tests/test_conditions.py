"""Tests for iteration and wall-clock interval conditions."""

import numpy as np
import pytest

from fixedstep.core_numerics import ConfigurationError
from fixedstep.integration import IterationInterval, WallClockInterval, TimeUnit


class FakeClock:
    """Manually advanced clock returning seconds."""

    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


def fired(condition, iterations):
    return [i for i in iterations if condition(i, None)]


class TestIterationInterval:
    """Test iteration-count conditions."""

    def test_loop_mode(self):
        assert fired(IterationInterval(3), range(1, 10)) == [3, 6, 9]

    def test_loop_mode_is_default(self):
        cond = IterationInterval(3)
        assert cond.loop
        assert fired(cond, range(1, 10)) == fired(cond, range(1, 10))

    def test_one_shot(self):
        cond = IterationInterval(3, loop=False)
        assert fired(cond, range(1, 10)) == [3]
        assert cond.fired_once

    def test_one_shot_never_resets(self):
        cond = IterationInterval(3, loop=False)
        fired(cond, range(1, 10))
        # a second pass over the same iterations, as when the instance is reused
        assert fired(cond, range(1, 10)) == []

    def test_period_one(self):
        assert fired(IterationInterval(1), range(1, 6)) == [1, 2, 3, 4, 5]

    def test_numpy_integer_period(self):
        assert IterationInterval(np.int64(2)).period == 2

    @pytest.mark.parametrize("period", [0, -3, 2.5, "3", True])
    def test_rejects_invalid_period(self, period):
        with pytest.raises(ConfigurationError):
            IterationInterval(period)


class TestTimeUnit:
    """Test time unit parsing."""

    @pytest.mark.parametrize("alias,unit", [
        ("s", TimeUnit.SECONDS), ("seconds", TimeUnit.SECONDS),
        ("m", TimeUnit.MINUTES), ("minutes", TimeUnit.MINUTES),
        ("h", TimeUnit.HOURS), ("Hours", TimeUnit.HOURS),
    ])
    def test_aliases(self, alias, unit):
        assert TimeUnit.parse(alias) is unit

    def test_member_passthrough(self):
        assert TimeUnit.parse(TimeUnit.MINUTES) is TimeUnit.MINUTES

    @pytest.mark.parametrize("unit", ["days", "ms", "", 5, None])
    def test_rejects_unknown(self, unit):
        with pytest.raises(ConfigurationError):
            TimeUnit.parse(unit)


class TestWallClockInterval:
    """Test wall-clock conditions with an injected clock."""

    def test_fires_after_threshold(self):
        clock = FakeClock(100.0)
        cond = WallClockInterval(5, "s", clock=clock)
        assert not cond(1)
        clock.now = 105.0
        assert not cond(2)  # must strictly exceed
        clock.now = 105.5
        assert cond(3)

    def test_resets_on_firing(self):
        clock = FakeClock(0.0)
        cond = WallClockInterval(5, "s", clock=clock)
        clock.now = 6.0
        assert cond(1)
        assert cond.last_fired == 6.0
        clock.now = 10.0
        assert not cond(2)
        clock.now = 11.5
        assert cond(3)

    def test_independent_of_iteration(self):
        clock = FakeClock(0.0)
        cond = WallClockInterval(1, "s", clock=clock)
        assert not any(cond(i) for i in range(1000))

    def test_minutes_and_hours(self):
        assert WallClockInterval(2, "m", clock=FakeClock()).threshold_seconds == 120.0
        assert WallClockInterval(1.5, TimeUnit.HOURS, clock=FakeClock()).threshold_seconds == 5400.0

        clock = FakeClock(0.0)
        cond = WallClockInterval(1, "minutes", clock=clock)
        clock.now = 59.0
        assert not cond(1)
        clock.now = 61.0
        assert cond(2)

    def test_timestamp_taken_at_construction(self):
        clock = FakeClock(42.0)
        assert WallClockInterval(1, clock=clock).last_fired == 42.0

    def test_rejects_invalid_unit(self):
        with pytest.raises(ConfigurationError):
            WallClockInterval(5, unit="days")

    @pytest.mark.parametrize("duration", [-1, "5", None, True, float("nan"), float("inf")])
    def test_rejects_invalid_duration(self, duration):
        with pytest.raises(ConfigurationError):
            WallClockInterval(duration, "s")

    def test_default_clock(self):
        cond = WallClockInterval(1, "h")
        assert not cond(1)


if __name__ == "__main__":
    pytest.main([__file__])
