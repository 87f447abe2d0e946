"""
Reusable stateful conditions for callbacks.

IterationInterval fires on iteration counts, WallClockInterval on real
elapsed time. Both carry mutable state, so every run needs its own instances.
"""
import logging
import math
import numbers
import time
from enum import Enum
from typing import Callable, Union

from ..core_numerics.common import ConfigurationError

logger = logging.getLogger(__name__)


class TimeUnit(Enum):
    """Units accepted by WallClockInterval, valued in seconds."""
    SECONDS = 1.0
    MINUTES = 60.0
    HOURS = 3600.0

    @classmethod
    def parse(cls, unit: Union["TimeUnit", str]) -> "TimeUnit":
        if isinstance(unit, cls):
            return unit
        if isinstance(unit, str):
            found = _UNIT_ALIASES.get(unit.strip().lower())
            if found is not None:
                return found
        raise ConfigurationError(
            f"unsupported time unit {unit!r}, expected one of {sorted(_UNIT_ALIASES)}"
        )


_UNIT_ALIASES = {
    "s": TimeUnit.SECONDS, "seconds": TimeUnit.SECONDS,
    "m": TimeUnit.MINUTES, "minutes": TimeUnit.MINUTES,
    "h": TimeUnit.HOURS, "hours": TimeUnit.HOURS,
}


class IterationInterval:
    """Fires when ``iteration % period == 0``.

    In loop mode it fires on every multiple of ``period``. In one-shot mode
    (``loop=False``) it fires on the first multiple only and stays false for
    the rest of the instance's life; there is no reset.
    """

    def __init__(self, period: int, loop: bool = True):
        if isinstance(period, bool) or not isinstance(period, numbers.Integral):
            raise ConfigurationError(f"period must be a positive integer, got {period!r}")
        if period <= 0:
            raise ConfigurationError(f"period must be a positive integer, got {period}")
        self.period = int(period)
        self.loop = bool(loop)
        self.fired_once = False

    def __call__(self, iteration: int, ctx=None) -> bool:
        if iteration % self.period != 0:
            return False
        if self.loop:
            return True
        if self.fired_once:
            return False
        self.fired_once = True
        return True

    def __repr__(self) -> str:
        return f"IterationInterval(period={self.period}, loop={self.loop})"


class WallClockInterval:
    """Fires when more than ``duration`` of real time has passed since it last fired.

    The reference timestamp is taken at construction and reset on every
    firing. ``clock`` must return seconds; inject a fake one for tests.
    """

    def __init__(self, duration: float, unit: Union[TimeUnit, str] = "s",
                 clock: Callable[[], float] = time.monotonic):
        self.unit = TimeUnit.parse(unit)
        if isinstance(duration, bool) or not isinstance(duration, numbers.Real):
            raise ConfigurationError(f"duration must be a number, got {duration!r}")
        if not math.isfinite(duration):
            raise ConfigurationError(f"duration must be finite, got {duration}")
        if duration < 0:
            raise ConfigurationError(f"duration must be non-negative, got {duration}")
        self.duration = duration
        self.threshold_seconds = float(duration) * self.unit.value
        self._clock = clock
        self.last_fired = clock()

    def __call__(self, iteration: int = 0, ctx=None) -> bool:
        now = self._clock()
        if now - self.last_fired > self.threshold_seconds:
            logger.debug("wall-clock interval of %.3fs elapsed at iteration %d",
                         self.threshold_seconds, iteration)
            self.last_fired = now
            return True
        return False

    def __repr__(self) -> str:
        return f"WallClockInterval(duration={self.duration}, unit={self.unit.name.lower()})"
