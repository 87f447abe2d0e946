"""
Fixed-spacing time discretization.

Contains TimeGrid, the immutable, strictly increasing and uniformly spaced
sequence of time points that drives a fixed-step run.
"""
import numpy as np
from typing import Iterator, Sequence

from .common import ConfigurationError


class TimeGrid:
    """Uniform time grid, read-only once built."""

    def __init__(self, points: Sequence[float], rtol: float = 1e-9):
        t = np.array(points, dtype=np.float64, copy=True)
        if t.ndim != 1 or t.size < 2:
            raise ConfigurationError("time grid needs at least two points")
        if not np.all(np.isfinite(t)):
            raise ConfigurationError("time grid points must be finite")

        steps = np.diff(t)
        if np.any(steps <= 0.0):
            raise ConfigurationError("time grid must be strictly increasing")

        dt = (t[-1] - t[0]) / (t.size - 1)
        # rounding of the points themselves scales with their magnitude, not with dt
        atol = 64 * np.finfo(np.float64).eps * max(abs(t[0]), abs(t[-1]))
        if not np.allclose(steps, dt, rtol=rtol, atol=atol):
            raise ConfigurationError(
                f"time grid must be uniformly spaced (spacing ranges "
                f"{steps.min():.6g}..{steps.max():.6g})"
            )

        t.flags.writeable = False
        self._points = t
        self._dt = float(dt)

    @classmethod
    def linspace(cls, start: float, stop: float, num_points: int) -> "TimeGrid":
        """Evenly spaced grid over [start, stop] with ``num_points`` points."""
        if isinstance(num_points, bool) or int(num_points) != num_points or num_points < 2:
            raise ConfigurationError(f"num_points must be an integer >= 2, got {num_points!r}")
        if not stop > start:
            raise ConfigurationError(f"stop ({stop}) must be greater than start ({start})")
        return cls(np.linspace(start, stop, int(num_points)))

    @property
    def points(self) -> np.ndarray:
        return self._points

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def start(self) -> float:
        return float(self._points[0])

    @property
    def stop(self) -> float:
        return float(self._points[-1])

    @property
    def num_steps(self) -> int:
        """Number of intervals, i.e. the number of steps a run takes."""
        return self._points.size - 1

    def __len__(self) -> int:
        return self._points.size

    def __getitem__(self, index):
        return self._points[index]

    def __iter__(self) -> Iterator[float]:
        return (float(t) for t in self._points)

    def __repr__(self) -> str:
        return f"TimeGrid(start={self.start}, stop={self.stop}, points={len(self)}, dt={self.dt:.6g})"
