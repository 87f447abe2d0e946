"""
Observable recording for solver runs.

Provides ObservableRecorder, an effect that samples a fixed set of named
extraction functions against the integrator context and keeps one growing
time series per name.
"""
import logging
from typing import Any, Callable, Dict, List, Mapping

import numpy as np

from ..core_numerics.common import ConfigurationError, UnknownObservable, detach_value

logger = logging.getLogger(__name__)

Extractor = Callable[[int, Any], Any]


class ObservableRecorder:
    """Effect that appends one sample per registered observable on every call."""

    def __init__(self, observables: Mapping[str, Extractor]):
        if not observables:
            raise ConfigurationError("recorder needs at least one observable")
        extractors: Dict[str, Extractor] = {}
        for name, fn in observables.items():
            if not callable(fn):
                raise ConfigurationError(f"extractor for {name!r} is not callable")
            extractors[str(name)] = fn
        self._extractors = extractors
        self._series: Dict[str, List[Any]] = {name: [] for name in extractors}

    def __call__(self, iteration: int, ctx) -> None:
        """Sample every extractor, in registration order."""
        for name, fn in self._extractors.items():
            self._series[name].append(detach_value(fn(iteration, ctx)))

    @property
    def names(self) -> List[str]:
        return list(self._extractors)

    def get(self, name: str) -> List[Any]:
        """Return a copy of the recorded sequence for ``name``.

        Changing the returned list does not touch the recorder.
        """
        try:
            return list(self._series[name])
        except KeyError:
            raise UnknownObservable(name, self._extractors) from None

    __getitem__ = get

    def __contains__(self, name) -> bool:
        return name in self._series

    def __len__(self) -> int:
        """Number of samples taken so far (identical for every name)."""
        first = next(iter(self._series.values()))
        return len(first)

    def as_array(self, name: str) -> np.ndarray:
        """Recorded sequence for ``name`` stacked into a numpy array."""
        values = self.get(name)
        if not values:
            return np.empty((0,))
        return np.asarray(values)

    def clear(self):
        """Drop all samples, keep the registered observables."""
        for values in self._series.values():
            values.clear()

    def summary(self) -> Dict[str, Any]:
        """Get summary statistics of the recorded data."""
        summary = {
            'sample_count': len(self),
            'observables': self.names,
        }

        summary['numeric_stats'] = {}
        for name, values in self._series.items():
            if values and all(isinstance(v, (int, float)) and not isinstance(v, bool) for v in values):
                summary['numeric_stats'][name] = {
                    'count': len(values),
                    'mean': float(np.mean(values)),
                    'std': float(np.std(values)),
                    'min': float(np.min(values)),
                    'max': float(np.max(values)),
                }
            elif values:
                logger.debug(f"Skipping non-scalar observable {name!r} in summary")

        return summary

    def __repr__(self) -> str:
        return f"ObservableRecorder(names={self.names}, samples={len(self)})"
