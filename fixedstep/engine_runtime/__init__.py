"""
Engine runtime components for driving and observing runs.

This package contains the solver loop, the observable recorder, run
configuration and parameter scans, separated from the pure numerics in
core_numerics.
"""

from .recorder import ObservableRecorder
from .solver import solve
from .config import RunConfig, load_config
from .scan import scan

__all__ = ['ObservableRecorder', 'solve', 'RunConfig', 'load_config', 'scan']
