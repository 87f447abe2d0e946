"""
Callback layer for connecting external logic to the solver loop.

This package contains:
- Callback / CallbackGroup, the condition + effect composition contract
- Stateful conditions (iteration and wall-clock intervals)
- Factory functions for extractors, effects and ready-made callbacks
"""

from .callbacks import Callback, CallbackGroup, no_op
from .conditions import IterationInterval, WallClockInterval, TimeUnit
from .hooks_core import (
    state_component,
    current_time,
    iteration_index,
    state_norm,
    periodic_callback,
    progress_effect_factory,
    throttled_progress_callback,
)

__all__ = [
    'Callback', 'CallbackGroup', 'no_op',
    'IterationInterval', 'WallClockInterval', 'TimeUnit',
    'state_component',
    'current_time',
    'iteration_index',
    'state_norm',
    'periodic_callback',
    'progress_effect_factory',
    'throttled_progress_callback',
]
