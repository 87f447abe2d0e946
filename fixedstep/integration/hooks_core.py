# fixedstep/integration/hooks_core.py
from __future__ import annotations
from typing import Any, Callable, Optional, Union
import logging
import time

import numpy as np
import torch

from .callbacks import Callback
from .conditions import IterationInterval, TimeUnit, WallClockInterval

logger = logging.getLogger(__name__)


# --- extractors: (iteration, ctx) -> value ---

def state_component(index) -> Callable[[int, Any], Any]:
    def _extract(iteration: int, ctx):
        return ctx.u[index]
    return _extract

def current_time() -> Callable[[int, Any], float]:
    def _extract(iteration: int, ctx) -> float:
        return float(ctx.t)
    return _extract

def iteration_index() -> Callable[[int, Any], int]:
    def _extract(iteration: int, ctx) -> int:
        return int(iteration)
    return _extract

def state_norm() -> Callable[[int, Any], float]:
    def _extract(iteration: int, ctx) -> float:
        u = ctx.u
        if isinstance(u, torch.Tensor):
            return float(torch.linalg.vector_norm(u).item())
        return float(np.linalg.norm(u))
    return _extract


# --- effects and ready-made callbacks ---

def periodic_callback(period: int, effect: Callable[[int, Any], Any], loop: bool = True) -> Callback:
    """Run ``effect`` every ``period`` iterations (once, if ``loop`` is False)."""
    return Callback(IterationInterval(period, loop=loop), effect)

def progress_effect_factory(log: Optional[logging.Logger] = None, level: int = logging.INFO):
    """Effect logging iteration, time and state norm at ``level``."""
    log = log or logger
    norm = state_norm()
    def _progress(iteration: int, ctx) -> None:
        n_steps = ctx.grid.num_steps
        log.log(level, f"Step {iteration:6d}/{n_steps}: t={ctx.t:.4g}, |u|={norm(iteration, ctx):.4e}")
    return _progress

def throttled_progress_callback(duration: float, unit: Union[TimeUnit, str] = "s",
                                clock: Callable[[], float] = time.monotonic,
                                log: Optional[logging.Logger] = None) -> Callback:
    """Progress logging at most once per ``duration`` of wall-clock time."""
    return Callback(WallClockInterval(duration, unit, clock=clock), progress_effect_factory(log))
