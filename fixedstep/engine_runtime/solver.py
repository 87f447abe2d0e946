"""
Fixed-step solver loop.

Drives a step method across every interval of a TimeGrid and invokes one
root callback after each step. The loop is sequential, has no early exit and
always runs to the end of the grid.
"""
import logging
import time
from typing import Any, Callable, Optional

from ..core_numerics import IntegratorContext, RK4, TimeGrid, StateVector
from ..core_numerics.context import DerivativeFn
from ..integration.callbacks import no_op

logger = logging.getLogger(__name__)

RootCallback = Callable[[int, IntegratorContext], Any]


def solve(f: DerivativeFn, u0, grid: TimeGrid, step_method=None,
          root_callback: Optional[RootCallback] = None) -> StateVector:
    """Integrate ``f`` over ``grid`` starting from ``u0``.

    Args:
        f: Derivative evaluator ``f(du, u, t)`` writing into ``du``.
        u0: Initial state; copied, never mutated.
        grid: Uniform time grid. The run takes ``grid.num_steps`` steps.
        step_method: Object with ``step(ctx)``; defaults to RK4.
        root_callback: Called as ``root_callback(i, ctx)`` right after step
            ``i`` (1-based), once per step.

    Returns:
        The final state. Anything else is reachable through callback side
        effects, e.g. an ObservableRecorder.
    """
    method = RK4() if step_method is None else step_method
    callback = no_op if root_callback is None else root_callback

    ctx = IntegratorContext.create(f, u0, grid)
    points = grid.points
    n_steps = grid.num_steps

    logger.debug(f"Starting run: {n_steps} steps, dt={grid.dt:.6g}, method={method!r}")
    start_time = time.perf_counter()

    for i in range(1, n_steps + 1):
        method.step(ctx)
        # take t from the grid instead of accumulating dt
        ctx.t = float(points[i])
        ctx.iteration = i
        callback(i, ctx)

    elapsed = time.perf_counter() - start_time
    logger.info(f"Run completed: {n_steps} steps to t={ctx.t:.6g} in {elapsed:.3f} seconds")
    return ctx.u
