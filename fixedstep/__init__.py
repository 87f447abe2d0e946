"""
Fixed-step time integration with composable step callbacks.

Typical use::

    from fixedstep import solve, TimeGrid, ObservableRecorder, Callback

    def decay(du, u, t):
        du[:] = -5.0 * u

    rec = ObservableRecorder({"u": lambda i, ctx: ctx.u[0]})
    u_final = solve(decay, [5.0], TimeGrid.linspace(0.0, 1.0, 100), root_callback=rec)
"""

from .core_numerics import (
    ConfigurationError, UnknownObservable,
    TimeGrid, IntegratorContext,
    RK4, ExplicitEuler, resolve_step_method,
)
from .integration import (
    Callback, CallbackGroup, no_op,
    IterationInterval, WallClockInterval, TimeUnit,
)
from .engine_runtime import ObservableRecorder, solve, RunConfig, load_config, scan
from .observability import setup_logging

__version__ = "1.0.0"

__all__ = [
    # Errors
    'ConfigurationError', 'UnknownObservable',
    # Numerics
    'TimeGrid', 'IntegratorContext', 'RK4', 'ExplicitEuler', 'resolve_step_method',
    # Callbacks
    'Callback', 'CallbackGroup', 'no_op',
    'IterationInterval', 'WallClockInterval', 'TimeUnit',
    # Runtime
    'ObservableRecorder', 'solve', 'RunConfig', 'load_config', 'scan',
    # Observability
    'setup_logging',
]
