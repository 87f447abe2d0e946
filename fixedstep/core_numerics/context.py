"""
Integrator context: everything one run owns while it steps.

The context aggregates the current state, time, grid and the scratch buffers
used by the step methods. It is created by the solver for a single run and
handed to every callback after each step.
"""
from dataclasses import dataclass
from typing import Callable

from .common import StateVector, as_state_vector, empty_like
from .grid import TimeGrid

# f(du, u, t) writes the time derivative of u into du
DerivativeFn = Callable[[StateVector, StateVector, float], None]


@dataclass(eq=False)
class IntegratorContext:
    """Mutable per-run state handed to step methods and callbacks.

    Attributes:
        f: Derivative evaluator ``f(du, u, t)`` writing into ``du`` in place.
        u: Current state, owned by the run and updated in place.
        t: Current time.
        grid: Time grid of the run.
        k1, k2, k3, k4: Stage derivative buffers, same shape as ``u``.
        tmp: Stage state buffer, same shape as ``u``.
        iteration: Index of the step that produced the current state
            (0 before the first step).
    """
    f: DerivativeFn
    u: StateVector
    t: float
    grid: TimeGrid
    k1: StateVector
    k2: StateVector
    k3: StateVector
    k4: StateVector
    tmp: StateVector
    iteration: int = 0

    @classmethod
    def create(cls, f: DerivativeFn, u0, grid: TimeGrid) -> "IntegratorContext":
        """Copy ``u0`` and allocate scratch once for the whole run."""
        u = as_state_vector(u0)
        return cls(
            f=f, u=u, t=grid.start, grid=grid,
            k1=empty_like(u), k2=empty_like(u), k3=empty_like(u), k4=empty_like(u),
            tmp=empty_like(u),
        )

    @property
    def dt(self) -> float:
        return self.grid.dt
