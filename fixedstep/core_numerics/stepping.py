"""
Fixed-step explicit schemes.

Step methods advance an IntegratorContext by exactly one grid interval using
only the scratch buffers the context already owns. All arithmetic is done
with slice assignment and augmented operators so numpy arrays and torch
tensors are both updated without allocating.
"""
from typing import Dict, Type

from .common import ConfigurationError
from .context import IntegratorContext


class RK4:
    """Classical four-stage Runge-Kutta with weights (1, 2, 2, 1)/6.

    Each step performs four derivative evaluations. Non-finite values coming
    out of the derivative function are propagated, not detected.
    """

    name = "rk4"
    evaluations_per_step = 4

    def step(self, ctx: IntegratorContext) -> None:
        f, u, t, dt = ctx.f, ctx.u, ctx.t, ctx.dt
        k1, k2, k3, k4, tmp = ctx.k1, ctx.k2, ctx.k3, ctx.k4, ctx.tmp
        half = 0.5 * dt

        f(k1, u, t)

        # tmp = u + dt/2 * k1
        tmp[...] = k1
        tmp *= half
        tmp += u
        f(k2, tmp, t + half)

        tmp[...] = k2
        tmp *= half
        tmp += u
        f(k3, tmp, t + half)

        tmp[...] = k3
        tmp *= dt
        tmp += u
        f(k4, tmp, t + dt)

        # u += dt/6 * (k1 + 2 k2 + 2 k3 + k4), accumulated in tmp
        tmp[...] = k2
        tmp += k3
        tmp *= 2.0
        tmp += k1
        tmp += k4
        tmp *= dt / 6.0
        u += tmp

    def __repr__(self) -> str:
        return "RK4()"


class ExplicitEuler:
    """Forward Euler; one derivative evaluation per step, uses ``k1`` only."""

    name = "euler"
    evaluations_per_step = 1

    def step(self, ctx: IntegratorContext) -> None:
        k1 = ctx.k1
        ctx.f(k1, ctx.u, ctx.t)
        k1 *= ctx.dt
        ctx.u += k1

    def __repr__(self) -> str:
        return "ExplicitEuler()"


_STEP_METHODS: Dict[str, Type] = {
    RK4.name: RK4,
    ExplicitEuler.name: ExplicitEuler,
}


def resolve_step_method(name: str):
    """Return a fresh step method instance for ``name`` ("rk4" or "euler")."""
    try:
        return _STEP_METHODS[str(name).lower()]()
    except KeyError:
        raise ConfigurationError(
            f"unknown step method {name!r}, expected one of {sorted(_STEP_METHODS)}"
        ) from None
