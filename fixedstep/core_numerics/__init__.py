"""
Core numerics for fixed-step time integration.

This package contains the numeric building blocks that the runtime drives:
state-vector helpers, the uniform time grid, the per-run integrator context
and the explicit step methods.
"""

# Errors and state helpers
from .common import ConfigurationError, UnknownObservable, StateVector, as_state_vector, detach_value

# Time discretization
from .grid import TimeGrid

# Per-run context
from .context import IntegratorContext, DerivativeFn

# Step methods
from .stepping import RK4, ExplicitEuler, resolve_step_method

__all__ = [
    # Errors / state
    'ConfigurationError', 'UnknownObservable', 'StateVector', 'as_state_vector', 'detach_value',
    # Grid
    'TimeGrid',
    # Context
    'IntegratorContext', 'DerivativeFn',
    # Stepping
    'RK4', 'ExplicitEuler', 'resolve_step_method',
]
