"""
Common error types and state-vector helpers shared across the engine.

Contains the configuration and lookup errors raised by constructors and
recorders, plus the helpers that decide how numpy and torch state vectors
are copied and allocated.
"""
import copy
from typing import Union

import numpy as np
import torch

StateVector = Union[np.ndarray, torch.Tensor]

_SCALARS = (type(None), bool, int, float, complex, str, bytes)


class ConfigurationError(ValueError):
    """Raised at construction time when a component is given invalid settings."""


class UnknownObservable(KeyError):
    """Raised when a recorder is asked for a name it was not built with."""

    def __init__(self, name: str, registered=()):
        self.name = name
        self.registered = tuple(registered)
        super().__init__(name)

    def __str__(self):
        known = ", ".join(repr(n) for n in self.registered) or "none"
        return f"unknown observable {self.name!r} (registered: {known})"


def as_state_vector(u0) -> StateVector:
    """Return a run-owned copy of ``u0``.

    Floating and complex dtypes are kept as given; integer and boolean
    states are promoted to float64. Torch tensors stay on their device.
    Everything else goes through numpy and becomes an array of at least one
    dimension.
    """
    if isinstance(u0, torch.Tensor):
        u = u0.detach()
        if not (u.is_floating_point() or u.is_complex()):
            return u.to(torch.float64)
        return u.clone()
    u = np.array(u0, copy=True, ndmin=1)
    if u.dtype.kind not in "fc":
        u = u.astype(np.float64)
    return u


def empty_like(u: StateVector) -> StateVector:
    """Allocate an uninitialised buffer with the shape, dtype and device of ``u``."""
    if isinstance(u, torch.Tensor):
        return torch.empty_like(u)
    return np.empty_like(u)


def detach_value(value):
    """Turn a sampled value into something that does not alias live state.

    Single-element arrays and tensors become Python scalars, larger ones are
    copied. Tuples, lists and dicts are rebuilt with their items detached;
    any other non-scalar object is deep-copied.
    """
    if isinstance(value, torch.Tensor):
        if value.numel() == 1:
            return value.item()
        return value.detach().cpu().numpy().copy()
    if isinstance(value, np.ndarray):
        if value.size == 1:
            return value.item()
        return value.copy()
    if isinstance(value, np.number):
        return value.item()
    if isinstance(value, _SCALARS):
        return value
    if isinstance(value, tuple):
        items = [detach_value(v) for v in value]
        # namedtuples take their fields positionally
        return type(value)(*items) if hasattr(value, "_fields") else tuple(items)
    if isinstance(value, list):
        return [detach_value(v) for v in value]
    if isinstance(value, dict):
        return {k: detach_value(v) for k, v in value.items()}
    return copy.deepcopy(value)
