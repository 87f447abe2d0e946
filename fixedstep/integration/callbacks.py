# fixedstep/integration/callbacks.py
from __future__ import annotations
from typing import Any, Callable, Iterable, Iterator, Optional, Tuple

from ..core_numerics.common import ConfigurationError

# condition(iteration, ctx) -> bool ; effect(iteration, ctx) -> None
Condition = Callable[[int, Any], bool]
Effect = Callable[[int, Any], Any]


def no_op(iteration: int, ctx):
    """Root callback that does nothing and hands the context back."""
    return ctx


class Callback:
    """
    Condition + effect pair invoked after every solver step.
      - condition decides, effect mutates
      - invocation always returns the context it was given
    A ``None`` condition means always-true.
    """
    def __init__(self, condition: Optional[Condition], effect: Effect):
        if condition is not None and not callable(condition):
            raise ConfigurationError(f"callback condition must be callable, got {type(condition).__name__}")
        if not callable(effect):
            raise ConfigurationError(f"callback effect must be callable, got {type(effect).__name__}")
        self.condition = condition
        self.effect = effect

    def __call__(self, iteration: int, ctx):
        if self.condition is None or self.condition(iteration, ctx):
            self.effect(iteration, ctx)
        return ctx

    def __repr__(self) -> str:
        return f"Callback(condition={self.condition!r}, effect={self.effect!r})"


class CallbackGroup:
    """
    Ordered composite of callback-like members; a group is itself callback-like,
    so groups nest inside groups and can be passed as the solver's root callback.
    """
    def __init__(self, members: Iterable[Callable[[int, Any], Any]] = ()):
        members = tuple(members)
        for i, m in enumerate(members):
            if not callable(m):
                raise ConfigurationError(f"group member {i} is not callable: {m!r}")
        self._members: Tuple[Callable[[int, Any], Any], ...] = members

    def __call__(self, iteration: int, ctx):
        for member in self._members:
            member(iteration, ctx)
        return ctx

    def __getitem__(self, index):
        return self._members[index]

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[Callable[[int, Any], Any]]:
        return iter(self._members)

    def __repr__(self) -> str:
        return f"CallbackGroup({list(self._members)!r})"
