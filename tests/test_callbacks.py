"""Tests for the callback composition contract."""

import numpy as np
import pytest

from fixedstep.core_numerics import ConfigurationError, IntegratorContext, TimeGrid
from fixedstep.integration import Callback, CallbackGroup, no_op


def zero_derivative(du, u, t):
    du[...] = 0.0


def make_context():
    ctx = IntegratorContext.create(zero_derivative, [1.0, 2.0, 3.0], TimeGrid.linspace(0.0, 1.0, 11))
    for buf in (ctx.k1, ctx.k2, ctx.k3, ctx.k4, ctx.tmp):
        buf[...] = 0.0
    return ctx


def snapshot(ctx):
    arrays = (ctx.u, ctx.k1, ctx.k2, ctx.k3, ctx.k4, ctx.tmp)
    return tuple(a.tobytes() for a in arrays) + (ctx.t, ctx.iteration)


def never(i, ctx):
    return False


def always(i, ctx):
    return True


def bump(i, ctx):
    ctx.u += 1.0


class TestCallback:
    """Test a single condition + effect pair."""

    def test_effect_runs_when_condition_true(self):
        ctx = make_context()
        out = Callback(always, bump)(1, ctx)
        assert out is ctx
        np.testing.assert_array_equal(ctx.u, [2.0, 3.0, 4.0])

    def test_effect_skipped_when_condition_false(self):
        ctx = make_context()
        before = snapshot(ctx)
        out = Callback(never, bump)(1, ctx)
        assert out is ctx
        assert snapshot(ctx) == before

    def test_none_condition_is_always_true(self):
        ctx = make_context()
        Callback(None, bump)(1, ctx)
        assert ctx.u[0] == 2.0

    def test_condition_sees_iteration(self):
        seen = []

        def cond(i, ctx):
            seen.append(i)
            return i == 2

        ctx = make_context()
        cb = Callback(cond, bump)
        for i in (1, 2, 3):
            cb(i, ctx)
        assert seen == [1, 2, 3]
        assert ctx.u[0] == 2.0

    def test_effect_return_value_ignored(self):
        ctx = make_context()
        assert Callback(always, lambda i, c: "something else")(1, ctx) is ctx

    def test_rejects_non_callables(self):
        with pytest.raises(ConfigurationError):
            Callback(True, bump)
        with pytest.raises(ConfigurationError):
            Callback(always, None)


class TestCallbackGroup:
    """Test ordered composition of callbacks."""

    def test_all_false_leaves_context_unchanged(self):
        ctx = make_context()
        before = snapshot(ctx)
        group = CallbackGroup([Callback(never, bump) for _ in range(5)])
        assert group(3, ctx) is ctx
        assert snapshot(ctx) == before

    def test_single_true_member_applies_once(self):
        ctx = make_context()
        group = CallbackGroup([Callback(never, bump), Callback(always, bump), Callback(never, bump)])
        group(1, ctx)
        np.testing.assert_array_equal(ctx.u, [2.0, 3.0, 4.0])
        group(2, ctx)
        np.testing.assert_array_equal(ctx.u, [3.0, 4.0, 5.0])

    def test_members_run_in_order(self):
        order = []
        group = CallbackGroup([
            Callback(always, lambda i, c: order.append("a")),
            Callback(always, lambda i, c: order.append("b")),
            Callback(always, lambda i, c: order.append("c")),
        ])
        group(1, make_context())
        assert order == ["a", "b", "c"]

    def test_same_context_threaded_through(self):
        seen = []
        ctx = make_context()
        group = CallbackGroup([Callback(always, lambda i, c: seen.append(c)) for _ in range(3)])
        group(1, ctx)
        assert all(c is ctx for c in seen)

    def test_nested_groups(self):
        order = []

        def tag(name):
            return Callback(always, lambda i, c: order.append(name))

        inner = CallbackGroup([tag("inner-1"), tag("inner-2")])
        outer = CallbackGroup([tag("first"), inner, CallbackGroup([CallbackGroup([tag("deep")])]), tag("last")])
        ctx = make_context()
        assert outer(1, ctx) is ctx
        assert order == ["first", "inner-1", "inner-2", "deep", "last"]

    def test_plain_callables_allowed(self):
        ctx = make_context()
        CallbackGroup([no_op, lambda i, c: bump(i, c)])(1, ctx)
        assert ctx.u[0] == 2.0

    def test_indexed_access_and_length(self):
        a, b = Callback(always, bump), Callback(never, bump)
        group = CallbackGroup([a, b])
        assert len(group) == 2
        assert group[0] is a
        assert group[-1] is b
        assert list(group) == [a, b]

    def test_members_are_read_only(self):
        group = CallbackGroup([no_op])
        with pytest.raises(TypeError):
            group[0] = no_op

    def test_group_does_not_track_source_list(self):
        members = [Callback(always, bump)]
        group = CallbackGroup(members)
        members.append(Callback(always, bump))
        assert len(group) == 1

    def test_empty_group(self):
        ctx = make_context()
        before = snapshot(ctx)
        assert CallbackGroup()(1, ctx) is ctx
        assert snapshot(ctx) == before

    def test_rejects_non_callable_member(self):
        with pytest.raises(ConfigurationError):
            CallbackGroup([no_op, 42])


class TestNoOp:
    """Test the default root callback."""

    def test_returns_context(self):
        ctx = make_context()
        before = snapshot(ctx)
        assert no_op(1, ctx) is ctx
        assert snapshot(ctx) == before


if __name__ == "__main__":
    pytest.main([__file__])
