#!/usr/bin/env python3
"""
Demonstration of the fixed-step engine with composed callbacks.

Integrates du/dt = -k u for several decay rates, records the state every
few iterations, logs progress from one-shot and periodic callbacks, and runs
the scan on a thread pool with fresh callback instances per run.
"""
import logging
import math
import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

from fixedstep import (
    Callback, CallbackGroup, IterationInterval, ObservableRecorder,
    load_config, scan, setup_logging, solve,
)
from fixedstep.integration import current_time, state_component

logger = logging.getLogger('fixedstep.demo')

CONFIG_PATH = os.path.join(os.path.dirname(__file__), '..', 'configs', 'default.yaml')


def make_run(cfg):
    def run(k: float):
        def decay(du, u, t):
            du[...] = u
            du *= -k

        recorder = ObservableRecorder({"t": current_time(), "u": state_component(0)})
        halfway = Callback(
            IterationInterval(cfg.num_points // 2, loop=False),
            lambda i, ctx: logger.info(f"k={k}: halfway at t={ctx.t:.3f}, u={ctx.u[0]:.4f}"),
        )
        root = CallbackGroup([Callback(IterationInterval(10), recorder), halfway, cfg.build_callbacks()])
        u = solve(decay, [5.0], cfg.build_grid(), cfg.build_step_method(), root)
        return k, float(u[0]), recorder
    return run


def main():
    cfg = load_config(CONFIG_PATH)
    setup_logging(cfg)

    rates = [0.5, 1.0, 2.0, 5.0]
    results = scan(make_run(cfg), rates, max_workers=2)

    print("k      u(T)        exact       samples")
    for k, u_final, recorder in results:
        exact = 5.0 * math.exp(-k * cfg.t_stop)
        print(f"{k:<6} {u_final:<11.6g} {exact:<11.6g} {len(recorder)}")


if __name__ == "__main__":
    main()
