# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

"""Command-line interface for RK4 integration of the bundled models."""

import argparse
import math

from odestep.limits import any_of, non_finite, time_limit
from odestep.models.exponential import ExponentialModel
from odestep.models.harmonic import HarmonicOscillatorModel
from odestep.point import Point
from odestep.run_utils import configure_logging, print_trajectory_table
from odestep.solvers.runge_kutta import integrate

MODELS = {
    "exponential": (ExponentialModel, ["t", "y"]),
    "harmonic": (HarmonicOscillatorModel, ["t", "x", "v"]),
}


def build_model(args):
    """Build the model selected on the command line."""
    if args.model == "exponential":
        params = {"rate": args.rate}
        if args.y0:
            params["y0"] = args.y0[0]
    else:
        params = {"omega": args.omega}
        if args.y0:
            params["x0"] = args.y0[0]
            if len(args.y0) > 1:
                params["v0"] = args.y0[1]
    model_cls, labels = MODELS[args.model]
    if args.y0 and len(args.y0) > len(labels) - 1:
        raise ValueError(
            f"--y0 takes at most {len(labels) - 1} values for the {args.model} model, "
            f"got {len(args.y0)}"
        )
    return model_cls(params)


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="odestep-run",
        description="Integrate a sample ODE with the classical Runge-Kutta method.",
    )
    parser.add_argument(
        "--model", type=str, default="exponential", choices=sorted(MODELS),
        help="Model to integrate (default: exponential)",
    )
    parser.add_argument(
        "--rate", type=float, default=1.0,
        help="Growth rate of the exponential model (default: 1.0)",
    )
    parser.add_argument(
        "--omega", type=float, default=1.0,
        help="Angular frequency of the harmonic model (default: 1.0)",
    )
    parser.add_argument(
        "--y0", nargs="+", type=float, default=None,
        help="Initial state values, excluding time (default: model defaults)",
    )
    parser.add_argument(
        "--t-end", type=float, default=1.0,
        help="Final time (default: 1.0)",
    )
    parser.add_argument(
        "--dt", type=float, default=0.1,
        help="Step size (default: 0.1)",
    )
    parser.add_argument(
        "--log-level", type=str, default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    parser.add_argument(
        "--log-file", type=str, default=None,
        help="Also write the log to this file",
    )
    parser.add_argument(
        "--no-progress", action="store_true",
        help="Disable the progress bar",
    )

    args = parser.parse_args(argv)
    if not math.isfinite(args.dt) or args.dt <= 0:
        parser.error(f"--dt must be positive and finite, got {args.dt}")
    if not math.isfinite(args.t_end):
        parser.error(f"--t-end must be finite, got {args.t_end}")

    configure_logging(args.log_level, args.log_file)

    try:
        model = build_model(args)
    except ValueError as exc:
        parser.error(str(exc))
    _, labels = MODELS[args.model]

    initial = model.get_initial_condition()
    limit = any_of(time_limit(args.t_end), non_finite)
    trajectory = integrate(initial, model, limit, args.dt,
                           progress=not args.no_progress)

    print(f"Model: {args.model}, dt={args.dt}, t_end={args.t_end}")
    print()
    print_trajectory_table(trajectory, labels)

    final = trajectory[-1]
    exact = model.exact_solution(final[0])
    error = Point(final.to_numpy()[1:]) - Point(exact.to_numpy()[1:])
    print(f"\nSteps: {len(trajectory) - 1}")
    print(f"Max abs error vs exact solution: {max(abs(e) for e in error):.3e}")
    return 0
