# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

import logging

from odestep.solvers.base import Solver
from odestep.solvers.time_integrators import runge_kutta

logger = logging.getLogger(__name__)


class RungeKuttaSolver(Solver):
    """Solver with the classical RK4 step as its method.

    Counts completed steps in ``steps``.  Before each step the step index
    and every component of the current point are logged at DEBUG; after
    the run the total is logged at INFO.  Pass ``logger`` to redirect the
    diagnostics (e.g. a logger with a NullHandler to silence them).
    """

    def __init__(self, initial_point, limit, step_size, differential,
                 hooks=None, logger=None):
        super().__init__(initial_point, limit, step_size, differential,
                         method=runge_kutta, hooks=hooks)
        self.steps = 0
        self.logger = logger if logger is not None else logging.getLogger(__name__)

    def pre_step(self):
        if self.logger.isEnabledFor(logging.DEBUG):
            components = " ".join(
                f"point[{i}]={value!r}"
                for i, value in enumerate(self.current_step_point)
            )
            self.logger.debug("step %d: %s", self.steps, components)
        super().pre_step()

    def post_step(self):
        self.steps += 1
        super().post_step()

    def post_solve(self):
        self.logger.info(
            "Solving the differential equations has ended. Number of steps taken: %d",
            self.steps,
        )
        super().post_solve()


def integrate(initial_point, differential, limit, step_size, hooks=None,
              progress=False):
    """Integrate with RK4 until ``limit`` fires.

    Args:
        initial_point: starting Point (component 0 is time).
        differential: callable(Point) -> Point.
        limit: callable(Point) -> bool, True stops the run.
        step_size: positive step size.
        hooks: optional SolverHooks.
        progress: show a tqdm step counter if tqdm is available.

    Returns:
        list of Points, starting with a copy of ``initial_point``.
    """
    solver = RungeKuttaSolver(initial_point, limit, step_size, differential,
                              hooks=hooks)

    # Soft import of tqdm
    bar = None
    if progress:
        try:
            from tqdm.auto import tqdm
            bar = tqdm(desc="Integrate", unit="step")
        except ImportError:
            pass

    trajectory = [initial_point.copy()]
    try:
        for point in solver.evaluate():
            trajectory.append(point)
            if bar is not None:
                bar.update(1)
    finally:
        if bar is not None:
            bar.close()

    logger.debug("Trajectory has %d points", len(trajectory))
    return trajectory
