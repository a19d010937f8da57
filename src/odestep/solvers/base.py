# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

"""Generic step-by-step solver driving a Method until a Limit fires."""

import math
from dataclasses import dataclass
from typing import Callable, Optional

from odestep.errors import DimensionMismatchError
from odestep.point import Point

Differential = Callable[[Point], Point]
Limit = Callable[[Point], bool]
Method = Callable[[Point, float, Differential], Point]
Hook = Callable[["Solver"], None]


@dataclass
class SolverHooks:
    """Optional callbacks run around a solve and around each step.

    Each callback receives the solver.  Missing callbacks are no-ops.
    """

    on_pre_solve: Optional[Hook] = None
    on_post_solve: Optional[Hook] = None
    on_pre_step: Optional[Hook] = None
    on_post_step: Optional[Hook] = None


class Solver:
    """Iterator advancing a Point with ``method`` until ``limit`` is true.

    Usage:
        solver = Solver(y0, limit, 0.1, f, method=runge_kutta)
        for point in solver.evaluate():
            ...

    ``next(solver)`` takes a single step and raises ``StopIteration`` once
    the limit holds for the current point.  ``evaluate()`` runs
    ``pre_solve`` immediately and returns a generator over the remaining
    trajectory; ``post_solve`` runs after the generator is exhausted.

    Subclasses may override the four hook methods; callers may instead
    pass a ``SolverHooks``.  Hooks must not touch the stepping state.
    """

    def __init__(self, initial_point: Point, limit: Limit, step_size: float,
                 differential: Differential, method: Method,
                 hooks: Optional[SolverHooks] = None):
        if not isinstance(initial_point, Point):
            raise ValueError(
                f"initial_point must be a Point, got {type(initial_point).__name__}"
            )
        step_size = float(step_size)
        if not math.isfinite(step_size) or step_size <= 0:
            raise ValueError(f"step_size must be positive and finite, got {step_size}")

        self.current_step_point = initial_point.copy()
        self._limit = limit
        self._step_size = step_size
        self._differential = differential
        self._method = method
        self.hooks = hooks if hooks is not None else SolverHooks()
        self._dimension = initial_point.dimension

    @property
    def limit(self):
        return self._limit

    @property
    def step_size(self):
        return self._step_size

    @property
    def differential(self):
        return self._differential

    @property
    def method(self):
        return self._method

    @property
    def dimension(self):
        return self._dimension

    def has_next(self):
        return not self._limit(self.current_step_point)

    def __iter__(self):
        return self

    def __next__(self):
        if not self.has_next():
            raise StopIteration
        return self._step()

    def _step(self):
        self.pre_step()
        new_point = self._method(self.current_step_point, self._step_size, self._differential)
        if new_point.dimension != self._dimension:
            raise DimensionMismatchError(self._dimension, new_point.dimension)
        self.current_step_point = new_point
        self.post_step()
        return self.current_step_point.copy()

    def evaluate(self):
        """Run ``pre_solve`` and return a generator over the trajectory."""
        self.pre_solve()
        return self._trajectory()

    def _trajectory(self):
        while self.has_next():
            yield self._step()
        self.post_solve()

    def _run_hook(self, hook):
        if hook is not None:
            hook(self)

    def pre_solve(self):
        self._run_hook(self.hooks.on_pre_solve)

    def post_solve(self):
        self._run_hook(self.hooks.on_post_solve)

    def pre_step(self):
        self._run_hook(self.hooks.on_pre_step)

    def post_step(self):
        self._run_hook(self.hooks.on_post_step)
