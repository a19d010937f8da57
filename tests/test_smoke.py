# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

# tests/test_smoke.py
def test_import():
    from odestep.point import Point, point_of
    from odestep.solvers.base import Solver, SolverHooks
    from odestep.solvers.runge_kutta import RungeKuttaSolver
    from odestep.solvers.time_integrators import runge_kutta
