# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

# tests/test_solver.py
import pytest

from odestep.errors import DimensionMismatchError
from odestep.point import point_of
from odestep.solvers.base import Solver, SolverHooks


def euler(point, step_size, differential):
    result = point + differential(point) * step_size
    result[0] = result[0] + step_size
    return result


def _counting_hooks():
    counts = {"pre_solve": 0, "post_solve": 0, "pre_step": 0, "post_step": 0}

    def bump(name):
        def hook(solver):
            counts[name] += 1
        return hook

    hooks = SolverHooks(
        on_pre_solve=bump("pre_solve"),
        on_post_solve=bump("post_solve"),
        on_pre_step=bump("pre_step"),
        on_post_step=bump("post_step"),
    )
    return hooks, counts


def _unit_slope(p):
    return point_of(0.0, 1.0)


def _stop_at(n):
    return lambda p: p[0] >= n - 1e-9


def test_immediate_limit_gives_empty_run():
    hooks, counts = _counting_hooks()
    solver = Solver(point_of(0.0, 1.0), lambda p: True, 0.1, _unit_slope,
                    method=euler, hooks=hooks)
    assert not solver.has_next()
    assert list(solver.evaluate()) == []
    assert counts["pre_solve"] == 1
    assert counts["post_solve"] == 1
    assert counts["pre_step"] == 0


def test_pre_solve_runs_before_iteration():
    hooks, counts = _counting_hooks()
    solver = Solver(point_of(0.0, 0.0), _stop_at(3), 1.0, _unit_slope,
                    method=euler, hooks=hooks)
    trajectory = solver.evaluate()
    assert counts["pre_solve"] == 1
    assert counts["post_solve"] == 0
    points = list(trajectory)
    assert counts["post_solve"] == 1
    assert len(points) == 3


def test_full_trajectory_in_order():
    solver = Solver(point_of(0.0, 0.0), _stop_at(4), 1.0, _unit_slope, method=euler)
    points = list(solver.evaluate())
    assert [p[0] for p in points] == [1.0, 2.0, 3.0, 4.0]
    assert [p[1] for p in points] == [1.0, 2.0, 3.0, 4.0]
    assert not solver.has_next()


def test_step_hooks_run_once_per_step():
    hooks, counts = _counting_hooks()
    solver = Solver(point_of(0.0, 0.0), _stop_at(5), 1.0, _unit_slope,
                    method=euler, hooks=hooks)
    points = list(solver.evaluate())
    assert len(points) == 5
    assert counts["pre_step"] == counts["post_step"] == 5


def test_next_after_exhaustion_raises():
    solver = Solver(point_of(0.0, 0.0), _stop_at(1), 1.0, _unit_slope, method=euler)
    assert next(solver) == point_of(1.0, 1.0)
    with pytest.raises(StopIteration):
        next(solver)


def test_has_next_does_not_mutate():
    solver = Solver(point_of(0.0, 0.0), _stop_at(2), 1.0, _unit_slope, method=euler)
    before = solver.current_step_point.copy()
    for _ in range(3):
        assert solver.has_next()
    assert solver.current_step_point == before


def test_initial_point_not_aliased():
    start = point_of(0.0, 0.0)
    solver = Solver(start, _stop_at(2), 1.0, _unit_slope, method=euler)
    list(solver.evaluate())
    assert start == point_of(0.0, 0.0)


def test_returned_points_do_not_alias_state():
    solver = Solver(point_of(0.0, 0.0), _stop_at(3), 1.0, _unit_slope, method=euler)
    p = next(solver)
    p[1] = 1000.0
    assert solver.current_step_point[1] == 1.0


def test_hooks_see_current_point():
    seen = []
    hooks = SolverHooks(on_pre_step=lambda s: seen.append(s.current_step_point[0]))
    solver = Solver(point_of(0.0, 0.0), _stop_at(3), 1.0, _unit_slope,
                    method=euler, hooks=hooks)
    list(solver.evaluate())
    assert seen == [0.0, 1.0, 2.0]


def test_subclass_hook_override():
    class Counting(Solver):
        def __init__(self, *args, **kwargs):
            super().__init__(*args, **kwargs)
            self.n = 0

        def post_step(self):
            self.n += 1

    solver = Counting(point_of(0.0, 0.0), _stop_at(3), 1.0, _unit_slope, method=euler)
    assert len(list(solver.evaluate())) == 3
    assert solver.n == 3


def test_method_changing_dimension_raises():
    def bad_method(point, step_size, differential):
        return point_of(0.0, 1.0, 2.0)

    solver = Solver(point_of(0.0, 0.0), _stop_at(3), 1.0, _unit_slope, method=bad_method)
    with pytest.raises(DimensionMismatchError):
        next(solver)


def test_differential_errors_propagate():
    def broken(p):
        raise RuntimeError("boom")

    solver = Solver(point_of(0.0, 0.0), _stop_at(3), 1.0, broken, method=euler)
    with pytest.raises(RuntimeError, match="boom"):
        list(solver.evaluate())


@pytest.mark.parametrize("step_size", [0.0, -0.1, float("nan"), float("inf")])
def test_rejects_bad_step_size(step_size):
    with pytest.raises(ValueError):
        Solver(point_of(0.0, 0.0), _stop_at(1), step_size, _unit_slope, method=euler)


def test_rejects_non_point_initial_value():
    with pytest.raises(ValueError):
        Solver([0.0, 0.0], _stop_at(1), 0.1, _unit_slope, method=euler)


def test_fields_are_read_only():
    solver = Solver(point_of(0.0, 0.0), _stop_at(1), 0.5, _unit_slope, method=euler)
    assert solver.step_size == 0.5
    assert solver.method is euler
    assert solver.dimension == 2
    with pytest.raises(AttributeError):
        solver.step_size = 1.0


def test_limit_queried_once_per_step():
    calls = []

    def limit(p):
        calls.append(p[0])
        return p[0] >= 3 - 1e-9

    solver = Solver(point_of(0.0, 0.0), limit, 1.0, _unit_slope, method=euler)
    assert len(list(solver.evaluate())) == 3
    # One query per step plus the final one that ends the run
    assert calls == [0.0, 1.0, 2.0, 3.0]
