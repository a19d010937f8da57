# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

"""Ready-made termination predicates for solvers."""

import math

import numpy as np


def time_limit(t_end, rtol=1e-9):
    """Stop once the time component (slot 0) reaches ``t_end``.

    Accumulated step sizes rarely land on ``t_end`` exactly, so points
    within ``rtol * max(1, |t_end|)`` of it count as arrived.
    """
    if not math.isfinite(t_end):
        raise ValueError(f"t_end must be finite, got {t_end}")
    threshold = t_end - rtol * max(1.0, abs(t_end))

    def limit(point):
        return point[0] >= threshold

    return limit


def non_finite(point):
    """Stop once any component is NaN or infinite."""
    return not np.all(np.isfinite(point.to_numpy()))


def any_of(*limits):
    """Stop as soon as any of ``limits`` fires."""
    if not limits:
        raise ValueError("any_of needs at least one limit")

    def limit(point):
        return any(lim(point) for lim in limits)

    return limit
