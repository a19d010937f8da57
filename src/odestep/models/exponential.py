# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

import math

from odestep.models.base import ODEModel
from odestep.point import point_of


class ExponentialModel(ODEModel):
    """Exponential growth/decay dy/dt = rate * y.

    State: [t, y].  Params: rate (default 1.0), y0 (default 1.0).
    """

    def __init__(self, params=None):
        super().__init__(params)
        self.rate = float(self.params.get("rate", 1.0))
        self.y0 = float(self.params.get("y0", 1.0))
        if not math.isfinite(self.rate):
            raise ValueError(f"rate must be finite, got {self.rate}")

    def rhs(self, point):
        return point_of(0.0, self.rate * point[1])

    def get_initial_condition(self):
        return point_of(0.0, self.y0)

    def exact_solution(self, t):
        return point_of(t, self.y0 * math.exp(self.rate * t))
