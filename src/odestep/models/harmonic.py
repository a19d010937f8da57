# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

import math

from odestep.models.base import ODEModel
from odestep.point import point_of


class HarmonicOscillatorModel(ODEModel):
    """Undamped oscillator x'' = -omega^2 x as a first-order system.

        dx/dt = v
        dv/dt = -omega^2 * x

    State: [t, x, v].  Params: omega (> 0, default 1.0), x0 (default 1.0),
    v0 (default 0.0).
    """

    def __init__(self, params=None):
        super().__init__(params)
        self.omega = float(self.params.get("omega", 1.0))
        self.x0 = float(self.params.get("x0", 1.0))
        self.v0 = float(self.params.get("v0", 0.0))
        if not self.omega > 0:
            raise ValueError(f"omega must be positive, got {self.omega}")

    def rhs(self, point):
        return point_of(0.0, point[2], -self.omega**2 * point[1])

    def get_initial_condition(self):
        return point_of(0.0, self.x0, self.v0)

    def energy(self, point):
        """Energy per unit mass; conserved by the exact flow."""
        return 0.5 * point[2]**2 + 0.5 * self.omega**2 * point[1]**2

    def exact_solution(self, t):
        w = self.omega
        c, s = math.cos(w * t), math.sin(w * t)
        x = self.x0 * c + self.v0 / w * s
        v = -self.x0 * w * s + self.v0 * c
        return point_of(t, x, v)
