# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT


def runge_kutta(point, step_size, differential):
    """Advance ``point`` one classical RK4 step of size ``step_size``.

        k1 = f(y)
        k2 = f(y + k1*h/2)
        k3 = f(y + k2*h/2)
        k4 = f(y + k3*h)
        y' = y + (k1 + 2*k2 + 2*k3 + k4) * h/6

    Component 0 is the independent variable: after the update it is
    advanced by ``h``.  The differential should therefore return 0 in
    slot 0, otherwise time is advanced twice.

    Calls ``differential`` exactly four times and never mutates ``point``.
    """
    f = differential
    h = step_size
    k1 = f(point)
    k2 = f(point + k1 * (h / 2))
    k3 = f(point + k2 * (h / 2))
    k4 = f(point + k3 * h)
    result = point + (k1 + 2 * k2 + 2 * k3 + k4) * (h / 6)
    result[0] = result[0] + h
    return result
