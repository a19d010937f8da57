# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

"""Fixed-dimension real vector used as ODE state."""

import numbers

import numpy as np

from odestep.errors import DimensionMismatchError, IndexOutOfRangeError


def _ieee():
    # inf/nan propagate silently, as in plain IEEE-754 arithmetic
    return np.errstate(over="ignore", under="ignore", divide="ignore", invalid="ignore")


class Point:
    """A fixed-dimension vector of float64 values.

    By convention, component 0 holds the independent variable (time) and
    the remaining components hold the dependent state.

    Arithmetic (``+``, ``-``, ``*``, ``/``) never mutates its operands and
    always returns a new Point.  ``set`` and item assignment mutate in place.
    Equality is exact elementwise comparison, with no tolerance.

    Parameters
    ----------
    values : sequence of float
        Component values.  They are copied, so the Point never aliases
        caller storage.
    """

    # Make numpy defer to our reflected operators (np.float64(2) * point).
    __array_ufunc__ = None

    def __init__(self, values):
        try:
            data = np.array(values, dtype=np.float64)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Point values must be real numbers: {exc}") from exc
        if data.ndim != 1:
            raise ValueError(f"Point values must be one-dimensional, got shape {data.shape}")
        self._data = data

    @classmethod
    def _wrap(cls, data):
        point = cls.__new__(cls)
        point._data = data
        return point

    @property
    def dimension(self):
        return self._data.shape[0]

    def _check_index(self, index):
        if not isinstance(index, numbers.Integral) or isinstance(index, bool):
            raise TypeError(f"Point indices must be integers, got {type(index).__name__}")
        if not 0 <= index < self.dimension:
            raise IndexOutOfRangeError(index, self.dimension)

    def _check_dimension(self, other):
        if other.dimension != self.dimension:
            raise DimensionMismatchError(self.dimension, other.dimension)

    def get(self, index):
        self._check_index(index)
        return float(self._data[index])

    def set(self, index, value):
        """Overwrite component ``index`` in place."""
        self._check_index(index)
        self._data[index] = value

    __getitem__ = get
    __setitem__ = set

    def __len__(self):
        return self.dimension

    def __iter__(self):
        return iter(self._data.tolist())

    def plus(self, other):
        self._check_dimension(other)
        with _ieee():
            return self._wrap(self._data + other._data)

    def minus(self, other):
        self._check_dimension(other)
        with _ieee():
            return self._wrap(self._data - other._data)

    def times(self, scalar):
        with _ieee():
            return self._wrap(self._data * np.float64(scalar))

    def div(self, scalar):
        """Multiply by ``1/scalar``; zero divisors give inf/nan, never an error."""
        with _ieee():
            inverse = np.float64(1.0) / np.float64(scalar)
        return self.times(inverse)

    def dot(self, other):
        self._check_dimension(other)
        with _ieee():
            return float(np.dot(self._data, other._data))

    def copy(self):
        return self._wrap(self._data.copy())

    def to_numpy(self):
        """Return an independent ndarray of the components."""
        return self._data.copy()

    def __add__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self.minus(other)

    def __mul__(self, scalar):
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return self.times(scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return self.div(scalar)

    def __matmul__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self.dot(other)

    def __neg__(self):
        with _ieee():
            return self._wrap(-self._data)

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return bool(np.array_equal(self._data, other._data))

    def __hash__(self):
        return hash(tuple(self._data.tolist()))

    def __str__(self):
        return str(self._data.tolist())

    def __repr__(self):
        return f"Point({self._data.tolist()!r})"


def point_of(*values):
    """Build a Point from its components: ``point_of(0.0, 1.0)``."""
    return Point(values)
