# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT


class DimensionMismatchError(ValueError):
    """Raised when two points of different dimension meet in a binary operation."""

    def __init__(self, left, right):
        super().__init__(
            f"The dimension of two points must be equal. left: {left} right: {right}"
        )
        self.left = left
        self.right = right


class IndexOutOfRangeError(IndexError):
    """Raised when a point is indexed outside [0, dimension)."""

    def __init__(self, index, dimension):
        super().__init__(f"index {index} out of range for dimension {dimension}")
        self.index = index
        self.dimension = dimension
