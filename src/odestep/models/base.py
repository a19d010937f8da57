# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT


from abc import ABC, abstractmethod

class ODEModel(ABC):
    """Right-hand side of an ODE system on a Point whose slot 0 is time.

    A model instance is itself a differential: ``model(point)`` returns
    ``model.rhs(point)``.
    """

    def __init__(self, params=None):
        self.params = dict(params) if params else {}

    @abstractmethod
    def rhs(self, point):
        pass

    @abstractmethod
    def get_initial_condition(self):
        pass

    def exact_solution(self, t):
        raise NotImplementedError(f"{type(self).__name__} has no closed-form solution")

    def __call__(self, point):
        return self.rhs(point)
