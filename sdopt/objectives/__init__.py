"""Objective functions with hand-derived gradients.

Example
-------
>>> import numpy as np
>>> from sdopt.objectives import get_objective
>>> rosen = get_objective("rosenbrock_bonus")
>>> rosen.gradient(np.array([0.5, 0.5, 0.5])).tolist()
[-51.0, -1.0, 50.0]
"""

from .core import DEFAULT_BOUNDS, Objective, gradient_magnitude
from .quadratic import QUADRATIC, quadratic, quadratic_grad
from .registry import OBJECTIVES, get_objective, is_known_objective, objective_names
from .rosenbrock import (
    ROSENBROCK,
    ROSENBROCK_BONUS,
    rosenbrock,
    rosenbrock_bonus_grad,
    rosenbrock_grad,
)

__all__ = [
    "DEFAULT_BOUNDS",
    "OBJECTIVES",
    "Objective",
    "QUADRATIC",
    "ROSENBROCK",
    "ROSENBROCK_BONUS",
    "get_objective",
    "gradient_magnitude",
    "is_known_objective",
    "objective_names",
    "quadratic",
    "quadratic_grad",
    "rosenbrock",
    "rosenbrock_bonus_grad",
    "rosenbrock_grad",
]
