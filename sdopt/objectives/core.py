"""Objective descriptor shared by every registered objective."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Tuple

import numpy as np

Array = np.ndarray
Value = Callable[[Array], float]
Gradient = Callable[[Array], Array]

DEFAULT_BOUNDS: Tuple[float, float] = (-5.0, 5.0)


def gradient_magnitude(v: Array) -> float:
    """Euclidean norm of a gradient vector."""
    v = np.asarray(v, dtype=float)
    return float(np.sqrt(np.sum(v * v)))


@dataclass(frozen=True)
class Objective:
    """Analytically differentiable objective with an admissible seeding box.

    ``bounds`` only restricts where the initial point may lie; iterates are
    free to leave the box.
    """

    name: str
    fun: Value
    grad: Gradient
    bounds: Tuple[float, float] = DEFAULT_BOUNDS
    min_dim: int = 1

    def compute(self, x: Array) -> float:
        return float(self.fun(np.asarray(x, dtype=float)))

    def gradient(self, x: Array) -> Array:
        return np.asarray(self.grad(np.asarray(x, dtype=float)), dtype=float)

    def gradient_magnitude(self, v: Array) -> float:
        return gradient_magnitude(v)


__all__ = [
    "Array",
    "DEFAULT_BOUNDS",
    "Gradient",
    "Objective",
    "Value",
    "gradient_magnitude",
]
