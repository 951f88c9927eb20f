"""Separable quadratic ``f(x) = sum(x_i^2)``."""

from __future__ import annotations

import numpy as np

from .core import Objective


def quadratic(x: np.ndarray) -> float:
    return float(np.sum(x * x))


def quadratic_grad(x: np.ndarray) -> np.ndarray:
    return 2 * x


QUADRATIC = Objective(name="Quadratic", fun=quadratic, grad=quadratic_grad)


__all__ = ["QUADRATIC", "quadratic", "quadratic_grad"]
