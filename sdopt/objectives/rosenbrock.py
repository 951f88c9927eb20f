"""Rosenbrock objective and its two gradient variants.

``rosenbrock_grad`` keeps only the coupling term a component has with its
successor, so interior components are not the true partial derivatives.
``rosenbrock_bonus_grad`` adds the coupling with the predecessor and is the
exact gradient of the chained Rosenbrock function.
"""

from __future__ import annotations

import numpy as np

from .core import Objective


def _require_chain(x: np.ndarray) -> None:
    if x.size < 2:
        raise ValueError("Rosenbrock gradient requires at least 2 variables")


def rosenbrock(x: np.ndarray) -> float:
    """Chained Rosenbrock value; 0.0 for fewer than 2 variables."""
    head = x[:-1]
    tail = x[1:]
    return float(np.sum(100 * (tail - head**2) ** 2 + (1 - head) ** 2))


def rosenbrock_grad(x: np.ndarray) -> np.ndarray:
    _require_chain(x)
    head = x[:-1]
    grad = np.empty_like(x, dtype=float)
    grad[:-1] = -400 * head * (x[1:] - head**2) - 2 * (1 - head)
    grad[-1] = 200 * (x[-1] - x[-2] ** 2)
    return grad


def rosenbrock_bonus_grad(x: np.ndarray) -> np.ndarray:
    grad = rosenbrock_grad(x)
    # incoming coupling from x[i-1] for interior components
    grad[1:-1] += 200 * (x[1:-1] - x[:-2] ** 2)
    return grad


ROSENBROCK = Objective(name="Rosenbrock", fun=rosenbrock, grad=rosenbrock_grad, min_dim=2)

ROSENBROCK_BONUS = Objective(
    name="Rosenbrock_Bonus", fun=rosenbrock, grad=rosenbrock_bonus_grad, min_dim=2
)


__all__ = [
    "ROSENBROCK",
    "ROSENBROCK_BONUS",
    "rosenbrock",
    "rosenbrock_bonus_grad",
    "rosenbrock_grad",
]
