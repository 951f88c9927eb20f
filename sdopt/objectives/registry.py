"""Closed registry of the objectives available to the optimizer."""

from __future__ import annotations

from typing import Dict, List

from .core import Objective
from .quadratic import QUADRATIC
from .rosenbrock import ROSENBROCK, ROSENBROCK_BONUS

OBJECTIVES: Dict[str, Objective] = {
    obj.name.lower(): obj for obj in (QUADRATIC, ROSENBROCK, ROSENBROCK_BONUS)
}


def is_known_objective(name: str) -> bool:
    """Case-insensitive membership test."""
    return name.lower() in OBJECTIVES


def get_objective(name: str) -> Objective:
    """Look up an objective by case-insensitive name.

    Raises
    ------
    KeyError
        If ``name`` is not registered.
    """
    try:
        return OBJECTIVES[name.lower()]
    except KeyError:
        raise KeyError(f"Unknown objective function: {name!r}") from None


def objective_names() -> List[str]:
    return [obj.name for obj in OBJECTIVES.values()]


__all__ = ["OBJECTIVES", "get_objective", "is_known_objective", "objective_names"]
