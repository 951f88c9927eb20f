"""Pre-run validation of objective name, dimensionality and initial point.

Validation produces error lines rather than exceptions: they are sunk through
the same channel a trace would be.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

import numpy as np

from ..objectives import get_objective, is_known_objective
from .rounding import format_raw

UNKNOWN_OBJECTIVE = "Error: Unknown objective function."
DIMENSIONALITY_MISMATCH = "Error: Initial point dimensionality mismatch."
OUT_OF_BOUNDS = "Error: Initial point {value} is outside the bounds [{lo}, {hi}]"
DIMENSIONALITY_TOO_SMALL = (
    "Error: Objective function {name} requires a dimensionality of at least {min_dim}."
)


def check_bounds(x0: Sequence[float], bounds: Tuple[float, float]) -> np.ndarray:
    """Componentwise membership of ``x0`` in the closed box ``[lo, hi]``."""
    x0 = np.asarray(x0, dtype=float)
    lo, hi = bounds
    return (x0 >= lo) & (x0 <= hi)


def validate_objective_name(name: str) -> List[str]:
    if is_known_objective(name):
        return []
    return [UNKNOWN_OBJECTIVE]


def validate_run(name: str, dimensionality: int, x0: Sequence[float]) -> List[str]:
    """Return the error lines for a run request, empty when it may proceed.

    At most one line is produced: an unknown name stops validation, and the
    bounds check only reports the first offending component when the
    dimensionality matched.
    """
    errors = validate_objective_name(name)
    if errors:
        return errors

    objective = get_objective(name)
    x0 = np.asarray(x0, dtype=float)
    if x0.size != dimensionality:
        return [DIMENSIONALITY_MISMATCH]

    inside = check_bounds(x0, objective.bounds)
    if not inside.all():
        offender = x0[np.argmin(inside)]
        lo, hi = objective.bounds
        return [
            OUT_OF_BOUNDS.format(
                value=format_raw(offender), lo=format_raw(lo), hi=format_raw(hi)
            )
        ]

    if dimensionality < objective.min_dim:
        return [
            DIMENSIONALITY_TOO_SMALL.format(name=objective.name, min_dim=objective.min_dim)
        ]
    return []


__all__ = [
    "DIMENSIONALITY_MISMATCH",
    "DIMENSIONALITY_TOO_SMALL",
    "OUT_OF_BOUNDS",
    "UNKNOWN_OBJECTIVE",
    "check_bounds",
    "validate_objective_name",
    "validate_run",
]
