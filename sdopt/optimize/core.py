"""Run configuration and result containers for steepest descent."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import numpy as np

Array = np.ndarray

MAX_ITERATIONS_MESSAGE = "Maximum iterations reached without satisfying the tolerance."
CONVERGENCE_MESSAGE = "Convergence reached after {iterations} iterations."
COMPLETED_MESSAGE = "Optimization process completed."


@dataclass(frozen=True)
class RunConfig:
    """Everything needed to launch one optimization run.

    ``initial_point`` is kept as a tuple so the config stays immutable; its
    length is checked against ``dimensionality`` by the validator, not here.
    """

    objective_name: str
    dimensionality: int
    max_iterations: int
    tolerance: float
    step_size: float
    initial_point: Tuple[float, ...]

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "initial_point", tuple(float(v) for v in self.initial_point)
        )

    def x0(self) -> Array:
        return np.array(self.initial_point, dtype=float)


@dataclass
class DescentResult:
    """Outcome of :func:`steepest_descent`.

    ``trace`` holds every line emitted by the run, blank separators included.
    ``grad_norm`` is the last tolerance value, i.e. the magnitude of the
    gradient taken before the final update.
    """

    x: Array
    fun: float
    nit: int
    success: bool
    message: str
    grad_norm: float
    trace: List[str] = field(default_factory=list)
    history: List[Array] = field(default_factory=list)


@dataclass
class RunOutcome:
    """What the run coordinator hands to a sink."""

    lines: List[str]
    errors: List[str] = field(default_factory=list)
    result: Optional[DescentResult] = None

    @property
    def ok(self) -> bool:
        return not self.errors


__all__ = [
    "Array",
    "COMPLETED_MESSAGE",
    "CONVERGENCE_MESSAGE",
    "DescentResult",
    "MAX_ITERATIONS_MESSAGE",
    "RunConfig",
    "RunOutcome",
]
