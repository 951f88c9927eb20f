"""Fixed-step steepest descent with a formatted iteration trace."""

from __future__ import annotations

import math
from typing import Callable, List, Optional, Sequence

import numpy as np

from ..logging import get_logger
from ..objectives import Objective
from .core import (
    COMPLETED_MESSAGE,
    CONVERGENCE_MESSAGE,
    MAX_ITERATIONS_MESSAGE,
    DescentResult,
)
from .rounding import (
    floor5,
    floor5_array,
    format_raw,
    format_scalar,
    format_vector,
    round5_array,
)

logger = get_logger(__name__)

Callback = Callable[[int, np.ndarray, float, np.ndarray], None]


def iteration_block(
    index: int, fun_text: str, x: np.ndarray, tolerance: Optional[float]
) -> List[str]:
    """Lines describing one iteration; the tolerance line is omitted when None."""
    lines = [
        f"Iteration {index}:",
        f"Objective Function Value: {fun_text}",
        f"x-values: {format_vector(x)}",
    ]
    if tolerance is not None:
        lines.append(f"Current Tolerance: {format_scalar(floor5(tolerance))}")
    return lines


def steepest_descent(
    objective: Objective,
    x0: Sequence[float],
    maxiter: int,
    tol: float,
    step_size: float,
    callback: Optional[Callback] = None,
    history: bool = False,
) -> DescentResult:
    """Minimize ``objective`` with the update ``x <- floor5(x - step_size * g)``.

    ``g`` is the ``round5``-rounded gradient at the current iterate. The loop
    stops once the magnitude of the gradient used by the previous update is
    at most ``tol``, or after ``maxiter`` iterations. The first iteration has
    no tolerance to report, so its block carries no tolerance line.
    """
    x = floor5_array(x0)
    # Never read: the first loop pass recomputes the gradient with round5.
    grad = floor5_array(objective.gradient(x))
    current_tolerance = math.inf
    remaining = maxiter
    trace: List[str] = []
    hist: List[np.ndarray] = []
    warned = False

    while current_tolerance > tol and remaining > 0:
        index = maxiter - remaining + 1
        grad = round5_array(objective.gradient(x))
        fx = floor5(objective.compute(x))
        if not warned and not (math.isfinite(fx) and np.all(np.isfinite(grad))):
            logger.warning("Non-finite value at iteration %d: f=%s, grad=%s", index, fx, grad)
            warned = True
        trace.extend(
            iteration_block(
                index, format_scalar(fx), x, current_tolerance if index > 1 else None
            )
        )
        if callback is not None:
            callback(index, x.copy(), fx, grad.copy())
        x = floor5_array(x - step_size * grad)
        current_tolerance = objective.gradient_magnitude(grad)
        logger.debug("Iteration %d: x=%s, |g|=%s", index, x, current_tolerance)
        if history:
            hist.append(x.copy())
        trace.append("")
        remaining -= 1

    iterations = maxiter - remaining + 1
    fx = floor5(objective.compute(x))
    converged = current_tolerance <= tol and remaining > 0
    if converged:
        trace.extend(iteration_block(iterations, format_raw(fx), x, current_tolerance))
        trace.append("")

    if remaining == 0:
        message = MAX_ITERATIONS_MESSAGE
    else:
        message = CONVERGENCE_MESSAGE.format(iterations=iterations)
    trace.extend([message, "", COMPLETED_MESSAGE])

    return DescentResult(
        x=x,
        fun=fx,
        nit=maxiter - remaining,
        success=converged,
        message=message,
        grad_norm=float(current_tolerance),
        trace=trace,
        history=hist,
    )


__all__ = ["iteration_block", "steepest_descent"]
