"""Run coordinator: validate a :class:`RunConfig`, then descend."""

from __future__ import annotations

from ..logging import get_logger
from ..objectives import get_objective
from .core import RunConfig, RunOutcome
from .rounding import format_raw, format_scalar
from .steepest import steepest_descent
from .validation import validate_run

logger = get_logger(__name__)


def run_optimization(config: RunConfig) -> RunOutcome:
    """Validate ``config`` and run steepest descent when it passes.

    On validation failure the outcome lines are the error lines and the
    optimizer is never invoked.
    """
    errors = validate_run(config.objective_name, config.dimensionality, config.initial_point)
    if errors:
        logger.info("Run rejected: %s", "; ".join(errors))
        return RunOutcome(lines=list(errors), errors=errors)

    objective = get_objective(config.objective_name)
    logger.info(
        "Objective Function: %s, Dimensionality: %d, Initial Point: %s, "
        "Iterations: %d, Tolerance: %s, Step Size: %s",
        objective.name,
        config.dimensionality,
        " ".join(format_raw(v) for v in config.initial_point),
        config.max_iterations,
        format_scalar(config.tolerance),
        format_scalar(config.step_size),
    )
    result = steepest_descent(
        objective,
        config.x0(),
        maxiter=config.max_iterations,
        tol=config.tolerance,
        step_size=config.step_size,
    )
    logger.info("%s (nit=%d, |g|=%s)", result.message, result.nit, result.grad_norm)
    return RunOutcome(lines=list(result.trace), result=result)


__all__ = ["run_optimization"]
