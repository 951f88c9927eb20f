"""sdopt - fixed-step steepest descent over hand-differentiated objectives."""

__version__ = "0.1.0"

from .objectives import (
    OBJECTIVES,
    QUADRATIC,
    ROSENBROCK,
    ROSENBROCK_BONUS,
    Objective,
    get_objective,
    is_known_objective,
)
from .optimize import (
    DescentResult,
    RunConfig,
    RunOutcome,
    floor5,
    round5,
    run_optimization,
    steepest_descent,
    validate_run,
)

__all__ = [
    "DescentResult",
    "OBJECTIVES",
    "Objective",
    "QUADRATIC",
    "ROSENBROCK",
    "ROSENBROCK_BONUS",
    "RunConfig",
    "RunOutcome",
    "__version__",
    "floor5",
    "get_objective",
    "is_known_objective",
    "round5",
    "run_optimization",
    "steepest_descent",
    "validate_run",
]
