"""Fixed-step steepest descent over the registered objectives.

Example
-------
>>> from sdopt.optimize import RunConfig, run_optimization
>>> config = RunConfig("Rosenbrock", 2, 5, 1e-4, 1e-3, (1.0, 1.0))
>>> run_optimization(config).lines[-3]
'Convergence reached after 2 iterations.'
"""

from .core import (
    COMPLETED_MESSAGE,
    CONVERGENCE_MESSAGE,
    MAX_ITERATIONS_MESSAGE,
    DescentResult,
    RunConfig,
    RunOutcome,
)
from .rounding import (
    floor5,
    floor5_array,
    format_raw,
    format_scalar,
    format_vector,
    round5,
    round5_array,
)
from .runner import run_optimization
from .steepest import iteration_block, steepest_descent
from .validation import check_bounds, validate_objective_name, validate_run

__all__ = [
    "COMPLETED_MESSAGE",
    "CONVERGENCE_MESSAGE",
    "DescentResult",
    "MAX_ITERATIONS_MESSAGE",
    "RunConfig",
    "RunOutcome",
    "check_bounds",
    "floor5",
    "floor5_array",
    "format_raw",
    "format_scalar",
    "format_vector",
    "iteration_block",
    "round5",
    "round5_array",
    "run_optimization",
    "steepest_descent",
    "validate_objective_name",
    "validate_run",
]
