"""
Example: Fixed-step steepest descent in sdopt

Runs the bundled configs through the run coordinator and compares the two
Rosenbrock gradient variants from the same starting point.
"""

from pathlib import Path

import numpy as np

from sdopt import ROSENBROCK, ROSENBROCK_BONUS, run_optimization, steepest_descent
from sdopt.io import read_config

CONFIGS = Path(__file__).resolve().parent / "configs"


def example_config_runs():
    """Example: Run every config file and print the verdict."""
    print("=" * 60)
    print("Example 1: Config file runs")
    print("=" * 60)
    for path in sorted(CONFIGS.glob("*.txt")):
        outcome = run_optimization(read_config(path))
        print(f"{path.name}: {outcome.lines[-3]}")
    print()


def example_gradient_variants():
    """Example: Basic vs. corrected Rosenbrock gradient."""
    print("=" * 60)
    print("Example 2: Rosenbrock gradient variants")
    print("=" * 60)
    x0 = np.array([-1.2, 1.0, 0.5])
    for objective in (ROSENBROCK, ROSENBROCK_BONUS):
        res = steepest_descent(objective, x0, maxiter=500, tol=1e-3, step_size=5e-4)
        print(f"{objective.name}: f = {res.fun}, nit = {res.nit}, x = {res.x}")
    print()


if __name__ == "__main__":
    example_config_runs()
    example_gradient_variants()
    print("Examples completed.")
