"""Pytest configuration and shared fixtures for sdopt tests.

This module provides:
- Deterministic RNG fixture for numpy
- A factory fixture writing six-line run configuration files
- Reset of the package log level after each test
"""

import logging
import os
from pathlib import Path
from typing import Callable, Iterator, Sequence

import numpy as np
import pytest

from sdopt.logging import configure_logging


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


def config_text(
    name: str,
    dimensionality: int,
    iterations: int,
    tolerance: float,
    step_size: float,
    point: Sequence[float],
) -> str:
    values = [name, dimensionality, iterations, tolerance, step_size, " ".join(map(str, point))]
    return "\n".join(str(v) for v in values) + "\n"


@pytest.fixture(scope="function")
def write_config(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper that writes a config file and gives back its path."""

    def _write(*args, filename: str = "config.txt") -> Path:
        path = tmp_path / filename
        path.write_text(config_text(*args), encoding="utf-8")
        return path

    return _write


@pytest.fixture(scope="function", autouse=True)
def reset_logging() -> Iterator[None]:
    yield
    configure_logging(level=logging.WARNING)
