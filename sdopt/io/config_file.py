"""Reader for the six-line plain-text run configuration.

Format (one value per line, surrounding whitespace ignored)::

    <objective_name>
    <dimensionality: integer>
    <iterations: integer>
    <tolerance: real>
    <step_size: real>
    <x0_1> <x0_2> ... <x0_d>
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable, List, TypeVar, Union

from ..logging import get_logger
from ..optimize.core import RunConfig

logger = get_logger(__name__)

T = TypeVar("T")

_FIELDS = (
    "objective function",
    "dimensionality",
    "iterations",
    "tolerance",
    "step size",
    "initial point",
)


class ConfigFileError(ValueError):
    """Raised when a run configuration file cannot be used."""


class ConfigNotFoundError(ConfigFileError):
    """Raised when the configuration file is missing or unreadable."""

    def __init__(self, path: Union[str, Path]):
        super().__init__("Error reading the file.")
        self.path = Path(path)


def _convert(text: str, kind: Callable[[str], T], field: str) -> T:
    try:
        return kind(text)
    except ValueError:
        raise ConfigFileError(f"Invalid {field} value: {text!r}") from None


def parse_point(text: str) -> List[float]:
    """Parse whitespace-separated reals."""
    return [_convert(token, float, "initial point") for token in text.split()]


def parse_config(lines: Iterable[str]) -> RunConfig:
    """Build a :class:`RunConfig` from the lines of a config file."""
    values = [line.strip() for line in lines]
    if len(values) < len(_FIELDS):
        missing = _FIELDS[len(values)]
        raise ConfigFileError(f"Missing {missing} line in config file")
    name, dim, iters, tol, step, point = values[: len(_FIELDS)]
    return RunConfig(
        objective_name=name,
        dimensionality=_convert(dim, int, "dimensionality"),
        max_iterations=_convert(iters, int, "iterations"),
        tolerance=_convert(tol, float, "tolerance"),
        step_size=_convert(step, float, "step size"),
        initial_point=tuple(parse_point(point)),
    )


def read_config(path: Union[str, Path]) -> RunConfig:
    """Read and parse a configuration file.

    Raises
    ------
    ConfigNotFoundError
        If the file does not exist or cannot be read.
    ConfigFileError
        If a line is missing or a value does not parse.
    """
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as handle:
            lines = handle.read().splitlines()
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Cannot read config file %s: %s", path, exc)
        raise ConfigNotFoundError(path) from exc
    logger.debug("Read %d lines from %s", len(lines), path)
    return parse_config(lines)


__all__ = [
    "ConfigFileError",
    "ConfigNotFoundError",
    "parse_config",
    "parse_point",
    "read_config",
]
