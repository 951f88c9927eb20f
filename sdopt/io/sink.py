"""Trace sinks: a text stream or a file, one line per trace entry."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, TextIO, Union

from ..logging import get_logger

logger = get_logger(__name__)


def write_trace(lines: Iterable[str], stream: TextIO) -> None:
    for line in lines:
        stream.write(line + "\n")
    stream.flush()


def write_trace_file(lines: Iterable[str], path: Union[str, Path]) -> Path:
    """Write ``lines`` to ``path``, replacing any existing content."""
    path = Path(path)
    with path.open("w", encoding="utf-8") as handle:
        write_trace(lines, handle)
    logger.info("Trace written to %s", path)
    return path


__all__ = ["write_trace", "write_trace_file"]
