"""Config-file input, trace sinks and the interactive prompt session."""

from .config_file import (
    ConfigFileError,
    ConfigNotFoundError,
    parse_config,
    parse_point,
    read_config,
)
from .session import InteractiveSession, TokenReader
from .sink import write_trace, write_trace_file

__all__ = [
    "ConfigFileError",
    "ConfigNotFoundError",
    "InteractiveSession",
    "TokenReader",
    "parse_config",
    "parse_point",
    "read_config",
    "write_trace",
    "write_trace_file",
]
