"""Typer CLI for sdopt.

Without a sub-command the interactive prompt session runs on stdin/stdout.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import typer

from sdopt import __version__
from sdopt.io import ConfigFileError, ConfigNotFoundError, InteractiveSession, read_config
from sdopt.io import write_trace, write_trace_file
from sdopt.logging import configure_logging, get_logger
from sdopt.objectives import OBJECTIVES
from sdopt.optimize import run_optimization

logger = get_logger(__name__)

app = typer.Typer(help="sdopt: fixed-step steepest descent with an iteration trace")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    log_level: str = typer.Option(
        "WARNING", "--log-level", envvar="SDOPT_LOG_LEVEL", help="Diagnostic log level"
    ),
):
    """Run the interactive session unless a sub-command is given."""
    configure_logging(level=log_level)
    if ctx.invoked_subcommand is None:
        code = InteractiveSession(sys.stdin, sys.stdout).run()
        raise typer.Exit(code)


@app.command()
def run(
    config: Path = typer.Argument(..., help="Run configuration file"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write the trace to this file"),
    strict: bool = typer.Option(False, help="Exit with status 1 when validation fails"),
):
    """Run one optimization from a config file."""
    try:
        run_config = read_config(config)
    except ConfigNotFoundError as exc:
        typer.echo(str(exc))
        raise typer.Exit(0)
    except ConfigFileError as exc:
        typer.echo(f"Error: {exc}")
        raise typer.Exit(1 if strict else 0)

    outcome = run_optimization(run_config)
    if output is None:
        write_trace(outcome.lines, sys.stdout)
    else:
        try:
            write_trace_file(outcome.lines, output)
        except OSError as exc:
            logger.error("Cannot write trace to %s: %s", output, exc)
            typer.echo("Error writing the file.")
            raise typer.Exit(1)
    if strict and not outcome.ok:
        raise typer.Exit(1)


@app.command()
def objectives():
    """List the registered objective functions."""
    for objective in OBJECTIVES.values():
        lo, hi = objective.bounds
        typer.echo(f"{objective.name:<20} bounds [{lo}, {hi}]  min dimensionality {objective.min_dim}")


@app.command()
def version():
    """Show sdopt version."""
    typer.echo(f"sdopt v{__version__}")


if __name__ == "__main__":
    app()
