# ruff: noqa: I001
"""CLI for the ``monthly_balances`` package.

A Typer console interface with one command: read a transactions CSV and
write the per-customer, per-month balance report. Environment variables are
loaded from a local ``.env`` via ``python-dotenv`` before settings are
resolved. Business logic lives in ``monthly_balances.api``.

Exit status:

- ``0``: report written
- ``1``: input file could not be opened or read
- ``2``: output file could not be created or written
- ``3``: invalid settings (options, log level or environment)
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv
from pydantic import ValidationError
from typer.models import ArgumentInfo

from .config import load_settings
from .errors import ResourceUnavailableError
from .logging_setup import configure_logging, get_logger, level_from_name

EXIT_OK = 0
EXIT_INPUT_UNAVAILABLE = 1
EXIT_OUTPUT_UNAVAILABLE = 2
EXIT_BAD_SETTINGS = 3

logger = get_logger("monthly_balances.cli")

# Module-level argument objects to satisfy ruff B008 (no calls in parameter
# defaults).
INPUT_PATH_ARGUMENT: ArgumentInfo = typer.Argument(
    ...,
    help="Headerless CSV of customerID,MM/DD/YYYY,amount rows",
    dir_okay=False,
    file_okay=True,
    exists=False,  # the command reports missing files with its own exit code
)
OUTPUT_PATH_ARGUMENT: ArgumentInfo = typer.Argument(
    ...,
    help="Destination CSV; created or truncated",
    dir_okay=False,
    file_okay=True,
)


app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help=(
        "Compute minimum, maximum and ending balances per customer per month "
        "from a transactions CSV."
    ),
)


@app.command("report")
def report_cmd(
    input_path: Annotated[Path, INPUT_PATH_ARGUMENT],
    output_path: Annotated[Path, OUTPUT_PATH_ARGUMENT],
    *,
    carry_forward: bool | None = typer.Option(
        None,
        "--carry-forward/--reset-monthly",
        help=(
            "Start each month from the previous month's ending balance instead of "
            "zero. Falls back to MONTHLY_BALANCES_CARRY_FORWARD (default: reset)."
        ),
        show_default=False,
    ),
    max_workers: int | None = typer.Option(
        None,
        "--max-workers",
        help="Threads used to fold customer ledgers (env MONTHLY_BALANCES_MAX_WORKERS).",
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help="Logging level, e.g. INFO or DEBUG (env MONTHLY_BALANCES_LOG_LEVEL).",
    ),
) -> None:
    """Write the monthly balance report for INPUT_PATH to OUTPUT_PATH."""

    # Load environment from .env in CWD (override=False to keep existing env)
    load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)

    if log_level is not None and level_from_name(log_level) is None:
        print(f"Error: invalid settings: unknown log level {log_level!r}", file=sys.stderr)
        raise typer.Exit(EXIT_BAD_SETTINGS)
    configure_logging(log_level)

    from .api import run_report

    try:
        settings = load_settings(carry_forward=carry_forward, max_workers=max_workers)
    except (ValidationError, ValueError) as e:
        print(f"Error: invalid settings: {e}", file=sys.stderr)
        raise typer.Exit(EXIT_BAD_SETTINGS) from e

    try:
        written = run_report(input_path, output_path, settings=settings)
    except ResourceUnavailableError as e:
        print(f"Error: {e}", file=sys.stderr)
        code = EXIT_INPUT_UNAVAILABLE if e.role == "input" else EXIT_OUTPUT_UNAVAILABLE
        raise typer.Exit(code) from e

    logger.info("wrote %d rows to %s", written, output_path)


@app.callback()
def _root() -> None:
    """Monthly balance reports from transaction ledgers."""


def main() -> None:
    app()


if __name__ == "__main__":  # pragma: no cover - exercised via console script
    # Running as a module: `python -m monthly_balances.cli`
    main()
