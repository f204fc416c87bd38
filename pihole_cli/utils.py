"""
Utility functions for Pi-hole CLI output and logging.
"""

import csv
import json
import logging
import re
import sys
from datetime import datetime
from enum import Enum
from typing import Any, List, Optional, Sequence

import click

_ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


class OutputFormat(str, Enum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"
    CSV = "csv"


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """
    Configure logging for the CLI.

    Args:
        verbose: Log debug messages, including HTTP requests and status codes
        quiet: Only log errors
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
        force=True,
    )

    if not verbose:
        logging.getLogger("urllib3").setLevel(logging.WARNING)


def print_success(message: str) -> None:
    click.echo(click.style("✓ ", fg="green") + message)


def print_error(message: str, hint: Optional[str] = None) -> None:
    """Print an error and an optional hint to stderr."""
    click.echo(click.style("✗ ", fg="red") + message, err=True)
    if hint:
        click.echo(f"  {hint}", err=True)


def print_json(data: Any) -> None:
    click.echo(json.dumps(data, indent=2, default=str))


def _strip_ansi(value: str) -> str:
    return _ANSI_RE.sub("", value)


def print_table(headers: Sequence[str], rows: List[Sequence[Any]]) -> None:
    """Print rows as an aligned plain-text table."""
    cells = [[str(cell) for cell in row] for row in rows]
    widths = [len(header) for header in headers]
    for row in cells:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(_strip_ansi(cell)))

    def line(values: Sequence[str]) -> str:
        padded = [
            value + " " * (widths[i] - len(_strip_ansi(value)))
            for i, value in enumerate(values)
        ]
        return "  ".join(padded).rstrip()

    click.echo(click.style(line(list(headers)), bold=True))
    click.echo("  ".join("-" * width for width in widths))
    for row in cells:
        click.echo(line(row))


def print_csv(headers: Sequence[str], rows: List[Sequence[Any]]) -> None:
    """Print rows as CSV, without color codes."""
    writer = csv.writer(sys.stdout)
    writer.writerow(headers)
    for row in rows:
        writer.writerow([_strip_ansi(str(cell)) for cell in row])


def format_datetime(value: Optional[datetime]) -> str:
    if value is None:
        return "-"
    return value.strftime("%Y-%m-%d %H:%M:%S")


def format_enabled(enabled: bool) -> str:
    if enabled:
        return click.style("enabled", fg="green")
    return click.style("disabled", fg="yellow")


def emit(fmt: OutputFormat, headers: Sequence[str], rows: List[Sequence[Any]], data: Any) -> None:
    """Print ``data`` as JSON, or ``rows`` as a table or CSV."""
    if fmt == OutputFormat.JSON:
        print_json(data)
    elif fmt == OutputFormat.CSV:
        print_csv(headers, rows)
    else:
        print_table(headers, rows)
