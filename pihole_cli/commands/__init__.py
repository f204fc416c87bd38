"""
Command groups for the Pi-hole CLI.

Each module exposes a ``register_*_commands(cli)`` function that attaches
its group to the root command.
"""

import functools
import sys
from typing import Optional

import click

from ..config import PiholeConfig
from ..exceptions import NotFoundError, PiholeError
from ..utils import OutputFormat, print_error, print_success, setup_logging


class PiholeContext:
    """CLI context object for sharing state between commands."""

    def __init__(self):
        self.config: Optional[PiholeConfig] = None


pass_context = click.make_pass_decorator(PiholeContext, ensure=True)


def common_options(f):
    """Common options for all commands."""
    f = click.option(
        '-v', '--verbose',
        is_flag=True,
        help='Enable verbose output'
    )(f)
    f = click.option(
        '-q', '--quiet',
        is_flag=True,
        help='Suppress non-essential output'
    )(f)
    f = click.option(
        '-f', '--format',
        'output_format',
        type=click.Choice([fmt.value for fmt in OutputFormat]),
        default=OutputFormat.TABLE.value,
        help='Output format'
    )(f)
    return f


def handle_errors(f):
    """Configure logging, then turn client errors into a message and exit status 1."""
    @functools.wraps(f)
    def wrapper(*args, **kwargs):
        setup_logging(kwargs.get('verbose', False), kwargs.get('quiet', False))
        try:
            return f(*args, **kwargs)
        except NotFoundError as e:
            print_error(f"Not found: {e}")
            sys.exit(1)
        except PiholeError as e:
            print_error(str(e), e.details if kwargs.get('verbose') else None)
            sys.exit(1)

    return wrapper


__all__ = [
    "PiholeContext",
    "pass_context",
    "common_options",
    "handle_errors",
    "print_error",
    "print_success",
]
