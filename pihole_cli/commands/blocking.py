"""
Ad-blocking commands for the Pi-hole CLI.
"""

import click

from ..api import get_client
from ..models import EnableAdBlock
from ..utils import OutputFormat, format_enabled, print_json
from . import PiholeContext, common_options, handle_errors, pass_context


def _show(status: EnableAdBlock, output_format: str) -> None:
    if OutputFormat(output_format) == OutputFormat.JSON:
        print_json(status.to_dict())
    else:
        click.echo(f"Ad blocking: {format_enabled(status.enabled)}")


def register_blocking_commands(cli: click.Group) -> None:
    """Register ad-blocking commands with the CLI."""

    @cli.group('blocking')
    def blocking():
        """Show or change the ad-blocking status."""

    @blocking.command('status')
    @common_options
    @pass_context
    @handle_errors
    def status(ctx: PiholeContext, verbose: bool, quiet: bool, output_format: str):
        """Show whether ad blocking is enabled."""
        with get_client(ctx.config) as client:
            _show(client.get_ad_blocker_status(), output_format)

    @blocking.command('enable')
    @common_options
    @pass_context
    @handle_errors
    def enable(ctx: PiholeContext, verbose: bool, quiet: bool, output_format: str):
        """Enable ad blocking."""
        with get_client(ctx.config) as client:
            _show(client.set_ad_block_enabled(True), output_format)

    @blocking.command('disable')
    @common_options
    @pass_context
    @handle_errors
    def disable(ctx: PiholeContext, verbose: bool, quiet: bool, output_format: str):
        """Disable ad blocking."""
        with get_client(ctx.config) as client:
            _show(client.set_ad_block_enabled(False), output_format)
