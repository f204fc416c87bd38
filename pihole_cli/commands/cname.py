"""
CNAME record commands for the Pi-hole CLI.
"""

import click

from ..api import get_client
from ..models import CNAMERecord
from ..utils import OutputFormat, emit
from . import PiholeContext, common_options, handle_errors, pass_context, print_success


def register_cname_commands(cli: click.Group) -> None:
    """Register CNAME record commands with the CLI."""

    @cli.group('cname')
    def cname():
        """Manage CNAME records."""

    @cname.command('list')
    @common_options
    @pass_context
    @handle_errors
    def list_records(ctx: PiholeContext, verbose: bool, quiet: bool, output_format: str):
        """List CNAME records."""
        with get_client(ctx.config) as client:
            records = client.list_cname_records()

        emit(
            OutputFormat(output_format),
            ["Domain", "Target"],
            [[r.domain, r.target] for r in records],
            [r.to_dict() for r in records],
        )

    @cname.command('get')
    @click.argument('domain')
    @common_options
    @pass_context
    @handle_errors
    def get_record(ctx: PiholeContext, domain: str, verbose: bool, quiet: bool, output_format: str):
        """Show the CNAME record for DOMAIN."""
        with get_client(ctx.config) as client:
            record = client.get_cname_record(domain)

        emit(
            OutputFormat(output_format),
            ["Domain", "Target"],
            [[record.domain, record.target]],
            record.to_dict(),
        )

    @cname.command('create')
    @click.argument('domain')
    @click.argument('target')
    @common_options
    @pass_context
    @handle_errors
    def create_record(ctx: PiholeContext, domain: str, target: str, verbose: bool, quiet: bool, output_format: str):
        """Create a CNAME record aliasing DOMAIN to TARGET."""
        with get_client(ctx.config) as client:
            record = client.create_cname_record(CNAMERecord(domain=domain, target=target))

        if not quiet:
            print_success(f"Created CNAME record {record.domain} -> {record.target}")

    @cname.command('delete')
    @click.argument('domain')
    @common_options
    @pass_context
    @handle_errors
    def delete_record(ctx: PiholeContext, domain: str, verbose: bool, quiet: bool, output_format: str):
        """Delete the CNAME record for DOMAIN."""
        with get_client(ctx.config) as client:
            client.delete_cname_record(domain)

        if not quiet:
            print_success(f"Deleted CNAME record {domain}")
