"""
DNS record commands for the Pi-hole CLI.

Commands:
- dns list: List custom DNS records
- dns get: Show the record for a domain
- dns create: Create a record
- dns delete: Delete the record for a domain
"""

import click

from ..api import get_client
from ..models import DNSRecord
from ..utils import OutputFormat, emit
from . import PiholeContext, common_options, handle_errors, pass_context, print_success


def register_dns_commands(cli: click.Group) -> None:
    """Register DNS record commands with the CLI."""

    @cli.group('dns')
    def dns():
        """Manage custom DNS records."""

    @dns.command('list')
    @common_options
    @pass_context
    @handle_errors
    def list_records(ctx: PiholeContext, verbose: bool, quiet: bool, output_format: str):
        """List custom DNS records."""
        with get_client(ctx.config) as client:
            records = client.list_dns_records()

        emit(
            OutputFormat(output_format),
            ["Domain", "IP"],
            [[r.domain, r.ip] for r in records],
            [r.to_dict() for r in records],
        )

    @dns.command('get')
    @click.argument('domain')
    @common_options
    @pass_context
    @handle_errors
    def get_record(ctx: PiholeContext, domain: str, verbose: bool, quiet: bool, output_format: str):
        """Show the DNS record for DOMAIN."""
        with get_client(ctx.config) as client:
            record = client.get_dns_record(domain)

        emit(OutputFormat(output_format), ["Domain", "IP"], [[record.domain, record.ip]], record.to_dict())

    @dns.command('create')
    @click.argument('domain')
    @click.argument('ip')
    @common_options
    @pass_context
    @handle_errors
    def create_record(ctx: PiholeContext, domain: str, ip: str, verbose: bool, quiet: bool, output_format: str):
        """
        Create a DNS record resolving DOMAIN to IP.

        \b
        Examples:
          pihole dns create nas.lan 192.168.1.10
        """
        with get_client(ctx.config) as client:
            record = client.create_dns_record(DNSRecord(domain=domain, ip=ip))

        if not quiet:
            print_success(f"Created DNS record {record.domain} -> {record.ip}")

    @dns.command('delete')
    @click.argument('domain')
    @common_options
    @pass_context
    @handle_errors
    def delete_record(ctx: PiholeContext, domain: str, verbose: bool, quiet: bool, output_format: str):
        """Delete the DNS record for DOMAIN."""
        with get_client(ctx.config) as client:
            client.delete_dns_record(domain)

        if not quiet:
            print_success(f"Deleted DNS record {domain}")
