"""
Pi-hole CLI - Command Line Interface for a Pi-hole appliance.

This module provides the main CLI entry point. Commands live in
``pihole_cli.commands`` and are registered on the root group:
- dns: custom DNS records
- cname: CNAME records
- groups: groups
- blocking: ad-blocking status
"""

import logging
import sys
from typing import Optional

import click

from . import __prog_name__, __version__
from .commands import PiholeContext, print_error
from .commands.blocking import register_blocking_commands
from .commands.cname import register_cname_commands
from .commands.dns import register_dns_commands
from .commands.groups import register_group_commands
from .config import DEFAULT_URL, PiholeConfig

logger = logging.getLogger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name=__prog_name__)
@click.option(
    '--url',
    envvar='PIHOLE_URL',
    default=DEFAULT_URL,
    show_default=True,
    help='URL where Pi-hole is deployed'
)
@click.option(
    '--password',
    envvar='PIHOLE_PASSWORD',
    default='',
    help='Admin password used to log in. Conflicts with --api-token.'
)
@click.option(
    '--api-token',
    envvar='PIHOLE_API_TOKEN',
    default='',
    help='Pi-hole API token. Conflicts with --password.'
)
@click.option(
    '--ca-file',
    envvar='PIHOLE_CA_FILE',
    default=None,
    help='CA file to verify the Pi-hole TLS certificate'
)
@click.option(
    '--cf-access-client-id',
    envvar='CF_ACCESS_CLIENT_ID',
    default='',
    help='Cloudflare Access client id'
)
@click.option(
    '--cf-access-client-secret',
    envvar='CF_ACCESS_CLIENT_SECRET',
    default='',
    help='Cloudflare Access client secret'
)
@click.option(
    '--timeout', '-t',
    envvar='PIHOLE_TIMEOUT',
    type=float,
    default=None,
    help='Request timeout in seconds (default: none)'
)
@click.pass_context
def cli(
    ctx,
    url: str,
    password: str,
    api_token: str,
    ca_file: Optional[str],
    cf_access_client_id: str,
    cf_access_client_secret: str,
    timeout: Optional[float],
):
    """
    Pi-hole CLI - Manage DNS records, CNAMEs, groups and ad blocking.

    \b
    Quick Start:
      1. Point at the appliance:   export PIHOLE_URL=https://pi.hole
      2. Authenticate:             export PIHOLE_PASSWORD=...
      3. List DNS records:         pihole dns list
      4. Add a record:             pihole dns create nas.lan 192.168.1.10

    \b
    Environment Variables:
      PIHOLE_URL               - Appliance URL (default: http://pi.hole)
      PIHOLE_PASSWORD          - Admin password
      PIHOLE_API_TOKEN         - API token (limited operations)
      PIHOLE_CA_FILE           - Custom CA bundle
      CF_ACCESS_CLIENT_ID      - Cloudflare Access client id
      CF_ACCESS_CLIENT_SECRET  - Cloudflare Access client secret
    """
    obj = ctx.ensure_object(PiholeContext)
    obj.config = PiholeConfig(
        url=url,
        password=password,
        api_token=api_token,
        ca_file=ca_file,
        cf_access_client_id=cf_access_client_id,
        cf_access_client_secret=cf_access_client_secret,
        timeout=timeout,
    )


register_dns_commands(cli)
register_cname_commands(cli)
register_group_commands(cli)
register_blocking_commands(cli)


def main():
    """Main entry point for the CLI."""
    try:
        cli()
    except KeyboardInterrupt:
        click.echo("\nAborted.")
        sys.exit(130)
    except Exception as e:
        logger.exception("Unexpected error")
        print_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == '__main__':
    main()
