"""
Group commands for the Pi-hole CLI.

Commands:
- groups list: List groups
- groups get: Show a group
- groups create: Create a group
- groups update: Change a group's description or enabled flag
- groups delete: Delete a group
"""

from typing import Optional

import click

from ..api import get_client
from ..models import Group, GroupCreateRequest, GroupUpdateRequest
from ..utils import OutputFormat, emit, format_datetime, format_enabled
from . import PiholeContext, common_options, handle_errors, pass_context, print_success

GROUP_HEADERS = ["ID", "Name", "Status", "Description", "Modified"]


def _group_row(group: Group) -> list:
    return [
        group.id,
        group.name,
        format_enabled(group.enabled),
        group.description or "-",
        format_datetime(group.date_modified),
    ]


def register_group_commands(cli: click.Group) -> None:
    """Register group commands with the CLI."""

    @cli.group('groups')
    def groups():
        """Manage groups."""

    @groups.command('list')
    @common_options
    @pass_context
    @handle_errors
    def list_groups(ctx: PiholeContext, verbose: bool, quiet: bool, output_format: str):
        """List groups."""
        with get_client(ctx.config) as client:
            result = client.list_groups()

        emit(
            OutputFormat(output_format),
            GROUP_HEADERS,
            [_group_row(g) for g in result],
            [g.to_dict() for g in result],
        )

    @groups.command('get')
    @click.argument('name')
    @common_options
    @pass_context
    @handle_errors
    def get_group(ctx: PiholeContext, name: str, verbose: bool, quiet: bool, output_format: str):
        """Show the group named NAME."""
        with get_client(ctx.config) as client:
            group = client.get_group(name)

        emit(OutputFormat(output_format), GROUP_HEADERS, [_group_row(group)], group.to_dict())

    @groups.command('create')
    @click.argument('name')
    @click.option('--description', '-d', default='', help='Group description')
    @common_options
    @pass_context
    @handle_errors
    def create_group(
        ctx: PiholeContext,
        name: str,
        description: str,
        verbose: bool,
        quiet: bool,
        output_format: str,
    ):
        """
        Create a group named NAME.

        Group names must not contain whitespace.
        """
        with get_client(ctx.config) as client:
            group = client.create_group(GroupCreateRequest(name=name, description=description))

        if not quiet:
            print_success(f"Created group {group.name} (ID: {group.id})")

    @groups.command('update')
    @click.argument('name')
    @click.option('--description', '-d', default=None, help='Group description')
    @click.option('--enable/--disable', 'enabled', default=None, help='Enable or disable the group')
    @common_options
    @pass_context
    @handle_errors
    def update_group(
        ctx: PiholeContext,
        name: str,
        description: Optional[str],
        enabled: Optional[bool],
        verbose: bool,
        quiet: bool,
        output_format: str,
    ):
        """Update the group named NAME."""
        with get_client(ctx.config) as client:
            group = client.update_group(
                GroupUpdateRequest(name=name, enabled=enabled, description=description)
            )

        if not quiet:
            print_success(f"Updated group {group.name}")

    @groups.command('delete')
    @click.argument('name')
    @common_options
    @pass_context
    @handle_errors
    def delete_group(ctx: PiholeContext, name: str, verbose: bool, quiet: bool, output_format: str):
        """Delete the group named NAME."""
        with get_client(ctx.config) as client:
            client.delete_group(name)

        if not quiet:
            print_success(f"Deleted group {name}")
