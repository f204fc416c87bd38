"""
Tests for CLI commands.
"""

import json
from contextlib import ExitStack
from datetime import datetime, timezone
from unittest.mock import MagicMock, patch

import pytest
from click.testing import CliRunner

from pihole_cli.cli import cli
from pihole_cli.exceptions import NotFoundError, NotImplementedForTokenClientError, ValidationError
from pihole_cli.models import CNAMERecord, DNSRecord, EnableAdBlock, Group

COMMAND_MODULES = ['dns', 'cname', 'groups', 'blocking']


@pytest.fixture
def runner():
    """Create CLI test runner."""
    return CliRunner()


@pytest.fixture
def mock_client():
    """Patch get_client in every command module with one mock client."""
    client = MagicMock()
    factory = MagicMock()
    factory.return_value.__enter__.return_value = client
    with ExitStack() as stack:
        for name in COMMAND_MODULES:
            stack.enter_context(patch(f'pihole_cli.commands.{name}.get_client', factory))
        client.factory = factory
        yield client


def make_group(**overrides):
    values = dict(
        id=3,
        enabled=True,
        name="iot",
        date_added=datetime(2024, 3, 9, 16, 0, tzinfo=timezone.utc),
        date_modified=datetime(2024, 3, 10, 8, 30, tzinfo=timezone.utc),
        description="devices",
    )
    values.update(overrides)
    return Group(**values)


class TestCLI:
    """Tests for main CLI."""

    def test_version(self, runner):
        result = runner.invoke(cli, ['--version'])
        assert result.exit_code == 0
        assert 'pihole' in result.output.lower()

    def test_help(self, runner):
        result = runner.invoke(cli, ['--help'])
        assert result.exit_code == 0
        assert 'Pi-hole CLI' in result.output

    def test_global_options_build_config(self, runner, mock_client):
        mock_client.list_dns_records.return_value = []

        result = runner.invoke(cli, [
            '--url', 'https://pihole.example.com/',
            '--password', 'secret',
            '--timeout', '3',
            'dns', 'list',
        ])

        assert result.exit_code == 0
        config = mock_client.factory.call_args.args[0]
        assert config.url == 'https://pihole.example.com'
        assert config.password == 'secret'
        assert config.timeout == 3.0

    def test_environment_variables(self, runner, mock_client):
        mock_client.list_dns_records.return_value = []

        result = runner.invoke(
            cli, ['dns', 'list'],
            env={'PIHOLE_URL': 'http://10.0.0.2', 'PIHOLE_API_TOKEN': 'tok'},
        )

        assert result.exit_code == 0
        config = mock_client.factory.call_args.args[0]
        assert config.url == 'http://10.0.0.2'
        assert config.api_token == 'tok'


class TestDNSCommands:
    """Tests for dns commands."""

    def test_list_table(self, runner, mock_client):
        mock_client.list_dns_records.return_value = [DNSRecord(domain="nas.lan", ip="10.0.0.5")]

        result = runner.invoke(cli, ['dns', 'list'])

        assert result.exit_code == 0
        assert 'nas.lan' in result.output
        assert '10.0.0.5' in result.output

    def test_list_json(self, runner, mock_client):
        mock_client.list_dns_records.return_value = [DNSRecord(domain="nas.lan", ip="10.0.0.5")]

        result = runner.invoke(cli, ['dns', 'list', '-f', 'json'])

        assert result.exit_code == 0
        assert json.loads(result.output) == [{"domain": "nas.lan", "ip": "10.0.0.5"}]

    def test_list_csv(self, runner, mock_client):
        mock_client.list_dns_records.return_value = [DNSRecord(domain="nas.lan", ip="10.0.0.5")]

        result = runner.invoke(cli, ['dns', 'list', '--format', 'csv'])

        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert lines[0] == 'Domain,IP'
        assert lines[1] == 'nas.lan,10.0.0.5'

    def test_create(self, runner, mock_client):
        mock_client.create_dns_record.return_value = DNSRecord(domain="nas.lan", ip="10.0.0.5")

        result = runner.invoke(cli, ['dns', 'create', 'nas.lan', '10.0.0.5'])

        assert result.exit_code == 0
        mock_client.create_dns_record.assert_called_once_with(DNSRecord(domain="nas.lan", ip="10.0.0.5"))
        assert 'Created DNS record' in result.output

    def test_create_quiet(self, runner, mock_client):
        mock_client.create_dns_record.return_value = DNSRecord(domain="nas.lan", ip="10.0.0.5")

        result = runner.invoke(cli, ['dns', 'create', 'nas.lan', '10.0.0.5', '-q'])

        assert result.exit_code == 0
        assert result.output == ''

    def test_get_not_found(self, runner, mock_client):
        mock_client.get_dns_record.side_effect = NotFoundError("record 'x.lan' not found")

        result = runner.invoke(cli, ['dns', 'get', 'x.lan'])

        assert result.exit_code == 1
        assert 'Not found' in result.output

    def test_delete(self, runner, mock_client):
        result = runner.invoke(cli, ['dns', 'delete', 'nas.lan'])

        assert result.exit_code == 0
        mock_client.delete_dns_record.assert_called_once_with('nas.lan')


class TestCNAMECommands:
    """Tests for cname commands."""

    def test_create(self, runner, mock_client):
        mock_client.create_cname_record.return_value = CNAMERecord(domain="a.lan", target="b.lan")

        result = runner.invoke(cli, ['cname', 'create', 'a.lan', 'b.lan'])

        assert result.exit_code == 0
        mock_client.create_cname_record.assert_called_once_with(CNAMERecord(domain="a.lan", target="b.lan"))

    def test_list_not_supported_with_token(self, runner, mock_client):
        mock_client.list_cname_records.side_effect = NotImplementedForTokenClientError("list cname records")

        result = runner.invoke(cli, ['cname', 'list'])

        assert result.exit_code == 1
        assert 'not implemented for token client' in result.output


class TestGroupCommands:
    """Tests for groups commands."""

    def test_list(self, runner, mock_client):
        mock_client.list_groups.return_value = [make_group()]

        result = runner.invoke(cli, ['groups', 'list'])

        assert result.exit_code == 0
        assert 'iot' in result.output
        assert '2024-03-10 08:30:00' in result.output

    def test_get_json(self, runner, mock_client):
        mock_client.get_group.return_value = make_group()

        result = runner.invoke(cli, ['groups', 'get', 'iot', '-f', 'json'])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data['name'] == 'iot'
        assert data['id'] == 3

    def test_create_with_description(self, runner, mock_client):
        mock_client.create_group.return_value = make_group()

        result = runner.invoke(cli, ['groups', 'create', 'iot', '-d', 'devices'])

        assert result.exit_code == 0
        request = mock_client.create_group.call_args.args[0]
        assert request.name == 'iot'
        assert request.description == 'devices'
        assert 'ID: 3' in result.output

    def test_create_invalid_name(self, runner, mock_client):
        mock_client.create_group.side_effect = ValidationError("group names must not contain spaces")

        result = runner.invoke(cli, ['groups', 'create', 'has space'])

        assert result.exit_code == 1
        assert 'must not contain spaces' in result.output

    def test_update_without_flag_leaves_enabled_unset(self, runner, mock_client):
        mock_client.update_group.return_value = make_group()

        result = runner.invoke(cli, ['groups', 'update', 'iot', '-d', 'new'])

        assert result.exit_code == 0
        request = mock_client.update_group.call_args.args[0]
        assert request.enabled is None
        assert request.description == 'new'

    def test_update_disable(self, runner, mock_client):
        mock_client.update_group.return_value = make_group(enabled=False)

        result = runner.invoke(cli, ['groups', 'update', 'iot', '--disable'])

        assert result.exit_code == 0
        assert mock_client.update_group.call_args.args[0].enabled is False
        assert mock_client.update_group.call_args.args[0].description is None

    def test_delete(self, runner, mock_client):
        result = runner.invoke(cli, ['groups', 'delete', 'iot'])

        assert result.exit_code == 0
        mock_client.delete_group.assert_called_once_with('iot')


class TestBlockingCommands:
    """Tests for blocking commands."""

    def test_status(self, runner, mock_client):
        mock_client.get_ad_blocker_status.return_value = EnableAdBlock(enabled=True)

        result = runner.invoke(cli, ['blocking', 'status'])

        assert result.exit_code == 0
        assert 'Ad blocking: enabled' in result.output

    def test_disable(self, runner, mock_client):
        mock_client.set_ad_block_enabled.return_value = EnableAdBlock(enabled=False)

        result = runner.invoke(cli, ['blocking', 'disable'])

        assert result.exit_code == 0
        mock_client.set_ad_block_enabled.assert_called_once_with(False)
        assert 'disabled' in result.output

    def test_enable_json(self, runner, mock_client):
        mock_client.set_ad_block_enabled.return_value = EnableAdBlock(enabled=True)

        result = runner.invoke(cli, ['blocking', 'enable', '-f', 'json'])

        assert result.exit_code == 0
        assert json.loads(result.output) == {"enabled": True}
