"""
Tests for CNAME records over the session API.
"""

import pytest

from pihole_cli.api.cname import cname_path, parse_cname_entries
from pihole_cli.exceptions import NotFoundError, ProtocolError, RecordParseError, UnexpectedStatusError
from pihole_cli.models import CNAMERecord
from tests.helpers import BASE_URL, cname_response, login_response, make_response, sent_requests


class TestParseCNAMEEntries:
    def test_parses_entry(self):
        assert parse_cname_entries(["alias.lan,target.lan"]) == [
            CNAMERecord(domain="alias.lan", target="target.lan")
        ]

    def test_entry_without_comma(self):
        with pytest.raises(RecordParseError) as exc_info:
            parse_cname_entries(["alias.lan target.lan"])

        assert exc_info.value.entry == "alias.lan target.lan"

    def test_entry_with_ttl_field(self):
        # A third field is not part of the two-field contract.
        with pytest.raises(RecordParseError):
            parse_cname_entries(["alias.lan,target.lan,300"])

    def test_non_string_entry(self):
        with pytest.raises(RecordParseError) as exc_info:
            parse_cname_entries([["alias.lan", "target.lan"]])

        assert "alias.lan" in exc_info.value.entry


def test_cname_path_encodes_comma():
    record = CNAMERecord(domain="alias.lan", target="target.lan")
    assert cname_path(record) == "/api/config/dns/cnameRecords/alias.lan%2Ctarget.lan"


class TestCNAMEOperations:
    """Tests for list/get/create/delete of CNAME records."""

    def test_list(self, client, session):
        session.send.side_effect = [login_response(), cname_response("a.lan,b.lan", "c.lan,d.lan")]

        records = client.list_cname_records()

        assert records == [
            CNAMERecord(domain="a.lan", target="b.lan"),
            CNAMERecord(domain="c.lan", target="d.lan"),
        ]
        assert sent_requests(session)[1].url == f"{BASE_URL}/api/config/dns/cnameRecords"

    def test_missing_dns_section(self, client, session):
        session.send.side_effect = [login_response(), make_response(200, {"config": {"dns": None}})]

        with pytest.raises(ProtocolError):
            client.list_cname_records()

    def test_non_string_entry_in_response(self, client, session):
        session.send.side_effect = [login_response(), cname_response(7)]

        with pytest.raises(RecordParseError):
            client.list_cname_records()

    def test_get_not_found(self, client, session):
        session.send.side_effect = [login_response(), cname_response("a.lan,b.lan")]

        with pytest.raises(NotFoundError, match="x.lan"):
            client.get_cname_record("x.lan")

    def test_create(self, client, session):
        session.send.side_effect = [login_response(), make_response(201, {})]

        client.create_cname_record(CNAMERecord(domain="a.lan", target="b.lan"))

        put = sent_requests(session)[1]
        assert put.method == "PUT"
        assert put.url == f"{BASE_URL}/api/config/dns/cnameRecords/a.lan%2Cb.lan"

    def test_create_unexpected_status(self, client, session):
        session.send.side_effect = [login_response(), make_response(400, {})]

        with pytest.raises(UnexpectedStatusError) as exc_info:
            client.create_cname_record(CNAMERecord(domain="a.lan", target="b.lan"))

        assert exc_info.value.status_code == 400

    def test_delete(self, client, session):
        session.send.side_effect = [
            login_response(),
            cname_response("a.lan,b.lan"),
            make_response(204),
        ]

        client.delete_cname_record("a.lan")

        delete = sent_requests(session)[2]
        assert delete.method == "DELETE"
        assert delete.url == f"{BASE_URL}/api/config/dns/cnameRecords/a.lan%2Cb.lan"
