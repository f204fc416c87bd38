"""
Tests for the ad-blocking toggle.
"""

import pytest

from pihole_cli.api.blocking import parse_blocking
from pihole_cli.exceptions import ProtocolError, UnexpectedStatusError
from pihole_cli.models import EnableAdBlock
from tests.helpers import BASE_URL, json_body, login_response, make_response, sent_requests


class TestParseBlocking:
    def test_enabled(self):
        assert parse_blocking({"blocking": "enabled"}) == EnableAdBlock(enabled=True)

    def test_disabled(self):
        assert parse_blocking({"blocking": "disabled"}) == EnableAdBlock(enabled=False)

    def test_unknown_value(self):
        with pytest.raises(ProtocolError, match="blocking=bogus"):
            parse_blocking({"blocking": "bogus"})

    def test_missing_value(self):
        with pytest.raises(ProtocolError):
            parse_blocking({})


class TestBlockingStatus:
    def test_get_status(self, client, session):
        session.send.side_effect = [login_response(), make_response(200, {"blocking": "disabled", "timer": None})]

        status = client.get_ad_blocker_status()

        assert status.enabled is False
        get = sent_requests(session)[1]
        assert get.method == "GET"
        assert get.url == f"{BASE_URL}/api/dns/blocking"

    def test_set_enabled(self, client, session):
        session.send.side_effect = [login_response(), make_response(200, {"blocking": "enabled"})]

        status = client.set_ad_block_enabled(True)

        post = sent_requests(session)[1]
        assert post.method == "POST"
        assert json_body(post) == {"blocking": True}
        assert status.enabled is True

    def test_set_disabled_sends_false(self, client, session):
        session.send.side_effect = [login_response(), make_response(200, {"blocking": "disabled"})]

        client.set_ad_block_enabled(False)

        assert json_body(sent_requests(session)[1]) == {"blocking": False}

    def test_unexpected_status(self, client, session):
        session.send.side_effect = [login_response(), make_response(500, {})]

        with pytest.raises(UnexpectedStatusError, match="retrieve current status"):
            client.get_ad_blocker_status()
