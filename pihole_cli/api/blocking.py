"""
Blocking API - Global ad-blocking toggle.
"""

from ._http import HTTPClient
from ..exceptions import ProtocolError
from ..models import EnableAdBlock

BLOCKING_PATH = "/api/dns/blocking"


def parse_blocking(data: dict) -> EnableAdBlock:
    """
    Decode ``{"blocking": "enabled" | "disabled"}``.

    Raises:
        ProtocolError: For any other value.
    """
    status = data.get("blocking")
    if status == "enabled":
        return EnableAdBlock(enabled=True)
    if status == "disabled":
        return EnableAdBlock(enabled=False)

    raise ProtocolError(f"got unexpected value, blocking={status}")


class BlockingAPI:
    """API for the ad-blocking status."""

    def __init__(self, http: HTTPClient):
        self._http = http

    def get_status(self) -> EnableAdBlock:
        """Get whether ad blocking is enabled."""
        prepared = self._http.request_with_session_json("GET", BLOCKING_PATH)
        response = self._http.send(prepared, expected_status=200, action="retrieve current status")
        return parse_blocking(self._http.json_object(response))

    def set_enabled(self, enable: bool) -> EnableAdBlock:
        """Enable or disable ad blocking and return the resulting status."""
        prepared = self._http.request_with_session_json("POST", BLOCKING_PATH, {"blocking": enable})
        response = self._http.send(prepared, expected_status=200, action="enable/disable blocking")
        return parse_blocking(self._http.json_object(response))
