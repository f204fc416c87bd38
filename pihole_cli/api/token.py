"""
Token API - Legacy API authenticated with an API token.

Requests go to ``/admin/api.php`` with the token in the ``auth`` query
parameter. Only local DNS and local CNAME records are covered.
"""

import logging
from typing import Any, Dict, List

from ._http import HTTPClient
from ..exceptions import APIError, ProtocolError, TokenRecordNotFoundError
from ..models import CNAMERecord, CNAMERecordList, DNSRecord, DNSRecordList

logger = logging.getLogger(__name__)

API_PATH = "/admin/api.php"


class _LegacyService:
    """Shared request handling for the ``customdns``/``customcname`` commands."""

    COMMAND = ""

    def __init__(self, http: HTTPClient, token: str):
        self._http = http
        self._token = token

    def _call(self, action: str, **params: str) -> Dict[str, Any]:
        query = {self.COMMAND: "true", "action": action}
        query.update(params)

        prepared = self._http.request_with_auth("GET", API_PATH, params=query, auth=self._token)
        response = self._http.send(prepared, expected_status=200, action=f"{action} {self.COMMAND}")
        return self._http.json_object(response)

    def _mutate(self, action: str, **params: str) -> None:
        result = self._call(action, **params)
        if not result.get("success", False):
            raise APIError(f"{self.COMMAND} {action} failed: {result.get('message', '')}")

    def _rows(self) -> List[List[str]]:
        rows = self._call("get").get("data") or []
        for row in rows:
            if not isinstance(row, list) or len(row) != 2:
                raise ProtocolError(f"unexpected {self.COMMAND} entry: {row!r}")
        return rows


class LocalDNSService(_LegacyService):
    """Local DNS records through the legacy API."""

    COMMAND = "customdns"

    def list(self) -> DNSRecordList:
        return [DNSRecord(domain=row[0], ip=row[1]) for row in self._rows()]

    def get(self, domain: str) -> DNSRecord:
        for record in self.list():
            if record.domain == domain:
                return record
        raise TokenRecordNotFoundError(f"local dns record {domain!r} not found")

    def create(self, domain: str, ip: str) -> DNSRecord:
        self._mutate("add", domain=domain, ip=ip)
        logger.debug("Created local dns record %s -> %s", domain, ip)
        return DNSRecord(domain=domain, ip=ip)

    def delete(self, domain: str) -> None:
        record = self.get(domain)
        self._mutate("delete", domain=record.domain, ip=record.ip)
        logger.debug("Deleted local dns record %s", domain)


class LocalCNAMEService(_LegacyService):
    """Local CNAME records through the legacy API."""

    COMMAND = "customcname"

    def list(self) -> CNAMERecordList:
        return [CNAMERecord(domain=row[0], target=row[1]) for row in self._rows()]

    def get(self, domain: str) -> CNAMERecord:
        for record in self.list():
            if record.domain == domain:
                return record
        raise TokenRecordNotFoundError(f"local cname record {domain!r} not found")

    def create(self, domain: str, target: str) -> CNAMERecord:
        self._mutate("add", domain=domain, target=target)
        logger.debug("Created local cname %s -> %s", domain, target)
        return CNAMERecord(domain=domain, target=target)

    def delete(self, domain: str) -> None:
        record = self.get(domain)
        self._mutate("delete", domain=record.domain, target=record.target)
        logger.debug("Deleted local cname %s", domain)


class TokenClient:
    """Client for the token-authenticated legacy API."""

    def __init__(self, http: HTTPClient, token: str):
        self.local_dns = LocalDNSService(http, token)
        self.local_cname = LocalCNAMEService(http, token)
