"""
DNS API - Custom DNS host entries.

The appliance stores each entry as a single ``"<ip> <domain>"`` string.
"""

import logging
from typing import Any, Dict, List
from urllib.parse import quote

from ._http import HTTPClient
from ..exceptions import NotFoundError, ProtocolError, RecordParseError
from ..models import DNSRecord, DNSRecordList

logger = logging.getLogger(__name__)

HOSTS_PATH = "/api/config/dns/hosts"


def dns_config_entries(data: Dict[str, Any], key: str) -> List[Any]:
    """
    Entries stored under ``config.dns.<key>`` of a config response.

    Raises:
        ProtocolError: If the response does not have that shape.
    """
    node: Any = data
    for part in ("config", "dns"):
        node = node.get(part)
        if not isinstance(node, dict):
            raise ProtocolError(f"unexpected config response, {part!r} is not an object")

    entries = node.get(key)
    if entries is None:
        return []
    if not isinstance(entries, list):
        raise ProtocolError(f"unexpected config response, {key!r} is not a list")
    return entries


def parse_host_entries(entries: List[Any]) -> DNSRecordList:
    """
    Decode ``"<ip> <domain>"`` entries.

    Raises:
        RecordParseError: On the first entry that does not split into two fields.
    """
    records = []
    for entry in entries:
        if not isinstance(entry, str):
            raise RecordParseError("failed to parse dns record", str(entry))
        fields = entry.split(" ")
        if len(fields) != 2:
            raise RecordParseError("failed to parse dns record", entry)
        records.append(DNSRecord(ip=fields[0], domain=fields[1]))
    return records


def host_path(record: DNSRecord) -> str:
    """Collection path addressing a single entry (``<ip>%20<domain>``)."""
    return f"{HOSTS_PATH}/{quote(record.ip, safe='')}%20{quote(record.domain, safe='')}"


class DNSAPI:
    """
    API for custom DNS records.

    Handles:
    - Listing and looking up records by domain
    - Creating and deleting records
    """

    def __init__(self, http: HTTPClient):
        """
        Initialize DNS API.

        Args:
            http: HTTP client instance
        """
        self._http = http

    def list(self) -> DNSRecordList:
        """Get all custom DNS records."""
        prepared = self._http.request_with_session_json("GET", HOSTS_PATH)
        response = self._http.send(prepared, expected_status=200, action="retrieve dns records")
        data = self._http.json_object(response)

        return parse_host_entries(dns_config_entries(data, "hosts"))

    def get(self, domain: str) -> DNSRecord:
        """
        Find the record for ``domain``.

        Raises:
            NotFoundError: If no record has that domain.
        """
        for record in self.list():
            if record.domain == domain:
                return record

        raise NotFoundError(f"record {domain!r} not found")

    def create(self, record: DNSRecord) -> DNSRecord:
        """Create a DNS record."""
        prepared = self._http.request_with_session_json("PUT", host_path(record))
        self._http.send(prepared, expected_status=201, action="create dns records")

        logger.debug("Created dns record %s -> %s", record.domain, record.ip)
        return record

    def delete(self, domain: str) -> None:
        """Delete the DNS record for ``domain``."""
        record = self.get(domain)

        prepared = self._http.request_with_session_json("DELETE", host_path(record))
        self._http.send(prepared, expected_status=204, action="delete dns records")

        logger.debug("Deleted dns record %s", domain)
