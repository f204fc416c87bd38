"""
CNAME API - Local CNAME aliases.

The appliance stores each alias as a single ``"<domain>,<target>"`` string.
"""

import logging
from typing import Any, List
from urllib.parse import quote

from ._http import HTTPClient
from .dns import dns_config_entries
from ..exceptions import NotFoundError, RecordParseError
from ..models import CNAMERecord, CNAMERecordList

logger = logging.getLogger(__name__)

CNAME_PATH = "/api/config/dns/cnameRecords"


def parse_cname_entries(entries: List[Any]) -> CNAMERecordList:
    """
    Decode ``"<domain>,<target>"`` entries.

    Raises:
        RecordParseError: On the first entry that does not split into two fields.
    """
    records = []
    for entry in entries:
        if not isinstance(entry, str):
            raise RecordParseError("failed to parse cname record", str(entry))
        fields = entry.split(",")
        if len(fields) != 2:
            raise RecordParseError("failed to parse cname record", entry)
        records.append(CNAMERecord(domain=fields[0], target=fields[1]))
    return records


def cname_path(record: CNAMERecord) -> str:
    return f"{CNAME_PATH}/{quote(record.domain, safe='')}%2C{quote(record.target, safe='')}"


class CNAMEAPI:
    """API for CNAME records."""

    def __init__(self, http: HTTPClient):
        self._http = http

    def list(self) -> CNAMERecordList:
        """Get all CNAME records."""
        prepared = self._http.request_with_session_json("GET", CNAME_PATH)
        response = self._http.send(prepared, expected_status=200, action="retrieve cname records")
        data = self._http.json_object(response)

        return parse_cname_entries(dns_config_entries(data, "cnameRecords"))

    def get(self, domain: str) -> CNAMERecord:
        for record in self.list():
            if record.domain == domain:
                return record

        raise NotFoundError(f"cname with domain {domain!r} not found")

    def create(self, record: CNAMERecord) -> CNAMERecord:
        prepared = self._http.request_with_session_json("PUT", cname_path(record))
        self._http.send(prepared, expected_status=201, action="create CNAME records")

        logger.debug("Created cname %s -> %s", record.domain, record.target)
        return record

    def delete(self, domain: str) -> None:
        record = self.get(domain)

        prepared = self._http.request_with_session_json("DELETE", cname_path(record))
        self._http.send(prepared, expected_status=204, action="delete CNAME records")

        logger.debug("Deleted cname %s", domain)
