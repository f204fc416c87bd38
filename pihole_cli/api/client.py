"""
Pi-hole API Client - Main facade for all API operations.

Selects the authentication mode from the configuration and forwards each
operation to it.
"""

import logging
from typing import Optional

import requests

from ..auth import SessionCredentials
from ..config import PiholeConfig, get_config
from ..exceptions import ClientValidationError
from ..models import (
    CNAMERecord,
    CNAMERecordList,
    DNSRecord,
    DNSRecordList,
    EnableAdBlock,
    Group,
    GroupCreateRequest,
    GroupList,
    GroupUpdateRequest,
)
from ._http import HTTPClient
from .modes import AuthMode, SessionAuth, TokenAuth
from .token import TokenClient

logger = logging.getLogger(__name__)


class PiholeClient:
    """
    Client for a single Pi-hole appliance.

    Usage:
        client = PiholeClient(PiholeConfig(url="http://pi.hole", password="secret"))
        client.init()
        records = client.list_dns_records()
        client.create_dns_record(DNSRecord(domain="nas.lan", ip="10.0.0.5"))

    With ``api_token`` set the client runs in token mode; operations the
    legacy API cannot serve raise ``NotImplementedForTokenClientError``.
    """

    def __init__(
        self,
        config: Optional[PiholeConfig] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the API client.

        Args:
            config: Optional configuration. Loaded from the environment if not provided.
            session: Optional requests session used as transport.
        """
        self._http = HTTPClient(config, session)

        if self._http.config.uses_token:
            self.mode: AuthMode = TokenAuth(TokenClient(self._http, self._http.config.api_token))
        else:
            self.mode = SessionAuth(self._http)

        logger.debug("Using %s authentication for %s", self.mode.name, self._http.base_url)

    @property
    def config(self) -> PiholeConfig:
        return self._http.config

    @property
    def url(self) -> str:
        return self._http.base_url

    @property
    def http(self) -> HTTPClient:
        return self._http

    def init(self) -> None:
        """
        Validate the fields required before talking to the appliance.

        Raises:
            ClientValidationError: If the URL, or in session mode the password, is missing.
        """
        if not self._http.base_url:
            raise ClientValidationError("client validation failed: Pi-hole URL is not set")

        self.mode.validate(self._http)

    def login(self) -> SessionCredentials:
        """Create a new session (session mode only)."""
        if self._http.sessions is None:
            raise ClientValidationError("client validation failed: password is not set")
        return self._http.sessions.login()

    # ========== DNS records ==========

    def list_dns_records(self) -> DNSRecordList:
        """List custom DNS records."""
        return self.mode.list_dns_records()

    def get_dns_record(self, domain: str) -> DNSRecord:
        """Get the DNS record for ``domain``; raises NotFoundError if absent."""
        return self.mode.get_dns_record(domain)

    def create_dns_record(self, record: DNSRecord) -> DNSRecord:
        return self.mode.create_dns_record(record)

    def delete_dns_record(self, domain: str) -> None:
        self.mode.delete_dns_record(domain)

    # ========== CNAME records ==========

    def list_cname_records(self) -> CNAMERecordList:
        """List CNAME records."""
        return self.mode.list_cname_records()

    def get_cname_record(self, domain: str) -> CNAMERecord:
        """Get the CNAME record for ``domain``; raises NotFoundError if absent."""
        return self.mode.get_cname_record(domain)

    def create_cname_record(self, record: CNAMERecord) -> CNAMERecord:
        return self.mode.create_cname_record(record)

    def delete_cname_record(self, domain: str) -> None:
        self.mode.delete_cname_record(domain)

    # ========== Groups ==========

    def list_groups(self) -> GroupList:
        return self.mode.list_groups()

    def get_group(self, name: str) -> Group:
        return self.mode.get_group(name)

    def get_group_by_id(self, group_id: int) -> Group:
        return self.mode.get_group_by_id(group_id)

    def create_group(self, request: GroupCreateRequest) -> Group:
        return self.mode.create_group(request)

    def update_group(self, request: GroupUpdateRequest) -> Group:
        return self.mode.update_group(request)

    def delete_group(self, name: str) -> None:
        self.mode.delete_group(name)

    # ========== Ad blocking ==========

    def get_ad_blocker_status(self) -> EnableAdBlock:
        return self.mode.get_ad_blocker_status()

    def set_ad_block_enabled(self, enable: bool) -> EnableAdBlock:
        return self.mode.set_ad_block_enabled(enable)

    def close(self) -> None:
        """Close the client session."""
        self._http.close()

    def __enter__(self) -> "PiholeClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


def get_client(config: Optional[PiholeConfig] = None) -> PiholeClient:
    """
    Build a validated client.

    Args:
        config: Optional configuration. Loaded from the environment if not provided.

    Returns:
        Initialized PiholeClient
    """
    config = config or get_config()
    config.validate()

    client = PiholeClient(config, config.build_session())
    client.init()
    return client
