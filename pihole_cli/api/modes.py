"""
Authentication modes.

A client talks to the appliance either with a password-backed session
(``SessionAuth``) or with an API token (``TokenAuth``). Both expose the same
operations; those a mode cannot serve raise
``NotImplementedForTokenClientError``.
"""

from abc import ABC, abstractmethod

from ._http import HTTPClient
from .blocking import BlockingAPI
from .cname import CNAMEAPI
from .dns import DNSAPI
from .groups import GroupsAPI
from .token import TokenClient
from ..exceptions import (
    ClientValidationError,
    NotFoundError,
    NotImplementedForTokenClientError,
    TokenRecordNotFoundError,
)
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


class AuthMode(ABC):
    """Operations available on a Pi-hole appliance."""

    name = ""

    def validate(self, http: HTTPClient) -> None:
        """Check mode-specific client fields. Called from ``PiholeClient.init``."""

    @abstractmethod
    def list_dns_records(self) -> DNSRecordList: ...

    @abstractmethod
    def get_dns_record(self, domain: str) -> DNSRecord: ...

    @abstractmethod
    def create_dns_record(self, record: DNSRecord) -> DNSRecord: ...

    @abstractmethod
    def delete_dns_record(self, domain: str) -> None: ...

    @abstractmethod
    def list_cname_records(self) -> CNAMERecordList: ...

    @abstractmethod
    def get_cname_record(self, domain: str) -> CNAMERecord: ...

    @abstractmethod
    def create_cname_record(self, record: CNAMERecord) -> CNAMERecord: ...

    @abstractmethod
    def delete_cname_record(self, domain: str) -> None: ...

    @abstractmethod
    def list_groups(self) -> GroupList: ...

    @abstractmethod
    def get_group(self, name: str) -> Group: ...

    @abstractmethod
    def get_group_by_id(self, group_id: int) -> Group: ...

    @abstractmethod
    def create_group(self, request: GroupCreateRequest) -> Group: ...

    @abstractmethod
    def update_group(self, request: GroupUpdateRequest) -> Group: ...

    @abstractmethod
    def delete_group(self, name: str) -> None: ...

    @abstractmethod
    def get_ad_blocker_status(self) -> EnableAdBlock: ...

    @abstractmethod
    def set_ad_block_enabled(self, enable: bool) -> EnableAdBlock: ...


class SessionAuth(AuthMode):
    """Password login; session sid/csrf on every request."""

    name = "session"

    def __init__(self, http: HTTPClient):
        self.dns = DNSAPI(http)
        self.cname = CNAMEAPI(http)
        self.groups = GroupsAPI(http)
        self.blocking = BlockingAPI(http)

    def validate(self, http: HTTPClient) -> None:
        if not http.config.password:
            raise ClientValidationError("client validation failed: password is not set")
        if not http.web_password:
            raise ClientValidationError("client validation failed: webPassword is not set")

    def list_dns_records(self) -> DNSRecordList:
        return self.dns.list()

    def get_dns_record(self, domain: str) -> DNSRecord:
        return self.dns.get(domain)

    def create_dns_record(self, record: DNSRecord) -> DNSRecord:
        return self.dns.create(record)

    def delete_dns_record(self, domain: str) -> None:
        self.dns.delete(domain)

    def list_cname_records(self) -> CNAMERecordList:
        return self.cname.list()

    def get_cname_record(self, domain: str) -> CNAMERecord:
        return self.cname.get(domain)

    def create_cname_record(self, record: CNAMERecord) -> CNAMERecord:
        return self.cname.create(record)

    def delete_cname_record(self, domain: str) -> None:
        self.cname.delete(domain)

    def list_groups(self) -> GroupList:
        return self.groups.list()

    def get_group(self, name: str) -> Group:
        return self.groups.get(name)

    def get_group_by_id(self, group_id: int) -> Group:
        return self.groups.get_by_id(group_id)

    def create_group(self, request: GroupCreateRequest) -> Group:
        return self.groups.create(request)

    def update_group(self, request: GroupUpdateRequest) -> Group:
        return self.groups.update(request)

    def delete_group(self, name: str) -> None:
        self.groups.delete(name)

    def get_ad_blocker_status(self) -> EnableAdBlock:
        return self.blocking.get_status()

    def set_ad_block_enabled(self, enable: bool) -> EnableAdBlock:
        return self.blocking.set_enabled(enable)


class TokenAuth(AuthMode):
    """
    API token on the legacy API.

    Only get/create/delete of DNS and CNAME records are served; everything
    else raises ``NotImplementedForTokenClientError``.
    """

    name = "token"

    def __init__(self, token_client: TokenClient):
        self._client = token_client

    def list_dns_records(self) -> DNSRecordList:
        raise NotImplementedForTokenClientError("list dns records")

    def get_dns_record(self, domain: str) -> DNSRecord:
        try:
            return self._client.local_dns.get(domain)
        except TokenRecordNotFoundError as e:
            raise NotFoundError(f"dns record with domain {domain!r} not found") from e

    def create_dns_record(self, record: DNSRecord) -> DNSRecord:
        return self._client.local_dns.create(record.domain, record.ip)

    def delete_dns_record(self, domain: str) -> None:
        try:
            self._client.local_dns.delete(domain)
        except TokenRecordNotFoundError as e:
            raise NotFoundError(f"dns record with domain {domain!r} not found") from e

    def list_cname_records(self) -> CNAMERecordList:
        raise NotImplementedForTokenClientError("list cname records")

    def get_cname_record(self, domain: str) -> CNAMERecord:
        try:
            return self._client.local_cname.get(domain)
        except TokenRecordNotFoundError as e:
            raise NotFoundError(f"cname with domain {domain!r} not found") from e

    def create_cname_record(self, record: CNAMERecord) -> CNAMERecord:
        return self._client.local_cname.create(record.domain, record.target)

    def delete_cname_record(self, domain: str) -> None:
        try:
            self._client.local_cname.delete(domain)
        except TokenRecordNotFoundError as e:
            raise NotFoundError(f"cname with domain {domain!r} not found") from e

    def list_groups(self) -> GroupList:
        raise NotImplementedForTokenClientError("list groups")

    def get_group(self, name: str) -> Group:
        raise NotImplementedForTokenClientError("get groups")

    def get_group_by_id(self, group_id: int) -> Group:
        raise NotImplementedForTokenClientError("get group")

    def create_group(self, request: GroupCreateRequest) -> Group:
        raise NotImplementedForTokenClientError("create group")

    def update_group(self, request: GroupUpdateRequest) -> Group:
        raise NotImplementedForTokenClientError("update group")

    def delete_group(self, name: str) -> None:
        raise NotImplementedForTokenClientError("delete group")

    def get_ad_blocker_status(self) -> EnableAdBlock:
        raise NotImplementedForTokenClientError("get ad blocker status")

    def set_ad_block_enabled(self, enable: bool) -> EnableAdBlock:
        raise NotImplementedForTokenClientError("set ad blocker status")
