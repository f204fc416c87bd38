"""
Pi-hole API Client Package.

Structure:
    - client.py: Main PiholeClient facade
    - _http.py: Base HTTP client with request builders and status handling
    - modes.py: Session and token authentication modes
    - dns.py: Custom DNS host records
    - cname.py: CNAME records
    - groups.py: Groups
    - blocking.py: Ad-blocking toggle
    - token.py: Token-authenticated legacy API

Usage:
    from pihole_cli.api import PiholeClient, get_client

    client = get_client()
    records = client.list_dns_records()
"""

from .client import PiholeClient, get_client
from ._http import HTTPClient
from .modes import AuthMode, SessionAuth, TokenAuth
from .dns import DNSAPI
from .cname import CNAMEAPI
from .groups import GroupsAPI
from .blocking import BlockingAPI
from .token import TokenClient

__all__ = [
    # Main client
    "PiholeClient",
    "get_client",
    # HTTP layer
    "HTTPClient",
    # Authentication modes
    "AuthMode",
    "SessionAuth",
    "TokenAuth",
    # Domain APIs
    "DNSAPI",
    "CNAMEAPI",
    "GroupsAPI",
    "BlockingAPI",
    "TokenClient",
]
