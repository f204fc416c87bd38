"""
Authentication module for the Pi-hole client.

Handles:
- Legacy web password derivation (double SHA-256)
- Cloudflare Access service token headers
- Session login against /api/auth and on-demand re-login
"""

import hashlib
import logging
import threading
from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING

from .exceptions import (
    APIError,
    ClientValidationError,
    LoginError,
    ServiceTokenError,
)

if TYPE_CHECKING:
    import requests
    from .api._http import HTTPClient

logger = logging.getLogger(__name__)

AUTH_PATH = "/api/auth"


def double_hash256(data: str) -> str:
    """
    Hash ``data`` with SHA-256, hex-encode, then hash the hex string again.

    This is the "web password" accepted by the query-authenticated
    ``auth=`` parameter of the legacy API.
    """
    first = hashlib.sha256(data.encode("utf-8")).hexdigest()
    return hashlib.sha256(first.encode("utf-8")).hexdigest()


class ServiceToken:
    """Cloudflare Access service token attached to every outbound request."""

    CLIENT_ID_HEADER = "CF-Access-Client-Id"
    CLIENT_SECRET_HEADER = "CF-Access-Client-Secret"

    def __init__(self, client_id: str, client_secret: str):
        self.client_id = client_id
        self.client_secret = client_secret

    def apply(self, request: "requests.Request") -> None:
        """
        Set the access headers on ``request``.

        Raises:
            ServiceTokenError: If the id or secret is empty.
        """
        if not self.client_id:
            raise ServiceTokenError("service token client id is empty")
        if not self.client_secret:
            raise ServiceTokenError("service token client secret is empty")

        request.headers[self.CLIENT_ID_HEADER] = self.client_id
        request.headers[self.CLIENT_SECRET_HEADER] = self.client_secret

    def __repr__(self) -> str:
        return f"ServiceToken(client_id={self.client_id!r})"


@dataclass(frozen=True)
class SessionCredentials:
    """Session identifier and CSRF token issued by the appliance."""

    sid: str
    csrf: str


class SessionManager:
    """
    Owns the appliance session used by password-authenticated requests.

    The session is created lazily. ``ensure()`` logs in only when the
    identifier or CSRF token is missing; the check and the login run under
    one lock, so concurrent first callers trigger a single login.
    """

    def __init__(self, http: "HTTPClient", password: str):
        self._http = http
        self._password = password
        self._lock = threading.Lock()
        self._sid = ""
        self._csrf = ""

    @property
    def authenticated(self) -> bool:
        return bool(self._sid and self._csrf)

    @property
    def credentials(self) -> Optional[SessionCredentials]:
        if not self.authenticated:
            return None
        return SessionCredentials(self._sid, self._csrf)

    def login(self) -> SessionCredentials:
        """
        Create a new session, replacing any existing one.

        Raises:
            LoginError: If the request, status or body is not usable.
            ClientValidationError: If the appliance returned no sid or csrf.
        """
        with self._lock:
            return self._login()

    def ensure(self) -> SessionCredentials:
        """Return the current session, logging in first if there is none."""
        with self._lock:
            if not self.authenticated:
                return self._login()
            return SessionCredentials(self._sid, self._csrf)

    def invalidate(self) -> None:
        with self._lock:
            self._sid = ""
            self._csrf = ""

    def _login(self) -> SessionCredentials:
        logger.debug("Logging in to %s", self._http.base_url)

        try:
            prepared = self._http.request_json("POST", AUTH_PATH, {"password": self._password})
            response = self._http.send(prepared, expected_status=200, action="login")
            data = self._http.json_object(response)
        except APIError as e:
            raise LoginError(f"login failed: {e}") from e

        session = data.get("session")
        if not isinstance(session, dict):
            raise LoginError("login failed: unable to parse login response, missing session")

        if not session.get("valid", False):
            # The appliance's own verdict is not enforced; the sid/csrf checks below decide.
            logger.warning(
                "Appliance marked the new session as invalid: %s",
                session.get("message") or "no message",
            )

        self._sid = session.get("sid") or ""
        self._csrf = session.get("csrf") or ""

        if not self._csrf:
            raise ClientValidationError("client validation failed: token not set")
        if not self._sid:
            raise ClientValidationError("client validation failed: sessionID not set")

        logger.debug("Session established (validity=%ss)", session.get("validity"))
        return SessionCredentials(self._sid, self._csrf)
