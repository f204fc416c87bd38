"""
Base HTTP client for the Pi-hole API.

Builds authenticated requests, sends them and checks the status code
each endpoint documents as success.
"""

import logging
from typing import Optional, Dict, Any, List, Union
from urllib.parse import urlsplit

import requests

from ..auth import SessionManager, double_hash256
from ..config import PiholeConfig, get_config
from ..exceptions import (
    APIError,
    ClientValidationError,
    ProtocolError,
    UnexpectedStatusError,
)

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class HTTPClient:
    """
    Base HTTP client for the Pi-hole API.

    Request builders:
    - request: unauthenticated, form encoded
    - request_json: unauthenticated, JSON body
    - request_with_session: session cookie plus ``token`` form field
    - request_with_session_json: session headers plus JSON body
    - request_with_auth: ``auth`` query parameter

    Every builder attaches the Cloudflare Access headers when configured.
    A failure to attach them fails the builder; no request is returned.
    """

    def __init__(
        self,
        config: Optional[PiholeConfig] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the HTTP client.

        Args:
            config: Optional configuration. Loaded from the environment if not provided.
            session: Optional pre-built requests session (transport).
        """
        self.config = config or get_config()
        self._session = session
        self.service_token = self.config.service_token()
        self.web_password = double_hash256(self.config.password) if self.config.password else ""
        self.sessions: Optional[SessionManager] = None
        if self.config.password:
            self.sessions = SessionManager(self, self.config.password)

    @property
    def session(self) -> requests.Session:
        """Get or create the HTTP session."""
        if self._session is None:
            self._session = self.config.build_session()
        return self._session

    @property
    def base_url(self) -> str:
        return self.config.url

    def url_for(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def _build(
        self,
        method: str,
        path: str,
        data: Optional[Dict[str, Any]] = None,
        json_data: Optional[Any] = None,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> requests.PreparedRequest:
        request = requests.Request(
            method=method,
            url=self.url_for(path),
            data=data,
            json=json_data,
            params=params,
            headers=dict(headers or {}),
        )
        if self.service_token is not None:
            self.service_token.apply(request)
        return self.session.prepare_request(request)

    def request(
        self,
        method: str,
        path: str,
        data: Optional[Dict[str, Any]] = None,
    ) -> requests.PreparedRequest:
        """Build an unauthenticated, form encoded request."""
        return self._build(
            method,
            path,
            data=data or {},
            headers={"Content-Type": FORM_CONTENT_TYPE},
        )

    def request_json(
        self,
        method: str,
        path: str,
        body: Optional[Any] = None,
    ) -> requests.PreparedRequest:
        """Build an unauthenticated request with a JSON body."""
        return self._build(method, path, json_data=body)

    def _require_sessions(self) -> SessionManager:
        if self.sessions is None:
            raise ClientValidationError("client validation failed: password is not set")
        return self.sessions

    def request_with_session(
        self,
        method: str,
        path: str,
        data: Optional[Dict[str, Any]] = None,
    ) -> requests.PreparedRequest:
        """
        Build a form encoded request authenticated with the current session.

        Logs in first if there is no session. The CSRF token is sent as the
        ``token`` form field; keys in ``data`` take precedence.
        """
        credentials = self._require_sessions().ensure()

        form: Dict[str, Any] = {"token": credentials.csrf}
        if data:
            form.update(data)

        return self._build(
            method,
            path,
            data=form,
            headers={
                "Content-Type": FORM_CONTENT_TYPE,
                "Cookie": f"PHPSESSID={credentials.sid}",
            },
        )

    def request_with_session_json(
        self,
        method: str,
        path: str,
        body: Optional[Any] = None,
    ) -> requests.PreparedRequest:
        """Build a JSON request authenticated with the current session."""
        credentials = self._require_sessions().ensure()

        return self._build(
            method,
            path,
            json_data=body,
            headers={
                "X-FTL-SID": credentials.sid,
                "X-FTL-CSRF": credentials.csrf,
            },
        )

    def request_with_auth(
        self,
        method: str,
        path: str,
        data: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
        auth: Optional[str] = None,
    ) -> requests.PreparedRequest:
        """
        Build a request authenticated by the ``auth`` query parameter.

        Uses the hashed web password unless ``auth`` is given.
        """
        query: Dict[str, Any] = dict(params or {})
        query["auth"] = auth if auth is not None else self.web_password

        return self._build(method, path, data=data or {}, params=query)

    def send(
        self,
        prepared: requests.PreparedRequest,
        expected_status: Union[int, List[int]] = 200,
        action: str = "complete request",
    ) -> requests.Response:
        """
        Execute a prepared request.

        Args:
            prepared: Request returned by one of the builders
            expected_status: Status code(s) the endpoint documents as success
            action: Short description used in error messages

        Raises:
            APIError: On transport failure
            UnexpectedStatusError: On any other status code
        """
        if isinstance(expected_status, int):
            expected_status = [expected_status]

        # Query strings may carry the web password or API token.
        path = urlsplit(prepared.url or "").path
        logger.debug("Request: %s %s", prepared.method, path)

        settings = self.session.merge_environment_settings(
            prepared.url, {}, None, self.session.verify, None
        )
        try:
            response = self.session.send(prepared, timeout=self.config.timeout, **settings)
        except requests.exceptions.ConnectionError as e:
            raise APIError(f"Connection failed: {e}") from e
        except requests.exceptions.Timeout as e:
            raise APIError(f"Request timed out: {e}") from e
        except requests.exceptions.RequestException as e:
            raise APIError(f"Request failed: {e}") from e

        logger.debug("Response: %s", response.status_code)

        if response.status_code not in expected_status:
            raise UnexpectedStatusError(
                f"failed to {action}, got status code {response.status_code}",
                status_code=response.status_code,
                details=response.text,
            )

        return response

    def json(self, response: requests.Response) -> Any:
        """Decode a JSON response body."""
        try:
            return response.json()
        except ValueError as e:
            raise ProtocolError(
                f"invalid JSON in response: {e}",
                status_code=response.status_code,
            ) from e

    def json_object(self, response: requests.Response) -> Dict[str, Any]:
        """Decode a response body that must be a JSON object."""
        data = self.json(response)
        if not isinstance(data, dict):
            raise ProtocolError(
                f"expected a JSON object, got {type(data).__name__}",
                status_code=response.status_code,
            )
        return data

    def close(self) -> None:
        """Close the HTTP session."""
        if self._session:
            self._session.close()
            self._session = None

    def __enter__(self) -> "HTTPClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
