"""
Configuration for the Pi-hole client.

Settings come from explicit values or from environment variables:

    PIHOLE_URL               - Appliance URL (default: http://pi.hole)
    PIHOLE_PASSWORD          - Admin password (conflicts with PIHOLE_API_TOKEN)
    PIHOLE_API_TOKEN         - API token (conflicts with PIHOLE_PASSWORD)
    PIHOLE_CA_FILE           - CA bundle used to verify the appliance's TLS certificate
    PIHOLE_TIMEOUT           - Request timeout in seconds (default: none)
    CF_ACCESS_CLIENT_ID      - Cloudflare Access client id
    CF_ACCESS_CLIENT_SECRET  - Cloudflare Access client secret
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import requests

from . import __version__
from .auth import ServiceToken
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_URL = "http://pi.hole"
DEFAULT_USER_AGENT = f"pihole-cli/{__version__}"


@dataclass
class PiholeConfig:
    """Connection settings for a single Pi-hole appliance."""

    url: str = DEFAULT_URL
    password: str = ""
    api_token: str = ""
    user_agent: str = DEFAULT_USER_AGENT
    ca_file: Optional[str] = None
    cf_access_client_id: str = ""
    cf_access_client_secret: str = field(default="", repr=False)
    timeout: Optional[float] = None
    verify_ssl: bool = True

    def __post_init__(self):
        self.url = (self.url or "").rstrip("/")

    @classmethod
    def from_env(cls) -> "PiholeConfig":
        """Load configuration from environment variables."""
        timeout = os.environ.get("PIHOLE_TIMEOUT")
        try:
            parsed_timeout = float(timeout) if timeout else None
        except ValueError as e:
            raise ConfigurationError(f"PIHOLE_TIMEOUT must be a number, got {timeout!r}") from e

        return cls(
            url=os.environ.get("PIHOLE_URL", DEFAULT_URL),
            password=os.environ.get("PIHOLE_PASSWORD", ""),
            api_token=os.environ.get("PIHOLE_API_TOKEN", ""),
            ca_file=os.environ.get("PIHOLE_CA_FILE") or None,
            cf_access_client_id=os.environ.get("CF_ACCESS_CLIENT_ID", ""),
            cf_access_client_secret=os.environ.get("CF_ACCESS_CLIENT_SECRET", ""),
            timeout=parsed_timeout,
        )

    def validate(self) -> None:
        """
        Check that the settings describe exactly one way to authenticate.

        Raises:
            ConfigurationError: If password and API token are both set or both
                missing, or only half of the Cloudflare Access pair is set.
        """
        if self.password and self.api_token:
            raise ConfigurationError("password and api_token are mutually exclusive")
        if not self.password and not self.api_token:
            raise ConfigurationError("one of password or api_token must be set")

        if self.cf_access_client_id and not self.cf_access_client_secret:
            raise ConfigurationError(
                "cf_access_client_id is set but cf_access_client_secret is not"
            )
        if self.cf_access_client_secret and not self.cf_access_client_id:
            raise ConfigurationError(
                "cf_access_client_secret is set but cf_access_client_id is not"
            )

    @property
    def uses_token(self) -> bool:
        return bool(self.api_token)

    def service_token(self) -> Optional[ServiceToken]:
        """Cloudflare Access credentials, if both halves are configured."""
        if self.cf_access_client_id and self.cf_access_client_secret:
            return ServiceToken(self.cf_access_client_id, self.cf_access_client_secret)
        return None

    def build_session(self) -> requests.Session:
        """
        Create the HTTP session used for every request to the appliance.

        When ``ca_file`` is set the session trusts that bundle instead of the
        system store.
        """
        session = requests.Session()
        session.headers.update({"User-Agent": self.user_agent})

        if self.ca_file:
            ca_path = Path(self.ca_file)
            try:
                ca_path.read_bytes()
            except OSError as e:
                raise ConfigurationError(f"failed to read CA file {self.ca_file!r}: {e}") from e
            logger.debug("Trusting CA bundle %s", ca_path)
            session.verify = str(ca_path)
        else:
            session.verify = self.verify_ssl

        return session


def get_config() -> PiholeConfig:
    """Get configuration from the environment."""
    return PiholeConfig.from_env()
