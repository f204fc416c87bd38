"""
Shared fixtures: a real requests.Session whose ``send`` is mocked.
"""

from unittest.mock import MagicMock

import pytest
import requests

from pihole_cli.api import PiholeClient
from pihole_cli.config import PiholeConfig
from tests.helpers import BASE_URL


@pytest.fixture
def session():
    """Transport whose network call is replaced by a mock."""
    s = requests.Session()
    s.send = MagicMock()
    return s


@pytest.fixture
def config():
    return PiholeConfig(url=BASE_URL, password="secret")


@pytest.fixture
def token_config():
    return PiholeConfig(url=BASE_URL, api_token="api-token-123")


@pytest.fixture
def client(config, session):
    """Session-mode client."""
    return PiholeClient(config, session)


@pytest.fixture
def token_client(token_config, session):
    """Token-mode client."""
    return PiholeClient(token_config, session)
