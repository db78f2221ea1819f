"""Pytest fixtures for the user directory client."""

from unittest.mock import Mock

import pytest
import requests

from web.config import WebSettings
from web.user_client import UserApiClient


@pytest.fixture
def api_url() -> str:
    return "http://api.test"


@pytest.fixture
def session() -> Mock:
    """Stand-in for requests.Session; no network access."""
    return Mock(spec=requests.Session)


@pytest.fixture
def client(session: Mock, api_url: str) -> UserApiClient:
    return UserApiClient(session=session, config=WebSettings(api_url=api_url, request_timeout=5.0))
