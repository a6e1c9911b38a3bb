"""
Shared fixtures: a fake requests session keyed by URL
"""
import json
from unittest.mock import MagicMock

import pytest

from archive_renamer.models import CatalogCredentials


def make_response(body, status_code=200):
    """Build a mock requests.Response from str/bytes/dict."""
    if isinstance(body, dict):
        body = json.dumps(body)
    if isinstance(body, str):
        body = body.encode("utf-8")
    response = MagicMock()
    response.content = body
    response.status_code = status_code
    response.ok = status_code < 400
    return response


@pytest.fixture
def credentials():
    return CatalogCredentials(api_id="API", affiliate_id="AFF-990")


@pytest.fixture
def fake_session():
    """
    Session whose get() answers from a {url: response} routing table.

    Usage:
        fake_session.routes["https://..."] = make_response("<html>...")
    """
    session = MagicMock()
    session.headers = {}
    session.routes = {}

    def get(url, params=None, timeout=None):
        if url not in session.routes:
            raise AssertionError(f"Unexpected request: {url}")
        return session.routes[url]

    session.get.side_effect = get
    return session


@pytest.fixture
def response_factory():
    return make_response
