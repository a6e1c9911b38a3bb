"""
Shared HTTP plumbing for the catalog clients.
"""

import logging

import requests
from bs4 import BeautifulSoup

from .exceptions import CatalogRequestError

logger = logging.getLogger(__name__)


class CatalogClient:
    """
    Base class holding a requests session.

    No retries are attempted; a failed request is reported to the caller
    as CatalogRequestError.
    """

    def __init__(
        self,
        session: requests.Session | None = None,
        timeout: float | None = None,
        user_agent: str | None = None
    ):
        """
        Args:
            session: Existing session (a new one is created if None)
            timeout: Request timeout in seconds, None to wait indefinitely
            user_agent: Optional User-Agent header
        """
        self.session = session or requests.Session()
        self.timeout = timeout
        if user_agent:
            self.session.headers["User-Agent"] = user_agent

    def _get(self, url: str, params: dict | None = None) -> requests.Response:
        """GET a URL; transport failures raise CatalogRequestError."""
        logger.debug(f"GET {url} params={params}")
        try:
            return self.session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            raise CatalogRequestError(url, str(e)) from e

    def _get_html(self, url: str) -> BeautifulSoup:
        """GET a page and parse it; non-2xx statuses raise CatalogRequestError."""
        response = self._get(url)
        if not response.ok:
            raise CatalogRequestError(url, f"HTTP {response.status_code}")
        return BeautifulSoup(response.content, "html.parser")
