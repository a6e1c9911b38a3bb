#!/usr/bin/env python3
"""
DLsite Client
Scrapes title and circle name from a DLsite maniax work page.
"""

import logging

import requests
from bs4 import BeautifulSoup

from .catalog_client import CatalogClient
from .models import Work

logger = logging.getLogger(__name__)

DEFAULT_DETAIL_URL = "https://www.dlsite.com/maniax/work/=/product_id/{product_id}.html"

TITLE_SELECTOR = "h1#work_name>a"
MAKER_SELECTOR = "span.maker_name>a"


def _select_text(soup: BeautifulSoup, selector: str) -> str:
    return "".join(node.get_text() for node in soup.select(selector)).strip()


class DLsiteClient(CatalogClient):
    """
    DLsite work page scraper.

    Usage:
        client = DLsiteClient()
        work = client.lookup("RJ123456")
    """

    def __init__(
        self,
        detail_url: str = DEFAULT_DETAIL_URL,
        session: requests.Session | None = None,
        timeout: float | None = None,
        user_agent: str | None = None
    ):
        super().__init__(session=session, timeout=timeout, user_agent=user_agent)
        self.detail_url = detail_url

    def detail_page_url(self, product_id: str) -> str:
        return self.detail_url.format(product_id=product_id)

    def lookup(self, product_id: str) -> Work:
        """
        Fetch the work page for a product id.

        Missing nodes yield empty fields rather than an error.

        Raises:
            CatalogRequestError: On network failure or non-2xx status
        """
        url = self.detail_page_url(product_id)
        logger.info(f"Looking up {product_id} on DLsite")
        soup = self._get_html(url)

        work = Work(
            title=_select_text(soup, TITLE_SELECTOR),
            maker=_select_text(soup, MAKER_SELECTOR),
        )
        if not work.is_complete:
            logger.warning(f"DLsite page for {product_id} is missing title or maker")
        return work
