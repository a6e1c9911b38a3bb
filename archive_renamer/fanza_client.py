#!/usr/bin/env python3
"""
FANZA Client
Resolves doujin titles through the DMM affiliate API (v3 ItemList).

Features:
- Typed parsing of the ItemList response with pydantic
- Falls back to scraping the FANZA detail page <title> when the API
  response does not carry a title and maker
"""

import logging
import re

import requests
from pydantic import BaseModel, Field, ValidationError

from .catalog_client import CatalogClient
from .exceptions import PatternMismatchError
from .models import CatalogCredentials, Work

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.dmm.com/affiliate/v3/ItemList"
DEFAULT_DETAIL_URL = "https://www.dmm.co.jp/dc/doujin/-/detail/=/cid={content_id}"
SITE = "FANZA"

# "<title> (<maker>) - FANZA同人"
TITLE_PATTERN = re.compile(r"(.*)\((.*)\) - FANZA同人")


# =============================================================================
# ItemList response schema
# =============================================================================

class Maker(BaseModel):
    name: str


class ItemInfo(BaseModel):
    maker: list[Maker] = Field(min_length=1)


class Item(BaseModel):
    title: str
    iteminfo: ItemInfo


class ItemListResult(BaseModel):
    items: list[Item] = Field(min_length=1)


class ItemListResponse(BaseModel):
    """Only the fields needed for a Work; everything else is ignored."""
    result: ItemListResult

    def to_work(self) -> Work:
        item = self.result.items[0]
        return Work(title=item.title, maker=item.iteminfo.maker[0].name)


def build_api_params(content_id: str, credentials: CatalogCredentials) -> dict[str, str]:
    """Query parameters for an ItemList request."""
    return {
        "api_id": credentials.api_id,
        "affiliate_id": credentials.affiliate_id,
        "site": SITE,
        "cid": content_id,
    }


def parse_page_title(content_id: str, page_title: str) -> Work:
    """
    Split a FANZA page title into title and maker.

    Raises:
        PatternMismatchError: If the title does not have the expected shape
    """
    match = TITLE_PATTERN.search(page_title)
    if match is None or len(match.groups()) != 2:
        raise PatternMismatchError(content_id, page_title)
    return Work(title=match.group(1).strip(), maker=match.group(2).strip())


class FanzaClient(CatalogClient):
    """
    FANZA lookup with API-first, page-scrape fallback.

    Usage:
        client = FanzaClient()
        work = client.lookup("d_123456", credentials)
    """

    def __init__(
        self,
        api_url: str = DEFAULT_API_URL,
        detail_url: str = DEFAULT_DETAIL_URL,
        session: requests.Session | None = None,
        timeout: float | None = None,
        user_agent: str | None = None
    ):
        super().__init__(session=session, timeout=timeout, user_agent=user_agent)
        self.api_url = api_url
        self.detail_url = detail_url

    def detail_page_url(self, content_id: str) -> str:
        return self.detail_url.format(content_id=content_id)

    def lookup_api(self, content_id: str, credentials: CatalogCredentials) -> Work | None:
        """
        Query the affiliate API.

        Returns None when the response does not match the ItemList schema
        (bad JSON, missing keys, no items or no maker, or an error status).

        Raises:
            CatalogRequestError: On network failure
        """
        response = self._get(self.api_url, params=build_api_params(content_id, credentials))
        if not response.ok:
            logger.warning(f"DMM API returned HTTP {response.status_code} for {content_id}")
            return None

        try:
            return ItemListResponse.model_validate_json(response.content).to_work()
        except ValidationError as e:
            logger.debug(f"ItemList schema mismatch for {content_id}: {e}")
            return None

    def scrape(self, content_id: str) -> Work:
        """
        Read title and maker from the detail page <title>.

        Raises:
            CatalogRequestError: On network failure or non-2xx status
            PatternMismatchError: If the page title has an unexpected shape
        """
        soup = self._get_html(self.detail_page_url(content_id))
        page_title = soup.title.get_text() if soup.title else ""
        return parse_page_title(content_id, page_title)

    def lookup(self, content_id: str, credentials: CatalogCredentials) -> Work:
        """Resolve a content id, scraping the detail page if the API has nothing."""
        logger.info(f"Looking up {content_id} on FANZA")
        work = self.lookup_api(content_id, credentials)
        if work is not None:
            return work

        logger.info(f"API had no usable item for {content_id}, scraping detail page")
        return self.scrape(content_id)
