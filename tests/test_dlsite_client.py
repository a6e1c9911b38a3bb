"""
Tests for the DLsite work page scraper
"""
import pytest
import requests

from archive_renamer.dlsite_client import DLsiteClient
from archive_renamer.exceptions import CatalogRequestError

WORK_URL = "https://www.dlsite.com/maniax/work/=/product_id/RJ123456.html"

WORK_PAGE = """
<html><body>
  <h1 id="work_name"><a href="#">Title2</a></h1>
  <table><tr><td><span class="maker_name"><a href="#">Maker2</a></span></td></tr></table>
</body></html>
"""


def test_lookup_extracts_title_and_maker(fake_session, response_factory):
    fake_session.routes[WORK_URL] = response_factory(WORK_PAGE)
    client = DLsiteClient(session=fake_session)

    work = client.lookup("RJ123456")

    assert work.title == "Title2"
    assert work.maker == "Maker2"


def test_lookup_handles_utf8_page(fake_session, response_factory):
    page = '<meta charset="utf-8"><h1 id="work_name"><a>魔法少女</a></h1><span class="maker_name"><a>サークル</a></span>'
    fake_session.routes[WORK_URL] = response_factory(page)

    work = DLsiteClient(session=fake_session).lookup("RJ123456")

    assert work.title == "魔法少女"
    assert work.maker == "サークル"


def test_missing_nodes_give_empty_fields(fake_session, response_factory):
    """Structure changes are not an error at this level"""
    fake_session.routes[WORK_URL] = response_factory("<html><h1>Something else</h1></html>")

    work = DLsiteClient(session=fake_session).lookup("RJ123456")

    assert work.title == ""
    assert work.maker == ""
    assert not work.is_complete


def test_http_error_status_is_fatal(fake_session, response_factory):
    fake_session.routes[WORK_URL] = response_factory("not found", status_code=404)

    with pytest.raises(CatalogRequestError) as exc_info:
        DLsiteClient(session=fake_session).lookup("RJ123456")

    assert exc_info.value.url == WORK_URL
    assert "404" in exc_info.value.details


def test_network_error_is_fatal(fake_session):
    fake_session.get.side_effect = requests.ConnectionError("connection refused")

    with pytest.raises(CatalogRequestError):
        DLsiteClient(session=fake_session).lookup("RJ123456")


def test_custom_url_template_and_timeout(fake_session, response_factory):
    fake_session.routes["http://mirror/RJ123456"] = response_factory(WORK_PAGE)
    client = DLsiteClient(detail_url="http://mirror/{product_id}", session=fake_session, timeout=5)

    client.lookup("RJ123456")

    fake_session.get.assert_called_once_with("http://mirror/RJ123456", params=None, timeout=5)


def test_user_agent_header(fake_session):
    DLsiteClient(session=fake_session, user_agent="archive-renamer/1.0")

    assert fake_session.headers["User-Agent"] == "archive-renamer/1.0"
