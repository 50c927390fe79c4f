"""
Tests for the Wikipedia page client (wikidivisions/crawler/wikipedia_client.py)

HTTP calls are mocked at the session level.
"""

from unittest.mock import MagicMock, patch

import pytest
import requests

from wikidivisions.core.config import Config
from wikidivisions.core.exceptions import FetchError
from wikidivisions.crawler.wikipedia_client import WikipediaClient


def mock_response(text="<html><body><p>ok</p></body></html>", status_code=200):
    response = MagicMock()
    response.text = text
    response.status_code = status_code
    if status_code >= 400:
        error = requests.HTTPError(f"{status_code} Error")
        error.response = response
        response.raise_for_status.side_effect = error
    return response


class TestWikipediaClientInit:
    """Tests for WikipediaClient initialization."""

    def test_init_from_config(self):
        client = WikipediaClient(settings=Config(http_timeout=12, user_agent="test-agent/1.0"))
        assert client.timeout == 12
        assert client.session.headers["User-Agent"] == "test-agent/1.0"

    def test_explicit_arguments_win(self):
        client = WikipediaClient(base_url="https://fr.wikipedia.org/", timeout=5)
        assert client.base_url == "https://fr.wikipedia.org"
        assert client.timeout == 5


class TestAbsoluteUrl:
    """Tests for absolute_url."""

    def test_relative_path(self):
        client = WikipediaClient(base_url="https://en.wikipedia.org")
        assert client.absolute_url("/wiki/ISO_3166-2:AD") == "https://en.wikipedia.org/wiki/ISO_3166-2:AD"

    def test_absolute_url_unchanged(self):
        client = WikipediaClient(base_url="https://en.wikipedia.org")
        url = "https://fr.wikipedia.org/wiki/Bretagne"
        assert client.absolute_url(url) == url


class TestFetchPage:
    """Tests for fetch_html and fetch_page."""

    def test_fetch_page_parses_html(self):
        client = WikipediaClient(base_url="https://en.wikipedia.org", timeout=7)
        with patch.object(client.session, "get", return_value=mock_response()) as get:
            soup = client.fetch_page("/wiki/ISO_3166-2")

        get.assert_called_once_with("https://en.wikipedia.org/wiki/ISO_3166-2", timeout=7)
        assert soup.p.get_text() == "ok"

    def test_http_error(self):
        client = WikipediaClient(base_url="https://en.wikipedia.org")
        with patch.object(client.session, "get", return_value=mock_response(status_code=404)):
            with pytest.raises(FetchError) as exc_info:
                client.fetch_html("/wiki/Missing")

        assert exc_info.value.status_code == 404
        assert exc_info.value.url == "https://en.wikipedia.org/wiki/Missing"
        assert "Status: 404" in str(exc_info.value)

    def test_connection_error(self):
        client = WikipediaClient(base_url="https://en.wikipedia.org")
        with patch.object(client.session, "get", side_effect=requests.ConnectionError("refused")):
            with pytest.raises(FetchError, match="refused"):
                client.fetch_html("/wiki/ISO_3166-2")

    def test_empty_body(self):
        client = WikipediaClient(base_url="https://en.wikipedia.org")
        with patch.object(client.session, "get", return_value=mock_response(text="")):
            with pytest.raises(FetchError, match="Empty response body"):
                client.fetch_html("/wiki/ISO_3166-2")

    def test_context_manager_closes_session(self):
        client = WikipediaClient()
        with patch.object(client.session, "close") as close:
            with client:
                pass
        close.assert_called_once()
