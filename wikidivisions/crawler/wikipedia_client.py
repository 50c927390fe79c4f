"""
Wikipedia page client.
Fetches pages from the reference site and parses them into BeautifulSoup documents.

One blocking GET per page, no retries: a failed fetch raises FetchError
and is expected to end the run.
"""
import logging
from typing import Optional
from urllib.parse import urljoin

import requests
from bs4 import BeautifulSoup

from wikidivisions.core.config import Config
from wikidivisions.core.exceptions import FetchError

logger = logging.getLogger(__name__)


class WikipediaClient:
    """
    Client for Wikipedia article pages.

    Relative links found on pages are resolved against ``base_url``;
    absolute URLs (other language editions) are fetched as-is.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[int] = None,
        user_agent: Optional[str] = None,
        settings: Optional[Config] = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: Reference site URL (defaults to config)
            timeout: Request timeout in seconds (defaults to config)
            user_agent: User-Agent header (defaults to config)
            settings: Config to take defaults from
        """
        settings = settings or Config()
        self.base_url = (base_url or settings.base_url).rstrip("/")
        self.timeout = timeout or settings.http_timeout
        self.session = requests.Session()
        self.session.headers.update({"User-Agent": user_agent or settings.user_agent})

    def absolute_url(self, href: str) -> str:
        """Resolve a page-relative href (e.g. "/wiki/Andorra") on the reference site."""
        return urljoin(self.base_url + "/", href)

    def fetch_html(self, url: str) -> str:
        """
        GET a page and return its HTML.

        Args:
            url: Absolute URL or site-relative path

        Returns:
            Decoded page content

        Raises:
            FetchError: On connection failure, timeout or non-2xx status
        """
        url = self.absolute_url(url)
        logger.debug(f"GET {url}")

        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.HTTPError as e:
            raise FetchError(
                f"Failed to fetch page: {e}",
                status_code=e.response.status_code if e.response is not None else None,
                url=url,
            ) from e
        except requests.RequestException as e:
            raise FetchError(f"Failed to fetch page: {e}", url=url) from e

        if not response.text:
            raise FetchError("Empty response body", status_code=response.status_code, url=url)

        return response.text

    def fetch_page(self, url: str) -> BeautifulSoup:
        """
        Fetch a page and parse it.

        Example:
            >>> with WikipediaClient() as client:
            ...     soup = client.fetch_page("/wiki/ISO_3166-2")
        """
        return BeautifulSoup(self.fetch_html(url), "html.parser")

    def close(self):
        """Close the HTTP session."""
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
