# scrapers/__init__.py
import logging
from abc import ABC, abstractmethod
from urllib.parse import urlparse

import config
from errors import InvalidURLError
from scrapers.fetcher import fetch_html

logger = logging.getLogger(__name__)


def validate_url(url):
    """
    Check that a URL is usable for scraping

    Args:
        url (str): URL as given by the user

    Returns:
        str: The trimmed URL

    Raises:
        InvalidURLError: If the URL is empty, has no host or is not http/https
    """
    url = (url or "").strip()
    if not url:
        raise InvalidURLError("No URL given")

    try:
        parsed = urlparse(url)
    except ValueError as e:
        raise InvalidURLError(f"Invalid URL format: {url}") from e

    if parsed.scheme not in ('http', 'https'):
        raise InvalidURLError(f"URL must use http or https scheme: {url}")
    if not parsed.hostname:
        raise InvalidURLError(f"URL must contain a valid host: {url}")

    return url


class BaseScraper(ABC):
    """Abstract base class for all site scrapers"""

    site_name = None
    domains = ()

    def __init__(self, headers=None):
        self.headers = dict(headers or config.DEFAULT_HEADERS)

    def supports(self, url):
        """
        Determine if the URL belongs to this site

        Args:
            url (str): Recipe URL

        Returns:
            bool: True if the URL's host is one of the site's domains
        """
        hostname = urlparse(url).hostname or ""
        return hostname.lower() in self.domains

    def scrape(self, url):
        """
        Fetch a recipe page and extract the recipe from it

        Args:
            url (str): Recipe URL

        Returns:
            Recipe: Extracted recipe
        """
        logger.info(f"Scraping {self.site_name} recipe: {url}")
        html_content = fetch_html(url, headers=self.headers)
        return self.extract_recipe(html_content, url)

    @abstractmethod
    def extract_recipe(self, html_content, url):
        """
        Extract structured recipe information from HTML

        Args:
            html_content (str): HTML content of the recipe page
            url (str): URL of the recipe, used to resolve relative links

        Returns:
            Recipe: Structured recipe information
        """
        pass
