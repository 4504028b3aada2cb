# scrapers/registry.py
import logging
from urllib.parse import urlparse

from errors import UnsupportedURLError
from scrapers import validate_url
from scrapers.fifteen_gram_scraper import FifteenGramScraper

logger = logging.getLogger(__name__)

# Scraper class for each supported site, keyed by the site's main domain
SCRAPERS = {
    '15gram.be': FifteenGramScraper,
}


def get_scraper_for_url(url):
    """
    Pick the scraper for a recipe URL without touching the network

    Args:
        url (str): Recipe URL

    Returns:
        BaseScraper: Scraper instance for the URL's site

    Raises:
        InvalidURLError: If the URL is malformed
        UnsupportedURLError: If no scraper handles the URL's domain
    """
    url = validate_url(url)

    for domain, scraper_class in SCRAPERS.items():
        scraper = scraper_class()
        if scraper.supports(url):
            logger.debug(f"Using {scraper.site_name} scraper ({domain}) for {url}")
            return scraper

    hostname = urlparse(url).hostname
    logger.error(f"No scraper available for domain: {hostname}")
    raise UnsupportedURLError(
        f"Unsupported domain '{hostname}'. Supported: {', '.join(sorted(SCRAPERS))}"
    )
