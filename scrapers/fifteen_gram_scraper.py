from config import SUPPORTED_SITES
from scrapers.css_selector_scraper import CssSelectorScraper


class FifteenGramScraper(CssSelectorScraper):
    """Scraper for the 15gram.be recipe website"""

    def __init__(self, headers=None):
        """Initialize the 15gram scraper"""
        site = SUPPORTED_SITES['15gram.be']
        super().__init__(site['name'], site['domains'], site['selectors'], headers=headers)
