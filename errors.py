# errors.py
"""Exceptions raised by the scraping pipeline. All of them end the run."""


class ScraperError(Exception):
    """Base class for every failure of a scrape run"""


class InvalidURLError(ScraperError):
    """The URL is malformed, has no host, or is not http/https"""


class UnsupportedURLError(ScraperError):
    """The URL is well formed but belongs to a site we have no scraper for"""


class FetchError(ScraperError):
    """The page could not be downloaded"""

    def __init__(self, message, url=None, status_code=None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class ExtractionError(ScraperError):
    """The page does not contain a recognizable recipe"""


class RecipeWriteError(ScraperError):
    """The recipe JSON file could not be written"""
