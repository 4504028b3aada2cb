# scrapers/fetcher.py
import logging
import requests
from bs4 import UnicodeDammit

import config
from errors import FetchError

logger = logging.getLogger(__name__)


def fetch_html(url, headers=None, timeout=None):
    """
    Download a page with a single GET request

    Args:
        url (str): Page URL
        headers (dict, optional): Request headers, defaults to config.DEFAULT_HEADERS
        timeout (float, optional): Timeout in seconds, defaults to config.REQUEST_TIMEOUT

    Returns:
        str: HTML content of the page

    Raises:
        FetchError: On a network error or a non-success status code
    """
    headers = headers or config.DEFAULT_HEADERS
    timeout = timeout or config.REQUEST_TIMEOUT

    logger.info(f"Fetching {url}")

    try:
        response = requests.get(url, headers=headers, timeout=timeout)
    except requests.RequestException as e:
        logger.error(f"Failed to access URL: {url} - {str(e)}")
        raise FetchError(f"Failed to access URL {url}: {e}", url=url) from e

    with response:
        if not response.ok:
            logger.error(f"Failed to access URL: {url}, Status: {response.status_code}")
            raise FetchError(
                f"Failed to access URL {url}: HTTP {response.status_code}",
                url=url,
                status_code=response.status_code
            )

        html_content = decode_html(response)
        logger.debug(f"Fetched {len(html_content)} characters from {url}")
        return html_content


def decode_html(response):
    """
    Decode a response body to text

    requests falls back to ISO-8859-1 for text/html without a charset in the
    Content-Type header. In that case the page's own <meta charset> is used,
    then UTF-8, then a detected encoding.
    """
    content_type = response.headers.get('Content-Type', '')
    if 'charset' in content_type.lower():
        return response.text

    dammit = UnicodeDammit(response.content, is_html=True, user_encodings=['utf-8'])
    if dammit.unicode_markup is None:
        logger.warning(f"Could not detect page encoding, using {response.apparent_encoding}")
        response.encoding = response.apparent_encoding
        return response.text

    logger.debug(f"Detected page encoding: {dammit.original_encoding}")
    return dammit.unicode_markup
