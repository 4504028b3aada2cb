# conftest.py - shared pytest fixtures
from pathlib import Path

import pytest
import requests

FIXTURES_DIR = Path(__file__).parent / "data" / "fixtures"

RECIPE_URL = "https://15gram.be/recepten/shakshuka-met-feta"


def make_response(text, status_code=200, url=RECIPE_URL, content_type='text/html; charset=utf-8'):
    """
    Build a real requests.Response without touching the network

    The body is always UTF-8 encoded; the encoding requests would pick
    from the Content-Type header is applied the same way requests does.
    """
    response = requests.Response()
    response.status_code = status_code
    response._content = text.encode('utf-8')
    response._content_consumed = True
    response.headers['Content-Type'] = content_type
    response.encoding = requests.utils.get_encoding_from_headers(response.headers)
    response.url = url
    return response


@pytest.fixture
def recipe_html():
    return (FIXTURES_DIR / "15gram_recipe.html").read_text(encoding='utf-8')


@pytest.fixture
def recipe_html_no_image():
    return (FIXTURES_DIR / "15gram_recipe_no_image.html").read_text(encoding='utf-8')


@pytest.fixture
def fake_get(monkeypatch):
    """
    Replace requests.get. Set fake_get.response (a Response) or
    fake_get.error (an exception); every call is recorded in fake_get.calls.
    """
    class FakeGet:
        def __init__(self):
            self.calls = []
            self.response = make_response("<html></html>")
            self.error = None

        def __call__(self, url, **kwargs):
            self.calls.append((url, kwargs))
            if self.error is not None:
                raise self.error
            return self.response

    fake = FakeGet()
    monkeypatch.setattr(requests, "get", fake)
    return fake
