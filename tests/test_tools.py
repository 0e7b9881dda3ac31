# tests/test_tools.py
"""
Tests for the web tools (HTTP mocked)
"""

from unittest.mock import MagicMock, patch

import pytest
import requests

from core.agents.tools import web_extract, web_fetch, web_search
from core.agents.tools.web_extract import ExtractResult, extract, extract_article
from core.agents.tools.web_fetch import FetchResult, fetch
from core.agents.tools.web_search import SearchResult, parse_results, resolve_result_url, search
from core.exceptions import ToolExecutionError
from tests.mocks import ARTICLE_HTML, ARTICLE_PARAGRAPH, BARE_HTML, DIV_SOUP_HTML, DUCKDUCKGO_HTML


def fake_response(text="", status=200, headers=None):
    response = MagicMock()
    response.text = text
    response.status_code = status
    response.ok = 200 <= status < 300
    response.headers = headers or {}
    if response.ok:
        response.raise_for_status.return_value = None
    else:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status} Error")
    return response


class TestWebSearch:
    """DuckDuckGo scraping"""

    def test_parse_results(self):
        results = parse_results(DUCKDUCKGO_HTML, 10)

        assert [r.title for r in results] == [
            "Welcome to Python.org",
            "Python 3 Documentation",
            "Python - Wikipedia",
        ]
        assert results[0].url == "https://www.python.org/"
        assert results[0].snippet == "The official home of the Python Programming Language."
        assert results[1].snippet == ""
        assert results[2].url == "https://en.wikipedia.org/wiki/Python"

    def test_parse_respects_limit(self):
        assert len(parse_results(DUCKDUCKGO_HTML, 2)) == 2

    def test_resolve_result_url(self):
        assert resolve_result_url("//duckduckgo.com/l/?uddg=https%3A%2F%2Fa.example%2Fb%3Fc%3D1") == "https://a.example/b?c=1"
        assert resolve_result_url("https://plain.example/") == "https://plain.example/"

    @patch("core.agents.tools.web_search.requests.get")
    def test_search_request(self, mock_get):
        mock_get.return_value = fake_response(DUCKDUCKGO_HTML)

        results = search("python & c++", max_results=1, user_agent="TestAgent/1.0", timeout=3)

        assert results == [
            SearchResult(
                title="Welcome to Python.org",
                url="https://www.python.org/",
                snippet="The official home of the Python Programming Language.",
            )
        ]
        args, kwargs = mock_get.call_args
        assert args[0] == "https://duckduckgo.com/html/?q=python+%26+c%2B%2B"
        assert kwargs["headers"] == {"User-Agent": "TestAgent/1.0"}
        assert kwargs["timeout"] == 3

    @patch("core.agents.tools.web_search.requests.get")
    def test_search_default_limit(self, mock_get):
        mock_get.return_value = fake_response(DUCKDUCKGO_HTML)
        assert len(search("python", default_max_results=2)) == 2

    @patch("core.agents.tools.web_search.requests.get")
    def test_search_http_error(self, mock_get):
        mock_get.return_value = fake_response("blocked", status=403)

        with pytest.raises(ToolExecutionError) as exc_info:
            search("python")
        assert "403" in exc_info.value.reason

    @patch("core.agents.tools.web_search.requests.get")
    def test_search_network_error(self, mock_get):
        mock_get.side_effect = requests.ConnectionError("dns failure")

        with pytest.raises(ToolExecutionError) as exc_info:
            search("python")
        assert "dns failure" in exc_info.value.reason

    def test_summarize(self):
        results = [
            SearchResult("A", "https://a.example", "about a"),
            SearchResult("B", "https://b.example"),
        ]
        assert web_search.summarize(results, 4000) == (
            "Tool result for web.search:\n"
            "1. A - https://a.example\n   about a\n"
            "2. B - https://b.example"
        )
        assert web_search.summarize([], 4000) == "Tool result for web.search:\nNo results found."


class TestWebFetch:
    """Raw fetch"""

    @patch("core.agents.tools.web_fetch.requests.get")
    def test_fetch_returns_status(self, mock_get):
        mock_get.return_value = fake_response(
            "not here", status=404, headers={"content-type": "text/plain"}
        )

        result = fetch("https://example.com/missing")

        assert result == FetchResult(
            url="https://example.com/missing",
            status=404,
            text="not here",
            content_type="text/plain",
        )

    @patch("core.agents.tools.web_fetch.requests.get")
    def test_fetch_network_error(self, mock_get):
        mock_get.side_effect = requests.Timeout("read timed out")

        with pytest.raises(ToolExecutionError) as exc_info:
            fetch("https://example.com")
        assert exc_info.value.reason == "Fetch failed: read timed out"

    def test_summarize_truncates(self):
        result = FetchResult(url="u", status=200, text="y" * 5000, content_type="text/html")
        summary = web_fetch.summarize(result, 4000)
        assert summary.startswith("Tool result for web.fetch (200 text/html):\n")
        assert summary.endswith("y" * 4000)
        assert len(summary) == len("Tool result for web.fetch (200 text/html):\n") + 4000

    def test_summarize_without_content_type(self):
        result = FetchResult(url="u", status=204, text="")
        assert web_fetch.summarize(result, 4000) == "Tool result for web.fetch (204 unknown):\n"


class TestWebExtract:
    """Main content extraction"""

    def test_article_extraction(self):
        result = extract_article(ARTICLE_HTML, "https://news.example/py313")

        assert result.title == "What's new in Python 3.13"
        assert result.url == "https://news.example/py313"
        assert ARTICLE_PARAGRAPH.strip() in result.text
        for noise in ("Subscribe", "Copyright", "trackPageView", "color: red"):
            assert noise not in result.text

    @patch("core.agents.tools.web_extract.trafilatura.extract")
    def test_trafilatura_text_is_cleaned(self, mock_extract):
        mock_extract.return_value = "  First   line \n\n\tSecond line  "

        result = extract_article(ARTICLE_HTML, "https://news.example/py313")

        assert result.text == "First line\nSecond line"
        assert mock_extract.call_args.kwargs["url"] == "https://news.example/py313"
        assert mock_extract.call_args.kwargs["include_comments"] is False

    @patch("core.agents.tools.web_extract.trafilatura.extract", return_value=None)
    def test_fallback_article_block(self, mock_extract):
        result = extract_article(ARTICLE_HTML, "https://news.example/py313")

        assert ARTICLE_PARAGRAPH.strip() in result.text
        for noise in ("Home", "Subscribe", "Copyright", "trackPageView", "color: red"):
            assert noise not in result.text

    @patch("core.agents.tools.web_extract.trafilatura.extract", return_value=None)
    def test_fallback_densest_block(self, mock_extract):
        result = extract_article(DIV_SOUP_HTML, "https://blog.example/post")

        assert result.title == "Blog post"
        assert ARTICLE_PARAGRAPH.strip() in result.text
        assert "Nice post!" not in result.text
        assert "About" not in result.text

    @patch("core.agents.tools.web_extract.trafilatura.extract", return_value="")
    def test_fallback_to_body_and_url(self, mock_extract):
        result = extract_article(BARE_HTML, "https://bare.example/")

        assert result == ExtractResult(url="https://bare.example/", title="https://bare.example/", text="Short page")

    @patch("core.agents.tools.web_extract.requests.get")
    def test_extract_request(self, mock_get):
        mock_get.return_value = fake_response(ARTICLE_HTML)

        result = extract("https://news.example/py313", user_agent="UA")

        assert result.title == "What's new in Python 3.13"
        assert mock_get.call_args.kwargs["headers"] == {"User-Agent": "UA"}

    @patch("core.agents.tools.web_extract.requests.get")
    def test_extract_http_error(self, mock_get):
        mock_get.return_value = fake_response("oops", status=500)

        with pytest.raises(ToolExecutionError):
            extract("https://news.example/down")

    def test_summarize(self):
        result = ExtractResult(url="https://e.example", title="T", text="body")
        assert web_extract.summarize(result, 4000) == "Tool result for web.extract from T (https://e.example):\nbody"
