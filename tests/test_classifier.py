# tests/test_classifier.py
"""
Tests for reply classification
"""

import pytest

from core.agents.classifier import ReplyClassifier, classify
from core.agents.tools.web_fetch import UrlInput
from core.agents.tools.web_search import WebSearchInput


@pytest.fixture
def classifier(fake_registry):
    return ReplyClassifier(fake_registry)


class TestToolCalls:
    """Replies that are valid tool calls"""

    def test_search_call(self, classifier):
        request = classifier.classify('{"name": "web.search", "input": {"query": "rust async"}}')

        assert request is not None
        assert request.name == "web.search"
        assert isinstance(request.input, WebSearchInput)
        assert request.arguments() == {"query": "rust async", "max_results": None}
        assert request.display() == 'web.search {"query":"rust async"}'

    def test_search_with_max_results(self, classifier):
        request = classifier.classify(
            '{"name": "web.search", "input": {"query": "q", "maxResults": 3}}'
        )
        assert request.arguments() == {"query": "q", "max_results": 3}
        assert request.display() == 'web.search {"query":"q","maxResults":3}'

    def test_fetch_and_extract(self, classifier):
        for name in ("web.fetch", "web.extract"):
            request = classifier.classify(
                f'{{"name": "{name}", "input": {{"url": "https://example.com/x?y=1"}}}}'
            )
            assert request.name == name
            assert isinstance(request.input, UrlInput)
            assert request.input.url == "https://example.com/x?y=1"

    def test_multiline_json_is_parsed_whole(self, classifier):
        raw = '  {\n  "name": "web.search",\n  "input": {"query": "q"}\n}\n'
        assert classifier.classify(raw).name == "web.search"

    def test_first_line_json_with_trailing_text(self, classifier):
        raw = 'Let me search.\n{"name": "web.search", "input": {"query": "q"}}'
        # Only the first line is considered when the reply does not open with '{'
        assert classifier.classify(raw) is None

        raw = '{"name": "web.search", "input": {"query": "q"}}'
        assert classifier.classify(raw + "\n") is not None

    def test_unicode_input_kept_in_display(self, classifier):
        request = classifier.classify('{"name": "web.search", "input": {"query": "東京 天気"}}')
        assert request.display() == 'web.search {"query":"東京 天気"}'


class TestFinalAnswers:
    """Replies that fall back to final answer text"""

    @pytest.mark.parametrize(
        "raw",
        [
            "The capital of France is Paris.",
            "",
            "   ",
            "{not json",
            '{"name": "web.search", "input": {"query": "q"}} and more',
            '{"name": "web.search"}',
            '{"name": "web.search", "input": "q"}',
            '{"name": 5, "input": {}}',
            '{"name": "web.browse", "input": {"url": "https://example.com"}}',
            '{"name": "web.search", "input": {"query": 42}}',
            '{"name": "web.search", "input": {"query": "q", "maxResults": 0}}',
            '{"name": "web.search", "input": {"query": "q", "maxResults": 2.5}}',
            '{"name": "web.search", "input": {"query": "q", "maxResults": true}}',
            '{"name": "web.fetch", "input": {"url": "example.com"}}',
            '{"name": "web.fetch", "input": {"url": "ftp://example.com/file"}}',
            '{"name": "web.extract", "input": {}}',
            '"just a string"',
            "null",
            "[" * 5000,
            '{"name": "web.search", "input": ' + "[" * 5000,
        ],
    )
    def test_not_a_tool_call(self, classifier, raw):
        assert classifier.classify(raw) is None

    def test_extra_input_fields_ignored(self, classifier):
        request = classifier.classify(
            '{"name": "web.fetch", "input": {"url": "https://a.example", "force": true}}'
        )
        assert request.wire_input() == {"url": "https://a.example"}


class TestModuleClassify:
    def test_default_registry(self):
        request = classify('{"name": "web.extract", "input": {"url": "https://example.com"}}')
        assert request.name == "web.extract"

    def test_explicit_registry(self, fake_registry):
        assert classify("plain text", fake_registry) is None
