# core/agents/tools/__init__.py
"""
Agent Tools Package
Web tools available to the agent loop
"""

from functools import partial

from . import web_extract, web_fetch, web_search
from .web_extract import ExtractResult, extract, extract_article
from .web_fetch import FetchResult, UrlInput, fetch
from .web_search import SearchResult, WebSearchInput, search


def register_web_tools(registry, agent_config) -> None:
    """Register web.search, web.fetch and web.extract with shared HTTP settings"""
    http_options = {"user_agent": agent_config.user_agent}
    timeout = agent_config.tool_timeout_seconds

    registry.register_function(
        name=web_search.TOOL_NAME,
        function=partial(
            search,
            default_max_results=agent_config.search_max_results,
            timeout=timeout,
            **http_options,
        ),
        description="Search the web.",
        input_model=WebSearchInput,
        usage="input: { query: string, maxResults?: number }",
        summarize=web_search.summarize,
        success_note="Processing results...",
        timeout_seconds=timeout,
    )
    registry.register_function(
        name=web_fetch.TOOL_NAME,
        function=partial(fetch, timeout=timeout, **http_options),
        description="Fetch a URL and return raw text.",
        input_model=UrlInput,
        usage="input: { url: string }",
        summarize=web_fetch.summarize,
        success_note="Fetched content.",
        timeout_seconds=timeout,
    )
    registry.register_function(
        name=web_extract.TOOL_NAME,
        function=partial(extract, timeout=timeout, **http_options),
        description="Fetch a URL and extract main article text.",
        input_model=UrlInput,
        usage="input: { url: string }",
        summarize=web_extract.summarize,
        success_note="Extracted article.",
        timeout_seconds=timeout,
    )


__all__ = [
    "ExtractResult",
    "FetchResult",
    "SearchResult",
    "UrlInput",
    "WebSearchInput",
    "extract",
    "extract_article",
    "fetch",
    "register_web_tools",
    "search",
]
