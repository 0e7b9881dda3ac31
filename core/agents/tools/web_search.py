# core/agents/tools/web_search.py
"""
Web Search Tool
DuckDuckGo HTML endpoint scraped into title/url/snippet results
"""

import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional
from urllib.parse import parse_qs, quote_plus, urlparse

import requests
from bs4 import BeautifulSoup
from pydantic import BaseModel, ConfigDict, Field, StrictStr

from ...exceptions import ToolExecutionError

logger = logging.getLogger(__name__)

TOOL_NAME = "web.search"
SEARCH_URL = "https://duckduckgo.com/html/?q={query}"
DEFAULT_MAX_RESULTS = 5


class WebSearchInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    query: StrictStr
    max_results: Optional[int] = Field(
        default=None, alias="maxResults", ge=1, strict=True
    )


@dataclass
class SearchResult:
    title: str
    url: str
    snippet: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def resolve_result_url(href: str) -> str:
    """Unwrap DuckDuckGo redirect links (//duckduckgo.com/l/?uddg=...)"""
    if href.startswith("//"):
        href = "https:" + href
    parsed = urlparse(href)
    if parsed.path.startswith("/l/"):
        target = parse_qs(parsed.query).get("uddg")
        if target:
            return target[0]
    return href


def parse_results(html: str, max_results: int) -> List[SearchResult]:
    """Pull result anchors and snippets out of a DuckDuckGo HTML page"""
    soup = BeautifulSoup(html, "lxml")
    results: List[SearchResult] = []

    for link in soup.select(".result__title a.result__a"):
        if len(results) >= max_results:
            break
        href = link.get("href") or ""
        title = link.get_text(strip=True)
        if not href or not title:
            continue

        snippet = ""
        container = link.find_parent(class_="result")
        if container is not None:
            snippet_el = container.select_one(".result__snippet")
            if snippet_el is not None:
                snippet = snippet_el.get_text(strip=True)

        results.append(SearchResult(title=title, url=resolve_result_url(href), snippet=snippet))

    return results


def search(
    query: str,
    max_results: Optional[int] = None,
    *,
    default_max_results: int = DEFAULT_MAX_RESULTS,
    user_agent: str = "Mozilla/5.0",
    timeout: float = 15.0,
) -> List[SearchResult]:
    """
    Search the web and return at most ``max_results`` results

    Args:
        query: Search query string
        max_results: Maximum number of results (tool default when omitted)

    Raises:
        ToolExecutionError: network failure or non-2xx response
    """
    limit = max_results or default_max_results
    url = SEARCH_URL.format(query=quote_plus(query))
    logger.info(f"Performing web search for: '{query}' (max_results: {limit})")

    try:
        response = requests.get(url, headers={"User-Agent": user_agent}, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        raise ToolExecutionError(TOOL_NAME, f"Search request failed: {e}") from e

    results = parse_results(response.text, limit)
    logger.info(f"Web search returned {len(results)} results")
    return results


def summarize(results: List[SearchResult], max_chars: int) -> str:
    """Numbered result list folded back into the conversation"""
    lines = []
    for i, result in enumerate(results, start=1):
        line = f"{i}. {result.title} - {result.url}"
        if result.snippet:
            line += f"\n   {result.snippet}"
        lines.append(line)
    body = "\n".join(lines) if lines else "No results found."
    return f"Tool result for {TOOL_NAME}:\n{body[:max_chars]}"
