# core/agents/tools/web_extract.py
"""
Web Extract Tool
Fetches a page and keeps only its main article text
"""

import logging
import re
from dataclasses import dataclass
from typing import Optional

import requests
import trafilatura
from bs4 import BeautifulSoup, Tag
from trafilatura.settings import use_config

from ...exceptions import ToolExecutionError

logger = logging.getLogger(__name__)

TOOL_NAME = "web.extract"

# Page chrome that never holds article text
NOISE_TAGS = ["script", "style", "noscript", "template", "svg", "iframe", "form", "nav", "header", "footer", "aside"]
MIN_BLOCK_CHARS = 200

# Tools run on worker threads, where signal-based extraction timeouts are unavailable
TRAFILATURA_CONFIG = use_config()
TRAFILATURA_CONFIG.set("DEFAULT", "EXTRACTION_TIMEOUT", "0")


@dataclass
class ExtractResult:
    url: str
    title: str
    text: str


def _clean_text(text: str) -> str:
    lines = [re.sub(r"[ \t\xa0]+", " ", line).strip() for line in text.splitlines()]
    return "\n".join(line for line in lines if line)


def _page_title(soup: BeautifulSoup) -> Optional[str]:
    og_title = soup.find("meta", attrs={"property": "og:title"})
    if og_title is not None and og_title.get("content", "").strip():
        return og_title["content"].strip()
    if soup.title is not None and soup.title.get_text(strip=True):
        return soup.title.get_text(strip=True)
    heading = soup.find("h1")
    if heading is not None and heading.get_text(strip=True):
        return heading.get_text(strip=True)
    return None


def _paragraph_chars(block: Tag) -> int:
    return sum(len(p.get_text(strip=True)) for p in block.find_all("p", recursive=False))


def _main_block(soup: BeautifulSoup) -> Optional[Tag]:
    """article > main > [role=main] > densest paragraph container"""
    for candidate in (
        soup.find("article"),
        soup.find("main"),
        soup.find(attrs={"role": "main"}),
    ):
        if candidate is not None and len(candidate.get_text(strip=True)) >= MIN_BLOCK_CHARS:
            return candidate

    best, best_chars = None, 0
    for block in soup.find_all(["div", "section"]):
        chars = _paragraph_chars(block)
        if chars > best_chars:
            best, best_chars = block, chars
    return best if best_chars >= MIN_BLOCK_CHARS else None


def _extract_trafilatura(html: str, url: str) -> str:
    content = trafilatura.extract(
        html,
        url=url,
        output_format="txt",
        config=TRAFILATURA_CONFIG,
        include_comments=False,
        include_tables=True,
        with_metadata=False,
    )
    return _clean_text(content) if content else ""


def _extract_fallback(soup: BeautifulSoup) -> str:
    """Strip page chrome and keep the densest remaining block, else the body"""
    for tag in soup.find_all(NOISE_TAGS):
        # Nested noise goes away with its already-removed parent
        if not tag.decomposed:
            tag.decompose()

    block = _main_block(soup)
    if block is None:
        block = soup.body or soup
    return _clean_text(block.get_text("\n"))


def extract_article(html: str, url: str) -> ExtractResult:
    """
    Best-effort main content extraction from an HTML document

    trafilatura picks the article body; pages it cannot handle fall back
    to the BeautifulSoup heuristic. Title comes from og:title, <title>,
    the first h1, or the URL.
    """
    soup = BeautifulSoup(html, "lxml")
    title = _page_title(soup) or url

    text = _extract_trafilatura(html, url)
    if not text:
        logger.debug(f"trafilatura found no main content in {url}, using fallback")
        text = _extract_fallback(soup)

    return ExtractResult(url=url, title=title, text=text)


def extract(url: str, *, user_agent: str = "Mozilla/5.0", timeout: float = 20.0) -> ExtractResult:
    """Fetch a URL and extract its main article text"""
    logger.info(f"Extracting article from {url}")
    try:
        response = requests.get(url, headers={"User-Agent": user_agent}, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        raise ToolExecutionError(TOOL_NAME, f"Extract failed: {e}") from e

    result = extract_article(response.text, url)
    logger.info(f"Extracted {len(result.text)} chars from '{result.title}'")
    return result


def summarize(result: ExtractResult, max_chars: int) -> str:
    return (
        f"Tool result for {TOOL_NAME} from {result.title} ({result.url}):\n"
        f"{result.text[:max_chars]}"
    )
