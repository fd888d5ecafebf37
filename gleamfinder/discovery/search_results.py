"""Google results page -> outbound result links (stage a).

Only one results page is read per call; pagination is the caller's loop.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from gleamfinder.scanning.text_scan import iter_between
from gleamfinder.transport.http_fetch import FetchText, HttpFetcher


logger = logging.getLogger(__name__)

SEARCH_ENDPOINT = "https://www.google.com/search"
SEARCH_QUERY = '"gleam.io"'
RESULTS_PER_PAGE = 10

LINK_OPEN = '"><a href="'
LINK_CLOSE = '"'
# Attributes google puts right after a real result link (click tracking).
RESULT_LINK_SUFFIXES = (
    '" onmousedown="return rwt(',
    '" data-ved="2a',
)


def build_search_url(page: int) -> str:
    """Results of the last hour mentioning gleam.io, `page` is zero-based."""
    return f"{SEARCH_ENDPOINT}?q={SEARCH_QUERY}&tbs=qdr:h&filter=0&start={page * RESULTS_PER_PAGE}"


def extract_result_links(text: str) -> List[str]:
    out: List[str] = []
    for m in iter_between(text, LINK_OPEN, LINK_CLOSE):
        if text.startswith(RESULT_LINK_SUFFIXES, m.end):
            out.append(m.value)
    return out


def search(page: int, *, fetch_text: Optional[FetchText] = None) -> List[str]:
    """Fetch one results page and return its result links.

    Raises Timeout / InvalidResponse when the page could not be read; an
    empty list means the page had no results.
    """
    fetch_text = fetch_text or HttpFetcher(accept="text/plain")
    body = fetch_text(build_search_url(page))
    links = extract_result_links(body)
    logger.info(f"[search] page={page} links={len(links)}")
    return links
