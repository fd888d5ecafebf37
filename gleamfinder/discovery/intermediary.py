"""Intermediary page (video description, blog post...) -> gleam links (stage b)."""

from __future__ import annotations

import logging
from typing import List, Optional

from gleamfinder.ingestion.gleam_ids import GLEAM_ROOT, dedupe_gleam_urls
from gleamfinder.scanning.text_scan import iter_after
from gleamfinder.transport.http_fetch import FetchText, HttpFetcher


logger = logging.getLogger(__name__)

# "competitions/" + 5-char id + "-" + 1 char; anything past it is noise
MAX_LINK_PATH_LENGTH = 20


def _is_path_char(c: str) -> bool:
    return (c.isascii() and c.isalnum()) or c in "-/_"


def read_link_path(text: str, pos: int) -> str:
    """Read URL path characters from `pos` until the first disallowed one."""
    end = pos
    n = len(text)
    while end < n and _is_path_char(text[end]):
        end += 1
    return text[pos:end]


def extract_platform_links(text: str) -> List[str]:
    """Raw gleam.io links found in `text`, deduped by exact string, first-found order."""
    out: List[str] = []
    for pos in iter_after(text, GLEAM_ROOT):
        path = read_link_path(text, pos)[:MAX_LINK_PATH_LENGTH]
        if not path:
            continue
        url = GLEAM_ROOT + path
        if url not in out:
            out.append(url)
    return out


def resolve(url: str, *, fetch_text: Optional[FetchText] = None) -> List[str]:
    """Fetch an intermediary page and return canonical giveaway URLs it links to.

    Raises Timeout / InvalidResponse when the page could not be read; an
    empty list means nothing was found.
    """
    fetch_text = fetch_text or HttpFetcher()
    body = fetch_text(url)
    links = dedupe_gleam_urls(extract_platform_links(body))
    logger.info(f"[resolve] url={url} gleam_links={len(links)}")
    return links
