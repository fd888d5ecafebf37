"""Search -> intermediary pages -> giveaway pages, end to end.

A failing result link or intermediary page is logged and skipped; only the
giveaway stage has a cooldown between requests.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, List, Optional

from gleamfinder.config import FinderSettings
from gleamfinder.discovery.intermediary import resolve
from gleamfinder.discovery.search_results import search
from gleamfinder.errors import GleamFinderError
from gleamfinder.giveaways.giveaway_types import Giveaway
from gleamfinder.giveaways.records import fetch_vec
from gleamfinder.ingestion.gleam_ids import dedupe_gleam_urls
from gleamfinder.transport.http_fetch import FetchText


logger = logging.getLogger(__name__)


def discover_giveaway_urls(pages: int, *, fetch_text: FetchText) -> List[str]:
    """Canonical giveaway URLs reachable from the first `pages` result pages."""
    found: List[str] = []
    for page in range(max(0, pages)):
        try:
            links = search(page, fetch_text=fetch_text)
        except GleamFinderError as e:
            logger.warning(f"[pipeline] search page {page} failed: {e}")
            continue
        for link in links:
            try:
                found.extend(resolve(link, fetch_text=fetch_text))
            except GleamFinderError as e:
                logger.warning(f"[pipeline] could not resolve {link}: {e}")
    urls = dedupe_gleam_urls(found)
    logger.info(f"[pipeline] giveaway urls={len(urls)}")
    return urls


def run_discovery(
    settings: FinderSettings,
    *,
    fetch_text: Optional[FetchText] = None,
    sleep: Callable[[float], None] = time.sleep,
    clock: Callable[[], float] = time.time,
) -> List[Giveaway]:
    fetch_text = fetch_text or settings.build_fetcher()
    urls = discover_giveaway_urls(settings.search_pages, fetch_text=fetch_text)
    return fetch_vec(urls, settings.cooldown, fetch_text=fetch_text, sleep=sleep, clock=clock)
