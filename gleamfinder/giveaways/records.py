"""Fetch, batch-fetch and refresh giveaway records.

- fetch: one URL -> one Giveaway, or Timeout / InvalidResponse.
- fetch_vec: many URLs -> the records that worked; failures are skipped.
- update: re-fetch in place; a failure leaves the old record untouched.
"""

from __future__ import annotations

import logging
import time
from dataclasses import fields
from typing import Callable, Iterable, List, Optional

from gleamfinder.errors import GleamFinderError, InvalidResponse
from gleamfinder.extraction.giveaway_page import parse_giveaway_page
from gleamfinder.giveaways.giveaway_types import Giveaway
from gleamfinder.ingestion.gleam_ids import canonical_gleam_url, get_gleam_id
from gleamfinder.transport.http_fetch import FetchText, HttpFetcher


logger = logging.getLogger(__name__)

Clock = Callable[[], float]
Sleep = Callable[[float], None]


def fetch(url: str, *, fetch_text: Optional[FetchText] = None, clock: Clock = time.time) -> Giveaway:
    """Load a giveaway page through its canonical URL and parse it.

    https://gleam.io/2zAsX/bitforex-speci is fetched as https://gleam.io/2zAsX/-.
    An unrecognized URL fails with InvalidResponse before any request is made.
    """
    gleam_id = get_gleam_id(url)
    if gleam_id is None:
        raise InvalidResponse(f"not a giveaway url: {url}")
    fetch_text = fetch_text or HttpFetcher(accept="text/html")
    body = fetch_text(canonical_gleam_url(gleam_id))
    return parse_giveaway_page(body, gleam_id, fetched_at=int(clock()))


def fetch_vec(
    urls: Iterable[str],
    cooldown: float,
    *,
    fetch_text: Optional[FetchText] = None,
    sleep: Sleep = time.sleep,
    clock: Clock = time.time,
) -> List[Giveaway]:
    """Fetch URLs one after another, waiting `cooldown` seconds between requests."""
    urls = list(urls)
    out: List[Giveaway] = []
    for i, url in enumerate(urls):
        if i > 0:
            sleep(cooldown)
        try:
            out.append(fetch(url, fetch_text=fetch_text, clock=clock))
        except GleamFinderError as e:
            logger.warning(f"[giveaways] skipped {url}: {type(e).__name__}: {e}")
    logger.info(f"[giveaways] fetched={len(out)}/{len(urls)}")
    return out


def update(
    giveaway: Giveaway,
    *,
    fetch_text: Optional[FetchText] = None,
    clock: Clock = time.time,
) -> Optional[GleamFinderError]:
    """Refresh `giveaway` in place.

    Returns None on success. On failure the record keeps its previous values
    and the error is returned so the caller can report it.
    """
    try:
        fresh = fetch(giveaway.url, fetch_text=fetch_text, clock=clock)
    except GleamFinderError as e:
        logger.warning(f"[giveaways] update of {giveaway.gleam_id} failed, keeping stale record: {e}")
        return e
    for f in fields(Giveaway):
        setattr(giveaway, f.name, getattr(fresh, f.name))
    return None
