"""Giveaway id extraction + URL canonicalization for dedup.

Two URL shapes are accepted:
- https://gleam.io/competitions/<id>-<x>   (fixed length)
- https://gleam.io/<id>/<slug...>          (any slug, may be "-")

Both collapse to the canonical https://gleam.io/<id>/-, so links that only
differ by their human-readable slug dedupe to one giveaway.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional


GLEAM_ROOT = "https://gleam.io/"
COMPETITIONS_PREFIX = GLEAM_ROOT + "competitions/"
GLEAM_ID_LENGTH = 5

# Shape A: "https://gleam.io/competitions/" + 5-char id + "-" + 1 char
COMPETITIONS_URL_LENGTH = 37
# Shape B: root + 5-char id + "/"
SLUG_URL_MIN_LENGTH = len(GLEAM_ROOT) + GLEAM_ID_LENGTH + 1


class UrlShape(Enum):
    COMPETITIONS = "competitions"
    SLUG = "slug"
    UNRECOGNIZED = "unrecognized"


@dataclass(frozen=True)
class GleamUrlMatch:
    shape: UrlShape
    code: Optional[str] = None

    @property
    def recognized(self) -> bool:
        return self.shape is not UrlShape.UNRECOGNIZED


UNRECOGNIZED = GleamUrlMatch(UrlShape.UNRECOGNIZED)


def _is_gleam_code(code: str) -> bool:
    return len(code) == GLEAM_ID_LENGTH and code.isascii() and code.isalnum()


def classify_gleam_url(url: str) -> GleamUrlMatch:
    """Classify a raw URL into one of the accepted shapes."""
    if not url:
        return UNRECOGNIZED
    if len(url) == COMPETITIONS_URL_LENGTH and url.startswith(COMPETITIONS_PREFIX):
        start = len(COMPETITIONS_PREFIX)
        code = url[start:start + GLEAM_ID_LENGTH]
        if _is_gleam_code(code):
            return GleamUrlMatch(UrlShape.COMPETITIONS, code)
        return UNRECOGNIZED
    if len(url) >= SLUG_URL_MIN_LENGTH and url.startswith(GLEAM_ROOT):
        start = len(GLEAM_ROOT)
        code = url[start:start + GLEAM_ID_LENGTH]
        if url[start + GLEAM_ID_LENGTH] == "/" and _is_gleam_code(code):
            return GleamUrlMatch(UrlShape.SLUG, code)
    return UNRECOGNIZED


def get_gleam_id(url: str) -> Optional[str]:
    return classify_gleam_url(url).code


def canonical_gleam_url(gleam_id: str) -> str:
    return f"{GLEAM_ROOT}{gleam_id}/-"


def normalize_gleam_url(url: str) -> Optional[str]:
    """Canonical URL for any accepted shape, None when it is not a giveaway link."""
    gleam_id = get_gleam_id(url)
    if gleam_id is None:
        return None
    return canonical_gleam_url(gleam_id)


def dedupe_gleam_urls(urls: Iterable[str]) -> List[str]:
    """Canonicalize and dedupe, keeping first-seen order; drops unrecognized URLs."""
    seen = set()
    out: List[str] = []
    for url in urls:
        canon = normalize_gleam_url(url)
        if canon is None or canon in seen:
            continue
        seen.add(canon)
        out.append(canon)
    return out
