"""Giveaway record types."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import List, Optional

from gleamfinder.ingestion.gleam_ids import canonical_gleam_url


@dataclass(frozen=True)
class EntryMethod:
    kind: str
    worth: int


@dataclass
class Giveaway:
    """A fully parsed gleam.io giveaway.

    Dates are unix seconds. start_date <= end_date is not enforced: the page is
    reported as-is. Instances are only built from complete pages, and
    `update` replaces every field at once.
    """

    gleam_id: str
    name: str
    description: str
    start_date: int
    end_date: int
    last_fetched_at: int
    entry_count: Optional[int] = None
    entry_methods: List[EntryMethod] = field(default_factory=list)

    @property
    def url(self) -> str:
        return canonical_gleam_url(self.gleam_id)

    def is_running(self, now: Optional[float] = None) -> bool:
        now = time.time() if now is None else now
        return now < self.end_date

    def max_entries_per_account(self) -> int:
        return sum(m.worth for m in self.entry_methods)
