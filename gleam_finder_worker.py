#!/usr/bin/env python3
"""Giveaway discovery worker.

Searches for recent pages mentioning gleam.io, follows them to giveaway links,
and prints one line per giveaway that could be parsed.
"""

from __future__ import annotations

import logging
import sys
import time

from gleamfinder.config import load_settings
from gleamfinder.pipeline import run_discovery


def main() -> int:
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    try:
        settings = load_settings()
    except ValueError as e:
        print(f"[finder] {e}", file=sys.stderr)
        return 2

    giveaways = run_discovery(settings)
    now = time.time()
    for g in giveaways:
        state = "running" if g.is_running(now) else "ended"
        entries = g.entry_count if g.entry_count is not None else "?"
        print(f"[finder] {g.url} {state} entries={entries} max_per_account={g.max_entries_per_account()} {g.name}")

    print(f"[finder] completed giveaways={len(giveaways)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
