"""Leftmost-marker text scanning.

Everything here is a pure function of (text, position). Markers are plain
substrings matched by first occurrence; no regex, no parsing. Strict variants
return None when a marker is missing, non-strict ones fall back to a default.
"""

from __future__ import annotations

from typing import Iterator, NamedTuple, Optional, Tuple


class ScanMatch(NamedTuple):
    """A located substring: text[start:end] == value."""

    value: str
    start: int
    end: int


def before(text: str, marker: str) -> str:
    idx = text.find(marker)
    return text if idx < 0 else text[:idx]


def before_strict(text: str, marker: str) -> Optional[str]:
    idx = text.find(marker)
    return None if idx < 0 else text[:idx]


def after(text: str, marker: str) -> str:
    idx = text.find(marker)
    return "" if idx < 0 else text[idx + len(marker):]


def after_strict(text: str, marker: str) -> Optional[str]:
    idx = text.find(marker)
    return None if idx < 0 else text[idx + len(marker):]


def find_between(text: str, begin: str, end: str, pos: int = 0) -> Optional[ScanMatch]:
    """Locate the text between the first `begin` at/after `pos` and the next `end`."""
    b = text.find(begin, pos)
    if b < 0:
        return None
    start = b + len(begin)
    stop = text.find(end, start)
    if stop < 0:
        return None
    return ScanMatch(text[start:stop], start, stop)


def between_strict(text: str, begin: str, end: str) -> Optional[str]:
    m = find_between(text, begin, end)
    return None if m is None else m.value


def between(text: str, begin: str, end: str) -> str:
    """Like between_strict, but "" when either marker is missing.

    Callers must treat "" as "not found" themselves.
    """
    m = find_between(text, begin, end)
    return "" if m is None else m.value


def index_between_strict(text: str, begin: str, end: str) -> Optional[Tuple[int, int]]:
    """Half-open offsets of the between-substring (markers excluded)."""
    m = find_between(text, begin, end)
    return None if m is None else (m.start, m.end)


def iter_between(text: str, begin: str, end: str) -> Iterator[ScanMatch]:
    """Yield every between-match, each scan resuming right after the last value.

    Resuming after the value (not after `end`) means the closing marker of
    one match may open the next one, mirroring a re-scan of the remainder.
    An empty `begin` yields nothing: it would match at every position, so
    unlike a single between_strict lookup it cannot be iterated.
    """
    if not begin:
        return
    pos = 0
    while True:
        m = find_between(text, begin, end, pos)
        if m is None:
            return
        yield m
        pos = m.end


def iter_after(text: str, marker: str) -> Iterator[int]:
    """Yield the offset just past each occurrence of `marker`, left to right."""
    if not marker:
        return
    pos = 0
    while True:
        idx = text.find(marker, pos)
        if idx < 0:
            return
        pos = idx + len(marker)
        yield pos
