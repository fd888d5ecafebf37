"""Decoding of giveaway display text (name/description).

Two sources, two fixed orders, never mixed:

HTML path (payload already JSON-decoded from the ng-init attribute):
  1. strip <...> tags  2. U+00A0 -> newline  3. &#39; -> '

Script path (raw JSON-in-script, unicode escapes still literal):
  1. strip \\u003c...\\u003e tags  2. cut at a dangling \\u escape
  3. apostrophe entity -> '  4. numeric references &#N; / \\u0026#N; -> char
"""

from __future__ import annotations

import string
from typing import Optional

from gleamfinder.scanning.text_scan import index_between_strict


TAG_OPEN = "<"
TAG_CLOSE = ">"
ESCAPED_TAG_OPEN = "\\u003c"
ESCAPED_TAG_CLOSE = "\\u003e"
UNICODE_ESCAPE = "\\u"
NBSP = "\u00a0"
APOSTROPHE_ENTITIES = ("&#39;", "\\u0026#39;")
NUMERIC_REF_OPENERS = ("&#", "\\u0026#")
NUMERIC_REF_CLOSE = ";"

_HEX = set(string.hexdigits)
# digits in 2**32 - 1; longer codes cannot be a code point
MAX_CODE_DIGITS = 10


def strip_bracketed(text: str, open_marker: str, close_marker: str) -> str:
    """Repeatedly cut the leftmost open...close span, delimiters included."""
    while True:
        span = index_between_strict(text, open_marker, close_marker)
        if span is None:
            return text
        start, stop = span
        text = text[:start - len(open_marker)] + text[stop + len(close_marker):]


def truncate_dangling_escape(text: str) -> str:
    """Cut the text at the first \\u not followed by four hex digits."""
    pos = text.find(UNICODE_ESCAPE)
    while pos >= 0:
        digits = text[pos + 2:pos + 6]
        if len(digits) < 4 or not all(c in _HEX for c in digits):
            return text[:pos]
        pos = text.find(UNICODE_ESCAPE, pos + 2)
    return text


def _code_point_char(digits: str) -> Optional[str]:
    if not digits or len(digits) > MAX_CODE_DIGITS or not (digits.isascii() and digits.isdigit()):
        return None
    code = int(digits)
    if code > 0x10FFFF or 0xD800 <= code <= 0xDFFF:
        return None
    return chr(code)


def _next_numeric_ref(text: str, pos: int):
    best = None
    for opener in NUMERIC_REF_OPENERS:
        idx = text.find(opener, pos)
        if idx >= 0 and (best is None or idx < best[0]):
            best = (idx, opener)
    return best


def resolve_numeric_references(text: str) -> str:
    """Replace &#N; / \\u0026#N; with the character N, left to right.

    The first reference that is not a valid code point stops the pass; it and
    everything after it stay as-is.
    """
    pos = 0
    while True:
        found = _next_numeric_ref(text, pos)
        if found is None:
            return text
        idx, opener = found
        digits_start = idx + len(opener)
        close = text.find(NUMERIC_REF_CLOSE, digits_start)
        if close < 0:
            return text
        ch = _code_point_char(text[digits_start:close])
        if ch is None:
            return text
        text = text[:idx] + ch + text[close + 1:]
        pos = idx + len(ch)


def decode_html_text(text: str) -> str:
    text = strip_bracketed(text, TAG_OPEN, TAG_CLOSE)
    text = text.replace(NBSP, "\n")
    return text.replace(APOSTROPHE_ENTITIES[0], "'")


def decode_script_text(text: str) -> str:
    text = strip_bracketed(text, ESCAPED_TAG_OPEN, ESCAPED_TAG_CLOSE)
    text = truncate_dangling_escape(text)
    for entity in APOSTROPHE_ENTITIES:
        text = text.replace(entity, "'")
    return resolve_numeric_references(text)
