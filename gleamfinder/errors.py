"""Failure kinds shared by the fetch/parse pipeline.

Two top-level kinds are kept apart on purpose:
- Timeout: the transport could not complete the request.
- InvalidResponse: a response arrived but did not hold what the parser needs.

"Nothing found" is never an error: callers get empty lists or None instead.
"""

from __future__ import annotations


class GleamFinderError(Exception):
    """Base class for pipeline failures."""


class Timeout(GleamFinderError):
    """The fetch layer could not complete the request."""


class InvalidResponse(GleamFinderError):
    """A response was obtained but did not contain the expected data."""


class UndecodableBody(InvalidResponse):
    """The response body could not be decoded as text."""


class MissingField(InvalidResponse):
    """A required key of the embedded payload is absent or has the wrong type."""

    def __init__(self, field: str, expected: str = "value"):
        self.field = field
        self.expected = expected
        super().__init__(f"missing or invalid {expected} field: {field}")
