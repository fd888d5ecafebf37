"""Typed reads over a decoded JSON payload.

Payloads are checked against their schema first (see
gleamfinder.contracts.campaign_payload); this layer only reads. Each
accessor either returns the expected Python type or raises MissingField
naming the dotted path that failed (e.g. "entry_methods[2].worth"), so a
rejected page can be explained without re-reading its source text.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List

from gleamfinder.contracts.campaign_payload import U64_MAX
from gleamfinder.errors import MissingField


@dataclass(frozen=True)
class StructuredValue:
    raw: Any
    path: str = ""

    def _child_path(self, key: str) -> str:
        return f"{self.path}.{key}" if self.path else key

    def _fail(self, expected: str) -> MissingField:
        return MissingField(self.path or "<root>", expected)

    def get(self, key: str) -> "StructuredValue":
        """Child value under `key`; the parent must be an object holding it."""
        if not isinstance(self.raw, dict):
            raise self._fail("object")
        path = self._child_path(key)
        if key not in self.raw:
            raise MissingField(path)
        return StructuredValue(self.raw[key], path)

    def as_object(self) -> Dict[str, Any]:
        if not isinstance(self.raw, dict):
            raise self._fail("object")
        return self.raw

    def as_array(self) -> List["StructuredValue"]:
        if not isinstance(self.raw, list):
            raise self._fail("array")
        return [StructuredValue(v, f"{self.path}[{i}]") for i, v in enumerate(self.raw)]

    def as_str(self) -> str:
        if not isinstance(self.raw, str):
            raise self._fail("string")
        return self.raw

    def as_uint(self) -> int:
        # bool is an int subclass; JSON true/false is not a number
        if isinstance(self.raw, bool) or not isinstance(self.raw, int) or not 0 <= self.raw <= U64_MAX:
            raise self._fail("unsigned integer")
        return self.raw

    def str_field(self, key: str) -> str:
        return self.get(key).as_str()

    def uint_field(self, key: str) -> int:
        return self.get(key).as_uint()
