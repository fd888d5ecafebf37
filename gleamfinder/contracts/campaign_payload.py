"""Campaign payload contract.

The campaign payload is the JSON object gleam.io embeds in the
`ng-init='initCampaign(...)'` attribute of a giveaway page. This module defines:
- A JSON Schema for the keys a Giveaway is built from
- Helpers turning schema violations into dotted field paths

Counts and timestamps are unsigned 64-bit values; anything larger is rejected.
"""

from __future__ import annotations

from typing import Any, List, Optional

from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError

from gleamfinder.errors import MissingField


U64_MAX = 2 ** 64 - 1

_UINT = {"type": "integer", "minimum": 0, "maximum": U64_MAX}

CAMPAIGN_PAYLOAD_SCHEMA = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": ["campaign", "incentive", "entry_methods"],
    "properties": {
        "campaign": {
            "type": "object",
            "required": ["name", "starts_at", "ends_at"],
            "properties": {
                "name": {"type": "string"},
                "starts_at": _UINT,
                "ends_at": _UINT,
            },
            "additionalProperties": True,
        },
        "incentive": {
            "type": "object",
            "required": ["description"],
            "properties": {
                "description": {"type": "string"},
            },
            "additionalProperties": True,
        },
        "entry_methods": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["entry_type", "worth"],
                "properties": {
                    "entry_type": {"type": "string"},
                    "worth": _UINT,
                },
                "additionalProperties": True,
            },
        },
    },
    "additionalProperties": True,
}


_VALIDATOR = Draft202012Validator(CAMPAIGN_PAYLOAD_SCHEMA)


def _dotted(path) -> str:
    out = ""
    for p in path:
        if isinstance(p, int):
            out += f"[{p}]"
        else:
            out = f"{out}.{p}" if out else str(p)
    return out


def _field_of(e: ValidationError) -> str:
    path = list(e.absolute_path)
    if e.validator == "required" and isinstance(e.instance, dict):
        missing = [k for k in e.validator_value if k not in e.instance]
        if missing:
            path.append(missing[0])
    return _dotted(path) or "<root>"


def _expected_of(e: ValidationError) -> str:
    if e.validator == "type":
        return str(e.validator_value)
    if e.validator in ("minimum", "maximum"):
        return "unsigned integer"
    return "value"


def _sorted_errors(payload: Any) -> List[ValidationError]:
    return sorted(_VALIDATOR.iter_errors(payload), key=lambda x: [str(p) for p in x.absolute_path])


def validate_campaign_payload(payload: Any) -> List[str]:
    """Return a list of human-readable validation errors (empty means valid)."""
    return [f"{_field_of(e)}: {e.message}" for e in _sorted_errors(payload)]


def first_payload_error(payload: Any) -> Optional[MissingField]:
    """The first violation as a MissingField naming its field, or None."""
    for e in _sorted_errors(payload):
        return MissingField(_field_of(e), _expected_of(e))
    return None
