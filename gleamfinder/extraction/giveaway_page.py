"""gleam.io giveaway page -> Giveaway record.

Stage 1 (required): the campaign payload JSON-encoded inside the
`ng-init='initCampaign(...)'` attribute, with quotes as &quot;.
Stage 2 (optional): the entry counter from `initEntryCount(N)` in a script.
"""

from __future__ import annotations

import json
import logging
from typing import List, Optional

from gleamfinder.contracts.campaign_payload import U64_MAX, first_payload_error
from gleamfinder.errors import InvalidResponse
from gleamfinder.extraction.structured_value import StructuredValue
from gleamfinder.extraction.text_decoding import decode_html_text
from gleamfinder.giveaways.giveaway_types import EntryMethod, Giveaway
from gleamfinder.scanning.text_scan import between_strict


logger = logging.getLogger(__name__)

CAMPAIGN_OPEN = "<div class='popup-blocks-container' ng-init='initCampaign("
CAMPAIGN_CLOSE = ")'>"
ENTRY_COUNT_OPEN = "initEntryCount("
ENTRY_COUNT_CLOSE = ")"
QUOTE_ENTITY = "&quot;"
# digits in 2**64 - 1
MAX_COUNT_DIGITS = 20


def extract_campaign_payload(body: str) -> StructuredValue:
    raw = between_strict(body, CAMPAIGN_OPEN, CAMPAIGN_CLOSE)
    if raw is None:
        raise InvalidResponse("no campaign payload on page")
    try:
        payload = json.loads(raw.replace(QUOTE_ENTITY, '"'))
    except (ValueError, RecursionError) as e:
        # JSONDecodeError, but also int conversion limits and deep nesting
        raise InvalidResponse(f"campaign payload is not valid JSON: {e}") from e
    return StructuredValue(payload)


def extract_entry_count(body: str) -> Optional[int]:
    raw = between_strict(body, ENTRY_COUNT_OPEN, ENTRY_COUNT_CLOSE)
    if raw is None:
        return None
    if not (raw.isascii() and raw.isdigit()) or len(raw) > MAX_COUNT_DIGITS:
        logger.debug(f"unparsable entry count: {raw[:40]!r}")
        return None
    count = int(raw)
    return count if count <= U64_MAX else None


def _entry_methods(payload: StructuredValue) -> List[EntryMethod]:
    return [
        EntryMethod(kind=m.str_field("entry_type"), worth=m.uint_field("worth"))
        for m in payload.get("entry_methods").as_array()
    ]


def parse_giveaway_page(body: str, gleam_id: str, *, fetched_at: int) -> Giveaway:
    """Build a complete Giveaway or raise InvalidResponse / MissingField."""
    payload = extract_campaign_payload(body)
    error = first_payload_error(payload.raw)
    if error is not None:
        raise error
    campaign = payload.get("campaign")
    incentive = payload.get("incentive")
    entry_methods = _entry_methods(payload)

    return Giveaway(
        gleam_id=gleam_id,
        name=decode_html_text(campaign.str_field("name")),
        description=decode_html_text(incentive.str_field("description")),
        start_date=campaign.uint_field("starts_at"),
        end_date=campaign.uint_field("ends_at"),
        last_fetched_at=int(fetched_at),
        entry_count=extract_entry_count(body),
        entry_methods=entry_methods,
    )
