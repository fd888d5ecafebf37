import os
import unittest

from gleamfinder.contracts.campaign_payload import (
    U64_MAX,
    first_payload_error,
    validate_campaign_payload,
)
from gleamfinder.extraction.giveaway_page import extract_campaign_payload

from page_samples import campaign_payload


class TestCampaignPayloadContract(unittest.TestCase):
    def test_sample_fixture_is_valid(self):
        fixture_path = os.path.join(os.path.dirname(__file__), "fixtures", "gleam_giveaway.html")
        with open(fixture_path, "r", encoding="utf-8") as f:
            payload = extract_campaign_payload(f.read()).raw

        errors = validate_campaign_payload(payload)
        self.assertEqual(errors, [], msg="Schema validation failed:\n" + "\n".join(errors))
        self.assertIsNone(first_payload_error(payload))

    def test_missing_property_is_named(self):
        payload = campaign_payload()
        del payload["incentive"]["description"]
        err = first_payload_error(payload)
        self.assertEqual(err.field, "incentive.description")
        self.assertTrue(validate_campaign_payload(payload)[0].startswith("incentive.description: "))

    def test_array_items_use_index_paths(self):
        payload = campaign_payload(entry_methods=[{"entry_type": "visit", "worth": 1}, {"entry_type": "visit"}])
        self.assertEqual(first_payload_error(payload).field, "entry_methods[1].worth")

    def test_type_errors(self):
        payload = campaign_payload()
        payload["campaign"]["name"] = 42
        err = first_payload_error(payload)
        self.assertEqual(err.field, "campaign.name")
        self.assertEqual(err.expected, "string")

        payload = campaign_payload()
        payload["campaign"]["starts_at"] = True
        self.assertEqual(first_payload_error(payload).field, "campaign.starts_at")

    def test_non_object_root(self):
        err = first_payload_error([1, 2, 3])
        self.assertEqual(err.field, "<root>")
        self.assertEqual(err.expected, "object")

    def test_dates_must_fit_u64(self):
        self.assertIsNone(first_payload_error(campaign_payload(ends_at=U64_MAX)))
        err = first_payload_error(campaign_payload(ends_at=U64_MAX + 1))
        self.assertEqual(err.field, "campaign.ends_at")
        self.assertEqual(err.expected, "unsigned integer")
        err = first_payload_error(campaign_payload(starts_at=-1))
        self.assertEqual(err.field, "campaign.starts_at")


if __name__ == "__main__":
    unittest.main()
