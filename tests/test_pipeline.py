import unittest

from gleamfinder.config import FinderSettings
from gleamfinder.discovery.search_results import build_search_url
from gleamfinder.errors import Timeout
from gleamfinder.pipeline import discover_giveaway_urls, run_discovery

from page_samples import FakeFetcher, campaign_payload, gleam_page


VIDEO_A = "https://www.youtube.com/watch?v=aaaa"
VIDEO_B = "https://www.youtube.com/watch?v=bbbb"
BLOG = "https://blog.example.com/giveaways"


def _results_page(*links):
    return "".join(f'<div class="r"><a href="{link}" onmousedown="return rwt(this)">x</a></div>' for link in links)


def _responses():
    return {
        build_search_url(0): _results_page(VIDEO_A, VIDEO_B),
        build_search_url(1): _results_page(BLOG),
        VIDEO_A: "Join https://gleam.io/29CPn/-2-alok-gveaway now and https://gleam.io/competitions/lSq1Q-s",
        VIDEO_B: Timeout("video page unreachable"),
        BLOG: "<a href='https://gleam.io/29CPn/steam'>again</a> <a href='https://gleam.io/8nTqy/gpu'>gpu</a>",
        "https://gleam.io/29CPn/-": gleam_page(campaign_payload(name="Diamonds"), "100"),
        "https://gleam.io/lSq1Q/-": "<html>campaign ended and removed</html>",
        "https://gleam.io/8nTqy/-": gleam_page(campaign_payload(name="GPU")),
    }


class TestPipeline(unittest.TestCase):
    def test_discover_dedupes_across_pages(self):
        urls = discover_giveaway_urls(2, fetch_text=FakeFetcher(_responses()))
        self.assertEqual(
            urls,
            ["https://gleam.io/29CPn/-", "https://gleam.io/lSq1Q/-", "https://gleam.io/8nTqy/-"],
        )

    def test_failed_search_page_is_skipped(self):
        responses = _responses()
        responses[build_search_url(0)] = Timeout("rate limited")
        urls = discover_giveaway_urls(2, fetch_text=FakeFetcher(responses))
        self.assertEqual(urls, ["https://gleam.io/29CPn/-", "https://gleam.io/8nTqy/-"])

    def test_run_discovery(self):
        sleeps = []
        settings = FinderSettings(cooldown=3, search_pages=2)
        out = run_discovery(settings, fetch_text=FakeFetcher(_responses()), sleep=sleeps.append, clock=lambda: 1600000000)
        self.assertEqual([g.name for g in out], ["Diamonds", "GPU"])
        self.assertEqual(out[0].entry_count, 100)
        self.assertEqual(sleeps, [3, 3])


if __name__ == "__main__":
    unittest.main()
