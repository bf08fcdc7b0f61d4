"""
Tests for TLE feed parsing and the catalog client

Run with:
    python -m pytest tests/test_catalog.py -v
"""

import threading
import unittest
from unittest.mock import MagicMock

import requests

from orbit_site.catalog import CatalogClient, CatalogFetchError, parse_tle_text

ISS_NAME = "ISS (ZARYA)"
ISS_LINE1 = "1 25544U 98067A   23259.57580000  .00012022  00000-0  21844-3 0  9995"
ISS_LINE2 = "2 25544  51.6416 220.9944 0004263 122.0101 312.2755 15.49541986415598"

HST_NAME = "HST"
HST_LINE1 = "1 20580U 90037B   23259.52312500  .00001030  00000-0  53117-4 0  9993"
HST_LINE2 = "2 20580  28.4699 306.5519 0002688  53.3489 306.7652 15.15200000 45871"

FEED = f"{ISS_NAME}\n{ISS_LINE1}\n{ISS_LINE2}\n{HST_NAME}\n{HST_LINE1}\n{HST_LINE2}\n"


def _response(text="", status_error=None):
    response = MagicMock()
    response.text = text
    if status_error is not None:
        response.raise_for_status.side_effect = status_error
    return response


class TestParseTLEText(unittest.TestCase):
    """Test three-line TLE text parsing."""

    def test_parses_groups_in_order(self):
        records = parse_tle_text(FEED)

        self.assertEqual([r.name for r in records], [ISS_NAME, HST_NAME])
        self.assertEqual(records[0].line1, ISS_LINE1)
        self.assertEqual(records[0].line2, ISS_LINE2)
        self.assertEqual(records[0].norad_id, 25544)
        self.assertEqual(records[1].norad_id, 20580)

    def test_trims_whitespace_and_blank_lines(self):
        text = f"\r\n  {ISS_NAME}  \r\n\r\n{ISS_LINE1}   \r\n\t{ISS_LINE2}\r\n\r\n"
        records = parse_tle_text(text)

        self.assertEqual(len(records), 1)
        self.assertEqual(records[0].name, ISS_NAME)
        self.assertEqual(records[0].line1, ISS_LINE1)

    def test_empty_text(self):
        self.assertEqual(parse_tle_text(""), [])
        self.assertEqual(parse_tle_text("\n\n   \n"), [])

    def test_incomplete_trailing_group_ignored(self):
        records = parse_tle_text(f"{FEED}DANGLING\n{ISS_LINE1}\n")
        self.assertEqual(len(records), 2)

    def test_resynchronises_after_junk(self):
        text = f"No GP data found\n{ISS_NAME}\n{ISS_LINE1}\n{ISS_LINE2}\n"
        records = parse_tle_text(text)

        self.assertEqual(len(records), 1)
        self.assertEqual(records[0].name, ISS_NAME)

    def test_non_tle_body(self):
        self.assertEqual(parse_tle_text("<html><body>503</body></html>"), [])

    def test_no_checksum_validation(self):
        bad_checksum = ISS_LINE1[:-1] + "0"
        records = parse_tle_text(f"X\n{bad_checksum}\n{ISS_LINE2}")
        self.assertEqual(len(records), 1)


class TestCatalogClient(unittest.TestCase):
    """Test feed fetching, failure isolation and caching."""

    def setUp(self):
        self.session = MagicMock()
        self.now = [1000.0]
        self.urls = ["https://feed.test/visual", "https://feed.test/stations"]

    def _client(self, cache_ttl=0):
        return CatalogClient(
            self.urls,
            timeout=5.0,
            cache_ttl=cache_ttl,
            session=self.session,
            clock=lambda: self.now[0],
        )

    def test_concatenates_sources(self):
        self.session.get.side_effect = [
            _response(f"{ISS_NAME}\n{ISS_LINE1}\n{ISS_LINE2}"),
            _response(f"{HST_NAME}\n{HST_LINE1}\n{HST_LINE2}"),
        ]
        records = self._client().fetch_records()

        self.assertEqual([r.name for r in records], [ISS_NAME, HST_NAME])
        self.session.get.assert_any_call(self.urls[0], timeout=5.0)
        self.session.get.assert_any_call(self.urls[1], timeout=5.0)

    def test_failing_source_is_skipped(self):
        self.session.get.side_effect = [
            requests.ConnectionError("unreachable"),
            _response(f"{HST_NAME}\n{HST_LINE1}\n{HST_LINE2}"),
        ]
        records = self._client().fetch_records()

        self.assertEqual([r.name for r in records], [HST_NAME])

    def test_all_sources_failing_returns_empty(self):
        self.session.get.side_effect = requests.Timeout("slow")
        self.assertEqual(self._client().fetch_records(), [])

    def test_fetch_source_raises_on_http_error(self):
        self.session.get.return_value = _response(status_error=requests.HTTPError("403"))
        with self.assertRaises(CatalogFetchError):
            self._client().fetch_source(self.urls[0])

    def test_cache_reused_within_ttl(self):
        self.session.get.return_value = _response(FEED)
        client = self._client(cache_ttl=60)

        first = client.fetch_records()
        self.now[0] += 30
        second = client.fetch_records()

        self.assertEqual(first, second)
        self.assertEqual(self.session.get.call_count, len(self.urls))

    def test_cache_expires(self):
        self.session.get.return_value = _response(FEED)
        client = self._client(cache_ttl=60)

        client.fetch_records()
        self.now[0] += 61
        client.fetch_records()

        self.assertEqual(self.session.get.call_count, 2 * len(self.urls))

    def test_outage_not_cached(self):
        self.session.get.side_effect = requests.ConnectionError("down")
        client = self._client(cache_ttl=60)
        self.assertEqual(client.fetch_records(), [])

        self.session.get.side_effect = None
        self.session.get.return_value = _response(FEED)
        self.assertEqual(len(client.fetch_records()), 4)

    def test_partial_outage_not_cached(self):
        self.session.get.side_effect = [
            requests.ConnectionError("blip"),
            _response(f"{HST_NAME}\n{HST_LINE1}\n{HST_LINE2}"),
            _response(f"{ISS_NAME}\n{ISS_LINE1}\n{ISS_LINE2}"),
            _response(f"{HST_NAME}\n{HST_LINE1}\n{HST_LINE2}"),
        ]
        client = self._client(cache_ttl=600)

        self.assertEqual([r.name for r in client.fetch_records()], [HST_NAME])
        self.now[0] += 5
        records = client.fetch_records()

        self.assertEqual([r.name for r in records], [ISS_NAME, HST_NAME])
        self.assertEqual(self.session.get.call_count, 4)

    def test_complete_result_cached_after_recovery(self):
        self.session.get.side_effect = [
            requests.ConnectionError("blip"),
            _response(FEED),
            _response(FEED),
            _response(FEED),
        ]
        client = self._client(cache_ttl=600)

        client.fetch_records()
        client.fetch_records()
        client.fetch_records()

        self.assertEqual(self.session.get.call_count, 4)

    def test_concurrent_callers_share_one_refresh(self):
        self.session.get.return_value = _response(FEED)
        client = self._client(cache_ttl=600)
        results = []

        threads = [
            threading.Thread(target=lambda: results.append(client.fetch_records()))
            for _ in range(8)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        self.assertEqual(len(results), 8)
        self.assertTrue(all(len(r) == 4 for r in results))
        self.assertEqual(self.session.get.call_count, len(self.urls))

    def test_cache_disabled(self):
        self.session.get.return_value = _response(FEED)
        client = self._client(cache_ttl=0)

        client.fetch_records()
        client.fetch_records()

        self.assertEqual(self.session.get.call_count, 2 * len(self.urls))

    def test_clear_cache(self):
        self.session.get.return_value = _response(FEED)
        client = self._client(cache_ttl=60)

        client.fetch_records()
        client.clear_cache()
        client.fetch_records()

        self.assertEqual(self.session.get.call_count, 2 * len(self.urls))


if __name__ == "__main__":
    unittest.main()
