#!/usr/bin/env python3
"""
Tests for converting a raw listing scrape into event list and GeoJSON files.
"""

import json
import os
import shutil
import tempfile
import unittest
from datetime import date
from unittest.mock import MagicMock

from porchfest_geo.core import RecordEnricher, RowTally, convert_raw_listing_file, events_file_to_geojson
from porchfest_geo.core.batch import (
    convert_raw_entry,
    convert_raw_listing,
    detail_page_url,
    parse_entry_times,
    read_raw_listing,
)
from porchfest_geo.models import GeocodeResult

ENTRY = [
    '<a href="https://example.org/view/porchfest-single-entry/entry/846/">The Porch Dogs</a>',
    "2:00pm&nbsp;-",
    "3:00pm",
    "Rock, Blues",
    '<a href="https://www.google.com/maps/search/12+Highland+Ave">12 Highland Ave <i class="fa fa-map"></i></a>',
]


class BatchTestCase(unittest.TestCase):
    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()
        self.geocoder = MagicMock()
        self.geocoder.lookup.return_value = GeocodeResult(latitude="42.3876", longitude="-71.0995")
        self.enricher = RecordEnricher(self.geocoder, event_date=date(2024, 5, 11))

    def tearDown(self):
        shutil.rmtree(self.temp_dir)

    def write_raw(self, entries):
        path = os.path.join(self.temp_dir, "raw.json")
        with open(path, "w", encoding="utf-8") as f:
            json.dump({"data": entries}, f)
        return path


class TestConvertRawEntry(BatchTestCase):
    """Test cases for single raw entries."""

    def test_full_entry(self):
        event = convert_raw_entry(ENTRY, self.enricher, line_number=1)

        self.geocoder.lookup.assert_called_once_with("12 Highland Ave")
        self.assertEqual(event.artist_name, "The Porch Dogs")
        self.assertEqual(event.start_time, 1715450400000)
        self.assertEqual(event.end_time, 1715454000000)
        self.assertEqual(event.genres, ["Rock", "Blues"])
        self.assertEqual(event.location.address, "12 Highland Ave")
        self.assertEqual(event.location.lat, 42.3876)

    def test_geocode_failure_keeps_listing_map_link(self):
        self.geocoder.lookup.return_value = GeocodeResult(error="request failed")

        event = convert_raw_entry(ENTRY, self.enricher)

        self.assertEqual((event.location.lat, event.location.long), (0.0, 0.0))
        self.assertEqual(
            event.location.google_maps_link,
            "https://www.google.com/maps/search/12+Highland+Ave",
        )

    def test_bad_times(self):
        entry = list(ENTRY)
        entry[2] = "late"
        times = parse_entry_times(entry, self.enricher)
        self.assertEqual((times.start, times.end), (0, 0))
        self.assertFalse(times.resolved)

    def test_short_entry_raises(self):
        with self.assertRaises(ValueError):
            convert_raw_entry(ENTRY[:3], self.enricher)

    def test_detail_page_url(self):
        self.assertEqual(
            detail_page_url(ENTRY),
            "https://example.org/view/porchfest-single-entry/entry/846/",
        )
        self.assertEqual(detail_page_url([]), "")
        self.assertEqual(detail_page_url([None, "2:00pm"]), "")

    def test_null_genres_and_address(self):
        entry = list(ENTRY)
        entry[3] = None
        entry[4] = None

        event = convert_raw_entry(entry, self.enricher)

        self.assertEqual(event.genres, [])
        self.assertEqual(event.location.address, "")
        self.assertIsNone(event.location.google_maps_link)
        self.geocoder.lookup.assert_not_called()


class TestConvertRawListing(BatchTestCase):
    """Test cases for whole raw listing files."""

    def test_skips_malformed_entries(self):
        tally = RowTally()
        events = convert_raw_listing([ENTRY, ["only one cell"], ENTRY], self.enricher, tally)

        self.assertEqual(len(events), 2)
        self.assertEqual(tally.short_skipped, 1)
        self.assertEqual(tally.geocoded, 2)

    def test_null_cell_does_not_stop_later_entries(self):
        broken = list(ENTRY)
        broken[1] = None
        tally = RowTally()

        events = convert_raw_listing([broken, ENTRY], self.enricher, tally)

        self.assertEqual(len(events), 2)
        self.assertEqual((events[0].start_time, events[0].end_time), (0, 0))
        self.assertFalse(events[0].time_resolved)
        self.assertEqual(events[0].artist_name, "The Porch Dogs")
        self.assertEqual(events[1].start_time, 1715450400000)
        self.assertEqual(tally.time_errors, 1)

    def test_non_list_entry_is_skipped(self):
        tally = RowTally()
        events = convert_raw_listing([None, ENTRY], self.enricher, tally)
        self.assertEqual(len(events), 1)
        self.assertEqual(tally.short_skipped, 1)

    def test_unexpected_error_on_one_entry(self):
        self.geocoder.lookup.side_effect = [RuntimeError("boom"), GeocodeResult("42.3876", "-71.0995")]
        tally = RowTally()

        with self.assertLogs("porchfest_geo.core.batch", level="WARNING") as logs:
            events = convert_raw_listing([ENTRY, ENTRY], self.enricher, tally)

        self.assertEqual(len(events), 1)
        self.assertTrue(events[0].geocoded)
        self.assertIn("ROW_FAILURE", "\n".join(logs.output))

    def test_file_conversion_and_geojson(self):
        raw_path = self.write_raw([ENTRY])
        events_path = os.path.join(self.temp_dir, "artists.json")
        geojson_path = os.path.join(self.temp_dir, "output.geojson")

        tally = convert_raw_listing_file(raw_path, events_path, self.enricher)
        count = events_file_to_geojson(events_path, geojson_path)

        with open(events_path, encoding="utf-8") as f:
            events = json.load(f)
        with open(geojson_path, encoding="utf-8") as f:
            collection = json.load(f)
        self.assertEqual(tally.processed, 1)
        self.assertEqual(events[0]["artist_name"], "The Porch Dogs")
        self.assertEqual(count, 1)
        self.assertEqual(collection["features"][0]["geometry"]["coordinates"], [-71.0995, 42.3876])
        self.assertEqual(collection["features"][0]["properties"], events[0])

    def test_read_raw_listing_requires_data_list(self):
        path = os.path.join(self.temp_dir, "raw.json")
        with open(path, "w", encoding="utf-8") as f:
            json.dump({"rows": []}, f)
        with self.assertRaises(ValueError):
            read_raw_listing(path)


if __name__ == "__main__":
    unittest.main()
