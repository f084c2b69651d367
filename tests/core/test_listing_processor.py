#!/usr/bin/env python3
"""
Tests for processing coordination and run statistics.
"""

import csv
import json
import os
import shutil
import tempfile
import unittest
from datetime import date
from unittest.mock import MagicMock

from porchfest_geo.core import RecordEnricher, RowTally, calculate_processing_stats, process_listing
from porchfest_geo.core.processor import enrich_events, iter_tabular_records, log_processing_summary
from porchfest_geo.models import GeocodeResult, InputRow, ParseResult

HEADER = ["Name", "Time", "Genres", "Address"]


def _parse_result(*rows):
    return ParseResult(
        header=HEADER,
        rows=[InputRow(line_number=i + 2, fields=tuple(row)) for i, row in enumerate(rows)],
        skipped_lines=0,
        short_rows=sum(1 for row in rows if len(row) < 4),
    )


class TestProcessListing(unittest.TestCase):
    """Test cases for process_listing."""

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()
        self.geocoder = MagicMock()
        self.enricher = RecordEnricher(self.geocoder, event_date=date(2024, 5, 11))

    def tearDown(self):
        shutil.rmtree(self.temp_dir)

    def test_csv_skips_short_rows_and_continues_after_failures(self):
        self.geocoder.lookup.side_effect = [
            GeocodeResult(error="request failed: connection refused"),
            GeocodeResult(latitude="42.39", longitude="-71.12"),
        ]
        parse_result = _parse_result(
            ["A", "1:00pm–2:00pm", "Rock", "1 Elm St"],
            ["Short", "1:00pm–2:00pm"],
            ["B", "2:00pm–3:00pm", "Jazz", "2 Elm St"],
        )
        output = os.path.join(self.temp_dir, "output.csv")

        tally = process_listing(parse_result, self.enricher, output, "csv")

        with open(output, encoding="utf-8", newline="") as f:
            rows = list(csv.reader(f))
        self.assertEqual(len(rows), 3)
        self.assertEqual(rows[1], ["A", "1:00pm–2:00pm", "Rock", "1 Elm St", "", "", ""])
        self.assertEqual(rows[2][4:], ["42.39", "-71.12", "https://maps.google.com/?q=42.39,-71.12"])
        self.assertEqual(tally.processed, 2)
        self.assertEqual(tally.geocoded, 1)
        self.assertEqual(tally.unresolved, 1)
        self.assertEqual(tally.short_skipped, 1)

    def test_geojson_keeps_every_row_in_order(self):
        self.geocoder.lookup.return_value = GeocodeResult(latitude="42.38", longitude="-71.1")
        parse_result = _parse_result(
            ["A", "1:00pm–2:00pm", "Rock", "1 Elm St"],
            ["Short", "bad"],
            ["B", "2:00pm–3:00pm", "Jazz", "2 Elm St"],
        )
        output = os.path.join(self.temp_dir, "output.geojson")

        tally = process_listing(parse_result, self.enricher, output, "geojson")

        with open(output, encoding="utf-8") as f:
            collection = json.load(f)
        names = [feature["properties"]["artist_name"] for feature in collection["features"]]
        self.assertEqual(names, ["A", "Short", "B"])
        self.assertEqual(collection["features"][1]["geometry"]["coordinates"], [0.0, 0.0])
        self.assertEqual(tally.time_errors, 1)
        self.assertEqual(tally.geocoded, 2)

    def test_unexpected_error_does_not_abort_run(self):
        self.geocoder.lookup.side_effect = [
            RuntimeError("boom"),
            GeocodeResult(latitude="42.38", longitude="-71.1"),
        ]
        parse_result = _parse_result(
            ["A", "1:00pm–2:00pm", "Rock", "1 Elm St"],
            ["B", "2:00pm–3:00pm", "Jazz", "2 Elm St"],
        )
        tally = RowTally()

        with self.assertLogs("porchfest_geo.core.processor", level="WARNING") as logs:
            events = enrich_events(parse_result.rows, self.enricher, tally)

        self.assertEqual(len(events), 2)
        self.assertFalse(events[0].geocoded)
        self.assertTrue(events[1].geocoded)
        self.assertIn('"stage": "enrich"', "\n".join(logs.output))

    def test_placeholder_event_uses_anchor_text(self):
        self.geocoder.lookup.side_effect = RuntimeError("boom")
        name = '<a href="https://example.org/entry/846/">The Porch Dogs</a>'
        parse_result = _parse_result([name, "1:00pm–2:00pm", "Rock", "1 Elm St"])

        with self.assertLogs("porchfest_geo.core.processor", level="INFO") as logs:
            events = enrich_events(parse_result.rows, self.enricher, RowTally())

        self.assertEqual(events[0].artist_name, "The Porch Dogs")
        output = "\n".join(logs.output)
        self.assertIn('"artist_name": "The Porch Dogs"', output)
        self.assertNotIn("<a href", output)

    def test_tabular_unexpected_error_writes_empty_columns(self):
        self.geocoder.lookup.side_effect = RuntimeError("boom")
        parse_result = _parse_result(["A", "1:00pm–2:00pm", "Rock", "1 Elm St"])

        records = list(iter_tabular_records(parse_result.rows, self.enricher, RowTally()))

        self.assertEqual(records, [["A", "1:00pm–2:00pm", "Rock", "1 Elm St", "", "", ""]])

    def test_unknown_format(self):
        with self.assertRaises(ValueError):
            process_listing(_parse_result(), self.enricher, os.path.join(self.temp_dir, "x"), "kml")
        self.assertFalse(os.path.exists(os.path.join(self.temp_dir, "x")))


class TestProcessingStats(unittest.TestCase):
    def test_calculate_and_log(self):
        tally = RowTally(processed=4, geocoded=3, unresolved=1, time_errors=1)
        parse_result = _parse_result(*[["A", "", "", ""]] * 4)

        stats = calculate_processing_stats(tally, parse_result, 100.0, 102.0)

        self.assertEqual(stats.total_rows, 4)
        self.assertEqual(stats.geocoded_rows, 3)
        self.assertEqual(stats.total_duration, 2.0)
        self.assertEqual(stats.avg_time_per_row, 0.5)

        with self.assertLogs("porchfest_geo.core.processor", level="INFO") as logs:
            log_processing_summary(stats)
        output = "\n".join(logs.output)
        self.assertIn("Geocoded rows: 3", output)
        self.assertIn("1 rows have no coordinates", output)

    def test_zero_rows(self):
        stats = calculate_processing_stats(RowTally(), _parse_result(), 1.0, 1.0)
        self.assertEqual(stats.avg_time_per_row, 0)


if __name__ == "__main__":
    unittest.main()
