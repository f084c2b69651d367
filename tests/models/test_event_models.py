#!/usr/bin/env python3
"""
Tests for the event, geocode and listing models.
"""

import unittest

from porchfest_geo.models import (
    ArtistLink,
    ArtistPage,
    EnrichedEvent,
    EventLocation,
    GeocodeResult,
    InputRow,
    TimeRange,
)


class TestGeocodeResult(unittest.TestCase):
    def test_found_requires_both_coordinates(self):
        self.assertTrue(GeocodeResult("42.39", "-71.12").found)
        self.assertFalse(GeocodeResult("42.39", None).found)
        self.assertFalse(GeocodeResult().found)
        self.assertFalse(GeocodeResult(error="timeout").found)

    def test_as_floats(self):
        self.assertEqual(GeocodeResult("42.39", "-71.12").as_floats(), (42.39, -71.12))
        self.assertEqual(GeocodeResult().as_floats(), (0.0, 0.0))
        self.assertEqual(GeocodeResult("north", "west").as_floats(), (0.0, 0.0))


class TestTimeRange(unittest.TestCase):
    def test_resolved(self):
        self.assertTrue(TimeRange(1715450400000, 1715454000000).resolved)
        unresolved = TimeRange(error="missing separator")
        self.assertFalse(unresolved.resolved)
        self.assertEqual((unresolved.start, unresolved.end), (0, 0))


class TestEnrichedEvent(unittest.TestCase):
    """Test cases for EnrichedEvent serialization."""

    def setUp(self):
        self.event = EnrichedEvent(
            artist_name="The Porch Dogs",
            start_time=1715450400000,
            end_time=1715454000000,
            genres=["Rock", "Blues"],
            location=EventLocation(
                lat=42.3876,
                long=-71.0995,
                address="12 Highland Ave",
                google_maps_link="https://maps.google.com/?q=42.3876,-71.0995",
            ),
            geocoded=True,
            time_resolved=True,
        )

    def test_coordinates_are_longitude_first(self):
        self.assertEqual(self.event.coordinates, [-71.0995, 42.3876])

    def test_to_dict_omits_resolution_flags(self):
        data = self.event.to_dict()

        self.assertEqual(
            list(data.keys()),
            ["artist_name", "start_time", "end_time", "genres", "location"],
        )
        self.assertEqual(
            list(data["location"].keys()),
            ["lat", "long", "address", "google_maps_link"],
        )

    def test_from_dict_infers_flags(self):
        restored = EnrichedEvent.from_dict(self.event.to_dict())
        self.assertEqual(restored, self.event)

        unresolved = EnrichedEvent.from_dict({
            "artist_name": "Nowhere Band",
            "start_time": 0,
            "end_time": 0,
            "genres": [],
            "location": {"lat": 0.0, "long": 0.0, "address": "", "google_maps_link": None},
        })
        self.assertFalse(unresolved.geocoded)
        self.assertFalse(unresolved.time_resolved)

    def test_from_dict_missing_location(self):
        event = EnrichedEvent.from_dict({"artist_name": "Solo"})
        self.assertEqual(event.location, EventLocation(0.0, 0.0, ""))
        self.assertEqual(event.genres, [])


class TestInputRow(unittest.TestCase):
    def test_positional_fields(self):
        row = InputRow(2, ("Band", "1:00pm–2:00pm", "Jazz", "1 Elm St", "extra"))
        self.assertEqual(row.name, "Band")
        self.assertEqual(row.time_range, "1:00pm–2:00pm")
        self.assertEqual(row.genres, "Jazz")
        self.assertEqual(row.address, "1 Elm St")
        self.assertFalse(row.is_short)

    def test_short_row_reads_empty(self):
        row = InputRow(3, ("Band", "1:00pm–2:00pm"))
        self.assertTrue(row.is_short)
        self.assertEqual(row.genres, "")
        self.assertEqual(row.address, "")


class TestArtistPage(unittest.TestCase):
    def test_to_dict(self):
        page = ArtistPage(
            id="846",
            name="The Porch Dogs",
            links=(ArtistLink("Website", "https://porchdogs.example.com"),),
            img_url="https://example.org/dogs.jpg",
        )
        self.assertEqual(page.to_dict(), {
            "id": "846",
            "name": "The Porch Dogs",
            "about": "",
            "links": [{"text": "Website", "url": "https://porchdogs.example.com"}],
            "imgUrl": "https://example.org/dogs.jpg",
        })


if __name__ == "__main__":
    unittest.main()
