#!/usr/bin/env python3
"""
Event Data Models

This module contains the enriched event structures written to the CSV,
event list and GeoJSON outputs.
"""

from typing import Any, Dict, List, Mapping, NamedTuple, Optional


class TimeRange(NamedTuple):
    """
    Start and end of a performance as epoch milliseconds.

    Unparseable ranges are represented as (0, 0) with ``error`` set, so
    callers can tell "no data" apart from a real timestamp.

    Attributes:
        start: Start time in epoch milliseconds
        end: End time in epoch milliseconds
        error: Description of the parse failure, if any
    """

    start: int = 0
    end: int = 0
    error: Optional[str] = None

    @property
    def resolved(self) -> bool:
        return self.error is None


class EventLocation(NamedTuple):
    """
    Where a performance takes place.

    Attributes:
        lat: Latitude (0.0 when the address did not geocode)
        long: Longitude (0.0 when the address did not geocode)
        address: Street address as listed
        google_maps_link: Map link for the coordinates, None when unknown
    """

    lat: float
    long: float
    address: str
    google_maps_link: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "lat": self.lat,
            "long": self.long,
            "address": self.address,
            "google_maps_link": self.google_maps_link,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "EventLocation":
        return cls(
            lat=float(data.get("lat") or 0.0),
            long=float(data.get("long") or 0.0),
            address=data.get("address") or "",
            google_maps_link=data.get("google_maps_link"),
        )


class EnrichedEvent(NamedTuple):
    """
    A listing row after geocoding and time parsing.

    ``geocoded`` and ``time_resolved`` record whether the coordinates and
    timestamps carry real data. They are not part of the serialized form.

    Attributes:
        artist_name: Artist or band name
        start_time: Start time in epoch milliseconds
        end_time: End time in epoch milliseconds
        genres: Genre names in listing order
        location: Geocoded location of the porch
        geocoded: Whether the address resolved to coordinates
        time_resolved: Whether the time range parsed
    """

    artist_name: str
    start_time: int
    end_time: int
    genres: List[str]
    location: EventLocation
    geocoded: bool = False
    time_resolved: bool = False

    @property
    def coordinates(self) -> List[float]:
        """GeoJSON position for this event: [longitude, latitude]."""
        return [self.location.long, self.location.lat]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "artist_name": self.artist_name,
            "start_time": self.start_time,
            "end_time": self.end_time,
            "genres": list(self.genres),
            "location": self.location.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "EnrichedEvent":
        """
        Rebuild an event from its serialized form.

        The resolution flags are inferred from the data: coordinates other
        than (0, 0) count as geocoded, non-zero timestamps as resolved.
        """
        location = EventLocation.from_dict(data.get("location") or {})
        start_time = int(data.get("start_time") or 0)
        end_time = int(data.get("end_time") or 0)
        return cls(
            artist_name=data.get("artist_name") or "",
            start_time=start_time,
            end_time=end_time,
            genres=list(data.get("genres") or []),
            location=location,
            geocoded=(location.lat, location.long) != (0.0, 0.0),
            time_resolved=(start_time, end_time) != (0, 0),
        )
