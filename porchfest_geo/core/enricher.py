"""
Record enrichment module.

This module turns listing rows into EnrichedEvent records: it extracts the
address, normalizes genres, geocodes the address and binds the time range
to the festival date.
"""

import logging
from datetime import date
from typing import List, Optional

from ..constants import DEFAULT_EVENT_TIMEZONE
from ..geocode import GeocodeClient, google_maps_link
from ..models import EnrichedEvent, EventLocation, GeocodeResult, InputRow, TimeRange
from ..utils import log_row_failure, split_genres
from .anchor import parse_anchor
from .timerange import parse_time_range

logger = logging.getLogger(__name__)


class RecordEnricher:
    """
    Enriches listing rows one at a time.

    The enricher holds no per-row state; each call geocodes and parses
    independently of every other row.
    """

    def __init__(
        self,
        geocoder: GeocodeClient,
        event_date: Optional[date] = None,
        timezone: str = DEFAULT_EVENT_TIMEZONE,
    ):
        self.geocoder = geocoder
        self.event_date = event_date
        self.timezone = timezone

    def geocode_address(
        self, address: str, line_number: int = 0, artist_name: str = ""
    ) -> GeocodeResult:
        """Geocode an address, logging a row failure when nothing usable comes back."""
        if not address:
            result = GeocodeResult(error="empty address")
        else:
            result = self.geocoder.lookup(address)

        if not result.found:
            log_row_failure(
                line_number=line_number,
                artist_name=artist_name,
                stage="geocode",
                error_message=result.error or f"no results for {address!r}",
                logger=logger,
            )
        return result

    def parse_times(self, text: str, line_number: int = 0, artist_name: str = "") -> TimeRange:
        """Parse a listing time range, logging a row failure when it does not parse."""
        time_range = parse_time_range(text, self.event_date, self.timezone)
        if not time_range.resolved:
            log_row_failure(
                line_number=line_number,
                artist_name=artist_name,
                stage="time_range",
                error_message=time_range.error,
                logger=logger,
            )
        return time_range

    def build_event(
        self,
        artist_name: str,
        time_range: TimeRange,
        genres: str,
        address_field: str,
        line_number: int = 0,
    ) -> EnrichedEvent:
        """
        Assemble an EnrichedEvent from already-split listing fields.

        ``address_field`` may be plain text or an anchor fragment; for an
        anchor the visible text is geocoded and its ``href`` is used as the
        map link when geocoding finds nothing.
        """
        anchor = parse_anchor(address_field)
        geocode = self.geocode_address(anchor.text, line_number, artist_name)
        lat, lon = geocode.as_floats()

        if geocode.found:
            link = google_maps_link(geocode.latitude, geocode.longitude)
        else:
            link = anchor.href

        return EnrichedEvent(
            artist_name=artist_name,
            start_time=time_range.start,
            end_time=time_range.end,
            genres=split_genres(genres),
            location=EventLocation(
                lat=lat,
                long=lon,
                address=anchor.text,
                google_maps_link=link,
            ),
            geocoded=geocode.found,
            time_resolved=time_range.resolved,
        )

    def enrich(self, row: InputRow) -> EnrichedEvent:
        """
        Enrich one listing row.

        Short rows are not rejected here: missing fields read as empty
        strings, so the event comes out with zero-valued times and
        coordinates.
        """
        artist_name = parse_anchor(row.name).text
        time_range = self.parse_times(row.time_range, row.line_number, artist_name)
        return self.build_event(
            artist_name=artist_name,
            time_range=time_range,
            genres=row.genres,
            address_field=row.address,
            line_number=row.line_number,
        )

    def tabular_columns(self, row: InputRow) -> List[str]:
        """
        Compute the latitude, longitude and map link columns for a row.

        All three are empty strings when the address does not geocode.
        """
        artist_name = parse_anchor(row.name).text
        address = parse_anchor(row.address).text
        geocode = self.geocode_address(address, row.line_number, artist_name)
        if not geocode.found:
            return ["", "", ""]
        return [
            geocode.latitude,
            geocode.longitude,
            google_maps_link(geocode.latitude, geocode.longitude),
        ]


def empty_event(row: InputRow) -> EnrichedEvent:
    """Placeholder event for a row whose enrichment raised unexpectedly."""
    return EnrichedEvent(
        artist_name=parse_anchor(row.name).text,
        start_time=0,
        end_time=0,
        genres=[],
        location=EventLocation(lat=0.0, long=0.0, address=parse_anchor(row.address).text),
    )
