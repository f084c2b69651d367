"""
Raw listing conversion module.

The festival site's listing table is scraped into a JSON document of the
form ``{"data": [[name, start, end, genres, address], ...]}`` where the
name and address cells are HTML anchor fragments. This module converts
that document into the event list and GeoJSON formats.
"""

import json
import logging
import time
from typing import Any, List, Sequence

from ..models import EnrichedEvent, TimeRange
from ..utils import log_row_failure
from .anchor import parse_anchor
from .enricher import RecordEnricher
from .output import write_events_json, write_geojson_output, read_events_json
from .processor import RowTally, log_progress_update
from .timerange import parse_clock_time

logger = logging.getLogger(__name__)

RAW_ENTRY_FIELDS = 5


def read_raw_listing(input_path: str) -> List[List[str]]:
    """
    Read the entries of a raw listing document.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the document has no ``data`` list
    """
    with open(input_path, "r", encoding="utf-8") as f:
        document = json.load(f)

    entries = document.get("data") if isinstance(document, dict) else None
    if not isinstance(entries, list):
        raise ValueError(f"Raw listing has no 'data' list: {input_path}")

    logger.info(f"Read {len(entries)} raw entries from {input_path}")
    return entries


def entry_cells(entry: Any) -> List[str]:
    """
    Return an entry's cells as strings.

    ``null`` or non-string cells read as empty strings.

    Raises:
        ValueError: If the entry is not a list of cells
    """
    if not isinstance(entry, (list, tuple)):
        raise ValueError(f"raw entry is not a list: {type(entry).__name__}")
    return [cell if isinstance(cell, str) else "" for cell in entry]


def detail_page_url(entry: Sequence[str]) -> str:
    """Return the artist detail page URL linked from an entry's name cell."""
    if not isinstance(entry, (list, tuple)) or not entry or not isinstance(entry[0], str):
        return ""
    return parse_anchor(entry[0]).href or ""


def parse_entry_times(entry: Sequence[str], enricher: RecordEnricher) -> TimeRange:
    """
    Parse the separate start and end cells of a raw entry.

    The start cell may carry trailing markup after an ``&`` (for example
    ``2:00pm&nbsp;-``); only the part before it is the time.
    """
    start_text = entry[1].split("&")[0].strip()
    end_text = entry[2].strip()
    try:
        start = parse_clock_time(start_text, enricher.event_date, enricher.timezone)
        end = parse_clock_time(end_text, enricher.event_date, enricher.timezone)
    except ValueError as e:
        return TimeRange(error=f"invalid time {start_text!r}-{end_text!r}: {e}")
    return TimeRange(start=start, end=end)


def convert_raw_entry(
    entry: Sequence[str], enricher: RecordEnricher, line_number: int = 0
) -> EnrichedEvent:
    """
    Convert one raw listing entry into an EnrichedEvent.

    Raises:
        ValueError: If the entry is not a list of at least five cells
    """
    entry = entry_cells(entry)
    if len(entry) < RAW_ENTRY_FIELDS:
        raise ValueError(f"raw entry has {len(entry)} cells, need {RAW_ENTRY_FIELDS}")

    artist_name = parse_anchor(entry[0]).text
    time_range = parse_entry_times(entry, enricher)
    if not time_range.resolved:
        logger.warning(f"Entry {line_number} ({artist_name}): {time_range.error}")

    return enricher.build_event(
        artist_name=artist_name,
        time_range=time_range,
        genres=entry[3],
        address_field=entry[4],
        line_number=line_number,
    )


def convert_raw_listing(
    entries: List[Sequence[str]], enricher: RecordEnricher, tally: RowTally
) -> List[EnrichedEvent]:
    """
    Convert raw entries in order.

    Malformed entries are skipped. An unexpected error on one entry is
    logged and that entry is skipped; the rest are still converted.
    """
    events = []
    total = len(entries)
    for index, entry in enumerate(entries, 1):
        started = time.time()
        try:
            event = convert_raw_entry(entry, enricher, line_number=index)
        except ValueError as e:
            logger.warning(f"Entry {index}: skipping: {e}")
            tally.short_skipped += 1
            continue
        except Exception as e:
            log_row_failure(index, "", "enrich", str(e), logger=logger)
            tally.short_skipped += 1
            continue

        tally.processed += 1
        if event.geocoded:
            tally.geocoded += 1
        else:
            tally.unresolved += 1
        if not event.time_resolved:
            tally.time_errors += 1

        log_progress_update(index, total, event.artist_name, event.geocoded, time.time() - started)
        events.append(event)
    return events


def convert_raw_listing_file(
    input_path: str, output_path: str, enricher: RecordEnricher
) -> RowTally:
    """Convert a raw listing file into an event list JSON file."""
    tally = RowTally()
    entries = read_raw_listing(input_path)
    events = convert_raw_listing(entries, enricher, tally)
    write_events_json(events, output_path)
    return tally


def events_file_to_geojson(events_path: str, output_path: str) -> int:
    """Convert an event list JSON file into a GeoJSON FeatureCollection."""
    events = read_events_json(events_path)
    return write_geojson_output(events, output_path)
