"""
Processing coordination module.

This module drives the row-by-row enrichment of a parsed listing,
tracks progress, and reports run statistics.
"""

import logging
import time
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Iterator, List

from ..models import EnrichedEvent, InputRow, ParseResult, ProcessingStats
from ..utils import create_progress_bar, log_row_failure
from .anchor import parse_anchor
from .enricher import RecordEnricher, empty_event
from .output import write_csv_output, write_geojson_output

logger = logging.getLogger(__name__)


@dataclass
class RowTally:
    """Running counts for one enrichment pass."""

    processed: int = 0
    geocoded: int = 0
    unresolved: int = 0
    time_errors: int = 0
    short_skipped: int = 0


def log_processing_start(total_rows: int, input_file: str, output_file: str, output_format: str) -> float:
    """
    Log the start of processing with configuration details.

    Returns:
        Start timestamp for timing calculations
    """
    start_time = time.time()
    start_datetime = datetime.fromtimestamp(start_time)

    logger.info("=" * 70)
    logger.info("PORCHFEST GEOCODING - PROCESSING STARTED")
    logger.info("=" * 70)
    logger.info(f"Start time: {start_datetime.strftime('%Y-%m-%d %H:%M:%S')}")
    logger.info(f"Input file: {input_file}")
    logger.info(f"Output file: {output_file} ({output_format})")
    logger.info(f"Total rows to process: {total_rows}")
    logger.info("=" * 70)

    return start_time


def log_progress_update(
    current: int,
    total: int,
    artist_name: str,
    geocoded: bool,
    duration: float,
):
    """Log progress for one processed row."""
    percentage = (current / total) * 100 if total else 100.0
    status_icon = "✅" if geocoded else "❌"
    status_text = "GEOCODED" if geocoded else "UNRESOLVED"
    progress_bar = create_progress_bar(current, total)

    logger.info(
        f"{progress_bar} [{current:3d}/{total:3d}] ({percentage:5.1f}%) {status_icon} {artist_name} - {status_text} ({duration:.2f}s)"
    )


def log_processing_summary(stats: ProcessingStats):
    """Log a processing summary with statistics."""
    end_datetime = datetime.fromtimestamp(stats.end_time)

    logger.info("=" * 70)
    logger.info("PROCESSING SUMMARY")
    logger.info("=" * 70)
    logger.info(f"End time: {end_datetime.strftime('%Y-%m-%d %H:%M:%S')}")
    logger.info(
        f"Total duration: {stats.total_duration:.2f} seconds ({timedelta(seconds=int(stats.total_duration))})"
    )
    logger.info("")
    logger.info("INPUT STATISTICS:")
    logger.info(f"  Total rows: {stats.total_rows}")
    logger.info(f"  Skipped blank lines: {stats.skipped_lines}")
    logger.info(f"  Short rows: {stats.short_rows}")
    logger.info("")
    logger.info("ENRICHMENT STATISTICS:")
    logger.info(f"  Geocoded rows: {stats.geocoded_rows}")
    logger.info(f"  Unresolved rows: {stats.unresolved_rows}")
    logger.info(f"  Time range errors: {stats.time_errors}")
    if stats.total_rows > 0:
        logger.info(f"  Geocode rate: {(stats.geocoded_rows / stats.total_rows * 100):.1f}%")
    logger.info(f"  Average time per row: {stats.avg_time_per_row:.2f}s")
    logger.info("=" * 70)

    if stats.unresolved_rows > 0:
        logger.warning(f"⚠️  {stats.unresolved_rows} rows have no coordinates")
    if stats.time_errors > 0:
        logger.warning(f"⚠️  {stats.time_errors} rows have no parsed time range")
    if stats.short_rows > 0:
        logger.warning(f"⚠️  {stats.short_rows} rows had too few fields")


def calculate_processing_stats(
    tally: RowTally,
    parse_result: ParseResult,
    start_time: float,
    end_time: float,
) -> ProcessingStats:
    """Calculate processing statistics for a finished pass."""
    total_duration = end_time - start_time
    avg_time_per_row = total_duration / tally.processed if tally.processed > 0 else 0

    return ProcessingStats(
        total_rows=len(parse_result.rows),
        geocoded_rows=tally.geocoded,
        unresolved_rows=tally.unresolved,
        time_errors=tally.time_errors,
        skipped_lines=parse_result.skipped_lines,
        short_rows=parse_result.short_rows,
        start_time=start_time,
        end_time=end_time,
        total_duration=total_duration,
        avg_time_per_row=avg_time_per_row,
    )


def iter_tabular_records(
    rows: List[InputRow], enricher: RecordEnricher, tally: RowTally
) -> Iterator[List[str]]:
    """
    Yield each row extended with latitude, longitude and map link.

    Short rows are skipped. An unexpected error on one row is logged and
    the row is written with empty coordinate columns.
    """
    total = len(rows)
    for index, row in enumerate(rows, 1):
        if row.is_short:
            tally.short_skipped += 1
            continue

        started = time.time()
        artist_name = parse_anchor(row.name).text
        try:
            columns = enricher.tabular_columns(row)
        except Exception as e:
            log_row_failure(row.line_number, artist_name, "enrich", str(e), logger=logger)
            columns = ["", "", ""]

        geocoded = bool(columns[0])
        tally.processed += 1
        if geocoded:
            tally.geocoded += 1
        else:
            tally.unresolved += 1

        log_progress_update(index, total, artist_name, geocoded, time.time() - started)
        yield list(row.fields) + columns


def enrich_events(
    rows: List[InputRow], enricher: RecordEnricher, tally: RowTally
) -> List[EnrichedEvent]:
    """
    Enrich every row into an event, in input order.

    Short rows produce zero-valued events. An unexpected error on one row
    is logged and that row gets a placeholder event.
    """
    events = []
    total = len(rows)
    for index, row in enumerate(rows, 1):
        started = time.time()
        try:
            event = enricher.enrich(row)
        except Exception as e:
            log_row_failure(row.line_number, parse_anchor(row.name).text, "enrich", str(e), logger=logger)
            event = empty_event(row)

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


def process_listing(
    parse_result: ParseResult,
    enricher: RecordEnricher,
    output_path: str,
    output_format: str,
) -> RowTally:
    """
    Enrich a parsed listing and write it in the requested format.

    Args:
        parse_result: Parsed input file
        enricher: Configured record enricher
        output_path: Destination file
        output_format: "csv" or "geojson"

    Returns:
        Counts for the pass

    Raises:
        ValueError: If the output format is unknown
        OSError: If the output file cannot be written
    """
    tally = RowTally()
    if output_format == "csv":
        write_csv_output(
            parse_result.header,
            iter_tabular_records(parse_result.rows, enricher, tally),
            output_path,
        )
    elif output_format == "geojson":
        events = enrich_events(parse_result.rows, enricher, tally)
        write_geojson_output(events, output_path)
    else:
        raise ValueError(f"Unknown output format: {output_format}")
    return tally
