"""
CLI main application module.

This module contains the entry points for the listing geocoding, raw
listing conversion and artist page scraping commands.
"""

import csv
import logging
import os
import sys
import time
from datetime import date

from ..constants import (
    CSV_OUTPUT_FILENAME,
    DEFAULT_BATCH_EVENT_DATE,
    EXIT_FETCH_FAILURES,
    EXIT_INPUT_ERROR,
    EXIT_INTERRUPTED,
    EXIT_OUTPUT_ERROR,
    EXIT_UNEXPECTED_ERROR,
    GEOJSON_OUTPUT_FILENAME,
    INPUT_FILENAME,
)

from ..core import (
    RecordEnricher,
    RowTally,
    calculate_processing_stats,
    convert_raw_listing,
    log_processing_start,
    log_processing_summary,
    parse_input_file,
    process_listing,
    read_events_json,
    read_raw_listing,
    write_events_json,
    write_geojson_output,
)

from ..geocode import create_geocode_client
from ..scraper import scrape_listing, scrape_url

from .parser import (
    create_argument_parser,
    create_batch_parser,
    create_scrape_parser,
)
from .utils import configure, require_writable

logger = logging.getLogger(__name__)


def main(argv=None):
    """Geocode ``<data-dir>/<year>/input.csv`` into CSV or GeoJSON output."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)
    env = configure(args)

    year_dir = os.path.join(env.DATA_DIR, args.year)
    input_path = os.path.join(year_dir, INPUT_FILENAME)
    output_name = CSV_OUTPUT_FILENAME if args.format == "csv" else GEOJSON_OUTPUT_FILENAME
    output_path = os.path.join(year_dir, output_name)

    try:
        parse_result = parse_input_file(input_path)
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        logger.error(f"Failed to read input file: {e}")
        sys.exit(EXIT_INPUT_ERROR)

    if not parse_result.header:
        logger.error(f"Input file is empty: {input_path}")
        sys.exit(EXIT_INPUT_ERROR)

    require_writable(output_path)

    client = create_geocode_client(env.GEOCODE_BASE_URL, env.GEOCODE_LOCALITY)
    enricher = RecordEnricher(client, event_date=env.EVENT_DATE, timezone=env.EVENT_TIMEZONE)
    if env.EVENT_DATE is None and args.format == "geojson":
        logger.info("No event date configured, binding times to today's date")

    start_time = log_processing_start(
        total_rows=len(parse_result.rows),
        input_file=input_path,
        output_file=output_path,
        output_format=args.format,
    )

    try:
        tally = process_listing(parse_result, enricher, output_path, args.format)
    except KeyboardInterrupt:
        logger.warning("Processing interrupted by user (Ctrl+C)")
        logger.info(f"Rows written so far remain in {output_path}")
        sys.exit(EXIT_INTERRUPTED)
    except OSError as e:
        logger.error(f"Failed to write output file: {e}")
        sys.exit(EXIT_OUTPUT_ERROR)
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        sys.exit(EXIT_UNEXPECTED_ERROR)
    finally:
        client.close()

    stats = calculate_processing_stats(tally, parse_result, start_time, time.time())
    log_processing_summary(stats)
    logger.info(f"Output written: {output_path}")


def batch_main(argv=None):
    """Convert a raw listing JSON to an event list, and optionally GeoJSON."""
    parser = create_batch_parser()
    args = parser.parse_args(argv)
    if args.raw_file and not args.output:
        parser.error("--output is required with --raw-file")
    if args.events_file and not args.geojson_output:
        parser.error("--geojson-output is required with --events-file")

    env = configure(args)
    event_date = env.EVENT_DATE
    if event_date is None:
        event_date = date.fromisoformat(DEFAULT_BATCH_EVENT_DATE)
        logger.info(f"No event date configured, using {event_date.isoformat()}")

    for path in filter(None, [args.output, args.geojson_output]):
        require_writable(path)

    try:
        if args.raw_file:
            entries = read_raw_listing(args.raw_file)
        else:
            events = read_events_json(args.events_file)
    except (OSError, UnicodeDecodeError, ValueError) as e:
        logger.error(f"Failed to read input file: {e}")
        sys.exit(EXIT_INPUT_ERROR)

    try:
        if args.raw_file:
            client = create_geocode_client(env.GEOCODE_BASE_URL, env.GEOCODE_LOCALITY)
            enricher = RecordEnricher(client, event_date=event_date, timezone=env.EVENT_TIMEZONE)
            tally = RowTally()
            try:
                events = convert_raw_listing(entries, enricher, tally)
            finally:
                client.close()
            write_events_json(events, args.output)
            logger.info(
                f"Converted {tally.processed} entries ({tally.geocoded} geocoded, "
                f"{tally.unresolved} unresolved, {tally.short_skipped} skipped)"
            )

        if args.geojson_output:
            count = write_geojson_output(events, args.geojson_output)
            logger.info(f"GeoJSON file created with {count} features: {args.geojson_output}")

    except KeyboardInterrupt:
        logger.warning("Processing interrupted by user (Ctrl+C)")
        sys.exit(EXIT_INTERRUPTED)
    except OSError as e:
        logger.error(f"Failed to write output file: {e}")
        sys.exit(EXIT_OUTPUT_ERROR)


def scrape_main(argv=None):
    """Scrape one artist detail page or every page linked from a raw listing."""
    parser = create_scrape_parser()
    args = parser.parse_args(argv)
    configure(args)

    try:
        if args.url:
            ok = scrape_url(args.url, args.output_dir)
            failed = 0 if ok else 1
        else:
            _, failed = scrape_listing(args.raw_file, args.output_dir)
    except (OSError, UnicodeDecodeError, ValueError) as e:
        logger.error(f"Failed to read raw listing: {e}")
        sys.exit(EXIT_INPUT_ERROR)
    except KeyboardInterrupt:
        logger.warning("Scraping interrupted by user (Ctrl+C)")
        sys.exit(EXIT_INTERRUPTED)

    if failed:
        logger.error(f"{failed} artist pages could not be scraped")
        sys.exit(EXIT_FETCH_FAILURES)
