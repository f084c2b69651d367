"""
Logging utilities for the porchfest geocoding tools.

This module provides centralized logging configuration and structured
log helpers so that per-row failures and scrape results can be picked out
of a run log by automated tools.
"""

import json
import logging
import time
from typing import Optional


def setup_logging(verbose: bool = False):
    """Setup logging configuration with appropriate level and format."""
    level = logging.DEBUG if verbose else logging.INFO
    format_string = "%(asctime)s - %(levelname)s - %(message)s"

    logging.basicConfig(level=level, format=format_string, datefmt="%Y-%m-%d %H:%M:%S")

    # Set specific logger levels
    logging.getLogger("urllib3").setLevel(logging.WARNING)  # Reduce HTTP client noise


def log_row_failure(
    line_number: int,
    artist_name: str,
    stage: str,
    error_message: str,
    timestamp: Optional[float] = None,
    logger: Optional[logging.Logger] = None
):
    """
    Log a structured record for a row that could not be fully enriched.

    The row itself is still written with default values; this record lets
    the operator find which rows need attention.

    Args:
        line_number: Line number of the row in the input file
        artist_name: Artist name from the row
        stage: Enrichment step that failed (geocode, time_range, enrich)
        error_message: Description of the error that occurred
        timestamp: Failure timestamp (defaults to current time)
        logger: Logger instance to use (defaults to current module logger)
    """
    if logger is None:
        logger = logging.getLogger(__name__)

    if timestamp is None:
        timestamp = time.time()

    failure_record = {
        "event_type": "row_failure",
        "timestamp": timestamp,
        "line_number": line_number,
        "artist_name": artist_name,
        "stage": stage,
        "error_message": error_message,
    }

    logger.warning(f"ROW_FAILURE: {json.dumps(failure_record, ensure_ascii=False)}")


def log_scrape_result(
    entry_id: str,
    url: str,
    success: bool,
    artist_name: Optional[str] = None,
    image_path: Optional[str] = None,
    error_message: Optional[str] = None,
    logger: Optional[logging.Logger] = None
):
    """
    Log a structured record for one scraped artist page.

    Args:
        entry_id: Listing entry id of the page
        url: Detail page URL
        success: Whether the page was scraped and saved
        artist_name: Artist name found on the page
        image_path: Where the artist image was saved, if anywhere
        error_message: Description of the failure, if any
        logger: Logger instance to use (defaults to current module logger)
    """
    if logger is None:
        logger = logging.getLogger(__name__)

    scrape_record = {
        "event_type": "artist_scrape",
        "timestamp": time.time(),
        "entry_id": entry_id,
        "url": url,
        "artist_name": artist_name,
        "image_path": image_path,
        "success": success,
    }
    if error_message:
        scrape_record["error_message"] = error_message

    if success:
        logger.info(f"SCRAPE: {json.dumps(scrape_record, ensure_ascii=False)}")
    else:
        logger.warning(f"SCRAPE_FAILURE: {json.dumps(scrape_record, ensure_ascii=False)}")
