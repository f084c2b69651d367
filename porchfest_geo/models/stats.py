#!/usr/bin/env python3
"""
Statistics Models

This module contains data structures related to processing statistics.
"""

from typing import NamedTuple


class ProcessingStats(NamedTuple):
    """
    Statistics for a listing enrichment run.

    Attributes:
        total_rows: Number of data rows read from the input
        geocoded_rows: Rows whose address resolved to coordinates
        unresolved_rows: Rows written without coordinates
        time_errors: Rows whose time range could not be parsed
        skipped_lines: Blank lines skipped by the parser
        short_rows: Rows with fewer than the required fields
        start_time: Processing start timestamp
        end_time: Processing end timestamp
        total_duration: Total processing duration in seconds
        avg_time_per_row: Average processing time per row
    """

    total_rows: int
    geocoded_rows: int
    unresolved_rows: int
    time_errors: int
    skipped_lines: int
    short_rows: int
    start_time: float
    end_time: float
    total_duration: float
    avg_time_per_row: float
