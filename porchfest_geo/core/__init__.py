#!/usr/bin/env python3
"""
Core package for the porchfest geocoding tools.

This package provides the core business logic: input parsing, time range
parsing, record enrichment, processing coordination and output writing.
"""

from .parser import (
    parse_input_file,
)

from .anchor import (
    Anchor,
    parse_anchor,
)

from .timerange import (
    parse_clock_time,
    parse_time_range,
)

from .enricher import (
    RecordEnricher,
)

from .output import (
    write_csv_output,
    write_geojson_output,
    write_events_json,
    read_geojson,
    read_events_json,
    build_feature_collection,
    events_from_feature_collection,
)

from .processor import (
    RowTally,
    process_listing,
    log_processing_start,
    log_processing_summary,
    calculate_processing_stats,
)

from .batch import (
    read_raw_listing,
    convert_raw_listing,
    convert_raw_listing_file,
    events_file_to_geojson,
)

__all__ = [
    # Input parsing
    "parse_input_file",
    "Anchor",
    "parse_anchor",
    # Time ranges
    "parse_clock_time",
    "parse_time_range",
    # Enrichment
    "RecordEnricher",
    # Output generation
    "write_csv_output",
    "write_geojson_output",
    "write_events_json",
    "read_geojson",
    "read_events_json",
    "build_feature_collection",
    "events_from_feature_collection",
    # Processing coordination
    "RowTally",
    "process_listing",
    "log_processing_start",
    "log_processing_summary",
    "calculate_processing_stats",
    # Raw listing conversion
    "read_raw_listing",
    "convert_raw_listing",
    "convert_raw_listing_file",
    "events_file_to_geojson",
]
