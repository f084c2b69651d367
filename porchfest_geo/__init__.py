#!/usr/bin/env python3
"""
Porchfest Geo Package

A Python package for turning a scraped porchfest listing into geocoded
CSV and GeoJSON files using a local Nominatim-style geocoding service,
and for scraping per-artist detail pages and images.

This package provides both command-line interfaces and a programmatic API.
"""

__version__ = "1.0.0"
__author__ = "Porchfest Map"
__description__ = (
    "Geocode porchfest listings into CSV and GeoJSON and scrape artist pages"
)
__license__ = "MIT"
__status__ = "Production"

# Import models for public API
from .models import (
    InputRow,
    ParseResult,
    GeocodeResult,
    TimeRange,
    EventLocation,
    EnrichedEvent,
    ArtistLink,
    ArtistPage,
    ProcessingStats,
)

# Import constants for public API
from .constants import (
    EXIT_SUCCESS,
    EXIT_INPUT_ERROR,
    EXIT_CONFIG_ERROR,
    EXIT_OUTPUT_ERROR,
    EXIT_FETCH_FAILURES,
    EXIT_INTERRUPTED,
    EXIT_UNEXPECTED_ERROR,
)

# Import core functionality for public API
from .core import (
    parse_input_file,
    parse_anchor,
    parse_time_range,
    RecordEnricher,
    process_listing,
    write_csv_output,
    write_geojson_output,
    read_geojson,
)

# Import geocoding for public API
from .geocode import (
    GeocodeClient,
    create_geocode_client,
)

# Import scraping for public API
from .scraper import (
    ArtistPageScraper,
    scrape_listing,
)

# Import CLI functionality for public API
from .cli import (
    main,
    batch_main,
    scrape_main,
)

# Import utilities for public API
from .utils import (
    setup_logging,
)

# Public API exports
__all__ = [
    # Package metadata
    "__version__",
    "__author__",
    "__description__",
    # Data models
    "InputRow",
    "ParseResult",
    "GeocodeResult",
    "TimeRange",
    "EventLocation",
    "EnrichedEvent",
    "ArtistLink",
    "ArtistPage",
    "ProcessingStats",
    # Constants
    "EXIT_SUCCESS",
    "EXIT_INPUT_ERROR",
    "EXIT_CONFIG_ERROR",
    "EXIT_OUTPUT_ERROR",
    "EXIT_FETCH_FAILURES",
    "EXIT_INTERRUPTED",
    "EXIT_UNEXPECTED_ERROR",
    # Core functionality
    "parse_input_file",
    "parse_anchor",
    "parse_time_range",
    "RecordEnricher",
    "process_listing",
    "write_csv_output",
    "write_geojson_output",
    "read_geojson",
    # Geocoding
    "GeocodeClient",
    "create_geocode_client",
    # Scraping
    "ArtistPageScraper",
    "scrape_listing",
    # CLI functions
    "main",
    "batch_main",
    "scrape_main",
    # Utilities
    "setup_logging",
]
