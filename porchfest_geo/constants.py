#!/usr/bin/env python3
"""
Application Constants

This module contains configuration defaults and exit codes used
throughout the porchfest geocoding tools.
"""

# Exit codes for different failure modes
EXIT_SUCCESS = 0
EXIT_INPUT_ERROR = 2
EXIT_CONFIG_ERROR = 3
EXIT_OUTPUT_ERROR = 4
EXIT_FETCH_FAILURES = 5
EXIT_INTERRUPTED = 130  # Conventional exit code for Ctrl+C
EXIT_UNEXPECTED_ERROR = 10

# Geocoding service defaults
DEFAULT_GEOCODE_BASE_URL = "http://localhost:8080"
DEFAULT_GEOCODE_LOCALITY = "somerville"
GEOCODE_SEARCH_PATH = "/search.php"
MAP_LINK_TEMPLATE = "https://maps.google.com/?q={lat},{lon}"

# Time range parsing
TIME_RANGE_SEPARATOR = "–"  # en dash
CLOCK_TIME_FORMAT = "%I:%M%p"  # 12-hour clock, e.g. 2:00pm
DEFAULT_EVENT_TIMEZONE = "America/New_York"
DEFAULT_BATCH_EVENT_DATE = "2024-05-11"

# Input/output layout
DEFAULT_DATA_DIR = "data"
DEFAULT_YEAR = "2025"
INPUT_FILENAME = "input.csv"
CSV_OUTPUT_FILENAME = "output.csv"
GEOJSON_OUTPUT_FILENAME = "output.geojson"
OUTPUT_FORMATS = ("csv", "geojson")
MIN_ROW_FIELDS = 4
APPENDED_COLUMNS = ["Latitude", "Longitude", "Google Maps Link"]
JSON_INDENT = 2
