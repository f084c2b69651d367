"""
CLI argument parser module.

Each command's parser is generated from the configuration schema and then
extended with the arguments specific to that command.
"""

from ..config.loader import ConfigLoader
from ..constants import DEFAULT_YEAR, OUTPUT_FORMATS


def create_argument_parser():
    """Create the parser for the listing geocoding command."""
    parser = ConfigLoader.generate_cli_parser(
        description="Geocode a porchfest listing CSV into CSV or GeoJSON",
        epilog="""
Examples:
  porchfest-geo --year 2025 --format csv
  porchfest-geo --year 2024 --format geojson --event-date 2024-05-11
  porchfest-geo --format csv --geocode-url http://nominatim.local:8080
        """,
    )
    parser.add_argument(
        "--year",
        default=DEFAULT_YEAR,
        help=f"Data year: reads <data-dir>/<year>/input.csv (default: {DEFAULT_YEAR})",
    )
    parser.add_argument(
        "--format",
        default="csv",
        choices=OUTPUT_FORMATS,
        help="Output format: csv or geojson (default: csv)",
    )
    return parser


def create_batch_parser():
    """Create the parser for the raw listing conversion command."""
    parser = ConfigLoader.generate_cli_parser(
        description="Convert a scraped raw listing JSON into event list and GeoJSON files",
        epilog="""
Examples:
  porchfest-batch --raw-file data/raw-2024-05-06.json --output data/artists-2024-05-06.json
  porchfest-batch --events-file data/artists-2024-05-06.json --geojson-output data/output.geojson
        """,
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--raw-file",
        help="Raw listing JSON ({\"data\": [[...], ...]}) to geocode",
    )
    source.add_argument(
        "--events-file",
        help="Existing event list JSON to convert to GeoJSON without geocoding",
    )
    parser.add_argument(
        "--output",
        help="Event list JSON output path (required with --raw-file)",
    )
    parser.add_argument(
        "--geojson-output",
        help="Also write a GeoJSON FeatureCollection to this path",
    )
    return parser


def create_scrape_parser():
    """Create the parser for the artist page scraping command."""
    parser = ConfigLoader.generate_cli_parser(
        description="Scrape artist detail pages and images",
        epilog="""
Examples:
  porchfest-scrape --url https://example.org/view/porchfest-single-entry/entry/846/
  porchfest-scrape --raw-file data/raw-2024-05-06.json --output-dir data/artists
        """,
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--url", help="Single artist detail page URL")
    source.add_argument("--raw-file", help="Raw listing JSON whose entries link to detail pages")
    parser.add_argument(
        "--output-dir",
        default=".",
        help="Directory to save per-entry folders in (default: current directory)",
    )
    return parser
