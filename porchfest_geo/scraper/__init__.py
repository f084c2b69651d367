"""
Scraper package for the porchfest tools.

This package fetches per-artist detail pages and images from the
festival site.
"""

from .artist_page import (
    ArtistPageScraper,
    entry_id_from_url,
    parse_artist_page,
    scrape_url,
    scrape_listing,
    scrape_listing_entries,
)

__all__ = [
    "ArtistPageScraper",
    "entry_id_from_url",
    "parse_artist_page",
    "scrape_url",
    "scrape_listing",
    "scrape_listing_entries",
]
