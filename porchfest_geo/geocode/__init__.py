"""
Geocoding package for the porchfest tools.

This package provides the client for the local address lookup service.
"""

from .client import (
    GeocodeClient,
    create_geocode_client,
    qualify_address,
    google_maps_link,
)

__all__ = [
    "GeocodeClient",
    "create_geocode_client",
    "qualify_address",
    "google_maps_link",
]
