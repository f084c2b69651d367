#!/usr/bin/env python3
"""
Geocode Result Models

This module contains the result type returned by the geocode client.
"""

from typing import NamedTuple, Optional


class GeocodeResult(NamedTuple):
    """
    Result of a single geocode lookup.

    An empty result (both coordinates None) means the lookup produced no
    data, either because the service had no candidates or because the
    request failed. ``error`` is set only in the failure case.

    Attributes:
        latitude: Latitude as returned by the service (decimal string)
        longitude: Longitude as returned by the service (decimal string)
        error: Description of the failure, if the lookup failed
    """

    latitude: Optional[str] = None
    longitude: Optional[str] = None
    error: Optional[str] = None

    @property
    def found(self) -> bool:
        return bool(self.latitude) and bool(self.longitude)

    def as_floats(self) -> tuple:
        """Return (latitude, longitude) as floats, or (0.0, 0.0) when unusable."""
        if not self.found:
            return 0.0, 0.0
        try:
            return float(self.latitude), float(self.longitude)
        except ValueError:
            return 0.0, 0.0
