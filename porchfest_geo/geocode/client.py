"""
Geocoding client module.

This module looks up free-text street addresses against a local
Nominatim-style search endpoint and returns the first candidate's
coordinates.
"""

import logging
from typing import Optional

import requests

from ..config import Env
from ..constants import GEOCODE_SEARCH_PATH, MAP_LINK_TEMPLATE
from ..models import GeocodeResult

logger = logging.getLogger(__name__)


def qualify_address(address: str, locality: str) -> str:
    """Append the locality to an address unless it already names it."""
    address = address.strip()
    if not locality or locality.lower() in address.lower():
        return address
    return f"{address}, {locality}"


def google_maps_link(latitude: str, longitude: str) -> str:
    """Build the map link for a coordinate pair, keeping the service's text as-is."""
    return MAP_LINK_TEMPLATE.format(lat=latitude, lon=longitude)


class GeocodeClient:
    """
    Client for a Nominatim-style ``search.php`` endpoint.

    Requests are issued one at a time with no retries; every failure is
    logged and turned into an empty GeocodeResult carrying the error text.
    """

    def __init__(
        self,
        base_url: str,
        locality: str,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.locality = locality
        self.session = session or requests.Session()

    @property
    def search_url(self) -> str:
        return f"{self.base_url}{GEOCODE_SEARCH_PATH}"

    def lookup(self, address: str) -> GeocodeResult:
        """
        Geocode a street address.

        Args:
            address: Free-text address, with or without the locality

        Returns:
            GeocodeResult with the first candidate's coordinates, an empty
            result when the service has no candidates, or an empty result
            with ``error`` set when the request or response was unusable
        """
        query = qualify_address(address, self.locality)
        logger.debug(f"Geocoding query: {query}")

        try:
            response = self.session.get(
                self.search_url,
                params={"q": query, "format": "json"},
            )
            response.raise_for_status()
        except requests.RequestException as e:
            logger.warning(f"Error requesting geocode for: {address}: {e}")
            return GeocodeResult(error=f"request failed: {e}")

        try:
            candidates = response.json()
        except ValueError as e:
            logger.warning(f"Error decoding JSON for: {address}: {e}")
            return GeocodeResult(error=f"invalid JSON: {e}")

        if not isinstance(candidates, list):
            logger.warning(f"Unexpected geocode response for: {address}: {type(candidates).__name__}")
            return GeocodeResult(error="response is not a list of results")

        if not candidates:
            logger.info(f"No geocoding results found for: {address}")
            return GeocodeResult()

        first = candidates[0]
        if not isinstance(first, dict):
            return GeocodeResult(error="first result is not an object")

        latitude = first.get("lat")
        longitude = first.get("lon")
        if not latitude or not longitude:
            logger.warning(f"Geocode result for {address} is missing lat/lon")
            return GeocodeResult(error="first result has no lat/lon")

        return GeocodeResult(latitude=str(latitude), longitude=str(longitude))

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "GeocodeClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


def create_geocode_client(
    base_url: Optional[str] = None,
    locality: Optional[str] = None,
    session: Optional[requests.Session] = None,
) -> GeocodeClient:
    """Create a geocode client, filling unset values from the current Env."""
    if base_url is None or locality is None:
        env = Env.current()
        base_url = base_url or env.GEOCODE_BASE_URL
        locality = locality or env.GEOCODE_LOCALITY

    client = GeocodeClient(base_url=base_url, locality=locality, session=session)
    logger.info(f"Geocode client initialized for {client.search_url}")
    return client
