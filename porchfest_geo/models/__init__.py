#!/usr/bin/env python3
"""
Data Models Module

This module contains all data structures and type definitions used
throughout the porchfest geocoding tools.
"""

from .listing import InputRow, ParseResult
from .geocode import GeocodeResult
from .event import TimeRange, EventLocation, EnrichedEvent
from .artist import ArtistLink, ArtistPage
from .stats import ProcessingStats

__all__ = [
    "InputRow",
    "ParseResult",
    "GeocodeResult",
    "TimeRange",
    "EventLocation",
    "EnrichedEvent",
    "ArtistLink",
    "ArtistPage",
    "ProcessingStats",
]
