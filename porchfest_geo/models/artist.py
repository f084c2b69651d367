#!/usr/bin/env python3
"""
Artist Page Models

This module contains data structures scraped from per-artist detail pages.
"""

from typing import Any, Dict, NamedTuple, Optional, Tuple


class ArtistLink(NamedTuple):
    """A labelled link from an artist's detail page."""

    text: str
    url: str


class ArtistPage(NamedTuple):
    """
    Represents the content scraped from one artist detail page.

    Attributes:
        id: Listing entry id taken from the page URL
        name: Artist name from the page title
        about: Free-text description, if the page has one
        links: Links listed in the band details block
        img_url: URL of the artist image, if any
    """

    id: str
    name: str
    about: str = ""
    links: Tuple[ArtistLink, ...] = ()
    img_url: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "about": self.about,
            "links": [{"text": link.text, "url": link.url} for link in self.links],
            "imgUrl": self.img_url,
        }
