"""
Artist detail page scraping.

Each festival listing entry links to a detail page on the arts council
site. This module pulls the artist name, links and image from that page
and saves them under a per-entry directory.
"""

import json
import logging
import os
from typing import List, Optional, Sequence, Tuple

import requests
from bs4 import BeautifulSoup

from ..constants import JSON_INDENT
from ..core.batch import detail_page_url, read_raw_listing
from ..models import ArtistLink, ArtistPage
from ..utils import log_scrape_result, safe_filename

logger = logging.getLogger(__name__)

IMAGE_EXTENSIONS = {
    "image/jpeg": ".jpeg",
    "image/png": ".png",
    "image/gif": ".gif",
    "image/webp": ".webp",
}


def entry_id_from_url(url: str) -> str:
    """
    Return the listing entry id from a detail page URL.

    ``.../porchfest-single-entry/entry/846/`` gives ``846``.

    Raises:
        ValueError: If the URL has no ``/entry/`` segment
    """
    if "/entry/" not in url:
        raise ValueError(f"Not an entry detail URL: {url}")
    return url.split("/entry/", 1)[1].strip("/").split("/")[0]


def parse_artist_page(html: str, entry_id: str) -> ArtistPage:
    """
    Parse an artist detail page.

    Raises:
        ValueError: If the page has no ``#content`` block
    """
    soup = BeautifulSoup(html, "html.parser")
    content = soup.select_one("#content")
    if content is None:
        raise ValueError("page has no #content block")

    title = content.select_one(".page-title")
    name = title.get_text(strip=True) if title else ""

    links = []
    for details in content.select(".band-details"):
        for anchor in details.find_all("a"):
            links.append(ArtistLink(
                text=anchor.get_text(strip=True),
                url=(anchor.get("href") or "").replace(" ", "+"),
            ))

    img_url = None
    for image in content.select(".gv-image"):
        img_url = image.get("src") or img_url

    return ArtistPage(id=entry_id, name=name, links=tuple(links), img_url=img_url)


class ArtistPageScraper:
    """Scrapes one artist detail page and its image into ``output_dir/<entry id>/``."""

    def __init__(
        self,
        url: str,
        output_dir: str = ".",
        session: Optional[requests.Session] = None,
    ):
        self.url = url
        self.entry_id = entry_id_from_url(url)
        self.output_dir = output_dir
        self._owns_session = session is None
        self.session = session or requests.Session()

    def close(self) -> None:
        """Close the HTTP session if this scraper created it."""
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "ArtistPageScraper":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    @property
    def entry_dir(self) -> str:
        return os.path.join(self.output_dir, self.entry_id)

    def fetch_page(self) -> ArtistPage:
        logger.debug(f"Visiting: {self.url}")
        response = self.session.get(self.url)
        response.raise_for_status()
        return parse_artist_page(response.text, self.entry_id)

    def save_artist_data(self, page: ArtistPage) -> str:
        """Write the page data as ``<name>.json`` and return its path."""
        os.makedirs(self.entry_dir, exist_ok=True)
        path = os.path.join(self.entry_dir, f"{safe_filename(page.name, page.id)}.json")
        with open(path, "w", encoding="utf-8") as f:
            json.dump(page.to_dict(), f, indent=JSON_INDENT, ensure_ascii=False)
        return path

    def download_image(self, page: ArtistPage) -> Optional[str]:
        """
        Download the artist image next to the page data.

        The file extension follows the response content type; responses
        that are not a known image type are not saved.

        Returns:
            Path of the saved image, or None if nothing was saved
        """
        if not page.img_url:
            logger.info(f"No image for entry {page.id}")
            return None

        response = self.session.get(page.img_url)
        response.raise_for_status()

        content_type = response.headers.get("Content-Type", "").split(";")[0].strip().lower()
        extension = IMAGE_EXTENSIONS.get(content_type)
        if extension is None:
            logger.warning(f"Skipping image for entry {page.id}: unsupported content type '{content_type}'")
            return None

        os.makedirs(self.entry_dir, exist_ok=True)
        path = os.path.join(self.entry_dir, f"{safe_filename(page.name, page.id)}{extension}")
        with open(path, "wb") as f:
            f.write(response.content)
        return path

    def scrape(self) -> Tuple[ArtistPage, Optional[str]]:
        """
        Fetch, save and download everything for this entry.

        Returns:
            The parsed page and the saved image path (or None)

        Raises:
            requests.RequestException: If the page or image request fails
            ValueError: If the page cannot be parsed
            OSError: If files cannot be written
        """
        page = self.fetch_page()
        self.save_artist_data(page)
        image_path = self.download_image(page)
        return page, image_path


def scrape_url(url: str, output_dir: str, session: Optional[requests.Session] = None) -> bool:
    """Scrape one detail page, logging the outcome. Returns True on success."""
    try:
        scraper = ArtistPageScraper(url, output_dir=output_dir, session=session)
    except ValueError as e:
        log_scrape_result(entry_id="", url=url, success=False, error_message=str(e), logger=logger)
        return False

    try:
        with scraper:
            page, image_path = scraper.scrape()
    except (requests.RequestException, ValueError, OSError) as e:
        log_scrape_result(
            entry_id=scraper.entry_id, url=url, success=False,
            error_message=str(e), logger=logger,
        )
        return False

    log_scrape_result(
        entry_id=page.id, url=url, success=True,
        artist_name=page.name, image_path=image_path, logger=logger,
    )
    return True


def scrape_listing(
    raw_path: str, output_dir: str, session: Optional[requests.Session] = None
) -> Tuple[int, int]:
    """
    Scrape the detail page of every entry in a raw listing file.

    One failing page does not stop the others.

    Returns:
        Tuple of (scraped pages, failed pages)
    """
    entries = read_raw_listing(raw_path)
    if session is None:
        with requests.Session() as own_session:
            return scrape_listing_entries(entries, output_dir, own_session)
    return scrape_listing_entries(entries, output_dir, session)


def scrape_listing_entries(
    entries: List[Sequence[str]], output_dir: str, session: requests.Session
) -> Tuple[int, int]:
    """Scrape the detail page of every raw entry over one shared session."""
    scraped = 0
    failed = 0
    for entry in entries:
        url = detail_page_url(entry)
        if not url:
            logger.warning("Entry has no detail page link, skipping")
            failed += 1
            continue
        if scrape_url(url, output_dir, session=session):
            scraped += 1
        else:
            failed += 1

    logger.info(f"Scraped {scraped} artist pages ({failed} failed)")
    return scraped, failed
