"""
HTML anchor fragment parsing.

The scraped festival table stores artist names and addresses as raw
``<a href="...">text <i class="..."></i></a>`` fragments. This module
pulls the visible link text and the ``href`` out of such fragments; plain
text passes through unchanged.
"""

from typing import NamedTuple, Optional

from bs4 import BeautifulSoup, NavigableString


class Anchor(NamedTuple):
    """Visible text and target of a link fragment."""

    text: str
    href: Optional[str] = None


def parse_anchor(fragment: str) -> Anchor:
    """
    Extract the link text and ``href`` from an HTML fragment.

    Only the anchor's own text nodes count as its text, so trailing icon
    markup such as ``<i class="fa fa-map"></i>`` is ignored. When the
    fragment has no anchor its whole text content is returned with no href.

    Args:
        fragment: HTML fragment or plain text

    Returns:
        Anchor with whitespace-trimmed text
    """
    if not fragment:
        return Anchor(text="")
    if "<" not in fragment:
        return Anchor(text=fragment.strip())

    soup = BeautifulSoup(fragment, "html.parser")
    link = soup.find("a")
    if link is None:
        return Anchor(text=soup.get_text(" ", strip=True))

    own_text = "".join(
        str(child) for child in link.children if isinstance(child, NavigableString)
    ).strip()
    if not own_text:
        own_text = link.get_text(" ", strip=True)

    href = link.get("href")
    return Anchor(text=" ".join(own_text.split()), href=href.strip() if href else None)
