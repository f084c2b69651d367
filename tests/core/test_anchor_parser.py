#!/usr/bin/env python3
"""
Tests for HTML anchor fragment parsing.

Fixtures mirror the cells of the scraped festival listing table.
"""

import unittest

from porchfest_geo.core.anchor import Anchor, parse_anchor

ADDRESS_CELL = (
    '<a href="https://maps.google.com/maps?q=12+Highland+Ave%2C+Somerville" target="_blank">'
    '12 Highland Ave <i class="fa fa-map-marker"></i></a>'
)
NAME_CELL = (
    '<a href="https://example.org/view/porchfest-single-entry/entry/846/">The Porch Dogs</a>'
)


class TestParseAnchor(unittest.TestCase):
    """Test cases for parse_anchor."""

    def test_address_anchor_with_icon(self):
        anchor = parse_anchor(ADDRESS_CELL)
        self.assertEqual(anchor.text, "12 Highland Ave")
        self.assertEqual(
            anchor.href,
            "https://maps.google.com/maps?q=12+Highland+Ave%2C+Somerville",
        )

    def test_name_anchor(self):
        anchor = parse_anchor(NAME_CELL)
        self.assertEqual(anchor.text, "The Porch Dogs")
        self.assertEqual(anchor.href, "https://example.org/view/porchfest-single-entry/entry/846/")

    def test_plain_text_passes_through(self):
        self.assertEqual(parse_anchor("  45 Summer St "), Anchor(text="45 Summer St"))

    def test_empty_input(self):
        self.assertEqual(parse_anchor(""), Anchor(text=""))

    def test_markup_without_anchor(self):
        anchor = parse_anchor("<span>9 Day St</span>")
        self.assertEqual(anchor.text, "9 Day St")
        self.assertIsNone(anchor.href)

    def test_anchor_without_href(self):
        anchor = parse_anchor("<a>Nameless</a>")
        self.assertEqual(anchor.text, "Nameless")
        self.assertIsNone(anchor.href)

    def test_anchor_with_only_nested_text(self):
        anchor = parse_anchor('<a href="/x"><strong>Brass Band</strong></a>')
        self.assertEqual(anchor.text, "Brass Band")
        self.assertEqual(anchor.href, "/x")

    def test_html_entities_are_decoded(self):
        anchor = parse_anchor('<a href="/x">Salt &amp; Pepper</a>')
        self.assertEqual(anchor.text, "Salt & Pepper")


if __name__ == "__main__":
    unittest.main()
