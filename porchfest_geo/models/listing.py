#!/usr/bin/env python3
"""
Listing Data Models

This module contains data structures for rows read from the scraped
festival listing and the result of parsing an input file.
"""

from typing import List, NamedTuple, Tuple

from ..constants import MIN_ROW_FIELDS


class InputRow(NamedTuple):
    """
    Represents one data row of the listing input file.

    Fields are kept positionally as read: name, time range, genres,
    address, followed by any extra columns.

    Attributes:
        line_number: 1-based line number in the source file
        fields: Raw field values in file order
    """

    line_number: int
    fields: Tuple[str, ...]

    def field_at(self, position: int) -> str:
        """Return the field at ``position`` or an empty string if missing."""
        if position < len(self.fields):
            return self.fields[position]
        return ""

    @property
    def is_short(self) -> bool:
        return len(self.fields) < MIN_ROW_FIELDS

    @property
    def name(self) -> str:
        return self.field_at(0)

    @property
    def time_range(self) -> str:
        return self.field_at(1)

    @property
    def genres(self) -> str:
        return self.field_at(2)

    @property
    def address(self) -> str:
        return self.field_at(3)


class ParseResult(NamedTuple):
    """
    Result of parsing a listing input file.

    Attributes:
        header: Column names from the first row of the file
        rows: Data rows in file order, including short rows
        skipped_lines: Number of blank lines skipped
        short_rows: Number of rows with fewer than the required fields
    """

    header: List[str]
    rows: List[InputRow]
    skipped_lines: int
    short_rows: int
