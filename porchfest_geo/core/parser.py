"""
Input parsing module.

This module reads the scraped festival listing CSV into header and data
rows for the enrichment step.
"""

import csv
import logging

from ..models import InputRow, ParseResult

logger = logging.getLogger(__name__)


def parse_input_file(file_path: str) -> ParseResult:
    """
    Parse a listing CSV file.

    Expected format: a header row followed by rows of
    name,time_range,genres,address[,...]
    - The first non-blank row is the header
    - Blank lines are skipped
    - Rows with fewer than four fields are kept but counted as short;
      the writers decide whether to skip them

    Args:
        file_path: Path to the input file

    Returns:
        ParseResult containing the header, rows and statistics

    Raises:
        FileNotFoundError: If the file doesn't exist
        UnicodeDecodeError: If the file can't be decoded as UTF-8
        csv.Error: If the file is not valid CSV
    """
    header = []
    rows = []
    skipped_lines = 0
    short_rows = 0

    try:
        with open(file_path, "r", encoding="utf-8", newline="") as f:
            csv_reader = csv.reader(f)

            for line_num, row in enumerate(csv_reader, 1):
                if not row or (len(row) == 1 and not row[0].strip()):
                    skipped_lines += 1
                    continue

                if not header:
                    header = row
                    continue

                input_row = InputRow(line_number=line_num, fields=tuple(row))
                if input_row.is_short:
                    logger.warning(
                        f"Line {line_num}: Insufficient columns ({len(row)}, need name,time,genres,address)"
                    )
                    short_rows += 1
                rows.append(input_row)

    except FileNotFoundError:
        logger.error(f"Input file not found: {file_path}")
        raise
    except UnicodeDecodeError as e:
        logger.error(f"Unable to decode file as UTF-8: {file_path}, error: {e}")
        raise

    logger.info(f"Parsed {len(rows)} rows from {file_path}")
    if skipped_lines > 0:
        logger.info(f"Skipped {skipped_lines} blank lines")
    if short_rows > 0:
        logger.warning(f"Encountered {short_rows} short rows")

    return ParseResult(
        header=header, rows=rows, skipped_lines=skipped_lines, short_rows=short_rows
    )
