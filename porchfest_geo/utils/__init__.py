"""
Utilities module for the porchfest geocoding tools.

This module provides shared utility functions organized by concern:
- Logging utilities for consistent logging setup and structured records
- General helper functions for common operations
"""

from .logging import setup_logging, log_row_failure, log_scrape_result

from .helpers import (
    create_progress_bar,
    split_genres,
    safe_filename,
    is_output_path_writable,
)

__all__ = [
    "setup_logging",
    "log_row_failure",
    "log_scrape_result",
    "create_progress_bar",
    "split_genres",
    "safe_filename",
    "is_output_path_writable",
]
