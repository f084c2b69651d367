"""
General helper utilities for the porchfest geocoding tools.

This module provides common utility functions that are used
across multiple modules in the application.
"""

import os
import re
from pathlib import Path
from typing import Optional, Tuple


def create_progress_bar(current: int, total: int, width: int = 30) -> str:
    """
    Create a text-based progress bar.

    Args:
        current: Current progress (1-based)
        total: Total items
        width: Width of the progress bar

    Returns:
        Progress bar string
    """
    if total == 0:
        return "[" + " " * width + "]"

    percentage = current / total
    filled = int(width * percentage)
    bar = "█" * filled + "░" * (width - filled)
    return f"[{bar}]"


def split_genres(text: str) -> list:
    """Split a comma-separated genre field into trimmed, non-empty names."""
    if not text:
        return []
    return [genre.strip() for genre in text.split(",") if genre.strip()]


_UNSAFE_FILENAME_CHARS = re.compile(r'[\\/:*?"<>|\x00-\x1f]')


def safe_filename(name: str, fallback: str = "unnamed") -> str:
    """Replace characters that cannot appear in a file name."""
    cleaned = _UNSAFE_FILENAME_CHARS.sub("_", name).strip().strip(".")
    return cleaned or fallback


def is_output_path_writable(path_str: str) -> Tuple[bool, Optional[str]]:
    """
    Check whether an output file could be created without creating it.

    Missing parent directories are acceptable as long as the nearest
    existing ancestor is a writable directory, since writers create them.
    """
    try:
        path = Path(path_str)
        if path.is_dir():
            return False, f"Output path is a directory: {path}"
        parent = path.parent if path.parent != Path("") else Path(".")
        while not parent.exists():
            if parent == parent.parent:
                return False, f"No existing ancestor directory for: {path}"
            parent = parent.parent
        if not parent.is_dir():
            return False, f"Not a directory: {parent}"
        if not os.access(parent, os.W_OK):
            return False, f"No write permission for directory: {parent}"
        return True, None
    except OSError as e:
        return False, f"Unable to validate output path '{path_str}': {e}"
