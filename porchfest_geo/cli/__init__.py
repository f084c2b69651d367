#!/usr/bin/env python3
"""
CLI package for the porchfest geocoding tools.

This package provides command-line interface components including
argument parsing and the entry points for each command.
"""

from .parser import (
    create_argument_parser,
    create_batch_parser,
    create_scrape_parser,
)

from .main import (
    main,
    batch_main,
    scrape_main,
)

__all__ = [
    # Argument parsing
    "create_argument_parser",
    "create_batch_parser",
    "create_scrape_parser",
    # Entry points
    "main",
    "batch_main",
    "scrape_main",
]
