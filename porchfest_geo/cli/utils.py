"""
CLI utilities module.

Shared start-up steps for the command-line entry points.
"""

import logging
import sys

from ..config import ConfigError, Env
from ..constants import EXIT_CONFIG_ERROR, EXIT_OUTPUT_ERROR
from ..utils import is_output_path_writable, setup_logging

logger = logging.getLogger(__name__)


def configure(args) -> Env:
    """Set up logging and load configuration, exiting on invalid config."""
    setup_logging(verbose=args.verbose)
    try:
        return Env.load(cli_args=args)
    except ConfigError as e:
        logger.error(f"Configuration error: {e}")
        sys.exit(EXIT_CONFIG_ERROR)


def require_writable(output_path: str) -> None:
    """Exit with EXIT_OUTPUT_ERROR if the output file cannot be created."""
    ok, reason = is_output_path_writable(output_path)
    if not ok:
        logger.error(f"Invalid output path: {reason}")
        sys.exit(EXIT_OUTPUT_ERROR)
