"""
Console logging for the pkg-token command line.

Library code only emits DEBUG records through module loggers; nothing is
configured unless the CLI (or the host app) does it.
"""

from __future__ import annotations

import logging
import sys


def setup_logging(verbose: bool = False) -> None:
    """Send records to stderr: WARNING+ by default, everything when *verbose*."""
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    # Remove any pre-existing handlers (e.g. from basicConfig)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(
        logging.Formatter(
            "%(levelname)-8s  %(message)s" if not verbose
            else "%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    root_logger.addHandler(console_handler)
