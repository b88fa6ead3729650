"""Logging utilities for the boc_fx package.

Log records go to stderr so stdout carries nothing but rate lines.
"""

from __future__ import annotations

import logging
import sys

_CONFIGURED = False
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_logger(name: str = "boc_fx") -> logging.Logger:
    """Return a named logger, configuring the root handler on first use."""
    global _CONFIGURED
    if not _CONFIGURED:
        logging.basicConfig(level=logging.INFO, format=LOG_FORMAT, stream=sys.stderr)
        _CONFIGURED = True
    return logging.getLogger(name)


def set_verbosity(verbose: bool) -> None:
    """Toggle between INFO chatter and warnings-only output for CLI runs."""

    logging.getLogger().setLevel(logging.INFO if verbose else logging.WARNING)
