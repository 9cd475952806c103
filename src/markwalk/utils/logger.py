"""Minimal logging utilities for markwalk.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from markwalk.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Rendering document")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "markwalk." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'markwalk.mymodule'
    """
    if not (name == "markwalk" or name.startswith("markwalk.")):
        name = f"markwalk.{name}"
    return logging.getLogger(name)
