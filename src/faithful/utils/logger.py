"""Minimal logging utilities for faithful.

Provides a simple get_logger function that wraps the standard library logging.
The library never installs handlers; applications configure logging.

Example:
    >>> from faithful.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Rendering token stream")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "faithful." prefix.

    Args:
        name: Logger name (typically __name__)

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'faithful.mymodule'
    """
    if not (name == "faithful" or name.startswith("faithful.")):
        name = f"faithful.{name}"
    return logging.getLogger(name)
