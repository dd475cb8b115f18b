"""Utility modules for faithful.

Provides:
- logger: get_logger for logging
"""

from faithful.utils.logger import get_logger

__all__ = [
    "get_logger",
]
