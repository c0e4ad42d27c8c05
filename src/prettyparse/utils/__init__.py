"""Utility helpers for prettyparse.

- logger: get_logger for namespaced logging
"""

from prettyparse.utils.logger import get_logger

__all__ = [
    "get_logger",
]
