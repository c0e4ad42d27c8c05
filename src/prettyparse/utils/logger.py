"""Loggers for the parser, transformer and renderers.

Every logger lives under the ``prettyparse`` namespace so one
``logging.getLogger("prettyparse")`` call controls all of them. Nothing here
attaches handlers or sets levels.

Example:
    >>> import logging
    >>> logging.getLogger("prettyparse").setLevel(logging.DEBUG)
"""

from __future__ import annotations

import logging

_ROOT = "prettyparse"


def get_logger(name: str) -> logging.Logger:
    """Return the ``prettyparse`` child logger for ``name``.

    Module names inside the package (``prettyparse.parser``) are used as
    they are. Any other name is placed under the package namespace.

    >>> get_logger("scanner").name
    'prettyparse.scanner'
    >>> get_logger("prettyparse.parser").name
    'prettyparse.parser'
    """
    if name != _ROOT and not name.startswith(_ROOT + "."):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
