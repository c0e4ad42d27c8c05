"""Exception classes for prettyparse.

Parsing is lenient and never raises for text input. These exceptions
cover misuse of the tree APIs: handing the transformer or a renderer an
object that is not a node it knows.
"""

from __future__ import annotations


class PrettyParseError(Exception):
    """Base exception for all prettyparse errors."""

    pass


class RenderError(PrettyParseError):
    """Error while transforming or serialising a tree.

    Raised when a node of an unknown kind is encountered.
    """

    def __init__(self, message: str, node: object | None = None) -> None:
        """Initialize render error.

        Args:
            message: Error description
            node: The offending object (optional)
        """
        self.node = node
        if node is not None:
            message = f"{message}: {type(node).__name__}"
        super().__init__(message)
