"""Character scanner over an immutable source string.

The scanner is a single forward-moving cursor. Every lookahead decision is
made against the unread remainder at a zero offset, and every reading
routine is a specialisation of ``read_until``.

Reading past the end never raises: ``read()`` keeps returning ``""``.

Thread Safety:
Scanner instances hold a mutable cursor. Create one per parse.

"""

from __future__ import annotations

from collections.abc import Callable

from prettyparse.patterns import WHITESPACE, WORD_CHARS, Pattern


class Scanner:
    """Cursor over a source string with pattern lookahead.

    Usage:
            >>> scanner = Scanner("div class")
            >>> scanner.read_identifier()
            'div'
            >>> scanner.skip_whitespace()
            ' '
            >>> scanner.matches("class")
            True
            >>> scanner.remainder
            'class'

    """

    __slots__ = ("_source", "_source_len", "_pos")

    def __init__(self, source: str) -> None:
        """Initialize scanner at the start of source.

        Args:
            source: Text to scan
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0

    @property
    def source(self) -> str:
        return self._source

    @property
    def position(self) -> int:
        """Offset of the next unread character."""
        return self._pos

    @property
    def at_end(self) -> bool:
        return self._pos >= self._source_len

    @property
    def remainder(self) -> str:
        """The unread suffix of the source."""
        return self._source[self._pos :]

    def read(self) -> str:
        """Read one character and advance.

        Returns:
            The character at the cursor, or ``""`` at end of input.
        """
        if self._pos >= self._source_len:
            return ""
        char = self._source[self._pos]
        self._pos += 1
        return char

    def rewind(self) -> None:
        """Reset the cursor to the start of the source."""
        self._pos = 0

    def _match_end(self, pattern: Pattern) -> int:
        """Return the end offset of a match at the cursor, or -1."""
        pos = self._pos
        if isinstance(pattern, str):
            return pos + len(pattern) if self._source.startswith(pattern, pos) else -1
        if isinstance(pattern, frozenset):
            if pos < self._source_len and self._source[pos] in pattern:
                return pos + 1
            return -1
        return pattern(self._source, pos)

    def matches(self, pattern: Pattern) -> bool:
        """Test whether pattern matches at the cursor without consuming."""
        return self._match_end(pattern) >= 0

    def consume_if_matches(self, pattern: Pattern) -> bool:
        """Advance past pattern if it matches at the cursor.

        A zero-length match succeeds without moving the cursor.

        Returns:
            True if the pattern matched.
        """
        end = self._match_end(pattern)
        if end < 0:
            return False
        self._pos = end
        return True

    def read_until(self, stop: Callable[[Scanner], bool]) -> str:
        """Advance one character at a time until ``stop`` holds or input ends.

        ``stop`` is called with the scanner itself and may peek with
        ``matches``. If it consumes, the consumed text is not part of the
        returned run.

        Returns:
            The text between the starting cursor and the cursor at which
            ``stop`` first held.
        """
        start = self._pos
        end = start
        while self._pos < self._source_len:
            if stop(self):
                break
            self._pos += 1
            end = self._pos
        return self._source[start:end]

    def read_identifier(self) -> str:
        """Read a run of word characters (``[A-Za-z0-9_]``)."""
        return self.read_until(lambda s: not s.matches(WORD_CHARS))

    def skip_whitespace(self) -> str:
        """Consume and return a run of whitespace."""
        return self.read_until(lambda s: not s.matches(WHITESPACE))

    def __repr__(self) -> str:
        return f"Scanner(pos={self._pos}, len={self._source_len})"
