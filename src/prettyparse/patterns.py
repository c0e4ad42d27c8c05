"""Character classes and lookahead matchers for the scanner.

A pattern is one of:
- ``str``: literal prefix of the unread remainder
- ``frozenset[str]``: character class tested against the next character
- ``Matcher``: callable ``(source, pos) -> end`` returning the end offset
  of a zero-offset match, or -1 when there is none

All sets are frozensets for O(1) membership and safe module-level sharing.
"""

import string
from collections.abc import Callable
from typing import TypeAlias

Matcher: TypeAlias = Callable[[str, int], int]
Pattern: TypeAlias = str | frozenset[str] | Matcher

# Identifier characters: ASCII letters, digits and underscore
WORD_CHARS: frozenset[str] = frozenset(string.ascii_letters + string.digits + "_")

# ECMAScript whitespace and line terminators
WHITESPACE: frozenset[str] = frozenset(
    " \t\n\v\f\r\u00a0\u1680\u2028\u2029\u202f\u205f\u3000\ufeff"
    + "".join(chr(c) for c in range(0x2000, 0x200B))
)

QUOTES: frozenset[str] = frozenset("'\"")

# Characters that end an unquoted attribute value
UNQUOTED_VALUE_END: frozenset[str] = WHITESPACE | frozenset("/>")

COMMENT_OPEN = "<!--"
COMMENT_CLOSE = "-->"
CLOSE_TAG_OPEN = "</"
TAG_OPEN = "<"
TAG_END = ">"
SELF_CLOSING_END = "/>"


def tag_end(source: str, pos: int) -> int:
    """Match an optional slash followed by ``>``."""
    if source.startswith(TAG_END, pos):
        return pos + 1
    if source.startswith(SELF_CLOSING_END, pos):
        return pos + 2
    return -1


def assignment(source: str, pos: int) -> int:
    """Match ``=`` with optional whitespace on either side."""
    end = len(source)
    while pos < end and source[pos] in WHITESPACE:
        pos += 1
    if pos >= end or source[pos] != "=":
        return -1
    pos += 1
    while pos < end and source[pos] in WHITESPACE:
        pos += 1
    return pos
