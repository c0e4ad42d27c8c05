"""Recursive descent parser for forgiving markup fragments.

Builds the generic tree (Fragment, Element, Attribute, Text, Comment) in a
single pass over a Scanner, dispatching on lookahead rather than a token
stream.

Failure Policy:
The parser never raises for text input. A construct that fails to match
degrades to reading nothing, an empty value, or plain text. Every branch
either consumes at least one character or returns, so parsing always
terminates. A ``</`` at the top level ends the parse. Degradations are
logged at DEBUG.

Thread Safety:
Parser instances own their Scanner and are not thread-safe. Create one per
parse. Configuration is read from ContextVar (thread-local). The resulting
tree is immutable.

"""

from __future__ import annotations

from prettyparse.config import ParseConfig, get_parse_config
from prettyparse.nodes import Attribute, Comment, Element, Fragment, Node, Text
from prettyparse.patterns import (
    CLOSE_TAG_OPEN,
    COMMENT_CLOSE,
    COMMENT_OPEN,
    QUOTES,
    SELF_CLOSING_END,
    TAG_END,
    TAG_OPEN,
    UNQUOTED_VALUE_END,
    WORD_CHARS,
    assignment,
    tag_end,
)
from prettyparse.scanner import Scanner
from prettyparse.utils.logger import get_logger

logger = get_logger(__name__)


class Parser:
    """Parse markup text into a generic tree.

    Usage:
            >>> parser = Parser('<p class="x">hi</p>')
            >>> fragment = parser.parse()
            >>> fragment.children[0].tag
            'p'

    """

    __slots__ = ("_scanner", "_depth", "_depth_warned")

    def __init__(self, source: str) -> None:
        """Initialize parser with source text.

        Configuration is read from ContextVar when parse() runs.

        Args:
            source: Markup text
        """
        self._scanner = Scanner(source)
        self._depth = 0
        self._depth_warned = False

    @property
    def scanner(self) -> Scanner:
        return self._scanner

    @property
    def _config(self) -> ParseConfig:
        return get_parse_config()

    def parse(self) -> Fragment:
        """Parse the source from the beginning.

        Parsing stops at the first ``</`` found at the top level; the rest
        of the input is left unread (see ``scanner.remainder``).

        Returns:
            Fragment holding the top-level nodes
        """
        self._scanner.rewind()
        self._depth = 0
        self._depth_warned = False
        return self._parse_content()

    # =========================================================================
    # Content
    # =========================================================================

    def _parse_content(self) -> Fragment:
        """Parse siblings until end of input or a ``</`` marker."""
        scanner = self._scanner
        nodes: list[Node] = []
        text: list[str] = []

        while not scanner.at_end and not scanner.matches(CLOSE_TAG_OPEN):
            if scanner.consume_if_matches(COMMENT_OPEN):
                self._flush_text(text, nodes)
                nodes.append(self._parse_comment())
            elif scanner.consume_if_matches(TAG_OPEN):
                if not scanner.matches(WORD_CHARS):
                    # Not a tag: keep the bracket as text
                    text.append(TAG_OPEN)
                    continue
                self._flush_text(text, nodes)
                nodes.append(self._parse_element())
            else:
                text.append(scanner.read_until(lambda s: s.matches(TAG_OPEN)))

        self._flush_text(text, nodes)
        return Fragment(tuple(nodes))

    @staticmethod
    def _flush_text(text: list[str], nodes: list[Node]) -> None:
        if text:
            nodes.append(Text("".join(text)))
            text.clear()

    def _parse_comment(self) -> Comment:
        """Parse a comment body; the opening marker is already consumed."""
        scanner = self._scanner
        start = scanner.position
        content = scanner.read_until(lambda s: s.matches(COMMENT_CLOSE))
        if not scanner.consume_if_matches(COMMENT_CLOSE):
            logger.debug("Unterminated comment at offset %d", start)
        return Comment(content)

    # =========================================================================
    # Elements
    # =========================================================================

    def _parse_element(self) -> Element:
        """Parse an element; the opening ``<`` is already consumed.

        Close tags are not checked against the open tag name. Whatever
        follows ``</`` up to the next ``>`` closes the element.
        """
        scanner = self._scanner
        config = self._config
        start = scanner.position - 1
        tag = scanner.read_identifier()

        attributes: dict[str, Attribute] = {}
        scanner.skip_whitespace()
        while not scanner.at_end and not scanner.matches(tag_end):
            before = scanner.position
            attr = self._parse_attribute()
            if attr is not None:
                # Later duplicates overwrite in place
                attributes[attr.name] = attr
            if scanner.position == before:
                char = scanner.read()
                logger.debug("Skipping %r inside <%s> at offset %d", char, tag, before)
            scanner.skip_whitespace()

        attrs = tuple(attributes.values())

        if scanner.consume_if_matches(TAG_END):
            if tag in config.void_elements:
                return Element(tag, attrs)
            if self._depth >= config.max_depth:
                # Logged once per parse.
                if not self._depth_warned:
                    self._depth_warned = True
                    logger.warning(
                        "Nesting depth %d reached at <%s> (offset %d); content not descended into",
                        config.max_depth,
                        tag,
                        start,
                    )
                return Element(tag, attrs)

            self._depth += 1
            content = self._parse_content()
            self._depth -= 1

            if scanner.consume_if_matches(CLOSE_TAG_OPEN):
                closing = scanner.read_until(lambda s: s.consume_if_matches(TAG_END))
                if closing.strip() != tag:
                    logger.debug("Close tag </%s> does not match <%s>", closing, tag)
            else:
                logger.debug("Missing close tag for <%s> opened at offset %d", tag, start)
            return Element(tag, attrs, content)

        if not scanner.consume_if_matches(SELF_CLOSING_END):
            logger.debug("Unterminated open tag <%s> at offset %d", tag, start)
        return Element(tag, attrs)

    def _parse_attribute(self) -> Attribute | None:
        """Parse ``name``, ``name=value``, ``name="value"`` or ``name='value'``.

        Returns:
            The attribute, or None when there was no name to read.
        """
        scanner = self._scanner
        name = scanner.read_identifier()
        value = ""

        if scanner.consume_if_matches(assignment):
            if scanner.matches(QUOTES):
                start = scanner.position
                quote = scanner.read()
                value = scanner.read_until(lambda s: s.matches(quote))
                if not scanner.consume_if_matches(quote):
                    logger.debug("Unterminated %s-quoted value at offset %d", quote, start)
            else:
                value = scanner.read_until(lambda s: s.matches(UNQUOTED_VALUE_END))

        if not name:
            if value:
                logger.debug("Dropping value %r with no attribute name", value)
            return None
        return Attribute(name, value)


__all__ = ["Parser"]
