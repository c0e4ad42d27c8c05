"""
prettyparse — Markup structure visualizer

Parses forgiving HTML-like fragments into a generic tree, then transforms
that tree into a presentation tree whose nodes name every markup role
(open tag, close tag, tag name, attribute, attribute name and value, text,
comment) for visual inspection. Parsing never raises for text input.

Quick Start:
    >>> from prettyparse import parse, render
    >>> fragment = parse('<a href="/">home</a>')
    >>> fragment.children[0].tag
    'a'
    >>> tree = render(fragment)
    >>> tree.children[0].kind.tag
    'pp-element'

    >>> # Straight to pp-* markup
    >>> from prettyparse import pretty_print
    >>> pretty_print("<br>")
    '<pp-element><pp-opentag class="empty"><pp-tagname>br</pp-tagname></pp-opentag></pp-element>'

Installation:
    pip install prettyparse          # zero runtime dependencies
    pip install prettyparse[test]    # + pytest, hypothesis
"""

from typing import Any

from prettyparse.builder import PresentationBuilder
from prettyparse.config import (
    VOID_ELEMENTS,
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from prettyparse.errors import PrettyParseError, RenderError
from prettyparse.nodes import Attribute, Comment, Element, Fragment, Node, Text
from prettyparse.parser import Parser
from prettyparse.presentation import PPFragment, PPKind, PPNode, PresentationNode
from prettyparse.protocols import TreeBuilder
from prettyparse.renderers.html import PresentationHtmlRenderer
from prettyparse.renderers.outline import OutlineRenderer
from prettyparse.scanner import Scanner
from prettyparse.serialization import from_dict, from_json, to_dict, to_json
from prettyparse.transformer import PrettyTransformer

__version__ = "0.1.0"


def parse(source: str, *, config: ParseConfig | None = None) -> Fragment:
    """Parse markup text into a generic tree.

    Args:
        source: Markup text
        config: Parse configuration for this call (defaults to the
            current context's config)

    Returns:
        Fragment holding the top-level nodes

    Example:
        >>> parse("plain text").children
        (Text(content='plain text'),)
    """
    if config is None:
        return Parser(source).parse()
    with parse_config_context(config):
        return Parser(source).parse()


def render(node: Node, *, builder: TreeBuilder[Any] | None = None) -> Any:
    """Transform a generic tree into a presentation tree.

    Args:
        node: Any generic tree node, typically the Fragment from parse()
        builder: Host tree builder (defaults to PresentationBuilder, which
            returns PPNode / PPFragment)

    Returns:
        The presentation node built by ``builder``

    Raises:
        RenderError: If node is not a generic tree node
    """
    return PrettyTransformer(builder).render(node)


def pretty_print(
    source: str,
    *,
    config: ParseConfig | None = None,
    line_breaks: bool = False,
) -> str:
    """Parse markup and write its presentation tree as ``pp-*`` markup.

    Args:
        source: Markup text
        config: Parse configuration for this call
        line_breaks: Write newlines in display text as ``<br>``

    Returns:
        ``pp-*`` custom-element markup
    """
    tree = render(parse(source, config=config))
    return PresentationHtmlRenderer(line_breaks=line_breaks).render(tree)


__all__ = [
    # Main API
    "parse",
    "render",
    "pretty_print",
    "__version__",
    # Configuration
    "ParseConfig",
    "VOID_ELEMENTS",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
    # Errors
    "PrettyParseError",
    "RenderError",
    # Scanning and parsing
    "Scanner",
    "Parser",
    # Generic tree
    "Node",
    "Fragment",
    "Element",
    "Attribute",
    "Text",
    "Comment",
    # Presentation tree
    "PPKind",
    "PPNode",
    "PPFragment",
    "PresentationNode",
    "TreeBuilder",
    "PresentationBuilder",
    "PrettyTransformer",
    # Renderers
    "PresentationHtmlRenderer",
    "OutlineRenderer",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
]
