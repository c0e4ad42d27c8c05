"""Write a presentation tree as ``pp-*`` custom-element markup.

The output is meant to be dropped into a display area and styled by the
host page, one custom element per presentation node::

    <pp-element><pp-opentag class="empty"><pp-tagname>br</pp-tagname></pp-opentag></pp-element>

Display text (tag names, attribute names and values, text, comments) is
escaped, matching an ``innerText`` assignment.

Thread Safety:
Each render() call uses its own StringBuilder. Instances can be shared.
"""

import html

from prettyparse.errors import RenderError
from prettyparse.presentation import TEXT_KINDS, PPFragment, PPNode, PresentationNode
from prettyparse.stringbuilder import StringBuilder

EMPTY_CLASS = "empty"


def text_escape(s: str) -> str:
    """Escape text content: ``&``, ``<`` and ``>`` only."""
    return html.escape(s, quote=False)


class PresentationHtmlRenderer:
    """Render presentation trees to ``pp-*`` markup.

    Usage:
            >>> from prettyparse import parse, render
            >>> PresentationHtmlRenderer().render(render(parse("x < y")))
            '<pp-text>x &lt; y</pp-text>'

    """

    __slots__ = ("_line_breaks",)

    def __init__(self, *, line_breaks: bool = False) -> None:
        """Initialize renderer.

        Args:
            line_breaks: Write newlines in display text as ``<br>``
        """
        self._line_breaks = line_breaks

    def render(self, node: PresentationNode) -> str:
        """Render a presentation node or fragment.

        Raises:
            RenderError: If the tree holds something other than PPNode
        """
        sb = StringBuilder()
        self._render_node(node, sb)
        return sb.build()

    def _render_node(self, node: PresentationNode, sb: StringBuilder) -> None:
        match node:
            case PPFragment():
                for child in node.children:
                    self._render_node(child, sb)
            case PPNode():
                tag = node.kind.tag
                sb.append("<").append(tag)
                if node.empty:
                    sb.append(f' class="{EMPTY_CLASS}"')
                sb.append(">")
                if node.kind in TEXT_KINDS:
                    sb.append(self._display_text(node.text or ""))
                else:
                    for child in node.children:
                        self._render_node(child, sb)
                sb.append("</").append(tag).append(">")
            case _:
                raise RenderError("Cannot render", node)

    def _display_text(self, text: str) -> str:
        escaped = text_escape(text)
        if self._line_breaks:
            escaped = escaped.replace("\r\n", "\n").replace("\n", "<br>")
        return escaped


__all__ = ["EMPTY_CLASS", "PresentationHtmlRenderer", "text_escape"]
