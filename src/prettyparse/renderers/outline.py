"""Indented plain-text outline of a presentation tree.

One line per node, children indented below their parent. Display text is
shown with ``repr`` so whitespace stays visible::

    pp-element
      pp-opentag
        pp-tagname 'p'
      pp-text 'hi'
      pp-closetag
        pp-tagname 'p'

"""

from prettyparse.errors import RenderError
from prettyparse.presentation import TEXT_KINDS, PPFragment, PPNode, PresentationNode
from prettyparse.stringbuilder import StringBuilder


class OutlineRenderer:
    """Render presentation trees as an indented outline."""

    __slots__ = ("_indent_unit",)

    def __init__(self, indent_unit: str = "  ") -> None:
        self._indent_unit = indent_unit

    def render(self, node: PresentationNode) -> str:
        sb = StringBuilder(self._indent_unit)
        self._render_node(node, sb)
        return sb.build()

    def _render_node(self, node: PresentationNode, sb: StringBuilder) -> None:
        match node:
            case PPFragment():
                for child in node.children:
                    self._render_node(child, sb)
            case PPNode():
                line = node.kind.tag
                if node.empty:
                    line += " [empty]"
                if node.kind in TEXT_KINDS:
                    line += f" {node.text or ''!r}"
                sb.append_line(line)
                sb.indent()
                for child in node.children:
                    self._render_node(child, sb)
                sb.dedent()
            case _:
                raise RenderError("Cannot render", node)


__all__ = ["OutlineRenderer"]
