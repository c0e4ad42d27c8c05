"""Pretty transformer: generic tree to presentation tree.

A pure, total mapping over every node kind the parser produces. Each call
builds fresh presentation nodes through a TreeBuilder and never mutates or
reuses the input tree.

Mapping:
- Fragment  -> sibling group of the rendered children
- Comment   -> pp-comment holding the raw text
- Element   -> pp-element(pp-opentag(pp-tagname, attributes...),
               children..., pp-closetag(pp-tagname))
               or, with no children, pp-element(pp-opentag[empty])
- Attribute -> pp-attribute(pp-attrname[, pp-attrvalue])
- Text      -> pp-text holding the raw text

Tag and attribute names are lowercased. Values and text are passed through
verbatim; escaping belongs to whatever writes the tree out.

Thread Safety:
Transformers keep no per-render state. One instance can be shared.

"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from prettyparse.builder import PresentationBuilder
from prettyparse.errors import RenderError
from prettyparse.nodes import Attribute, Comment, Element, Fragment, Node, Text
from prettyparse.presentation import PPKind
from prettyparse.protocols import TreeBuilder


N = TypeVar("N")


class PrettyTransformer(Generic[N]):
    """Render generic nodes into a presentation tree.

    Usage:
            >>> from prettyparse.parser import Parser
            >>> tree = PrettyTransformer().render(Parser("<br>").parse())
            >>> tree.children[0].kind
            <PPKind.ELEMENT: 'pp-element'>

    """

    __slots__ = ("_builder",)

    def __init__(self, builder: TreeBuilder[N] | None = None) -> None:
        """Initialize transformer.

        Args:
            builder: Host tree builder (defaults to PresentationBuilder)
        """
        self._builder: TreeBuilder[Any] = builder if builder is not None else PresentationBuilder()

    @property
    def builder(self) -> TreeBuilder[Any]:
        return self._builder

    def render(self, node: Node) -> N:
        """Render any generic node.

        Raises:
            RenderError: If node is not a generic tree node
        """
        match node:
            case Element():
                return self._render_element(node)
            case Text():
                return self._builder.create_text(PPKind.TEXT, node.content)
            case Fragment():
                return self._builder.create_fragment([self.render(c) for c in node.children])
            case Comment():
                return self._builder.create_text(PPKind.COMMENT, node.content)
            case Attribute():
                return self._render_attribute(node)
            case _:
                raise RenderError("Unknown node type", node)

    def _render_element(self, node: Element) -> N:
        builder = self._builder
        tag_name = builder.create_text(PPKind.TAG_NAME, node.tag.lower())
        open_parts = [tag_name]
        open_parts.extend(self._render_attribute(attr) for attr in node.attributes)

        content = node.children
        if content is None or not content.children:
            open_tag = builder.create_element(PPKind.OPEN_TAG, open_parts, empty=True)
            return builder.create_element(PPKind.ELEMENT, [open_tag])

        parts = [builder.create_element(PPKind.OPEN_TAG, open_parts)]
        for child in content.children:
            parts.append(self.render(child))
        parts.append(builder.create_element(PPKind.CLOSE_TAG, [builder.clone(tag_name)]))
        return builder.create_element(PPKind.ELEMENT, parts)

    def _render_attribute(self, node: Attribute) -> N:
        builder = self._builder
        parts = [builder.create_text(PPKind.ATTR_NAME, node.name.lower())]
        if node.value != "":
            parts.append(builder.create_text(PPKind.ATTR_VALUE, node.value))
        return builder.create_element(PPKind.ATTRIBUTE, parts)


__all__ = ["PrettyTransformer"]
