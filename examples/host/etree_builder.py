"""Build the presentation tree directly as xml.etree elements.

Any object with create_element / create_text / create_fragment / clone can
host the tree; the transformer never sees the concrete node type.
"""

import copy
import xml.etree.ElementTree as ET
from collections.abc import Sequence

from prettyparse import PPKind, parse, render


class EtreeBuilder:
    def create_element(
        self, kind: PPKind, children: Sequence[ET.Element | list[ET.Element]] = (), *, empty: bool = False
    ) -> ET.Element:
        element = ET.Element(kind.tag)
        if empty:
            element.set("class", "empty")
        for child in children:
            if isinstance(child, list):
                element.extend(child)
            else:
                element.append(child)
        return element

    def create_text(self, kind: PPKind, content: str) -> ET.Element:
        element = ET.Element(kind.tag)
        element.text = content
        return element

    def create_fragment(self, children: Sequence[ET.Element | list[ET.Element]]) -> list[ET.Element]:
        flat: list[ET.Element] = []
        for child in children:
            if isinstance(child, list):
                flat.extend(child)
            else:
                flat.append(child)
        return flat

    def clone(self, node: ET.Element) -> ET.Element:
        return copy.deepcopy(node)


root = ET.Element("pp-output")
root.extend(render(parse('<a href="/">home</a> & <br>'), builder=EtreeBuilder()))
print(ET.tostring(root, encoding="unicode"))
