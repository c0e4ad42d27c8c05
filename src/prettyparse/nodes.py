"""Generic document-tree nodes produced by the markup parser.

All nodes are frozen dataclasses with slots. A parse builds the tree once;
after that it is read-only and can be rendered any number of times.

Node Hierarchy:
Node (base)
├── Fragment   ordered sibling group, no content of its own
├── Element    tag name, attributes, optional content fragment
├── Attribute  name and value
├── Text       raw character data
└── Comment    text between ``<!--`` and ``-->``

"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all generic tree nodes."""


@dataclass(frozen=True, slots=True)
class Text(Node):
    """A run of character data with no markup inside it."""

    content: str


@dataclass(frozen=True, slots=True)
class Comment(Node):
    """Comment text with the ``<!--`` and ``-->`` markers excluded."""

    content: str


@dataclass(frozen=True, slots=True)
class Attribute(Node):
    """An attribute as written in an open tag.

    ``value`` is empty when no ``=value`` was present.

    """

    name: str
    value: str = ""


@dataclass(frozen=True, slots=True)
class Fragment(Node):
    """Ordered sequence of sibling nodes."""

    children: tuple[Node, ...] = ()

    def __len__(self) -> int:
        return len(self.children)


@dataclass(frozen=True, slots=True)
class Element(Node):
    """An element with its tag name as written.

    ``children`` is None for void and self-closing elements, and a
    (possibly empty) Fragment otherwise.

    """

    tag: str
    attributes: tuple[Attribute, ...] = ()
    children: Fragment | None = None

    @property
    def has_children(self) -> bool:
        return self.children is not None and len(self.children) > 0

    def get_attribute(self, name: str, default: str | None = None) -> str | None:
        for attr in self.attributes:
            if attr.name == name:
                return attr.value
        return default


__all__ = [
    "Attribute",
    "Comment",
    "Element",
    "Fragment",
    "Node",
    "Text",
]
