"""Presentation tree nodes.

The presentation tree names every markup role explicitly so it can be
displayed for inspection. Each node kind's value is the custom element
name used when the tree is written out as markup.

Structure produced for ``<a href="x">hi</a>``::

    pp-element
    ├── pp-opentag
    │   ├── pp-tagname "a"
    │   └── pp-attribute
    │       ├── pp-attrname "href"
    │       └── pp-attrvalue "x"
    ├── pp-text "hi"
    └── pp-closetag
        └── pp-tagname "a"

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TypeAlias


class PPKind(Enum):
    """Structural role of a presentation node."""

    ELEMENT = "pp-element"
    OPEN_TAG = "pp-opentag"
    CLOSE_TAG = "pp-closetag"
    TAG_NAME = "pp-tagname"
    ATTRIBUTE = "pp-attribute"
    ATTR_NAME = "pp-attrname"
    ATTR_VALUE = "pp-attrvalue"
    TEXT = "pp-text"
    COMMENT = "pp-comment"

    @property
    def tag(self) -> str:
        return self.value


# Kinds whose node holds display text instead of children
TEXT_KINDS: frozenset[PPKind] = frozenset(
    {
        PPKind.TAG_NAME,
        PPKind.ATTR_NAME,
        PPKind.ATTR_VALUE,
        PPKind.TEXT,
        PPKind.COMMENT,
    }
)


@dataclass(frozen=True, slots=True)
class PPNode:
    """A labelled presentation node.

    Attributes:
        kind: Structural role
        children: Child nodes (container kinds)
        text: Display text (text kinds)
        empty: Set on an open tag whose element has no children

    """

    kind: PPKind
    children: tuple[PPNode, ...] = ()
    text: str | None = None
    empty: bool = False

    def find(self, kind: PPKind) -> PPNode | None:
        """Return the first direct child of the given kind."""
        for child in self.children:
            if child.kind is kind:
                return child
        return None

    def find_all(self, kind: PPKind) -> tuple[PPNode, ...]:
        return tuple(child for child in self.children if child.kind is kind)


@dataclass(frozen=True, slots=True)
class PPFragment:
    """A sibling group with no wrapper node of its own.

    Appending a fragment to an element splices its children in place.

    """

    children: tuple[PPNode, ...] = ()

    def __len__(self) -> int:
        return len(self.children)


PresentationNode: TypeAlias = PPNode | PPFragment


__all__ = [
    "PPFragment",
    "PPKind",
    "PPNode",
    "PresentationNode",
    "TEXT_KINDS",
]
