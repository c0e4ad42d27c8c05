"""Protocols for prettyparse.

Defines the tree-building capability the transformer depends on. A host
environment (an in-memory tree, a DOM binding, an XML tree) implements it
to receive the presentation tree in its own node type.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, TypeVar

from prettyparse.presentation import PPKind


N = TypeVar("N")


class TreeBuilder(Protocol[N]):
    """Node construction and composition primitives.

    ``N`` is the host's node type. Fragments returned by
    ``create_fragment`` may be passed among the children of
    ``create_element``; their children are spliced in place.

    Thread Safety:
        Implementations should not keep per-tree state, so one builder can
        serve concurrent renders.

    """

    def create_element(
        self,
        kind: PPKind,
        children: Sequence[N] = (),
        *,
        empty: bool = False,
    ) -> N:
        """Build a container node of the given kind with children."""
        ...

    def create_text(self, kind: PPKind, content: str) -> N:
        """Build a node of the given kind holding display text."""
        ...

    def create_fragment(self, children: Sequence[N]) -> N:
        """Build a sibling group with no wrapper of its own."""
        ...

    def clone(self, node: N) -> N:
        """Deep-copy a node. The copy must not share mutable state."""
        ...
