"""In-memory tree builder producing PPNode trees.

This is the default host for the transformer and the stand-in used by the
tests.
"""

from __future__ import annotations

from collections.abc import Sequence

from prettyparse.errors import RenderError
from prettyparse.presentation import PPFragment, PPKind, PPNode, PresentationNode


class PresentationBuilder:
    """Build immutable PPNode / PPFragment trees.

    Usage:
            >>> builder = PresentationBuilder()
            >>> name = builder.create_text(PPKind.TAG_NAME, "p")
            >>> builder.create_element(PPKind.OPEN_TAG, [name], empty=True).empty
            True

    """

    __slots__ = ()

    def create_element(
        self,
        kind: PPKind,
        children: Sequence[PresentationNode] = (),
        *,
        empty: bool = False,
    ) -> PPNode:
        return PPNode(kind=kind, children=self._splice(children), empty=empty)

    def create_text(self, kind: PPKind, content: str) -> PPNode:
        return PPNode(kind=kind, text=content)

    def create_fragment(self, children: Sequence[PresentationNode]) -> PPFragment:
        return PPFragment(children=self._splice(children))

    def clone(self, node: PresentationNode) -> PresentationNode:
        """Return a structurally equal copy with no shared node objects."""
        if isinstance(node, PPFragment):
            return PPFragment(children=tuple(self.clone(c) for c in node.children))
        return PPNode(
            kind=node.kind,
            children=tuple(self.clone(c) for c in node.children),
            text=node.text,
            empty=node.empty,
        )

    @staticmethod
    def _splice(children: Sequence[PresentationNode]) -> tuple[PPNode, ...]:
        result: list[PPNode] = []
        for child in children:
            match child:
                case PPFragment():
                    result.extend(child.children)
                case PPNode():
                    result.append(child)
                case _:
                    raise RenderError("Cannot append non-presentation node", child)
        return tuple(result)


__all__ = ["PresentationBuilder"]
