"""PresentationRenderer protocol — stable interface for tree writers.

Any renderer that implements ``render(node) -> str`` over a presentation
tree conforms. ``PresentationHtmlRenderer`` and ``OutlineRenderer`` are the
built-in implementations.

Example:
    from prettyparse.renderers.protocol import PresentationRenderer

    def show(renderer: PresentationRenderer, tree: PresentationNode) -> str:
        return renderer.render(tree)

"""

from typing import Protocol

from prettyparse.presentation import PresentationNode


class PresentationRenderer(Protocol):
    """Protocol for presentation tree renderers."""

    def render(self, node: PresentationNode) -> str:
        """Render a presentation node or fragment to a string."""
        ...
