"""prettyparse renderers.

Renderers write a presentation tree out as text.

Available Renderers:
- PresentationHtmlRenderer: ``pp-*`` custom-element markup for display
- OutlineRenderer: indented plain-text outline for terminals and debugging

Thread Safety:
All renderers use a StringBuilder local to each render() call.

"""

from prettyparse.renderers.html import PresentationHtmlRenderer
from prettyparse.renderers.outline import OutlineRenderer
from prettyparse.renderers.protocol import PresentationRenderer

__all__ = ["OutlineRenderer", "PresentationHtmlRenderer", "PresentationRenderer"]
