"""markwalk renderers.

Renderers convert document trees into output formats.

Available Renderers:
- HtmlRenderer: Renders a tree to an HTML5 fragment from walk events

Thread Safety:
All renderers keep per-call state local to each render() call.
Safe for concurrent use from multiple threads.

"""

from markwalk.renderers.html import HtmlRenderer, RenderState, build_tag
from markwalk.renderers.protocol import TreeRenderer

__all__ = ["HtmlRenderer", "RenderState", "TreeRenderer", "build_tag"]
