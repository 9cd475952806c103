"""
markwalk: event-driven HTML rendering for Markdown document trees

Renders a typed document tree (as produced by an external Markdown parser)
into a deterministic HTML5 fragment. Supports a safe mode that filters
dangerous URLs and raw HTML, source-position attributes, and configurable
soft breaks. Zero runtime dependencies.

Quick Start:
    >>> from markwalk import Document, Paragraph, Text, render
    >>> doc = Document(children=(Paragraph(children=(Text("Hello"),)),))
    >>> render(doc)
    '<p>Hello</p>\\n'

    >>> # Options map onto RenderConfig fields
    >>> html = render(doc, safe=True, sourcepos=True)

    >>> # Or keep a renderer around
    >>> from markwalk import HtmlRenderer, RenderConfig
    >>> renderer = HtmlRenderer(RenderConfig(softbreak="<br />"))
    >>> html = renderer.render(doc)

Installation:
    pip install markwalk
"""

from dataclasses import replace
from typing import Any

from markwalk.config import (
    RenderConfig,
    get_render_config,
    render_config_context,
    reset_render_config,
    set_render_config,
)
from markwalk.errors import MarkwalkError, RenderError, UnknownVariantError
from markwalk.location import SourceLocation
from markwalk.nodes import (
    Block,
    BlockQuote,
    CodeBlock,
    CodeSpan,
    Document,
    Emphasis,
    Heading,
    HtmlBlock,
    HtmlInline,
    Image,
    Inline,
    LineBreak,
    Link,
    List,
    ListItem,
    Node,
    NodeType,
    Paragraph,
    SoftBreak,
    Strong,
    Text,
    ThematicBreak,
)
from markwalk.profiling import RenderAccumulator, get_render_accumulator, profiled_render
from markwalk.renderers.html import HtmlRenderer, build_tag
from markwalk.renderers.protocol import TreeRenderer
from markwalk.sanitize import is_potentially_unsafe
from markwalk.serialization import from_dict, from_json, to_dict, to_json
from markwalk.utils.text import escape_xml
from markwalk.walker import NodeWalker, WalkEvent, walk

__version__ = "0.1.0"


def render(doc: Node, *, config: RenderConfig | None = None, **options: Any) -> str:
    """Render a document tree to HTML.

    Args:
        doc: Root of the tree, normally a Document
        config: Explicit config; the ambient config is used when None
        **options: Overrides applied on top of the config
            (safe, sourcepos, softbreak, time)

    Returns:
        HTML string

    Raises:
        TypeError: An option is not a RenderConfig field.
        UnknownVariantError: The tree holds a node outside the closed set.

    Example:
        >>> html = render(doc, safe=True, softbreak=" ")
    """
    if options:
        base = config if config is not None else get_render_config()
        config = replace(base, **options)
    return HtmlRenderer(config).render(doc)


__all__ = [  # noqa: RUF022 (grouped by category)
    # Version
    "__version__",
    # Core API
    "render",
    # Block nodes
    "Block",
    "BlockQuote",
    "CodeBlock",
    "Document",
    "Heading",
    "HtmlBlock",
    "List",
    "ListItem",
    "Paragraph",
    "ThematicBreak",
    # Inline nodes
    "Inline",
    "CodeSpan",
    "Emphasis",
    "HtmlInline",
    "Image",
    "LineBreak",
    "Link",
    "SoftBreak",
    "Strong",
    "Text",
    # Node model
    "Node",
    "NodeType",
    "SourceLocation",
    # Traversal
    "NodeWalker",
    "WalkEvent",
    "walk",
    # Renderer
    "HtmlRenderer",
    "TreeRenderer",
    "build_tag",
    "escape_xml",
    "is_potentially_unsafe",
    # Configuration (ContextVar-based)
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
    # Profiling
    "RenderAccumulator",
    "profiled_render",
    "get_render_accumulator",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Errors
    "MarkwalkError",
    "RenderError",
    "UnknownVariantError",
]
