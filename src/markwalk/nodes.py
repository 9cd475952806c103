"""Typed document tree nodes for markwalk.

All nodes are frozen dataclasses with slots for:
- Type safety: IDE autocomplete, catch errors at dev time
- Immutability: Safe sharing across threads
- Pattern matching: match statements work naturally

The variant set is closed. Each class carries a ``node_type`` discriminator
from NodeType, and the renderer dispatches on it through a fixed table.

Node Hierarchy:
Node (base)
├── Block (block-level elements)
│   ├── Document
│   ├── Heading
│   ├── Paragraph
│   ├── CodeBlock
│   ├── BlockQuote
│   ├── List
│   ├── ListItem
│   ├── ThematicBreak
│   └── HtmlBlock
└── Inline (inline elements)
    ├── Text
    ├── Emphasis
    ├── Strong
    ├── Link
    ├── Image
    ├── CodeSpan
    ├── LineBreak
    ├── SoftBreak
    └── HtmlInline

Nodes do not reference their parents. The walker keeps a non-owning
parent index while traversing (see markwalk.walker.NodeWalker.parent).

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar, Literal

from markwalk.location import SourceLocation


class NodeType(StrEnum):
    """Variant names of the closed node set."""

    # Blocks
    DOCUMENT = "document"
    PARAGRAPH = "paragraph"
    HEADING = "heading"
    CODE_BLOCK = "code_block"
    BLOCK_QUOTE = "block_quote"
    LIST = "list"
    LIST_ITEM = "list_item"
    THEMATIC_BREAK = "thematic_break"
    HTML_BLOCK = "html_block"

    # Inlines
    TEXT = "text"
    SOFTBREAK = "softbreak"
    HARDBREAK = "hardbreak"
    EMPHASIS = "emphasis"
    STRONG = "strong"
    LINK = "link"
    IMAGE = "image"
    CODE_SPAN = "code_span"
    HTML_INLINE = "html_inline"


# =============================================================================
# Base Node
# =============================================================================


@dataclass(frozen=True, slots=True, kw_only=True)
class Node:
    """Base class for all document nodes.

    ``location`` is keyword-only and optional: synthetic nodes have none.

    """

    location: SourceLocation | None = None


# =============================================================================
# Inline Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Text(Node):
    """Plain text content.

    HTML: escaped text

    """

    node_type: ClassVar[NodeType] = NodeType.TEXT

    content: str


@dataclass(frozen=True, slots=True)
class SoftBreak(Node):
    """Soft line break (single newline in a paragraph).

    Rendered as the configured soft-break string.

    """

    node_type: ClassVar[NodeType] = NodeType.SOFTBREAK


@dataclass(frozen=True, slots=True)
class LineBreak(Node):
    """Hard line break.

    Markdown: ``\\`` at end of line or two trailing spaces
    HTML: <br />

    """

    node_type: ClassVar[NodeType] = NodeType.HARDBREAK


@dataclass(frozen=True, slots=True)
class Emphasis(Node):
    """Emphasized (italic) text.

    Markdown: *text* or _text_
    HTML: <em>text</em>

    """

    node_type: ClassVar[NodeType] = NodeType.EMPHASIS

    children: tuple[Inline, ...] = ()


@dataclass(frozen=True, slots=True)
class Strong(Node):
    """Strong (bold) text.

    Markdown: **text** or __text__
    HTML: <strong>text</strong>

    """

    node_type: ClassVar[NodeType] = NodeType.STRONG

    children: tuple[Inline, ...] = ()


@dataclass(frozen=True, slots=True)
class Link(Node):
    """Hyperlink.

    Markdown: [text](url "title")
    HTML: <a href="url" title="title">text</a>

    """

    node_type: ClassVar[NodeType] = NodeType.LINK

    url: str
    title: str | None = None
    children: tuple[Inline, ...] = ()


@dataclass(frozen=True, slots=True)
class Image(Node):
    """Image.

    The alt text is the image's inline children, flattened to plain text
    when rendered.

    Markdown: ![alt](url "title")
    HTML: <img src="url" alt="alt" title="title" />

    """

    node_type: ClassVar[NodeType] = NodeType.IMAGE

    url: str
    title: str | None = None
    children: tuple[Inline, ...] = ()


@dataclass(frozen=True, slots=True)
class CodeSpan(Node):
    """Inline code.

    Markdown: `code`
    HTML: <code>code</code>

    """

    node_type: ClassVar[NodeType] = NodeType.CODE_SPAN

    code: str


@dataclass(frozen=True, slots=True)
class HtmlInline(Node):
    """Inline raw HTML.

    Passed through unchanged unless safe mode is on.

    """

    node_type: ClassVar[NodeType] = NodeType.HTML_INLINE

    html: str


type Inline = (
    Text
    | SoftBreak
    | LineBreak
    | Emphasis
    | Strong
    | Link
    | Image
    | CodeSpan
    | HtmlInline
)


# =============================================================================
# Block Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Heading(Node):
    """ATX or setext heading.

    HTML: <h1>Heading</h1>

    """

    node_type: ClassVar[NodeType] = NodeType.HEADING

    level: Literal[1, 2, 3, 4, 5, 6]
    children: tuple[Inline, ...] = ()


@dataclass(frozen=True, slots=True)
class Paragraph(Node):
    """Paragraph block.

    HTML: <p>text</p>, or bare text inside a tight list

    """

    node_type: ClassVar[NodeType] = NodeType.PARAGRAPH

    children: tuple[Inline, ...] = ()


@dataclass(frozen=True, slots=True)
class CodeBlock(Node):
    """Fenced or indented code block.

    ``info`` is the fence's info string; its first word names the language.

    HTML: <pre><code class="language-python">code</code></pre>

    """

    node_type: ClassVar[NodeType] = NodeType.CODE_BLOCK

    code: str
    info: str | None = None


@dataclass(frozen=True, slots=True)
class BlockQuote(Node):
    """Block quote.

    Markdown: > quoted text
    HTML: <blockquote>text</blockquote>

    """

    node_type: ClassVar[NodeType] = NodeType.BLOCK_QUOTE

    children: tuple[Block, ...] = ()


@dataclass(frozen=True, slots=True)
class ListItem(Node):
    """List item.

    Markdown: - item or 1. item
    HTML: <li>item</li>

    """

    node_type: ClassVar[NodeType] = NodeType.LIST_ITEM

    children: tuple[Block, ...] = ()


@dataclass(frozen=True, slots=True)
class List(Node):
    """Ordered or bullet list.

    ``start`` is None when the parser recorded no starting number.
    Paragraphs directly inside the items of a tight list render without
    <p> tags.

    HTML: <ul>/<ol> with <li> children

    """

    node_type: ClassVar[NodeType] = NodeType.LIST

    items: tuple[ListItem, ...] = ()
    ordered: bool = False
    start: int | None = None
    tight: bool = True


@dataclass(frozen=True, slots=True)
class ThematicBreak(Node):
    """Thematic break (horizontal rule).

    Markdown: --- or *** or ___
    HTML: <hr />

    """

    node_type: ClassVar[NodeType] = NodeType.THEMATIC_BREAK


@dataclass(frozen=True, slots=True)
class HtmlBlock(Node):
    """Raw HTML block.

    Passed through unchanged unless safe mode is on.

    """

    node_type: ClassVar[NodeType] = NodeType.HTML_BLOCK

    html: str


@dataclass(frozen=True, slots=True)
class Document(Node):
    """Root document node.

    Contains all top-level blocks in the document.

    """

    node_type: ClassVar[NodeType] = NodeType.DOCUMENT

    children: tuple[Block, ...] = ()


type Block = (
    Document
    | Heading
    | Paragraph
    | CodeBlock
    | BlockQuote
    | List
    | ListItem
    | ThematicBreak
    | HtmlBlock
)


# =============================================================================
# Structure helpers
# =============================================================================

# Variants that frame their descendants with an entering and an exiting event
CONTAINER_TYPES: frozenset[NodeType] = frozenset(
    (
        NodeType.DOCUMENT,
        NodeType.EMPHASIS,
        NodeType.STRONG,
        NodeType.LINK,
        NodeType.IMAGE,
        NodeType.PARAGRAPH,
        NodeType.BLOCK_QUOTE,
        NodeType.LIST_ITEM,
        NodeType.LIST,
        NodeType.HEADING,
    )
)

NODE_CLASSES: dict[NodeType, type[Node]] = {
    cls.node_type: cls
    for cls in (
        Document,
        Heading,
        Paragraph,
        CodeBlock,
        BlockQuote,
        List,
        ListItem,
        ThematicBreak,
        HtmlBlock,
        Text,
        SoftBreak,
        LineBreak,
        Emphasis,
        Strong,
        Link,
        Image,
        CodeSpan,
        HtmlInline,
    )
}


def node_variant(node: object) -> str:
    """Return the variant name of a node.

    Objects outside the closed set report their class name, so error
    messages can still name them.
    """
    node_type = getattr(node, "node_type", None)
    if isinstance(node_type, NodeType) and isinstance(node, NODE_CLASSES[node_type]):
        return node_type.value
    return type(node).__name__


def children_of(node: Node) -> tuple[Node, ...]:
    """Return a node's children in document order (empty for leaves)."""
    match node:
        case List(items=items):
            return items
        case (
            Document(children=children)
            | Heading(children=children)
            | Paragraph(children=children)
            | BlockQuote(children=children)
            | ListItem(children=children)
            | Emphasis(children=children)
            | Strong(children=children)
            | Link(children=children)
            | Image(children=children)
        ):
            return children
        case _:
            return ()


def is_container(node: object) -> bool:
    """True for nodes that yield both an entering and an exiting event."""
    return node_variant(node) in CONTAINER_TYPES
