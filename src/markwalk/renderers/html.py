"""HTML renderer driven by walk events.

Renders a document tree to an HTML5 fragment. The renderer consumes the
pre-order (node, entering) event stream from NodeWalker and dispatches each
event through a fixed variant -> handler table.

Thread Safety:
All per-render state is encapsulated in RenderState, created fresh for each
render() call. Multiple threads can safely share a single HtmlRenderer instance
and call render() concurrently without synchronization.

Newline Normalization:
Block handlers request line breaks with ``cr()`` rather than appending
newlines, so the output never holds a blank line between blocks and never
starts with one.

Image Alt Text:
While inside an image, the renderer is "tag-disabled": markup produced by the
image's descendants is stripped so only their text lands in the ``alt``
attribute. Nested images bump the same depth counter.
"""

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from time import perf_counter

from markwalk.config import RenderConfig, get_render_config
from markwalk.errors import RenderError, UnknownVariantError
from markwalk.nodes import (
    BlockQuote,
    CodeBlock,
    CodeSpan,
    Document,
    Emphasis,
    Heading,
    HtmlBlock,
    HtmlInline,
    Image,
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
    node_variant,
)
from markwalk.profiling import get_render_accumulator
from markwalk.sanitize import RAW_HTML_OMITTED, is_potentially_unsafe, strip_tags
from markwalk.stringbuilder import StringBuilder
from markwalk.utils.logger import get_logger
from markwalk.utils.text import Escaper, escape_xml
from markwalk.walker import NodeWalker

logger = get_logger(__name__)

type Attrs = list[tuple[str, str]]

_WHITESPACE = re.compile(r"\s+")


def build_tag(name: str, attrs: Iterable[tuple[str, str]] = (), self_closing: bool = False) -> str:
    """Build an HTML tag string.

    Attribute values must already be escaped; order is preserved as given.
    A name starting with ``/`` produces a bare end tag and ignores attrs.

    Examples:
        >>> build_tag("a", [("href", "/x"), ("title", "X")])
        '<a href="/x" title="X">'
        >>> build_tag("hr", self_closing=True)
        '<hr />'
        >>> build_tag("/a")
        '</a>'
    """
    if name.startswith("/"):
        return f"<{name}>"
    parts = [f"<{name}"]
    parts.extend(f' {key}="{value}"' for key, value in attrs)
    if self_closing:
        parts.append(" /")
    parts.append(">")
    return "".join(parts)


@dataclass(slots=True)
class RenderState:
    """Per-render mutable state.

    Created fresh for each render() call and passed to every handler.
    The buffer is write-only apart from ``sb.last``.

    Thread Safety:
        Each render() call creates its own RenderState instance.
        No shared mutable state between concurrent renders.
    """

    config: RenderConfig
    walker: NodeWalker
    sb: StringBuilder = field(default_factory=StringBuilder)
    disable_tags: int = 0
    entering: bool = False

    def emit(self, s: str) -> None:
        """Append output, stripping tags while inside an image."""
        if self.disable_tags > 0:
            s = strip_tags(s)
        self.sb.append(s)

    def cr(self) -> None:
        """Ensure the output ends with a line break."""
        self.sb.cr()


type Handler = Callable[[Node, RenderState, Attrs], None]


class HtmlRenderer:
    """Render a document tree to HTML.

    Usage:
        >>> doc = Document(children=(Paragraph(children=(Text("Hi"),)),))
        >>> HtmlRenderer().render(doc)
        '<p>Hi</p>\\n'

        >>> html = HtmlRenderer(RenderConfig(safe=True)).render(doc)

    Subclasses may override individual ``_render_*`` handlers; the dispatch
    table is bound per instance.

    Thread Safety:
        Multiple threads can safely share a single HtmlRenderer instance.
        Each render() call creates an independent RenderState.
    """

    __slots__ = ("_config", "_escape", "_handlers")

    def __init__(
        self,
        config: RenderConfig | None = None,
        *,
        escape: Escaper = escape_xml,
    ) -> None:
        """Initialize renderer.

        Args:
            config: Render options; the ambient config (see
                markwalk.config.get_render_config) is used when None
            escape: Escape primitive ``(text, is_attribute) -> str``
        """
        self._config = config
        self._escape = escape
        self._handlers: dict[NodeType, Handler] = {
            NodeType.DOCUMENT: self._render_document,
            NodeType.TEXT: self._render_text,
            NodeType.SOFTBREAK: self._render_softbreak,
            NodeType.HARDBREAK: self._render_linebreak,
            NodeType.EMPHASIS: self._render_emphasis,
            NodeType.STRONG: self._render_strong,
            NodeType.HTML_INLINE: self._render_html_inline,
            NodeType.LINK: self._render_link,
            NodeType.IMAGE: self._render_image,
            NodeType.CODE_SPAN: self._render_code_span,
            NodeType.CODE_BLOCK: self._render_code_block,
            NodeType.PARAGRAPH: self._render_paragraph,
            NodeType.BLOCK_QUOTE: self._render_blockquote,
            NodeType.LIST_ITEM: self._render_list_item,
            NodeType.LIST: self._render_list,
            NodeType.HEADING: self._render_heading,
            NodeType.HTML_BLOCK: self._render_html_block,
            NodeType.THEMATIC_BREAK: self._render_thematic_break,
        }

    @property
    def config(self) -> RenderConfig:
        """Config used by the next render() call."""
        return self._config if self._config is not None else get_render_config()

    def render(self, node: Node) -> str:
        """Render a tree to an HTML string.

        Args:
            node: Root of the tree, normally a Document

        Returns:
            HTML fragment

        Raises:
            UnknownVariantError: The tree holds a node outside the closed
                variant set. No partial output is returned.
            RenderError: Image events are unbalanced.
        """
        config = self.config
        walker = NodeWalker(node)
        state = RenderState(config=config, walker=walker)

        start = perf_counter()
        events = 0
        for event in walker:
            events += 1
            state.entering = event.entering
            current = event.node

            variant = node_variant(current)
            handler = self._handlers.get(variant)
            if handler is None:
                raise UnknownVariantError(variant)

            attrs: Attrs = []
            if config.sourcepos and current.location is not None:
                attrs.append(("data-sourcepos", current.location.sourcepos()))
            handler(current, state, attrs)

        result = state.sb.build()
        elapsed = perf_counter() - start

        if config.time:
            logger.info("rendering: %.3fms", elapsed * 1000)
        logger.debug("Rendered %d events into %d characters", events, len(result))

        acc = get_render_accumulator()
        if acc is not None:
            acc.record_render(events=events, output_length=len(result), seconds=elapsed)

        return result

    # =========================================================================
    # Inline handlers
    # =========================================================================

    def _render_document(self, node: Document, state: RenderState, attrs: Attrs) -> None:
        pass

    def _render_text(self, node: Text, state: RenderState, attrs: Attrs) -> None:
        state.emit(self._escape(node.content, False))

    def _render_softbreak(self, node: SoftBreak, state: RenderState, attrs: Attrs) -> None:
        state.emit(state.config.softbreak)

    def _render_linebreak(self, node: LineBreak, state: RenderState, attrs: Attrs) -> None:
        state.emit(build_tag("br", self_closing=True))
        state.cr()

    def _render_emphasis(self, node: Emphasis, state: RenderState, attrs: Attrs) -> None:
        state.emit(build_tag("em", attrs) if state.entering else build_tag("/em"))

    def _render_strong(self, node: Strong, state: RenderState, attrs: Attrs) -> None:
        state.emit(build_tag("strong", attrs) if state.entering else build_tag("/strong"))

    def _render_html_inline(self, node: HtmlInline, state: RenderState, attrs: Attrs) -> None:
        if state.config.safe:
            state.emit(RAW_HTML_OMITTED)
        else:
            state.emit(node.html)

    def _render_link(self, node: Link, state: RenderState, attrs: Attrs) -> None:
        if not state.entering:
            state.emit(build_tag("/a"))
            return
        if not (state.config.safe and is_potentially_unsafe(node.url)):
            attrs.append(("href", self._escape(node.url, True)))
        if node.title:
            attrs.append(("title", self._escape(node.title, True)))
        state.emit(build_tag("a", attrs))

    def _render_image(self, node: Image, state: RenderState, attrs: Attrs) -> None:
        """Open ``<img`` on the outermost enter, close it on the matching exit.

        Everything emitted in between lands inside ``alt="..."`` with tags
        stripped.
        """
        if state.entering:
            if state.disable_tags == 0:
                if state.config.safe and is_potentially_unsafe(node.url):
                    state.emit('<img src="" alt="')
                else:
                    state.emit(f'<img src="{self._escape(node.url, True)}" alt="')
            state.disable_tags += 1
            return

        if state.disable_tags == 0:
            msg = "image exit event without a matching enter"
            raise RenderError(msg)
        state.disable_tags -= 1
        if state.disable_tags == 0:
            if node.title:
                state.emit(f'" title="{self._escape(node.title, True)}')
            state.emit('" />')

    def _render_code_span(self, node: CodeSpan, state: RenderState, attrs: Attrs) -> None:
        code = self._escape(node.code, False)
        state.emit(build_tag("code", attrs) + code + build_tag("/code"))

    # =========================================================================
    # Block handlers
    # =========================================================================

    def _render_code_block(self, node: CodeBlock, state: RenderState, attrs: Attrs) -> None:
        info_words = _WHITESPACE.split(node.info) if node.info else []
        if info_words and info_words[0]:
            attrs.append(("class", "language-" + self._escape(info_words[0], True)))
        state.cr()
        state.emit(build_tag("pre") + build_tag("code", attrs))
        state.emit(self._escape(node.code, False))
        state.emit(build_tag("/code") + build_tag("/pre"))
        state.cr()

    def _render_paragraph(self, node: Paragraph, state: RenderState, attrs: Attrs) -> None:
        grandparent = state.walker.grandparent(node)
        if isinstance(grandparent, List) and grandparent.tight:
            return
        if state.entering:
            state.cr()
            state.emit(build_tag("p", attrs))
        else:
            state.emit(build_tag("/p"))
            state.cr()

    def _render_blockquote(self, node: BlockQuote, state: RenderState, attrs: Attrs) -> None:
        state.cr()
        state.emit(build_tag("blockquote", attrs) if state.entering else build_tag("/blockquote"))
        state.cr()

    def _render_list_item(self, node: ListItem, state: RenderState, attrs: Attrs) -> None:
        if state.entering:
            state.emit(build_tag("li", attrs))
        else:
            state.emit(build_tag("/li"))
            state.cr()

    def _render_list(self, node: List, state: RenderState, attrs: Attrs) -> None:
        tag = "ol" if node.ordered else "ul"
        state.cr()
        if state.entering:
            if node.ordered and node.start is not None and node.start != 1:
                attrs.append(("start", str(node.start)))
            state.emit(build_tag(tag, attrs))
        else:
            state.emit(build_tag("/" + tag))
        state.cr()

    def _render_heading(self, node: Heading, state: RenderState, attrs: Attrs) -> None:
        tag = f"h{node.level}"
        if state.entering:
            state.cr()
            state.emit(build_tag(tag, attrs))
        else:
            state.emit(build_tag("/" + tag))
            state.cr()

    def _render_html_block(self, node: HtmlBlock, state: RenderState, attrs: Attrs) -> None:
        state.cr()
        if state.config.safe:
            state.emit(RAW_HTML_OMITTED)
        else:
            state.emit(node.html)
        state.cr()

    def _render_thematic_break(
        self, node: ThematicBreak, state: RenderState, attrs: Attrs
    ) -> None:
        state.cr()
        state.emit(build_tag("hr", attrs, self_closing=True))
        state.cr()
