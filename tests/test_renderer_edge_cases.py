"""Edge case tests for HtmlRenderer.

These tests cover the stateful parts of rendering:
- Safe mode URL filtering and raw HTML suppression
- Tag suppression inside (nested) images
- Tight list paragraph suppression through the parent index
- Source position attributes
- Newline normalization between blocks
- Thread safety with shared renderer instances
"""

from concurrent.futures import ThreadPoolExecutor

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from markwalk.config import RenderConfig
from markwalk.location import SourceLocation
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
    Link,
    List,
    ListItem,
    Paragraph,
    Text,
    ThematicBreak,
)
from markwalk.renderers.html import HtmlRenderer, RenderState


def _para(*inlines) -> Paragraph:  # type: ignore[no-untyped-def]
    return Paragraph(children=tuple(inlines))


@pytest.fixture
def safe() -> HtmlRenderer:
    return HtmlRenderer(RenderConfig(safe=True))


class TestSafeMode:
    def test_unsafe_link_has_no_href(self, safe: HtmlRenderer) -> None:
        link = Link("javascript:evil()", children=(Text("text"),))
        assert safe.render(_para(link)) == "<p><a>text</a></p>\n"

    def test_unsafe_link_keeps_title(self, safe: HtmlRenderer) -> None:
        link = Link("vbscript:x", title="T", children=(Text("text"),))
        assert safe.render(_para(link)) == '<p><a title="T">text</a></p>\n'

    def test_safe_link_kept(self, safe: HtmlRenderer) -> None:
        link = Link("https://example.com", children=(Text("text"),))
        assert 'href="https://example.com"' in safe.render(_para(link))

    def test_unsafe_link_kept_outside_safe_mode(self) -> None:
        link = Link("javascript:evil()", children=(Text("text"),))
        assert 'href="javascript:evil()"' in HtmlRenderer().render(_para(link))

    def test_unsafe_image_has_blank_src(self, safe: HtmlRenderer) -> None:
        image = Image("file:///etc/passwd", children=(Text("x"),))
        assert safe.render(_para(image)) == '<p><img src="" alt="x" /></p>\n'

    def test_data_image_allowed(self, safe: HtmlRenderer) -> None:
        image = Image("data:image/png;base64,AAAA", children=(Text("x"),))
        assert 'src="data:image/png;base64,AAAA"' in safe.render(_para(image))

    def test_raw_inline_omitted(self, safe: HtmlRenderer) -> None:
        html = safe.render(_para(HtmlInline("<script>"), Text("x")))
        assert html == "<p><!-- raw HTML omitted -->x</p>\n"

    def test_raw_block_omitted(self, safe: HtmlRenderer) -> None:
        html = safe.render(Document(children=(HtmlBlock("<script>alert(1)</script>"),)))
        assert html == "<!-- raw HTML omitted -->\n"


class TestImageSuppression:
    def test_nested_images_render_one_img(self) -> None:
        inner = Image("inner.png", children=(Text("x"),))
        outer = Image("outer.png", children=(inner,))
        html = HtmlRenderer().render(outer)
        assert html == '<img src="outer.png" alt="x" />'
        assert html.count("<img") == 1

    def test_suppression_depth_returns_to_zero(self) -> None:
        depths: list[int] = []

        class DepthProbe(HtmlRenderer):
            def _render_document(self, node, state, attrs):  # type: ignore[no-untyped-def]
                if not state.entering:
                    depths.append(state.disable_tags)

        inner = Image("inner.png", title="inner", children=(Text("x"),))
        outer = Image("outer.png", children=(Text("a"), inner))
        DepthProbe().render(Document(children=(_para(outer),)))
        assert depths == [0]

    def test_inner_title_not_emitted(self) -> None:
        inner = Image("inner.png", title="inner", children=(Text("x"),))
        outer = Image("outer.png", title="outer", children=(inner,))
        html = HtmlRenderer().render(outer)
        assert html == '<img src="outer.png" alt="x" title="outer" />'

    def test_tags_stripped_from_alt(self) -> None:
        image = Image(
            "a.png",
            children=(
                Link("/x", children=(Text("link"),)),
                CodeSpan("c"),
                HtmlInline("<span>"),
            ),
        )
        assert HtmlRenderer().render(image) == '<img src="a.png" alt="linkc" />'

    def test_alt_text_uses_text_mode_escaping(self) -> None:
        image = Image("a.png", children=(Text('" onerror="alert(1)'),))
        html = HtmlRenderer().render(image)
        assert html == '<img src="a.png" alt="" onerror="alert(1)" />'

    def test_alt_code_span_uses_text_mode_escaping(self) -> None:
        image = Image("a.png", children=(Text('say "hi" '), CodeSpan('"&"')))
        html = HtmlRenderer().render(image)
        assert html == '<img src="a.png" alt="say "hi" "&amp;"" />'

    def test_escaped_text_survives_stripping(self) -> None:
        image = Image("a.png", children=(Text("a <b> c"),))
        assert HtmlRenderer().render(image) == '<img src="a.png" alt="a &lt;b&gt; c" />'

    @given(depth=st.integers(min_value=1, max_value=30))
    @settings(max_examples=30)
    def test_any_nesting_depth(self, depth: int) -> None:
        node: Image = Image("0.png", children=(Text("x"),))
        for i in range(1, depth):
            node = Image(f"{i}.png", children=(node,))
        html = HtmlRenderer().render(node)
        assert html.count("<img") == 1
        assert html.endswith('alt="x" />')


class TestTightLists:
    def test_tight_paragraph_tags_suppressed(self) -> None:
        lst = List(items=(ListItem(children=(_para(Text("one")),)),), tight=True)
        html = HtmlRenderer().render(Document(children=(lst,)))
        assert "<p>" not in html
        assert "one" in html

    def test_paragraph_in_quote_inside_tight_list(self) -> None:
        quote = BlockQuote(children=(_para(Text("q")),))
        lst = List(items=(ListItem(children=(quote,)),), tight=True)
        html = HtmlRenderer().render(Document(children=(lst,)))
        assert "<p>q</p>" in html

    def test_shared_paragraph_instance(self) -> None:
        para = _para(Text("x"))
        lst = List(items=(ListItem(children=(para,)),), tight=True)
        html = HtmlRenderer().render(Document(children=(para, lst)))
        assert html == "<p>x</p>\n<ul>\n<li>x</li>\n</ul>\n"

    def test_root_paragraph_has_no_grandparent(self) -> None:
        assert HtmlRenderer().render(_para(Text("x"))) == "<p>x</p>\n"


class TestSourcepos:
    def test_paragraph(self) -> None:
        loc = SourceLocation(1, 1, 1, 5)
        para = Paragraph(location=loc, children=(Text("hello", location=loc),))
        html = HtmlRenderer(RenderConfig(sourcepos=True)).render(para)
        assert html == '<p data-sourcepos="1:1-1:5">hello</p>\n'

    def test_attribute_precedes_node_attributes(self) -> None:
        loc = SourceLocation(2, 1, 4, 3)
        doc = Document(
            children=(
                List(
                    location=loc,
                    items=(ListItem(children=(_para(Text("a")),)),),
                    ordered=True,
                    start=3,
                ),
                CodeBlock("x\n", info="py", location=SourceLocation(5, 1, 7, 3)),
            )
        )
        html = HtmlRenderer(RenderConfig(sourcepos=True)).render(doc)
        assert '<ol data-sourcepos="2:1-4:3" start="3">' in html
        assert '<pre><code data-sourcepos="5:1-7:3" class="language-py">' in html

    def test_point_location_uses_start_as_end(self) -> None:
        rule = ThematicBreak(location=SourceLocation(3, 1))
        html = HtmlRenderer(RenderConfig(sourcepos=True)).render(rule)
        assert html == '<hr data-sourcepos="3:1-3:1" />\n'

    def test_unlocated_nodes_have_no_attribute(self) -> None:
        html = HtmlRenderer(RenderConfig(sourcepos=True)).render(_para(Text("x")))
        assert "data-sourcepos" not in html

    def test_disabled_by_default(self) -> None:
        para = Paragraph(location=SourceLocation(1, 1, 1, 1), children=())
        assert "data-sourcepos" not in HtmlRenderer().render(para)


class TestNewlineNormalization:
    def test_cr_is_idempotent(self) -> None:
        state = RenderState(config=RenderConfig(), walker=None)  # type: ignore[arg-type]
        state.emit("x")
        state.cr()
        state.cr()
        assert state.sb.build() == "x\n"

    def test_leading_cr_is_noop(self) -> None:
        state = RenderState(config=RenderConfig(), walker=None)  # type: ignore[arg-type]
        state.cr()
        assert state.sb.build() == ""

    def test_no_leading_blank_line(self) -> None:
        html = HtmlRenderer().render(Document(children=(ThematicBreak(),)))
        assert not html.startswith("\n")

    @given(
        kinds=st.lists(
            st.sampled_from(["p", "h", "hr", "code", "quote", "html"]), min_size=1, max_size=12
        ),
        text=st.text(alphabet="abc xyz", max_size=8),
    )
    @settings(max_examples=75)
    def test_blocks_never_produce_blank_lines(self, kinds: list[str], text: str) -> None:
        blocks = []
        for kind in kinds:
            match kind:
                case "p":
                    blocks.append(_para(Text(text)))
                case "h":
                    blocks.append(Heading(level=2, children=(Emphasis(children=(Text(text),)),)))
                case "hr":
                    blocks.append(ThematicBreak())
                case "code":
                    blocks.append(CodeBlock(text + "\n", info=text))
                case "quote":
                    blocks.append(BlockQuote(children=(_para(Text(text)),)))
                case "html":
                    blocks.append(HtmlBlock(f"<div>{text}</div>"))
        html = HtmlRenderer().render(Document(children=tuple(blocks)))
        assert "\n\n" not in html
        assert not html.startswith("\n")
        assert html.endswith("\n")


class TestThreadSafety:
    def test_shared_renderer_concurrent_renders(self) -> None:
        renderer = HtmlRenderer(RenderConfig(safe=True))
        docs = [
            Document(
                children=(
                    Heading(level=1, children=(Text(f"Doc {i}"),)),
                    _para(Image(f"{i}.png", children=(Emphasis(children=(Text(str(i)),)),))),
                )
            )
            for i in range(20)
        ]
        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(renderer.render, docs))

        for i, html in enumerate(results):
            assert html == f'<h1>Doc {i}</h1>\n<p><img src="{i}.png" alt="{i}" /></p>\n'
