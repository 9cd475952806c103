"""TreeRenderer protocol: stable interface for tree renderers.

Any renderer that implements ``render(node) -> str`` conforms to this protocol.
The built-in ``HtmlRenderer`` is the reference implementation.

Example:
    from markwalk.renderers.protocol import TreeRenderer

    def render_page(renderer: TreeRenderer, doc: Document) -> str:
        return renderer.render(doc)

"""

from typing import Protocol, runtime_checkable

from markwalk.nodes import Node


@runtime_checkable
class TreeRenderer(Protocol):
    """Protocol for document tree renderers.

    Implementations must accept a root node and return a rendered string.

    """

    def render(self, node: Node) -> str:
        """Render a tree to a string.

        Args:
            node: Root of the tree to render.

        Returns:
            Rendered string output.

        """
        ...
