"""Pre-order event walker over a document tree.

Produces the (node, entering) event stream the renderer consumes:

- Container nodes yield an entering event, their descendants' events,
  then an exiting event.
- Leaf nodes yield a single entering event.

Example:

    walker = NodeWalker(doc)
    for event in walker:
        if event.entering and isinstance(event.node, Paragraph):
            print(walker.parent(event.node))

The walker keeps an ``id(node) -> parent`` index built during iteration.
The index never owns anything beyond the tree itself and is only valid
while the tree is alive and a traversal is in progress or finished.

Thread Safety:
    A NodeWalker carries per-traversal state. Create one per traversal.

"""

from collections.abc import Iterator
from dataclasses import dataclass

from markwalk.nodes import Node, children_of, is_container


@dataclass(frozen=True, slots=True)
class WalkEvent:
    """A single traversal step."""

    node: Node
    entering: bool


class NodeWalker:
    """Restartable pre-order walker.

    Each ``iter()`` starts a fresh traversal from the root. Traversal uses an
    explicit stack, so deeply nested trees do not hit the recursion limit.

    """

    __slots__ = ("_root", "_parents")

    def __init__(self, root: Node) -> None:
        self._root = root
        self._parents: dict[int, Node | None] = {}

    @property
    def root(self) -> Node:
        return self._root

    def __iter__(self) -> Iterator[WalkEvent]:
        self._parents.clear()
        stack: list[tuple[Node, bool, Node | None]] = [(self._root, True, None)]
        while stack:
            node, entering, parent = stack.pop()
            if entering:
                # Recorded on pop so a node instance reused elsewhere in the
                # tree sees the parent of its current occurrence.
                self._parents[id(node)] = parent
            yield WalkEvent(node, entering)
            if entering and is_container(node):
                stack.append((node, False, parent))
                stack.extend((child, True, node) for child in reversed(children_of(node)))

    def parent(self, node: Node) -> Node | None:
        """Parent of a node already reached by the current traversal."""
        return self._parents.get(id(node))

    def grandparent(self, node: Node) -> Node | None:
        """Parent of the node's parent, or None at the top of the tree."""
        parent = self.parent(node)
        if parent is None:
            return None
        return self.parent(parent)


def walk(root: Node) -> Iterator[WalkEvent]:
    """Iterate over the events of a tree without keeping a walker handle."""
    return iter(NodeWalker(root))
