"""Traversal strategies for SearchTreeLib.

Traversers walk the nodes of a binary search tree in one of the classical
orders. All of them use explicit stacks or queues rather than recursion, so
a degenerate tree (a near-linear chain) cannot exhaust the interpreter's
recursion limit.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Iterator, List, Optional, Tuple, Union

from .node import Node
from ..config import TraversalOrder


class NodeTraverser(ABC):
    """Abstract base class for tree traversal strategies."""

    order: TraversalOrder

    @abstractmethod
    def traverse(self, root: Optional[Node]) -> Iterator[Tuple[Node, int]]:
        """Traverse the subtree starting from root.

        Args:
            root: Starting node for traversal (None yields nothing)

        Yields:
            Tuples of (node, depth) where depth is relative to root
        """
        pass

    def values(self, root: Optional[Node]) -> List:
        """Materialize the visited values into a fresh list."""
        return [node.value for node, _ in self.traverse(root)]


class InOrderTraverser(NodeTraverser):
    """Left subtree, node, right subtree.

    For a binary search tree this visits values in ascending order.
    """

    order = TraversalOrder.IN_ORDER

    def traverse(self, root: Optional[Node]) -> Iterator[Tuple[Node, int]]:
        stack: List[Tuple[Node, int]] = []
        node, depth = root, 0

        while stack or node is not None:
            # Slide down the left spine
            while node is not None:
                stack.append((node, depth))
                node, depth = node.left, depth + 1

            node, depth = stack.pop()
            yield (node, depth)
            node, depth = node.right, depth + 1


class PreOrderTraverser(NodeTraverser):
    """Node, left subtree, right subtree.

    Reflects the shape the insertion order produced. Re-inserting the
    pre-order sequence into an empty tree rebuilds the same shape.
    """

    order = TraversalOrder.PRE_ORDER

    def traverse(self, root: Optional[Node]) -> Iterator[Tuple[Node, int]]:
        if root is None:
            return
        stack: List[Tuple[Node, int]] = [(root, 0)]

        while stack:
            node, depth = stack.pop()
            yield (node, depth)

            # Right pushed first so left is popped first
            if node.right is not None:
                stack.append((node.right, depth + 1))
            if node.left is not None:
                stack.append((node.left, depth + 1))


class PostOrderTraverser(NodeTraverser):
    """Left subtree, right subtree, node.

    Children are always yielded before their parent, which makes this the
    order for bottom-up aggregation such as subtree heights.
    """

    order = TraversalOrder.POST_ORDER

    def traverse(self, root: Optional[Node]) -> Iterator[Tuple[Node, int]]:
        if root is None:
            return
        # Entries are (node, depth, children_done)
        stack: List[Tuple[Node, int, bool]] = [(root, 0, False)]

        while stack:
            node, depth, children_done = stack.pop()
            if children_done:
                yield (node, depth)
                continue

            stack.append((node, depth, True))
            if node.right is not None:
                stack.append((node.right, depth + 1, False))
            if node.left is not None:
                stack.append((node.left, depth + 1, False))


class LevelOrderTraverser(NodeTraverser):
    """Breadth-first traversal, one depth level at a time, left to right."""

    order = TraversalOrder.LEVEL_ORDER

    def traverse(self, root: Optional[Node]) -> Iterator[Tuple[Node, int]]:
        if root is None:
            return
        queue: Deque[Tuple[Node, int]] = deque([(root, 0)])

        while queue:
            node, depth = queue.popleft()
            yield (node, depth)
            for child in node.children():
                queue.append((child, depth + 1))


_TRAVERSERS = {
    TraversalOrder.IN_ORDER: InOrderTraverser,
    TraversalOrder.PRE_ORDER: PreOrderTraverser,
    TraversalOrder.POST_ORDER: PostOrderTraverser,
    TraversalOrder.LEVEL_ORDER: LevelOrderTraverser,
}

_ORDER_NAMES = {
    'in': TraversalOrder.IN_ORDER,
    'in_order': TraversalOrder.IN_ORDER,
    'inorder': TraversalOrder.IN_ORDER,
    'pre': TraversalOrder.PRE_ORDER,
    'pre_order': TraversalOrder.PRE_ORDER,
    'preorder': TraversalOrder.PRE_ORDER,
    'post': TraversalOrder.POST_ORDER,
    'post_order': TraversalOrder.POST_ORDER,
    'postorder': TraversalOrder.POST_ORDER,
    'level': TraversalOrder.LEVEL_ORDER,
    'level_order': TraversalOrder.LEVEL_ORDER,
    'bfs': TraversalOrder.LEVEL_ORDER,
}


def parse_order(order: Union[TraversalOrder, str]) -> TraversalOrder:
    """Parse a traversal order from a string or enum.

    Args:
        order: Order as enum or name (e.g. "in", "pre_order", "bfs")

    Returns:
        TraversalOrder enum value

    Raises:
        ValueError: If the name is not recognized
    """
    if isinstance(order, TraversalOrder):
        return order

    order_lower = order.lower() if isinstance(order, str) else str(order)
    if order_lower in _ORDER_NAMES:
        return _ORDER_NAMES[order_lower]

    raise ValueError(
        f"Unknown traversal order: {order}. "
        f"Choose from: {', '.join(_ORDER_NAMES.keys())}"
    )


def create_traverser(order: Union[TraversalOrder, str]) -> NodeTraverser:
    """Create a traverser instance by order.

    Args:
        order: TraversalOrder or one of its names

    Returns:
        NodeTraverser instance

    Raises:
        ValueError: If order name is not recognized
    """
    return _TRAVERSERS[parse_order(order)]()
