"""Node representation for SearchTreeLib.

A Node is a plain data container: one value and two optional children.
Each child is owned by exactly one parent, so dropping a node's reference
from its parent releases the whole subtree beneath it.
"""

from typing import Any, Iterator, Optional


class Node:
    """A single node of a binary search tree.

    Every value in ``left``'s subtree is strictly less than ``value`` and
    every value in ``right``'s subtree is strictly greater. The tree is
    responsible for keeping that true; the node only stores the links.
    """

    def __init__(self, value: Any,
                 left: Optional['Node'] = None,
                 right: Optional['Node'] = None):
        self.value = value
        self.left = left
        self.right = right

    def is_leaf(self) -> bool:
        """Check if this node has no children."""
        return self.left is None and self.right is None

    def children(self) -> Iterator['Node']:
        """Yield the present children, left before right."""
        if self.left is not None:
            yield self.left
        if self.right is not None:
            yield self.right

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(value={self.value!r})"
