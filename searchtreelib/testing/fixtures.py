"""Test fixtures for SearchTreeLib consumers.

These fixtures inspect a tree's node structure directly so test suites can
verify its invariants without reaching into private attributes.
"""

from typing import Any, Dict, List, Optional

from ..core.node import Node
from ..core.traverser import PreOrderTraverser
from ..core.tree import BinarySearchTree


class TreeTestHelper:
    """Public test fixture for structural verification.

    Example:
        tree = build_tree(values)
        helper = TreeTestHelper(tree)

        assert helper.ordering_violations() == []
        assert helper.is_strictly_ascending()
    """

    def __init__(self, tree: BinarySearchTree):
        """Initialize with the tree under test.

        Args:
            tree: The BinarySearchTree to inspect
        """
        self._tree = tree

    def ordering_violations(self) -> List[Any]:
        """Return values whose node breaks the BST ordering rule.

        Every node is checked against the open interval its ancestors allow,
        not just against its parent.

        Returns:
            List of offending values (empty if the tree is a valid BST)
        """
        violations = []
        if self._tree.root is None:
            return violations

        # Entries are (node, exclusive lower bound, exclusive upper bound)
        stack: List[tuple] = [(self._tree.root, None, None)]
        while stack:
            node, low, high = stack.pop()
            if (low is not None and not low.value < node.value) or \
               (high is not None and not node.value < high.value):
                violations.append(node.value)
            if node.left is not None:
                stack.append((node.left, low, node))
            if node.right is not None:
                stack.append((node.right, node, high))

        return violations

    def is_strictly_ascending(self) -> bool:
        """Check that the in-order sequence has no ties or inversions."""
        values = self._tree.in_order_traversal()
        return all(a < b for a, b in zip(values, values[1:]))

    def has_shared_nodes(self) -> bool:
        """Check whether any node is reachable through two different parents."""
        seen = set()
        for node, _ in PreOrderTraverser().traverse(self._tree.root):
            if id(node) in seen:
                return True
            seen.add(id(node))
        return False

    def find_node(self, value: Any) -> Optional[Node]:
        """Return the node holding value, or None."""
        node = self._tree.root
        while node is not None:
            if value < node.value:
                node = node.left
            elif value > node.value:
                node = node.right
            else:
                return node
        return None

    def get_summary(self) -> Dict[str, Any]:
        """Returns high-level structural state for testing.

        Returns:
            Dictionary containing:
            - count: Number of nodes
            - height: Tree height
            - valid: Whether the ordering invariant holds
            - values: In-order values
        """
        return {
            'count': self._tree.count_nodes(),
            'height': self._tree.height(),
            'valid': not self.ordering_violations(),
            'values': self._tree.in_order_traversal(),
        }
