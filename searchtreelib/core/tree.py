"""BinarySearchTree container for SearchTreeLib.

The tree owns an optional root Node; every Node owns its two optional
children. Values are kept unique and ordered: for every node, the left
subtree holds only smaller values and the right subtree only larger ones.

Mutators descend with explicit loops and rebind exactly one child slot
(or the root) per structural change. A mutator that raises has not
touched the tree.
"""

import logging
from typing import Any, Dict, List, Optional, Union

from .node import Node
from .traverser import (
    InOrderTraverser,
    PreOrderTraverser,
    PostOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
)
from ..config import TreeConfig, TraversalOrder, BalanceCheck, parse_balance_check
from ..errors import DuplicateValueError, ValueNotFoundError

logger = logging.getLogger(__name__)


class BinarySearchTree:
    """In-memory ordered set backed by an unbalanced binary search tree.

    Example:
        >>> tree = BinarySearchTree()
        >>> for v in (10, 5, 15):
        ...     tree.insert(v)
        >>> tree.in_order_traversal()
        [5, 10, 15]
    """

    def __init__(self, config: Optional[TreeConfig] = None):
        """Create an empty tree.

        Args:
            config: Tree configuration (defaults to TreeConfig())

        Raises:
            ValueError: If the configuration is inconsistent
        """
        self.config = config or TreeConfig()
        config_errors = self.config.validate()
        if config_errors:
            raise ValueError(f"Invalid configuration: {'; '.join(config_errors)}")
        self._root: Optional[Node] = None

    @property
    def root(self) -> Optional[Node]:
        """The root node, or None for an empty tree."""
        return self._root

    def is_empty(self) -> bool:
        return self._root is None

    def clear(self) -> None:
        """Drop every value. Releasing the root releases all its descendants."""
        self._root = None

    # Structural mutators

    def insert(self, value: Any) -> None:
        """Insert a value as a new leaf.

        Args:
            value: Value to insert; must be orderable against existing values

        Raises:
            DuplicateValueError: If an equal value is already present
        """
        if self._root is None:
            self._root = Node(value)
            logger.debug("Inserted %r as root", value)
            return

        node = self._root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = Node(value)
                    break
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = Node(value)
                    break
                node = node.right
            else:
                logger.debug("Rejected duplicate value %r", value)
                raise DuplicateValueError(value)

        logger.debug("Inserted %r under %r", value, node.value)

    def delete(self, value: Any) -> None:
        """Remove the node holding value, keeping the ordering invariant.

        A node with at most one child is replaced by that child (the right
        one when the left is absent). A node with two children takes the
        value of its in-order successor, and the successor's node is then
        removed from the right subtree.

        Args:
            value: Value to remove

        Raises:
            ValueNotFoundError: If no node holds value
        """
        parent: Optional[Node] = None
        went_left = False
        node = self._root

        while node is not None:
            if value < node.value:
                parent, went_left, node = node, True, node.left
            elif value > node.value:
                parent, went_left, node = node, False, node.right
            else:
                break

        if node is None:
            logger.debug("Value %r not found for delete", value)
            raise ValueNotFoundError(value)

        if node.left is None:
            self._rebind(parent, went_left, node.right)
        elif node.right is None:
            self._rebind(parent, went_left, node.left)
        else:
            successor_parent, successor = node, node.right
            while successor.left is not None:
                successor_parent, successor = successor, successor.left
            node.value = successor.value
            # The successor has no left child
            self._rebind(successor_parent, successor_parent is not node, successor.right)

        logger.debug("Deleted %r", value)

    def _rebind(self, parent: Optional[Node], left: bool, child: Optional[Node]) -> None:
        """Point the slot that owned a removed node at its replacement."""
        if parent is None:
            self._root = child
        elif left:
            parent.left = child
        else:
            parent.right = child

    # Queries

    def search(self, value: Any) -> bool:
        """Return True if value is present. O(height)."""
        node = self._root
        while node is not None:
            if value < node.value:
                node = node.left
            elif value > node.value:
                node = node.right
            else:
                return True
        return False

    def find_min(self) -> Optional[Any]:
        """Return the smallest value, or None if the tree is empty."""
        if self._root is None:
            return None
        node = self._root
        while node.left is not None:
            node = node.left
        return node.value

    def find_max(self) -> Optional[Any]:
        """Return the largest value, or None if the tree is empty."""
        if self._root is None:
            return None
        node = self._root
        while node.right is not None:
            node = node.right
        return node.value

    # Traversals. Each returns a freshly built list.

    def in_order_traversal(self) -> List[Any]:
        return InOrderTraverser().values(self._root)

    def pre_order_traversal(self) -> List[Any]:
        return PreOrderTraverser().values(self._root)

    def post_order_traversal(self) -> List[Any]:
        return PostOrderTraverser().values(self._root)

    def level_order_traversal(self) -> List[Any]:
        return LevelOrderTraverser().values(self._root)

    def traverse(self, order: Union[TraversalOrder, str, None] = None) -> List[Any]:
        """Materialize values in the given order.

        Args:
            order: TraversalOrder or its name; defaults to config.default_order

        Returns:
            List of values in traversal order

        Raises:
            ValueError: If order name is not recognized
        """
        if order is None:
            order = self.config.default_order
        return create_traverser(order).values(self._root)

    # Shape

    def count_nodes(self) -> int:
        return sum(1 for _ in PreOrderTraverser().traverse(self._root))

    def height(self) -> int:
        """Number of levels in the tree; 0 when empty, 1 for a lone root."""
        deepest = -1
        for _, depth in LevelOrderTraverser().traverse(self._root):
            deepest = depth
        return deepest + 1

    def is_balanced(self, check: Union[BalanceCheck, str, None] = None) -> bool:
        """Check the height difference between sibling subtrees.

        With BalanceCheck.SHALLOW (the default) only the root's two subtrees
        are compared, so a tree whose deeper nodes are skewed can still
        report True. BalanceCheck.STRICT applies the rule at every node.

        Args:
            check: Override for config.balance_check, as enum or name

        Returns:
            True if the checked nodes have subtree heights differing by at most 1

        Raises:
            ValueError: If check is not a BalanceCheck or one of its names
        """
        if check is None:
            check = self.config.balance_check
        check = parse_balance_check(check)
        if self._root is None:
            return True
        heights = _subtree_heights(self._root)

        if check is BalanceCheck.SHALLOW:
            nodes = [self._root]
        else:
            nodes = [node for node, _ in PreOrderTraverser().traverse(self._root)]

        for node in nodes:
            left = _child_height(heights, node.left)
            right = _child_height(heights, node.right)
            if abs(left - right) > 1:
                return False
        return True

    def __len__(self) -> int:
        return self.count_nodes()

    def __contains__(self, value: Any) -> bool:
        return self.search(value)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.in_order_traversal()!r})"


def _subtree_heights(root: Node) -> Dict[int, int]:
    """Map id(node) to the height of the subtree rooted there.

    Computed bottom-up, so every child is in the map before its parent.
    """
    heights: Dict[int, int] = {}
    for node, _ in PostOrderTraverser().traverse(root):
        heights[id(node)] = 1 + max(
            _child_height(heights, node.left),
            _child_height(heights, node.right),
        )
    return heights


def _child_height(heights: Dict[int, int], child: Optional[Node]) -> int:
    return heights[id(child)] if child is not None else 0
