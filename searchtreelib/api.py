"""High-level API for SearchTreeLib.

This module provides simple, functional interfaces for common tree
operations. These functions wrap the BinarySearchTree class for ease of
use in simple cases.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Union

from .config import TreeConfig, TraversalOrder
from .core.tree import BinarySearchTree
from .core.traverser import LevelOrderTraverser, parse_order
from .errors import DuplicateValueError

logger = logging.getLogger(__name__)


def build_tree(values: Iterable[Any], config: Optional[TreeConfig] = None) -> BinarySearchTree:
    """Build a tree by inserting values in the order given.

    By default the first duplicate aborts the build. With a config that
    tolerates duplicates (``TreeConfig.lenient()``), each duplicate is
    logged, handed to ``config.on_error`` if set, and skipped.

    Args:
        values: Values to insert, in insertion order
        config: Tree configuration

    Returns:
        The populated BinarySearchTree

    Raises:
        DuplicateValueError: On a duplicate, unless the config tolerates them

    Example:
        >>> tree = build_tree([10, 5, 15, 3, 7, 12, 18])
        >>> tree.pre_order_traversal()
        [10, 5, 3, 7, 15, 12, 18]
    """
    tree = BinarySearchTree(config)

    for value in values:
        try:
            tree.insert(value)
        except DuplicateValueError as e:
            if not tree.config.tolerates_duplicates:
                raise
            logger.warning("Skipping duplicate value %r: %s", value, e)
            if tree.config.on_error is not None:
                tree.config.on_error(value, e)

    return tree


def traverse(tree: BinarySearchTree,
             order: Union[TraversalOrder, str] = TraversalOrder.IN_ORDER) -> List[Any]:
    """Materialize the values of a tree in the given order.

    Args:
        tree: Tree to read
        order: TraversalOrder or its name ("in", "pre", "post", "level", ...)

    Returns:
        List of values

    Example:
        >>> traverse(build_tree([2, 1, 3]), "post")
        [1, 3, 2]
    """
    return tree.traverse(parse_order(order))


def get_tree_stats(tree: BinarySearchTree) -> Dict[str, Any]:
    """Get statistics about a tree.

    Args:
        tree: Tree to inspect

    Returns:
        Dictionary with tree statistics

    Example:
        >>> stats = get_tree_stats(build_tree([10, 5, 15]))
        >>> stats['total_nodes'], stats['height']
        (3, 2)
    """
    stats = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'height': 0,
        'balanced': tree.is_balanced(),
        'min': tree.find_min(),
        'max': tree.find_max(),
        'depths': {}
    }

    for node, depth in LevelOrderTraverser().traverse(tree.root):
        stats['total_nodes'] += 1

        if node.is_leaf():
            stats['leaf_nodes'] += 1

        stats['height'] = max(stats['height'], depth + 1)

        if depth not in stats['depths']:
            stats['depths'][depth] = 0
        stats['depths'][depth] += 1

    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']

    return stats
