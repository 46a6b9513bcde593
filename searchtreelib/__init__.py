"""SearchTreeLib - In-memory ordered set backed by a binary search tree.

    from searchtreelib import BinarySearchTree

    tree = BinarySearchTree()
    tree.insert(10)
    tree.search(10)          # True
    tree.in_order_traversal()

Failures are raised as DuplicateValueError (insert) and ValueNotFoundError
(delete), both subclasses of BSTError.
"""

__version__ = "0.1.0"

# Core components
from .core.node import Node
from .core.tree import BinarySearchTree
from .core.traverser import (
    NodeTraverser,
    InOrderTraverser,
    PreOrderTraverser,
    PostOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
    parse_order,
)

# Errors
from .errors import BSTError, DuplicateValueError, ValueNotFoundError

# Configuration
from .config import TreeConfig, TraversalOrder, BalanceCheck, parse_balance_check

# High-level API
from .api import build_tree, traverse, get_tree_stats

__all__ = [
    "__version__",
    # Core
    'Node',
    'BinarySearchTree',
    'NodeTraverser',
    'InOrderTraverser',
    'PreOrderTraverser',
    'PostOrderTraverser',
    'LevelOrderTraverser',
    'create_traverser',
    'parse_order',
    # Errors
    'BSTError',
    'DuplicateValueError',
    'ValueNotFoundError',
    # Config
    'TreeConfig',
    'TraversalOrder',
    'BalanceCheck',
    'parse_balance_check',
    # API
    'build_tree',
    'traverse',
    'get_tree_stats',
]
