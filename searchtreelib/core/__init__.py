"""Core components of SearchTreeLib."""

from .node import Node
from .traverser import NodeTraverser
from .tree import BinarySearchTree

__all__ = [
    "Node",
    "NodeTraverser",
    "BinarySearchTree",
]
