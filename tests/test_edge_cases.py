"""Unit tests for edge cases in SearchTreeLib.

Covers empty trees, non-integer values, and degenerate chains deeper
than the interpreter's recursion limit.
"""

import unittest
import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from searchtreelib import (
    BinarySearchTree,
    Node,
    ValueNotFoundError,
    build_tree,
)
from searchtreelib.testing import TreeTestHelper


class TestEmptyTree(unittest.TestCase):
    """Every query on an empty tree has a defined answer."""

    def setUp(self):
        self.tree = BinarySearchTree()

    def test_queries(self):
        self.assertTrue(self.tree.is_empty())
        self.assertIsNone(self.tree.root)
        self.assertIsNone(self.tree.find_min())
        self.assertIsNone(self.tree.find_max())
        self.assertFalse(self.tree.search(0))
        self.assertEqual(len(self.tree), 0)

    def test_traversals(self):
        self.assertEqual(self.tree.in_order_traversal(), [])
        self.assertEqual(self.tree.pre_order_traversal(), [])
        self.assertEqual(self.tree.post_order_traversal(), [])
        self.assertEqual(self.tree.level_order_traversal(), [])

    def test_delete_anything_fails(self):
        for value in (0, -1, 10 ** 9):
            with self.assertRaises(ValueNotFoundError):
                self.tree.delete(value)
        self.assertTrue(self.tree.is_empty())

    def test_repr(self):
        self.assertEqual(repr(self.tree), "BinarySearchTree([])")


class TestOtherValueTypes(unittest.TestCase):
    """Any totally ordered type works, not just integers."""

    def test_strings(self):
        tree = build_tree(["mango", "apple", "zucchini", "banana"])
        self.assertEqual(
            tree.in_order_traversal(),
            ["apple", "banana", "mango", "zucchini"]
        )
        self.assertEqual(tree.find_min(), "apple")
        tree.delete("mango")
        self.assertEqual(tree.root.value, "zucchini")

    def test_tuples(self):
        tree = build_tree([(2, "b"), (1, "z"), (2, "a")])
        self.assertEqual(tree.find_max(), (2, "b"))
        self.assertEqual(tree.in_order_traversal(), [(1, "z"), (2, "a"), (2, "b")])

    def test_floats_and_negatives(self):
        tree = build_tree([0.5, -3, 2.25, -3.5])
        self.assertEqual(tree.in_order_traversal(), [-3.5, -3, 0.5, 2.25])

    def test_incomparable_value_propagates_type_error(self):
        tree = build_tree([1, 2])
        with self.assertRaises(TypeError):
            tree.insert("three")
        self.assertEqual(tree.count_nodes(), 2)


class TestNode(unittest.TestCase):

    def test_leaf_and_children(self):
        leaf = Node(3)
        parent = Node(5, left=leaf, right=Node(7))
        self.assertTrue(leaf.is_leaf())
        self.assertFalse(parent.is_leaf())
        self.assertEqual([c.value for c in parent.children()], [3, 7])
        self.assertEqual(repr(leaf), "Node(value=3)")

    def test_no_shared_nodes_after_deletes(self):
        tree = build_tree([50, 30, 70, 20, 40, 60, 80, 35, 45, 65])
        for value in (30, 70, 50):
            tree.delete(value)
        helper = TreeTestHelper(tree)
        self.assertFalse(helper.has_shared_nodes())
        self.assertEqual(helper.ordering_violations(), [])


class TestDegenerateChains(unittest.TestCase):
    """Chains deeper than the default recursion limit."""

    DEPTH = 2000

    def test_ascending_chain(self):
        tree = build_tree(range(self.DEPTH))
        self.assertEqual(tree.height(), self.DEPTH)
        self.assertEqual(tree.count_nodes(), self.DEPTH)
        self.assertEqual(tree.find_max(), self.DEPTH - 1)
        self.assertEqual(tree.in_order_traversal(), list(range(self.DEPTH)))
        self.assertEqual(tree.pre_order_traversal(), list(range(self.DEPTH)))
        self.assertEqual(tree.post_order_traversal(), list(reversed(range(self.DEPTH))))
        self.assertFalse(tree.is_balanced())

    def test_descending_chain_delete_bottom(self):
        tree = build_tree(reversed(range(self.DEPTH)))
        tree.delete(0)
        self.assertEqual(tree.find_min(), 1)
        self.assertEqual(tree.height(), self.DEPTH - 1)


@pytest.mark.slow
def test_drain_long_chain():
    """Deleting every value of a 5000-node chain from the root down."""
    depth = 5000
    tree = build_tree(range(depth))
    for value in range(depth):
        tree.delete(value)
    assert tree.is_empty()
    assert tree.height() == 0


if __name__ == '__main__':
    unittest.main()
