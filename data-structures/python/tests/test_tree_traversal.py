import sys
import os
import unittest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from binary_tree import BinaryTree
from tree_traversal import (
    count_nodes,
    in_order,
    iter_in_order,
    level_order,
    post_order,
    pre_order,
)


class TestTreeTraversal(unittest.TestCase):

    def setUp(self):
        self.tree = BinaryTree()
        for v in [50, 30, 70, 20, 40]:
            self.tree.insert(v)

    def test_in_order_yields_sorted(self):
        self.assertEqual(in_order(self.tree.root), [20, 30, 40, 50, 70])

    def test_iter_in_order_is_lazy(self):
        it = iter_in_order(self.tree.root)
        self.assertEqual(next(it), 20)
        self.assertEqual(next(it), 30)

    def test_pre_order_yields_correct_sequence(self):
        self.assertEqual(pre_order(self.tree.root), [50, 30, 20, 40, 70])

    def test_post_order_yields_correct_sequence(self):
        self.assertEqual(post_order(self.tree.root), [20, 40, 30, 70, 50])

    def test_level_order_groups_by_depth(self):
        self.assertEqual(level_order(self.tree.root), [[50], [30, 70], [20, 40]])

    def test_traversals_on_empty_tree(self):
        self.assertEqual(in_order(None), [])
        self.assertEqual(pre_order(None), [])
        self.assertEqual(post_order(None), [])
        self.assertEqual(level_order(None), [])
        self.assertEqual(count_nodes(None), 0)

    def test_in_order_keeps_duplicates(self):
        self.tree.insert(30)
        self.tree.insert(30)
        self.assertEqual(in_order(self.tree.root), [20, 30, 30, 30, 40, 50, 70])

    def test_count_nodes_matches_tree_count(self):
        self.assertEqual(count_nodes(self.tree.root), self.tree.count)
        self.tree.remove(30)
        self.assertEqual(count_nodes(self.tree.root), self.tree.count)

    def test_count_nodes_rejects_cycle(self):
        self.tree.root.left.left.left = self.tree.root
        with self.assertRaises(ValueError):
            count_nodes(self.tree.root)

    def test_deep_chain_does_not_recurse(self):
        tree = BinaryTree()
        for i in range(5000):
            tree.insert(i)
        self.assertEqual(in_order(tree.root), list(range(5000)))
        self.assertEqual(len(post_order(tree.root)), 5000)
        self.assertEqual(len(level_order(tree.root)), 5000)


if __name__ == "__main__":
    unittest.main()
