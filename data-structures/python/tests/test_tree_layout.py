import sys
import os
import unittest

import numpy as np

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from binary_tree import BinaryTree
from tree_layout import compute_layout


class TestTreeLayout(unittest.TestCase):

    def test_empty_tree(self):
        layout = compute_layout(None)
        self.assertEqual(len(layout), 0)
        self.assertEqual(layout.positions.shape, (0, 2))
        self.assertEqual(layout.edges, [])
        self.assertEqual(layout.depth, 0)

    def test_positions_follow_rank_and_depth(self):
        tree = BinaryTree()
        for v in [5, 3, 8, 1, 4, 7, 9]:
            tree.insert(v)
        layout = compute_layout(tree.root)
        self.assertEqual(layout.values, [1, 3, 4, 5, 7, 8, 9])
        np.testing.assert_array_equal(layout.positions[:, 0], np.arange(7))
        np.testing.assert_array_equal(
            layout.positions[:, 1], [-2, -1, -2, 0, -2, -1, -2]
        )
        self.assertEqual(layout.depth, tree.height())

    def test_edges_link_parent_to_children(self):
        tree = BinaryTree()
        for v in [5, 3, 8, 1, 4, 7, 9]:
            tree.insert(v)
        layout = compute_layout(tree.root)
        named = {(layout.values[p], layout.values[c]) for p, c in layout.edges}
        self.assertEqual(
            named, {(5, 3), (5, 8), (3, 1), (3, 4), (8, 7), (8, 9)}
        )
        self.assertEqual(len(layout.edges), len(layout) - 1)

    def test_layout_after_remove(self):
        tree = BinaryTree()
        for v in [5, 3, 8, 1, 4, 7, 9]:
            tree.insert(v)
        tree.remove(5)
        layout = compute_layout(tree.root)
        root_index = layout.values.index(7)
        self.assertEqual(layout.positions[root_index, 1], 0)
        self.assertEqual(len(layout.edges), 5)

    def test_degenerate_chain_depth(self):
        tree = BinaryTree()
        for v in range(20):
            tree.insert(v)
        layout = compute_layout(tree.root)
        self.assertEqual(layout.depth, 20)
        np.testing.assert_array_equal(layout.positions[:, 1], -np.arange(20))


if __name__ == "__main__":
    unittest.main()
