"""
Drawing coordinates for binary trees.

Each node is placed at x = its in-order rank and y = minus its depth, so
the picture reads left to right in sorted order and no two nodes overlap.
"""

from typing import Any, Dict, List, Optional, Tuple

import numpy as np


class TreeLayout:
    def __init__(
        self,
        values: List[Any],
        positions: np.ndarray,
        edges: List[Tuple[int, int]],
    ) -> None:
        self.values = values
        self.positions = positions
        self.edges = edges

    @property
    def depth(self) -> int:
        if len(self.values) == 0:
            return 0
        return int(-self.positions[:, 1].min()) + 1

    def __len__(self) -> int:
        return len(self.values)


def compute_layout(root: Optional[Any]) -> TreeLayout:
    values: List[Any] = []
    depths: List[int] = []
    index_of: Dict[int, int] = {}

    stack: List[Tuple[Any, int]] = []
    node, depth = root, 0
    while stack or node is not None:
        while node is not None:
            stack.append((node, depth))
            node, depth = node.left, depth + 1
        node, depth = stack.pop()
        index_of[id(node)] = len(values)
        values.append(node.value)
        depths.append(depth)
        node, depth = node.right, depth + 1

    edges: List[Tuple[int, int]] = []
    pending = [root] if root is not None else []
    while pending:
        parent = pending.pop()
        for child in (parent.left, parent.right):
            if child is not None:
                edges.append((index_of[id(parent)], index_of[id(child)]))
                pending.append(child)

    positions = np.zeros((len(values), 2))
    positions[:, 0] = np.arange(len(values))
    positions[:, 1] = -np.asarray(depths, dtype=float)
    return TreeLayout(values, positions, edges)
