"""
Traversals over binary tree nodes.

Works on any node exposing ``value``, ``left`` and ``right``, typically the
``root`` of a ``BinaryTree``. All walks use an explicit stack or queue, so a
degenerate tree built from sorted input does not hit the recursion limit.
"""

from collections import deque
from typing import Any, Iterator, List, Optional


def iter_in_order(root: Optional[Any]) -> Iterator[Any]:
    stack: List[Any] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.value
        node = node.right


def in_order(root: Optional[Any]) -> List[Any]:
    return list(iter_in_order(root))


def pre_order(root: Optional[Any]) -> List[Any]:
    result: List[Any] = []
    if root is None:
        return result
    stack: List[Any] = [root]
    while stack:
        node = stack.pop()
        result.append(node.value)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def post_order(root: Optional[Any]) -> List[Any]:
    result: List[Any] = []
    if root is None:
        return result
    stack: List[Any] = [root]
    while stack:
        node = stack.pop()
        result.append(node.value)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    result.reverse()
    return result


def level_order(root: Optional[Any]) -> List[List[Any]]:
    """Values grouped by depth, root level first."""
    levels: List[List[Any]] = []
    if root is None:
        return levels
    queue = deque([root])
    while queue:
        level = []
        for _ in range(len(queue)):
            node = queue.popleft()
            level.append(node.value)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        levels.append(level)
    return levels


def count_nodes(root: Optional[Any]) -> int:
    """Number of nodes reachable from root.

    Raises ValueError if some node is reachable twice, which means the
    structure is no longer a tree.
    """
    seen = set()
    stack: List[Any] = [root] if root is not None else []
    while stack:
        node = stack.pop()
        if id(node) in seen:
            raise ValueError(f"node {node.value!r} reached twice")
        seen.add(id(node))
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    return len(seen)
