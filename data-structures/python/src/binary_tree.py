from typing import TypeVar, Generic, Iterator, List, Optional, Tuple

from tree_traversal import iter_in_order, pre_order

T = TypeVar('T')

_UNBOUNDED = object()


class BinaryTree(Generic[T]):
    """Unbalanced binary search tree. Equal values descend to the right."""

    class Node:
        def __init__(self, value: T) -> None:
            self.value: T = value
            self.left: Optional['BinaryTree.Node'] = None
            self.right: Optional['BinaryTree.Node'] = None

        def __repr__(self) -> str:
            return f"Node({self.value!r})"

    def __init__(self) -> None:
        self._root: Optional[BinaryTree.Node] = None
        self._count: int = 0

    @property
    def root(self) -> Optional[Node]:
        return self._root

    @property
    def count(self) -> int:
        return self._count

    def insert(self, value: T) -> None:
        self._check_comparable(value)
        if value != value:
            raise ValueError(f"{value!r} is not equal to itself")

        node = BinaryTree.Node(value)
        if self._root is None:
            self._root = node
            self._count += 1
            return

        current = self._root
        while True:
            if value < current.value:
                if current.left is None:
                    current.left = node
                    break
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    break
                current = current.right
        self._count += 1

    def contains(self, value: T) -> bool:
        self._check_comparable(value)
        node, _, _ = self._find_with_parent(value)
        return node is not None

    def remove(self, value: T) -> bool:
        """Remove the first occurrence of value met on the descent path.

        Returns False and leaves the tree untouched when value is absent.
        The node taking the removed node's place is chosen as follows:

        - no right child: the left child
        - right child without a left child: the right child, which adopts
          the removed node's left subtree
        - otherwise: the in-order successor (leftmost node of the right
          subtree), which is first detached from its parent and then takes
          over both of the removed node's children
        """
        self._check_comparable(value)
        current, parent, is_left_child = self._find_with_parent(value)
        if current is None:
            return False
        assert self._count > 0, "count out of sync with reachable nodes"

        if current.right is None:
            replacement = current.left
        elif current.right.left is None:
            replacement = current.right
            replacement.left = current.left
        else:
            successor_parent = current.right
            successor = successor_parent.left
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left

            successor_parent.left, successor.left, successor.right = (
                successor.right, current.left, current.right
            )
            replacement = successor

        self._replace_child(parent, is_left_child, replacement)
        current.left = None
        current.right = None
        self._count -= 1
        return True

    def min(self) -> T:
        if self._root is None:
            raise ValueError("min from empty tree")
        return self._find_min(self._root).value

    def max(self) -> T:
        if self._root is None:
            raise ValueError("max from empty tree")
        return self._find_max(self._root).value

    def size(self) -> int:
        return self._count

    def is_empty(self) -> bool:
        return self._count == 0

    def clear(self) -> None:
        self._root = None
        self._count = 0

    def height(self) -> int:
        if self._root is None:
            return 0
        best = 0
        stack: List[Tuple[BinaryTree.Node, int]] = [(self._root, 1)]
        while stack:
            node, depth = stack.pop()
            best = max(best, depth)
            if node.left is not None:
                stack.append((node.left, depth + 1))
            if node.right is not None:
                stack.append((node.right, depth + 1))
        return best

    def is_valid(self) -> bool:
        """Check ordering, strict ownership and the running count."""
        seen = set()
        stack = [(self._root, _UNBOUNDED, _UNBOUNDED)]
        while stack:
            node, low, high = stack.pop()
            if node is None:
                continue
            if id(node) in seen:
                return False
            seen.add(id(node))
            if low is not _UNBOUNDED and node.value < low:
                return False
            if high is not _UNBOUNDED and not node.value < high:
                return False
            stack.append((node.left, low, node.value))
            stack.append((node.right, node.value, high))
        return len(seen) == self._count

    def copy(self) -> 'BinaryTree[T]':
        clone: BinaryTree[T] = BinaryTree()
        for value in pre_order(self._root):
            clone.insert(value)
        return clone

    def _find_with_parent(
        self, value: T
    ) -> Tuple[Optional[Node], Optional[Node], bool]:
        parent: Optional[BinaryTree.Node] = None
        is_left_child = False
        current = self._root
        while current is not None:
            if value < current.value:
                parent, is_left_child = current, True
                current = current.left
            elif current.value < value:
                parent, is_left_child = current, False
                current = current.right
            elif current.value == value:
                break
            else:
                return None, None, False
        return current, parent, is_left_child

    def _check_comparable(self, value: T) -> None:
        # types without an ordering raise TypeError here
        if value < value:
            raise ValueError(f"{value!r} compares less than itself")

    def _replace_child(
        self, parent: Optional[Node], is_left_child: bool, child: Optional[Node]
    ) -> None:
        if parent is None:
            self._root = child
        elif is_left_child:
            parent.left = child
        else:
            parent.right = child

    def _find_min(self, node: Node) -> Node:
        while node.left is not None:
            node = node.left
        return node

    def _find_max(self, node: Node) -> Node:
        while node.right is not None:
            node = node.right
        return node

    def __len__(self) -> int:
        return self._count

    def __contains__(self, value: T) -> bool:
        return self.contains(value)

    def __iter__(self) -> Iterator[T]:
        return iter_in_order(self._root)

    def __repr__(self) -> str:
        return f"BinaryTree({list(self)})"

    def __str__(self) -> str:
        return f"BinaryTree(count={self._count})"
