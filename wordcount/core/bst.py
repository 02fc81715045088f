# bst.py
# Unbalanced binary search tree used as a word counter.
# Insertion walks down iteratively (no recursion) so sorted input, which
# degenerates the tree into a chain, cannot blow the interpreter stack.

from __future__ import annotations
from typing import Generic, Iterator, List, Optional, TypeVar

from wordcount.core.data_count import DataCount

K = TypeVar("K")


class BSTNode(Generic[K]):
    """
    A single node of the tree.
    key/count: the counted item and its multiplicity
    left/right: exclusively owned child subtrees (None when absent)
    """

    __slots__ = ("key", "count", "left", "right")

    def __init__(self, key: K) -> None:
        self.key = key
        self.count = 1
        self.left: Optional[BSTNode[K]] = None
        self.right: Optional[BSTNode[K]] = None


class BinarySearchTree(Generic[K]):
    """Binary search tree keyed by a total order on K. No rebalancing."""

    def __init__(self) -> None:
        self.root: Optional[BSTNode[K]] = None
        self._size = 0

    # insertion -----------------------------------------------------------------
    def inc_count(self, key: K) -> None:
        """Increment key's count, adding a leaf with count 1 if it is new."""
        if key is None:
            raise TypeError("key must not be None")

        if self.root is None:
            self.root = BSTNode(key)
            self._size = 1
            return

        node = self.root
        while True:
            if key == node.key:
                node.count += 1
                return
            if key < node.key:
                if node.left is None:
                    node.left = BSTNode(key)
                    self._size += 1
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = BSTNode(key)
                    self._size += 1
                    return
                node = node.right

    # query ---------------------------------------------------------------------
    def get_counts(self) -> List[DataCount[K]]:
        """All entries in key order (in-order walk)."""
        return [DataCount(n.key, n.count) for n in self._inorder()]

    def get(self, key: K) -> int:
        """Count for key, 0 if never inserted."""
        node = self.root
        while node is not None:
            if key == node.key:
                return node.count
            node = node.left if key < node.key else node.right
        return 0

    def height(self) -> int:
        """Height of the tree; an empty tree has height -1."""
        if self.root is None:
            return -1
        best = 0
        stack = [(self.root, 0)]
        while stack:
            node, depth = stack.pop()
            if depth > best:
                best = depth
            for child in (node.left, node.right):
                if child is not None:
                    stack.append((child, depth + 1))
        return best

    # utilities -----------------------------------------------------------------
    def _inorder(self) -> Iterator[BSTNode[K]]:
        stack: List[BSTNode[K]] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node
            node = node.right

    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: K) -> bool:
        return self.get(key) > 0
