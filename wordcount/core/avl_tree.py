# avl_tree.py
# Height-balanced binary search tree (AVL) used as a word counter.
# Every node stores its height; an absent child counts as height -1, so a
# leaf has height 0. After each insert the balance factor
# height(left) - height(right) of every node is in {-1, 0, 1}.

from __future__ import annotations
from typing import Optional, TypeVar
import logging

from wordcount.core.bst import BinarySearchTree, BSTNode

logger = logging.getLogger(__name__)

K = TypeVar("K")


class AVLNode(BSTNode[K]):
    """BST node plus the height of the subtree rooted here."""

    __slots__ = ("height",)

    def __init__(self, key: K) -> None:
        super().__init__(key)
        self.height = 0


def _height(node: Optional[AVLNode]) -> int:
    return node.height if node is not None else -1


def _update_height(node: AVLNode) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _balance(node: AVLNode) -> int:
    return _height(node.left) - _height(node.right)


class AVLTree(BinarySearchTree[K]):
    """
    AVL tree with the same counting contract as BinarySearchTree.
    Lookups, traversal and sizing are inherited; only insertion differs:
    heights are recomputed on the way back up and any node whose balance
    reaches +2/-2 is fixed with a single or double rotation.
    Equal keys only bump the count and never rotate.
    """

    def inc_count(self, key: K) -> None:
        if key is None:
            raise TypeError("key must not be None")
        self.root = self._insert(self.root, key)

    def height(self) -> int:
        return _height(self.root)

    # insertion -----------------------------------------------------------------
    def _insert(self, node: Optional[AVLNode[K]], key: K) -> AVLNode[K]:
        if node is None:
            self._size += 1
            return AVLNode(key)

        if key == node.key:
            node.count += 1
            return node

        if key < node.key:
            node.left = self._insert(node.left, key)
        else:
            node.right = self._insert(node.right, key)

        _update_height(node)
        return self._rebalance(node)

    def _rebalance(self, node: AVLNode[K]) -> AVLNode[K]:
        bf = _balance(node)
        if bf > 1:
            if _balance(node.left) < 0:
                # left-right case
                node.left = self._rotate_left(node.left)
            return self._rotate_right(node)
        if bf < -1:
            if _balance(node.right) > 0:
                # right-left case
                node.right = self._rotate_right(node.right)
            return self._rotate_left(node)
        return node

    # rotations -----------------------------------------------------------------
    @staticmethod
    def _rotate_right(node: AVLNode[K]) -> AVLNode[K]:
        """
        Left child becomes the subtree root; its right subtree (the inner
        grandchild) is re-parented as node's left child.
        """
        pivot = node.left
        node.left = pivot.right
        pivot.right = node
        _update_height(node)
        _update_height(pivot)
        logger.debug("rotate right at %r", node.key)
        return pivot

    @staticmethod
    def _rotate_left(node: AVLNode[K]) -> AVLNode[K]:
        """Mirror image of _rotate_right."""
        pivot = node.right
        node.right = pivot.left
        pivot.left = node
        _update_height(node)
        _update_height(pivot)
        logger.debug("rotate left at %r", node.key)
        return pivot
