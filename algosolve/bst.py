"""In-order iteration and queries over binary search trees."""

from __future__ import annotations

from itertools import islice, pairwise
from typing import Optional

from algosolve.tree import TreeNode


class BSTIterator:
    """Iterate the values of a binary search tree in ascending (in-order) order.

    The tree is left unchanged.
    """

    def __init__(self, root: Optional[TreeNode]) -> None:
        self._stack: list[TreeNode] = []
        self._push_left_spine(root)

    def _push_left_spine(self, node: Optional[TreeNode]) -> None:
        while node is not None:
            self._stack.append(node)
            node = node.left

    def __iter__(self) -> "BSTIterator":
        return self

    def __next__(self) -> int:
        if not self._stack:
            raise StopIteration
        node = self._stack.pop()
        self._push_left_spine(node.right)
        return node.val

    def has_next(self) -> bool:
        """Return whether another value remains."""
        return bool(self._stack)


def kth_smallest(root: Optional[TreeNode], k: int) -> int:
    """Return the k-th smallest value (1-based) in the tree."""
    if k < 1:
        raise ValueError("k must be at least 1")
    missing = object()
    value = next(islice(BSTIterator(root), k - 1, None), missing)
    if value is missing:
        raise ValueError("k exceeds the number of nodes")
    return value


def minimum_difference(root: Optional[TreeNode]) -> int:
    """Return the smallest absolute difference between in-order neighbours."""
    values = list(BSTIterator(root))
    if len(values) < 2:
        raise ValueError("at least two nodes are required")
    return min(abs(b - a) for a, b in pairwise(values))