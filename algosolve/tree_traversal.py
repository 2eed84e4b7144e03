"""Traversals, measurements and in-place transformations of binary trees."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Optional

from algosolve.tree import TreeNode


def _levels(root: Optional[TreeNode]) -> Iterator[list[TreeNode]]:
    """Yield the nodes of each level, left to right."""
    if root is None:
        return
    level = [root]
    while level:
        yield level
        level = [child for node in level for child in (node.left, node.right) if child]


def average_of_levels(root: Optional[TreeNode]) -> list[float]:
    """Return the mean node value of each level, top to bottom."""
    return [sum(node.val for node in level) / len(level) for level in _levels(root)]


def level_order(root: Optional[TreeNode]) -> list[list[int]]:
    """Return node values grouped by level, each level left to right."""
    return [[node.val for node in level] for level in _levels(root)]


def zigzag_level_order(root: Optional[TreeNode]) -> list[list[int]]:
    """Return values by level, alternating left-to-right and right-to-left."""
    return [
        values[::-1] if depth % 2 else values
        for depth, values in enumerate(level_order(root))
    ]


def right_side_view(root: Optional[TreeNode]) -> list[int]:
    """Return the rightmost value of each level."""
    return [level[-1].val for level in _levels(root)]


def count_nodes(root: Optional[TreeNode]) -> int:
    """Return the number of nodes in the tree."""
    return sum(len(level) for level in _levels(root))


def max_depth(root: Optional[TreeNode]) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    return sum(1 for _ in _levels(root))


def invert_tree(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Mirror the tree in place and return its root."""
    pending = deque([root] if root else [])
    while pending:
        node = pending.pop()
        node.left, node.right = node.right, node.left
        pending.extend(child for child in (node.left, node.right) if child)
    return root


def flatten(root: Optional[TreeNode]) -> None:
    """Rewire the tree in place into a right-linked chain in preorder."""
    if root is None:
        return
    stack = [root]
    while stack:
        node = stack.pop()
        if node.right:
            stack.append(node.right)
        if node.left:
            stack.append(node.left)
        if stack:
            node.right = stack[-1]
            node.left = None