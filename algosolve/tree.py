"""Binary tree nodes and construction from heap-style level-order lists."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class TreeNode:
    """A binary tree node; equality is identity so nodes can be compared by reference."""

    val: int = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def from_level_order(values: Sequence[Optional[int]]) -> Optional[TreeNode]:
    """Build a tree from a heap-layout list where ``None`` marks a missing slot.

    The children of the slot at position ``i`` are at ``2*i + 1`` and ``2*i + 2``.
    Returns the root, or ``None`` when the list is empty or its first slot is missing.
    """
    nodes = [None if value is None else TreeNode(value) for value in values]
    count = len(nodes)
    for position, node in enumerate(nodes):
        if node is None:
            continue
        left_pos, right_pos = 2 * position + 1, 2 * position + 2
        node.left = nodes[left_pos] if left_pos < count else None
        node.right = nodes[right_pos] if right_pos < count else None
    return nodes[0] if nodes else None