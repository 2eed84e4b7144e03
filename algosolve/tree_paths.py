"""Path questions on binary trees: maximum path sum and lowest common ancestor."""

from __future__ import annotations

from typing import Optional

from algosolve.tree import TreeNode


def max_path_sum(root: Optional[TreeNode]) -> int:
    """Return the largest sum along any non-empty path between two nodes."""
    if root is None:
        raise ValueError("the tree must not be empty")
    order: list[TreeNode] = []
    stack = [root]
    while stack:
        node = stack.pop()
        order.append(node)
        stack.extend(child for child in (node.left, node.right) if child)

    gains: dict[TreeNode, int] = {}
    best = root.val
    for node in reversed(order):
        left = max(gains[node.left], 0) if node.left else 0
        right = max(gains[node.right], 0) if node.right else 0
        best = max(best, node.val + left + right)
        gains[node] = node.val + max(left, right)
    return best


def _path_to(
    target: TreeNode, parents: dict[TreeNode, Optional[TreeNode]]
) -> Optional[list[TreeNode]]:
    if target not in parents:
        return None
    path: list[TreeNode] = []
    node: Optional[TreeNode] = target
    while node is not None:
        path.append(node)
        node = parents[node]
    path.reverse()
    return path


def lowest_common_ancestor(
    root: Optional[TreeNode], p: TreeNode, q: TreeNode
) -> Optional[TreeNode]:
    """Return the deepest node having both ``p`` and ``q`` as descendants.

    A node counts as its own descendant. Returns ``None`` when either node
    is not in the tree.
    """
    if root is None:
        return None
    parents: dict[TreeNode, Optional[TreeNode]] = {root: None}
    stack = [root]
    while stack and not (p in parents and q in parents):
        node = stack.pop()
        for child in (node.left, node.right):
            if child is not None:
                parents[child] = node
                stack.append(child)

    path_p = _path_to(p, parents)
    path_q = _path_to(q, parents)
    if path_p is None or path_q is None:
        return None
    ancestor = root
    for a, b in zip(path_p, path_q):
        if a is not b:
            break
        ancestor = a
    return ancestor