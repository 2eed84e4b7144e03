"""Reconstruction of binary trees from pairs of traversal orders."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional

from algosolve.tree import TreeNode


def _check_traversals(order: Sequence[int], inorder: Sequence[int]) -> None:
    if len(order) != len(inorder):
        raise ValueError("traversals must have the same length")
    if len(set(inorder)) != len(inorder):
        raise ValueError("node values must be unique")
    if set(order) != set(inorder):
        raise ValueError("traversals must hold the same values")


def _build(order: Sequence[int], inorder: Sequence[int], first: str, second: str) -> Optional[TreeNode]:
    """Build a tree from a root-first order and the matching inorder sequence.

    ``first`` names the child that follows a node directly in ``order``;
    ``second`` names the child reached once ``inorder`` catches up.
    """
    _check_traversals(order, inorder)
    if not order:
        return None
    root = TreeNode(order[0])
    stack = [root]
    position = 0
    for value in order[1:]:
        node = stack[-1]
        child = TreeNode(value)
        if node.val != inorder[position]:
            setattr(node, first, child)
        else:
            while stack and stack[-1].val == inorder[position]:
                node = stack.pop()
                position += 1
            setattr(node, second, child)
        stack.append(child)
    return root


def build_tree_from_preorder_inorder(
    preorder: Sequence[int], inorder: Sequence[int]
) -> Optional[TreeNode]:
    """Rebuild a tree with unique values from its preorder and inorder traversals."""
    return _build(list(preorder), list(inorder), "left", "right")


def build_tree_from_inorder_postorder(
    inorder: Sequence[int], postorder: Sequence[int]
) -> Optional[TreeNode]:
    """Rebuild a tree with unique values from its inorder and postorder traversals."""
    return _build(list(reversed(postorder)), list(reversed(inorder)), "right", "left")