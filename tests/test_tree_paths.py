import pytest

from algosolve.tree import TreeNode, from_level_order
from algosolve.tree_paths import lowest_common_ancestor, max_path_sum
from algosolve.tree_traversal import level_order


def test_max_path_sum_through_all_positive_nodes():
    layout = [1, 2, 3]
    assert max_path_sum(from_level_order(layout)) == sum(layout)


def test_max_path_sum_classic_case():
    assert max_path_sum(from_level_order([-10, 9, 20, None, None, 15, 7])) == 42


def test_max_path_sum_single_negative_node():
    assert max_path_sum(from_level_order([-3])) == -3


def test_max_path_sum_skips_negative_child():
    assert max_path_sum(from_level_order([2, -1])) == 2


def test_max_path_sum_mixed_signs():
    layout = [1, -2, -3, 1, 3, -2, None, -1]
    assert max_path_sum(from_level_order(layout)) == 3


def test_max_path_sum_all_negative_is_largest_value():
    layout = [-5, -2, -8, -7, -4]
    assert max_path_sum(from_level_order(layout)) == max(layout)


def test_max_path_sum_leaves_tree_intact():
    root = from_level_order([-10, 9, 20, None, None, 15, 7])
    before = level_order(root)
    max_path_sum(root)
    assert level_order(root) == before


def test_max_path_sum_empty_tree_raises():
    with pytest.raises(ValueError):
        max_path_sum(None)


@pytest.fixture
def sample_tree():
    return from_level_order([3, 5, 1, 6, 2, 0, 8, None, None, 7, 4])


def test_lca_on_opposite_sides_is_root(sample_tree):
    p, q = sample_tree.left, sample_tree.right
    assert lowest_common_ancestor(sample_tree, p, q) is sample_tree


def test_lca_when_one_node_descends_from_other(sample_tree):
    p = sample_tree.left
    q = sample_tree.left.right.right
    assert lowest_common_ancestor(sample_tree, p, q) is p
    assert lowest_common_ancestor(sample_tree, q, p) is p


def test_lca_root_and_left_child():
    root = from_level_order([1, 2])
    assert lowest_common_ancestor(root, root, root.left) is root


def test_lca_root_and_right_child():
    root = from_level_order([2, None, 1])
    assert lowest_common_ancestor(root, root, root.right) is root


def test_lca_deep_nodes(sample_tree):
    p = sample_tree.left.left
    q = sample_tree.left.right.left
    assert lowest_common_ancestor(sample_tree, p, q) is sample_tree.left


def test_lca_missing_node_gives_none(sample_tree):
    stranger = TreeNode(5)
    assert lowest_common_ancestor(sample_tree, sample_tree.left, stranger) is None


def test_lca_leaves_tree_intact(sample_tree):
    before = level_order(sample_tree)
    lowest_common_ancestor(sample_tree, sample_tree.left, sample_tree.right)
    assert level_order(sample_tree) == before