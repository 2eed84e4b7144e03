import pytest

from algosolve.bst import BSTIterator, kth_smallest, minimum_difference
from algosolve.tree import from_level_order
from algosolve.tree_traversal import level_order


def _values(level):
    return [v for v in level if v is not None]


def test_iterator_yields_sorted_values():
    layout = [7, 3, 15, None, None, 9, 20]
    assert list(BSTIterator(from_level_order(layout))) == sorted(_values(layout))


def test_iterator_has_next_and_exhaustion():
    it = BSTIterator(from_level_order([1, None, 2]))
    assert it.has_next() is True
    assert next(it) == 1
    assert next(it) == 2
    assert it.has_next() is False
    with pytest.raises(StopIteration):
        next(it)


def test_iterator_over_empty_tree():
    it = BSTIterator(None)
    assert it.has_next() is False
    assert list(it) == []


def test_iterator_leaves_tree_intact():
    layout = [7, 3, 15, None, None, 9, 20]
    root = from_level_order(layout)
    before = level_order(root)
    list(BSTIterator(root))
    assert level_order(root) == before


@pytest.mark.parametrize(
    "layout, k",
    [
        ([3, 1, 4, None, 2], 1),
        ([5, 3, 6, 2, 4, None, None, 1], 3),
    ],
)
def test_kth_smallest_source_cases(layout, k):
    assert kth_smallest(from_level_order(layout), k) == sorted(_values(layout))[k - 1]


def test_kth_smallest_every_rank():
    layout = [5, 3, 6, 2, 4, None, None, 1]
    root = from_level_order(layout)
    ordered = sorted(_values(layout))
    assert [kth_smallest(root, k) for k in range(1, len(ordered) + 1)] == ordered


@pytest.mark.parametrize("k", [0, 5])
def test_kth_smallest_out_of_range(k):
    with pytest.raises(ValueError):
        kth_smallest(from_level_order([3, 1, 4, None, 2]), k)


@pytest.mark.parametrize(
    "layout",
    [
        [4, 2, 6, 1, 3],
        [1, 0, 48, None, None, 12, 49],
    ],
)
def test_minimum_difference_source_cases(layout):
    assert minimum_difference(from_level_order(layout)) == 1


def test_minimum_difference_two_nodes():
    assert minimum_difference(from_level_order([10, 4])) == 10 - 4


def test_minimum_difference_needs_two_nodes():
    with pytest.raises(ValueError):
        minimum_difference(from_level_order([5]))