import pytest

from algosolve.linked_lists import (
    ListNode,
    RandomListNode,
    add_two_numbers,
    build_random_list,
    copy_random_list,
    from_values,
    has_cycle,
    merge_two_lists,
    to_values,
)


def _digits_to_int(digits):
    return sum(d * 10**i for i, d in enumerate(digits))


def _nodes(head):
    result = []
    while head is not None:
        result.append(head)
        head = head.next
    return result


def _random_indices(head):
    nodes = _nodes(head)
    positions = {id(node): i for i, node in enumerate(nodes)}
    return [None if n.random is None else positions[id(n.random)] for n in nodes]


def test_from_values_round_trip():
    assert to_values(from_values([3, 1, 4, 1, 5])) == [3, 1, 4, 1, 5]


def test_empty_list():
    assert from_values([]) is None
    assert to_values(None) == []


def test_to_values_rejects_cycle():
    a = ListNode(1)
    b = ListNode(2, a)
    a.next = b
    with pytest.raises(ValueError):
        to_values(a)


def test_add_two_numbers_worked_example():
    result = add_two_numbers(from_values([2, 4, 3]), from_values([5, 6, 4]))
    assert to_values(result) == [7, 0, 8]


@pytest.mark.parametrize(
    "a, b",
    [
        ([0], [0]),
        ([9, 9, 9, 9, 9, 9, 9], [9, 9, 9, 9]),
        ([1], [9, 9]),
        ([5], [5]),
    ],
)
def test_add_two_numbers_matches_integer_sum(a, b):
    result = to_values(add_two_numbers(from_values(a), from_values(b)))
    assert _digits_to_int(result) == _digits_to_int(a) + _digits_to_int(b)
    assert all(0 <= d <= 9 for d in result)
    assert result[-1] != 0 or result == [0]


def test_add_two_numbers_empty_inputs():
    assert to_values(add_two_numbers(None, None)) == [0]


def test_merge_two_lists_sorted():
    merged = merge_two_lists(from_values([1, 2, 4]), from_values([1, 3, 4]))
    assert to_values(merged) == sorted([1, 2, 4, 1, 3, 4])


def test_merge_two_lists_empty():
    assert merge_two_lists(None, None) is None
    assert to_values(merge_two_lists(None, from_values([0]))) == [0]


def test_merge_reuses_nodes_and_is_stable():
    first = from_values([1, 2])
    second = from_values([1, 3])
    first_nodes = _nodes(first)
    second_nodes = _nodes(second)
    merged = _nodes(merge_two_lists(first, second))
    assert merged[0] is first_nodes[0]
    assert merged[1] is second_nodes[0]
    assert {id(n) for n in merged} == {id(n) for n in first_nodes + second_nodes}


def test_has_cycle_tail_to_second():
    head = from_values([3, 2, 0, -4])
    nodes = _nodes(head)
    nodes[-1].next = nodes[1]
    assert has_cycle(head) is True


def test_has_cycle_two_nodes():
    a = ListNode(1)
    b = ListNode(2, a)
    a.next = b
    assert has_cycle(a) is True


def test_has_cycle_self_loop():
    a = ListNode(1)
    a.next = a
    assert has_cycle(a) is True


def test_no_cycle():
    assert has_cycle(ListNode(1)) is False
    assert has_cycle(None) is False
    assert has_cycle(from_values([1, 2, 3, 4, 5])) is False


@pytest.mark.parametrize(
    "pairs",
    [
        [(7, None), (13, 0), (11, 4), (10, 2), (1, 0)],
        [(1, 1), (2, 1)],
        [(3, None), (3, 0), (3, None)],
    ],
)
def test_copy_random_list(pairs):
    head = build_random_list(pairs)
    copy = copy_random_list(head)
    assert to_values(copy) == [v for v, _ in pairs]
    assert _random_indices(copy) == [i for _, i in pairs]
    original_ids = {id(n) for n in _nodes(head)}
    assert all(id(n) not in original_ids for n in _nodes(copy))


def test_build_random_list_negative_index_means_none():
    head = build_random_list([(7, -1), (13, 0)])
    assert _random_indices(head) == [None, 0]


def test_build_random_list_rejects_bad_index():
    with pytest.raises(ValueError):
        build_random_list([(1, 5)])


def test_copy_random_list_empty():
    assert build_random_list([]) is None
    assert copy_random_list(None) is None


def test_copy_is_independent():
    head = build_random_list([(1, 1), (2, 0)])
    copy = copy_random_list(head)
    copy.val = 99
    assert head.val == 1
    assert isinstance(copy.random, RandomListNode)
    assert copy.random is copy.next