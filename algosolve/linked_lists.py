"""Singly linked lists: construction, arithmetic, merging, cycle detection and deep copy."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional, Union


@dataclass(eq=False)
class ListNode:
    """A singly linked list node; equality is identity."""

    val: int = 0
    next: Optional["ListNode"] = None


@dataclass(eq=False)
class RandomListNode:
    """A list node carrying an extra pointer to any node of the same list, or ``None``."""

    val: int = 0
    next: Optional["RandomListNode"] = None
    random: Optional["RandomListNode"] = None


_AnyNode = Union[ListNode, RandomListNode]


def _iter_nodes(head: Optional[_AnyNode]) -> Iterator[_AnyNode]:
    """Yield the nodes of a list, raising ``ValueError`` if it loops back on itself."""
    seen: set[int] = set()
    node = head
    while node is not None:
        if id(node) in seen:
            raise ValueError("the list contains a cycle")
        seen.add(id(node))
        yield node
        node = node.next


def from_values(values: Iterable[int]) -> Optional[ListNode]:
    """Build a list holding ``values`` in order; an empty input gives ``None``."""
    dummy = ListNode()
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def to_values(head: Optional[_AnyNode]) -> list[int]:
    """Return the values of a list in order."""
    return [node.val for node in _iter_nodes(head)]


def add_two_numbers(l1: Optional[ListNode], l2: Optional[ListNode]) -> ListNode:
    """Add two numbers stored as lists of decimal digits, least significant first.

    The result is a new list in the same form; two empty inputs give a single zero digit.
    """
    digits: list[int] = []
    carry = 0
    a, b = l1, l2
    while a is not None or b is not None or carry:
        total = (a.val if a else 0) + (b.val if b else 0) + carry
        carry, digit = divmod(total, 10)
        digits.append(digit)
        a = a.next if a else None
        b = b.next if b else None
    head = from_values(digits or [0])
    assert head is not None
    return head


def merge_two_lists(list1: Optional[ListNode], list2: Optional[ListNode]) -> Optional[ListNode]:
    """Splice two sorted lists into one sorted list, taking from ``list1`` first on ties."""
    dummy = ListNode()
    tail = dummy
    while list1 is not None and list2 is not None:
        if list1.val <= list2.val:
            tail.next, list1 = list1, list1.next
        else:
            tail.next, list2 = list2, list2.next
        tail = tail.next
    tail.next = list1 if list1 is not None else list2
    return dummy.next


def has_cycle(head: Optional[_AnyNode]) -> bool:
    """Return whether following ``next`` from ``head`` ever revisits a node."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def build_random_list(pairs: Iterable[tuple[int, Optional[int]]]) -> Optional[RandomListNode]:
    """Build a list from ``(value, random_index)`` pairs.

    ``random_index`` is the position of the node the random pointer targets;
    ``None`` or a negative index leaves it empty.
    """
    entries = list(pairs)
    nodes = [RandomListNode(value) for value, _ in entries]
    for node, following in zip(nodes, nodes[1:]):
        node.next = following
    for node, (_, index) in zip(nodes, entries):
        if index is None or index < 0:
            node.random = None
        elif index >= len(nodes):
            raise ValueError(f"random index {index} is outside the list")
        else:
            node.random = nodes[index]
    return nodes[0] if nodes else None


def copy_random_list(head: Optional[RandomListNode]) -> Optional[RandomListNode]:
    """Return a deep copy of a list whose nodes also carry random pointers."""
    clones = {id(node): RandomListNode(node.val) for node in _iter_nodes(head)}
    for node in _iter_nodes(head):
        clone = clones[id(node)]
        clone.next = clones[id(node.next)] if node.next is not None else None
        clone.random = clones[id(node.random)] if node.random is not None else None
    return clones[id(head)] if head is not None else None