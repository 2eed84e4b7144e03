"""Small data structures: a stack with O(1) minimum, an LRU cache and a randomized set."""

from __future__ import annotations

import random
from collections import OrderedDict
from typing import Optional


class MinStack:
    """A stack that also reports its smallest element in constant time."""

    def __init__(self) -> None:
        self._items: list[tuple[int, int]] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, val: int) -> None:
        """Push ``val`` onto the stack."""
        minimum = min(val, self._items[-1][1]) if self._items else val
        self._items.append((val, minimum))

    def pop(self) -> None:
        """Remove the top element; popping an empty stack does nothing."""
        if self._items:
            self._items.pop()

    def top(self) -> int:
        """Return the top element."""
        if not self._items:
            raise IndexError("top of empty stack")
        return self._items[-1][0]

    def get_min(self) -> int:
        """Return the smallest element currently on the stack."""
        if not self._items:
            raise IndexError("minimum of empty stack")
        return self._items[-1][1]


class LRUCache:
    """A fixed-capacity key/value cache that evicts the least recently used entry."""

    MISSING = -1

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._entries: OrderedDict[int, int] = OrderedDict()

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, key: int) -> int:
        """Return the value for ``key`` and mark it recently used, or -1 if absent."""
        if key not in self._entries:
            return self.MISSING
        self._entries.move_to_end(key)
        return self._entries[key]

    def put(self, key: int, value: int) -> None:
        """Store ``value`` under ``key``, evicting the oldest entry when over capacity."""
        if key in self._entries:
            self._entries[key] = value
            self._entries.move_to_end(key)
            return
        self._entries[key] = value
        if len(self._entries) > self._capacity:
            self._entries.popitem(last=False)


class RandomizedSet:
    """A set with constant-time insert, remove and uniform random choice."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._elements: list[int] = []
        self._positions: dict[int, int] = {}

    def __len__(self) -> int:
        return len(self._elements)

    def __contains__(self, val: object) -> bool:
        return val in self._positions

    def insert(self, val: int) -> bool:
        """Add ``val``; return whether it was absent before."""
        if val in self._positions:
            return False
        self._positions[val] = len(self._elements)
        self._elements.append(val)
        return True

    def remove(self, val: int) -> bool:
        """Remove ``val``; return whether it was present."""
        position = self._positions.pop(val, None)
        if position is None:
            return False
        last = self._elements.pop()
        if last != val:
            self._elements[position] = last
            self._positions[last] = position
        return True

    def get_random(self) -> int:
        """Return an element chosen uniformly at random."""
        if not self._elements:
            raise IndexError("cannot choose from an empty set")
        return self._rng.choice(self._elements)