"""Grouping of words that are anagrams of one another."""

from __future__ import annotations

from collections.abc import Iterable


def group_anagrams(strs: Iterable[str]) -> list[list[str]]:
    """Group strings made of the same letters.

    Groups appear in the order of their first member in ``strs``.
    Members keep their input order.
    """
    groups: dict[str, list[str]] = {}
    for word in strs:
        groups.setdefault("".join(sorted(word)), []).append(word)
    return list(groups.values())