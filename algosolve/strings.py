"""String problems: binary addition, Roman numerals, prefixes, windows and isomorphism."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

_ROMAN = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)


def add_binary(a: str, b: str) -> str:
    """Return the sum of two binary strings as a binary string without leading zeros."""
    for operand in (a, b):
        if not set(operand) <= {"0", "1"}:
            raise ValueError(f"not a binary string: {operand!r}")
    return format(int(a or "0", 2) + int(b or "0", 2), "b")


def int_to_roman(num: int) -> str:
    """Write a non-negative integer in Roman numerals; thousands repeat 'M'."""
    if num < 0:
        raise ValueError("Roman numerals need a non-negative number")
    parts: list[str] = []
    for value, symbol in _ROMAN:
        count, num = divmod(num, value)
        parts.append(symbol * count)
    return "".join(parts)


def length_of_last_word(s: str) -> int:
    """Return the length of the last space-separated word, or 0 if there is none."""
    return len(s.rstrip(" ").rsplit(" ", 1)[-1])


def longest_common_prefix(strs: Sequence[str]) -> str:
    """Return the longest prefix shared by all strings."""
    prefix: list[str] = []
    for chars in zip(*strs):
        if any(ch != chars[0] for ch in chars):
            break
        prefix.append(chars[0])
    return "".join(prefix)


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest substring without repeated characters."""
    last_seen: dict[str, int] = {}
    start = 0
    best = 0
    for position, ch in enumerate(s):
        if last_seen.get(ch, -1) >= start:
            start = last_seen[ch] + 1
        last_seen[ch] = position
        best = max(best, position - start + 1)
    return best


def min_window(s: str, t: str) -> str:
    """Return the shortest substring of ``s`` containing every character of ``t``.

    Characters count with multiplicity; the earliest shortest window wins.
    Returns an empty string when no window exists.
    """
    if not t or len(s) < len(t):
        return ""
    needed = Counter(t)
    missing = len(t)
    start = 0
    best_start, best_len = 0, 0
    for end, ch in enumerate(s):
        if needed[ch] > 0:
            missing -= 1
        needed[ch] -= 1
        if missing:
            continue
        while needed[s[start]] < 0:
            needed[s[start]] += 1
            start += 1
        length = end - start + 1
        if best_len == 0 or length < best_len:
            best_start, best_len = start, length
        needed[s[start]] += 1
        missing += 1
        start += 1
    return s[best_start:best_start + best_len]


def is_isomorphic(s: str, t: str) -> bool:
    """Return whether a one-to-one character mapping turns ``s`` into ``t``."""
    if len(s) != len(t):
        return False
    return len(set(zip(s, t))) == len(set(s)) == len(set(t))