"""Problems over integer sequences: stairs, coins, water, duplicates, citations,
robbery, jumps, increasing subsequences and stock trading."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence


def climb_stairs(n: int) -> int:
    """Return the number of ways to climb ``n`` steps taking 1 or 2 at a time."""
    if n < 1:
        raise ValueError("there must be at least one step")
    previous, current = 1, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def coin_change(coins: Iterable[int], amount: int) -> int:
    """Return the fewest coins summing to ``amount``, or -1 if it cannot be made."""
    if amount < 0:
        raise ValueError("amount must not be negative")
    denominations = [coin for coin in set(coins) if coin > 0]
    unreachable = amount + 1
    fewest = [0] + [unreachable] * amount
    for total in range(1, amount + 1):
        fewest[total] = min(
            (fewest[total - coin] + 1 for coin in denominations if coin <= total),
            default=unreachable,
        )
    return -1 if fewest[amount] >= unreachable else fewest[amount]


def max_area(height: Sequence[int]) -> int:
    """Return the most water held between two lines of the given heights."""
    left, right = 0, len(height) - 1
    best = 0
    while left < right:
        lower = min(height[left], height[right])
        best = max(best, lower * (right - left))
        if height[left] < height[right]:
            left += 1
        else:
            right -= 1
    return best


def contains_nearby_duplicate(nums: Iterable[int], k: int) -> bool:
    """Return whether equal values occur at positions at most ``k`` apart."""
    last_seen: dict[int, int] = {}
    for position, value in enumerate(nums):
        previous = last_seen.get(value)
        if previous is not None and position - previous <= k:
            return True
        last_seen[value] = position
    return False


def h_index(citations: Iterable[int]) -> int:
    """Return the largest h such that h papers have at least h citations each."""
    ordered = sorted(citations, reverse=True)
    h = 0
    for rank, count in enumerate(ordered, start=1):
        if count < rank:
            break
        h = rank
    return h


def rob(nums: Sequence[int]) -> int:
    """Return the largest sum of values with no two taken from adjacent positions."""
    skip, take = 0, 0
    for value in nums:
        skip, take = max(skip, take), skip + value
    if not nums:
        return 0
    return max(skip, take)


def jump(nums: Sequence[int]) -> int:
    """Return the fewest jumps from the first position to the last.

    Each value is the longest jump allowed from its position.
    """
    last = len(nums) - 1
    if last <= 0:
        return 0
    jumps = 0
    window_end = 0
    farthest = 0
    for position, reach in enumerate(nums[:last]):
        if position > farthest:
            break
        farthest = max(farthest, position + reach)
        if position == window_end:
            jumps += 1
            window_end = farthest
            if window_end >= last:
                return jumps
    raise ValueError("the last position cannot be reached")


def length_of_lis(nums: Iterable[int]) -> int:
    """Return the length of the longest strictly increasing subsequence."""
    tails: list[int] = []
    for value in nums:
        slot = bisect_left(tails, value)
        if slot == len(tails):
            tails.append(value)
        else:
            tails[slot] = value
    return len(tails)


def max_profit(prices: Sequence[int]) -> int:
    """Total the profit of repeated trades chosen greedily.

    From the current day the most profitable single buy/sell pair in the
    remaining days is taken (the earliest sell day on ties), and the search
    resumes on the day after that sell. Stops when no trade makes a profit.
    """
    total = 0
    start = 0
    while start < len(prices):
        low = prices[start]
        best = 0
        best_sell = None
        for day, price in enumerate(prices[start + 1:], start + 1):
            if price > low:
                if price - low > best:
                    best, best_sell = price - low, day
            else:
                low = price
        if best_sell is None:
            break
        total += best
        start = best_sell + 1
    return total