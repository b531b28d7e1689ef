"""Problems over contiguous subarrays: prefix sums, prefix XORs and sliding windows."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence


def max_profit(prices: Iterable[int]) -> int:
    """Return the best gain from one buy followed by one later sell, never below 0."""
    it = iter(prices)
    try:
        lowest = next(it)
    except StopIteration:
        raise ValueError("prices must not be empty") from None
    best = 0
    for price in it:
        best = max(best, price - lowest)
        lowest = min(lowest, price)
    return best


def count_subarrays_with_xor(arr: Iterable[int], k: int) -> int:
    """Count subarrays whose elements XOR to ``k``."""
    seen: Counter[int] = Counter({0: 1})
    acc = 0
    count = 0
    for value in arr:
        acc ^= value
        count += seen[acc ^ k]
        seen[acc] += 1
    return count


def subarray_with_sum_indices(arr: Sequence[int], k: int) -> tuple[int, int] | None:
    """Return 1-based ``(start, end)`` of the first window summing to ``k``, or None.

    The sliding window assumes non-negative elements.
    """
    values = list(arr)
    start = 0
    total = 0
    for end, value in enumerate(values):
        total += value
        while end >= start and total > k:
            total -= values[start]
            start += 1
        if total == k:
            return start + 1, end + 1
    return None


def longest_zero_sum_subarray(arr: Iterable[int]) -> int:
    """Return the length of the longest subarray summing to zero."""
    first_seen: dict[int, int] = {}
    total = 0
    best = 0
    for i, value in enumerate(arr):
        total += value
        if total == 0:
            best = i + 1
        elif total in first_seen:
            best = max(best, i - first_seen[total])
        else:
            first_seen[total] = i
    return best


def _remainder(total: int, k: int) -> int:
    """Remainder of truncating division, shifted by ``k`` when negative."""
    rem = abs(total) % abs(k)
    if total < 0:
        rem = -rem
    if rem < 0:
        rem += k
    return rem


def longest_subarray_divisible_by(arr: Iterable[int], k: int) -> int:
    """Return the length of the longest subarray whose sum is divisible by ``k``."""
    if k == 0:
        raise ValueError("k must not be zero")
    first_seen: dict[int, int] = {0: -1}
    total = 0
    best = 0
    for i, value in enumerate(arr):
        total += value
        rem = _remainder(total, k)
        if rem in first_seen:
            best = max(best, i - first_seen[rem])
        else:
            first_seen[rem] = i
    return best


def min_subarray_length(arr: Sequence[int], k: int) -> int:
    """Return the length of the shortest window with sum at least ``k``, or 0 if none.

    The sliding window assumes non-negative elements.
    """
    if k <= 0:
        raise ValueError("k must be positive")
    values = list(arr)
    start = 0
    total = 0
    best: int | None = None
    for end, value in enumerate(values):
        total += value
        while total >= k:
            length = end - start + 1
            best = length if best is None else min(best, length)
            total -= values[start]
            start += 1
    return best or 0


def has_zero_sum_subarray(arr: Iterable[int]) -> bool:
    """Tell whether some non-empty subarray sums to zero."""
    seen = {0}
    total = 0
    for value in arr:
        total += value
        if total in seen:
            return True
        seen.add(total)
    return False


def count_subarrays_with_sum(arr: Iterable[int], k: int) -> int:
    """Count subarrays whose elements sum to ``k``."""
    seen: Counter[int] = Counter({0: 1})
    total = 0
    count = 0
    for value in arr:
        total += value
        count += seen[total - k]
        seen[total] += 1
    return count


def longest_subarray_with_sum(arr: Iterable[int], k: int) -> int:
    """Return the length of the longest subarray summing to ``k``."""
    first_seen: dict[int, int] = {}
    total = 0
    best = 0
    for i, value in enumerate(arr):
        total += value
        if total == k:
            best = i + 1
        if total - k in first_seen:
            best = max(best, i - first_seen[total - k])
        first_seen.setdefault(total, i)
    return best


def max_subarray(arr: Iterable[int]) -> tuple[int, list[int]]:
    """Return the largest subarray sum and the first subarray reaching it."""
    values = list(arr)
    if not values:
        raise ValueError("array must not be empty")
    current = 0
    best: int | None = None
    start = 0
    span = (0, 0)
    for i, value in enumerate(values):
        current += value
        if best is None or current > best:
            best = current
            span = (start, i + 1)
        if current < 0:
            current = 0
            start = i + 1
    assert best is not None
    return best, values[span[0]:span[1]]