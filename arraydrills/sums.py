"""Pair, triplet and quadruplet sum problems over integer sequences."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence


def three_sum(nums: Iterable[int]) -> list[tuple[int, int, int]]:
    """Return every distinct value triplet summing to zero, each in ascending order."""
    values = sorted(nums)
    n = len(values)
    result: list[tuple[int, int, int]] = []

    for i, first in enumerate(values):
        if i > 0 and first == values[i - 1]:
            continue
        lo, hi = i + 1, n - 1
        while lo < hi:
            total = first + values[lo] + values[hi]
            if total > 0:
                hi -= 1
            elif total < 0:
                lo += 1
            else:
                result.append((first, values[lo], values[hi]))
                lo += 1
                hi -= 1
                while lo < hi and values[lo] == values[lo - 1]:
                    lo += 1
                while lo < hi and values[hi] == values[hi + 1]:
                    hi -= 1
    return result


def three_sum_closest(nums: Iterable[int], target: int) -> int:
    """Return the triplet sum closest to ``target``; 0 when there are fewer than three values."""
    values = sorted(nums)
    best = 0
    best_diff: int | None = None

    for i, first in enumerate(values):
        lo, hi = i + 1, len(values) - 1
        while lo < hi:
            total = first + values[lo] + values[hi]
            if total == target:
                return total
            diff = abs(total - target)
            if best_diff is None or diff < best_diff:
                best, best_diff = total, diff
            if total < target:
                lo += 1
            else:
                hi -= 1
    return best


def four_sum(nums: Iterable[int], target: int) -> list[tuple[int, int, int, int]]:
    """Return every distinct value quadruplet summing to ``target``, each in ascending order."""
    values = sorted(nums)
    n = len(values)
    result: list[tuple[int, int, int, int]] = []
    if n < 4:
        return result

    for i in range(n - 3):
        if i > 0 and values[i] == values[i - 1]:
            continue
        for j in range(i + 1, n - 2):
            if j > i + 1 and values[j] == values[j - 1]:
                continue
            lo, hi = j + 1, n - 1
            while lo < hi:
                total = values[i] + values[j] + values[lo] + values[hi]
                if total == target:
                    result.append((values[i], values[j], values[lo], values[hi]))
                    while lo < hi and values[lo] == values[lo + 1]:
                        lo += 1
                    while lo < hi and values[hi] == values[hi - 1]:
                        hi -= 1
                    lo += 1
                    hi -= 1
                elif total < target:
                    lo += 1
                else:
                    hi -= 1
    return result


def four_sum_count(
    nums1: Iterable[int],
    nums2: Iterable[int],
    nums3: Iterable[int],
    nums4: Sequence[int],
) -> int:
    """Count picks of one element from each sequence whose sum is zero."""
    nums2 = list(nums2)
    nums4 = list(nums4)
    pair_sums = Counter(a + b for a in nums1 for b in nums2)
    return sum(pair_sums[-(c + d)] for c in nums3 for d in nums4)


def count_quadruples(arr: Sequence[int], target: int) -> int:
    """Count index quadruples ``a < b < c < d`` whose values sum to ``target``."""
    values = list(arr)
    pair_sums: Counter[int] = Counter()
    count = 0

    for i, value in enumerate(values):
        for later in values[i + 1:]:
            count += pair_sums[target - (value + later)]
        for earlier in values[:i]:
            pair_sums[value + earlier] += 1
    return count


def zero_sum_triplet_indices(arr: Sequence[int]) -> list[tuple[int, int, int]]:
    """Return sorted index triplets whose values sum to zero.

    For each position, the third index is the latest earlier position holding
    the needed value.
    """
    values = list(arr)
    found: set[tuple[int, int, int]] = set()
    last_index: dict[int, int] = {}

    for i, value in enumerate(values):
        for j, other in enumerate(values):
            k = last_index.get(-(value + other))
            if k is not None and len({i, j, k}) == 3:
                found.add(tuple(sorted((i, j, k))))
        last_index[value] = i
    return sorted(found)


def has_triplet_sum(arr: Iterable[int], target: int) -> bool:
    """Tell whether any three elements sum to ``target``."""
    values = sorted(arr)
    for i, first in enumerate(values):
        lo, hi = i + 1, len(values) - 1
        while lo < hi:
            total = first + values[lo] + values[hi]
            if total == target:
                return True
            if total < target:
                lo += 1
            else:
                hi -= 1
    return False


def two_sum(arr: Iterable[int], target: int) -> tuple[int, int] | None:
    """Return indices ``(i, j)``, ``i < j``, of two elements summing to ``target``, or None."""
    seen: dict[int, int] = {}
    for index, value in enumerate(arr):
        partner = seen.get(target - value)
        if partner is not None:
            return partner, index
        seen[value] = index
    return None