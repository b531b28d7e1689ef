"""Everyday array problems: duplicates, leaders, merging, missing values and reordering."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence


def duplicates(arr: Iterable[int]) -> list[int]:
    """Return each value that occurs more than once, in order of first appearance."""
    return [value for value, count in Counter(arr).items() if count > 1]


def find_duplicate(arr: Sequence[int]) -> int:
    """Return the repeated value in a sequence whose values index into it.

    Uses cycle detection, treating each value as a pointer to the next position.
    """
    values = list(arr)
    if not values:
        raise ValueError("array must not be empty")
    if any(not 0 <= value < len(values) for value in values):
        raise ValueError("every value must be a valid index into the array")

    slow = fast = values[0]
    while True:
        slow = values[slow]
        fast = values[values[fast]]
        if slow == fast:
            break

    slow = values[0]
    while slow != fast:
        slow = values[slow]
        fast = values[fast]
    return slow


def leaders(arr: Iterable[int]) -> list[int]:
    """Return the elements not smaller than any element to their right, in order."""
    result: list[int] = []
    highest: int | None = None
    for value in reversed(list(arr)):
        if highest is None or value >= highest:
            result.append(value)
            highest = value
    result.reverse()
    return result


def longest_consecutive(arr: Iterable[int]) -> int:
    """Return the length of the longest run of consecutive integers among the values."""
    values = set(arr)
    longest = 0
    for value in values:
        if value - 1 in values:
            continue
        end = value
        while end + 1 in values:
            end += 1
        longest = max(longest, end - value + 1)
    return longest


def merge_sorted(a: list[int], b: list[int]) -> None:
    """Merge two sorted lists in place, so that ``a`` then ``b`` reads in sorted order.

    The lists keep their lengths; the smallest values end up in ``a``.
    """
    m = len(a)
    total = m + len(b)

    def get(index: int) -> int:
        return a[index] if index < m else b[index - m]

    def put(index: int, value: int) -> None:
        if index < m:
            a[index] = value
        else:
            b[index - m] = value

    gap = (total + 1) // 2
    while gap > 0:
        for i in range(total - gap):
            j = i + gap
            left, right = get(i), get(j)
            if left > right:
                put(i, right)
                put(j, left)
        if gap == 1:
            break
        gap = (gap + 1) // 2


def merge_intervals(intervals: Iterable[Sequence[int]]) -> list[tuple[int, int]]:
    """Merge overlapping or touching ``(start, end)`` intervals, sorted by start."""
    merged: list[tuple[int, int]] = []
    for start, end in sorted((s, e) for s, e in intervals):
        if merged and merged[-1][1] >= start:
            last_start, last_end = merged[-1]
            merged[-1] = (last_start, max(last_end, end))
        else:
            merged.append((start, end))
    return merged


def missing_and_repeating(arr: Sequence[int]) -> tuple[int, int]:
    """Return ``(repeating, missing)`` for values meant to be ``1..n`` with one value replaced."""
    n = len(arr)
    expected_sum = n * (n + 1) // 2
    expected_squares = n * (n + 1) * (2 * n + 1) // 6
    actual_sum = sum(arr)
    actual_squares = sum(value * value for value in arr)

    diff = actual_sum - expected_sum  # repeating - missing
    if diff == 0:
        raise ValueError("no repeating and missing pair could be determined")
    total = (actual_squares - expected_squares) // diff  # repeating + missing
    repeating = (total + diff) // 2
    missing = total - repeating
    return repeating, missing


def missing_number(arr: Iterable[int]) -> int:
    """Return the one value of ``0..n`` absent from ``n`` distinct values."""
    values = list(arr)
    n = len(values)
    return n * (n + 1) // 2 - sum(values)


def missing_and_repeating_grid(grid: Sequence[Sequence[int]]) -> tuple[int, int]:
    """Return ``(repeating, missing)`` for a rectangular grid meant to hold ``1..rows*cols``."""
    if not grid:
        raise ValueError("grid must not be empty")
    width = len(grid[0])
    if any(len(row) != width for row in grid):
        raise ValueError("grid must be rectangular")
    return missing_and_repeating([value for row in grid for value in row])


def move_zeroes(arr: list[int]) -> None:
    """Move every zero to the end in place, keeping the other values in order."""
    index = 0
    for i, value in enumerate(arr):
        if value != 0:
            arr[i], arr[index] = arr[index], arr[i]
            index += 1


def sort_colours(arr: list[int]) -> None:
    """Sort a list of 0s, 1s and 2s in place in a single pass."""
    if any(value not in (0, 1, 2) for value in arr):
        raise ValueError("values must be 0, 1 or 2")
    low, mid, high = 0, 0, len(arr) - 1
    while mid <= high:
        value = arr[mid]
        if value == 0:
            arr[low], arr[mid] = arr[mid], arr[low]
            low += 1
            mid += 1
        elif value == 1:
            mid += 1
        else:
            arr[mid], arr[high] = arr[high], arr[mid]
            high -= 1


def next_permutation(arr: list[int]) -> list[int]:
    """Rearrange ``arr`` in place into the next permutation in lexicographic order.

    The last permutation wraps round to the first. The same list is returned.
    """
    n = len(arr)
    pivot = next((i - 1 for i in range(n - 1, 0, -1) if arr[i] > arr[i - 1]), None)
    if pivot is None:
        arr.reverse()
        return arr

    for i in range(n - 1, pivot, -1):
        if arr[i] > arr[pivot]:
            arr[i], arr[pivot] = arr[pivot], arr[i]
            break
    arr[pivot + 1:] = arr[pivot + 1:][::-1]
    return arr