import pytest
from hypothesis import given
from hypothesis import strategies as st

from arraydrills.subarrays import (
    count_subarrays_with_sum,
    count_subarrays_with_xor,
    has_zero_sum_subarray,
    longest_subarray_divisible_by,
    longest_subarray_with_sum,
    longest_zero_sum_subarray,
    max_profit,
    max_subarray,
    min_subarray_length,
    subarray_with_sum_indices,
)

ints = st.lists(st.integers(-20, 20), max_size=25)
nonempty_ints = st.lists(st.integers(-20, 20), min_size=1, max_size=25)
positives = st.lists(st.integers(1, 20), min_size=1, max_size=25)


def test_max_profit_example():
    assert max_profit([7, 1, 5, 3, 6, 4]) == 5


@given(st.lists(st.integers(0, 100), min_size=1, max_size=20))
def test_max_profit_sorted_ascending(prices):
    prices.sort()
    assert max_profit(prices) == prices[-1] - prices[0]


@given(st.lists(st.integers(0, 100), min_size=1, max_size=20))
def test_max_profit_descending_is_zero(prices):
    prices.sort(reverse=True)
    assert max_profit(prices) == 0


@given(st.lists(st.integers(0, 100), min_size=1, max_size=15))
def test_max_profit_bounds_every_pair(prices):
    best = max_profit(prices)
    assert best >= 0
    for i, low in enumerate(prices):
        for high in prices[i + 1:]:
            assert best >= high - low


def test_max_profit_empty_raises():
    with pytest.raises(ValueError):
        max_profit([])


@given(st.lists(st.integers(0, 15), max_size=20))
def test_xor_counts_partition_all_subarrays(arr):
    n = len(arr)
    assert sum(count_subarrays_with_xor(arr, k) for k in range(16)) == n * (n + 1) // 2


@given(st.lists(st.integers(0, 15), min_size=1, max_size=20))
def test_xor_of_whole_array_is_counted(arr):
    total = 0
    for value in arr:
        total ^= value
    assert count_subarrays_with_xor(arr, total) >= 1


@given(st.lists(st.integers(-3, 3), max_size=15))
def test_sum_counts_partition_all_subarrays(arr):
    n = len(arr)
    bound = 3 * n
    counted = sum(count_subarrays_with_sum(arr, k) for k in range(-bound, bound + 1))
    assert counted == n * (n + 1) // 2


@given(positives, st.data())
def test_subarray_with_sum_indices_finds_window(arr, data):
    a = data.draw(st.integers(0, len(arr) - 1))
    b = data.draw(st.integers(a + 1, len(arr)))
    k = sum(arr[a:b])
    found = subarray_with_sum_indices(arr, k)
    assert found is not None
    start, end = found
    assert 1 <= start <= end <= len(arr)
    assert sum(arr[start - 1:end]) == k


@given(positives)
def test_subarray_with_sum_indices_too_large(arr):
    assert subarray_with_sum_indices(arr, sum(arr) + 1) is None


@given(ints)
def test_longest_zero_sum_whole_balanced_array(arr):
    balanced = arr + [-sum(arr)]
    assert longest_zero_sum_subarray(balanced) == len(balanced)


@given(positives)
def test_longest_zero_sum_positive_is_zero(arr):
    assert longest_zero_sum_subarray(arr) == 0


@given(ints)
def test_longest_divisible_by_one_is_whole_array(arr):
    assert longest_subarray_divisible_by(arr, 1) == len(arr)


@given(nonempty_ints, st.integers(1, 7))
def test_longest_divisible_has_a_witness(arr, k):
    length = longest_subarray_divisible_by(arr, k)
    assert 0 <= length <= len(arr)
    if length:
        windows = [sum(arr[i:i + length]) for i in range(len(arr) - length + 1)]
        assert any(total % k == 0 for total in windows)
    longer = [
        sum(arr[i:i + size])
        for size in range(length + 1, len(arr) + 1)
        for i in range(len(arr) - size + 1)
    ]
    assert all(total % k != 0 for total in longer)


def test_longest_divisible_zero_k_raises():
    with pytest.raises(ValueError):
        longest_subarray_divisible_by([1, 2], 0)


@given(positives, st.integers(1, 200))
def test_min_subarray_length_is_minimal(arr, k):
    length = min_subarray_length(arr, k)
    if sum(arr) < k:
        assert length == 0
        return_value_checked = True
    else:
        assert 1 <= length <= len(arr)
        assert any(sum(arr[i:i + length]) >= k for i in range(len(arr) - length + 1))
        shorter = length - 1
        assert all(sum(arr[i:i + shorter]) < k for i in range(len(arr) - shorter + 1))
        return_value_checked = True
    assert return_value_checked


def test_min_subarray_length_rejects_non_positive_target():
    with pytest.raises(ValueError):
        min_subarray_length([1, 2, 3], 0)


@given(positives)
def test_has_zero_sum_positive_false(arr):
    assert has_zero_sum_subarray(arr) is False


@given(ints)
def test_has_zero_sum_with_balancing_element(arr):
    assert has_zero_sum_subarray(arr + [-sum(arr)]) is True


@given(positives, st.integers(0, 25))
def test_has_zero_sum_with_zero_element(arr, position):
    arr.insert(min(position, len(arr)), 0)
    assert has_zero_sum_subarray(arr) is True


@given(nonempty_ints)
def test_longest_with_sum_whole_array(arr):
    assert longest_subarray_with_sum(arr, sum(arr)) == len(arr)


@given(positives)
def test_longest_with_sum_unreachable(arr):
    assert longest_subarray_with_sum(arr, sum(arr) + 1) == 0


def test_max_subarray_example():
    assert max_subarray([-2, 1, -3, 4, -1, 2, 1, -5, 4]) == (6, [4, -1, 2, 1])


@given(nonempty_ints)
def test_max_subarray_invariants(arr):
    best, sub = max_subarray(arr)
    assert sub
    assert sum(sub) == best
    assert best >= max(arr)
    assert any(arr[i:i + len(sub)] == sub for i in range(len(arr) - len(sub) + 1))


def test_max_subarray_empty_raises():
    with pytest.raises(ValueError):
        max_subarray([])