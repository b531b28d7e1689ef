# arraydrills

A small library of classic array exercises written as ordinary Python functions:
k-sum problems, subarray queries, searches in sorted and rotated sequences,
matrix operations and text patterns. It has no runtime dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `arraydrills.sums`: `three_sum`, `three_sum_closest`, `four_sum`,
  `four_sum_count`, `count_quadruples`, `zero_sum_triplet_indices`,
  `has_triplet_sum`, `two_sum`
- `arraydrills.searching`: `first_and_last`, `search_rotated`,
  `search_rotated_with_duplicates`, `search_insert`
- `arraydrills.subarrays`: `max_profit`, `count_subarrays_with_xor`,
  `subarray_with_sum_indices`, `longest_zero_sum_subarray`,
  `longest_subarray_divisible_by`, `min_subarray_length`,
  `has_zero_sum_subarray`, `count_subarrays_with_sum`,
  `longest_subarray_with_sum`, `max_subarray`
- `arraydrills.matrix`: `pascal_row`, `pascal_triangle`, `rotate_clockwise`,
  `set_zeroes`, `format_matrix`
- `arraydrills.patterns`: `square`, `right_triangle`, `number_triangle`,
  `repeated_number_triangle`, `inverted_triangle`, `inverted_number_triangle`,
  `pyramid`, `inverted_pyramid`, `diamond`, `half_diamond`, `binary_triangle`,
  `number_crown`
- `arraydrills.arrays`: `duplicates`, `find_duplicate`, `leaders`,
  `longest_consecutive`, `merge_sorted`, `merge_intervals`,
  `missing_and_repeating`, `missing_number`, `missing_and_repeating_grid`,
  `move_zeroes`, `sort_colours`, `next_permutation`

## Examples

```python
from arraydrills.sums import three_sum, two_sum
from arraydrills.searching import search_rotated
from arraydrills.arrays import merge_intervals

three_sum([-1, 0, 1, 2, -1, -4])            # [(-1, -1, 2), (-1, 0, 1)]
two_sum([2, 7, 11, 15], 9)                  # (0, 1)
two_sum([1, 2], 10)                         # None
search_rotated([4, 5, 6, 7, 0, 1, 2], 0)    # 4
merge_intervals([[1, 3], [2, 6], [8, 10]])  # [(1, 6), (8, 10)]
```

Some functions work in place and return `None`: `set_zeroes`, `merge_sorted`,
`move_zeroes` and `sort_colours`. `next_permutation` rearranges the list in place
and also returns it.

```python
from arraydrills.arrays import merge_sorted

a, b = [1, 4, 7], [2, 3, 9]
merge_sorted(a, b)
a, b  # ([1, 2, 3], [4, 7, 9])
```

Functions that cannot give an answer for their input raise `ValueError`: for
example `max_profit` and `max_subarray` on an empty sequence,
`longest_subarray_divisible_by` with `k == 0`, `min_subarray_length` with a
non-positive `k`, `rotate_clockwise` on a non-square matrix and `sort_colours`
on values other than 0, 1 and 2.

The pattern functions return the picture as a string of newline-terminated
lines, ready to print:

```python
from arraydrills.patterns import right_triangle

print(right_triangle(3), end="")
# *
# **
# ***
```

`format_matrix` renders a matrix the same way, one row per line with each value
followed by a space.

## What it does not do

The package is a library only. It has no command-line program and does not read
input interactively; call the functions from your own code.