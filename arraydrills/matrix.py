"""Pascal's triangle and small square-matrix transformations."""

from __future__ import annotations

from collections.abc import Sequence


def pascal_row(n: int) -> list[int]:
    """Return row ``n`` (1-based) of Pascal's triangle; it has ``n`` entries."""
    row = [1]
    value = 1
    for i in range(1, n):
        value = value * (n - i) // i
        row.append(value)
    return row


def pascal_triangle(n: int) -> list[list[int]]:
    """Return the first ``n`` rows of Pascal's triangle."""
    return [pascal_row(i) for i in range(1, n + 1)]


def rotate_clockwise(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return a square matrix turned a quarter turn clockwise."""
    rows = [list(row) for row in matrix]
    if any(len(row) != len(rows) for row in rows):
        raise ValueError("matrix must be square")
    return [list(column) for column in zip(*reversed(rows))]


def set_zeroes(matrix: list[list[int]]) -> None:
    """Zero, in place, every row and column that holds a zero."""
    if not matrix or not matrix[0]:
        return
    zero_rows = {i for i, row in enumerate(matrix) if 0 in row}
    zero_cols = {j for row in matrix for j, value in enumerate(row) if value == 0}
    for i, row in enumerate(matrix):
        row[:] = [
            0 if i in zero_rows or j in zero_cols else value
            for j, value in enumerate(row)
        ]


def format_matrix(matrix: Sequence[Sequence[int]]) -> str:
    """Render a matrix one row per line, each value followed by a space."""
    return "".join("".join(f"{value} " for value in row) + "\n" for row in matrix)