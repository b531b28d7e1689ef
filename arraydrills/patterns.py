"""Text patterns of stars and numbers, each returned as newline-terminated lines."""

from __future__ import annotations

from collections.abc import Iterable


def _render(lines: Iterable[str]) -> str:
    return "".join(f"{line}\n" for line in lines)


def _numbers(values: Iterable[int]) -> str:
    return "".join(f"{value} " for value in values)


def _pyramid_lines(num: int) -> list[str]:
    return [" " * (num - i) + "*" * max(2 * i - 1, 0) for i in range(num)]


def _inverted_pyramid_lines(num: int) -> list[str]:
    return [" " * i + "*" * (2 * (num - i) - 1) for i in range(num)]


def square(num: int) -> str:
    """A ``num`` by ``num`` block of stars."""
    return _render("*" * num for _ in range(num))


def right_triangle(num: int) -> str:
    """Rows of 1 to ``num`` stars."""
    return _render("*" * (i + 1) for i in range(num))


def number_triangle(num: int) -> str:
    """Row ``i`` counts from 1 up to ``i``."""
    return _render(_numbers(range(1, i + 2)) for i in range(num))


def repeated_number_triangle(num: int) -> str:
    """Row ``i`` repeats the number ``i`` ``i`` times."""
    return _render(_numbers([i + 1] * (i + 1)) for i in range(num))


def inverted_triangle(num: int) -> str:
    """Rows of ``num`` down to 1 stars."""
    return _render("*" * (num - i) for i in range(num))


def inverted_number_triangle(num: int) -> str:
    """Rows counting from 1 up to ``num``, then one fewer each row."""
    return _render(_numbers(range(1, num - i + 1)) for i in range(num))


def pyramid(num: int) -> str:
    """A centred pyramid; the first row is blank padding."""
    return _render(_pyramid_lines(num))


def inverted_pyramid(num: int) -> str:
    """A centred pyramid standing on its point."""
    return _render(_inverted_pyramid_lines(num))


def diamond(num: int) -> str:
    """A pyramid followed by an inverted pyramid."""
    return _render(_pyramid_lines(num) + _inverted_pyramid_lines(num))


def half_diamond(num: int) -> str:
    """Rows growing to ``num`` stars, then shrinking to an empty row."""
    rising = ["*" * (i + 1) for i in range(num)]
    falling = ["*" * (num - i - 1) for i in range(num)]
    return _render(rising + falling)


def binary_triangle(num: int) -> str:
    """A triangle of alternating 1s and 0s, every row ending in 1."""
    return _render(
        "".join("1 " if (i + j) % 2 == 0 else "0 " for j in range(i + 1))
        for i in range(num)
    )


def number_crown(num: int) -> str:
    """Counting up on the left and down on the right with a narrowing gap between."""
    lines = []
    for i in range(num):
        left = "".join(str(j + 1) for j in range(i + 1))
        lines.append(left + " " * (2 * (num - i - 1)) + left[::-1])
    return _render(lines)