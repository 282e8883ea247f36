"""Binary grid palindromes."""

from __future__ import annotations

from typing import Sequence


def min_flips(grid: Sequence[Sequence[int]]) -> int:
    """Return the fewest cell flips making every row and column a palindrome.

    The total number of ones must also end up divisible by four.
    """
    if not grid or not grid[0]:
        raise ValueError("grid must not be empty")
    rows, cols = len(grid), len(grid[0])
    flips = 0

    for i in range(rows // 2):
        top, bottom = grid[i], grid[rows - 1 - i]
        for j in range(cols // 2):
            cells = (top[j], top[cols - 1 - j], bottom[j], bottom[cols - 1 - j])
            flips += min(cells.count(0), cells.count(1))

    pairs: list[tuple[int, int]] = []
    if rows % 2:
        middle = grid[rows // 2]
        pairs.extend((middle[j], middle[cols - 1 - j]) for j in range(cols // 2))
    if cols % 2:
        pairs.extend(
            (grid[i][cols // 2], grid[rows - 1 - i][cols // 2]) for i in range(rows // 2)
        )

    mismatched = sum(a != b for a, b in pairs)
    matched_ones = sum(a == b == 1 for a, b in pairs)
    flips += mismatched

    if rows % 2 and cols % 2:
        flips += int(grid[rows // 2][cols // 2] == 1)
    if matched_ones % 2 and not mismatched:
        flips += 2
    return flips