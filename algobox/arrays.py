"""Small counting and rearranging questions over sequences."""

from __future__ import annotations

from collections import Counter
from functools import reduce
from itertools import combinations
from math import gcd
from typing import Sequence


def has_groups_size_x(deck: Sequence[int]) -> bool:
    """Tell whether the deck splits into equal groups of one value, each of size > 1."""
    return reduce(gcd, Counter(deck).values(), 0) > 1


def busy_student(start_time: Sequence[int], end_time: Sequence[int], query_time: int) -> int:
    """Count the students whose working interval contains ``query_time``."""
    return sum(
        start <= query_time <= end for start, end in zip(start_time, end_time, strict=True)
    )


def most_visited(n: int, rounds: Sequence[int]) -> list[int]:
    """Return the most visited sectors of a circular track of ``n`` sectors, ascending."""
    first, last = rounds[0], rounds[-1]
    if first <= last:
        return list(range(first, last + 1))
    return [*range(1, last + 1), *range(first, n + 1)]


def count_good_rectangles(rectangles: Sequence[Sequence[int]]) -> int:
    """Count the rectangles that can cut the largest square among all of them."""
    sides = Counter(min(width, height) for width, height in rectangles)
    if not sides:
        raise ValueError("rectangles must not be empty")
    return sides[max(sides)]


def min_operations_boxes(boxes: str) -> list[int]:
    """Return, for every box, the moves needed to bring all balls into it."""
    if not boxes:
        raise ValueError("boxes must not be empty")

    def sweep(cells: str) -> list[int]:
        moves = balls = 0
        costs: list[int] = []
        for cell in cells:
            costs.append(moves)
            balls += cell == "1"
            moves += balls
        return costs

    from_left = sweep(boxes)
    from_right = sweep(boxes[::-1])[::-1]
    return [left + right for left, right in zip(from_left, from_right)]


def get_concatenation(nums: Sequence[int]) -> list[int]:
    """Return ``nums`` followed by itself."""
    return [*nums, *nums]


def final_value_after_operations(operations: Sequence[str]) -> int:
    """Apply increment and decrement operations to a variable starting at 0."""
    return sum(("+" in op) - ("-" in op) for op in operations)


def count_pairs(nums: Sequence[int], k: int) -> int:
    """Count index pairs i < j with equal values and ``i * j`` divisible by ``k``."""
    return sum(
        1
        for (i, a), (j, b) in combinations(enumerate(nums), 2)
        if a == b and (i * j) % k == 0
    )


def divide_array(nums: Sequence[int]) -> bool:
    """Tell whether ``nums`` splits into pairs of equal values."""
    return all(count % 2 == 0 for count in Counter(nums).values())


def longest_nice_subarray(nums: Sequence[int]) -> int:
    """Return the length of the longest run whose elements share no set bits pairwise."""
    if not nums:
        raise ValueError("nums must not be empty")
    mask = left = best = 0
    for right, value in enumerate(nums):
        while mask & value:
            mask ^= nums[left]
            left += 1
        mask |= value
        best = max(best, right - left + 1)
    return best


def sort_people(names: Sequence[str], heights: Sequence[int]) -> list[str]:
    """Return the names ordered from the tallest person to the shortest."""
    by_height = dict(zip(heights, names))
    return [by_height[height] for height in sorted(heights, reverse=True)]


def min_operations_binary(nums: Sequence[int]) -> int:
    """Return the flips of three consecutive bits needed to make all ones, or -1."""
    if len(nums) < 2:
        raise ValueError("nums must hold at least two elements")
    bits = list(nums)
    flips = 0
    for i in range(len(bits) - 2):
        if bits[i] == 0:
            for j in range(i, i + 3):
                bits[j] ^= 1
            flips += 1
    return flips if bits[-2] == 1 and bits[-1] == 1 else -1


def stable_mountains(height: Sequence[int], threshold: int) -> list[int]:
    """Return the indices whose preceding mountain is higher than ``threshold``."""
    return [i for i, previous in enumerate(height[:-1], start=1) if previous > threshold]