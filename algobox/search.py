"""Binary-search based answers to counting and scheduling questions."""

from __future__ import annotations

import math
from bisect import bisect_left, bisect_right
from itertools import accumulate, islice
from typing import Callable, Sequence


def guess_number(n: int, guess: Callable[[int], int]) -> int:
    """Find the number picked in 1..n using the ``guess`` oracle.

    ``guess(num)`` returns -1 when ``num`` is too high, 1 when it is too low
    and 0 when it is the pick. Returns -1 if no number in range matches.
    """
    first, last = 1, n
    while first <= last:
        mid = first + (last - first) // 2
        answer = guess(mid)
        if answer == 0:
            return mid
        if answer == -1:
            last = mid - 1
        else:
            first = mid + 1
    return -1


def maximum_candies(candies: Sequence[int], k: int) -> int:
    """Return the largest pile size every one of ``k`` children can receive, or 0."""
    if not candies:
        raise ValueError("candies must not be empty")
    low, high = 1, max(candies)
    best = 0
    while low <= high:
        mid = low + (high - low) // 2
        if sum(pile // mid for pile in candies) >= k:
            best = mid
            low = mid + 1
        else:
            high = mid - 1
    return best


def target_indices(nums: Sequence[int], target: int) -> list[int]:
    """Return the indices ``target`` occupies once ``nums`` is sorted."""
    ordered = sorted(nums)
    return list(range(bisect_left(ordered, target), bisect_right(ordered, target)))


def maximum_count(nums: Sequence[int]) -> int:
    """Return the larger of the negative and positive counts of a sorted sequence."""
    negatives = bisect_left(nums, 0)
    positives = len(nums) - bisect_left(nums, 1)
    return max(negatives, positives)


def repair_cars(ranks: Sequence[int], cars: int) -> int:
    """Return the least time in which mechanics of the given ranks repair ``cars`` cars.

    A mechanic of rank r repairs n cars in r * n * n minutes.
    """
    if not ranks:
        raise ValueError("ranks must not be empty")

    def can_repair_all(time: int) -> bool:
        repaired = 0
        for rank in ranks:
            repaired += math.isqrt(time // rank)
            if repaired >= cars:
                return True
        return False

    low, high = 1, min(ranks) * cars * cars
    while low < high:
        mid = (low + high) // 2
        if can_repair_all(mid):
            high = mid
        else:
            low = mid + 1
    return low


def min_capability(nums: Sequence[int], k: int) -> int:
    """Return the least capability that robs at least ``k`` non-adjacent houses."""
    if not nums:
        raise ValueError("nums must not be empty")

    def can_rob(cap: int) -> bool:
        robbed = 0
        houses = iter(nums)
        for amount in houses:
            if amount <= cap:
                robbed += 1
                next(houses, None)
            if robbed >= k:
                return True
        return False

    low, high = min(nums), max(nums)
    best = high
    while low <= high:
        mid = low + (high - low) // 2
        if can_rob(mid):
            best = mid
            high = mid - 1
        else:
            low = mid + 1
    return best


def min_zero_array(nums: Sequence[int], queries: Sequence[Sequence[int]]) -> int:
    """Return how many leading queries are needed to bring ``nums`` to zero, or -1.

    Each query ``(left, right, val)`` may lower every element in
    ``left..right`` by up to ``val``.
    """
    size = len(nums)

    def can_zero(count: int) -> bool:
        diff = [0] * (size + 1)
        for left, right, val in islice(queries, count):
            diff[left] += val
            diff[right + 1] -= val
        return all(cover >= need for cover, need in zip(accumulate(diff), nums))

    if all(value == 0 for value in nums):
        return 0
    low, high = 1, len(queries)
    if not can_zero(high):
        return -1
    while low < high:
        mid = low + (high - low) // 2
        if can_zero(mid):
            high = mid
        else:
            low = mid + 1
    return low