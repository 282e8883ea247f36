import math

import pytest

from algobox.search import (
    guess_number,
    maximum_candies,
    maximum_count,
    min_capability,
    min_zero_array,
    repair_cars,
    target_indices,
)


def _oracle(pick):
    def guess(num):
        if num > pick:
            return -1
        if num < pick:
            return 1
        return 0

    return guess


@pytest.mark.parametrize("n", [1, 2, 10, 1000])
def test_guess_number_finds_every_pick(n):
    for pick in {1, n, (n + 1) // 2}:
        assert guess_number(n, _oracle(pick)) == pick


def test_guess_number_needs_few_guesses():
    calls = []
    oracle = _oracle(777)

    def guess(num):
        calls.append(num)
        return oracle(num)

    assert guess_number(1024, guess) == 777
    assert len(calls) <= math.log2(1024) + 1


def test_guess_number_without_match():
    assert guess_number(10, lambda num: 1) == -1


@pytest.mark.parametrize(
    "candies, k",
    [([5, 8, 6], 3), ([2, 5], 3), ([1, 2, 3, 4, 10], 5), ([9], 4), ([100, 1], 7)],
)
def test_maximum_candies_is_largest_feasible(candies, k):
    best = maximum_candies(candies, k)
    assert sum(pile // best for pile in candies) >= k
    assert sum(pile // (best + 1) for pile in candies) < k


def test_maximum_candies_equal_piles():
    candies = [4, 4, 4]
    assert maximum_candies(candies, len(candies)) == candies[0]


def test_maximum_candies_impossible():
    assert not maximum_candies([2, 5], 11)


def test_maximum_candies_empty():
    with pytest.raises(ValueError):
        maximum_candies([], 1)


@pytest.mark.parametrize(
    "nums, target",
    [([1, 2, 5, 2, 3], 2), ([1, 2, 5, 2, 3], 3), ([1, 2, 5, 2, 3], 4), ([7, 7, 7], 7), ([], 1)],
)
def test_target_indices(nums, target):
    original = list(nums)
    result = target_indices(nums, target)
    ordered = sorted(nums)
    assert len(result) == nums.count(target)
    assert all(ordered[i] == target for i in result)
    if result:
        assert result == list(range(result[0], result[0] + len(result)))
    assert nums == original


@pytest.mark.parametrize("negatives, zeros, positives", [(3, 2, 1), (0, 4, 0), (1, 0, 5), (2, 2, 2)])
def test_maximum_count(negatives, zeros, positives):
    nums = [-5] * negatives + [0] * zeros + [9] * positives
    assert maximum_count(nums) == max(negatives, positives)


@pytest.mark.parametrize(
    "ranks, cars", [([4, 2, 3, 1], 10), ([5, 1, 8], 6), ([1], 1), ([3, 3, 3], 9)]
)
def test_repair_cars_is_least_time(ranks, cars):
    def repaired(time):
        return sum(math.isqrt(time // rank) for rank in ranks)

    time = repair_cars(ranks, cars)
    assert repaired(time) >= cars
    assert time == 1 or repaired(time - 1) < cars


def test_repair_cars_monotonic_in_cars():
    ranks = [4, 2, 3, 1]
    times = [repair_cars(ranks, cars) for cars in range(1, 15)]
    assert times == sorted(times)


def test_repair_cars_empty():
    with pytest.raises(ValueError):
        repair_cars([], 3)


def test_min_capability_single_house():
    nums = [2, 3, 5, 9]
    assert min_capability(nums, 1) == min(nums)


def test_min_capability_forced_choice():
    nums = [4, 1, 6]
    assert min_capability(nums, 2) == max(nums[0], nums[2])


@pytest.mark.parametrize("nums, k", [([2, 3, 5, 9], 2), ([2, 7, 9, 3, 1], 2), ([5, 5, 5, 5, 5], 3)])
def test_min_capability_within_bounds(nums, k):
    result = min_capability(nums, k)
    assert min(nums) <= result <= max(nums)
    assert result in nums


def test_min_capability_empty():
    with pytest.raises(ValueError):
        min_capability([], 1)


def _zeroed(nums, queries):
    remaining = list(nums)
    for left, right, val in queries:
        for i in range(left, right + 1):
            remaining[i] -= val
    return all(value <= 0 for value in remaining)


@pytest.mark.parametrize(
    "nums, queries, expected",
    [
        ([2, 0, 2], [[0, 2, 1], [0, 2, 1], [1, 1, 3]], 2),
        ([3, 1], [[0, 0, 1], [0, 1, 1], [0, 0, 2], [1, 1, 5]], 3),
        ([1], [[0, 0, 1]], 1),
    ],
)
def test_min_zero_array_is_least_prefix(nums, queries, expected):
    count = min_zero_array(nums, queries)
    assert count == expected
    assert _zeroed(nums, queries[:count]) is True
    assert _zeroed(nums, queries[: count - 1]) is False


def test_min_zero_array_impossible():
    assert min_zero_array([4, 3, 2, 1], [[1, 3, 2], [0, 2, 1]]) == -1


def test_min_zero_array_already_zero():
    assert min_zero_array([0, 0, 0], [[0, 2, 1]]) == 0