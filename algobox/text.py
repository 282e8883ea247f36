"""Small string and unit-conversion helpers."""

from __future__ import annotations

from collections import Counter
from itertools import pairwise


def defang_ip(address: str) -> str:
    """Replace every period of an IP address with ``[.]``."""
    return address.replace(".", "[.]")


def convert_temperature(celsius: float) -> list[float]:
    """Return ``celsius`` as ``[kelvin, fahrenheit]``."""
    return [celsius + 273.15, celsius * 1.8 + 32]


def score_of_string(s: str) -> int:
    """Sum the absolute code-point differences of adjacent characters."""
    return sum(abs(ord(a) - ord(b)) for a, b in pairwise(s))


def minimum_operations_k_periodic(word: str, k: int) -> int:
    """Return how many k-blocks must be overwritten to make ``word`` k-periodic."""
    if k <= 0:
        raise ValueError("k must be positive")
    if not word or len(word) % k:
        raise ValueError("word length must be a positive multiple of k")
    blocks = Counter(word[i : i + k] for i in range(0, len(word), k))
    return len(word) // k - max(blocks.values())