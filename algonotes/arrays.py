"""Array and sliding-window algorithms."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence


def min_height_difference(heights: Iterable[int], k: int) -> int:
    """Return the smallest possible spread after moving each height up or down by ``k``.

    Every height is changed by exactly ``+k`` or ``-k``; no height may end
    below zero. The spread is the tallest minus the shortest result.
    """
    ordered = sorted(heights)
    if not ordered:
        raise ValueError("heights must not be empty")

    best = ordered[-1] - ordered[0]
    smallest = ordered[0] + k
    largest = ordered[-1] - k
    for low, high in zip(ordered, ordered[1:]):
        lowest = min(smallest, high - k)
        highest = max(largest, low + k)
        if lowest < 0:
            continue
        best = min(best, highest - lowest)
    return best


def max_subarray_sum(nums: Iterable[int]) -> int:
    """Return the largest sum of any non-empty contiguous run of ``nums``."""
    items = iter(nums)
    try:
        first = next(items)
    except StopIteration:
        raise ValueError("nums must not be empty") from None

    best = running = first
    for value in items:
        if running < 0:
            running = 0
        running += value
        best = max(best, running)
    return best


def count_subarrays_with_sum(values: Iterable[int], target: int) -> int:
    """Count the contiguous non-empty runs of ``values`` that add up to ``target``."""
    seen: Counter[int] = Counter()
    running = 0
    count = 0
    for value in values:
        running += value
        if running == target:
            count += 1
        count += seen[running - target]
        seen[running] += 1
    return count


def count_distinct_in_windows(values: Iterable[int], k: int) -> list[int]:
    """Return the number of distinct values in every window of length ``k``."""
    items = list(values)
    if not 1 <= k <= len(items):
        raise ValueError(f"window size {k} is outside 1..{len(items)}")

    counts = Counter(items[:k])
    result = [len(counts)]
    for leaving, entering in zip(items, items[k:]):
        counts[leaving] -= 1
        if counts[leaving] == 0:
            del counts[leaving]
        counts[entering] += 1
        result.append(len(counts))
    return result


def next_greater_elements(values: Sequence[int]) -> list[int]:
    """For each value, return the first strictly larger value to its right, or -1."""
    result = [-1] * len(values)
    pending: list[int] = []
    for index, value in enumerate(values):
        while pending and value > values[pending[-1]]:
            result[pending.pop()] = value
        pending.append(index)
    return result