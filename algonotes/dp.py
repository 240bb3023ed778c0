"""Dynamic-programming algorithms."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence

_KEYPAD_MOVES: dict[int, tuple[int, ...]] = {
    0: (0, 8),
    1: (1, 2, 4),
    2: (2, 1, 3, 5),
    3: (3, 2, 6),
    4: (4, 1, 5, 7),
    5: (5, 2, 4, 6, 8),
    6: (6, 3, 5, 9),
    7: (7, 4, 8),
    8: (8, 5, 7, 9, 0),
    9: (9, 6, 8),
}


def longest_common_substring(a: str, b: str) -> int:
    """Return the length of the longest contiguous run shared by ``a`` and ``b``."""
    best = 0
    previous = [0] * (len(b) + 1)
    for char_a in a:
        current = [0]
        for j, char_b in enumerate(b):
            run = previous[j] + 1 if char_a == char_b else 0
            current.append(run)
            best = max(best, run)
        previous = current
    return best


def min_partition_difference(values: Iterable[int]) -> int:
    """Split ``values`` into two groups; return the smallest difference of their sums."""
    items = list(values)
    if any(value < 0 for value in items):
        raise ValueError("values must not be negative")
    total = sum(items)
    reachable = 1  # bit s is set when some subset sums to s
    for value in items:
        reachable |= reachable << value
    return min(
        abs(total - 2 * subset_sum)
        for subset_sum in range(total + 1)
        if reachable >> subset_sum & 1
    )


def keypad_count(n: int) -> int:
    """Count the ``n``-digit sequences on a phone keypad where each next key is
    the same key or one directly above, below, left or right of it."""
    if n < 1:
        raise ValueError("n must be at least 1")
    counts = {digit: 1 for digit in _KEYPAD_MOVES}
    for _ in range(n - 1):
        counts = {
            digit: sum(counts[move] for move in moves)
            for digit, moves in _KEYPAD_MOVES.items()
        }
    return sum(counts.values())


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number, with fibonacci(0) == 0."""
    if n < 0:
        raise ValueError("n must not be negative")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def longest_increasing_subsequence(values: Iterable[int]) -> int:
    """Return the length of the longest strictly increasing subsequence."""
    tails: list[int] = []
    for value in values:
        position = bisect_left(tails, value)
        if position == len(tails):
            tails.append(value)
        else:
            tails[position] = value
    return len(tails)


def frog_jump_cost(heights: Sequence[int], k: int) -> int:
    """Return the least total cost to go from the first stone to the last.

    A jump covers 1 to ``k`` stones and costs the absolute height difference.
    """
    if not heights:
        raise ValueError("heights must not be empty")
    if k < 1:
        raise ValueError("k must be at least 1")
    costs = [0]
    for i, height in enumerate(heights[1:], start=1):
        start = max(0, i - k)
        costs.append(
            min(
                cost + abs(height - earlier)
                for cost, earlier in zip(costs[start:i], heights[start:i])
            )
        )
    return costs[-1]


def knapsack(capacity: int, values: Sequence[int], weights: Sequence[int]) -> int:
    """Return the best total value of items whose weights fit in ``capacity``.

    Each item is taken at most once.
    """
    if len(values) != len(weights):
        raise ValueError("values and weights must have the same length")
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    best = [0] * (capacity + 1)
    for value, weight in zip(values, weights):
        if weight < 0:
            raise ValueError("weights must not be negative")
        for room in range(capacity, weight - 1, -1):
            best[room] = max(best[room], best[room - weight] + value)
    return best[capacity]


def longest_common_subsequence(a: str, b: str) -> int:
    """Return the length of the longest subsequence common to ``a`` and ``b``."""
    previous = [0] * (len(b) + 1)
    for char_a in a:
        current = [0]
        for j, char_b in enumerate(b):
            if char_a == char_b:
                current.append(previous[j] + 1)
            else:
                current.append(max(previous[j + 1], current[j]))
        previous = current
    return previous[-1]


def cut_rod(prices: Sequence[int]) -> int:
    """Return the best revenue from a rod of length ``len(prices)``.

    ``prices[i]`` is what a piece of length ``i + 1`` sells for.
    """
    best = [0]
    for length in range(1, len(prices) + 1):
        best.append(
            max(
                [0]
                + [best[length - cut] + prices[cut - 1] for cut in range(1, length + 1)]
            )
        )
    return best[-1]