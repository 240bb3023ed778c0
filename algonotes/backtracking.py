"""Recursive and backtracking algorithms."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import product
from math import comb

_MAZE_MOVES: tuple[tuple[str, int, int], ...] = (
    ("D", 1, 0),
    ("L", 0, -1),
    ("R", 0, 1),
    ("U", -1, 0),
)

_PHONE_LETTERS: dict[str, str] = {
    "0": "",
    "1": "",
    "2": "abc",
    "3": "def",
    "4": "ghi",
    "5": "jkl",
    "6": "mno",
    "7": "pqrs",
    "8": "tuv",
    "9": "wxyz",
}


def maze_paths(grid: Sequence[Sequence[int]]) -> list[str]:
    """Return, sorted, every route from the top-left to the bottom-right cell.

    ``grid`` is square; cells holding 1 are open. A route is a string of
    moves ``D``, ``L``, ``R`` and ``U`` that never visits a cell twice.
    """
    size = len(grid)
    if size == 0 or any(len(row) != size for row in grid):
        raise ValueError("grid must be a non-empty square")
    if grid[0][0] != 1:
        return []

    target = (size - 1, size - 1)
    paths: list[str] = []
    visited: set[tuple[int, int]] = set()
    route: list[str] = []

    def walk(row: int, col: int) -> None:
        if (row, col) == target:
            paths.append("".join(route))
            return
        visited.add((row, col))
        for letter, d_row, d_col in _MAZE_MOVES:
            r, c = row + d_row, col + d_col
            if 0 <= r < size and 0 <= c < size and (r, c) not in visited and grid[r][c] == 1:
                route.append(letter)
                walk(r, c)
                route.pop()
        visited.discard((row, col))

    walk(0, 0)
    return sorted(paths)


def balanced_brackets(pairs: int) -> list[str]:
    """Return every balanced string of ``pairs`` bracket pairs, in sorted order."""
    if pairs < 0:
        raise ValueError("pairs must not be negative")
    found: list[str] = []
    chars: list[str] = []

    def extend(opening: int, closing: int) -> None:
        if opening == 0 and closing == 0:
            found.append("".join(chars))
            return
        if opening > 0:
            chars.append("(")
            extend(opening - 1, closing)
            chars.pop()
        if closing > opening:
            chars.append(")")
            extend(opening, closing - 1)
            chars.pop()

    extend(pairs, pairs)
    return found


def combination_sum(candidates: Iterable[int], target: int) -> list[list[int]]:
    """Return every non-decreasing combination of distinct candidates, each usable
    any number of times, that adds up to ``target``; combinations come in sorted order."""
    values = sorted(set(candidates))
    if any(value <= 0 for value in values):
        raise ValueError("candidates must be positive")
    found: list[list[int]] = []
    chosen: list[int] = []

    def choose(index: int, remaining: int) -> None:
        if index == len(values):
            if remaining == 0:
                found.append(list(chosen))
            return
        value = values[index]
        if value <= remaining:
            chosen.append(value)
            choose(index, remaining - value)
            chosen.pop()
        choose(index + 1, remaining)

    choose(0, target)
    return found


def power_set(values: Iterable[int]) -> list[list[int]]:
    """Return all subsets of ``values``; for each element, the subsets without it
    come before those with it."""
    subsets: list[list[int]] = [[]]
    for value in reversed(list(values)):
        subsets = subsets + [[value, *rest] for rest in subsets]
    return subsets


def kth_grammar(n: int, k: int) -> int:
    """Return the ``k``-th symbol (1-based) of row ``n`` of the 0/1 grammar where
    row 1 is ``0`` and each row is the previous one followed by its complement."""
    if n < 1:
        raise ValueError("n must be at least 1")
    if not 1 <= k <= 2 ** (n - 1):
        raise ValueError(f"k={k} is outside 1..{2 ** (n - 1)}")
    flipped = 0
    while n > 1:
        half = 2 ** (n - 2)
        if k > half:
            k -= half
            flipped ^= 1
        n -= 1
    return flipped


def grid_paths(rows: int, cols: int) -> int:
    """Count the right/down routes across a ``rows`` by ``cols`` grid of cells."""
    if rows < 1 or cols < 1:
        raise ValueError("rows and cols must be at least 1")
    return comb(rows + cols - 2, rows - 1)


def letter_combinations(digits: str) -> list[str]:
    """Return every letter string that the phone-keypad ``digits`` can spell."""
    if not digits:
        return []
    try:
        groups = [_PHONE_LETTERS[digit] for digit in digits]
    except KeyError as error:
        raise ValueError(f"not a keypad digit: {error.args[0]!r}") from None
    return ["".join(letters) for letters in product(*groups)]


def josephus(n: int, k: int) -> int:
    """Return the 0-based position of the survivor when every ``k``-th of ``n``
    people in a circle is removed."""
    if n < 1:
        raise ValueError("n must be at least 1")
    survivor = 0
    for size in range(2, n + 1):
        survivor = (survivor + k) % size
    return survivor