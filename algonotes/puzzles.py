"""Small string, bit and counting puzzles."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence

_DIGITS = "0123456789"

# Digit pairs that cancel each other out when they stand side by side.
_COMPLEMENT: dict[str, str] = {
    "0": "9",
    "9": "0",
    "1": "2",
    "2": "1",
    "3": "4",
    "4": "3",
    "5": "6",
    "6": "5",
    "7": "8",
    "8": "7",
}

_WORD_MASK = (1 << 64) - 1


def swap_bit_game(n: int) -> int:
    """Return the winning player, 1 or 2, of the bit-swap game for ``n``.

    Player 1 wins when ``n`` has an odd number of set bits. Negative
    numbers are taken as 64-bit two's complement.
    """
    ones = bin(n & _WORD_MASK).count("1")
    return 1 if ones % 2 == 1 else 2


def decode_string(s: str) -> str:
    """Expand an encoding such as ``2[ab3[c]]``: ``k[text]`` stands for ``text`` repeated ``k`` times.

    Characters other than digits, letters and brackets are ignored.
    """
    count = 0
    current = ""
    pending: list[tuple[str, int]] = []
    for char in s:
        if char in _DIGITS:
            count = count * 10 + int(char)
        elif char.isalpha():
            current += char
        elif char == "[":
            pending.append((current, count))
            count = 0
            current = ""
        elif char == "]":
            if not pending:
                raise ValueError("unmatched ']' in encoded string")
            prefix, repeat = pending.pop()
            current = prefix + current * repeat
    return current


def min_length(digits: str) -> int:
    """Return the length left after repeatedly removing adjacent complementary digits.

    The pairs that cancel are 0-9, 1-2, 3-4, 5-6 and 7-8.
    """
    stack: list[str] = []
    for digit in digits:
        if digit not in _COMPLEMENT:
            raise ValueError(f"not a digit: {digit!r}")
        if stack and stack[-1] == _COMPLEMENT[digit]:
            stack.pop()
        else:
            stack.append(digit)
    return len(stack)


def max_weight_substring(
    word: str, chars: Sequence[str], weights: Sequence[int]
) -> str:
    """Return the first substring of ``word`` with the largest total weight.

    A character weighs its code point unless ``chars``/``weights`` give it
    another weight.
    """
    if len(chars) != len(weights):
        raise ValueError("chars and weights must have the same length")
    weight_of = {char: ord(char) for char in word}
    for char, weight in zip(chars, weights):
        if char in weight_of:
            weight_of[char] = weight

    best = ""
    best_weight: int | None = None
    running = 0
    start = 0
    for end, char in enumerate(word):
        running += weight_of[char]
        if best_weight is None or running > best_weight:
            best = word[start : end + 1]
            best_weight = running
        if running < 0:
            running = 0
            start = end + 1
    return best


def maximize_sum(values: Iterable[int]) -> int:
    """Return the most that can be gained by repeatedly taking the largest value
    ``v`` left, adding it to the total and discarding one ``v - 1`` if there is one."""
    ordered = sorted(values)
    remaining = Counter(ordered)
    total = 0
    for value in reversed(ordered):
        if remaining[value] > 0:
            remaining[value] -= 1
            total += value
            if remaining[value - 1] > 0:
                remaining[value - 1] -= 1
    return total


def min_max_sum(values: Iterable[int]) -> int:
    """Return the sum of the smallest and the largest value."""
    items = list(values)
    if not items:
        raise ValueError("values must not be empty")
    return min(items) + max(items)


def count_substrings(s: str, k: int) -> int:
    """Count the substrings of length ``k`` holding exactly ``k - 1`` distinct characters."""
    if k < 1:
        raise ValueError("k must be at least 1")
    if k > len(s):
        return 0
    window = Counter(s[:k])
    found = 1 if len(window) == k - 1 else 0
    for leaving, entering in zip(s, s[k:]):
        window[leaving] -= 1
        if window[leaving] == 0:
            del window[leaving]
        window[entering] += 1
        if len(window) == k - 1:
            found += 1
    return found