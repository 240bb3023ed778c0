# algonotes

A collection of classic algorithm exercises written as plain Python functions.
Each function takes ordinary Python values, such as lists, strings and integers,
and returns a result. There is nothing to configure. The package has no
dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `algonotes.arrays`

- `min_height_difference(heights, k)`: the smallest possible spread (tallest minus shortest) after each height is moved up or down by exactly `k`. Arrangements where the shortest height would drop below zero are skipped. Raises `ValueError` for an empty input.
- `max_subarray_sum(nums)`: the largest sum of a non-empty contiguous run. Raises `ValueError` for an empty input.
- `count_subarrays_with_sum(values, target)`: the number of contiguous runs that add up to `target`.
- `count_distinct_in_windows(values, k)`: the number of distinct values in each window of length `k`. Raises `ValueError` unless `1 <= k <= len(values)`.
- `next_greater_elements(values)`: for each item, the first strictly larger item to its right, or `-1` if there is none.

### `algonotes.linked_list`

- `ListNode(val, next=None)`: a singly linked list node. Nodes compare by identity.
- `from_values(values)` / `to_values(head)`: convert between Python iterables and linked lists. An empty list is `None`.
- `move_last_to_front(head)`: moves the last node to the front and returns the new head.
- `move_last_k_to_front(head, k)`: moves the last `k` nodes, keeping their order, to the front. Raises `ValueError` if `k` is outside `0..length`.
- `intersection(head_a, head_b)`: the first node that both lists share, or `None`.

### `algonotes.dp`

- `longest_common_substring(a, b)`: the length of the longest contiguous run that both strings share.
- `longest_common_subsequence(a, b)`: the length of the longest subsequence common to both strings.
- `min_partition_difference(values)`: the smallest difference between the sums of two groups. The values must not be negative.
- `keypad_count(n)`: the number of `n`-digit sequences on a phone keypad, where each press is on the same key or on a key directly above, below, left or right of it.
- `fibonacci(n)`: the `n`-th Fibonacci number, where `fibonacci(0) == 0`.
- `longest_increasing_subsequence(values)`: the length of the longest strictly increasing subsequence.
- `frog_jump_cost(heights, k)`: the cheapest way to get from the first stone to the last, jumping 1 to `k` stones at a time. Each jump costs the difference in height.
- `knapsack(capacity, values, weights)`: the best total value of items that fit in `capacity`, using each item at most once.
- `cut_rod(prices)`: the best revenue from a rod of length `len(prices)`, where `prices[i]` is the price of a piece of length `i + 1`.

### `algonotes.backtracking`

- `maze_paths(grid)`: every route through a square 0/1 maze from the top-left cell to the bottom-right cell, written as `D`/`L`/`R`/`U` moves and returned sorted. A route never visits the same cell twice.
- `balanced_brackets(pairs)`: every balanced bracket string with `pairs` pairs, in sorted order.
- `combination_sum(candidates, target)`: the non-decreasing combinations of distinct positive candidates that add up to `target`. Each candidate may be reused.
- `power_set(values)`: all subsets of `values`.
- `kth_grammar(n, k)`: symbol `k` (counting from 1) of row `n` of the 0/1 grammar. Row 1 is `0`, and each later row is the previous row followed by its complement.
- `grid_paths(rows, cols)`: the number of right/down routes across a grid.
- `letter_combinations(digits)`: every letter string that the given phone-keypad digits can spell.
- `josephus(n, k)`: the 0-based position of the survivor when every `k`-th person is removed from a circle of `n`.

### `algonotes.puzzles`

- `swap_bit_game(n)`: returns `1` if `n` has an odd number of set bits and `2` otherwise. Negative numbers are treated as 64-bit two's complement.
- `decode_string(s)`: expands encodings such as `2[ab3[c]]`.
- `min_length(digits)`: the length that remains after repeatedly removing adjacent pairs 0-9, 1-2, 3-4, 5-6 and 7-8.
- `max_weight_substring(word, chars, weights)`: the first substring with the largest total weight. Each character weighs its code point unless it is given a weight in `chars`/`weights`.
- `maximize_sum(values)`: repeatedly take the largest value `v` that is left, add it to the total, and discard one `v - 1` if one is left. Returns the total.
- `min_max_sum(values)`: the sum of the smallest and the largest value.
- `count_substrings(s, k)`: the number of substrings of length `k` that contain exactly `k - 1` distinct characters.

Invalid arguments raise `ValueError`.

## Example

```python
from algonotes.arrays import max_subarray_sum
from algonotes.backtracking import balanced_brackets
from algonotes.puzzles import decode_string

max_subarray_sum([-2, 1, -3, 4, -1, 2, 1, -5, 4])  # 6
balanced_brackets(2)                              # ['(())', '()()']
decode_string("3[b2[ca]]")                        # 'bcacabcacabcaca'
```

## What it does not do

This is a library only. It has no command-line program and does not read
problem input from standard input. To use it, import the functions and call
them from your own code.