import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from algonotes.backtracking import (
    balanced_brackets,
    combination_sum,
    grid_paths,
    josephus,
    kth_grammar,
    letter_combinations,
    maze_paths,
    power_set,
)

_STEPS = {"D": (1, 0), "L": (0, -1), "R": (0, 1), "U": (-1, 0)}


def _square_grids():
    return st.integers(min_value=1, max_value=4).flatmap(
        lambda n: st.lists(
            st.lists(st.integers(min_value=0, max_value=1), min_size=n, max_size=n),
            min_size=n,
            max_size=n,
        )
    )


def _is_balanced(text):
    depth = 0
    for char in text:
        depth += 1 if char == "(" else -1
        if depth < 0:
            return False
    return depth == 0


# maze_paths


def test_maze_blocked_start_has_no_paths():
    assert maze_paths([[0, 1], [1, 1]]) == []


def test_maze_single_open_cell_gives_empty_route():
    assert maze_paths([[1]]) == [""]


def test_maze_open_two_by_two():
    assert maze_paths([[1, 1], [1, 1]]) == ["DR", "RD"]


def test_maze_blocked_target_has_no_paths():
    assert maze_paths([[1, 1], [1, 0]]) == []


def test_maze_rejects_non_square():
    with pytest.raises(ValueError):
        maze_paths([[1, 1], [1]])


def test_maze_rejects_empty():
    with pytest.raises(ValueError):
        maze_paths([])


@settings(max_examples=60)
@given(_square_grids())
def test_maze_paths_are_valid_and_sorted(grid):
    size = len(grid)
    paths = maze_paths(grid)
    assert paths == sorted(paths)
    assert len(paths) == len(set(paths))
    for path in paths:
        row, col = 0, 0
        seen = {(row, col)}
        for letter in path:
            d_row, d_col = _STEPS[letter]
            row, col = row + d_row, col + d_col
            assert 0 <= row < size and 0 <= col < size
            assert grid[row][col] == 1
            assert (row, col) not in seen
            seen.add((row, col))
        assert (row, col) == (size - 1, size - 1)


# balanced_brackets


def test_balanced_brackets_two_pairs():
    assert balanced_brackets(2) == ["(())", "()()"]


def test_balanced_brackets_zero_pairs():
    assert balanced_brackets(0) == [""]


def test_balanced_brackets_rejects_negative():
    with pytest.raises(ValueError):
        balanced_brackets(-1)


@pytest.mark.parametrize("pairs", range(1, 7))
def test_balanced_brackets_invariants(pairs):
    found = balanced_brackets(pairs)
    assert found == sorted(found)
    assert len(found) == len(set(found))
    for text in found:
        assert len(text) == 2 * pairs
        assert _is_balanced(text)


def test_balanced_brackets_count_grows():
    counts = [len(balanced_brackets(n)) for n in range(1, 7)]
    assert counts == sorted(counts)
    assert counts[0] == 1


# combination_sum


def test_combination_sum_no_solution():
    assert combination_sum([5, 7], 3) == []


def test_combination_sum_zero_target():
    assert combination_sum([2, 3], 0) == [[]]


def test_combination_sum_duplicates_ignored():
    assert combination_sum([2, 2, 3, 3], 7) == combination_sum([3, 2], 7)


def test_combination_sum_rejects_non_positive():
    with pytest.raises(ValueError):
        combination_sum([0, 1], 3)


@settings(max_examples=60)
@given(
    st.lists(st.integers(min_value=1, max_value=9), min_size=1, max_size=5),
    st.integers(min_value=0, max_value=20),
)
def test_combination_sum_invariants(candidates, target):
    found = combination_sum(candidates, target)
    assert found == sorted(found)
    assert len({tuple(c) for c in found}) == len(found)
    for combo in found:
        assert sum(combo) == target
        assert combo == sorted(combo)
        assert set(combo) <= set(candidates)


# power_set


def test_power_set_of_three():
    assert power_set([1, 2, 3]) == [
        [],
        [3],
        [2],
        [2, 3],
        [1],
        [1, 3],
        [1, 2],
        [1, 2, 3],
    ]


def test_power_set_empty():
    assert power_set([]) == [[]]


def test_power_set_repeated_calls_independent():
    assert power_set([4, 5]) == power_set([4, 5])
    assert len(power_set([4, 5])) == 4


@given(st.lists(st.integers(), max_size=6, unique=True))
def test_power_set_invariants(values):
    subsets = power_set(values)
    assert len(subsets) == 2 ** len(values)
    assert len({frozenset(s) for s in subsets}) == len(subsets)
    assert subsets[0] == []
    assert subsets[-1] == values


# kth_grammar


def test_kth_grammar_example():
    assert kth_grammar(4, 3) == 1


def test_kth_grammar_first_row():
    assert kth_grammar(1, 1) == 0


@pytest.mark.parametrize("n, k", [(0, 1), (3, 0), (3, 5)])
def test_kth_grammar_rejects_out_of_range(n, k):
    with pytest.raises(ValueError):
        kth_grammar(n, k)


@given(st.integers(min_value=1, max_value=20), st.data())
def test_kth_grammar_row_is_prefix_then_complement(n, data):
    k = data.draw(st.integers(min_value=1, max_value=2 ** (n - 1)))
    assert kth_grammar(n + 1, k) == kth_grammar(n, k)
    assert kth_grammar(n + 1, k + 2 ** (n - 1)) == 1 - kth_grammar(n, k)


# grid_paths


def test_grid_paths_single_row_or_column():
    assert grid_paths(1, 7) == 1
    assert grid_paths(7, 1) == 1


@pytest.mark.parametrize("rows, cols", [(0, 3), (3, 0), (-1, -1)])
def test_grid_paths_rejects_non_positive(rows, cols):
    with pytest.raises(ValueError):
        grid_paths(rows, cols)


@given(st.integers(min_value=2, max_value=15), st.integers(min_value=2, max_value=15))
def test_grid_paths_recurrence_and_symmetry(rows, cols):
    assert grid_paths(rows, cols) == grid_paths(cols, rows)
    assert grid_paths(rows, cols) == grid_paths(rows - 1, cols) + grid_paths(rows, cols - 1)


# letter_combinations


def test_letter_combinations_empty():
    assert letter_combinations("") == []


def test_letter_combinations_single_digit():
    assert letter_combinations("7") == ["p", "q", "r", "s"]


def test_letter_combinations_two_digits():
    found = letter_combinations("23")
    assert len(found) == 9
    assert found[0] == "ad"
    assert found[-1] == "cf"
    assert found == sorted(found)


def test_letter_combinations_digit_without_letters():
    assert letter_combinations("21") == []


def test_letter_combinations_rejects_non_digit():
    with pytest.raises(ValueError):
        letter_combinations("2a")


@given(st.text(alphabet="23456789", min_size=1, max_size=4))
def test_letter_combinations_invariants(digits):
    found = letter_combinations(digits)
    assert len(found) == len(set(found))
    assert all(len(word) == len(digits) for word in found)
    assert found == sorted(found)


# josephus


def test_josephus_example():
    assert josephus(5, 3) == 3


def test_josephus_single_person():
    assert josephus(1, 4) == 0


def test_josephus_step_one_leaves_last():
    assert josephus(6, 1) == 5


def test_josephus_rejects_empty_circle():
    with pytest.raises(ValueError):
        josephus(0, 2)


@given(st.integers(min_value=1, max_value=200), st.integers(min_value=1, max_value=50))
def test_josephus_in_range(n, k):
    assert 0 <= josephus(n, k) < n