import itertools
import math

import pytest
from hypothesis import given, strategies as st

from dsakit.recursion import (
    grid_paths,
    is_palindrome,
    josephus,
    permutations,
    power,
    recursive_sum,
    subsets,
)


@given(st.integers(min_value=1, max_value=5000))
def test_recursive_sum_matches_closed_form(n):
    assert recursive_sum(n) == n * (n + 1) // 2


def test_recursive_sum_rejects_non_positive():
    with pytest.raises(ValueError):
        recursive_sum(0)


@given(st.integers(min_value=-10, max_value=10), st.integers(min_value=0, max_value=30))
def test_power_matches_operator(a, b):
    assert power(a, b) == a**b


def test_power_rejects_negative_exponent():
    with pytest.raises(ValueError):
        power(2, -1)


@given(st.integers(min_value=1, max_value=30))
def test_single_row_or_column_has_one_path(m):
    assert grid_paths(1, m) == 1
    assert grid_paths(m, 1) == 1


@given(st.integers(min_value=2, max_value=25), st.integers(min_value=2, max_value=25))
def test_grid_paths_recurrence_and_symmetry(n, m):
    assert grid_paths(n, m) == grid_paths(n - 1, m) + grid_paths(n, m - 1)
    assert grid_paths(n, m) == grid_paths(m, n)


def test_grid_paths_rejects_empty_grid():
    with pytest.raises(ValueError):
        grid_paths(0, 3)


@given(st.integers(min_value=1, max_value=500))
def test_josephus_step_one_leaves_last(n):
    assert josephus(n, 1) == n


@given(st.integers(min_value=1, max_value=2000))
def test_josephus_step_two_closed_form(n):
    rest = n - 2 ** (n.bit_length() - 1)
    assert josephus(n, 2) == 2 * rest + 1


@given(st.integers(min_value=1, max_value=300), st.integers(min_value=1, max_value=50))
def test_josephus_survivor_in_range(n, k):
    assert 1 <= josephus(n, k) <= n


def test_josephus_rejects_nobody():
    with pytest.raises(ValueError):
        josephus(0, 3)


@given(st.text(max_size=20))
def test_mirrored_text_is_palindrome(text):
    assert is_palindrome(text + text[::-1])
    assert is_palindrome(text) == is_palindrome(text[::-1])


def test_non_palindrome_detected():
    assert not is_palindrome("abca")


def test_subsets_source_example_order():
    assert list(subsets("abc")) == ["abc", "ab", "ac", "a", "bc", "b", "c", ""]


@given(st.text(alphabet="abcdefg", max_size=8))
def test_subsets_cover_all_combinations(text):
    found = list(subsets(text))
    assert len(found) == 2 ** len(text)
    assert found[0] == text
    assert found[-1] == ""
    expected = sorted(
        "".join(combo)
        for size in range(len(text) + 1)
        for combo in itertools.combinations(text, size)
    )
    assert sorted(found) == expected


def test_permutations_source_example_order():
    assert list(permutations("abc")) == ["abc", "acb", "bac", "bca", "cba", "cab"]


@given(st.text(alphabet="abcdef", min_size=1, max_size=6))
def test_permutations_match_itertools(text):
    found = list(permutations(text))
    assert len(found) == math.factorial(len(text))
    assert found[0] == text
    assert sorted(found) == sorted("".join(p) for p in itertools.permutations(text))


def test_permutations_of_empty_text_yield_nothing():
    assert list(permutations("")) == []