import math

import pytest
from hypothesis import given, strategies as st

from dsakit.numbers import (
    composite_flags,
    factorial,
    fast_power,
    gcd,
    is_palindrome_number,
    primes_up_to,
    trailing_zeros,
)


@given(st.integers(min_value=0, max_value=80))
def test_factorial_matches_math(n):
    assert factorial(n) == math.factorial(n)


def test_factorial_of_negative_is_empty_product():
    assert factorial(-3) == 1


@pytest.mark.parametrize("n", range(0, 300, 7))
def test_trailing_zeros_match_decimal_form(n):
    text = str(math.factorial(n))
    assert trailing_zeros(n) == len(text) - len(text.rstrip("0"))


@given(st.integers(min_value=0, max_value=10**6))
def test_trailing_zeros_is_monotone(n):
    assert trailing_zeros(n) <= trailing_zeros(n + 1)


@given(st.integers(min_value=1, max_value=10**6))
def test_mirrored_numbers_are_palindromes(n):
    text = str(n)
    assert is_palindrome_number(int(text + text[::-1]))
    assert is_palindrome_number(-int(text + text[::-1]))


@given(st.integers(min_value=0, max_value=10**9))
def test_palindrome_number_agrees_with_digits(n):
    digits = str(n)
    assert is_palindrome_number(n) == (digits == digits[::-1])


def test_number_ending_in_zero_is_not_palindrome():
    assert not is_palindrome_number(120)
    assert is_palindrome_number(0)


@pytest.mark.parametrize("n", [0, 1, 2, 10, 57, 200])
def test_composite_flags_shape_and_meaning(n):
    flags = composite_flags(n)
    assert len(flags) == n + 1
    assert not any(flags[:2])
    for value, composite in enumerate(flags[2:], start=2):
        has_divisor = any(value % d == 0 for d in range(2, value))
        assert composite == has_divisor


def test_composite_flags_rejects_negative():
    with pytest.raises(ValueError):
        composite_flags(-2)


@given(st.integers(min_value=0, max_value=400))
def test_primes_up_to_are_complement_of_composites(n):
    primes = primes_up_to(n)
    flags = composite_flags(n)
    assert primes == sorted(primes)
    assert all(2 <= p <= n and not flags[p] for p in primes)
    assert len(primes) + sum(flags) == max(n - 1, 0)


@given(st.integers(min_value=0, max_value=10**9), st.integers(min_value=0, max_value=10**9))
def test_gcd_matches_math(a, b):
    assert gcd(a, b) == math.gcd(a, b)


@given(st.integers(min_value=0, max_value=10**9))
def test_gcd_with_zero_returns_other(a):
    assert gcd(a, 0) == a


@given(st.integers(min_value=-20, max_value=20), st.integers(min_value=0, max_value=40))
def test_fast_power_matches_pow(a, b):
    assert fast_power(a, b) == a**b


def test_fast_power_non_positive_exponent_is_one():
    assert fast_power(7, 0) == fast_power(7, -4) == 1