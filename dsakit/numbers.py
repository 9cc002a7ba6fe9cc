"""Elementary number routines: factorials, palindromes, primes, gcd, powers."""

from math import prod


def factorial(n: int) -> int:
    """Return the product 1 * 2 * ... * n; 1 when ``n`` is below 1."""
    return prod(range(1, n + 1))


def trailing_zeros(n: int) -> int:
    """Return the number of trailing zeros of ``n!`` by counting factors of 5."""
    total = 0
    power = 5
    while power <= n:
        total += n // power
        power *= 5
    return total


def is_palindrome_number(n: int) -> bool:
    """Return True when the decimal digits of ``n`` read the same reversed."""
    digits = str(abs(n))
    return digits == digits[::-1]


def composite_flags(n: int) -> list[bool]:
    """Sieve 0..n and return flags that are True for every composite number.

    Entries 0 and 1 are False, as are the primes.
    """
    if n < 0:
        raise ValueError(f"sieve limit must be non-negative, got {n}")
    flags = [False] * (n + 1)
    for i in range(2, n + 1):
        for j in range(2 * i, n + 1, i):
            flags[j] = True
    return flags


def primes_up_to(n: int) -> list[int]:
    """Return the primes from 2 to ``n`` inclusive."""
    return [i for i, composite in enumerate(composite_flags(n)) if i >= 2 and not composite]


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of ``a`` and ``b`` by Euclid's method."""
    while b != 0:
        a, b = b, a % b
    return a


def fast_power(a: int, b: int) -> int:
    """Return ``a`` raised to ``b`` by binary exponentiation; 1 when ``b`` <= 0."""
    result = 1
    while b > 0:
        if b & 1:
            result *= a
        a *= a
        b >>= 1
    return result