"""Classic recursive problems: sums, powers, grid paths, Josephus, strings."""

from collections.abc import Iterator
from math import comb


def recursive_sum(n: int) -> int:
    """Return 1 + 2 + ... + n for ``n`` >= 1."""
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    return sum(range(1, n + 1))


def power(a: int, b: int) -> int:
    """Return ``a`` raised to the non-negative exponent ``b``."""
    if b < 0:
        raise ValueError(f"exponent must be non-negative, got {b}")
    return a**b


def grid_paths(n: int, m: int) -> int:
    """Count the right/down paths between opposite corners of an n x m grid."""
    if n < 1 or m < 1:
        raise ValueError(f"grid dimensions must be at least 1, got {n} x {m}")
    return comb(n + m - 2, n - 1)


def josephus(n: int, k: int) -> int:
    """Return the 1-based position of the survivor when every k-th of n is removed."""
    if n < 1:
        raise ValueError(f"there must be at least one person, got {n}")
    survivor = 1
    for size in range(2, n + 1):
        survivor = (survivor + k - 1) % size + 1
    return survivor


def is_palindrome(text: str) -> bool:
    """Return True when ``text`` reads the same forwards and backwards."""
    return text == text[::-1]


def subsets(text: str) -> Iterator[str]:
    """Yield every subsequence of ``text``, taking each character before leaving it."""
    if not text:
        yield ""
        return
    head, rest = text[0], text[1:]
    yield from (head + tail for tail in subsets(rest))
    yield from subsets(rest)


def permutations(text: str) -> Iterator[str]:
    """Yield the permutations of ``text`` in swap order; nothing for an empty string."""
    chars = list(text)
    last = len(chars) - 1

    def walk(start: int) -> Iterator[str]:
        if start == last:
            yield "".join(chars)
            return
        for i in range(start, len(chars)):
            chars[start], chars[i] = chars[i], chars[start]
            yield from walk(start + 1)
            chars[start], chars[i] = chars[i], chars[start]

    return walk(0)