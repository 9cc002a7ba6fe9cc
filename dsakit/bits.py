"""Small bit-manipulation helpers on Python integers."""


def _check_position(i: int) -> None:
    if i < 0:
        raise ValueError(f"bit position must be non-negative, got {i}")


def is_even(n: int) -> bool:
    """Return True when the lowest bit of ``n`` is clear."""
    return n & 1 == 0


def xor_swap(a: int, b: int) -> tuple[int, int]:
    """Swap two integers with three XOR steps and return them as ``(b, a)``."""
    a ^= b
    b ^= a
    a ^= b
    return a, b


def bit_is_set(n: int, i: int) -> bool:
    """Return True when bit ``i`` (counted from 0) of ``n`` is one."""
    _check_position(i)
    return n & (1 << i) != 0


def set_bit(n: int, i: int) -> int:
    """Return ``n`` with bit ``i`` set to one."""
    _check_position(i)
    return n | (1 << i)


def clear_bit(n: int, i: int) -> int:
    """Return ``n`` with bit ``i`` cleared to zero."""
    _check_position(i)
    return n & ~(1 << i)


def bits_to_flip(a: int, b: int) -> int:
    """Count the bits that must be flipped to turn ``a`` into ``b``.

    The set bits of ``a ^ b`` are removed one at a time; a XOR that is not
    positive counts as zero flips.
    """
    diff = a ^ b
    count = 0
    while diff > 0:
        diff &= diff - 1
        count += 1
    return count