"""
Bit manipulation helpers for digit sets.

A digit set is a plain int where bit ``n`` stands for digit ``n``.
Bit 0 is never a digit. Python ints are immutable, so every helper
returns the new mask.
"""

from typing import Iterator


def set_bit(mask: int, n: int) -> int:
    return mask | (1 << n)


def clear_bit(mask: int, n: int) -> int:
    return mask & ~(1 << n)


def flip_bit(mask: int, n: int) -> int:
    return mask ^ (1 << n)


def has_bit(mask: int, n: int) -> bool:
    return (mask >> n) & 1 == 1


def full_mask(row_width: int) -> int:
    """Mask with bits 1..row_width set."""
    # bits 1..N set => (1<<(N+1)) - 2
    return (1 << (row_width + 1)) - 2


def iter_bits(mask: int, row_width: int) -> Iterator[int]:
    """Yield the digits 1..row_width present in ``mask``, ascending."""
    for digit in range(1, row_width + 1):
        if has_bit(mask, digit):
            yield digit
