from __future__ import annotations

from typing import Iterator, Sequence

from cisgrowth.errors import SizeMismatchError


def popcount(x: int) -> int:
    return bin(x).count("1")


def iter_bits(mask: int) -> Iterator[int]:
    """Yield the positions of the set bits of *mask*, lowest first."""
    while mask:
        lsb = mask & -mask
        yield lsb.bit_length() - 1
        mask ^= lsb


def iter_submasks(mask: int) -> Iterator[int]:
    """Yield every submask of *mask*, including 0 and *mask* itself."""
    sub = mask
    while True:
        yield sub
        if sub == 0:
            return
        sub = (sub - 1) & mask


def check_width(mask: int, width: int, what: str = "mask") -> int:
    """Raise SizeMismatchError unless 0 <= mask < 2**width."""
    if mask < 0 or mask >> width:
        raise SizeMismatchError(
            f"{what}={mask} does not fit in {width} bits "
            f"(expected a value in [0, {(1 << width) - 1}])."
        )
    return mask


def join_sides(left: int, right: int, half: int) -> int:
    """Full link mask from a left-side and a right-side mask of *half* bits each."""
    check_width(left, half, "left")
    check_width(right, half, "right")
    return left | (right << half)


def split_sides(mask: int, half: int) -> tuple[int, int]:
    """Inverse of join_sides: (left, right)."""
    check_width(mask, 2 * half)
    low = (1 << half) - 1
    return mask & low, mask >> half


def permute_mask(mask: int, order: Sequence[int]) -> int:
    """
    Re-index the bits of *mask*.

    Bit order[i] of the result is bit i of *mask*.
    """
    out = 0
    for i, dst in enumerate(order):
        if (mask >> i) & 1:
            out |= 1 << dst
    return out
