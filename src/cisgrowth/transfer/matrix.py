"""Transfer matrices built from path-value vectors.

A path-value vector for k link nodes has 2^k entries.  The first k/2 link
nodes form the left side and the last k/2 the right side, so a full mask is
``left | (right << k/2)``.  All functions here are pure: they read the vector
and never keep state between calls.
"""
from __future__ import annotations

from typing import Sequence

import numpy as np

from cisgrowth.errors import SizeMismatchError
from cisgrowth.utils.bits import check_width, iter_submasks

# Bit positions of the four-link labels.
A, B, C, D = 1, 2, 4, 8


def _half(values: Sequence[int], n_links: int) -> int:
    if n_links < 2 or n_links % 2:
        raise SizeMismatchError(f"Expected a positive even number of link nodes, got {n_links}.")
    if len(values) != 1 << n_links:
        raise SizeMismatchError(
            f"Path-value vector of length {len(values)} does not match "
            f"{n_links} link nodes (expected {1 << n_links})."
        )
    return n_links // 2


def left_to(values: Sequence[int], n_links: int, right: int) -> int:
    """Number of connected subsets whose right-side link nodes are exactly *right*.

    The left side is unconstrained (any left mask, including none).
    """
    h = _half(values, n_links)
    check_width(right, h, "right")
    base = right << h
    return sum(values[left | base] for left in range(1 << h))


def excludable_subsets(
    values: Sequence[int],
    n_links: int,
    prev_exit: int,
    final_exit: int,
) -> int:
    """Subsets reaching *final_exit* on the right that avoid every node of *prev_exit* on the left.

    Sums ``values[left | final_exit << k/2]`` over the left masks disjoint
    from *prev_exit*.  The all-zero mask never contributes.
    """
    h = _half(values, n_links)
    check_width(prev_exit, h, "prev_exit")
    check_width(final_exit, h, "final_exit")
    free = ~prev_exit & ((1 << h) - 1)
    base = final_exit << h
    total = 0
    for left in iter_submasks(free):
        mask = left | base
        if mask:
            total += values[mask]
    return total


def build_transfer_matrix(values: Sequence[int], n_links: int) -> np.ndarray:
    """(2^(k/2) - 1)-square transfer matrix for a k-link gadget.

    Row i-1 belongs to right-side exit mask i, column j-1 to the previous
    segment's exit mask j (both non-empty):

        T[i-1, j-1] = left_to(i) - excludable_subsets(j, i)
    """
    h = _half(values, n_links)
    n = 1 << h
    T = np.zeros((n - 1, n - 1), dtype=float)
    for i in range(1, n):
        main = left_to(values, n_links, i)
        for j in range(1, n):
            T[i - 1, j - 1] = main - excludable_subsets(values, n_links, j, i)
    return T


def four_link_aggregates(values: Sequence[int]) -> dict:
    """Lc, Ld and Lcd: subsets joining a and/or b to c only, d only, or both."""
    _half(values, 4)
    return {
        "Lc": values[A | C] + values[B | C] + values[A | B | C],
        "Ld": values[A | D] + values[B | D] + values[A | B | D],
        "Lcd": values[A | C | D] + values[B | C | D] + values[A | B | C | D],
    }


def four_link_transfer_matrix(values: Sequence[int]) -> np.ndarray:
    """3x3 recursion matrix of a four-link gadget.

    Agrees with build_transfer_matrix(values, 4).
    """
    agg = four_link_aggregates(values)
    Lc, Ld, Lcd = agg["Lc"], agg["Ld"], agg["Lcd"]
    return np.array(
        [
            [Lc - values[B | C], Lc - values[A | C], Lc],
            [Ld - values[B | D], Ld - values[A | D], Ld],
            [Lcd - values[B | C | D], Lcd - values[A | C | D], Lcd],
        ],
        dtype=float,
    )
