"""Choice of the left/right pairing of a four-link gadget's link nodes."""
from __future__ import annotations

from typing import NamedTuple, Sequence, Tuple

from cisgrowth.errors import SizeMismatchError
from cisgrowth.utils.bits import permute_mask


class Pairing(NamedTuple):
    """
    One way to split {a, b, c, d} into two sides.

    name:       e.g. "ab|cd"
    order:      new link i is old link order[i]
    same_sides: the two masks that touch exactly one full side
    """

    name: str
    order: Tuple[int, int, int, int]
    same_sides: Tuple[int, int]


# Tie-break order: earlier wins.
PAIRINGS: Tuple[Pairing, ...] = (
    Pairing("ab|cd", (0, 1, 2, 3), (0b0011, 0b1100)),
    Pairing("ac|bd", (0, 2, 1, 3), (0b0101, 0b1010)),
    Pairing("ad|bc", (0, 3, 2, 1), (0b1001, 0b0110)),
)


def permute_path_values(values: Sequence[int], order: Sequence[int]) -> Tuple[int, ...]:
    """Path values after relabelling link nodes so that new link i is old link order[i]."""
    k = len(order)
    if len(values) != 1 << k:
        raise SizeMismatchError(
            f"Path-value vector of length {len(values)} does not match {k} link nodes."
        )
    if sorted(order) != list(range(k)):
        raise SizeMismatchError(f"order={tuple(order)!r} is not a permutation of range({k}).")
    out = [0] * len(values)
    for new in range(len(values)):
        out[new] = values[permute_mask(new, order)]
    return tuple(out)


def same_side_count(values: Sequence[int], pairing: Pairing) -> int:
    """Subsets whose link nodes are exactly one full side under *pairing*."""
    if len(values) != 16:
        raise SizeMismatchError(f"Expected 16 path values, got {len(values)}.")
    lo, hi = pairing.same_sides
    return values[lo] + values[hi]


def best_pairing(values: Sequence[int]) -> Pairing:
    """Pairing that leaves the fewest same-side-only subsets.

    Minimising those maximises the number of subsets spanning left to right.
    """
    return min(PAIRINGS, key=lambda p: same_side_count(values, p))


def spanning_count(values: Sequence[int]) -> int:
    """Subsets containing a and/or b and also c and/or d."""
    if len(values) != 16:
        raise SizeMismatchError(f"Expected 16 path values, got {len(values)}.")
    return sum(v for m, v in enumerate(values) if m & 0b0011 and m & 0b1100)
