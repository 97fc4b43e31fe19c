from .enumerator import (
    iter_connected_masks,
    enumerate_connected_subsets,
    count_cis,
    count_cis_bruteforce,
)

__all__ = [
    "iter_connected_masks",
    "enumerate_connected_subsets",
    "count_cis",
    "count_cis_bruteforce",
]
