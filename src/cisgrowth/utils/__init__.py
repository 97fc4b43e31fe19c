from .bits import popcount, iter_bits, iter_submasks, check_width, join_sides, split_sides, permute_mask
from .connectivity import adjacency_bitsets, reachable_mask, is_connected_mask, mask_to_nodes
from .linalg import exact_matrix, characteristic_polynomial

__all__ = [
    "popcount",
    "iter_bits",
    "iter_submasks",
    "check_width",
    "join_sides",
    "split_sides",
    "permute_mask",
    "adjacency_bitsets",
    "reachable_mask",
    "is_connected_mask",
    "mask_to_nodes",
    "exact_matrix",
    "characteristic_polynomial",
]
