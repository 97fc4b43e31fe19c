"""
cisgrowth: growth-rate estimates for the number of connected induced subsets
of graphs built by chaining small gadgets.
"""

from .errors import (
    InvalidArgumentError,
    SizeMismatchError,
    InvalidChainCountError,
    DegenerateGadgetError,
)

# Enumeration
from .cis.enumerator import (
    iter_connected_masks,
    enumerate_connected_subsets,
    count_cis,
    count_cis_bruteforce,
)

# Gadgets
from .gadgets.classify import classify_link_masks
from .gadgets.gadget import Gadget
from .gadgets.simple import TwoLinkGadget, SingleLinkGadget
from .gadgets.four_link import FourLinkGadget
from .gadgets.optimize import best_pairing, permute_path_values
from .gadgets.combine import link_gadgets, chain_gadget, link_single_link, chain_single_link

# Transfer matrices
from .transfer.matrix import build_transfer_matrix, four_link_transfer_matrix
from .transfer.growth import GrowthEstimate, spectral_radius, estimate_growth

# Generators and search
from .generators.gadgets import (
    random_cycle_gadget,
    random_gadget,
    random_four_link_gadget,
    square_gadget,
)
from .search.best_gadget import SearchResult, search_best_gadget

# Viz
from .viz.draw import draw_gadget

# IO
from .io.graph6 import g6_to_nx, gadget_to_g6, adjacency_matrix_string

# Shared utilities
from .utils.linalg import characteristic_polynomial

__all__ = [
    # Errors
    "InvalidArgumentError",
    "SizeMismatchError",
    "InvalidChainCountError",
    "DegenerateGadgetError",
    # Enumeration
    "iter_connected_masks",
    "enumerate_connected_subsets",
    "count_cis",
    "count_cis_bruteforce",
    # Gadgets
    "classify_link_masks",
    "Gadget",
    "TwoLinkGadget",
    "SingleLinkGadget",
    "FourLinkGadget",
    "best_pairing",
    "permute_path_values",
    "link_gadgets",
    "chain_gadget",
    "link_single_link",
    "chain_single_link",
    # Transfer
    "build_transfer_matrix",
    "four_link_transfer_matrix",
    "GrowthEstimate",
    "spectral_radius",
    "estimate_growth",
    # Generators / search
    "random_cycle_gadget",
    "random_gadget",
    "random_four_link_gadget",
    "square_gadget",
    "SearchResult",
    "search_best_gadget",
    # Viz
    "draw_gadget",
    # IO
    "g6_to_nx",
    "gadget_to_g6",
    "adjacency_matrix_string",
    # Utils
    "characteristic_polynomial",
]
