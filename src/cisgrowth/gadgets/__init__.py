from .classify import classify_link_masks
from .gadget import Gadget, validate_link_nodes
from .simple import TwoLinkGadget, SingleLinkGadget
from .four_link import FourLinkGadget
from .optimize import PAIRINGS, Pairing, best_pairing, permute_path_values, same_side_count
from .combine import (
    disjoint_union,
    link_gadgets,
    chain_gadget,
    link_single_link,
    chain_single_link,
)

__all__ = [
    "classify_link_masks",
    "Gadget",
    "validate_link_nodes",
    "TwoLinkGadget",
    "SingleLinkGadget",
    "FourLinkGadget",
    "PAIRINGS",
    "Pairing",
    "best_pairing",
    "permute_path_values",
    "same_side_count",
    "disjoint_union",
    "link_gadgets",
    "chain_gadget",
    "link_single_link",
    "chain_single_link",
]
