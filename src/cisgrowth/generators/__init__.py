from .graphs import (
    cycle_graph,
    complete_graph,
    ladder_graph,
    closed_ladder_graph,
    spokes_graph,
    grid_like_cycle,
    random_maximum_matching,
    random_matching,
    random_linked_cycle,
    random_bounded_degree_graph,
)
from .gadgets import (
    gadgetize_graph,
    random_cycle_gadget,
    random_gadget,
    random_four_link_gadget,
    random_two_link_gadget,
    random_single_link_gadget,
    square_gadget,
)

__all__ = [
    "cycle_graph",
    "complete_graph",
    "ladder_graph",
    "closed_ladder_graph",
    "spokes_graph",
    "grid_like_cycle",
    "random_maximum_matching",
    "random_matching",
    "random_linked_cycle",
    "random_bounded_degree_graph",
    "gadgetize_graph",
    "random_cycle_gadget",
    "random_gadget",
    "random_four_link_gadget",
    "random_two_link_gadget",
    "random_single_link_gadget",
    "square_gadget",
]
