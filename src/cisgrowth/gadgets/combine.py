"""Series composition of gadgets.

The combined gadget's path values are always recomputed from its own graph:
subsets can thread back and forth across the new bridge edges, so they are
not a function of the two operands' path values alone.
"""
from __future__ import annotations

from typing import TypeVar

import networkx as nx

from cisgrowth.errors import InvalidChainCountError, SizeMismatchError
from cisgrowth.gadgets.gadget import Gadget
from cisgrowth.gadgets.simple import SingleLinkGadget

G = TypeVar("G", bound=Gadget)

FIRST, SECOND = "1.", "2."


def disjoint_union(g1: nx.Graph, g2: nx.Graph) -> nx.Graph:
    """Union of two graphs with node labels prefixed '1.' and '2.'."""
    return nx.union(g1, g2, rename=(FIRST, SECOND))


def link_gadgets(first: G, second: Gadget) -> G:
    """*first* followed by *second*.

    Right-side link node i of *first* is joined to left-side link node i of
    *second* (for four links: c-a and d-b).  The result keeps the left side of
    *first* and the right side of *second*, and has the class of *first*.
    """
    if first.n_links != second.n_links:
        raise SizeMismatchError(
            f"Cannot chain a {first.n_links}-link gadget with a {second.n_links}-link gadget."
        )
    graph = disjoint_union(first.graph, second.graph)
    for out, into in zip(first.right_side, second.left_side):
        graph.add_edge(f"{FIRST}{out}", f"{SECOND}{into}")

    links = [f"{FIRST}{v}" for v in first.left_side] + [f"{SECOND}{v}" for v in second.right_side]
    return type(first)(graph, links)


def chain_gadget(gadget: G, repeats: int) -> G:
    """*repeats* copies of *gadget* in series, folded left to right."""
    if repeats < 1:
        raise InvalidChainCountError(f"Can only chain a positive number of copies, got repeats={repeats}.")
    link = gadget
    for _ in range(1, repeats):
        link = link_gadgets(link, gadget)
    return link


def link_single_link(first: SingleLinkGadget, second: SingleLinkGadget) -> SingleLinkGadget:
    """Join two single-link gadgets through a new hub node, which becomes the link node."""
    graph = disjoint_union(first.graph, second.graph)
    hub = f"{first.link_node},{second.link_node}"
    graph.add_edge(f"{FIRST}{first.link_node}", hub)
    graph.add_edge(f"{SECOND}{second.link_node}", hub)
    return SingleLinkGadget(graph, hub)


def chain_single_link(gadget: SingleLinkGadget, repeats: int) -> SingleLinkGadget:
    """*repeats* copies of *gadget*, built by repeated doubling.

    *repeats* must be a positive power of two.
    """
    if repeats < 1 or repeats & (repeats - 1):
        raise InvalidChainCountError(
            f"A single-link gadget can only be repeated a power of 2 times, got repeats={repeats}."
        )
    link = gadget
    i = 1
    while i < repeats:
        link = link_single_link(link, link)
        i *= 2
    return link
