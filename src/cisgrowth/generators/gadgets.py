from __future__ import annotations

import random
from typing import Optional

import networkx as nx

from cisgrowth.errors import DegenerateGadgetError
from cisgrowth.gadgets.four_link import FourLinkGadget
from cisgrowth.gadgets.gadget import Gadget
from cisgrowth.gadgets.simple import SingleLinkGadget, TwoLinkGadget
from cisgrowth.generators.graphs import (
    as_rng,
    cycle_graph,
    random_bounded_degree_graph,
    random_linked_cycle,
    random_matching,
)


def _check_size(n: int, links: int) -> None:
    if n < 2:
        raise DegenerateGadgetError(f"Gadgets must have at least 2 vertices, got n={n}.")
    if 2 * links > n:
        raise DegenerateGadgetError(
            f"Gadgets must have at least as many nodes as link nodes (n={n}, link pairs={links})."
        )


def gadgetize_graph(
    graph: nx.Graph,
    links: int,
    rng: Optional[random.Random] = None,
    *,
    shuffle: bool = True,
) -> Gadget:
    """Turn *graph* into a gadget with 2 * *links* link nodes.

    A random matching of *links* edges is cut out of the graph; edge i
    supplies left link node i and right link node i.  With *shuffle* the
    link order is then randomised, which is how candidates are explored.
    """
    rng = as_rng(rng)
    G = nx.Graph(graph)
    matching = random_matching(G, links, rng)

    link_nodes = [None] * (2 * links)
    for i, (u, v) in enumerate(matching):
        link_nodes[i] = u
        link_nodes[links + i] = v
        G.remove_edge(u, v)

    if shuffle:
        rng.shuffle(link_nodes)
    return Gadget(G, link_nodes)


def random_cycle_gadget(n: int, d: int, links: int, rng: Optional[random.Random] = None) -> Gadget:
    """Gadget cut from random_linked_cycle(n, d)."""
    _check_size(n, links)
    rng = as_rng(rng)
    return gadgetize_graph(random_linked_cycle(n, d, rng), links, rng)


def random_gadget(n: int, d: int, links: int, rng: Optional[random.Random] = None) -> Gadget:
    """Gadget cut from random_bounded_degree_graph(n, d)."""
    _check_size(n, links)
    rng = as_rng(rng)
    return gadgetize_graph(random_bounded_degree_graph(n, d, rng), links, rng)


def random_four_link_gadget(
    n: int,
    d: int,
    rng: Optional[random.Random] = None,
    *,
    optimize: bool = True,
) -> FourLinkGadget:
    """
    Four-link gadget from a randomly linked cycle.

    Two vertex-disjoint random edges are removed; their endpoints become
    a, b and c, d.  With *optimize* the pairing is then chosen by
    FourLinkGadget.maximize_lr().
    """
    if n <= 3:
        raise DegenerateGadgetError(f"Four-link gadgets must have at least 4 vertices, got n={n}.")
    rng = as_rng(rng)
    G = random_linked_cycle(n, d, rng)

    edges = list(G.edges())
    rng.shuffle(edges)
    a, b = edges[0]
    for c, dd in edges[1:]:
        if len({a, b, c, dd}) == 4:
            break
    else:
        raise DegenerateGadgetError("No two vertex-disjoint edges to cut link nodes from.")

    G.remove_edge(a, b)
    G.remove_edge(c, dd)
    return FourLinkGadget(G, (a, b, c, dd), optimize=optimize)


def random_two_link_gadget(n: int, d: int, rng: Optional[random.Random] = None) -> TwoLinkGadget:
    """Two-link gadget whose link nodes are the ends of a random edge (cut when n > 3)."""
    if n < 2:
        raise DegenerateGadgetError(f"Gadgets must have at least 2 vertices, got n={n}.")
    rng = as_rng(rng)
    G = random_linked_cycle(n, d, rng)
    u, v = rng.choice(list(G.edges()))
    if n > 3:
        G.remove_edge(u, v)
    return TwoLinkGadget(G, (u, v))


def random_single_link_gadget(n: int, d: int, rng: Optional[random.Random] = None) -> SingleLinkGadget:
    """
    Single-link gadget from a randomly linked cycle.

    The link node is a vertex of minimum degree.  If the graph is regular a
    random edge is cut first and one of its ends becomes the link node.
    """
    if n < 1:
        raise DegenerateGadgetError(f"Gadgets must have at least 1 vertex, got n={n}.")
    rng = as_rng(rng)
    G = random_linked_cycle(n, d, rng)

    vertices = list(G.nodes())
    rng.shuffle(vertices)
    degrees = [G.degree(v) for v in vertices]
    lo, hi = min(degrees), max(degrees)

    if lo < hi or G.number_of_edges() == 0:
        link = vertices[degrees.index(lo)]
    else:
        u, v = rng.choice(list(G.edges()))
        G.remove_edge(u, v)
        link = u if rng.random() < 0.5 else v
    return SingleLinkGadget(G, link)


def square_gadget() -> FourLinkGadget:
    """C_4 with (a, b, c, d) = (0, 1, 3, 2); chaining copies yields a ladder."""
    return FourLinkGadget(cycle_graph(4), (0, 1, 3, 2))
