"""Graph families used as raw material for gadgets.

Nodes are the integers 0..n-1.  Random constructions take an explicit
``random.Random`` so that runs are reproducible from a seed.
"""
from __future__ import annotations

import random
from typing import Hashable, List, Optional, Tuple

import networkx as nx

from cisgrowth.errors import DegenerateGadgetError

Edge = Tuple[Hashable, Hashable]


def as_rng(rng: Optional[random.Random]) -> random.Random:
    return rng if rng is not None else random.Random()


def cycle_graph(n: int) -> nx.Graph:
    """C_n; for n < 3 the path on n vertices."""
    if n < 3:
        return nx.path_graph(n)
    return nx.cycle_graph(n)


def complete_graph(n: int) -> nx.Graph:
    return nx.complete_graph(n)


def ladder_graph(n: int) -> nx.Graph:
    """
    C_n with rungs i -- n-1-i for 1 <= i < (n-1)/2.

    For even n this is the 2 x n/2 ladder; for odd n the ladder on n-1
    vertices plus one vertex joined to the two ends of one side.
    """
    G = cycle_graph(n)
    i1, i2 = 1, n - 2
    while i1 < i2 - 1:
        G.add_edge(i1, i2)
        i1 += 1
        i2 -= 1
    return G


def closed_ladder_graph(n: int) -> nx.Graph:
    """ladder_graph(n) with the ends of both rails joined, making two linked cycles."""
    G = ladder_graph(n)
    if n <= 4:
        return G
    G.add_edge(0, n // 2 - 1)
    G.add_edge(n // 2, n - 1)
    return G


def spokes_graph(n: int) -> nx.Graph:
    """C_n where every vertex is also joined to the vertex opposite it."""
    G = cycle_graph(n)
    if n <= 3:
        return G
    for i in range(n // 2):
        G.add_edge(i, i + n // 2)
    return G


def grid_like_cycle(n: int) -> nx.Graph:
    """C_n with horizontal and vertical chords laid out like a grid."""
    G = cycle_graph(n)
    if n <= 3:
        return G

    # horizontal
    i1, i2 = 0, n * 3 // 4 - 1
    while i1 < n // 4:
        G.add_edge(i1, i2)
        i1 += 1
        i2 -= 1

    # vertical
    i1, i2 = n // 4, n - 1
    while i1 < n // 2:
        G.add_edge(i1, i2)
        i1 += 1
        i2 -= 1

    return G


def random_maximum_matching(graph: nx.Graph, rng: Optional[random.Random] = None) -> List[Edge]:
    """A maximum-cardinality matching chosen at random among many.

    Edges get random weights and the heaviest maximum-cardinality matching
    is returned, with each edge oriented and listed in node order.
    """
    rng = as_rng(rng)
    H = nx.Graph()
    H.add_nodes_from(graph)
    for u, v in graph.edges():
        H.add_edge(u, v, weight=rng.random())

    order = {v: i for i, v in enumerate(graph)}
    matching = []
    for u, v in nx.max_weight_matching(H, maxcardinality=True):
        matching.append((u, v) if order[u] < order[v] else (v, u))
    matching.sort(key=lambda e: (order[e[0]], order[e[1]]))
    return matching


def random_matching(graph: nx.Graph, size: int, rng: Optional[random.Random] = None) -> List[Edge]:
    """*size* edges of a random maximum matching.

    Raises DegenerateGadgetError if no matching of that size exists.
    """
    rng = as_rng(rng)
    matching = random_maximum_matching(graph, rng)
    if len(matching) < size:
        raise DegenerateGadgetError(
            f"Graph has no matching of size {size} (maximum is {len(matching)})."
        )
    return rng.sample(matching, size)


def _strip_matchings(G: nx.Graph, times: int, rng: random.Random) -> None:
    for _ in range(times):
        G.remove_edges_from(random_maximum_matching(G, rng))


def random_linked_cycle(n: int, d: int, rng: Optional[random.Random] = None) -> nx.Graph:
    """
    C_n plus random chords so that no vertex exceeds degree d.

    Built in the complement: remove the cycle and d-2 random maximum
    matchings from K_n, then complement.  If n <= d + 1 the result is K_n.
    """
    rng = as_rng(rng)
    G = complete_graph(n)
    if n <= d + 1:
        return G

    G.remove_edges_from((i, (i + 1) % n) for i in range(n))
    _strip_matchings(G, d - 2, rng)
    return nx.complement(G)


def random_bounded_degree_graph(n: int, d: int, rng: Optional[random.Random] = None) -> nx.Graph:
    """Union of d random maximum matchings of K_n, so every degree is at most d."""
    rng = as_rng(rng)
    G = complete_graph(n)
    _strip_matchings(G, d, rng)
    return nx.complement(G)
