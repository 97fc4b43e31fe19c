"""Enumeration of connected induced vertex subsets.

Subsets are explored by backtracking over three disjoint node partitions:
*included*, *excluded* and *undecided*.  Once *included* is non-empty the
search only ever branches on an undecided neighbour of it, so every emitted
set is connected by construction.  When *included* has no undecided
neighbour left the branch is sealed: every remaining undecided node is
unreachable from the component and the branch emits exactly one set.

Partitions are plain int bitmasks passed by value, so backtracking needs no
undo step.  *excluded* is never materialised; it is the complement of the
other two.
"""
from __future__ import annotations

from typing import Iterator, List, Sequence

import networkx as nx

from cisgrowth.utils.connectivity import (
    adjacency_bitsets,
    is_connected_mask,
    mask_to_nodes,
)

# 2^BRUTEFORCE_MAX_NODES subsets is the most the brute-force oracle will scan.
BRUTEFORCE_MAX_NODES = 22


def _extend(
    adj: Sequence[int],
    included: int,
    undecided: int,
    frontier: int,
) -> Iterator[int]:
    if not undecided:
        if included:
            yield included
        return

    if not included:
        # No connectivity constraint yet: the lowest undecided node seeds the branch.
        seed = undecided & -undecided
        rest = undecided ^ seed
        yield from _extend(adj, 0, rest, 0)
        yield from _extend(adj, seed, rest, adj[seed.bit_length() - 1])
        return

    candidates = frontier & undecided
    if not candidates:
        # sealed
        yield included
        return

    pick = candidates & -candidates
    rest = undecided ^ pick
    yield from _extend(adj, included, rest, frontier)
    yield from _extend(adj, included | pick, rest, frontier | adj[pick.bit_length() - 1])


def iter_connected_masks(adj: Sequence[int]) -> Iterator[int]:
    """Yield every non-empty connected node mask of a bitset adjacency, once each.

    Recursion depth is at most len(adj) + 1.
    """
    n = len(adj)
    if n == 0:
        return
    yield from _extend(adj, 0, (1 << n) - 1, 0)


def enumerate_connected_subsets(graph: nx.Graph) -> List[frozenset]:
    """All non-empty node subsets of *graph* whose induced subgraph is connected."""
    nodes, adj = adjacency_bitsets(graph)
    return [mask_to_nodes(m, nodes) for m in iter_connected_masks(adj)]


def count_cis(graph: nx.Graph) -> int:
    """#CIS: the number of non-empty connected induced vertex subsets."""
    _, adj = adjacency_bitsets(graph)
    return sum(1 for _ in iter_connected_masks(adj))


def count_cis_bruteforce(graph: nx.Graph) -> int:
    """#CIS by testing every one of the 2^|V| - 1 non-empty subsets.

    Only meant as an oracle for small graphs; raises ValueError above
    BRUTEFORCE_MAX_NODES nodes.
    """
    _, adj = adjacency_bitsets(graph)
    n = len(adj)
    if n > BRUTEFORCE_MAX_NODES:
        raise ValueError(
            f"Brute-force #CIS is impractical for n={n}. Use count_cis() instead."
        )
    return sum(1 for mask in range(1, 1 << n) if is_connected_mask(adj, mask))
