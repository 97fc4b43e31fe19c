from __future__ import annotations

from typing import Hashable, Sequence, Tuple

import networkx as nx

from cisgrowth.cis.enumerator import iter_connected_masks
from cisgrowth.utils.connectivity import adjacency_bitsets


def classify_link_masks(graph: nx.Graph, link_nodes: Sequence[Hashable]) -> Tuple[int, ...]:
    """
    Path-value vector of *graph* for the ordered *link_nodes*.

    values[m] = number of connected induced subsets whose intersection with
    the link nodes is exactly {link_nodes[i] : bit i of m is set}.
    The empty subset is not counted, so sum(values) == #CIS.
    """
    nodes, adj = adjacency_bitsets(graph)
    index = {v: i for i, v in enumerate(nodes)}
    link_bits = [1 << index[v] for v in link_nodes]

    values = [0] * (1 << len(link_bits))
    for subset in iter_connected_masks(adj):
        m = 0
        for i, b in enumerate(link_bits):
            if subset & b:
                m |= 1 << i
        values[m] += 1
    return tuple(values)
