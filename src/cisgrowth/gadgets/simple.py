from __future__ import annotations

from typing import Hashable, Optional, Sequence

import networkx as nx

from cisgrowth.cis.enumerator import iter_connected_masks
from cisgrowth.errors import DegenerateGadgetError, SizeMismatchError
from cisgrowth.gadgets.gadget import Gadget
from cisgrowth.utils.connectivity import adjacency_bitsets


class TwoLinkGadget(Gadget):
    """Gadget with one link node per side, u (left) and v (right)."""

    def __init__(self, graph: nx.Graph, link_nodes: Sequence[Hashable]):
        if len(link_nodes) != 2:
            raise SizeMismatchError(f"TwoLinkGadget needs exactly 2 link nodes, got {len(link_nodes)}.")
        super().__init__(graph, link_nodes)

    @property
    def u(self) -> Hashable:
        return self.link_nodes[0]

    @property
    def v(self) -> Hashable:
        return self.link_nodes[1]

    @property
    def cisp(self) -> int:
        """Connected subsets containing both link nodes."""
        return self.path_values()[0b11]


class SingleLinkGadget:
    """
    A graph with a single link node.

    Two copies are chained through a new hub node adjacent to both link
    nodes; the hub becomes the link node of the result.
    """

    def __init__(self, graph: nx.Graph, link_node: Hashable):
        self.graph = nx.Graph(graph)
        if link_node not in self.graph:
            raise DegenerateGadgetError(f"Link node {link_node!r} is not a node of the graph.")
        self.link_node = link_node
        self._cisp: Optional[int] = None

    def __repr__(self) -> str:
        return f"SingleLinkGadget(n={self.number_of_nodes()}, link={self.link_node!r})"

    def number_of_nodes(self) -> int:
        return self.graph.number_of_nodes()

    @property
    def cisp(self) -> int:
        """Connected subsets containing the link node."""
        if self._cisp is None:
            nodes, adj = adjacency_bitsets(self.graph)
            bit = 1 << nodes.index(self.link_node)
            self._cisp = sum(1 for m in iter_connected_masks(adj) if m & bit)
        return self._cisp
