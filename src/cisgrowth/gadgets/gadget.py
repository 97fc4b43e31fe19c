"""Gadgets: small graphs with ordered link nodes, meant to be chained in series."""
from __future__ import annotations

from typing import Hashable, Optional, Sequence, Tuple

import networkx as nx
import numpy as np

from cisgrowth.errors import DegenerateGadgetError, SizeMismatchError
from cisgrowth.gadgets.classify import classify_link_masks
from cisgrowth.transfer.growth import GrowthEstimate, estimate_growth
from cisgrowth.transfer.matrix import build_transfer_matrix, excludable_subsets, left_to
from cisgrowth.utils.bits import check_width


def validate_link_nodes(graph: nx.Graph, link_nodes: Sequence[Hashable]) -> Tuple[Hashable, ...]:
    """Return *link_nodes* as a tuple after checking they are usable in *graph*."""
    links = tuple(link_nodes)
    if len(set(links)) != len(links):
        raise DegenerateGadgetError(f"Link nodes must be pairwise distinct, got {links!r}.")
    if len(links) > graph.number_of_nodes():
        raise DegenerateGadgetError(
            f"Gadget has {graph.number_of_nodes()} nodes but {len(links)} link nodes were requested."
        )
    missing = [v for v in links if v not in graph]
    if missing:
        raise DegenerateGadgetError(f"Link nodes {missing!r} are not nodes of the graph.")
    return links


class Gadget:
    """
    A graph with an even number k of ordered link nodes.

    The first k/2 link nodes form the left side and the last k/2 the right
    side.  When two gadgets are chained, right-side node i of the first is
    joined to left-side node i of the second.

    Path values are computed on first request and cached until the link
    nodes are reassigned.
    """

    def __init__(self, graph: nx.Graph, link_nodes: Sequence[Hashable]):
        self.graph = nx.Graph(graph)
        links = validate_link_nodes(self.graph, link_nodes)
        if len(links) < 2 or len(links) % 2:
            raise SizeMismatchError(
                f"{type(self).__name__} needs a positive even number of link nodes, got {len(links)}."
            )
        self._link_nodes = links
        self._path_values: Optional[Tuple[int, ...]] = None

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(n={self.number_of_nodes()}, "
            f"m={self.graph.number_of_edges()}, links={self._link_nodes!r})"
        )

    # ------------------------------------------------------------------
    # Link nodes
    # ------------------------------------------------------------------

    @property
    def link_nodes(self) -> Tuple[Hashable, ...]:
        return self._link_nodes

    @property
    def n_links(self) -> int:
        return len(self._link_nodes)

    @property
    def half(self) -> int:
        return len(self._link_nodes) // 2

    @property
    def left_side(self) -> Tuple[Hashable, ...]:
        return self._link_nodes[: self.half]

    @property
    def right_side(self) -> Tuple[Hashable, ...]:
        return self._link_nodes[self.half :]

    def number_of_nodes(self) -> int:
        return self.graph.number_of_nodes()

    def relabel_links(
        self,
        link_nodes: Sequence[Hashable],
        path_values: Optional[Sequence[int]] = None,
    ) -> None:
        """Reassign the link nodes.

        If *path_values* is given it must already describe the new labelling;
        otherwise the cached vector is dropped and recomputed on demand.
        """
        links = validate_link_nodes(self.graph, link_nodes)
        if len(links) != self.n_links:
            raise SizeMismatchError(
                f"Expected {self.n_links} link nodes, got {len(links)}."
            )
        if path_values is not None and len(path_values) != 1 << len(links):
            raise SizeMismatchError(
                f"Path-value vector of length {len(path_values)} does not match "
                f"{len(links)} link nodes."
            )
        self._link_nodes = links
        self._path_values = tuple(path_values) if path_values is not None else None

    # ------------------------------------------------------------------
    # Path values
    # ------------------------------------------------------------------

    def path_values(self) -> Tuple[int, ...]:
        """Connected-subset counts indexed by link mask (bit i = link node i)."""
        if self._path_values is None:
            self._path_values = classify_link_masks(self.graph, self._link_nodes)
        return self._path_values

    def path_value(self, mask: int) -> int:
        check_width(mask, self.n_links)
        return self.path_values()[mask]

    def total_cis(self) -> int:
        return sum(self.path_values())

    def left_to(self, right: int) -> int:
        """Connected subsets whose right-side link nodes are exactly *right*."""
        return left_to(self.path_values(), self.n_links, right)

    def excludable_subsets(self, prev_exit: int, final_exit: int) -> int:
        return excludable_subsets(self.path_values(), self.n_links, prev_exit, final_exit)

    # ------------------------------------------------------------------
    # Transfer matrix and growth rate
    # ------------------------------------------------------------------

    def transfer_matrix(self) -> np.ndarray:
        return build_transfer_matrix(self.path_values(), self.n_links)

    def growth_estimate(self) -> Optional[GrowthEstimate]:
        """Growth estimate of the chain, or None if the matrix gives no valid bound."""
        return estimate_growth(self.transfer_matrix(), self.number_of_nodes())

    def max_eigenvalue(self) -> Optional[float]:
        est = self.growth_estimate()
        return None if est is None else est.spectral_radius
