from __future__ import annotations

from typing import Dict, Hashable, Optional, Sequence

import networkx as nx
import numpy as np

from cisgrowth.errors import SizeMismatchError
from cisgrowth.gadgets.gadget import Gadget
from cisgrowth.gadgets.optimize import Pairing, best_pairing, permute_path_values, spanning_count
from cisgrowth.transfer.growth import lower_bound_factors, max_real_eigenvalue
from cisgrowth.transfer.matrix import A, B, C, D, four_link_aggregates, four_link_transfer_matrix

# Masks containing a and/or b together with c and/or d.
SPANNING_MASKS = tuple(m for m in range(16) if m & (A | B) and m & (C | D))


class FourLinkGadget(Gadget):
    """
    A gadget with link nodes a, b (left) and c, d (right).

    Chaining joins c and d of one copy to a and b of the next.  Path values
    are named after the link nodes they contain, e.g. ``abd`` counts the
    connected subsets meeting exactly a, b and d.
    """

    def __init__(self, graph: nx.Graph, link_nodes: Sequence[Hashable], *, optimize: bool = False):
        if len(link_nodes) != 4:
            raise SizeMismatchError(f"FourLinkGadget needs exactly 4 link nodes, got {len(link_nodes)}.")
        super().__init__(graph, link_nodes)
        if optimize:
            self.maximize_lr()

    @property
    def a(self) -> Hashable:
        return self.link_nodes[0]

    @property
    def b(self) -> Hashable:
        return self.link_nodes[1]

    @property
    def c(self) -> Hashable:
        return self.link_nodes[2]

    @property
    def d(self) -> Hashable:
        return self.link_nodes[3]

    def maximize_lr(self) -> Pairing:
        """Relabel a, b, c, d so that the most connected subsets span left to right.

        Reuses the current path values, permuted; nothing is re-enumerated.
        """
        values = self.path_values()
        pairing = best_pairing(values)
        if pairing.order != (0, 1, 2, 3):
            links = tuple(self.link_nodes[i] for i in pairing.order)
            self.relabel_links(links, permute_path_values(values, pairing.order))
        return pairing

    # ------------------------------------------------------------------
    # Named path values
    # ------------------------------------------------------------------

    @property
    def ac(self) -> int:
        return self.path_values()[A | C]

    @property
    def ad(self) -> int:
        return self.path_values()[A | D]

    @property
    def bc(self) -> int:
        return self.path_values()[B | C]

    @property
    def bd(self) -> int:
        return self.path_values()[B | D]

    @property
    def acd(self) -> int:
        return self.path_values()[A | C | D]

    @property
    def bcd(self) -> int:
        return self.path_values()[B | C | D]

    @property
    def abc(self) -> int:
        return self.path_values()[A | B | C]

    @property
    def abd(self) -> int:
        return self.path_values()[A | B | D]

    @property
    def abcd(self) -> int:
        return self.path_values()[A | B | C | D]

    # ------------------------------------------------------------------
    # Aggregates
    # ------------------------------------------------------------------

    @property
    def lr(self) -> int:
        """Connected subsets containing a and/or b as well as c and/or d."""
        return spanning_count(self.path_values())

    @property
    def lc(self) -> int:
        """Connected subsets linking a and/or b to c but not d."""
        return four_link_aggregates(self.path_values())["Lc"]

    @property
    def ld(self) -> int:
        """Connected subsets linking a and/or b to d but not c."""
        return four_link_aggregates(self.path_values())["Ld"]

    @property
    def lcd(self) -> int:
        """Connected subsets linking a and/or b to both c and d."""
        return four_link_aggregates(self.path_values())["Lcd"]

    def spanning_path_values(self) -> Dict[int, int]:
        """Path values of the nine masks that span left to right, keyed by mask.

        Excludes the empty mask, the singletons, ab and cd.
        """
        values = self.path_values()
        return {m: values[m] for m in SPANNING_MASKS}

    # ------------------------------------------------------------------
    # Recursion matrix
    # ------------------------------------------------------------------

    def transfer_matrix(self) -> np.ndarray:
        return four_link_transfer_matrix(self.path_values())

    def max_real_eigenvalue(self) -> Optional[float]:
        """Largest eigenvalue of the 3x3 matrix, or None if it has complex eigenvalues."""
        return max_real_eigenvalue(self.transfer_matrix())

    def lower_bound_factors(self) -> np.ndarray:
        return lower_bound_factors(self.transfer_matrix(), (self.lc, self.ld, self.lcd))
