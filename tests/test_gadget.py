"""Tests for cisgrowth.gadgets: path values and the general gadget."""
import networkx as nx
import numpy as np
import pytest

from cisgrowth.cis.enumerator import count_cis_bruteforce
from cisgrowth.errors import DegenerateGadgetError, SizeMismatchError
from cisgrowth.gadgets.classify import classify_link_masks
from cisgrowth.gadgets.gadget import Gadget
from cisgrowth.gadgets.simple import SingleLinkGadget, TwoLinkGadget
from cisgrowth.transfer.matrix import four_link_transfer_matrix


def _square():
    # C4 0-1-2-3-0 with a, b = 0, 1 and c, d = 3, 2
    return Gadget(nx.cycle_graph(4), (0, 1, 3, 2))


def test_single_edge_path_values():
    g = Gadget(nx.path_graph(2), (0, 1))
    assert g.path_values() == (0, 1, 1, 1)
    assert g.total_cis() == 3


def test_p3_path_values_depend_on_link_choice():
    # P3 0-1-2
    ends = Gadget(nx.path_graph(3), (0, 2))
    # {1} | {0},{0,1} | {2},{1,2} | {0,1,2}
    assert ends.path_values() == (1, 2, 2, 1)

    near = Gadget(nx.path_graph(3), (0, 1))
    # {2} | {0} | {1},{1,2} | {0,1},{0,1,2}
    assert near.path_values() == (1, 1, 2, 2)


def test_square_path_values():
    values = _square().path_values()
    # every node is a link node; only {1,3} and {0,2} are disconnected pairs
    expected = [1] * 16
    expected[0b0000] = 0
    expected[0b0110] = 0  # b, c = 1, 3
    expected[0b1001] = 0  # a, d = 0, 2
    assert values == tuple(expected)
    assert sum(values) == 13


@pytest.mark.parametrize("seed", range(6))
def test_path_values_sum_to_cis(seed):
    G = nx.gnp_random_graph(9, 0.4, seed=seed)
    g = Gadget(G, (0, 1, 2, 3))
    assert g.total_cis() == count_cis_bruteforce(G)


def test_path_values_are_cached():
    g = _square()
    first = g.path_values()
    assert g.path_values() is first


def test_classify_matches_gadget():
    G = nx.petersen_graph()
    links = (0, 5, 2, 7)
    assert classify_link_masks(G, links) == Gadget(G, links).path_values()


def test_path_value_checks_mask_width():
    g = Gadget(nx.path_graph(2), (0, 1))
    assert g.path_value(0b11) == 1
    with pytest.raises(SizeMismatchError):
        g.path_value(0b100)


def test_sides():
    g = Gadget(nx.path_graph(6), (0, 1, 2, 3, 4, 5))
    assert g.n_links == 6
    assert g.half == 3
    assert g.left_side == (0, 1, 2)
    assert g.right_side == (3, 4, 5)


def test_invalid_link_counts():
    with pytest.raises(SizeMismatchError):
        Gadget(nx.path_graph(3), (0, 1, 2))
    with pytest.raises(SizeMismatchError):
        Gadget(nx.path_graph(3), ())


def test_degenerate_link_nodes():
    with pytest.raises(DegenerateGadgetError):
        Gadget(nx.path_graph(3), (0, 0))
    with pytest.raises(DegenerateGadgetError):
        Gadget(nx.path_graph(2), (0, 1, 2, 3))
    with pytest.raises(DegenerateGadgetError):
        Gadget(nx.path_graph(3), (0, 9))


def test_graph_is_copied():
    G = nx.path_graph(3)
    g = Gadget(G, (0, 2))
    G.add_edge(0, 2)
    assert not g.graph.has_edge(0, 2)


def test_relabel_links_drops_cache():
    g = Gadget(nx.path_graph(3), (0, 2))
    assert g.path_values() == (1, 2, 2, 1)
    g.relabel_links((0, 1))
    assert g.link_nodes == (0, 1)
    assert g.path_values() == (1, 1, 2, 2)


def test_relabel_links_checks_sizes():
    g = Gadget(nx.path_graph(4), (0, 3))
    with pytest.raises(SizeMismatchError):
        g.relabel_links((0, 1, 2, 3))
    with pytest.raises(SizeMismatchError):
        g.relabel_links((3, 0), path_values=(1, 2, 3))


def test_left_to_and_excludable_subsets():
    g = _square()
    # right mask c: values 4..7 -> 1 + 1 + 0 + 1
    assert g.left_to(0b01) == 3
    # right mask cd: values 12..15
    assert g.left_to(0b11) == 4
    # final c, previous exit c: left masks avoiding a are {} and {b}
    assert g.excludable_subsets(0b01, 0b01) == 1
    # final cd, previous exit ab: only the empty left mask
    assert g.excludable_subsets(0b11, 0b11) == 1
    with pytest.raises(SizeMismatchError):
        g.left_to(0b100)


def test_general_matrix_matches_four_link_matrix():
    g = _square()
    expected = np.array([[2, 1, 2], [1, 2, 2], [2, 2, 3]], dtype=float)
    assert np.array_equal(g.transfer_matrix(), expected)
    assert np.array_equal(g.transfer_matrix(), four_link_transfer_matrix(g.path_values()))


def test_six_link_matrix_shape():
    g = Gadget(nx.cycle_graph(6), (0, 1, 2, 5, 4, 3))
    assert g.transfer_matrix().shape == (7, 7)


def test_single_edge_growth():
    # chaining single edges gives paths: #CIS grows polynomially, base 1
    g = Gadget(nx.path_graph(2), (0, 1))
    assert np.array_equal(g.transfer_matrix(), np.array([[1.0]]))
    est = g.growth_estimate()
    assert est.spectral_radius == pytest.approx(1.0)
    assert est.base == pytest.approx(1.0)
    assert g.max_eigenvalue() == pytest.approx(1.0)


def test_repr_mentions_links():
    assert "links=(0, 1, 3, 2)" in repr(_square())


# --- two-link and single-link gadgets ---

def test_two_link_gadget():
    g = TwoLinkGadget(nx.path_graph(3), (0, 2))
    assert (g.u, g.v) == (0, 2)
    assert g.cisp == 1
    with pytest.raises(SizeMismatchError):
        TwoLinkGadget(nx.cycle_graph(4), (0, 1, 2, 3))


def test_single_link_gadget():
    assert SingleLinkGadget(nx.path_graph(2), 0).cisp == 2
    # arcs of C4 through node 0: 1 + 2 + 3 + 1
    assert SingleLinkGadget(nx.cycle_graph(4), 0).cisp == 7
    with pytest.raises(DegenerateGadgetError):
        SingleLinkGadget(nx.path_graph(2), 5)
