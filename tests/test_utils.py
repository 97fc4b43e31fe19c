"""Tests for cisgrowth.utils."""
from fractions import Fraction

import networkx as nx
import pytest

from cisgrowth.errors import SizeMismatchError
from cisgrowth.utils.bits import (
    check_width,
    iter_bits,
    iter_submasks,
    join_sides,
    permute_mask,
    popcount,
    split_sides,
)
from cisgrowth.utils.connectivity import (
    adjacency_bitsets,
    is_connected_mask,
    mask_to_nodes,
    reachable_mask,
)
from cisgrowth.utils.linalg import characteristic_polynomial


# --- bits ---

def test_popcount_and_iter_bits():
    assert popcount(0b1011) == 3
    assert list(iter_bits(0b1011)) == [0, 1, 3]
    assert list(iter_bits(0)) == []


def test_iter_submasks():
    assert sorted(iter_submasks(0b101)) == [0b000, 0b001, 0b100, 0b101]
    assert list(iter_submasks(0)) == [0]


def test_check_width():
    assert check_width(3, 2) == 3
    with pytest.raises(SizeMismatchError):
        check_width(4, 2)
    with pytest.raises(SizeMismatchError):
        check_width(-1, 2)


def test_join_split_sides():
    assert join_sides(0b01, 0b10, 2) == 0b1001
    assert split_sides(0b1001, 2) == (0b01, 0b10)
    with pytest.raises(SizeMismatchError):
        join_sides(0b100, 0, 2)


def test_permute_mask():
    # bit i moves to position order[i]
    assert permute_mask(0b0010, (0, 2, 1, 3)) == 0b0100
    assert permute_mask(0b0011, (0, 3, 2, 1)) == 0b1001
    assert permute_mask(0b1111, (3, 2, 1, 0)) == 0b1111


# --- connectivity ---

def test_adjacency_bitsets_path():
    nodes, adj = adjacency_bitsets(nx.path_graph(3))
    assert nodes == [0, 1, 2]
    assert adj == [0b010, 0b101, 0b010]


def test_adjacency_bitsets_ignores_self_loops():
    G = nx.Graph([(0, 0), (0, 1)])
    _, adj = adjacency_bitsets(G)
    assert adj == [0b10, 0b01]


def test_is_connected_mask():
    _, adj = adjacency_bitsets(nx.path_graph(4))
    assert is_connected_mask(adj, 0) is True
    assert is_connected_mask(adj, 0b0100) is True
    assert is_connected_mask(adj, 0b0111) is True
    assert is_connected_mask(adj, 0b1001) is False


def test_reachable_mask_within():
    _, adj = adjacency_bitsets(nx.path_graph(4))
    # from 0 without node 2 only {0, 1} is reachable
    assert reachable_mask(adj, 0b0001, 0b1011) == 0b0011
    assert reachable_mask(adj, 0b0001, 0b1111) == 0b1111


def test_mask_to_nodes():
    nodes = ["a", "b", "c"]
    assert mask_to_nodes(0b101, nodes) == frozenset({"a", "c"})


# --- linalg ---

def test_characteristic_polynomial_square_gadget_matrix():
    # eigenvalues 1 and 3 +- 2*sqrt(2)
    M = [[2, 1, 2], [1, 2, 2], [2, 2, 3]]
    assert characteristic_polynomial(M) == [1, -7, 7, -1]


def test_characteristic_polynomial_fraction():
    assert characteristic_polynomial([[0.5]]) == [1, Fraction(-1, 2)]
