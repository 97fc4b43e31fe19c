"""Tests for the random gadget search."""
import networkx as nx
import pytest

from cisgrowth.errors import DegenerateGadgetError
from cisgrowth.search.best_gadget import (
    _chunked,
    default_processes,
    evaluate_gadget,
    search_best_gadget,
)
from cisgrowth.transfer.growth import MAX_BASE
from cisgrowth.generators.gadgets import square_gadget


def test_chunked():
    assert list(_chunked(range(5), 2)) == [[0, 1], [2, 3], [4]]
    assert list(_chunked([], 3)) == []


def test_evaluate_gadget():
    sq = square_gadget()
    gadget, est = evaluate_gadget(sq)
    assert gadget is sq
    assert est.spectral_radius == pytest.approx(sq.max_eigenvalue())


def test_default_processes(monkeypatch):
    monkeypatch.delenv("CISGROWTH_PROCESSES", raising=False)
    assert default_processes() == 1
    monkeypatch.setenv("CISGROWTH_PROCESSES", "3")
    assert default_processes() == 3
    monkeypatch.setenv("CISGROWTH_PROCESSES", "0")
    assert default_processes() == 1


def test_small_search():
    res = search_best_gadget(n=8, d=3, links=2, iterations=6, seed=1, processes=1)
    assert res is not None
    assert res.evaluated == 6
    assert res.rejected == 0
    assert (res.n, res.d, res.links) == (8, 3, 2)
    assert res.gadget.number_of_nodes() == 8
    assert res.gadget.n_links == 4
    assert nx.is_connected(res.gadget.graph)
    assert 1.0 <= res.lower_bound <= MAX_BASE


def test_search_is_reproducible():
    r1 = search_best_gadget(n=8, d=3, links=2, iterations=5, seed=7, processes=1)
    r2 = search_best_gadget(n=8, d=3, links=2, iterations=5, seed=7, processes=1)
    assert r1.estimate == r2.estimate
    assert sorted(r1.gadget.graph.edges()) == sorted(r2.gadget.graph.edges())
    assert r1.gadget.link_nodes == r2.gadget.link_nodes


def test_search_result_does_not_depend_on_processes():
    serial = search_best_gadget(n=7, d=3, links=1, iterations=8, seed=3, processes=1)
    pooled = search_best_gadget(n=7, d=3, links=1, iterations=8, seed=3, processes=2, batch_size=3)
    assert serial.estimate == pooled.estimate
    assert serial.gadget.link_nodes == pooled.gadget.link_nodes


def test_search_progress_goes_to_stderr(capsys):
    search_best_gadget(n=6, d=3, links=1, iterations=4, seed=0, notify_interval=2, processes=1)
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "2/4" in captured.err
    assert "Omega(" in captured.err


def test_search_gives_up_on_impossible_parameters():
    # a 4-cycle cut at two disjoint edges always falls apart
    with pytest.raises(DegenerateGadgetError):
        search_best_gadget(n=4, d=2, links=2, iterations=1, seed=0, processes=1)
