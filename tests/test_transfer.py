"""Tests for cisgrowth.transfer: matrices, spectral radius, sanity cap."""
import random

import numpy as np
import pytest

from cisgrowth.errors import DegenerateGadgetError, SizeMismatchError
from cisgrowth.generators.gadgets import random_cycle_gadget
from cisgrowth.transfer.growth import (
    MAX_BASE,
    GrowthEstimate,
    eigenvalues,
    estimate_growth,
    lower_bound_factors,
    max_real_eigenvalue,
    spectral_radius,
)
from cisgrowth.transfer.matrix import (
    build_transfer_matrix,
    excludable_subsets,
    four_link_aggregates,
    four_link_transfer_matrix,
    left_to,
)


def test_general_and_four_link_matrices_agree():
    # arbitrary vector: the two constructions agree entry by entry
    values = list(range(16))
    assert np.array_equal(build_transfer_matrix(values, 4), four_link_transfer_matrix(values))


def test_four_link_aggregates():
    values = list(range(16))
    agg = four_link_aggregates(values)
    assert agg == {"Lc": 5 + 6 + 7, "Ld": 9 + 10 + 11, "Lcd": 13 + 14 + 15}


def test_left_to_sums_left_masks():
    values = list(range(16))
    assert left_to(values, 4, 0b10) == 8 + 9 + 10 + 11
    assert left_to(values, 4, 0) == 0 + 1 + 2 + 3


def test_excludable_subsets_skips_empty_mask():
    values = [1] * 16
    # final exit 0 would reach the empty mask, which never counts
    assert excludable_subsets(values, 4, 0b11, 0) == 0
    assert excludable_subsets(values, 4, 0b01, 0b01) == 2


def test_matrix_argument_checks():
    with pytest.raises(SizeMismatchError):
        build_transfer_matrix([0] * 8, 4)
    with pytest.raises(SizeMismatchError):
        build_transfer_matrix([0] * 8, 3)
    with pytest.raises(SizeMismatchError):
        left_to([0] * 16, 4, 0b100)
    with pytest.raises(SizeMismatchError):
        excludable_subsets([0] * 16, 4, 0b100, 0b01)


def test_spectral_radius_complex_eigenvalues():
    rotation = [[0.0, -1.0], [1.0, 0.0]]
    assert spectral_radius(rotation) == pytest.approx(1.0)
    assert max_real_eigenvalue(rotation) is None


def test_max_real_eigenvalue():
    assert max_real_eigenvalue([[1.0, 0.0], [0.0, 3.0]]) == pytest.approx(3.0)
    assert max_real_eigenvalue(np.zeros((0, 0))) is None


def test_empty_and_non_square_matrices():
    assert spectral_radius(np.zeros((0, 0))) == 0.0
    assert eigenvalues(np.zeros((0, 0))).size == 0
    with pytest.raises(SizeMismatchError):
        spectral_radius([[1.0, 2.0]])


def test_estimate_growth_sanity_cap():
    # 100^(1/2) = 10 > 2: no graph on 2 vertices has that many subsets
    assert estimate_growth([[100.0]], 2) is None
    est = estimate_growth([[4.0]], 2)
    assert est == GrowthEstimate(spectral_radius=4.0, n_nodes=2)
    assert est.base == pytest.approx(MAX_BASE)
    assert est.is_plausible


def test_estimate_growth_needs_nodes():
    with pytest.raises(DegenerateGadgetError):
        estimate_growth([[1.0]], 0)


@pytest.mark.parametrize("seed", range(5))
def test_estimates_never_exceed_cap(seed):
    rng = random.Random(seed)
    g = random_cycle_gadget(8, 3, 2, rng)
    est = g.growth_estimate()
    assert est is None or est.base <= MAX_BASE


def test_lower_bound_factors_checks_boundary():
    M = [[2.0, 1.0], [1.0, 2.0]]
    factors = lower_bound_factors(M, (1.0, 1.0))
    # (1, 1) is the eigenvector of 3, so all weight sits there
    assert sorted(np.round(factors, 9).tolist()) == [0.0, 2.0]
    with pytest.raises(SizeMismatchError):
        lower_bound_factors(M, (1.0, 2.0, 3.0))
