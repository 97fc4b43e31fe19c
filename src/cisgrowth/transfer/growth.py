from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from cisgrowth.errors import DegenerateGadgetError, SizeMismatchError

# #CIS <= 2^|V|, so no honest estimate has a per-node base above this.
MAX_BASE = 2.0


@dataclass(frozen=True)
class GrowthEstimate:
    """
    Growth-rate estimate for a chained gadget.

    spectral_radius: largest eigenvalue modulus of the transfer matrix,
                     i.e. the growth factor per chained copy.
    n_nodes:         vertices per copy.
    """

    spectral_radius: float
    n_nodes: int

    @property
    def base(self) -> float:
        """#CIS of the chain grows like base^|V|."""
        return float(self.spectral_radius) ** (1.0 / self.n_nodes)

    @property
    def is_plausible(self) -> bool:
        return self.base <= MAX_BASE


def _square(M) -> np.ndarray:
    A = np.asarray(M, dtype=float)
    if A.ndim != 2 or A.shape[0] != A.shape[1]:
        raise SizeMismatchError(f"Expected a square matrix, got shape {A.shape}.")
    return A


def eigenvalues(M) -> np.ndarray:
    """Eigenvalues of a real square matrix (possibly complex)."""
    A = _square(M)
    if A.size == 0:
        return np.zeros(0, dtype=complex)
    return np.linalg.eigvals(A)


def spectral_radius(M) -> float:
    ev = eigenvalues(M)
    if ev.size == 0:
        return 0.0
    return float(np.max(np.abs(ev)))


def estimate_growth(M, n_nodes: int) -> Optional[GrowthEstimate]:
    """Spectral-radius estimate, or None when it is not a valid bound.

    An estimate is rejected when radius^(1/n_nodes) exceeds 2, which no
    graph on n_nodes vertices can reach.
    """
    if n_nodes < 1:
        raise DegenerateGadgetError(f"Need at least one node per copy, got n_nodes={n_nodes}.")
    est = GrowthEstimate(spectral_radius=spectral_radius(M), n_nodes=n_nodes)
    if not est.is_plausible:
        return None
    return est


def max_real_eigenvalue(M, *, tol: float = 1e-9) -> Optional[float]:
    """Largest eigenvalue when all eigenvalues are real, else None."""
    ev = eigenvalues(M)
    if ev.size == 0:
        return None
    if np.any(np.abs(ev.imag) > tol):
        return None
    return float(np.max(ev.real))


def lower_bound_factors(M, boundary: Sequence[float]) -> np.ndarray:
    """
    Weights of each eigenvalue in the chain count.

    With M = V diag(l) V^-1 and boundary vector c, the count after t further
    copies is sum_k factors[k] * l_k^t where

        factors[k] = (sum of column k of V) * (row k of V^-1 . c)
    """
    A = _square(M)
    c = np.asarray(boundary, dtype=float)
    if c.shape != (A.shape[0],):
        raise SizeMismatchError(
            f"Boundary vector of length {c.size} does not match a {A.shape[0]}x{A.shape[0]} matrix."
        )
    _, V = np.linalg.eig(A)
    W = np.linalg.inv(V)
    factors = V.sum(axis=0) * (W @ c)
    return np.real_if_close(factors)
