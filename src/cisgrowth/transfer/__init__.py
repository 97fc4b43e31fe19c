from .matrix import (
    left_to,
    excludable_subsets,
    build_transfer_matrix,
    four_link_aggregates,
    four_link_transfer_matrix,
)
from .growth import (
    GrowthEstimate,
    eigenvalues,
    spectral_radius,
    estimate_growth,
    max_real_eigenvalue,
    lower_bound_factors,
)

__all__ = [
    "left_to",
    "excludable_subsets",
    "build_transfer_matrix",
    "four_link_aggregates",
    "four_link_transfer_matrix",
    "GrowthEstimate",
    "eigenvalues",
    "spectral_radius",
    "estimate_growth",
    "max_real_eigenvalue",
    "lower_bound_factors",
]
