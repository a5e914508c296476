"""Distance computation and pair generation."""

from grantham.analysis.distance import (
    DistanceMethod,
    GranthamDistances,
    grantham_distance,
    grantham_distance_exact,
    grantham_distance_original,
    grantham_distances_matrix,
    grantham_matrix,
)
from grantham.analysis.equation import grantham_equation, mean_chemical_distance, weighting_factors
from grantham.analysis.pairs import AminoAcidPairs, amino_acid_pairs

__all__ = [
    "DistanceMethod",
    "GranthamDistances",
    "grantham_distance",
    "grantham_distance_exact",
    "grantham_distance_original",
    "grantham_distances_matrix",
    "grantham_matrix",
    "grantham_equation",
    "mean_chemical_distance",
    "weighting_factors",
    "AminoAcidPairs",
    "amino_acid_pairs",
]
