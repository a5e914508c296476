"""grantham: Grantham (1974) amino acid distances."""

__version__ = "0.1.0"

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
from grantham.core.amino_acids import (
    all_amino_acids,
    amino_acid_index,
    amino_acids,
    amino_acids_properties,
    is_amino_acid,
)
from grantham.core.codes import as_one_letter, as_three_letter
from grantham.data.tables import MEAN_WEIGHTING_FACTORS, PROPERTY_NAMES, RHO
from grantham.errors import (
    GranthamError,
    IncompatibleLength,
    InvalidAminoAcidCode,
    InvalidMethod,
)

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
    "all_amino_acids",
    "amino_acid_index",
    "amino_acids",
    "amino_acids_properties",
    "is_amino_acid",
    "as_one_letter",
    "as_three_letter",
    "MEAN_WEIGHTING_FACTORS",
    "PROPERTY_NAMES",
    "RHO",
    "GranthamError",
    "IncompatibleLength",
    "InvalidAminoAcidCode",
    "InvalidMethod",
]
