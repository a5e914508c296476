"""Static reference data from Grantham (1974)."""

from grantham.data.tables import (
    AMINO_ACIDS,
    GRANTHAM_MATRIX,
    MEAN_WEIGHTING_FACTORS,
    PROPERTY_NAMES,
    PROPERTY_TABLE,
    RHO,
)

__all__ = [
    "AMINO_ACIDS",
    "GRANTHAM_MATRIX",
    "MEAN_WEIGHTING_FACTORS",
    "PROPERTY_NAMES",
    "PROPERTY_TABLE",
    "RHO",
]
