"""Amino acid identity, indexing and code conversion."""

from grantham.core.amino_acids import (
    all_amino_acids,
    amino_acid_index,
    amino_acids,
    is_amino_acid,
)
from grantham.core.codes import as_one_letter, as_three_letter

__all__ = [
    "all_amino_acids",
    "amino_acid_index",
    "amino_acids",
    "is_amino_acid",
    "as_one_letter",
    "as_three_letter",
]
