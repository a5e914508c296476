"""The 20 standard amino acids and their position in the reference tables."""

from __future__ import annotations

from typing import Iterable

import numpy as np

from grantham.data.tables import AMINO_ACID_INDEX, AMINO_ACIDS, PROPERTY_TABLE
from grantham.errors import InvalidAminoAcidCode


def amino_acids() -> list[str]:
    """Return the three-letter codes of the 20 standard amino acids.

    The order is fixed and matches the rows and columns of the reference
    tables: Ser, Arg, Leu, Pro, Thr, Ala, Val, Gly, Ile, Phe, Tyr, Cys, His,
    Gln, Asn, Lys, Asp, Glu, Met, Trp.
    """
    return list(AMINO_ACIDS)


def is_amino_acid(code: object) -> bool:
    """Check whether a code is one of the 20 standard three-letter codes.

    Matching is case-sensitive: only the title-case form ("Ser") is accepted.
    """
    return isinstance(code, str) and code in AMINO_ACID_INDEX


def all_amino_acids(codes: Iterable[object]) -> bool:
    """Check whether every element of ``codes`` is a standard amino acid."""
    return all(is_amino_acid(code) for code in codes)


def check_amino_acids(codes: Iterable[object], argument: str) -> None:
    """Raise InvalidAminoAcidCode if any element of ``codes`` is not valid.

    Args:
        codes: Candidate three-letter codes
        argument: Name of the argument being checked, used in the message

    Raises:
        InvalidAminoAcidCode: Listing the offending values in input order
    """
    invalid = [code for code in codes if not is_amino_acid(code)]
    if invalid:
        raise InvalidAminoAcidCode(argument, invalid)


def amino_acid_index(code: str) -> int:
    """Return the 0-based row/column of ``code`` in the reference tables.

    Raises:
        InvalidAminoAcidCode: If ``code`` is not a standard amino acid
    """
    try:
        return AMINO_ACID_INDEX[code]
    except (KeyError, TypeError):
        raise InvalidAminoAcidCode("code", [code]) from None


def amino_acid_indices(codes: Iterable[str]) -> list[int]:
    """Vectorised version of amino_acid_index()."""
    return [amino_acid_index(code) for code in codes]


def amino_acids_properties() -> np.ndarray:
    """Return Table 1 of Grantham (1974) as a read-only 20x3 array.

    Columns are composition, polarity and molecular volume (see
    PROPERTY_NAMES); rows follow amino_acids() order.
    """
    return PROPERTY_TABLE
