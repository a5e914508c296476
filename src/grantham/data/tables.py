"""Reference tables from Grantham (1974), Science 185(4154): 862-864."""

from __future__ import annotations

from types import MappingProxyType

import numpy as np

# The 20 standard amino acids, in the row/column order of Table 2
AMINO_ACIDS: tuple[str, ...] = (
    "Ser", "Arg", "Leu", "Pro", "Thr", "Ala", "Val", "Gly", "Ile", "Phe",
    "Tyr", "Cys", "His", "Gln", "Asn", "Lys", "Asp", "Glu", "Met", "Trp",
)

AMINO_ACID_INDEX = MappingProxyType({aa: i for i, aa in enumerate(AMINO_ACIDS)})

# Table 2, upper triangle. Row i holds d(i, j) for j > i.
_UPPER_TRIANGLE: tuple[tuple[int, ...], ...] = (
    (110, 145, 74, 58, 99, 124, 56, 142, 155, 144, 112, 89, 68, 46, 121, 65, 80, 135, 177),
    (102, 103, 71, 112, 96, 125, 97, 97, 77, 180, 29, 43, 86, 26, 96, 54, 91, 101),
    (98, 92, 96, 32, 138, 5, 22, 36, 198, 99, 113, 153, 107, 172, 138, 15, 61),
    (38, 27, 68, 42, 95, 114, 110, 169, 77, 76, 91, 103, 108, 93, 87, 147),
    (58, 69, 59, 89, 103, 92, 149, 47, 42, 65, 78, 85, 65, 81, 128),
    (64, 60, 94, 113, 112, 195, 86, 91, 111, 106, 126, 107, 84, 148),
    (109, 29, 50, 55, 192, 84, 96, 133, 97, 152, 121, 21, 88),
    (135, 153, 147, 159, 98, 87, 80, 127, 94, 98, 127, 184),
    (21, 33, 198, 94, 109, 149, 102, 168, 134, 10, 61),
    (22, 205, 100, 116, 158, 102, 177, 140, 28, 40),
    (194, 83, 99, 143, 85, 160, 122, 36, 37),
    (174, 154, 139, 202, 154, 170, 196, 215),
    (24, 68, 32, 81, 40, 87, 115),
    (46, 53, 61, 29, 101, 130),
    (94, 23, 42, 142, 174),
    (101, 56, 95, 110),
    (45, 160, 181),
    (126, 152),
    (67,),
)

# Table 1: composition (c), polarity (p) and molecular volume (v)
PROPERTY_NAMES: tuple[str, ...] = ("c", "p", "v")

_PROPERTIES: dict[str, tuple[float, float, float]] = {
    "Ser": (1.42, 9.2, 32.0),
    "Arg": (0.65, 10.5, 124.0),
    "Leu": (0.00, 4.9, 111.0),
    "Pro": (0.39, 8.0, 32.5),
    "Thr": (0.71, 8.6, 61.0),
    "Ala": (0.00, 8.1, 31.0),
    "Val": (0.00, 5.9, 84.0),
    "Gly": (0.74, 9.0, 3.0),
    "Ile": (0.00, 5.2, 111.0),
    "Phe": (0.00, 5.2, 132.0),
    "Tyr": (0.20, 6.2, 136.0),
    "Cys": (2.75, 5.5, 55.0),
    "His": (0.58, 10.4, 96.0),
    "Gln": (0.89, 10.5, 85.0),
    "Asn": (1.33, 11.6, 56.0),
    "Lys": (0.33, 11.3, 119.0),
    "Asp": (1.38, 13.0, 54.0),
    "Glu": (0.92, 12.3, 83.0),
    "Met": (0.00, 5.7, 105.0),
    "Trp": (0.13, 5.4, 170.0),
}

# Mean weighting factors from the caption of Table 1, and the scaling factor
# from the caption of Table 2 that brings the mean distance to 100
MEAN_WEIGHTING_FACTORS = MappingProxyType({"alpha": 1.833, "beta": 0.1018, "gamma": 0.000399})
ALPHA = MEAN_WEIGHTING_FACTORS["alpha"]
BETA = MEAN_WEIGHTING_FACTORS["beta"]
GAMMA = MEAN_WEIGHTING_FACTORS["gamma"]
RHO = 50.723

# One-letter and three-letter codes, including the ambiguity codes B and Z
ONE_LETTER_CODES: tuple[str, ...] = (
    "A",  # Alanine
    "R",  # Arginine
    "N",  # Asparagine
    "D",  # Aspartic acid
    "B",  # Asparagine or aspartic acid
    "C",  # Cysteine
    "E",  # Glutamic acid
    "Q",  # Glutamine
    "Z",  # Glutamine or glutamic acid
    "G",  # Glycine
    "H",  # Histidine
    "I",  # Isoleucine
    "L",  # Leucine
    "K",  # Lysine
    "M",  # Methionine
    "F",  # Phenylalanine
    "P",  # Proline
    "S",  # Serine
    "T",  # Threonine
    "W",  # Tryptophan
    "Y",  # Tyrosine
    "V",  # Valine
)

THREE_LETTER_CODES: tuple[str, ...] = (
    "Ala", "Arg", "Asn", "Asp", "Asx", "Cys", "Glu", "Gln", "Glx", "Gly", "His",
    "Ile", "Leu", "Lys", "Met", "Phe", "Pro", "Ser", "Thr", "Trp", "Tyr", "Val",
)

THREE_TO_ONE = MappingProxyType(dict(zip(THREE_LETTER_CODES, ONE_LETTER_CODES)))
ONE_TO_THREE = MappingProxyType(dict(zip(ONE_LETTER_CODES, THREE_LETTER_CODES)))


def _build_distance_matrix() -> np.ndarray:
    """Expand the upper triangle of Table 2 into a symmetric 20x20 matrix.

    Returns:
        Read-only float array with a zero diagonal, rows and columns in
        AMINO_ACIDS order.
    """
    n = len(AMINO_ACIDS)
    matrix = np.zeros((n, n), dtype=float)

    for i, row in enumerate(_UPPER_TRIANGLE):
        if len(row) != n - i - 1:
            raise ValueError(f"Row {AMINO_ACIDS[i]} of Table 2 has {len(row)} entries")
        matrix[i, i + 1 :] = row

    matrix = matrix + matrix.T
    matrix.flags.writeable = False
    return matrix


def _build_property_table() -> np.ndarray:
    """Arrange Table 1 as a 20x3 array in AMINO_ACIDS row order."""
    table = np.array([_PROPERTIES[aa] for aa in AMINO_ACIDS], dtype=float)
    table.flags.writeable = False
    return table


# Pre-computed, read-only reference tables
GRANTHAM_MATRIX = _build_distance_matrix()
PROPERTY_TABLE = _build_property_table()
