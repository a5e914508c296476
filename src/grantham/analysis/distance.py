"""Grantham distance between pairs of amino acids."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Sequence

import numpy as np

from grantham.analysis.equation import grantham_equation
from grantham.core.amino_acids import amino_acid_indices, check_amino_acids
from grantham.data.tables import (
    ALPHA,
    AMINO_ACIDS,
    BETA,
    GAMMA,
    GRANTHAM_MATRIX,
    PROPERTY_TABLE,
    RHO,
)
from grantham.errors import IncompatibleLength, InvalidMethod


class DistanceMethod(Enum):
    """How distances are obtained."""

    ORIGINAL = "original"  # Published values, Table 2
    EXACT = "exact"  # Recomputed from the properties in Table 1


@dataclass
class GranthamDistances:
    """Grantham distances for amino acid pairs, as parallel columns."""

    x: list[str]
    y: list[str]
    d: list[float]
    method: DistanceMethod = DistanceMethod.ORIGINAL

    def __len__(self) -> int:
        return len(self.d)

    def __iter__(self) -> Iterator[tuple[str, str, float]]:
        return iter(zip(self.x, self.y, self.d))

    def __getitem__(self, index: int) -> tuple[str, str, float]:
        return self.x[index], self.y[index], self.d[index]

    def __str__(self) -> str:
        lines = [f"Grantham distances ({self.method.value}):", "  x    y         d"]
        for x, y, d in self:
            lines.append(f"  {x}  {y}  {_format_distance(d, self.method):>8}")
        return "\n".join(lines)

    def to_dict(self) -> dict:
        """Convert results to a dictionary."""
        return {
            "method": self.method.value,
            "x": list(self.x),
            "y": list(self.y),
            "d": [float(d) for d in self.d],
        }


def _format_distance(d: float, method: DistanceMethod) -> str:
    if method == DistanceMethod.ORIGINAL:
        return f"{d:.0f}"
    return f"{d:.4f}"


def _as_codes(codes: str | Sequence[str]) -> list[str]:
    """A single code counts as a length-1 sequence."""
    if isinstance(codes, str):
        return [codes]
    return list(codes)


def _as_method(method: str | DistanceMethod) -> DistanceMethod:
    if isinstance(method, DistanceMethod):
        return method
    try:
        return DistanceMethod(method)
    except ValueError:
        raise InvalidMethod(method) from None


def recycle(x: Sequence[str], y: Sequence[str]) -> tuple[list[str], list[str]]:
    """Bring two sequences to a common length.

    Sequences of equal length are returned as they are. If one of them has
    length 1 its single value is repeated to match the other; this includes
    recycling a length-1 sequence against an empty one, giving two empty
    sequences.

    Raises:
        IncompatibleLength: If lengths differ and neither is 1
    """
    x, y = list(x), list(y)

    if len(x) == len(y):
        return x, y
    if len(x) == 1:
        return x * len(y), y
    if len(y) == 1:
        return x, y * len(x)

    raise IncompatibleLength((len(x), len(y)))


def grantham_distance_original(x: Sequence[str], y: Sequence[str]) -> GranthamDistances:
    """Look up Grantham distances in Table 2 of Grantham (1974).

    ``x`` and ``y`` must already be of equal length and contain only standard
    amino acids; use grantham_distance() for validation and recycling.

    Returns:
        GranthamDistances with the published integer distances
    """
    rows = amino_acid_indices(x)
    cols = amino_acid_indices(y)
    d = GRANTHAM_MATRIX[rows, cols]

    return GranthamDistances(x=list(x), y=list(y), d=d.tolist(), method=DistanceMethod.ORIGINAL)


def grantham_distance_exact(
    x: Sequence[str],
    y: Sequence[str],
    alpha: float = ALPHA,
    beta: float = BETA,
    gamma: float = GAMMA,
    rho: float = RHO,
) -> GranthamDistances:
    """Compute Grantham distances anew from the properties in Table 1.

    Unlike the published Table 2 the results are not rounded, so they differ
    from the original method by about one unit for several pairs.

    ``x`` and ``y`` must already be of equal length and contain only standard
    amino acids; use grantham_distance() for validation and recycling.

    Returns:
        GranthamDistances with unrounded distances
    """
    x_props = PROPERTY_TABLE[amino_acid_indices(x)]
    y_props = PROPERTY_TABLE[amino_acid_indices(y)]

    d = grantham_equation(
        c_i=x_props[:, 0],
        c_j=y_props[:, 0],
        p_i=x_props[:, 1],
        p_j=y_props[:, 1],
        v_i=x_props[:, 2],
        v_j=y_props[:, 2],
        alpha=alpha,
        beta=beta,
        gamma=gamma,
        rho=rho,
    )

    return GranthamDistances(
        x=list(x), y=list(y), d=np.atleast_1d(d).tolist(), method=DistanceMethod.EXACT
    )


def grantham_distance(
    x: str | Sequence[str],
    y: str | Sequence[str],
    method: str | DistanceMethod = "original",
    alpha: float = ALPHA,
    beta: float = BETA,
    gamma: float = GAMMA,
    rho: float = RHO,
) -> GranthamDistances:
    """Calculate the Grantham distance for pairs of amino acids.

    Amino acids in ``x`` and ``y`` are paired element-wise. A length-1
    argument is recycled to the length of the other.

    The "original" method (default) returns the distances published in
    Table 2 of Grantham (1974). The "exact" method recomputes them from the
    side chain properties in Table 1 with grantham_equation(), using the
    supplied constants, and does not round.

    Args:
        x: Three-letter codes, e.g. "Ser" or ["Ser", "Arg"]
        y: Three-letter codes
        method: "original" or "exact"
        alpha: Composition weight (exact method only)
        beta: Polarity weight (exact method only)
        gamma: Molecular volume weight (exact method only)
        rho: Scaling factor (exact method only)

    Returns:
        GranthamDistances with one (x, y, d) row per recycled pair

    Raises:
        InvalidAminoAcidCode: If x or y holds a non-standard code
        IncompatibleLength: If x and y cannot be recycled to a common length
        InvalidMethod: If method is neither "original" nor "exact"

    Examples:
        >>> grantham_distance("Ser", ["Phe", "Leu"]).d
        [155.0, 145.0]
    """
    x = _as_codes(x)
    y = _as_codes(y)

    check_amino_acids(x, "x")
    check_amino_acids(y, "y")

    x, y = recycle(x, y)
    method = _as_method(method)

    if method == DistanceMethod.ORIGINAL:
        return grantham_distance_original(x, y)

    return grantham_distance_exact(x, y, alpha=alpha, beta=beta, gamma=gamma, rho=rho)


def grantham_distances_matrix() -> np.ndarray:
    """Return Table 2 of Grantham (1974) as a read-only 20x20 array.

    Rows and columns follow amino_acids() order.
    """
    return GRANTHAM_MATRIX


def grantham_matrix(
    method: str | DistanceMethod = "original",
    alpha: float = ALPHA,
    beta: float = BETA,
    gamma: float = GAMMA,
    rho: float = RHO,
) -> np.ndarray:
    """Distances between all 20 standard amino acids as a 20x20 matrix.

    Args:
        method: "original" for Table 2, or "exact" to compute every entry
            from Table 1 with the given constants

    Returns:
        Read-only symmetric array with a zero diagonal, rows and columns
        in amino_acids() order
    """
    method = _as_method(method)
    if method == DistanceMethod.ORIGINAL:
        return GRANTHAM_MATRIX

    n = len(AMINO_ACIDS)
    result = grantham_distance_exact(
        [aa for aa in AMINO_ACIDS for _ in range(n)],
        list(AMINO_ACIDS) * n,
        alpha=alpha,
        beta=beta,
        gamma=gamma,
        rho=rho,
    )
    matrix = np.array(result.d).reshape(n, n)
    matrix.flags.writeable = False
    return matrix
