"""Grantham's distance equation and its weighting constants."""

from __future__ import annotations

from typing import Mapping

import numpy as np
from numpy.typing import ArrayLike
from scipy.spatial.distance import pdist

from grantham.data.tables import ALPHA, BETA, GAMMA, PROPERTY_NAMES, PROPERTY_TABLE, RHO


def grantham_equation(
    c_i: ArrayLike,
    c_j: ArrayLike,
    p_i: ArrayLike,
    p_j: ArrayLike,
    v_i: ArrayLike,
    v_j: ArrayLike,
    alpha: float = ALPHA,
    beta: float = BETA,
    gamma: float = GAMMA,
    rho: float = RHO,
) -> float | np.ndarray:
    """Compute Grantham's distance from amino acid side chain properties.

    d = rho * sqrt(alpha * (c_i - c_j)^2 + beta * (p_i - p_j)^2 + gamma * (v_i - v_j)^2)

    The three properties are composition (c, atomic weight ratio of
    non-carbon elements in end groups or rings to carbons in the side chain),
    polarity (p) and molecular volume (v). Each squared difference is
    weighted by the inverse square of the mean distance found with that
    property alone; rho scales the result so that the mean over all 190
    pairs of standard amino acids is 100.

    Args:
        c_i: Composition of the ith amino acid
        c_j: Composition of the jth amino acid
        p_i: Polarity of the ith amino acid
        p_j: Polarity of the jth amino acid
        v_i: Molecular volume of the ith amino acid
        v_j: Molecular volume of the jth amino acid
        alpha: Composition weight (Grantham 1974, p. 863)
        beta: Polarity weight
        gamma: Molecular volume weight
        rho: Scaling factor from the caption of Table 2

    Returns:
        A float for scalar inputs, otherwise an array of distances computed
        element-wise (numpy broadcasting rules apply)
    """
    c_i, c_j, p_i, p_j, v_i, v_j = (
        np.asarray(value, dtype=float) for value in (c_i, c_j, p_i, p_j, v_i, v_j)
    )

    d = rho * np.sqrt(
        alpha * (c_i - c_j) ** 2
        + beta * (p_i - p_j) ** 2
        + gamma * (v_i - v_j) ** 2
    )

    if d.ndim == 0:
        return float(d)
    return d


def mean_chemical_distance(properties: ArrayLike | None = None) -> dict[str, float]:
    """Mean absolute difference of each property over all unique pairs.

    For the 20 amino acids this averages over the 190 entries of the strictly
    lower triangle of each property's pairwise difference matrix. Values are
    rounded to 4 significant digits, then to 3 decimals.

    Args:
        properties: An (n, 3) array of composition, polarity and volume.
            Defaults to Table 1 of Grantham (1974).

    Returns:
        Dict mapping "c", "p" and "v" to their mean chemical distance
    """
    table = PROPERTY_TABLE if properties is None else np.asarray(properties, dtype=float)

    if table.ndim != 2 or table.shape[1] != len(PROPERTY_NAMES):
        raise ValueError(f"Expected an (n, 3) property table, got shape {table.shape}")
    if table.shape[0] < 2:
        raise ValueError("At least two amino acids are needed to compute distances")

    distances = {}
    for name, column in zip(PROPERTY_NAMES, table.T):
        mean = float(np.mean(pdist(column[:, np.newaxis], metric="cityblock")))
        distances[name] = round(float(f"{mean:.4g}"), 3)

    return distances


def weighting_factors(distances: Mapping[str, float] | None = None) -> dict[str, float]:
    """Convert mean chemical distances into the weights alpha, beta and gamma.

    Each weight is the inverse square of the corresponding mean distance.
    Computed from Table 1 this gives alpha ~1.831, about 0.1% below the
    published 1.833, which remains the default everywhere.

    Args:
        distances: Output of mean_chemical_distance(); computed from
            Table 1 if not provided

    Returns:
        Dict with keys "alpha", "beta" and "gamma"
    """
    if distances is None:
        distances = mean_chemical_distance()

    return {
        weight: 1.0 / distances[name] ** 2
        for weight, name in zip(("alpha", "beta", "gamma"), PROPERTY_NAMES)
    }
