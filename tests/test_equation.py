"""Tests for Grantham's distance equation and weighting constants."""

import numpy as np
import pytest

from grantham.analysis.equation import grantham_equation, mean_chemical_distance, weighting_factors
from grantham.data.tables import MEAN_WEIGHTING_FACTORS, RHO

# Table 1 values for Ser and Phe
SER = {"c": 1.42, "p": 9.2, "v": 32.0}
PHE = {"c": 0.0, "p": 5.2, "v": 132.0}


def _equation(a: dict, b: dict, **kwargs) -> float:
    return grantham_equation(a["c"], b["c"], a["p"], b["p"], a["v"], b["v"], **kwargs)


class TestGranthamEquation:
    """Tests for grantham_equation()."""

    def test_published_pair(self) -> None:
        """Test Ser-Phe against a hand-computed value (Table 2 gives 155)."""
        d = _equation(SER, PHE)

        assert isinstance(d, float)
        assert d == pytest.approx(154.8079, abs=1e-3)

    def test_identical_properties(self) -> None:
        """Test that equal properties give a zero distance."""
        assert _equation(SER, SER) == 0.0

    def test_symmetric(self) -> None:
        """Test that swapping i and j does not change the distance."""
        assert _equation(SER, PHE) == pytest.approx(_equation(PHE, SER))

    def test_default_constants(self) -> None:
        """Test the published default constants."""
        assert MEAN_WEIGHTING_FACTORS == {"alpha": 1.833, "beta": 0.1018, "gamma": 0.000399}
        assert RHO == 50.723

    def test_rho_scales_linearly(self) -> None:
        """Test that rho=1 gives the unscaled distance."""
        unscaled = _equation(SER, PHE, rho=1.0)

        assert unscaled == pytest.approx(3.052026, abs=1e-5)
        assert _equation(SER, PHE) == pytest.approx(RHO * unscaled)

    def test_constants_are_independent(self) -> None:
        """Test that each weight only affects its own property."""
        # Only composition differs: d = rho * sqrt(alpha) * |dc|
        d = grantham_equation(1.0, 0.0, 5.0, 5.0, 10.0, 10.0, alpha=4.0, beta=0.0, gamma=0.0, rho=1.0)
        assert d == pytest.approx(2.0)

        # Only polarity differs
        d = grantham_equation(0.0, 0.0, 3.0, 0.0, 10.0, 10.0, alpha=0.0, beta=1.0, gamma=0.0, rho=1.0)
        assert d == pytest.approx(3.0)

        # Only volume differs
        d = grantham_equation(0.0, 0.0, 0.0, 0.0, 10.0, 6.0, alpha=0.0, beta=0.0, gamma=1.0, rho=2.0)
        assert d == pytest.approx(8.0)

    def test_vectorised(self) -> None:
        """Test element-wise evaluation over arrays."""
        d = grantham_equation(
            [SER["c"], SER["c"]],
            [PHE["c"], SER["c"]],
            [SER["p"], SER["p"]],
            [PHE["p"], SER["p"]],
            [SER["v"], SER["v"]],
            [PHE["v"], SER["v"]],
        )

        assert isinstance(d, np.ndarray)
        assert d.shape == (2,)
        assert d[0] == pytest.approx(154.8079, abs=1e-3)
        assert d[1] == 0.0


class TestMeanChemicalDistance:
    """Tests for the mean chemical distances and derived weights."""

    def test_table1_distances(self) -> None:
        """Test mean distances of composition, polarity and volume."""
        distances = mean_chemical_distance()

        assert distances == {"c": 0.739, "p": 3.134, "v": 50.06}

    def test_weighting_factors_close_to_published(self) -> None:
        """Test that derived weights are close to the published ones."""
        weights = weighting_factors()

        assert weights["alpha"] == pytest.approx(1.833, rel=2e-3)
        assert weights["alpha"] != pytest.approx(1.833, rel=1e-4)
        assert weights["beta"] == pytest.approx(0.1018, rel=1e-3)
        assert weights["gamma"] == pytest.approx(0.000399, rel=1e-3)

    def test_custom_table(self) -> None:
        """Test distances over a small custom property table."""
        table = [[0.0, 0.0, 0.0], [1.0, 2.0, 4.0], [2.0, 4.0, 8.0]]

        # Pairwise |differences| per column: (1, 2, 1), (2, 4, 2), (4, 8, 4)
        distances = mean_chemical_distance(table)

        assert distances["c"] == pytest.approx(4 / 3, abs=1e-3)
        assert distances["p"] == pytest.approx(8 / 3, abs=1e-3)
        assert distances["v"] == pytest.approx(16 / 3, abs=1e-3)

    def test_invalid_table(self) -> None:
        """Test that malformed tables are rejected."""
        with pytest.raises(ValueError, match="property table"):
            mean_chemical_distance([[1.0, 2.0], [3.0, 4.0]])
        with pytest.raises(ValueError, match="At least two"):
            mean_chemical_distance([[1.0, 2.0, 3.0]])
