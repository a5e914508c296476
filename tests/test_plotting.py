"""Tests for plotting functionality."""

from pathlib import Path
from tempfile import TemporaryDirectory

import numpy as np
import pytest

from grantham.analysis.distance import grantham_distances_matrix, grantham_matrix
from grantham.io.plotting import create_distance_heatmap


class TestDistanceHeatmap:
    """Tests for heatmap generation."""

    def test_published_matrix(self) -> None:
        """Test heatmap of Table 2."""
        with TemporaryDirectory() as tmpdir:
            output_path = Path(tmpdir) / "grantham.png"
            create_distance_heatmap(grantham_distances_matrix(), output_path)
            assert output_path.exists()
            assert output_path.stat().st_size > 0

    def test_exact_matrix(self) -> None:
        """Test heatmap of the recomputed matrix with a custom title."""
        with TemporaryDirectory() as tmpdir:
            output_path = Path(tmpdir) / "exact.png"
            create_distance_heatmap(grantham_matrix(method="exact"), output_path, title="Exact")
            assert output_path.exists()

    def test_different_formats(self) -> None:
        """Test saving the heatmap in different formats."""
        with TemporaryDirectory() as tmpdir:
            for ext in ["png", "pdf", "svg"]:
                output_path = Path(tmpdir) / f"grantham.{ext}"
                create_distance_heatmap(grantham_distances_matrix(), output_path)
                assert output_path.exists()
                assert output_path.stat().st_size > 0

    def test_wrong_shape(self) -> None:
        """Test that a matrix not matching the labels is rejected."""
        with TemporaryDirectory() as tmpdir:
            output_path = Path(tmpdir) / "bad.png"
            with pytest.raises(ValueError, match="Expected a 20x20 matrix"):
                create_distance_heatmap(np.zeros((3, 4)), output_path)
            assert not output_path.exists()
