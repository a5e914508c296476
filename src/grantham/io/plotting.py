"""Plotting functions for Grantham distance matrices."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import numpy as np

from grantham.data.tables import AMINO_ACIDS


def create_distance_heatmap(
    matrix: np.ndarray,
    output_path: Path,
    labels: Sequence[str] = AMINO_ACIDS,
    title: str | None = None,
) -> None:
    """Create an annotated heatmap of a square amino acid distance matrix.

    Args:
        matrix: Square array of distances, rows and columns in ``labels`` order
        output_path: Path to save the plot (PNG, PDF, or SVG)
        labels: Tick labels for rows and columns
        title: Plot title
    """
    import matplotlib.pyplot as plt
    import seaborn as sns

    data = np.asarray(matrix, dtype=float)
    labels = list(labels)
    if data.ndim != 2 or data.shape != (len(labels), len(labels)):
        raise ValueError(
            f"Expected a {len(labels)}x{len(labels)} matrix, got shape {data.shape}"
        )

    sns.set_theme(style="white")

    fig, ax = plt.subplots(figsize=(12, 10))

    # Integer-valued tables are annotated without decimals
    fmt = ".0f" if np.allclose(data, np.round(data)) else ".1f"

    sns.heatmap(
        data,
        ax=ax,
        cmap="viridis",
        annot=True,
        fmt=fmt,
        annot_kws={"fontsize": 7},
        square=True,
        xticklabels=labels,
        yticklabels=labels,
        cbar_kws={"label": "Grantham distance"},
    )

    ax.set_title(title or "Grantham (1974) amino acid distances", fontsize=14, fontweight="bold")
    ax.tick_params(axis="x", rotation=90)
    ax.tick_params(axis="y", rotation=0)

    plt.tight_layout()
    plt.savefig(output_path, dpi=150, bbox_inches="tight")
    plt.close(fig)
