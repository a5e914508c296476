"""Output formatters for Grantham distances and amino acid pairs."""

from __future__ import annotations

import json
from enum import Enum
from typing import TYPE_CHECKING, Optional, Sequence

import numpy as np

from grantham.data.tables import AMINO_ACIDS

if TYPE_CHECKING:
    from grantham.analysis.distance import GranthamDistances
    from grantham.analysis.pairs import AminoAcidPairs


class OutputFormat(Enum):
    """Supported output formats."""

    PRETTY = "pretty"
    TSV = "tsv"
    JSON = "json"


def format_result(
    result: GranthamDistances | AminoAcidPairs,
    format: OutputFormat = OutputFormat.PRETTY,
) -> str:
    """Format distances or pairs for output.

    Args:
        result: GranthamDistances or AminoAcidPairs
        format: Output format

    Returns:
        Formatted string representation
    """
    if format == OutputFormat.PRETTY:
        return str(result)

    elif format == OutputFormat.JSON:
        return json.dumps(result.to_dict(), indent=2)

    elif format == OutputFormat.TSV:
        return _format_tsv(result)

    else:
        raise ValueError(f"Unknown format: {format}")


def _format_tsv(result: GranthamDistances | AminoAcidPairs) -> str:
    """Format results as tab-separated values."""
    from grantham.analysis.distance import DistanceMethod, GranthamDistances
    from grantham.analysis.pairs import AminoAcidPairs

    if isinstance(result, GranthamDistances):
        lines = ["x\ty\td"]
        for x, y, d in result:
            d_str = f"{d:.0f}" if result.method == DistanceMethod.ORIGINAL else f"{d:.6f}"
            lines.append(f"{x}\t{y}\t{d_str}")
        return "\n".join(lines)

    elif isinstance(result, AminoAcidPairs):
        lines = ["x\ty"]
        lines.extend(f"{x}\t{y}" for x, y in result)
        return "\n".join(lines)

    else:
        raise TypeError(f"Unknown result type: {type(result)}")


def format_matrix(
    matrix: np.ndarray,
    format: OutputFormat = OutputFormat.PRETTY,
    labels: Sequence[str] = AMINO_ACIDS,
    decimals: int = 0,
) -> str:
    """Format a square distance matrix with amino acid row and column labels.

    Args:
        matrix: Square array, rows and columns in ``labels`` order
        format: Output format
        labels: Row/column labels
        decimals: Digits after the decimal point (pretty and TSV)

    Returns:
        Formatted string representation
    """
    matrix = np.asarray(matrix, dtype=float)
    labels = list(labels)
    if matrix.shape != (len(labels), len(labels)):
        raise ValueError(
            f"Matrix of shape {matrix.shape} does not match {len(labels)} labels"
        )

    if format == OutputFormat.JSON:
        data = {
            row_label: dict(zip(labels, (float(d) for d in row)))
            for row_label, row in zip(labels, matrix)
        }
        return json.dumps(data, indent=2)

    cells = [[f"{d:.{decimals}f}" for d in row] for row in matrix]

    if format == OutputFormat.TSV:
        lines = ["\t".join(["", *labels])]
        lines.extend("\t".join([label, *row]) for label, row in zip(labels, cells))
        return "\n".join(lines)

    elif format == OutputFormat.PRETTY:
        width = max(max(len(c) for row in cells for c in row), max(len(label) for label in labels))
        lines = [" " * 4 + " ".join(f"{label:>{width}}" for label in labels)]
        for label, row in zip(labels, cells):
            lines.append(f"{label:<4}" + " ".join(f"{c:>{width}}" for c in row))
        return "\n".join(lines)

    else:
        raise ValueError(f"Unknown format: {format}")


def format_codes(
    codes: Sequence[str],
    converted: Sequence[Optional[str]],
    format: OutputFormat = OutputFormat.PRETTY,
) -> str:
    """Format code conversions; codes that could not be converted show as NA.

    Args:
        codes: Input codes
        converted: Output of as_one_letter() or as_three_letter()
        format: Output format

    Returns:
        Formatted string representation
    """
    if format == OutputFormat.JSON:
        return json.dumps({"input": list(codes), "output": list(converted)}, indent=2)

    values = ["NA" if c is None else c for c in converted]

    if format == OutputFormat.TSV:
        lines = ["input\toutput"]
        lines.extend(f"{code}\t{value}" for code, value in zip(codes, values))
        return "\n".join(lines)

    elif format == OutputFormat.PRETTY:
        width = max((len(code) for code in codes), default=0)
        return "\n".join(f"{code:<{width}}  ->  {value}" for code, value in zip(codes, values))

    else:
        raise ValueError(f"Unknown format: {format}")
