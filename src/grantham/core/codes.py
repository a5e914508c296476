"""Conversion between one-letter and three-letter amino acid codes."""

from __future__ import annotations

from typing import Iterable, Optional

from grantham.data.tables import ONE_TO_THREE, THREE_TO_ONE


def as_one_letter(codes: str | Iterable[str]) -> list[Optional[str]]:
    """Convert three-letter amino acid codes to one-letter codes.

    Input is case-insensitive ("ser", "SER" and "Ser" all map to "S"). Besides
    the 20 standard amino acids, Asx (asparagine or aspartic acid) maps to B
    and Glx (glutamine or glutamic acid) maps to Z.

    Args:
        codes: Three-letter codes, e.g. ["Ser", "Arg", "Asx"]

    Returns:
        Uppercase one-letter codes, element-wise. Inputs that are not known
        three-letter codes (e.g. "Serine") give None.
    """
    if isinstance(codes, str):
        codes = [codes]

    return [
        THREE_TO_ONE.get(code.title()) if isinstance(code, str) else None
        for code in codes
    ]


def as_three_letter(codes: str | Iterable[str]) -> list[Optional[str]]:
    """Convert one-letter amino acid codes to three-letter codes.

    Input is case-insensitive. B and Z map to Asx and Glx respectively.

    Args:
        codes: One-letter codes, e.g. ["S", "r", "B"]

    Returns:
        Title-case three-letter codes, element-wise. Anything that is not a
        known one-letter code, including three-letter codes such as "Ser",
        gives None.
    """
    if isinstance(codes, str):
        codes = [codes]

    return [
        ONE_TO_THREE.get(code.upper()) if isinstance(code, str) else None
        for code in codes
    ]
