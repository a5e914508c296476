"""Generation of amino acid pairs."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import product
from typing import Callable, Iterator, Sequence

from grantham.core.amino_acids import amino_acids, check_amino_acids


@dataclass
class AminoAcidPairs:
    """Pairs of amino acids, as parallel columns ``x`` and ``y``."""

    x: list[str]
    y: list[str]

    def __len__(self) -> int:
        return len(self.x)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(zip(self.x, self.y))

    def __getitem__(self, index: int) -> tuple[str, str]:
        return self.x[index], self.y[index]

    def __str__(self) -> str:
        lines = [f"Amino acid pairs (n={len(self)}):", "  x    y"]
        lines.extend(f"  {x}  {y}" for x, y in self)
        return "\n".join(lines)

    def to_dict(self) -> dict:
        """Convert pairs to a dictionary."""
        return {"x": list(self.x), "y": list(self.y)}


def amino_acid_pairs(
    x: str | Sequence[str] | None = None,
    y: str | Sequence[str] | None = None,
    keep_self: bool = True,
    keep_duplicates: bool = True,
    keep_reverses: bool = True,
) -> AminoAcidPairs:
    """Generate pairs of amino acids.

    Pairs are the Cartesian product of ``x`` and ``y``, ordered by ``x``
    first: every value of ``y`` is paired with the first value of ``x``, then
    with the second, and so on. By default all 400 pairs of the 20 standard
    amino acids are generated.

    Args:
        x: Three-letter codes; defaults to amino_acids()
        y: Three-letter codes; defaults to amino_acids()
        keep_self: Keep pairs of an amino acid with itself, e.g. Ser-Ser
        keep_duplicates: Keep repeated pairs; if False only the first
            occurrence of each (x, y) is kept
        keep_reverses: Keep pairs that are the reverse of an earlier pair; if
            False, Arg-Ser is dropped when Ser-Arg came before it

    Returns:
        AminoAcidPairs in generation order

    Raises:
        InvalidAminoAcidCode: If x or y holds a non-standard code

    Examples:
        >>> len(amino_acid_pairs(keep_self=False, keep_reverses=False))
        190
    """
    x = amino_acids() if x is None else ([x] if isinstance(x, str) else list(x))
    y = amino_acids() if y is None else ([y] if isinstance(y, str) else list(y))

    check_amino_acids(x, "x")
    check_amino_acids(y, "y")

    pairs = list(product(x, y))

    if not keep_self:
        pairs = [(a, b) for a, b in pairs if a != b]

    if not keep_duplicates:
        pairs = _distinct(pairs, key=lambda pair: pair)

    if not keep_reverses:
        pairs = _distinct(pairs, key=lambda pair: tuple(sorted(pair)))

    return AminoAcidPairs(x=[a for a, _ in pairs], y=[b for _, b in pairs])


def _distinct(
    pairs: list[tuple[str, str]],
    key: Callable[[tuple[str, str]], tuple[str, ...]],
) -> list[tuple[str, str]]:
    """Keep the first pair seen for each key, preserving order."""
    seen: set[tuple[str, ...]] = set()
    kept: list[tuple[str, str]] = []
    for pair in pairs:
        k = key(pair)
        if k in seen:
            continue
        seen.add(k)
        kept.append(pair)
    return kept
