"""Error types raised by grantham."""

from __future__ import annotations

from typing import Sequence


class GranthamError(Exception):
    """Base error type for grantham."""


class InvalidAminoAcidCode(GranthamError, ValueError):
    """Raised when an argument holds codes outside the 20 standard amino acids."""

    def __init__(self, argument: str, invalid: Sequence[str]):
        self.argument = argument
        self.invalid = list(invalid)
        shown = ", ".join(repr(code) for code in self.invalid)
        super().__init__(
            f"`{argument}` must contain only amino acid three-letter codes (invalid: {shown})"
        )


class IncompatibleLength(GranthamError, ValueError):
    """Raised when two code sequences cannot be recycled to a common length."""

    def __init__(self, lengths: tuple[int, int]):
        self.lengths = lengths
        super().__init__(
            f"Can't recycle `x` (size {lengths[0]}) to match `y` (size {lengths[1]}): "
            "lengths must be equal or one of them must be 1"
        )


class InvalidMethod(GranthamError, ValueError):
    """Raised when a distance method is not 'original' or 'exact'."""

    def __init__(self, method: object):
        self.method = method
        super().__init__(f"`method` must be one of 'original' or 'exact', not {method!r}")
