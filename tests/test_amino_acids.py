"""Tests for the amino acid registry and index lookup."""

import numpy as np
import pytest

from grantham.core.amino_acids import (
    all_amino_acids,
    amino_acid_index,
    amino_acid_indices,
    amino_acids,
    amino_acids_properties,
    check_amino_acids,
    is_amino_acid,
)
from grantham.errors import InvalidAminoAcidCode


class TestAminoAcids:
    """Tests for the list of standard amino acids."""

    def test_twenty_codes_in_table_order(self) -> None:
        """Test that the 20 codes come in reference table order."""
        codes = amino_acids()

        assert len(codes) == 20
        assert len(set(codes)) == 20
        assert codes[:5] == ["Ser", "Arg", "Leu", "Pro", "Thr"]
        assert codes[-1] == "Trp"

    def test_returns_a_fresh_list(self) -> None:
        """Test that mutating the returned list does not affect later calls."""
        codes = amino_acids()
        codes.append("Xaa")

        assert len(amino_acids()) == 20

    def test_ambiguity_codes_are_not_standard(self) -> None:
        """Test that Asx and Glx are not among the 20 amino acids."""
        assert "Asx" not in amino_acids()
        assert "Glx" not in amino_acids()


class TestIsAminoAcid:
    """Tests for membership checks."""

    def test_valid_codes(self) -> None:
        """Test that every standard code is recognised."""
        assert all(is_amino_acid(code) for code in amino_acids())

    def test_case_sensitive(self) -> None:
        """Test that only the title-case form is accepted."""
        assert is_amino_acid("Ser")
        assert not is_amino_acid("ser")
        assert not is_amino_acid("SER")

    def test_invalid_codes(self) -> None:
        """Test rejection of non-codes."""
        assert not is_amino_acid("Serine")
        assert not is_amino_acid("S")
        assert not is_amino_acid("Asx")
        assert not is_amino_acid(None)
        assert not is_amino_acid(1)

    def test_all_amino_acids(self) -> None:
        """Test checking a whole sequence."""
        assert all_amino_acids(["Ser", "Arg"])
        assert not all_amino_acids(["Ser", "XXX"])
        assert all_amino_acids([])

    def test_check_amino_acids_lists_invalid_values(self) -> None:
        """Test that the error names the argument and the offending codes."""
        with pytest.raises(InvalidAminoAcidCode, match="`y` must contain only") as excinfo:
            check_amino_acids(["Ser", "XXX", "ser"], "y")

        assert excinfo.value.argument == "y"
        assert excinfo.value.invalid == ["XXX", "ser"]

    def test_invalid_code_is_a_value_error(self) -> None:
        """Test that InvalidAminoAcidCode can be caught as ValueError."""
        with pytest.raises(ValueError):
            check_amino_acids(["XXX"], "x")


class TestAminoAcidIndex:
    """Tests for table index lookup."""

    def test_index_matches_order(self) -> None:
        """Test that indices follow amino_acids() order."""
        for i, code in enumerate(amino_acids()):
            assert amino_acid_index(code) == i

    def test_vectorised(self) -> None:
        """Test looking up several indices at once."""
        assert amino_acid_indices(["Ser", "Trp", "Ser"]) == [0, 19, 0]

    def test_unknown_code(self) -> None:
        """Test that unknown codes fail."""
        with pytest.raises(InvalidAminoAcidCode):
            amino_acid_index("Xaa")


class TestAminoAcidsProperties:
    """Tests for the property table."""

    def test_shape_and_values(self) -> None:
        """Test Table 1 values for a few amino acids."""
        table = amino_acids_properties()

        assert table.shape == (20, 3)
        assert table[amino_acid_index("Ser")].tolist() == [1.42, 9.2, 32.0]
        assert table[amino_acid_index("Cys")].tolist() == [2.75, 5.5, 55.0]
        assert table[amino_acid_index("Trp")].tolist() == [0.13, 5.4, 170.0]

    def test_read_only(self) -> None:
        """Test that the property table cannot be modified."""
        table = amino_acids_properties()

        with pytest.raises(ValueError):
            table[0, 0] = 99.0
        assert np.isclose(amino_acids_properties()[0, 0], 1.42)
