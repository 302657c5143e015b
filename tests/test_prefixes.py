"""
Tests for SI prefix reading and writing.
"""

import math

import pytest

from physanalysis.algebra.prefixes import (
    read_si_prefix,
    si_prefix_index,
    write_si_prefix,
)
from physanalysis.errors import InvalidSIPrefixError


class TestReadPrefix:
    """Tests for read_si_prefix."""

    @pytest.mark.parametrize(
        "prefix, factor",
        [("k", 1e3), ("M", 1e6), ("G", 1e9), ("Y", 1e24), ("m", 1e-3), ("u", 1e-6), ("a", 1e-18)],
    )
    def test_known_prefixes(self, prefix, factor):
        """Test the factor of each prefix."""
        assert read_si_prefix(prefix) == pytest.approx(factor)

    def test_only_first_character_read(self):
        """Test that the rest of the text is ignored."""
        assert read_si_prefix("km") == pytest.approx(1000.0)

    def test_empty(self):
        """Test that an empty prefix is a ValueError."""
        with pytest.raises(ValueError):
            read_si_prefix("")

    def test_unknown(self):
        """Test that an unknown prefix raises InvalidSIPrefixError."""
        with pytest.raises(InvalidSIPrefixError):
            read_si_prefix("q")


class TestWritePrefix:
    """Tests for write_si_prefix."""

    def test_kilo(self):
        """Test 1234 renders with k and mantissa 1.234."""
        assert write_si_prefix(1234.0) == "001.234 k"

    def test_mega(self):
        """Test 1234567 renders with M."""
        assert write_si_prefix(1234567.0) == "001.235 M"

    def test_full_mantissa(self):
        """Test a mantissa using all three integer digits."""
        assert write_si_prefix(123456.0) == "123.456 k"

    def test_no_prefix(self):
        """Test values in [1, 10) take no prefix."""
        assert write_si_prefix(5.0) == "005.000"

    def test_no_prefix_for_tens(self):
        """Test that deca/hecto are not used."""
        assert write_si_prefix(12.5) == "012.500"
        assert write_si_prefix(999.9) == "999.900"

    def test_centi(self):
        """Test that centi is used inside the small band."""
        assert write_si_prefix(0.05) == "005.000 c"

    def test_micro(self):
        """Test snapping down to a multiple of three."""
        assert write_si_prefix(2e-5) == "020.000 u"

    def test_exact_power_of_ten(self):
        """Test that 1000 takes the higher prefix."""
        assert write_si_prefix(1000.0) == "001.000 k"

    def test_negative(self):
        """Test that the sign counts toward the width."""
        assert write_si_prefix(-1234.0) == "-01.234 k"

    def test_zero(self):
        """Test that zero takes no prefix."""
        assert write_si_prefix(0.0) == "000.000"

    def test_clamped_index(self):
        """Test that huge values clamp to yotta."""
        assert si_prefix_index(1e30) == 24
        assert si_prefix_index(1e-30) == -18

    def test_non_finite_index(self):
        """Test that NaN and infinity take no prefix."""
        assert si_prefix_index(math.nan) == 0
        assert si_prefix_index(math.inf) == 0
