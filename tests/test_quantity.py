"""
Tests for Quantity construction, arithmetic, conversion and display.
"""

import math

import pytest

from physanalysis import Quantity, QuantityDimension, match_units_to
from physanalysis.catalog import derived, si, ureg
from physanalysis.errors import (
    AffineUnitError,
    DimensionMismatchError,
    UnitMismatchError,
)
from physanalysis.models.display import DisplayOptions


class TestConstruction:
    """Tests for the ways of building a quantity."""

    def test_from_text(self):
        """Test parsing mass into grams."""
        force = Quantity("123.456 kg m s^-2")
        assert force.value == pytest.approx(123456.0)
        assert force.dimension == derived.NEWTON.dimension

    def test_parse_matches_constructor(self):
        """Test that parse and the text constructor agree."""
        assert Quantity.parse("5 m") == Quantity(5, si.METER)

    def test_from_units(self):
        """Test a number with a unit list."""
        q = Quantity(5, si.METER, si.SECOND)
        assert q.value == 5.0
        assert q.dimension.has_dimension(si.LENGTH, 1.0)
        assert q.dimension.has_dimension(si.TIME, 1.0)

    def test_from_scaled_unit(self):
        """Test that kilograms are stored in grams."""
        assert Quantity(2, si.KILOGRAM).value == pytest.approx(2000.0)

    def test_from_composite_unit(self):
        """Test that composites substitute their expression."""
        q = Quantity(3, derived.NEWTON)
        assert q.value == pytest.approx(3000.0)
        assert q.dimension == derived.NEWTON.dimension

    def test_from_vector(self):
        """Test a number with a dimension vector."""
        vector = QuantityDimension.from_units(si.METER)
        assert Quantity(4.0, vector).dimension is vector

    def test_dimensionless(self):
        """Test a bare number."""
        assert Quantity(0.5).is_dimensionless
        assert Quantity().value == 0.0

    def test_unit_mismatch(self):
        """Test that two units of one dimension are rejected."""
        with pytest.raises(UnitMismatchError):
            Quantity(5, si.METER, si.FOOT)

    def test_text_with_units_rejected(self):
        """Test that text and units cannot be combined."""
        with pytest.raises(TypeError):
            Quantity("5 m", si.METER)

    def test_immutable(self):
        """Test that attributes cannot be assigned."""
        q = Quantity("5 m")
        with pytest.raises(AttributeError):
            q._value = 6.0

    def test_unhashable(self):
        """Test that quantities are not hashable."""
        with pytest.raises(TypeError):
            hash(Quantity("5 m"))


class TestAddition:
    """Tests for addition and subtraction."""

    def test_same_units(self):
        """Test adding quantities in the same unit."""
        total = Quantity("2 m") + Quantity("3 m")
        assert total.value == pytest.approx(5.0)

    def test_result_in_left_units(self):
        """Test that 1 m + 1 ft is 1.3048 m."""
        total = Quantity(1, si.METER) + Quantity(1, si.FOOT)
        assert total.value == pytest.approx(1.3048)
        assert total.dimension.get_units(si.LENGTH)[0] is si.METER

    def test_add_then_subtract(self):
        """Test that (q + q2) - q2 recovers q."""
        q = Quantity(1.5, si.METER)
        q2 = Quantity(2.0, si.FOOT)
        assert ((q + q2) - q2).value == pytest.approx(q.value)

    def test_dimension_mismatch(self):
        """Test that adding meters and seconds raises."""
        with pytest.raises(DimensionMismatchError):
            Quantity(5, si.METER) + Quantity(3, si.SECOND)
        with pytest.raises(DimensionMismatchError):
            Quantity("5 m") - Quantity("3 s")

    def test_numbers_promoted(self):
        """Test that plain numbers are dimensionless quantities."""
        assert (Quantity(2.0) + 1).value == 3.0
        assert (1 - Quantity(2.0)).value == -1.0
        with pytest.raises(DimensionMismatchError):
            Quantity("2 m") + 1


class TestMultiplication:
    """Tests for multiplication, division and powers."""

    def test_area(self):
        """Test that 2 m * 3 m = 6 m^2."""
        area = Quantity("2 m") * Quantity("3 m")
        assert area.value == pytest.approx(6.0)
        assert area.dimension.get_units(si.LENGTH) == (si.METER, 2.0)

    def test_mixed_units_rejected(self):
        """Test that meters times feet is a unit mismatch."""
        with pytest.raises(UnitMismatchError):
            Quantity(1, si.METER) * Quantity(1, si.FOOT)
        with pytest.raises(UnitMismatchError):
            Quantity(1, si.METER) / Quantity(1, si.FOOT)

    def test_shared_unit_powers_combine(self):
        """Test that m * m^2 is m^3 and m^3 / m is m^2."""
        volume = Quantity("2 m") * Quantity("3 m^2")
        assert volume.value == pytest.approx(6.0)
        assert volume.dimension.get_units(si.LENGTH) == (si.METER, 3.0)
        area = volume / Quantity("2 m")
        assert area.dimension.get_units(si.LENGTH) == (si.METER, 2.0)

    def test_disjoint_units_combine(self):
        """Test that feet times seconds keeps both units."""
        product = Quantity(2, si.FOOT) * Quantity(3, si.SECOND)
        assert product.value == pytest.approx(6.0)
        assert product.dimension.get_units(si.LENGTH) == (si.FOOT, 1.0)

    def test_division_cancels(self):
        """Test that dividing like dimensions gives a dimensionless result."""
        ratio = Quantity("6 m") / Quantity("2 m")
        assert ratio.value == pytest.approx(3.0)
        assert ratio.is_dimensionless

    def test_speed(self):
        """Test dividing distance by time."""
        speed = Quantity("10 km") / Quantity(5, si.MINUTE)
        assert speed.value == pytest.approx(2000.0)
        assert speed.dimension.get_units(si.TIME) == (si.MINUTE, -1.0)

    def test_scalar_both_sides(self):
        """Test scaling by a number on either side."""
        assert (Quantity("2 m") * 3).value == pytest.approx(6.0)
        assert (3 * Quantity("2 m")).value == pytest.approx(6.0)
        assert (Quantity("6 m") / 3).value == pytest.approx(2.0)

    def test_reciprocal(self):
        """Test dividing a number by a quantity."""
        frequency = 1 / Quantity("2 s")
        assert frequency.value == pytest.approx(0.5)
        assert frequency.dimension.has_dimension(si.TIME, -1.0)

    def test_division_by_zero(self):
        """Test that division by zero raises."""
        with pytest.raises(ZeroDivisionError):
            Quantity("1 m") / 0

    def test_power(self):
        """Test raising to a number or dimensionless quantity."""
        assert (Quantity("3 m") ** 2).dimension.has_dimension(si.LENGTH, 2.0)
        assert (Quantity("3 m") ** Quantity(2.0)).value == pytest.approx(9.0)

    def test_fractional_power_of_negative(self):
        """Test that a negative magnitude has no real fractional power."""
        with pytest.raises(ValueError):
            Quantity("-4 m^2") ** 0.5
        assert (Quantity("-2 m") ** 3).value == pytest.approx(-8.0)
        assert (Quantity("-2 m") ** 2.0).value == pytest.approx(4.0)

    def test_power_must_be_dimensionless(self):
        """Test that a dimensioned exponent raises."""
        with pytest.raises(DimensionMismatchError):
            Quantity("3 m") ** Quantity("2 m")

    def test_sqrt(self):
        """Test that sqrt halves every power."""
        root = Quantity("9 m^2").sqrt()
        assert root.value == pytest.approx(3.0)
        assert root.dimension.has_dimension(si.LENGTH, 1.0)

    def test_unary(self):
        """Test negation and absolute value."""
        assert (-Quantity("2 m")).value == -2.0
        assert abs(Quantity("-2 m")).value == 2.0


UNIT_PAIRS = [
    (first, second)
    for dimension in ureg.dimensions
    for first in ureg.units_of(dimension)
    for second in ureg.units_of(dimension)
    if first is not second
]


class TestConversion:
    """Tests for unit conversion."""

    @pytest.mark.parametrize(
        "first, second", UNIT_PAIRS, ids=[f"{a.symbol}-{b.symbol}" for a, b in UNIT_PAIRS]
    )
    def test_round_trip_every_unit(self, first, second):
        """Test converting between every pair of units of one dimension and back."""
        there = Quantity(12.5, first).convert_unit(second)
        assert there.dimension.get_units(first.dimension) == (second, 1.0)
        back = there.convert_unit(first)
        assert back.value == pytest.approx(12.5)
        assert back.dimension == Quantity(12.5, first).dimension

    def test_feet_to_meters_round_trip(self):
        """Test converting there and back."""
        meters = Quantity(100, si.FOOT).convert_unit(si.METER)
        assert meters.value == pytest.approx(30.48)
        assert meters.convert_unit(si.FOOT).value == pytest.approx(100.0)

    def test_celsius_to_kelvin(self):
        """Test an offset conversion to the base unit."""
        assert Quantity(25, si.CELSIUS).convert_unit(si.KELVIN).value == pytest.approx(298.15)
        assert Quantity(0, si.KELVIN).convert_unit(si.CELSIUS).value == pytest.approx(-273.15)

    def test_celsius_to_fahrenheit(self):
        """Test a conversion between two offset units."""
        fahrenheit = Quantity(25, si.CELSIUS).convert_unit(si.FAHRENHEIT)
        assert fahrenheit.value == pytest.approx(77.0)
        assert fahrenheit.convert_unit(si.CELSIUS).value == pytest.approx(25.0)

    def test_affine_power_rejected(self):
        """Test that squared Celsius cannot be converted."""
        with pytest.raises(AffineUnitError):
            Quantity(1, si.CELSIUS, si.CELSIUS).convert_unit(si.KELVIN)

    def test_absent_dimension_unchanged(self):
        """Test converting a unit the quantity does not use."""
        q = Quantity("5 m")
        assert q.convert_unit(si.SECOND) is q
        assert q.convert_unit(si.METER) is q

    def test_power_applied(self):
        """Test that the factor is raised to the stored power."""
        area = Quantity(1, si.FOOT, si.FOOT).convert_unit(si.INCH)
        assert area.value == pytest.approx(144.0)

    def test_to_several_units(self):
        """Test converting speed to meters per second."""
        speed = Quantity("10 km") / Quantity(5, si.MINUTE)
        converted = speed.to(si.METER, si.SECOND)
        assert converted.value == pytest.approx(2000.0 / 60.0)
        assert speed.magnitude_in(si.METER, si.SECOND) == pytest.approx(2000.0 / 60.0)

    def test_to_mismatched_units(self):
        """Test that two units for one dimension are rejected."""
        with pytest.raises(UnitMismatchError):
            Quantity("5 m").to(si.METER, si.FOOT)

    def test_match_units_to(self):
        """Test rescaling to a unit list without offsets."""
        q = Quantity(1, si.FOOT, si.SECOND)
        matched = match_units_to(q, si.METER, si.MINUTE)
        assert matched.value == pytest.approx(0.3048 / 60.0)
        assert matched.dimension.get_units(si.LENGTH)[0] is si.METER
        with pytest.raises(UnitMismatchError):
            match_units_to(q, si.METER, si.FOOT)

    def test_apply_unit(self):
        """Test reading a magnitude in another unit without changing it."""
        assert Quantity(180, si.DEGREE).apply_unit(si.RADIAN) == pytest.approx(math.pi)


class TestTrigonometry:
    """Tests for sin, cos and tan."""

    def test_degrees(self):
        """Test the sine of 90 degrees."""
        assert Quantity(90, si.DEGREE).sin().value == pytest.approx(1.0)

    def test_radians(self):
        """Test the cosine of pi radians."""
        result = Quantity(math.pi, si.RADIAN).cos()
        assert result.value == pytest.approx(-1.0)
        assert result.is_dimensionless

    def test_tangent(self):
        """Test the tangent of 45 degrees."""
        assert Quantity("45 deg").tan().value == pytest.approx(1.0)

    def test_not_an_angle(self):
        """Test that trig on a length raises."""
        with pytest.raises(DimensionMismatchError):
            Quantity("1 m").sin()

    def test_angle_with_extra_dimension(self):
        """Test that the vector must be exactly Angle^1."""
        with pytest.raises(DimensionMismatchError):
            Quantity(1, si.RADIAN, si.SECOND).cos()
        with pytest.raises(DimensionMismatchError):
            Quantity(1, si.RADIAN, si.RADIAN).tan()


class TestComparison:
    """Tests for equality and ordering."""

    def test_equal_across_prefixes(self):
        """Test that 1 km equals 1000 m."""
        assert Quantity("1 km") == Quantity("1000 m")

    def test_different_dimensions_not_equal(self):
        """Test that equality never raises on dimension mismatch."""
        assert Quantity("1 m") != Quantity("1 s")
        assert Quantity("2 m") != 2

    def test_number_equality(self):
        """Test comparing dimensionless quantities with numbers."""
        assert Quantity(2.0) == 2

    def test_ordering(self):
        """Test ordering across units."""
        assert Quantity("1 km") > Quantity("999 m")
        assert Quantity(1, si.FOOT) < Quantity(1, si.METER)
        assert Quantity("1 m") <= Quantity("1 m")
        assert Quantity("1 m") >= Quantity("1 m")

    def test_ordering_mismatch(self):
        """Test that ordering across dimensions raises."""
        with pytest.raises(DimensionMismatchError):
            Quantity("1 m") < Quantity("1 s")

    def test_float(self):
        """Test float() on dimensionless quantities only."""
        assert float(Quantity(0.5)) == 0.5
        with pytest.raises(DimensionMismatchError):
            float(Quantity("1 m"))


class TestDisplay:
    """Tests for rendering quantities."""

    def test_str_kilograms(self, display_options):
        """Test that grams render back as kilograms."""
        assert str(Quantity("123.456 kg m s^-2")) == "123.456 kg m s^-2"
        assert str(Quantity(2, si.KILOGRAM)) == "2.0 kg"

    def test_str_grams(self, display_options):
        """Test rendering with kilogram display disabled."""
        display_options.base_kilograms = False
        assert str(Quantity("1 kg")) == "1000.0 g"

    def test_str_dimensionless(self, display_options):
        """Test that dimensionless quantities render the number only."""
        assert str(Quantity(3.0)) == "3.0"

    def test_str_area(self, display_options):
        """Test rendering of a power."""
        assert str(Quantity("2 m") * Quantity("3 m")) == "6.0 m^2"

    def test_consolidated(self, consolidated):
        """Test rendering as a composite unit."""
        force = Quantity("123.456 kg m s^-2")
        assert str(force) == "123.456 N"
        assert force.format_raw() == "123.456 kg m s^-2"

    def test_consolidation_priority(self, consolidated):
        """Test that the first fitting composite in the priority list wins."""
        energy = Quantity("3 kg m^2 s^-2")
        assert str(energy) == "3.0 N m"
        consolidated.consolidation_priority = ["J"]
        assert str(energy) == "3.0 J"

    def test_consolidation_skips_mismatched_units(self, consolidated):
        """Test that feet never consolidate into meter-based composites."""
        assert str(Quantity("5 ft s^-1")) == "5.0 ft s^-1"

    def test_explicit_options(self):
        """Test rendering with an options instance instead of the global."""
        options = DisplayOptions(base_kilograms=False, consolidate_units=True)
        assert Quantity("2 kg m s^-2").format(options) == "2.0 N"
        assert Quantity("2 kg").format(options) == "2000.0 g"

    def test_repr_stored_units(self):
        """Test that repr shows the stored grams."""
        assert repr(Quantity("1 kg")) == "Quantity('1000.0 g')"

    def test_si_string(self, display_options):
        """Test rendering with an SI prefix."""
        assert Quantity("1234 m").to_si_string() == "001.234 km"
        assert Quantity(2000, si.KILOGRAM).to_si_string() == "002.000 Mg"
        assert Quantity(5.0).to_si_string() == "005.000"

    @pytest.mark.parametrize("text", ["1234 m^2", "1234 s^-1", "1.5e7 m^2", "0.002 m^3"])
    def test_si_string_powered_units_parse_back(self, display_options, text):
        """Test that a prefix on a powered unit keeps the quantity's value."""
        original = Quantity(text)
        shown = original.to_si_string()
        reparsed = Quantity(shown)
        assert reparsed.dimension == original.dimension
        assert reparsed.value == pytest.approx(original.value)

    def test_si_string_powered_units(self, display_options):
        """Test the prefix chosen for a squared and an inverse unit."""
        assert Quantity("1234 s^-1").to_si_string() == "001.234 ms^-1"
        assert Quantity("1.5e7 m^2").to_si_string() == "015.000 km^2"
