"""
Tests for display options.
"""

import math

import pytest
from pydantic import ValidationError

from physanalysis.models import display
from physanalysis.models.display import AngleUnit, DisplayOptions, VectorSystem


class TestDisplayOptions:
    """Tests for the DisplayOptions model."""

    def test_defaults(self):
        """Test default option values."""
        options = DisplayOptions()
        assert options.angle_unit == AngleUnit.RADIAN
        assert options.vector_system == VectorSystem.CARTESIAN
        assert options.base_kilograms is True
        assert options.consolidate_units is False
        assert options.consolidation_priority == ["N", "J", "W", "Pa", "C", "V"]

    def test_assignment_coerced(self):
        """Test that assigned strings become enum members."""
        options = DisplayOptions()
        options.angle_unit = "degree"
        assert options.angle_unit == AngleUnit.DEGREE

    def test_invalid_assignment(self):
        """Test that unknown values are rejected on assignment."""
        options = DisplayOptions()
        with pytest.raises(ValidationError):
            options.vector_system = "spherical"

    def test_priority_stripped(self):
        """Test that priority symbols are stripped."""
        options = DisplayOptions(consolidation_priority=[" N ", "J"])
        assert options.consolidation_priority == ["N", "J"]

    def test_blank_priority_rejected(self):
        """Test that blank priority symbols are rejected."""
        with pytest.raises(ValidationError):
            DisplayOptions(consolidation_priority=["N", "  "])

    def test_unknown_priority_rejected(self):
        """Test that symbols missing from the registry are rejected."""
        with pytest.raises(ValidationError):
            DisplayOptions(consolidation_priority=["N", "X"])
        options = DisplayOptions()
        with pytest.raises(ValidationError):
            options.consolidation_priority = ["X"]
        assert options.consolidation_priority == ["N", "J", "W", "Pa", "C", "V"]

    def test_priority_lists_independent(self):
        """Test that instances do not share the default list."""
        a = DisplayOptions()
        b = DisplayOptions()
        a.consolidation_priority.append("Hz")
        assert "Hz" not in b.consolidation_priority

    def test_restore(self):
        """Test copying every field back from a snapshot."""
        options = DisplayOptions()
        snapshot = options.model_copy(deep=True)
        options.angle_unit = AngleUnit.DEGREE
        options.consolidate_units = True
        options.restore(snapshot)
        assert options == snapshot


class TestAngleConversion:
    """Tests for float angle conversion."""

    def test_radian_passthrough(self):
        """Test that radian angles are unchanged."""
        options = DisplayOptions()
        assert options.convert_angle(1.5) == 1.5
        assert options.reverse_convert_angle(1.5) == 1.5

    def test_degrees(self):
        """Test converting degrees to radians and back."""
        options = DisplayOptions(angle_unit=AngleUnit.DEGREE)
        assert options.convert_angle(180.0) == pytest.approx(math.pi)
        assert options.reverse_convert_angle(math.pi / 2) == pytest.approx(90.0)

    def test_global_helpers(self, display_options):
        """Test the module-level helpers read the global options."""
        display_options.angle_unit = AngleUnit.DEGREE
        assert display.convert_angle(90.0) == pytest.approx(math.pi / 2)
        assert display.reverse_convert_angle(math.pi) == pytest.approx(180.0)

    def test_fixture_restores_global(self):
        """Test that the global options are back at their defaults."""
        assert display.options.angle_unit == AngleUnit.RADIAN
