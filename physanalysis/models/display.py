"""
Display options read by the formatting routines.

The options object is passive configuration: nothing in the algebra
mutates it, and every formatting call reads the current values. Updating
it from several threads while others format values is not synchronized;
set it once at startup or guard updates behind your own lock.
"""

import math
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AngleUnit(str, Enum):
    """Unit used for bare float angles and for displaying vector arguments."""
    RADIAN = "radian"
    DEGREE = "degree"


class VectorSystem(str, Enum):
    """Coordinate system used when printing vectors."""
    CARTESIAN = "cartesian"
    POLAR = "polar"


class DisplayOptions(BaseModel):
    """
    Process-wide display configuration.

    Assignments are validated, so ``options.angle_unit = "degree"`` is
    coerced to ``AngleUnit.DEGREE`` and an unknown value raises
    ``pydantic.ValidationError``.
    """
    model_config = ConfigDict(validate_assignment=True)

    angle_unit: AngleUnit = Field(
        default=AngleUnit.RADIAN,
        description="Unit for float angles and vector arguments",
    )
    vector_system: VectorSystem = Field(
        default=VectorSystem.CARTESIAN,
        description="Cartesian '(x, y)' or polar '(|v| @ angle)' vector display",
    )
    base_kilograms: bool = Field(
        default=True,
        description="Display mass stored in grams as kilograms",
    )
    consolidate_units: bool = Field(
        default=False,
        description="Collapse unit signatures into composite symbols such as N",
    )
    consolidation_priority: list[str] = Field(
        default_factory=lambda: ["N", "J", "W", "Pa", "C", "V"],
        description="Composite symbols tried in order when consolidating",
    )

    @field_validator("consolidation_priority")
    @classmethod
    def validate_priority(cls, v: list[str]) -> list[str]:
        """Strip symbols and reject blank or unknown composite symbols."""
        from physanalysis.catalog.units import ureg

        cleaned = [symbol.strip() for symbol in v]
        if any(not symbol for symbol in cleaned):
            raise ValueError("consolidation_priority entries must be non-empty symbols")
        unknown = [symbol for symbol in cleaned if ureg.find_composite(symbol) is None]
        if unknown:
            raise ValueError(f"Unknown composite units in consolidation_priority: {unknown}")
        return cleaned

    def convert_angle(self, angle: float) -> float:
        """Convert a float angle in the configured unit to radians."""
        return angle if self.angle_unit == AngleUnit.RADIAN else angle * math.pi / 180

    def reverse_convert_angle(self, angle: float) -> float:
        """Convert a float angle in radians to the configured unit."""
        return angle if self.angle_unit == AngleUnit.RADIAN else angle * 180 / math.pi

    def restore(self, snapshot: "DisplayOptions") -> None:
        """Copy every field of ``snapshot`` back onto this instance."""
        for name in type(self).model_fields:
            setattr(self, name, getattr(snapshot, name))


# Shared options instance read by every formatting call
options = DisplayOptions()


def convert_angle(angle: float) -> float:
    """Convert a float angle in the global angle unit to radians."""
    return options.convert_angle(angle)


def reverse_convert_angle(angle: float) -> float:
    """Convert a float angle in radians to the global angle unit."""
    return options.reverse_convert_angle(angle)
