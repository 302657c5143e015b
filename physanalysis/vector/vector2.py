"""
Two-dimensional vectors of quantities.

Built only on the public Quantity API: arithmetic, sin/cos, sqrt and
formatting. Angles given as bare floats are read in the globally
configured angle unit; angles returned by ``argument`` are expressed in it.

Accepted text forms (parentheses optional):

- components: "(12.3 m, 4.56 m)"
- compass direction and magnitude, East = +x: "(N, 123 km)"
- compass reference, angle and magnitude: "(NW, 45 deg, 123 km)", read
  as "45 degrees north of west"; angle and magnitude may be swapped
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Union

from physanalysis.algebra.conversion import match_units
from physanalysis.algebra.quantity import Quantity
from physanalysis.catalog.si import ANGLE, DEGREE, RADIAN
from physanalysis.errors import DimensionMismatchError, MalformedQuantityError
from physanalysis.models import display
from physanalysis.models.display import AngleUnit, VectorSystem

ComponentArg = Union[Quantity, float, str]

# Unit vectors for single-letter compass directions
COMPASS: dict[str, tuple[float, float]] = {
    "N": (0.0, 1.0),
    "E": (1.0, 0.0),
    "S": (0.0, -1.0),
    "W": (-1.0, 0.0),
}

# "XY" = rotate from axis Y towards X: (angle of axis Y in radians, rotation sign)
COMPASS_REFERENCES: dict[str, tuple[float, float]] = {
    "NE": (0.0, 1.0),
    "SE": (0.0, -1.0),
    "NW": (math.pi, -1.0),
    "SW": (math.pi, 1.0),
    "EN": (math.pi * 0.5, -1.0),
    "WN": (math.pi * 0.5, 1.0),
    "ES": (math.pi * 1.5, 1.0),
    "WS": (math.pi * 1.5, -1.0),
}


def _as_quantity(component: ComponentArg) -> Quantity:
    if isinstance(component, Quantity):
        return component
    if isinstance(component, str):
        return Quantity(component)
    return Quantity(float(component))


@dataclass(frozen=True)
class Vector2:
    """A 2D vector with x and y quantity components."""
    x: Quantity
    y: Quantity

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", _as_quantity(self.x))
        object.__setattr__(self, "y", _as_quantity(self.y))

    @classmethod
    def parse(cls, text: str) -> Vector2:
        """
        Parse any of the text forms listed in the module docstring.

        Returns:
            The equivalent vector in cartesian components

        Raises:
            MalformedQuantityError: unsupported vector format
        """
        body = text.strip().strip("()")
        parts = [part.strip() for part in body.split(",")]

        if len(parts) == 2:
            direction = COMPASS.get(parts[0])
            if direction is not None:
                magnitude = Quantity(parts[1])
                return cls(Quantity(direction[0]) * magnitude, Quantity(direction[1]) * magnitude)
            return cls(Quantity(parts[0]), Quantity(parts[1]))

        if len(parts) == 3:
            reference = COMPASS_REFERENCES.get(parts[0])
            if reference is None:
                raise MalformedQuantityError(f"Unsupported vector string format: {text}")
            angle, magnitude = Quantity(parts[1]), Quantity(parts[2])
            if ANGLE in magnitude.dimension:
                angle, magnitude = magnitude, angle
            if angle.is_dimensionless:
                angle = Quantity(display.convert_angle(angle.value), RADIAN)
            offset, sign = reference
            heading = angle * sign + Quantity(offset, RADIAN)
            return cls.angle_magnitude_vector(heading, magnitude)

        raise MalformedQuantityError(f"Unsupported vector string format: {text}")

    @classmethod
    def angle_vector(cls, angle: Union[Quantity, float]) -> Vector2:
        """Unit vector at ``angle`` counter-clockwise from the x-axis."""
        if isinstance(angle, Quantity):
            return cls(angle.cos(), angle.sin())
        radians = display.convert_angle(angle)
        return cls(math.cos(radians), math.sin(radians))

    @classmethod
    def angle_magnitude_vector(
        cls,
        angle: Union[Quantity, float],
        magnitude: Union[Quantity, float],
    ) -> Vector2:
        """Vector of length ``magnitude`` at ``angle`` from the x-axis."""
        unit = cls.angle_vector(angle)
        return unit * magnitude

    # Arithmetic

    def __add__(self, other: object) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scale: object) -> Vector2:
        if not isinstance(scale, (Quantity, Real)):
            return NotImplemented
        return Vector2(self.x * scale, self.y * scale)

    def __rmul__(self, scale: object) -> Vector2:
        if not isinstance(scale, (Quantity, Real)):
            return NotImplemented
        return Vector2(scale * self.x, scale * self.y)

    def __truediv__(self, scale: object) -> Vector2:
        if not isinstance(scale, (Quantity, Real)):
            return NotImplemented
        return Vector2(self.x / scale, self.y / scale)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def dot(self, other: Vector2) -> Quantity:
        """Dot product."""
        return self.x * other.x + self.y * other.y

    __matmul__ = dot

    @property
    def magnitude(self) -> Quantity:
        """Euclidean length."""
        return (self.x * self.x + self.y * self.y).sqrt()

    def __abs__(self) -> Quantity:
        return self.magnitude

    def argument(self) -> Quantity:
        """
        Angle counter-clockwise from the x-axis, in [0, 2π).

        Expressed in radians or degrees according to the display options.

        Raises:
            DimensionMismatchError: the components have different dimensions
        """
        if not Quantity.compare_dimensions(self.x, self.y):
            raise DimensionMismatchError("Vector components have different dimensions")
        y = match_units(self.x, self.y).value
        angle = math.atan2(y, self.x.value) % (2 * math.pi)
        if display.options.angle_unit == AngleUnit.DEGREE:
            return Quantity(math.degrees(angle), DEGREE)
        return Quantity(angle, RADIAN)

    def __str__(self) -> str:
        if display.options.vector_system == VectorSystem.POLAR:
            return f"({self.magnitude} @ {self.argument()})"
        return f"({self.x}, {self.y})"
