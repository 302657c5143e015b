"""
Physical quantities: a float magnitude tagged with a dimension vector.

Usage:
    >>> force = Quantity("123.456 kg m s^-2")
    >>> force.value
    123456.0                      # stored in grams
    >>> str(force)
    '123.456 kg m s^-2'
    >>> Quantity("2 m") * Quantity("3 m")
    Quantity('6.0 m^2')
    >>> Quantity("5 m") + Quantity("3 s")
    DimensionMismatchError: Cannot add quantities with different dimensions

Addition, subtraction and comparison require structurally equal
dimension vectors; the right operand is first expressed in the left
operand's units, so ``1 m + 1 ft`` is ``1.3048 m``. Multiplication and
division combine the operands' own vectors, so a dimension tagged with
different units on each side (``1 m * 1 ft``) raises UnitMismatchError.
"""

from __future__ import annotations

import math
from numbers import Real
from typing import Optional, Union

from physanalysis.algebra.conversion import apply_unit, convert_unit, match_units
from physanalysis.algebra.dimension_vector import QuantityDimension
from physanalysis.algebra.formatting import STORED_UNITS, format_quantity, render_units
from physanalysis.algebra.parsing import parse_quantity
from physanalysis.algebra.prefixes import EXP_TO_PREFIX, powered_prefix_index, write_si_prefix
from physanalysis.catalog.si import ANGLE, RADIAN
from physanalysis.catalog.units import CompositeUnit, ScaledUnit, Unit, UnitRegistry
from physanalysis.errors import DimensionMismatchError
from physanalysis.models import display
from physanalysis.models.display import DisplayOptions

UnitArg = Union[Unit, ScaledUnit, CompositeUnit]


class Quantity:
    """
    Immutable physical quantity.

    There are several ways to create one:

    1. From text: ``Quantity("9.81 m s^-2")`` or ``Quantity("100kg")``.
       Prefixes and composite units fold into the magnitude, so
       ``Quantity("1 kN")`` stores 1e6 g m s^-2.

    2. From a number and units: ``Quantity(5, METER, SECOND)`` is 5 m s.
       Scaled aliases multiply the magnitude (``Quantity(2, KILOGRAM)``
       stores 2000 g) and composite units substitute their expression.

    3. From a number and a vector: ``Quantity(5, QuantityDimension(...))``.

    4. A bare number is dimensionless: ``Quantity(0.5)``.
    """

    __slots__ = ("_value", "_dimension")

    def __init__(
        self,
        value: Union[float, str] = 0.0,
        *units: Union[UnitArg, QuantityDimension],
        registry: Optional[UnitRegistry] = None,
    ) -> None:
        if isinstance(value, str):
            if units:
                raise TypeError("Units cannot be combined with a quantity string")
            value, dimension = parse_quantity(value, registry)
        elif len(units) == 1 and isinstance(units[0], QuantityDimension):
            dimension = units[0]
        else:
            value, dimension = _fold_units(float(value), units)
        object.__setattr__(self, "_value", float(value))
        object.__setattr__(self, "_dimension", dimension)

    @classmethod
    def parse(cls, text: str, registry: Optional[UnitRegistry] = None) -> Quantity:
        """Parse a quantity literal such as "123.456 kg m s^-2"."""
        value, dimension = parse_quantity(text, registry)
        return cls(value, dimension)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("Quantity is immutable")

    @property
    def value(self) -> float:
        """Magnitude in the stored units (grams for mass from "kg")."""
        return self._value

    @property
    def dimension(self) -> QuantityDimension:
        return self._dimension

    @property
    def is_dimensionless(self) -> bool:
        return self._dimension.is_dimensionless

    @staticmethod
    def compare_dimensions(lhs: Quantity, rhs: Quantity) -> bool:
        """True if both quantities have structurally equal dimension vectors."""
        return lhs.dimension == rhs.dimension

    # Conversion

    def convert_unit(self, unit: Union[Unit, ScaledUnit]) -> Quantity:
        """Return this quantity with ``unit`` used for its dimension."""
        return convert_unit(self, unit)

    def to(self, *units: Union[Unit, ScaledUnit]) -> Quantity:
        """
        Convert to each of ``units`` in turn.

        Raises:
            UnitMismatchError: two different units of one dimension
        """
        QuantityDimension.from_units(*units)
        converted = self
        for unit in units:
            converted = convert_unit(converted, unit)
        return converted

    def apply_unit(self, unit: Union[Unit, ScaledUnit]) -> float:
        """Magnitude rescaled to ``unit`` as a bare float, offsets ignored."""
        return apply_unit(self, unit)

    def magnitude_in(self, *units: Union[Unit, ScaledUnit]) -> float:
        """Magnitude after converting to ``units``."""
        return self.to(*units).value

    # Arithmetic

    def __add__(self, other: object) -> Quantity:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        if not Quantity.compare_dimensions(self, rhs):
            raise DimensionMismatchError("Cannot add quantities with different dimensions")
        return Quantity(self._value + match_units(self, rhs).value, self._dimension)

    def __radd__(self, other: object) -> Quantity:
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs + self

    def __sub__(self, other: object) -> Quantity:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        if not Quantity.compare_dimensions(self, rhs):
            raise DimensionMismatchError("Cannot subtract quantities with different dimensions")
        return Quantity(self._value - match_units(self, rhs).value, self._dimension)

    def __rsub__(self, other: object) -> Quantity:
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs - self

    def __mul__(self, other: object) -> Quantity:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        dimension = self._dimension + rhs.dimension
        return Quantity(self._value * match_units(self, rhs).value, dimension)

    def __rmul__(self, other: object) -> Quantity:
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs * self

    def __truediv__(self, other: object) -> Quantity:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        dimension = self._dimension - rhs.dimension
        return Quantity(self._value / match_units(self, rhs).value, dimension)

    def __rtruediv__(self, other: object) -> Quantity:
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs / self

    def __pow__(self, exponent: object) -> Quantity:
        if isinstance(exponent, Quantity):
            if not exponent.is_dimensionless:
                raise DimensionMismatchError("Exponent must be dimensionless")
            exponent = exponent.value
        if not isinstance(exponent, Real):
            return NotImplemented
        if self._value < 0 and not float(exponent).is_integer():
            raise ValueError(
                f"Cannot raise a negative magnitude ({self._value}) to the fractional power {exponent}"
            )
        return Quantity(self._value ** exponent, self._dimension * exponent)

    def __neg__(self) -> Quantity:
        return Quantity(-self._value, self._dimension)

    def __pos__(self) -> Quantity:
        return self

    def __abs__(self) -> Quantity:
        return Quantity(abs(self._value), self._dimension)

    def __float__(self) -> float:
        if not self.is_dimensionless:
            raise DimensionMismatchError("Only dimensionless quantities convert to float")
        return self._value

    def sqrt(self) -> Quantity:
        """Square root; every power is halved (fractional powers are kept)."""
        return Quantity(math.sqrt(self._value), self._dimension / 2)

    # Trigonometry

    def _radians(self, name: str) -> float:
        if len(self._dimension) != 1 or not self._dimension.has_dimension(ANGLE, 1.0):
            raise DimensionMismatchError(f"Cannot take the {name} of a quantity without angle^1.")
        return apply_unit(self, RADIAN)

    def sin(self) -> Quantity:
        """Sine of an angle quantity; the result is dimensionless."""
        return Quantity(math.sin(self._radians("sine")))

    def cos(self) -> Quantity:
        """Cosine of an angle quantity; the result is dimensionless."""
        return Quantity(math.cos(self._radians("cosine")))

    def tan(self) -> Quantity:
        """Tangent of an angle quantity; the result is dimensionless."""
        return Quantity(math.tan(self._radians("tangent")))

    # Comparison

    def _compared_value(self, other: object, verb: str) -> Optional[float]:
        rhs = _coerce(other)
        if rhs is None:
            return None
        if not Quantity.compare_dimensions(self, rhs):
            raise DimensionMismatchError(f"Cannot {verb} quantities with different dimensions")
        return match_units(self, rhs).value

    def __eq__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        if not Quantity.compare_dimensions(self, rhs):
            return False
        return self._value == match_units(self, rhs).value

    __hash__ = None

    def __lt__(self, other: object) -> bool:
        rhs = self._compared_value(other, "compare")
        return NotImplemented if rhs is None else self._value < rhs

    def __le__(self, other: object) -> bool:
        rhs = self._compared_value(other, "compare")
        return NotImplemented if rhs is None else self._value <= rhs

    def __gt__(self, other: object) -> bool:
        rhs = self._compared_value(other, "compare")
        return NotImplemented if rhs is None else self._value > rhs

    def __ge__(self, other: object) -> bool:
        rhs = self._compared_value(other, "compare")
        return NotImplemented if rhs is None else self._value >= rhs

    # Display

    def format(self, options: Optional[DisplayOptions] = None) -> str:
        """Render using the display options (the global options by default)."""
        return format_quantity(self._value, self._dimension, options)

    def format_raw(self, options: Optional[DisplayOptions] = None) -> str:
        """Render without consolidating into composite units."""
        return format_quantity(self._value, self._dimension, options, consolidate_units=False)

    def to_si_string(self, options: Optional[DisplayOptions] = None) -> str:
        """
        Render with an SI prefix glued to the first unit symbol.

        Mass is prefixed from grams, so 2000 kg renders as "002.000 Mg".
        When the first symbol carries a power the prefix is raised with it,
        so the output parses back to the same quantity.

        Example:
            Quantity("1234 m").to_si_string() -> "001.234 km"
            Quantity("1234 s^-1").to_si_string() -> "001.234 ms^-1"
        """
        opts = options if options is not None else display.options
        shown, units = render_units(
            self._dimension, self._value, opts.model_copy(update={"base_kilograms": False})
        )
        if not units:
            return write_si_prefix(shown)

        first = units.split(" ", 1)[0]
        _, caret, power_text = first.partition("^")
        power = float(power_text) if caret else 1.0
        if power == 1.0:
            number, _, prefix = write_si_prefix(shown).partition(" ")
            return f"{number} {prefix}{units}"

        index = powered_prefix_index(shown, power)
        mantissa = shown / 10.0 ** (index * power)
        return f"{mantissa:07.3f} {EXP_TO_PREFIX.get(index, '')}{units}"

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"Quantity({format_quantity(self._value, self._dimension, STORED_UNITS)!r})"


def _coerce(other: object) -> Optional[Quantity]:
    if isinstance(other, Quantity):
        return other
    if isinstance(other, Real):
        return Quantity(float(other))
    return None


def _fold_units(value: float, units: tuple) -> tuple[float, QuantityDimension]:
    dimension = QuantityDimension()
    for unit in units:
        if isinstance(unit, CompositeUnit):
            value *= unit.value
            dimension = dimension + unit.dimension
        elif isinstance(unit, ScaledUnit):
            value *= unit.factor
            dimension = dimension + unit.unit
        elif isinstance(unit, Unit):
            dimension = dimension + unit
        else:
            raise TypeError(f"Expected a unit, got {type(unit).__name__}")
    return value, dimension
