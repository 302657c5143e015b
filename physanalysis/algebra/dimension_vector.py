"""
Sparse dimension-power vectors.

A ``QuantityDimension`` maps each dimension present to the unit chosen
for it and a real power:

    force = QuantityDimension.parse("kg m s^-2")
    -> {Mass: (gram, 1), Length: (meter, 1), Time: (second, -2)}

Adding vectors models multiplying quantities, subtracting models
division and scaling by a number models raising to a power. Every
operator returns a new vector; a stored vector is never mutated.

Equality is structural: two vectors are equal when they contain the same
dimensions with the same powers, whatever units were chosen. Units only
matter for conversion factors and display.
"""

from __future__ import annotations

from numbers import Real
from typing import TYPE_CHECKING, Iterable, Iterator, Optional, Union

from physanalysis.catalog.units import Dimension, ScaledUnit, Unit
from physanalysis.errors import UnitMismatchError

if TYPE_CHECKING:
    from physanalysis.catalog.units import UnitRegistry
    from physanalysis.models.display import DisplayOptions

UnitPower = tuple[Unit, float]


def _plain(unit: Union[Unit, ScaledUnit]) -> Unit:
    if isinstance(unit, ScaledUnit):
        return unit.unit
    if isinstance(unit, Unit):
        return unit
    raise TypeError(f"Expected a Unit or ScaledUnit, got {type(unit).__name__}")


class QuantityDimension:
    """
    Immutable ordered mapping ``Dimension -> (Unit, power)``.

    Entries with power 0.0 are never stored, and a dimension can only be
    tagged with one unit: combining two different units of the same
    dimension raises UnitMismatchError.
    """

    __slots__ = ("_entries",)

    def __init__(self, pairs: Iterable[tuple[Union[Unit, ScaledUnit], float]] = ()) -> None:
        entries: dict[Dimension, UnitPower] = {}
        for unit, power in pairs:
            _accumulate(entries, _plain(unit), float(power))
        object.__setattr__(self, "_entries", entries)

    @classmethod
    def _from_entries(cls, entries: dict[Dimension, UnitPower]) -> QuantityDimension:
        vector = cls.__new__(cls)
        object.__setattr__(vector, "_entries", entries)
        return vector

    @classmethod
    def from_units(cls, *units: Union[Unit, ScaledUnit]) -> QuantityDimension:
        """
        Build a vector from a unit list, each unit contributing power 1.

        Repeated units accumulate (``from_units(METER, METER)`` is m^2).

        Raises:
            UnitMismatchError: two different units of one dimension
        """
        return cls((unit, 1.0) for unit in units)

    @classmethod
    def parse(cls, text: str, registry: Optional[UnitRegistry] = None) -> QuantityDimension:
        """
        Parse a unit expression such as "kg m s^-2".

        Only the dimension vector is returned: the magnitude contributed
        by prefixes and composite units ("k" in "kg", "N") is discarded.
        Use ``Quantity.parse`` when that magnitude matters.
        """
        from physanalysis.algebra.parsing import parse_unit_expression

        _, vector = parse_unit_expression(text, registry)
        return vector

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("QuantityDimension is immutable")

    # Queries

    def has_dimension(self, dimension: Dimension, power: Optional[float] = None) -> bool:
        """True if ``dimension`` is present (with exactly ``power`` when given)."""
        entry = self._entries.get(dimension)
        if entry is None:
            return False
        return power is None or entry[1] == power

    def get_units(self, dimension: Dimension) -> tuple[Optional[Unit], float]:
        """Return ``(unit, power)`` for ``dimension`` or ``(None, 0.0)``."""
        return self._entries.get(dimension, (None, 0.0))

    def replace_unit(self, unit: Union[Unit, ScaledUnit], power: Optional[float] = None) -> QuantityDimension:
        """
        Return a copy using ``unit`` for its dimension.

        The stored power is kept unless ``power`` is given. No conversion
        factor is applied; use ``convert_unit`` to convert a quantity.
        """
        unit = _plain(unit)
        current = self._entries.get(unit.dimension, (unit, 1.0))[1]
        new_power = current if power is None else float(power)
        entries = dict(self._entries)
        if new_power == 0.0:
            entries.pop(unit.dimension, None)
        else:
            entries[unit.dimension] = (unit, new_power)
        return QuantityDimension._from_entries(entries)

    def items(self) -> Iterator[tuple[Dimension, UnitPower]]:
        return iter(self._entries.items())

    @property
    def dimensions(self) -> tuple[Dimension, ...]:
        return tuple(self._entries)

    @property
    def is_dimensionless(self) -> bool:
        return not self._entries

    def __iter__(self) -> Iterator[UnitPower]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, dimension: object) -> bool:
        return dimension in self._entries

    # Algebra

    def _combine(self, other: QuantityDimension, sign: float) -> QuantityDimension:
        entries = dict(self._entries)
        for unit, power in other:
            _accumulate(entries, unit, sign * power)
        return QuantityDimension._from_entries(entries)

    def _increment(self, unit: Union[Unit, ScaledUnit], power: float) -> QuantityDimension:
        entries = dict(self._entries)
        _accumulate(entries, _plain(unit), float(power))
        return QuantityDimension._from_entries(entries)

    def __add__(self, other: object) -> QuantityDimension:
        if isinstance(other, QuantityDimension):
            return self._combine(other, 1.0)
        if isinstance(other, (Unit, ScaledUnit)):
            return self._increment(other, 1.0)
        if isinstance(other, tuple) and len(other) == 2 and isinstance(other[0], (Unit, ScaledUnit)):
            return self._increment(other[0], other[1])
        return NotImplemented

    def __sub__(self, other: object) -> QuantityDimension:
        if isinstance(other, QuantityDimension):
            return self._combine(other, -1.0)
        if isinstance(other, (Unit, ScaledUnit)):
            return self._increment(other, -1.0)
        if isinstance(other, tuple) and len(other) == 2 and isinstance(other[0], (Unit, ScaledUnit)):
            return self._increment(other[0], -other[1])
        return NotImplemented

    def __mul__(self, scalar: object) -> QuantityDimension:
        if not isinstance(scalar, Real):
            return NotImplemented
        if scalar == 0:
            return QuantityDimension()
        return QuantityDimension._from_entries(
            {dimension: (unit, power * scalar) for dimension, (unit, power) in self._entries.items()}
        )

    __rmul__ = __mul__

    def __truediv__(self, scalar: object) -> QuantityDimension:
        if not isinstance(scalar, Real):
            return NotImplemented
        return QuantityDimension._from_entries(
            {dimension: (unit, power / scalar) for dimension, (unit, power) in self._entries.items()}
        )

    def __neg__(self) -> QuantityDimension:
        return self * -1

    # Comparison

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QuantityDimension):
            return NotImplemented
        if len(self._entries) != len(other._entries):
            return False
        for dimension, (_, power) in other._entries.items():
            mine = self._entries.get(dimension)
            if mine is None or mine[1] != power:
                return False
        return True

    def __hash__(self) -> int:
        return hash(frozenset((dimension, power) for dimension, (_, power) in self._entries.items()))

    # Display

    def format(self, options: Optional[DisplayOptions] = None) -> str:
        """Render the unit string using the display options (global by default)."""
        from physanalysis.algebra.formatting import render_units

        return render_units(self, 1.0, options)[1]

    def format_raw(self, options: Optional[DisplayOptions] = None) -> str:
        """Render the unit string without composite-unit consolidation."""
        from physanalysis.algebra.formatting import render_units

        return render_units(self, 1.0, options, consolidate_units=False)[1]

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        from physanalysis.algebra.formatting import STORED_UNITS, render_units

        return f"QuantityDimension({render_units(self, 1.0, STORED_UNITS)[1]!r})"


def _accumulate(entries: dict[Dimension, UnitPower], unit: Unit, power: float) -> None:
    """Add ``unit^power`` to ``entries`` in place (builder use only)."""
    existing = entries.get(unit.dimension)
    if existing is None:
        if power != 0.0:
            entries[unit.dimension] = (unit, power)
        return
    existing_unit, existing_power = existing
    if existing_unit is not unit:
        raise UnitMismatchError(
            f"Dimension {unit.dimension.name} cannot use both "
            f"{existing_unit.symbol} and {unit.symbol}"
        )
    new_power = existing_power + power
    if new_power == 0.0:
        del entries[unit.dimension]
    else:
        entries[unit.dimension] = (unit, new_power)
