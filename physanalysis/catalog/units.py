"""
Dimension and unit definitions plus the shared unit registry.

Three kinds of unit exist and they are deliberately not related by
inheritance:

- ``Unit``: a plain unit of one dimension, with a multiplicative
  ``base_factor`` and an additive ``base_offset`` relative to the
  dimension's canonical unit. Registered in the plain symbol table.
- ``ScaledUnit``: an alias that is a fixed multiple of a plain unit
  (kilogram = 1000 gram). It resolves to the plain unit when a quantity
  is built and is never registered.
- ``CompositeUnit``: a named quantity expression over other units
  (Newton = 1 kg m s^-2). It carries no dimension of its own and is
  resolved by substitution.

Offset convention: ``base_offset`` is the reading of the unit at the
base unit's zero. Celsius reads -273.15 at 0 K, so converting a value
between units is ``(value - old_offset) * (old_factor / new_factor) +
new_offset``.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Optional, Union

from physanalysis.errors import UnitNotFoundError

if TYPE_CHECKING:
    from physanalysis.algebra.dimension_vector import QuantityDimension
    from physanalysis.algebra.quantity import Quantity

logger = logging.getLogger(__name__)


class UnitKind(str, Enum):
    """Tag distinguishing the three unit variants."""
    PLAIN = "plain"
    SCALED = "scaled"
    COMPOSITE = "composite"


@dataclass(frozen=True, eq=False, repr=False)
class Unit:
    """A standardized interval to measure one dimension with."""
    name: str
    symbol: str
    dimension: Dimension
    base_factor: float = 1.0
    base_offset: float = 0.0

    kind = UnitKind.PLAIN

    @property
    def is_affine(self) -> bool:
        """True for units whose zero differs from the base unit's zero."""
        return self.base_offset != 0.0

    @property
    def is_base(self) -> bool:
        """True if this is the canonical unit of its dimension."""
        return self.dimension.base_unit is self

    def __repr__(self) -> str:
        return f"Unit({self.name!r}, {self.symbol!r})"


@dataclass(frozen=True, eq=False)
class Dimension:
    """
    A category of physical measurement with one canonical base unit.

    The canonical unit is built here, from its name and symbol, so a
    dimension can never exist without it and nothing else can claim it.
    """
    name: str
    base_unit_name: str
    base_unit_symbol: str
    base_unit: Unit = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "base_unit", Unit(self.base_unit_name, self.base_unit_symbol, self)
        )


@dataclass(frozen=True, eq=False, repr=False)
class ScaledUnit:
    """A plain unit multiplied by a fixed factor, e.g. kilogram."""
    unit: Unit
    factor: float

    kind = UnitKind.SCALED

    @property
    def name(self) -> str:
        return self.unit.name

    @property
    def symbol(self) -> str:
        return self.unit.symbol

    @property
    def dimension(self) -> Dimension:
        return self.unit.dimension

    def __repr__(self) -> str:
        return f"ScaledUnit({self.unit!r}, {self.factor!r})"


@dataclass(frozen=True, eq=False, repr=False)
class CompositeUnit:
    """A named shorthand for a quantity expression, e.g. Newton."""
    name: str
    symbol: str
    quantity: Quantity

    kind = UnitKind.COMPOSITE

    @property
    def value(self) -> float:
        """Magnitude of one of this unit in the units of its expression."""
        return self.quantity.value

    @property
    def dimension(self) -> QuantityDimension:
        return self.quantity.dimension

    def __repr__(self) -> str:
        return f"CompositeUnit({self.name!r}, {self.symbol!r})"


UnitLike = Union[Unit, ScaledUnit, CompositeUnit]


class UnitRegistry:
    """
    Symbol tables for dimensions, plain units and composite units.

    The registry is filled once at import time by ``physanalysis.catalog``
    and only read afterwards.
    """

    def __init__(self) -> None:
        self._dimensions: dict[str, Dimension] = {}
        self._units: dict[Dimension, list[Unit]] = {}
        self._symbols: dict[str, Unit] = {}
        self._composite_symbols: dict[str, CompositeUnit] = {}

    def define_dimension(
        self,
        name: str,
        base_unit_name: str,
        base_unit_symbol: str,
    ) -> Dimension:
        """
        Create a dimension together with its canonical base unit.

        Args:
            name: Display name, e.g. "Length"
            base_unit_name: Name of the canonical unit, e.g. "meter"
            base_unit_symbol: Symbol of the canonical unit, e.g. "m"

        Returns:
            The new dimension; its ``base_unit`` is already registered.
        """
        if name in self._dimensions:
            raise ValueError(f"Dimension {name!r} is already defined")
        dimension = Dimension(name, base_unit_name, base_unit_symbol)
        self._dimensions[name] = dimension
        self._units[dimension] = []
        self._register(dimension.base_unit)
        logger.debug("Defined dimension %s with base unit %s", name, base_unit_symbol)
        return dimension

    def define_unit(
        self,
        name: str,
        symbol: str,
        dimension: Dimension,
        base_factor: float = 1.0,
        base_offset: float = 0.0,
    ) -> Unit:
        """
        Create and register a plain unit.

        Args:
            name: Display name
            symbol: Symbol used for parsing and display
            dimension: Owning dimension (must belong to this registry)
            base_factor: Size of the unit in base units
            base_offset: Reading of this unit at the base unit's zero

        Returns:
            The registered unit
        """
        if self._dimensions.get(dimension.name) is not dimension:
            raise ValueError(f"Dimension {dimension.name!r} is not defined in this registry")
        if not (base_factor > 0 and math.isfinite(base_factor)):
            raise ValueError("base_factor must be a positive, finite number")
        if not math.isfinite(base_offset):
            raise ValueError("base_offset must be finite")
        unit = Unit(name, symbol, dimension, float(base_factor), float(base_offset))
        self._register(unit)
        return unit

    def define_scaled(self, unit: Unit, factor: float) -> ScaledUnit:
        """Create an alias that is ``factor`` times ``unit``; not registered."""
        if not (factor > 0 and math.isfinite(factor)):
            raise ValueError("factor must be a positive, finite number")
        return ScaledUnit(unit, float(factor))

    def define_composite(self, name: str, symbol: str, expression: str) -> CompositeUnit:
        """
        Create and register a composite unit from a quantity expression.

        The expression is parsed with the same parser as user input, so it
        may reference plain, prefixed and previously defined composite
        units. A leading magnitude of 1 is implied when absent.
        """
        from physanalysis.algebra.quantity import Quantity

        text = expression.strip()
        if not text[:1].isdigit():
            text = "1 " + text
        composite = CompositeUnit(name, symbol, Quantity.parse(text, registry=self))
        if symbol in self._composite_symbols:
            logger.warning("Composite symbol %r already defined, keeping the first", symbol)
        else:
            self._composite_symbols[symbol] = composite
        logger.debug("Defined composite unit %s = %s", symbol, text)
        return composite

    def _register(self, unit: Unit) -> None:
        self._units[unit.dimension].append(unit)
        if unit.symbol in self._symbols:
            logger.warning(
                "Symbol %r of %s is shadowed by %s",
                unit.symbol, unit.name, self._symbols[unit.symbol].name,
            )
            return
        self._symbols[unit.symbol] = unit
        logger.debug("Registered unit %s (%s)", unit.symbol, unit.name)

    def find(self, symbol: str) -> Optional[Unit]:
        return self._symbols.get(symbol)

    def find_composite(self, symbol: str) -> Optional[CompositeUnit]:
        return self._composite_symbols.get(symbol)

    def lookup(self, symbol: str) -> Unit:
        """Return the plain unit for ``symbol`` or raise UnitNotFoundError."""
        unit = self._symbols.get(symbol)
        if unit is None:
            raise UnitNotFoundError(f"Unit {symbol} does not exist.")
        return unit

    def lookup_composite(self, symbol: str) -> CompositeUnit:
        """Return the composite unit for ``symbol`` or raise UnitNotFoundError."""
        composite = self._composite_symbols.get(symbol)
        if composite is None:
            raise UnitNotFoundError(f"Composite unit {symbol} does not exist.")
        return composite

    def dimension(self, name: str) -> Dimension:
        try:
            return self._dimensions[name]
        except KeyError:
            raise LookupError(f"Dimension {name} does not exist.") from None

    @property
    def dimensions(self) -> tuple[Dimension, ...]:
        return tuple(self._dimensions.values())

    @property
    def composites(self) -> tuple[CompositeUnit, ...]:
        return tuple(self._composite_symbols.values())

    def units_of(self, dimension: Dimension) -> tuple[Unit, ...]:
        """All plain units of ``dimension``, canonical unit first."""
        return tuple(self._units.get(dimension, ()))

    def __contains__(self, symbol: str) -> bool:
        return symbol in self._symbols or symbol in self._composite_symbols


# Shared registry for the entire package
ureg = UnitRegistry()
