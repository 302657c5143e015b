"""
Rendering of dimension vectors as unit strings.

The formatter owns the numeric adjustments that display choices imply:
consolidating into a composite unit divides the magnitude by the
composite's own magnitude, and showing grams as kilograms divides it by
1000 per power. The stored quantity is never changed.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from physanalysis.catalog.si import GRAM
from physanalysis.catalog.units import UnitRegistry, ureg
from physanalysis.errors import UnitMismatchError
from physanalysis.models import display
from physanalysis.models.display import DisplayOptions

if TYPE_CHECKING:
    from physanalysis.algebra.dimension_vector import QuantityDimension

logger = logging.getLogger(__name__)

# Options that render exactly what is stored (used by repr)
STORED_UNITS = DisplayOptions(base_kilograms=False, consolidate_units=False)


def format_power(symbol: str, power: float) -> str:
    """
    Render "symbol" for power 1, else "symbol^power".

    Powers print in short ``g`` form ("m^2", "s^-0.5") unless that loses
    digits, in which case the shortest exact repr is used ("m^0.3333333333333333").
    """
    if power == 1:
        return symbol
    text = f"{power:g}"
    if float(text) != power:
        text = repr(float(power))
    return f"{symbol}^{text}"


def consolidate(
    dimension: QuantityDimension,
    priority: list[str],
    registry: Optional[UnitRegistry] = None,
) -> Optional[tuple[str, float, QuantityDimension]]:
    """
    Find the first composite unit in ``priority`` that fits ``dimension``.

    A composite fits when subtracting its vector leaves a remainder with
    no more dimensions than ``dimension`` had. Composites whose units
    clash with the vector's (e.g. feet against a meter-based Newton) are
    skipped.

    Returns:
        Tuple of (symbol, composite magnitude, remainder), or None
    """
    registry = registry or ureg
    for symbol in priority:
        composite = registry.lookup_composite(symbol)
        try:
            remainder = dimension - composite.dimension
        except UnitMismatchError:
            logger.debug("Skipping %s: units do not match %r", symbol, dimension)
            continue
        if len(remainder) <= len(dimension):
            return composite.symbol, composite.value, remainder
    return None


def render_units(
    dimension: QuantityDimension,
    value: float,
    options: Optional[DisplayOptions] = None,
    consolidate_units: bool = True,
    registry: Optional[UnitRegistry] = None,
) -> tuple[float, str]:
    """
    Render ``dimension`` and adjust ``value`` to match the rendering.

    Args:
        dimension: Vector to render
        value: Magnitude stored with the vector
        options: Display options (the global options by default)
        consolidate_units: Set False to never consolidate, whatever the options say
        registry: Registry holding the composite units

    Returns:
        Tuple of (display magnitude, unit string); the unit string is
        empty for a dimensionless vector
    """
    opts = options if options is not None else display.options
    parts: list[str] = []
    remaining = dimension

    if consolidate_units and opts.consolidate_units and not dimension.is_dimensionless:
        found = consolidate(dimension, opts.consolidation_priority, registry)
        if found is not None:
            symbol, magnitude, remaining = found
            value = value / magnitude
            parts.append(symbol)

    for unit, power in remaining:
        symbol = unit.symbol
        if opts.base_kilograms and unit is GRAM:
            value = value / 1000.0 ** power
            symbol = "k" + symbol
        parts.append(format_power(symbol, power))

    return value, " ".join(parts)


def format_quantity(
    value: float,
    dimension: QuantityDimension,
    options: Optional[DisplayOptions] = None,
    consolidate_units: bool = True,
) -> str:
    """Render "<value> <units>", or just the value when dimensionless."""
    shown, units = render_units(dimension, value, options, consolidate_units)
    return f"{shown} {units}" if units else f"{shown}"
