"""
Unit matching and conversion between quantities.

Conversion ratio orientation: a value expressed in ``old`` converts to
``new`` by multiplying with ``(old.base_factor / new.base_factor) **
power``. Converting to a bigger unit (larger base factor) shrinks the
number: 3 ft -> 0.9144 m, 0.9144 m -> 3 ft.

These functions work on any object with ``value`` and ``dimension``
attributes and build their results with ``type(target)``, so they do not
depend on the Quantity class itself.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

from physanalysis.algebra.dimension_vector import QuantityDimension
from physanalysis.catalog.units import Dimension, ScaledUnit, Unit
from physanalysis.errors import AffineUnitError, UnitMismatchError

if TYPE_CHECKING:
    from physanalysis.algebra.quantity import Quantity


def _plain(unit: Union[Unit, ScaledUnit]) -> Unit:
    return unit.unit if isinstance(unit, ScaledUnit) else unit


def _match(target: Quantity, template: dict[Dimension, Unit]) -> Quantity:
    factor = 1.0
    pairs = []
    for unit, power in target.dimension:
        template_unit = template.get(unit.dimension)
        if template_unit is not None:
            if template_unit is not unit:
                factor *= (unit.base_factor / template_unit.base_factor) ** power
            pairs.append((template_unit, power))
        else:
            pairs.append((unit, power))
    return type(target)(target.value * factor, QuantityDimension(pairs))


def match_units(template: Quantity, target: Quantity) -> Quantity:
    """
    Express ``target`` in the units ``template`` uses for shared dimensions.

    Dimensions ``template`` lacks keep ``target``'s unit. Offsets are not
    applied: this is a multiplicative rescaling used by arithmetic.

    Args:
        template: Quantity whose units are preferred
        target: Quantity to rescale

    Returns:
        A quantity equal to ``target`` expressed in ``template``'s units
    """
    units = {unit.dimension: unit for unit, _ in template.dimension}
    return _match(target, units)


def match_units_to(target: Quantity, *units: Union[Unit, ScaledUnit]) -> Quantity:
    """
    Express ``target`` in the given units where it has their dimension.

    Raises:
        UnitMismatchError: two different units of one dimension in ``units``
    """
    template: dict[Dimension, Unit] = {}
    for unit in map(_plain, units):
        existing = template.get(unit.dimension)
        if existing is not None and existing is not unit:
            raise UnitMismatchError("One dimension can only have one unit.")
        template[unit.dimension] = unit
    return _match(target, template)


def _ratio(target: Quantity, unit: Unit) -> tuple[Unit, float, float]:
    old_unit, power = target.dimension.get_units(unit.dimension)
    return old_unit, power, (old_unit.base_factor / unit.base_factor) ** power


def convert_unit(target: Quantity, unit: Union[Unit, ScaledUnit]) -> Quantity:
    """
    Convert the unit ``target`` uses for ``unit``'s dimension to ``unit``.

    The new value is ``(value - old_offset) * (old_factor / new_factor) **
    power + new_offset``. A scaled alias converts to its plain unit.

    Returns:
        ``target`` itself when it lacks the dimension or already uses ``unit``

    Raises:
        AffineUnitError: an offset unit is involved at a power other than 1
    """
    unit = _plain(unit)
    old_unit, _ = target.dimension.get_units(unit.dimension)
    if old_unit is None or old_unit is unit:
        return target
    old_unit, power, ratio = _ratio(target, unit)
    if (old_unit.is_affine or unit.is_affine) and power != 1.0:
        raise AffineUnitError(
            f"Cannot convert {old_unit.symbol}^{power:g} to {unit.symbol}: "
            "offset units only convert at power 1"
        )
    value = (target.value - old_unit.base_offset) * ratio + unit.base_offset
    return type(target)(value, target.dimension.replace_unit(unit))


def apply_unit(target: Quantity, unit: Union[Unit, ScaledUnit]) -> float:
    """
    Return ``target``'s magnitude rescaled to ``unit``, as a bare float.

    Uses the same factor as ``convert_unit`` but ignores offsets; used to
    read an angle in radians whatever unit it is stored in.
    """
    unit = _plain(unit)
    old_unit, _ = target.dimension.get_units(unit.dimension)
    if old_unit is None or old_unit is unit:
        return target.value
    return target.value * _ratio(target, unit)[2]
