"""
Dimensional analysis with physical quantities (physanalysis)

Represents physical quantities as a number tied to a composite of
measurement dimensions, each expressed in a chosen unit, and refuses
operations that would produce wrong physics.

Usage:
    from physanalysis import Quantity, si

    distance = Quantity("10 km")
    time = Quantity(5, si.MINUTE)
    speed = distance / time            # 2000.0 m min^-1
    speed.to(si.METER, si.SECOND)      # 33.33... m s^-1
    Quantity("5 m") + Quantity("3 s")  # DimensionMismatchError

Mass is stored in grams; "kg" parses as 1000 g and displays as kg while
``options.base_kilograms`` is set.
"""

import logging

__version__ = "0.1.0"
__author__ = "physanalysis contributors"

from physanalysis.errors import (
    PhysicalAnalysisError,
    UnitNotFoundError,
    UnitMismatchError,
    DimensionMismatchError,
    InvalidSIPrefixError,
    MalformedQuantityError,
    AffineUnitError,
)
from physanalysis.models.display import AngleUnit, VectorSystem, DisplayOptions, options
from physanalysis.catalog import (
    Dimension,
    Unit,
    ScaledUnit,
    CompositeUnit,
    UnitKind,
    UnitRegistry,
    ureg,
    si,
    derived,
)
from physanalysis.algebra import (
    QuantityDimension,
    Quantity,
    read_si_prefix,
    write_si_prefix,
    match_units,
    match_units_to,
    convert_unit,
    apply_unit,
)
from physanalysis.vector import Vector2

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Errors
    "PhysicalAnalysisError",
    "UnitNotFoundError",
    "UnitMismatchError",
    "DimensionMismatchError",
    "InvalidSIPrefixError",
    "MalformedQuantityError",
    "AffineUnitError",
    # Options
    "AngleUnit",
    "VectorSystem",
    "DisplayOptions",
    "options",
    # Catalog
    "Dimension",
    "Unit",
    "ScaledUnit",
    "CompositeUnit",
    "UnitKind",
    "UnitRegistry",
    "ureg",
    "si",
    "derived",
    # Algebra
    "QuantityDimension",
    "Quantity",
    "read_si_prefix",
    "write_si_prefix",
    "match_units",
    "match_units_to",
    "convert_unit",
    "apply_unit",
    # Vectors
    "Vector2",
]
