"""
Unit catalog and dimension registry.

Importing this package builds the shared registry ``ureg``: the SI-derived
dimensions and plain units first, then the composite units, which are
parsed from expressions over the plain ones.
"""

from physanalysis.catalog.units import (
    Dimension,
    Unit,
    ScaledUnit,
    CompositeUnit,
    UnitKind,
    UnitLike,
    UnitRegistry,
    ureg,
)
from physanalysis.catalog import si, derived

__all__ = [
    "Dimension",
    "Unit",
    "ScaledUnit",
    "CompositeUnit",
    "UnitKind",
    "UnitLike",
    "UnitRegistry",
    "ureg",
    "si",
    "derived",
]
