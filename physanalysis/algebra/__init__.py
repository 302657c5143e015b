"""
Dimension-vector algebra and the Quantity type built on it.

This package provides:
- QuantityDimension: immutable Dimension -> (Unit, power) vectors
- Quantity: float magnitudes tagged with a dimension vector
- Parsing of quantity literals and unit expressions
- Unit matching and conversion, including affine temperature units
- SI prefix codecs and unit-string formatting
"""

from physanalysis.algebra.dimension_vector import QuantityDimension
from physanalysis.algebra.prefixes import (
    PREFIX_TO_EXP,
    EXP_TO_PREFIX,
    read_si_prefix,
    write_si_prefix,
)
from physanalysis.algebra.conversion import (
    match_units,
    match_units_to,
    convert_unit,
    apply_unit,
)
from physanalysis.algebra.quantity import Quantity

__all__ = [
    "QuantityDimension",
    "PREFIX_TO_EXP",
    "EXP_TO_PREFIX",
    "read_si_prefix",
    "write_si_prefix",
    "match_units",
    "match_units_to",
    "convert_unit",
    "apply_unit",
    "Quantity",
]
