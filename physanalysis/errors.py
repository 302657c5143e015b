"""
Exception taxonomy for dimensional analysis.

Every failure is raised immediately to the caller; nothing in the package
logs and swallows these. Each error also derives from the builtin that
best describes it, so callers that only catch ``ValueError`` or
``LookupError`` keep working.
"""


class PhysicalAnalysisError(Exception):
    """Base class for all physanalysis errors."""


class UnitNotFoundError(PhysicalAnalysisError, LookupError):
    """A symbol matched no plain unit, composite unit or prefixed unit."""


class UnitMismatchError(PhysicalAnalysisError, ValueError):
    """Two different units were assigned to the same dimension."""


class DimensionMismatchError(PhysicalAnalysisError, ValueError):
    """Quantities with structurally different dimensions were combined."""


class InvalidSIPrefixError(PhysicalAnalysisError, ValueError):
    """An SI prefix character was not recognized."""


class MalformedQuantityError(PhysicalAnalysisError, ValueError):
    """Quantity, vector or unit-token text does not follow the grammar."""


class AffineUnitError(PhysicalAnalysisError, ValueError):
    """An offset unit (Celsius, Fahrenheit) was converted at a power other than 1."""
