"""
Pydantic models for display configuration.
"""

from physanalysis.models.display import (
    AngleUnit,
    VectorSystem,
    DisplayOptions,
    options,
    convert_angle,
    reverse_convert_angle,
)

__all__ = [
    "AngleUnit",
    "VectorSystem",
    "DisplayOptions",
    "options",
    "convert_angle",
    "reverse_convert_angle",
]
