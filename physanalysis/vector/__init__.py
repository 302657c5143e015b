"""
2D vectors of quantities with compass/polar parsing.
"""

from physanalysis.vector.vector2 import Vector2, COMPASS, COMPASS_REFERENCES

__all__ = [
    "Vector2",
    "COMPASS",
    "COMPASS_REFERENCES",
]
