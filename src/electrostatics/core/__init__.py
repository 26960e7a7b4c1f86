# MIT License (see LICENSE)
"""
Core field computation.

This subpackage provides:
    - field_at: Net field at one point by Coulomb superposition.
    - field_at_points: The same, for a sequence of points.
    - field_magnitude: |E| of a field vector.

Typical usage:
    from electrostatics.core import field_at

    E = field_at((2.0, 2.0), world)
"""
from .field import field_at, field_at_points, field_magnitude

__all__ = [
    "field_at",
    "field_at_points",
    "field_magnitude",
]
