# MIT License (see LICENSE)
"""
Electric field evaluation by Coulomb superposition.

The net field at an observation point is the vector sum of each point
charge's contribution:

    E(p) = Σ k * q_i * d_i / |d_i|³,   d_i = r_i - p

Note the direction: d_i points from the observation point toward the
charge. This matches the worked examples' printed output, and is the
opposite of the textbook direction (away from a positive charge).

All arithmetic is numpy float64. An observation point that coincides with a
charge produces inf/nan components rather than an exception; the evaluator
logs a warning when that happens.

Complexity: O(N) per point for N charges.
"""
from __future__ import annotations
import logging
from typing import Iterable

import numpy as np

from ..constants import K_COULOMB
from ..types import PointCharge, Vector2
from ..util import f64, norm, vec2

logger = logging.getLogger(__name__)


def field_at(
    point: Vector2 | tuple[float, float],
    charges: Iterable[PointCharge],
    k: float = K_COULOMB,
) -> Vector2:
    """
    Net electric field at a point due to a collection of point charges.

    Args:
        point: Observation point [x, y] in meters.
        charges: A World or any iterable of PointCharge.
        k: Coulomb's constant in N·m²/C².

    Returns:
        Read-only field vector [Ex, Ey] in N/C.
    """
    p = vec2(point)
    field = np.zeros(2, dtype=np.float64)

    with np.errstate(divide="ignore", invalid="ignore"):
        for charge in charges:
            direction = charge.position - p
            distance = norm(direction)
            distance_squared = distance * distance
            unit_direction = direction / distance
            field = field + unit_direction * k * charge.charge / distance_squared

    if not np.all(np.isfinite(field)):
        logger.warning("Non-finite field at (%g, %g): point coincides with a charge", p[0], p[1])

    field.flags.writeable = False
    return field


def field_at_points(
    points: Iterable[Vector2 | tuple[float, float]],
    charges: Iterable[PointCharge],
    k: float = K_COULOMB,
) -> np.ndarray:
    """
    Evaluate field_at for each point in order.

    Returns:
        Array of shape (N, 2) with one field vector per point.
    """
    charges = tuple(charges)
    rows = [field_at(p, charges, k=k) for p in points]
    if not rows:
        return np.zeros((0, 2), dtype=np.float64)
    return f64(rows)


def field_magnitude(field: Vector2) -> float:
    """Magnitude |E| of a field vector in N/C."""
    return float(norm(field))
