# MIT License (see LICENSE)
"""
Utility functions for 2D vector math.

All vectors are numpy float64 arrays of shape (2,). Values handed out by the
package (charge positions, field results) are marked read-only so they can
be shared between frozen dataclasses without defensive copies.
"""
from __future__ import annotations

import numpy as np


def f64(x) -> np.ndarray:
    """
    Convert any array-like to a float64 numpy array.

    Allows tuple/list inputs for positions and observation points.
    """
    return np.array(x, dtype=np.float64)


def vec2(x) -> np.ndarray:
    """
    Build a read-only 2D vector from any 2-element array-like.

    Raises:
        ValueError: If x does not have exactly two components.
    """
    v = f64(x)
    if v.shape != (2,):
        raise ValueError(f"Expected a 2D vector, got shape {v.shape}")
    v.flags.writeable = False
    return v


def norm2(v: np.ndarray) -> float:
    """Squared magnitude of a 2D vector."""
    return float(v[0] * v[0] + v[1] * v[1])


def norm(v: np.ndarray) -> np.float64:
    """
    Magnitude (length) of a 2D vector.

    Returned as np.float64 rather than float so that dividing by a zero
    length yields inf/nan instead of raising ZeroDivisionError.
    """
    return np.sqrt(np.float64(norm2(v)))
