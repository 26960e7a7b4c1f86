# MIT License (see LICENSE)
"""
SI-prefix formatting for human-readable output.

A value is scaled into [1, 1000) by the largest metric prefix it reaches,
from tera down to yocto, and printed with three decimals:

    si_prefix(1500.0)   -> "1.500k"
    si_prefix(0.00002)  -> "20.000μ"
    si_prefix(-5e9)     -> "-5.000G"

Values whose magnitude is below 1e-24 (including zero) match no prefix and
are printed unscaled with an empty symbol. NaN also matches no prefix and is
printed as "NaN" rather than Python's "nan".
"""
from __future__ import annotations
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Prefix:
    """One row of the prefix table."""
    threshold: float
    divisor: float
    symbol: str


# Ordered highest first; the first row whose threshold |x| reaches wins.
PREFIXES: tuple[Prefix, ...] = (
    Prefix(1e12, 1e12, "T"),
    Prefix(1e9, 1e9, "G"),
    Prefix(1e6, 1e6, "M"),
    Prefix(1e3, 1e3, "k"),
    Prefix(1.0, 1.0, ""),
    Prefix(1e-3, 1e-3, "m"),
    Prefix(1e-6, 1e-6, "μ"),
    Prefix(1e-9, 1e-9, "n"),
    Prefix(1e-12, 1e-12, "p"),
    Prefix(1e-15, 1e-15, "f"),
    Prefix(1e-18, 1e-18, "a"),
    Prefix(1e-21, 1e-21, "z"),
    Prefix(1e-24, 1e-24, "y"),
)


def select_prefix(number: float) -> Prefix | None:
    """Return the table row for number, or None below the smallest threshold."""
    magnitude = abs(number)
    for prefix in PREFIXES:
        if magnitude >= prefix.threshold:
            return prefix
    return None


def si_prefix(number: float) -> str:
    """
    Format a scalar with three decimals and its SI prefix symbol.

    The sign is preserved: thresholds compare against |number| but the
    division uses the signed value.
    """
    number = float(number)
    if np.isnan(number):
        return "NaN"
    prefix = select_prefix(number)
    if prefix is None:
        return f"{number:.3f}"
    return f"{number / prefix.divisor:.3f}{prefix.symbol}"


def si_prefix_vec(v: np.ndarray | tuple[float, float]) -> str:
    """Format a 2D vector as "(x, y)", each component through si_prefix."""
    return f"({si_prefix(v[0])}, {si_prefix(v[1])})"
