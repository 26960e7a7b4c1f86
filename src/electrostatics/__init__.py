# MIT License (see LICENSE)
"""
electrostatics - 2D electric field of fixed point charges.

Computes the field of a set of point charges at arbitrary observation
points by Coulomb superposition, and formats results with SI prefixes.

Main entry points:
    - PointCharge, World: Charge configuration types.
    - field_at: Net field at a point.
    - si_prefix, si_prefix_vec: Human-readable number formatting.
    - Scenario: Declarative worked example (see scenarios.py).

Submodules:
    - core: Field evaluation.
    - units: SI-prefix formatting.
    - scenarios: Built-in worked examples.
    - report: Text rendering of scenarios.

Example:
    from electrostatics import PointCharge, World, field_at, si_prefix_vec

    world = World([PointCharge((0, 0), 1e-6), PointCharge((1, 0), -1e-6)])
    print(si_prefix_vec(field_at((0.5, 1.0), world)))
"""
from .types import PointCharge, World
from .core.field import field_at, field_at_points
from .units import si_prefix, si_prefix_vec
from .scenarios import Scenario

__all__ = [
    # Types
    "PointCharge",
    "World",
    "Scenario",
    # Field evaluation
    "field_at",
    "field_at_points",
    # Formatting
    "si_prefix",
    "si_prefix_vec",
]
