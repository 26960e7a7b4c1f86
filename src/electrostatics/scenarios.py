# MIT License (see LICENSE)
"""
Declarative worked examples.

Each example is a Scenario: a title, the charges, and the observation
points at which the field is reported. New configurations are added by
writing another builder, not by editing the report code.

Example:
    from electrostatics.scenarios import dipole

    wide = dipole(d=6.0)
"""
from __future__ import annotations
from dataclasses import dataclass, field

from .constants import MICRO
from .types import PointCharge, Vector2, World
from .util import vec2


@dataclass(frozen=True, eq=False)
class Scenario:
    """
    One charge configuration and the points to evaluate it at.

    Attributes:
        title: Heading printed above the scenario's output.
        world: The point charges.
        points: Observation points, reported in order.
    """
    title: str
    world: World
    points: tuple[Vector2, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "points", tuple(vec2(p) for p in self.points))

    def _key(self) -> tuple:
        return self.title, self.world, tuple(tuple(p.tolist()) for p in self.points)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Scenario):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())


def two_charges() -> Scenario:
    """Example 19.5: 20 μC at (-1, 0) and -10 μC at (1, 0), field at (2, 2)."""
    world = World((
        PointCharge(position=(-1.0, 0.0), charge=20.0 * MICRO),
        PointCharge(position=(1.0, 0.0), charge=-10.0 * MICRO),
    ))
    return Scenario(
        title="Example 19.5: Electric field of two point charges",
        world=world,
        points=((2.0, 2.0),),
    )


def dipole(d: float = 3.0, q: float = 10.0 * MICRO, y: float = 3.0) -> Scenario:
    """
    Example 19.6: +q at the origin and -q at (d, 0).

    The field is reported to the left of the dipole at (-d/2, 0), at the
    midpoint (d/2, 0), and on the perpendicular bisector at (d/2, y).
    """
    world = World((
        PointCharge(position=(0.0, 0.0), charge=q),
        PointCharge(position=(d, 0.0), charge=-q),
    ))
    return Scenario(
        title="Example 19.6: Dipole electric field",
        world=world,
        points=(
            (-d / 2.0, 0.0),
            (d / 2.0, 0.0),
            (d / 2.0, y),
        ),
    )


DEFAULT_SCENARIOS: tuple[Scenario, ...] = (two_charges(), dipole())
