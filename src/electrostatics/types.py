# MIT License (see LICENSE)
"""
Core type definitions for electrostatic field evaluation.

Defines the fundamental data structures:
- Vector2: read-only float64 numpy array of shape (2,), see util.vec2.
- PointCharge: a fixed charge at a 2D position.
- World: the ordered collection of charges for one configuration.

Both dataclasses are frozen and compare by value; a world is built once
per scenario and only read afterwards.
"""
from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Iterator

import numpy as np

from .util import vec2


Vector2 = np.ndarray


@dataclass(frozen=True, eq=False)
class PointCharge:
    """
    An idealized charge concentrated at a single point.

    Attributes:
        position: Location [x, y] in meters.
        charge: Signed charge in Coulombs. Zero is allowed.

    Note:
        Position is converted to a read-only float64 array on init.
    """
    position: Vector2 | tuple[float, float]
    charge: float

    def __post_init__(self) -> None:
        """Store position as a read-only Vector2 and charge as float."""
        object.__setattr__(self, "position", vec2(self.position))
        object.__setattr__(self, "charge", float(self.charge))

    def _key(self) -> tuple[tuple[float, ...], float]:
        return tuple(self.position.tolist()), self.charge

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PointCharge):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())


@dataclass(frozen=True)
class World:
    """
    Ordered, read-only sequence of point charges.

    Attributes:
        charges: The charges, in the order they were given. Any iterable is
                 accepted and frozen to a tuple.
    """
    charges: tuple[PointCharge, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "charges", tuple(self.charges))

    def __iter__(self) -> Iterator[PointCharge]:
        return iter(self.charges)

    def __len__(self) -> int:
        return len(self.charges)

    def __add__(self, other: "World") -> "World":
        """Concatenate two worlds, keeping the order of both."""
        if not isinstance(other, World):
            return NotImplemented
        return World(self.charges + other.charges)

    def scaled(self, factor: float) -> "World":
        """Return a new world with every charge magnitude multiplied by factor."""
        return World(replace(c, charge=c.charge * factor) for c in self.charges)
