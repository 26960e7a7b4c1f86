# MIT License (see LICENSE)
"""
Plain-text report of a scenario.

Output per scenario:

    <blank line>
    <title>
    Charge at (x, y) with charge qC         (one line per charge)
    Field at (x, y) is (Ex, Ey)N/C          (one line per point)

All numbers go through the SI-prefix formatter.
"""
from __future__ import annotations
import logging
import sys
from typing import Iterable, TextIO

from .core.field import field_at
from .scenarios import Scenario
from .types import PointCharge, Vector2
from .units import si_prefix, si_prefix_vec

logger = logging.getLogger(__name__)


def charge_line(charge: PointCharge) -> str:
    return f"Charge at {si_prefix_vec(charge.position)} with charge {si_prefix(charge.charge)}C"


def field_line(point: Vector2, field: Vector2) -> str:
    return f"Field at {si_prefix_vec(point)} is {si_prefix_vec(field)}N/C"


def render_scenario(scenario: Scenario) -> list[str]:
    """Evaluate a scenario and return its report lines (no trailing newlines)."""
    lines = ["", scenario.title]
    lines.extend(charge_line(c) for c in scenario.world)
    for point in scenario.points:
        lines.append(field_line(point, field_at(point, scenario.world)))
    return lines


def print_scenarios(scenarios: Iterable[Scenario], out: TextIO | None = None) -> None:
    """Write the report for each scenario, in order, to out (default stdout)."""
    out = sys.stdout if out is None else out
    for scenario in scenarios:
        logger.debug("Rendering %r: %d charges, %d points",
                     scenario.title, len(scenario.world), len(scenario.points))
        for line in render_scenario(scenario):
            print(line, file=out)
