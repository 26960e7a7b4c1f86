from electrostatics.types import PointCharge, World
from electrostatics.core.field import field_at
from electrostatics.units import si_prefix_vec
from electrostatics.constants import MICRO

# Example 19.5: +20 μC and -10 μC on the x axis, field off-axis
world = World([
    PointCharge(position=(-1.0, 0.0), charge=20.0 * MICRO),
    PointCharge(position=(1.0, 0.0), charge=-10.0 * MICRO),
])

for p in [(2.0, 2.0), (0.0, 1.0), (-3.0, 0.0)]:
    print("E at", si_prefix_vec(p), "=", si_prefix_vec(field_at(p, world)), "N/C")
