import numpy as np
from electrostatics.scenarios import dipole
from electrostatics.core.field import field_at_points, field_magnitude
from electrostatics.units import si_prefix

# Walk up the perpendicular bisector of the 19.6 dipole; |E| falls off ~1/y³ far out
scenario = dipole()
xs = 1.5
ys = np.linspace(0.5, 20.0, 12)
fields = field_at_points([(xs, y) for y in ys], scenario.world)

for y, E in zip(ys, fields):
    print(f"y={y:6.2f}  |E|={si_prefix(field_magnitude(E))}N/C")
