# MIT License (see LICENSE)
"""
Physical constants and unit multipliers used by the field evaluator.

All values are SI. Coulomb's constant is the rounded textbook value so that
the worked examples reproduce the numbers printed in the book.
"""
from __future__ import annotations

# Coulomb's constant (electrostatic constant), k = 1/(4πε₀)
# Rounded value 9 × 10⁹ N·m²/C²; CODATA gives 8.9875517923 × 10⁹.
K_COULOMB: float = 9e9

# Charge magnitudes in the examples are given in microcoulombs.
MICRO: float = 1e-6
