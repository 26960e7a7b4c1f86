import numpy as np
from electrostatics.__main__ import main
from electrostatics.constants import MICRO
from electrostatics.report import charge_line, field_line, print_scenarios, render_scenario
from electrostatics.scenarios import DEFAULT_SCENARIOS, Scenario, dipole, two_charges
from electrostatics.types import PointCharge, World


def test_charge_line():
    assert charge_line(PointCharge((-1.0, 0.0), 20 * MICRO)) == "Charge at (-1.000, 0.000) with charge 20.000μC"


def test_field_line():
    line = field_line(np.array([2.0, 2.0]), np.array([-3471.0, 8419.0]))
    assert line == "Field at (2.000, 2.000) is (-3.471k, 8.419k)N/C"


def test_two_charges_report():
    """
    E at (2, 2):
      from 20 μC at (-1, 0):  d = (-3, -2), |d|² = 13
      from -10 μC at (1, 0):  d = (-1, -2), |d|² = 5
    """
    assert render_scenario(two_charges()) == [
        "",
        "Example 19.5: Electric field of two point charges",
        "Charge at (-1.000, 0.000) with charge 20.000μC",
        "Charge at (1.000, 0.000) with charge -10.000μC",
        "Field at (2.000, 2.000) is (-3.471k, 8.419k)N/C",
    ]


def test_dipole_report_on_axis():
    lines = render_scenario(dipole())
    assert lines[:4] == [
        "",
        "Example 19.6: Dipole electric field",
        "Charge at (0.000, 0.000) with charge 10.000μC",
        "Charge at (3.000, 0.000) with charge -10.000μC",
    ]
    assert lines[4] == "Field at (-1.500, 0.000) is (35.556k, 0.000)N/C"
    assert lines[5] == "Field at (1.500, 0.000) is (-80.000k, 0.000)N/C"
    assert lines[6].startswith("Field at (1.500, 3.000) is (-7.155k, ")
    assert len(lines) == 7


def test_dipole_builder_points():
    s = dipole(d=4.0, y=1.0)
    assert [tuple(p) for p in s.points] == [(-2.0, 0.0), (2.0, 0.0), (2.0, 1.0)]
    assert [c.charge for c in s.world] == [10 * MICRO, -10 * MICRO]


def test_custom_scenario(capsys):
    s = Scenario("Lone charge", World([PointCharge((0.0, 0.0), 1.0)]), points=[(0.0, 3.0)])
    print_scenarios([s])

    out = capsys.readouterr().out
    assert out == (
        "\n"
        "Lone charge\n"
        "Charge at (0.000, 0.000) with charge 1.000C\n"
        "Field at (0.000, 3.000) is (0.000, -1.000G)N/C\n"
    )


def test_main_prints_both_examples(capsys):
    assert main() == 0

    out = capsys.readouterr().out
    assert out.startswith("\nExample 19.5: Electric field of two point charges\n")
    assert "\nExample 19.6: Dipole electric field\n" in out
    assert out.count("Field at ") == sum(len(s.points) for s in DEFAULT_SCENARIOS)


def test_scenarios_compare_by_value():
    assert two_charges() == two_charges()
    assert two_charges() in [dipole(), two_charges()]
    assert dipole() != dipole(y=4.0)
    assert dipole() != two_charges()
    assert hash(dipole()) == hash(dipole())
