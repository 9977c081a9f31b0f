"""
Unit tests for aerofoil loads.
"""

import pytest

from flight2d.core.geometry import Angle, Vector
from flight2d.core.state import Kinematics
from flight2d.environment.atmosphere import density_ratio


def at_sea_level(orientation_deg=0.0, velocity=(10.0, 0.0)):
    pose = Kinematics.pose(Vector(0.0, 0.0), Angle.from_degrees(orientation_deg))
    rate = Kinematics.rate(Vector(*velocity))
    return pose, rate


class TestAerofoil:
    """Test angle of attack, dynamic pressure and loads."""

    @pytest.fixture
    def aerofoil(self, make_aerofoil, constant_table):
        return make_aerofoil(area=2.0, chord=0.5,
                             cl=constant_table(1.0),
                             cd=constant_table(0.1),
                             cm=constant_table(-0.2))

    def test_angle_of_attack_includes_pitch(self, make_aerofoil):
        foil = make_aerofoil(pitch_deg=2.0)
        pose, rate = at_sea_level(orientation_deg=10.0)
        assert foil.angle_of_attack(pose, rate).signed_degrees == pytest.approx(12.0)

        rate = Kinematics.rate(Vector.from_degrees(1.0, -5.0))
        assert foil.angle_of_attack(pose, rate).signed_degrees == pytest.approx(17.0)

    def test_loads_directions(self, aerofoil):
        """Lift is perpendicular to the stream, drag opposes it."""
        pose, rate = at_sea_level()
        loads = aerofoil.loads(pose, rate)

        # q = 0.5 * 1 * 10^2 = 50
        assert loads.lift.x == pytest.approx(0.0, abs=1e-9)
        assert loads.lift.y == pytest.approx(100.0)
        assert loads.drag.x == pytest.approx(-10.0)
        assert loads.drag.y == pytest.approx(0.0, abs=1e-9)
        assert loads.moment == pytest.approx(-10.0)
        assert loads.force.y == pytest.approx(100.0)

    def test_loads_follow_stream(self, aerofoil):
        pose, rate = at_sea_level(velocity=(0.0, -10.0))
        loads = aerofoil.loads(pose, rate)

        # Falling straight down: lift points +x, drag points up
        assert loads.lift.x == pytest.approx(100.0)
        assert loads.drag.y == pytest.approx(10.0)

    def test_zero_velocity_no_loads(self, aerofoil):
        pose, rate = at_sea_level(velocity=(0.0, 0.0))
        loads = aerofoil.loads(pose, rate)

        assert loads.lift.magnitude == 0.0
        assert loads.drag.magnitude == 0.0
        assert loads.moment == 0.0

    def test_signed_alpha_lookup(self, make_aerofoil, alpha_table):
        """A slightly negative AoA reads the table at -10 deg, not 350 deg."""
        foil = make_aerofoil(cl=alpha_table(0.0, 1.0 / 180.0))
        pose, rate = at_sea_level(orientation_deg=-10.0)

        CL, _, _ = foil.coefficients(pose, rate)
        assert CL == pytest.approx(-10.0 / 180.0)

    def test_dynamic_pressure_uses_density_ratio(self, aerofoil):
        rate = Kinematics.rate(Vector(10.0, 0.0))
        pose = Kinematics.pose(Vector(0.0, 5000.0), Angle(0.0))
        assert aerofoil.dynamic_pressure(pose, rate) == pytest.approx(50.0 * density_ratio(5000.0))

    def test_set_pitch(self, aerofoil):
        aerofoil.set_pitch(Angle.from_degrees(-3.0))
        assert aerofoil.pitch.signed_degrees == pytest.approx(-3.0)

    def test_negative_area_rejected(self, make_aerofoil):
        with pytest.raises(ValueError):
            make_aerofoil(area=-1.0)
