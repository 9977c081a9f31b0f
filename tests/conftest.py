"""Shared fixtures: constant coefficient tables and a vehicle builder."""

import pytest

from flight2d.core.aerodynamics import Aerofoil
from flight2d.core.dynamics import GRAVITY, Vehicle
from flight2d.core.geometry import Angle, Vector
from flight2d.core.interpolation import Linear
from flight2d.core.state import Kinematics


def linear_in_alpha(c0, slope):
    """Table with coefficient c0 + slope * alpha_deg over the full circle."""
    return Linear([(-180.0, c0 - 180.0 * slope), (180.0, c0 + 180.0 * slope)])


@pytest.fixture
def alpha_table():
    return linear_in_alpha


@pytest.fixture
def constant_table():
    def make(value):
        return linear_in_alpha(value, 0.0)
    return make


@pytest.fixture
def make_aerofoil(constant_table):
    def make(area=0.0, chord=1.0, pitch_deg=0.0, cl=None, cd=None, cm=None):
        zero = constant_table(0.0)
        return Aerofoil(area, chord, Angle.from_degrees(pitch_deg),
                        cl if cl is not None else zero,
                        cd if cd is not None else zero,
                        cm if cm is not None else zero)
    return make


@pytest.fixture
def make_vehicle(make_aerofoil):
    """Builds a Vehicle; by default a zero-area body at rest 100 m up."""
    def make(mass=10.0, length=1.0, position=(0.0, 100.0), orientation_deg=0.0,
             velocity=(0.0, 0.0), angular_velocity=0.0, wing=None, elevator=None,
             thrust_model=None, gravity=GRAVITY):
        return Vehicle(
            mass=mass,
            length=length,
            pose=Kinematics.pose(Vector(*position), Angle.from_degrees(orientation_deg)),
            rate=Kinematics.rate(Vector(*velocity), angular_velocity),
            wing=wing if wing is not None else make_aerofoil(),
            elevator=elevator if elevator is not None else make_aerofoil(),
            thrust_model=thrust_model,
            gravity=gravity,
        )
    return make
