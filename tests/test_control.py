"""
Unit tests for the elevator control law and trim solver.
"""

import numpy as np
import pytest

from flight2d.control.autopilot import ProportionalPitchTrim
from flight2d.control.trim import TrimSolver
from flight2d.core.geometry import Angle, Vector
from flight2d.simulation.simulator import Simulation, SimulationConfig


@pytest.fixture
def lifting_vehicle(make_vehicle, make_aerofoil, constant_table):
    """Level body at sea level whose wing produces pure lift."""
    wing = make_aerofoil(area=1.0, cl=constant_table(1.0))
    return make_vehicle(position=(0.0, 0.0), velocity=(10.0, 0.0), wing=wing)


class TestProportionalPitchTrim:
    """Test the proportional elevator law."""

    def test_no_aero_force_no_change(self, make_vehicle):
        vehicle = make_vehicle()
        law = ProportionalPitchTrim(gain=0.1)

        law.update(vehicle)

        assert vehicle.elevator.pitch.radians == 0.0
        assert law.last_error == 0.0
        assert law.target_orientation(vehicle) is None

    def test_target_opposes_aero_force(self, lifting_vehicle):
        law = ProportionalPitchTrim(gain=0.1)

        # Aero force straight up, so the target points straight down
        assert law.target_orientation(lifting_vehicle).degrees == pytest.approx(270.0)
        assert law.error(lifting_vehicle) == pytest.approx(-np.pi / 2)

    def test_update_moves_elevator(self, lifting_vehicle):
        """Nose-down target raises the aft elevator's incidence."""
        law = ProportionalPitchTrim(gain=0.1)
        pitch = law.update(lifting_vehicle)

        assert pitch.signed_radians == pytest.approx(0.1 * np.pi / 2)
        assert lifting_vehicle.elevator.pitch.signed_radians == pytest.approx(0.1 * np.pi / 2)
        assert law.last_error == pytest.approx(-np.pi / 2)

    def test_updates_accumulate(self, lifting_vehicle):
        law = ProportionalPitchTrim(gain=0.01)
        law.update(lifting_vehicle)
        law.update(lifting_vehicle)

        assert lifting_vehicle.elevator.pitch.signed_radians == pytest.approx(0.02 * np.pi / 2)

    def test_pitch_limit(self, lifting_vehicle):
        law = ProportionalPitchTrim(gain=1.0, pitch_limit=0.1)
        law.update(lifting_vehicle)

        assert lifting_vehicle.elevator.pitch.signed_radians == pytest.approx(0.1)

    def test_reset(self, lifting_vehicle):
        law = ProportionalPitchTrim()
        law.update(lifting_vehicle)
        law.reset()
        assert law.last_error == 0.0


class TestClosedLoopTrim:
    """The control law flown through the vehicle dynamics."""

    @pytest.fixture
    def make_stabilized_vehicle(self, make_vehicle, make_aerofoil, constant_table, alpha_table):
        # Heavy body so the flight path barely turns; gravity off
        def make():
            wing = make_aerofoil(area=1.0, cl=constant_table(1.0))
            elevator = make_aerofoil(area=1.0, cl=alpha_table(0.0, 0.1))
            return make_vehicle(mass=1000.0, length=1.0, position=(0.0, 0.0),
                                velocity=(50.0, 0.0), wing=wing, elevator=elevator,
                                gravity=Vector(0.0, 0.0))
        return make

    def fly(self, vehicle, gain, steps=300):
        law = ProportionalPitchTrim(gain=gain)
        sim = Simulation(vehicle, SimulationConfig(steps_per_second=1000), control_law=law)
        for _ in range(steps):
            sim.step()
        return law.error(vehicle)

    def test_error_shrinks(self, make_stabilized_vehicle):
        """With feedback the orientation error closes faster than without."""
        open_loop = make_stabilized_vehicle()
        closed_loop = make_stabilized_vehicle()
        initial = ProportionalPitchTrim().error(closed_loop)

        e_open = self.fly(open_loop, gain=0.0)
        e_closed = self.fly(closed_loop, gain=1e-3)

        assert initial == pytest.approx(-np.pi / 2)
        assert abs(e_open) == pytest.approx(np.pi / 2, abs=0.05)
        assert abs(e_closed) < abs(e_open) - 0.1

    def test_nose_pitches_toward_target(self, make_stabilized_vehicle):
        vehicle = make_stabilized_vehicle()
        self.fly(vehicle, gain=1e-3, steps=200)

        # Target is nose-down, so the body rotates clockwise
        assert vehicle.orientation.signed_radians < 0.0
        assert vehicle.elevator.pitch.signed_radians > 0.0


class TestTrimSolver:
    """Test static elevator trim."""

    @pytest.fixture
    def vehicle(self, make_vehicle, make_aerofoil, constant_table, alpha_table):
        # Wing: nose-up free moment 1 * 0.5 * 50 * 1 = 25 N m
        wing = make_aerofoil(area=1.0, cm=constant_table(0.5))
        # Elevator: CL = 0.1 per deg, lift 5 N per deg acting 1 m aft
        elevator = make_aerofoil(area=1.0, cl=alpha_table(0.0, 0.1))
        return make_vehicle(length=2.0, position=(0.0, 0.0), velocity=(10.0, 0.0),
                            wing=wing, elevator=elevator)

    def test_moment_residual(self, vehicle):
        solver = TrimSolver(vehicle)
        assert solver.moment_residual(0.0) == pytest.approx(25.0)
        assert solver.moment_residual(2.0) == pytest.approx(15.0)

    def test_trim_elevator(self, vehicle):
        solver = TrimSolver(vehicle)
        result = solver.trim_elevator()

        assert result.converged
        assert result.elevator.signed_degrees == pytest.approx(5.0, abs=1e-6)
        assert result.residual_moment == pytest.approx(0.0, abs=1e-6)

    def test_trim_restores_elevator(self, vehicle):
        vehicle.elevator.set_pitch(Angle.from_degrees(-1.0))
        TrimSolver(vehicle).trim_elevator()
        assert vehicle.elevator.pitch.signed_degrees == pytest.approx(-1.0)

    def test_apply(self, vehicle):
        solver = TrimSolver(vehicle)
        solver.apply(solver.trim_elevator())

        assert vehicle.elevator.pitch.signed_degrees == pytest.approx(5.0, abs=1e-6)
        assert vehicle.net_moment(vehicle.pose, vehicle.rate) == pytest.approx(0.0, abs=1e-6)

    def test_no_sign_change(self, vehicle):
        with pytest.raises(ValueError, match="does not change sign"):
            TrimSolver(vehicle).trim_elevator(bracket_deg=(10.0, 30.0))
