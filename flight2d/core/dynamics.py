"""
Planar rigid-body dynamics for a wing + elevator vehicle.

Implements:
- Net force: wing and elevator lift/drag + weight + thrust
- Net moment: free pitching moments + elevator force about the centre of mass
- Time stepping: RK4 on the rate (pose held), then RK4 on the pose
"""

from typing import Optional

import numpy as np

from archimedes import struct

from ..environment.atmosphere import G0, dynamic_viscosity, isa_density
from .aerodynamics import Aerofoil
from .geometry import Angle, Vector
from .integrator import rk4
from .propulsion import NoThrust, ThrustModel
from .state import Kinematics

GRAVITY = Vector(0.0, -9.81)  # m/s^2


@struct(frozen=True)
class ForcesMoments:
    """Breakdown of the loads acting on the vehicle at one instant."""

    aero: Vector
    thrust: Vector
    weight: Vector
    moment: float

    @property
    def net_force(self) -> Vector:
        return self.aero + self.thrust + self.weight


class Vehicle:
    """
    Rigid body with a main wing and an elevator (stabilator).

    The elevator acts half a body length behind the centre of mass, along
    the body axis. Moment of inertia is that of a uniform rod about its
    centre, mass * length^2 / 12, fixed at construction.

    Parameters
    ----------
    mass : float
        Vehicle mass (kg)
    length : float
        Body length (m)
    pose : Kinematics
        Initial position (m) and orientation
    rate : Kinematics
        Initial velocity (m/s) and angular velocity (rad/s)
    wing, elevator : Aerofoil
        Lifting surfaces, owned by this vehicle
    thrust_model : ThrustModel, optional
        Defaults to NoThrust
    gravity : Vector, optional
        Gravitational acceleration (m/s^2), default (0, -9.81)
    """

    def __init__(self, mass: float, length: float, pose: Kinematics, rate: Kinematics,
                 wing: Aerofoil, elevator: Aerofoil,
                 thrust_model: Optional[ThrustModel] = None,
                 gravity: Vector = GRAVITY):
        if mass <= 0.0:
            raise ValueError(f"Vehicle mass must be positive, got {mass}")
        if length <= 0.0:
            raise ValueError(f"Vehicle length must be positive, got {length}")

        self.mass = mass
        self.length = length
        self.moment_of_inertia = mass * length**2 / 12.0
        self.pose = pose
        self.rate = rate
        self.wing = wing
        self.elevator = elevator
        self.thrust_model = thrust_model if thrust_model is not None else NoThrust()
        self.gravity = gravity

    @property
    def position(self) -> Vector:
        return self.pose.linear

    @property
    def orientation(self) -> Angle:
        return self.pose.angle

    @property
    def velocity(self) -> Vector:
        return self.rate.linear

    @property
    def altitude(self) -> float:
        return self.pose.y

    @property
    def speed(self) -> float:
        return self.rate.magnitude

    @property
    def weight(self) -> Vector:
        return self.mass * self.gravity

    @property
    def angle_of_attack(self) -> Angle:
        """Body orientation minus flight-path direction (no incidence offsets)."""
        return self.pose.angle - self.rate.direction

    def elevator_arm(self, pose: Kinematics) -> Vector:
        """Position of the elevator relative to the centre of mass."""
        return Vector.from_radians(self.length / 2.0, pose.angle.radians + np.pi)

    def aerodynamic_force(self, pose: Kinematics, rate: Kinematics) -> Vector:
        """Wing + elevator lift and drag (N)."""
        return self.wing.loads(pose, rate).force + self.elevator.loads(pose, rate).force

    def forces_moments(self, pose: Kinematics, rate: Kinematics) -> ForcesMoments:
        """
        Compute every load acting on the vehicle.

        Parameters:
        -----------
        pose : Kinematics
            Position and orientation
        rate : Kinematics
            Velocity and angular velocity

        Returns:
        --------
        ForcesMoments
            Aerodynamic, thrust and weight forces and the net moment
        """
        wing = self.wing.loads(pose, rate)
        elev = self.elevator.loads(pose, rate)

        aero = wing.force + elev.force
        thrust = self.thrust_model.compute_thrust(pose, rate, aero)

        # Free moments plus the elevator force acting behind the centre of mass
        moment = wing.moment + elev.moment + self.elevator_arm(pose).cross(elev.force)

        return ForcesMoments(aero, thrust, self.weight, moment)

    def net_force(self, pose: Kinematics, rate: Kinematics) -> Vector:
        return self.forces_moments(pose, rate).net_force

    def net_moment(self, pose: Kinematics, rate: Kinematics) -> float:
        return self.forces_moments(pose, rate).moment

    def acceleration(self, pose: Kinematics, rate: Kinematics) -> Kinematics:
        """Time derivative of the rate: (F / m, M / I)."""
        loads = self.forces_moments(pose, rate)
        return Kinematics(loads.net_force / self.mass,
                          loads.moment / self.moment_of_inertia)

    def advance(self, h: float):
        """
        Step the vehicle forward by ``h`` seconds.

        The rate is integrated first with the pose held fixed, then the pose
        is integrated using the new rate.
        """
        pose = self.pose
        self.rate = rk4(lambda t, rate: self.acceleration(pose, rate), self.rate, 0.0, h)

        rate = self.rate
        self.pose = rk4(lambda t, _: rate, self.pose, 0.0, h)

    def g_force(self) -> float:
        """Non-gravitational load factor, |aero + thrust| / (m * g0)."""
        loads = self.forces_moments(self.pose, self.rate)
        return (loads.aero + loads.thrust).magnitude / (self.mass * G0)

    def reynolds_number(self) -> float:
        """Reynolds number based on wing chord at the current altitude and speed."""
        h = self.altitude
        return isa_density(h) * self.speed * self.wing.chord / dynamic_viscosity(h)

    def __repr__(self) -> str:
        return (f"Vehicle(mass={self.mass:g} kg, length={self.length:g} m, "
                f"pos=({self.position.x:.1f}, {self.position.y:.1f}) m, "
                f"speed={self.speed:.1f} m/s)")
