"""
Propulsion models for planar flight dynamics.

Provides:
- Base thrust model interface
- No thrust (glider / projectile)
- Constant thrust along the body axis
- Thrust that cancels the tangential aerodynamic force
"""

from abc import ABC, abstractmethod

from .geometry import Vector
from .state import Kinematics


class ThrustModel(ABC):
    """
    Base class for thrust models.

    Thrust is a force through the centre of mass, so it adds no moment.
    """

    @abstractmethod
    def compute_thrust(self, pose: Kinematics, rate: Kinematics,
                       aero_force: Vector) -> Vector:
        """
        Compute thrust force.

        Parameters
        ----------
        pose : Kinematics
            Current position and orientation
        rate : Kinematics
            Current velocity and angular velocity
        aero_force : Vector
            Net aerodynamic force on the vehicle (N)

        Returns
        -------
        Vector
            Thrust force in the inertial frame (N)
        """


class NoThrust(ThrustModel):
    """Unpowered flight."""

    def compute_thrust(self, pose, rate, aero_force):
        return Vector(0.0, 0.0)


class ConstantThrust(ThrustModel):
    """
    Fixed-magnitude thrust along the body axis.

    Parameters
    ----------
    thrust : float
        Thrust magnitude (N)
    """

    def __init__(self, thrust: float = 0.0):
        self.thrust = thrust

    def compute_thrust(self, pose, rate, aero_force):
        return Vector.from_angle(self.thrust, pose.angle)


class TangentialCancellingThrust(ThrustModel):
    """
    Thrust equal and opposite to the aerodynamic force along the flight path.

    T = -(u . F_aero) u, with u the free-stream unit vector. Zero when the
    vehicle is at rest.
    """

    def compute_thrust(self, pose, rate, aero_force):
        stream = rate.linear.unit()
        return -aero_force.dot(stream) * stream
