"""
Planar kinematic state for rigid-body flight dynamics.

A vehicle carries two Kinematics values:
- pose: position (Vector, m) + orientation (Angle)
- rate: velocity (Vector, m/s) + angular velocity (float, rad/s)

Both support the algebra the RK4 integrator needs (addition, scaling by a
scalar, division by a scalar). Adding a rate to a pose yields a pose, since
Angle + float re-normalizes into an Angle.
"""

import numbers
from typing import Union

import numpy as np

from archimedes import struct, field

from .geometry import Angle, Vector


@struct(frozen=True)
class Kinematics:
    """
    Linear + angular component pair.

    Attributes
    ----------
    linear : Vector
        Position (pose) or velocity (rate)
    angular : Angle or float
        Orientation (pose, Angle) or angular velocity (rate, rad/s)
    """

    linear: Vector = field(default_factory=Vector)
    angular: Union[Angle, float] = 0.0

    @classmethod
    def pose(cls, position: Vector, orientation: Angle) -> 'Kinematics':
        """Create a pose from position and orientation."""
        return cls(position, orientation)

    @classmethod
    def rate(cls, velocity: Vector, angular_velocity: float = 0.0) -> 'Kinematics':
        """Create a rate from velocity and angular velocity (rad/s)."""
        return cls(velocity, float(angular_velocity))

    @property
    def x(self) -> float:
        return self.linear.x

    @property
    def y(self) -> float:
        return self.linear.y

    @property
    def angle(self) -> Angle:
        """Angular component viewed as a normalized Angle."""
        if isinstance(self.angular, Angle):
            return self.angular
        return Angle(self.angular)

    @property
    def direction(self) -> Angle:
        """Orientation of the linear component (free-stream direction for a rate)."""
        return self.linear.orientation

    @property
    def magnitude(self) -> float:
        """Magnitude of the linear component (speed for a rate)."""
        return self.linear.magnitude

    def is_finite(self) -> bool:
        angular = self.angular.radians if isinstance(self.angular, Angle) else self.angular
        return self.linear.is_finite() and bool(np.isfinite(angular))

    def __add__(self, other: 'Kinematics') -> 'Kinematics':
        if not isinstance(other, Kinematics):
            return NotImplemented
        return Kinematics(self.linear + other.linear, self.angular + other.angular)

    def __sub__(self, other: 'Kinematics') -> 'Kinematics':
        if not isinstance(other, Kinematics):
            return NotImplemented
        return Kinematics(self.linear - other.linear, self.angular - other.angular)

    def __mul__(self, scalar: float) -> 'Kinematics':
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return Kinematics(self.linear * scalar, self.angular * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> 'Kinematics':
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return Kinematics(self.linear / scalar, self.angular / scalar)

    def __repr__(self) -> str:
        return f"Kinematics(linear={self.linear!r}, angular={self.angular!r})"
