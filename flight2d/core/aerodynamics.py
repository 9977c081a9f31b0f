"""
Aerofoil aerodynamics for planar flight.

An Aerofoil (wing, stabilator, control surface) turns the owning vehicle's
pose and rate into lift, drag and a free pitching moment using tabulated
CL, CD and Cm indexed by angle of attack in degrees.
"""

from typing import Tuple

import numpy as np

from archimedes import struct

from ..environment.atmosphere import density_ratio
from .geometry import Angle, Vector
from .interpolation import Linear
from .state import Kinematics


@struct(frozen=True)
class AeroLoads:
    """Lift and drag forces (N) and free pitching moment (N m) of one aerofoil."""

    lift: Vector
    drag: Vector
    moment: float

    @property
    def force(self) -> Vector:
        return self.lift + self.drag


class Aerofoil:
    """
    Aerodynamic surface attached to a vehicle.

    The coefficient tables are shared, not copied: one set of tables may
    back every aerofoil of every vehicle in a run. ``pitch`` is the only
    mutable field and is how control surfaces are deflected.

    Parameters
    ----------
    area : float
        Planform area (m^2)
    chord : float
        Reference chord (m), used for the pitching moment
    pitch : Angle
        Incidence relative to the vehicle body axis
    cl, cd, cm : Linear
        Lift, drag and pitching-moment coefficient tables (x in degrees)

    Notes
    -----
    Tables are looked up with the SIGNED angle of attack in (-180, 180]
    degrees, so a -2 deg angle of attack reads x = -2, not x = 358. Tables
    tabulated over 0..360 must be shifted to -180..180 before use.
    """

    def __init__(self, area: float, chord: float, pitch: Angle,
                 cl: Linear, cd: Linear, cm: Linear):
        if area < 0.0:
            raise ValueError(f"Aerofoil area must be non-negative, got {area}")
        if chord < 0.0:
            raise ValueError(f"Aerofoil chord must be non-negative, got {chord}")

        self.area = area
        self.chord = chord
        self.pitch = pitch if isinstance(pitch, Angle) else Angle(pitch)
        self.cl = cl
        self.cd = cd
        self.cm = cm

    def set_pitch(self, pitch: Angle):
        """Deflect the surface to a new incidence."""
        self.pitch = pitch if isinstance(pitch, Angle) else Angle(pitch)

    def angle_of_attack(self, pose: Kinematics, rate: Kinematics) -> Angle:
        """Body orientation plus incidence, minus the free-stream direction."""
        return (pose.angle + self.pitch) - rate.direction

    def dynamic_pressure(self, pose: Kinematics, rate: Kinematics) -> float:
        """0.5 * sigma * V^2, with sigma the density ratio at the current altitude."""
        return 0.5 * density_ratio(pose.y) * rate.magnitude**2

    def coefficients(self, pose: Kinematics, rate: Kinematics) -> Tuple[float, float, float]:
        """(CL, CD, Cm) at the current angle of attack."""
        alpha_deg = self.angle_of_attack(pose, rate).signed_degrees
        return (self.cl.interpolate(alpha_deg),
                self.cd.interpolate(alpha_deg),
                self.cm.interpolate(alpha_deg))

    def loads(self, pose: Kinematics, rate: Kinematics) -> AeroLoads:
        """
        Lift, drag and pitching moment in one evaluation.

        Lift acts along the free-stream direction rotated +90 deg, drag
        against the free stream. At zero velocity the dynamic pressure is
        zero so every load is zero.
        """
        CL, CD, Cm = self.coefficients(pose, rate)
        q_bar = self.dynamic_pressure(pose, rate)
        stream = rate.direction.radians

        lift = Vector.from_radians(self.area * CL * q_bar, stream + np.pi / 2)
        drag = Vector.from_radians(self.area * CD * q_bar, stream + np.pi)
        moment = self.area * Cm * q_bar * self.chord

        return AeroLoads(lift, drag, moment)

    def lift_force(self, pose: Kinematics, rate: Kinematics) -> Vector:
        return self.loads(pose, rate).lift

    def drag_force(self, pose: Kinematics, rate: Kinematics) -> Vector:
        return self.loads(pose, rate).drag

    def pitching_moment(self, pose: Kinematics, rate: Kinematics) -> float:
        """Free moment (no line of action), applied directly to the angular dynamics."""
        return self.loads(pose, rate).moment

    def __repr__(self) -> str:
        return (f"Aerofoil(area={self.area:g} m^2, chord={self.chord:g} m, "
                f"pitch={self.pitch.signed_degrees:.2f} deg)")
