"""
Core planar flight dynamics components.

This module provides the geometry, state, interpolation, integration,
aerodynamic and rigid-body building blocks of the simulation.
"""

from .geometry import Vector, Angle, wrap_radians
from .state import Kinematics
from .interpolation import Linear
from .integrator import rk4, RK4Integrator
from .aerodynamics import Aerofoil, AeroLoads
from .propulsion import ThrustModel, NoThrust, ConstantThrust, TangentialCancellingThrust
from .dynamics import Vehicle, ForcesMoments, GRAVITY

__all__ = [
    'Vector',
    'Angle',
    'wrap_radians',
    'Kinematics',
    'Linear',
    'rk4',
    'RK4Integrator',
    'Aerofoil',
    'AeroLoads',
    'ThrustModel',
    'NoThrust',
    'ConstantThrust',
    'TangentialCancellingThrust',
    'Vehicle',
    'ForcesMoments',
    'GRAVITY',
]
