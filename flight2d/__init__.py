"""
flight2d: planar rigid-body flight simulation.

A wing + elevator vehicle flown through the ISA atmosphere with tabulated
aerodynamic coefficients, fixed-step RK4 integration and an optional
proportional elevator trim law.
"""

__version__ = "0.1.0"

from .core import Angle, Vector, Kinematics, Linear, Aerofoil, Vehicle, rk4
from .control import ProportionalPitchTrim, TrimSolver
from .simulation import Simulation, SimulationConfig, SimulationResult, Termination

__all__ = [
    'Angle',
    'Vector',
    'Kinematics',
    'Linear',
    'Aerofoil',
    'Vehicle',
    'rk4',
    'ProportionalPitchTrim',
    'TrimSolver',
    'Simulation',
    'SimulationConfig',
    'SimulationResult',
    'Termination',
]
