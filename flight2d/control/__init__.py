"""
Control systems for flight simulation.

This module provides the elevator trim control law and a static trim solver.
"""

from .autopilot import ProportionalPitchTrim
from .trim import TrimSolver, TrimResult

__all__ = ['ProportionalPitchTrim', 'TrimSolver', 'TrimResult']
