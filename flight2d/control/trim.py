"""
Static Trim Calculation

Finds the elevator incidence that zeroes the vehicle's net pitching
moment at its current pose and rate.
"""

from typing import Tuple

import numpy as np
from scipy.optimize import brentq

from archimedes import struct

from ..core.dynamics import Vehicle
from ..core.geometry import Angle


@struct(frozen=True)
class TrimResult:
    """Outcome of a trim search."""

    elevator: Angle
    residual_moment: float
    iterations: int
    converged: bool


class TrimSolver:
    """
    Trim solver for the elevator of a wing + elevator vehicle.

    Parameters
    ----------
    vehicle : Vehicle
        Vehicle to trim. Its elevator incidence is varied during the search
        and restored afterwards; use ``apply`` to set the trimmed value.
    """

    def __init__(self, vehicle: Vehicle):
        self.vehicle = vehicle

    def moment_residual(self, elevator_deg: float) -> float:
        """Net moment (N m) with the elevator set to ``elevator_deg``."""
        self.vehicle.elevator.set_pitch(Angle.from_degrees(elevator_deg))
        return self.vehicle.net_moment(self.vehicle.pose, self.vehicle.rate)

    def trim_elevator(self,
                      bracket_deg: Tuple[float, float] = (-30.0, 30.0),
                      xtol: float = 1e-10) -> TrimResult:
        """
        Solve for zero net moment within an elevator bracket.

        Parameters
        ----------
        bracket_deg : tuple of float, optional
            (lower, upper) elevator incidence search bracket (degrees)
        xtol : float, optional
            Absolute tolerance on the elevator angle (degrees)

        Returns
        -------
        TrimResult
            Trimmed elevator incidence and solver diagnostics

        Raises
        ------
        ValueError
            If the moment does not change sign across the bracket
        """
        lower, upper = bracket_deg
        original_pitch = self.vehicle.elevator.pitch

        try:
            m_lower = self.moment_residual(lower)
            m_upper = self.moment_residual(upper)
            if np.sign(m_lower) == np.sign(m_upper) and m_lower != 0.0:
                raise ValueError(
                    f"Net moment does not change sign over elevator bracket "
                    f"[{lower}, {upper}] deg (M={m_lower:.3g}, {m_upper:.3g} N m)"
                )

            root, info = brentq(self.moment_residual, lower, upper,
                                xtol=xtol, full_output=True)
            residual = self.moment_residual(root)
        finally:
            self.vehicle.elevator.set_pitch(original_pitch)

        return TrimResult(
            elevator=Angle.from_degrees(root),
            residual_moment=residual,
            iterations=info.iterations,
            converged=info.converged,
        )

    def apply(self, result: TrimResult):
        """Set the vehicle's elevator to a trim result."""
        self.vehicle.elevator.set_pitch(result.elevator)
