"""
Elevator trim control law.

A single proportional loop: each call nudges the elevator incidence so the
body pitches toward the orientation that would align it with the reversed
net aerodynamic force. No integral or derivative terms.
"""

from typing import Optional

import numpy as np

from ..core.dynamics import Vehicle
from ..core.geometry import Angle


class ProportionalPitchTrim:
    """
    Proportional elevator trim controller.

    Parameters
    ----------
    gain : float
        Elevator change per unit orientation error (rad/rad per update)
    pitch_limit : float, optional
        Maximum elevator incidence magnitude (radians). Unlimited if None.

    Attributes
    ----------
    last_error : float
        Signed orientation error from the most recent update (radians)
    """

    def __init__(self, gain: float = 1e-3, pitch_limit: Optional[float] = None):
        self.gain = gain
        self.pitch_limit = pitch_limit
        self.last_error = 0.0

    def target_orientation(self, vehicle: Vehicle) -> Optional[Angle]:
        """
        Orientation aligned with the reversed net aerodynamic force.

        Returns None when there is no aerodynamic force to align with.
        """
        aero = vehicle.aerodynamic_force(vehicle.pose, vehicle.rate)
        if aero.magnitude == 0.0:
            return None
        return (-aero).orientation

    def error(self, vehicle: Vehicle) -> float:
        """Signed error (target - orientation) in (-pi, pi] radians, 0 if undefined."""
        target = self.target_orientation(vehicle)
        if target is None:
            return 0.0
        return (target - vehicle.orientation).signed_radians

    def update(self, vehicle: Vehicle) -> Angle:
        """
        Apply one control step to the vehicle's elevator.

        Parameters
        ----------
        vehicle : Vehicle
            Vehicle whose elevator incidence is adjusted in place

        Returns
        -------
        Angle
            New elevator incidence
        """
        self.last_error = self.error(vehicle)

        # Elevator is aft of the centre of mass: more incidence pitches the nose down
        pitch = vehicle.elevator.pitch.signed_radians - self.gain * self.last_error
        if self.pitch_limit is not None:
            pitch = float(np.clip(pitch, -self.pitch_limit, self.pitch_limit))

        vehicle.elevator.set_pitch(Angle(pitch))
        return vehicle.elevator.pitch

    def reset(self):
        self.last_error = 0.0
