"""
Fixed-step flight simulation driver.

Each step:
1. Apply the control law (if any)
2. Advance the vehicle by RK4 (rate, then pose)
3. Check the state is finite
4. Record a decimated Sample
Runs end on ground impact (altitude <= 0) or when the step budget is spent.
"""

import logging
from enum import Enum
from typing import List, Optional, Tuple

import pandas as pd

from archimedes import struct, field

from ..control.autopilot import ProportionalPitchTrim
from ..core.dynamics import Vehicle
from ..core.state import Kinematics

logger = logging.getLogger(__name__)


class Termination(Enum):
    GROUND_IMPACT = "ground_impact"
    STEP_BUDGET = "step_budget"


class NonFiniteStateError(FloatingPointError):
    """Raised when an integration step produces NaN or infinite state."""


@struct(frozen=True)
class SimulationConfig:
    """
    Time stepping and sampling settings.

    Attributes
    ----------
    steps_per_second : int
        Integration steps per simulated second (dt = 1 / steps_per_second)
    max_steps : int
        Step budget
    sample_interval : int
        Record a Sample every ``sample_interval`` steps
    """

    steps_per_second: int = 1000
    max_steps: int = 1_000_000
    sample_interval: int = 100

    def __post_init__(self):
        if self.steps_per_second <= 0:
            raise ValueError(f"steps_per_second must be positive, got {self.steps_per_second}")
        if self.max_steps < 0:
            raise ValueError(f"max_steps must be non-negative, got {self.max_steps}")
        if self.sample_interval < 1:
            raise ValueError(f"sample_interval must be at least 1, got {self.sample_interval}")

    @property
    def dt(self) -> float:
        return 1.0 / self.steps_per_second


@struct(frozen=True)
class Sample:
    """Snapshot of the vehicle for logging and plotting."""

    time: float
    x: float
    altitude: float
    orientation_deg: float
    angle_of_attack_deg: float
    speed: float
    g_force: float
    reynolds: float
    elevator_pitch_deg: float

    def as_plot_tuple(self) -> Tuple[float, float, float]:
        """(horizontal distance, altitude, |angle of attack| in degrees)."""
        return (self.x, self.altitude, abs(self.angle_of_attack_deg))


@struct(frozen=False)
class SimulationResult:
    """Samples and terminal state of one run."""

    samples: List[Sample] = field(default_factory=list)
    termination: Optional[Termination] = None
    steps: int = 0
    time: float = 0.0
    final_pose: Optional[Kinematics] = None
    final_rate: Optional[Kinematics] = None

    def scatter_data(self) -> List[Tuple[float, float, float]]:
        return [s.as_plot_tuple() for s in self.samples]

    def to_dataframe(self) -> pd.DataFrame:
        columns = ['time', 'x', 'altitude', 'orientation_deg', 'angle_of_attack_deg',
                   'speed', 'g_force', 'reynolds', 'elevator_pitch_deg']
        return pd.DataFrame([[getattr(s, c) for c in columns] for s in self.samples],
                            columns=columns)


class Simulation:
    """
    Single-vehicle planar flight simulation.

    The simulation owns nothing but its clock: the vehicle is mutated in
    place every step and the control law (optional) adjusts its elevator.

    Parameters
    ----------
    vehicle : Vehicle
        Vehicle to fly
    config : SimulationConfig, optional
        Step size, budget and sampling interval
    control_law : ProportionalPitchTrim, optional
        Elevator control law applied before every step
    """

    def __init__(self, vehicle: Vehicle,
                 config: Optional[SimulationConfig] = None,
                 control_law: Optional[ProportionalPitchTrim] = None):
        self.vehicle = vehicle
        self.config = config if config is not None else SimulationConfig()
        self.control_law = control_law
        self.time = 0.0
        self.steps = 0

    @property
    def dt(self) -> float:
        return self.config.dt

    def sample(self) -> Sample:
        """Record the vehicle's current state."""
        v = self.vehicle
        return Sample(
            time=self.time,
            x=v.position.x,
            altitude=v.altitude,
            orientation_deg=v.orientation.signed_degrees,
            angle_of_attack_deg=v.angle_of_attack.signed_degrees,
            speed=v.speed,
            g_force=v.g_force(),
            reynolds=v.reynolds_number(),
            elevator_pitch_deg=v.elevator.pitch.signed_degrees,
        )

    def step(self):
        """
        Advance one time step.

        Raises
        ------
        NonFiniteStateError
            If the new pose or rate contains NaN or infinity
        """
        if self.control_law is not None:
            self.control_law.update(self.vehicle)

        self.vehicle.advance(self.dt)
        self.steps += 1
        self.time = self.steps * self.dt

        if not (self.vehicle.pose.is_finite() and self.vehicle.rate.is_finite()):
            raise NonFiniteStateError(
                f"Non-finite vehicle state at t={self.time:.4f} s "
                f"(pose={self.vehicle.pose!r}, rate={self.vehicle.rate!r})"
            )

    def run(self) -> SimulationResult:
        """
        Run until ground impact or the step budget is exhausted.

        Returns
        -------
        SimulationResult
            Decimated samples, termination reason and final state
        """
        cfg = self.config
        result = SimulationResult()
        termination = Termination.STEP_BUDGET

        logger.info("Starting simulation: dt=%.4g s, max_steps=%d, vehicle=%r",
                    self.dt, cfg.max_steps, self.vehicle)

        sampled = False
        for i in range(cfg.max_steps):
            self.step()

            sampled = i % cfg.sample_interval == 0
            if sampled:
                sample = self.sample()
                result.samples.append(sample)
                logger.debug("t=%.2f s x=%.1f m alt=%.1f m AoA=%.2f deg V=%.1f m/s",
                             sample.time, sample.x, sample.altitude,
                             sample.angle_of_attack_deg, sample.speed)

            if self.vehicle.altitude <= 0.0:
                termination = Termination.GROUND_IMPACT
                break

        # Always finish on the terminal state
        if not sampled:
            result.samples.append(self.sample())

        result.termination = termination
        result.steps = self.steps
        result.time = self.time
        result.final_pose = self.vehicle.pose
        result.final_rate = self.vehicle.rate

        logger.info("Simulation finished (%s) after %d steps, t=%.3f s, x=%.1f m",
                    termination.value, self.steps, self.time, self.vehicle.position.x)

        return result
