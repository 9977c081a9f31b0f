"""Fixed-step simulation driver."""

from .simulator import (
    Simulation,
    SimulationConfig,
    SimulationResult,
    Sample,
    Termination,
    NonFiniteStateError,
)

__all__ = [
    'Simulation',
    'SimulationConfig',
    'SimulationResult',
    'Sample',
    'Termination',
    'NonFiniteStateError',
]
