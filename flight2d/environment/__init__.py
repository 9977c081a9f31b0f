"""
Environment models for flight simulation.

This module provides the ISA atmosphere and derived air properties.
"""

from .atmosphere import (
    StandardAtmosphere,
    isa_temperature,
    isa_pressure,
    isa_density,
    density_ratio,
    dynamic_viscosity,
)

__all__ = [
    'StandardAtmosphere',
    'isa_temperature',
    'isa_pressure',
    'isa_density',
    'density_ratio',
    'dynamic_viscosity',
]
