"""
Visualization Module

Provides plotting for simulation results.
"""

from .plotting import (
    plot_trajectory_scatter,
    plot_samples_vs_time,
    aoa_colors,
)

__all__ = [
    'plot_trajectory_scatter',
    'plot_samples_vs_time',
    'aoa_colors',
]
