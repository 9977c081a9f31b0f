"""
Standard Plotting Functions

Trajectory scatter (distance vs altitude, coloured by angle of attack)
and state time histories for simulation results.
"""

from typing import Optional, Sequence, Tuple, Union

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.figure import Figure

from ..simulation.simulator import Sample, SimulationResult

SampleSource = Union[SimulationResult, Sequence[Sample]]

AOA_COLOR_SATURATION = 60.0  # deg


def _samples(source: SampleSource) -> Sequence[Sample]:
    if isinstance(source, SimulationResult):
        return source.samples
    return source


def aoa_colors(aoa_deg: np.ndarray) -> np.ndarray:
    """RGB colours with red intensity proportional to |AoA|, saturating at 60 deg."""
    red = np.clip(np.abs(aoa_deg) / AOA_COLOR_SATURATION, 0.0, 1.0)
    return np.column_stack([red, np.zeros_like(red), np.zeros_like(red)])


def plot_trajectory_scatter(
    source: SampleSource,
    title: str = "Trajectory",
    marker_size: float = 20.0,
    figsize: Tuple[float, float] = (10, 6),
    save_path: Optional[str] = None
) -> Figure:
    """
    Scatter plot of altitude against horizontal distance.

    Parameters
    ----------
    source : SimulationResult or sequence of Sample
        Samples to plot
    title : str, optional
        Plot title
    marker_size : float, optional
        Scatter marker area (points^2)
    figsize : Tuple[float, float], optional
        Figure size in inches
    save_path : Optional[str], optional
        Path to save figure (if None, figure is not saved)

    Returns
    -------
    Figure
        Matplotlib figure object
    """
    samples = _samples(source)
    if len(samples) == 0:
        raise ValueError("No samples to plot")

    data = np.array([s.as_plot_tuple() for s in samples])
    x, altitude, aoa = data[:, 0], data[:, 1], data[:, 2]

    fig, ax = plt.subplots(figsize=figsize)
    ax.scatter(x, altitude, c=aoa_colors(aoa), s=marker_size)

    ax.set_xlabel('Distance (m)', fontsize=11)
    ax.set_ylabel('Altitude (m)', fontsize=11)
    ax.set_title(title, fontsize=13, fontweight='bold')
    ax.set_aspect('equal', adjustable='datalim')
    ax.grid(True, alpha=0.3)

    plt.tight_layout()

    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches='tight')

    return fig


def plot_samples_vs_time(
    source: SampleSource,
    title: str = "Flight History",
    figsize: Tuple[float, float] = (12, 10),
    save_path: Optional[str] = None
) -> Figure:
    """
    Plot altitude, speed, angle of attack, g-force and elevator pitch vs time.

    Parameters
    ----------
    source : SimulationResult or sequence of Sample
        Samples to plot
    title : str, optional
        Main plot title
    figsize : Tuple[float, float], optional
        Figure size in inches
    save_path : Optional[str], optional
        Path to save figure

    Returns
    -------
    Figure
        Matplotlib figure object
    """
    samples = _samples(source)
    if len(samples) == 0:
        raise ValueError("No samples to plot")

    t = np.array([s.time for s in samples])
    panels = [
        ('altitude', 'Altitude (m)', 'b-'),
        ('speed', 'Speed (m/s)', 'g-'),
        ('angle_of_attack_deg', 'AoA (deg)', 'r-'),
        ('g_force', 'Load (g)', 'm-'),
        ('elevator_pitch_deg', 'Elevator (deg)', 'k-'),
    ]

    fig, axes = plt.subplots(len(panels), 1, figsize=figsize, sharex=True)

    for ax, (attr, label, style) in zip(axes, panels):
        ax.plot(t, [getattr(s, attr) for s in samples], style, linewidth=1.5)
        ax.set_ylabel(label, fontsize=11)
        ax.grid(True, alpha=0.3)

    axes[-1].set_xlabel('Time (s)', fontsize=11)
    fig.suptitle(title, fontsize=13, fontweight='bold')

    plt.tight_layout()

    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches='tight')

    return fig
