"""
Glider Flight Example

Loads the glider configuration, flies it to the ground with the elevator
trim law engaged, prints a summary and saves the trajectory scatter and
time-history plots.
"""

import logging
import os
import sys

import matplotlib
matplotlib.use('Agg')  # Use non-interactive backend
import matplotlib.pyplot as plt

# Add repository root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from flight2d.io.config import load_vehicle_config
from flight2d.simulation.simulator import Simulation
from flight2d.visualization.plotting import plot_trajectory_scatter, plot_samples_vs_time


def main():
    logging.basicConfig(level=logging.INFO, format='%(asctime)s %(levelname)s %(name)s: %(message)s')

    print("=" * 60)
    print("2-D Glider Flight")
    print("=" * 60)
    print()

    here = os.path.dirname(__file__)
    config = load_vehicle_config(os.path.join(here, 'glider.yaml'))
    vehicle = config.create_vehicle()

    print(f"Vehicle: {config.name}")
    print(f"  Mass: {vehicle.mass:.0f} kg")
    print(f"  Length: {vehicle.length:.1f} m")
    print(f"  Pitch inertia: {vehicle.moment_of_inertia:.0f} kg m^2")
    print(f"  Wing area: {vehicle.wing.area:.1f} m^2")
    print()

    sim = Simulation(vehicle,
                     config=config.create_simulation_config(),
                     control_law=config.create_control_law())
    result = sim.run()

    df = result.to_dataframe()
    print("Result:")
    print(f"  Termination: {result.termination.value}")
    print(f"  Flight time: {result.time:.2f} s ({result.steps} steps)")
    print(f"  Range: {result.final_pose.x:.0f} m")
    print(f"  Peak altitude: {df['altitude'].max():.0f} m")
    print(f"  Max |AoA|: {df['angle_of_attack_deg'].abs().max():.1f} deg")
    print(f"  Max load: {df['g_force'].max():.2f} g")
    print()

    out_dir = os.path.join(here, 'output')
    os.makedirs(out_dir, exist_ok=True)

    plot_trajectory_scatter(result, title='Glider trajectory (red = |AoA|)',
                            save_path=os.path.join(out_dir, 'glider_trajectory.png'))
    plot_samples_vs_time(result, title='Glider flight history',
                         save_path=os.path.join(out_dir, 'glider_history.png'))
    plt.close('all')

    print(f"Plots saved to {out_dir}")


if __name__ == "__main__":
    main()
