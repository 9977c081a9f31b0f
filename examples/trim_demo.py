"""
Static Trim Example

Solves for the elevator incidence that zeroes the net pitching moment in
level flight at a range of airspeeds.
"""

import os
import sys

import numpy as np

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from flight2d.control.trim import TrimSolver
from flight2d.core.geometry import Angle, Vector
from flight2d.core.state import Kinematics
from flight2d.io.config import load_vehicle_config


def main():
    here = os.path.dirname(__file__)
    config = load_vehicle_config(os.path.join(here, 'glider.yaml'))
    tables = config.create_tables()

    print(f"{'V (m/s)':<10} {'elevator (deg)':<16} {'residual (N m)':<16} {'iters':<6}")
    print("-" * 50)

    for speed in np.arange(100.0, 301.0, 50.0):
        vehicle = config.create_vehicle(tables)
        vehicle.pose = Kinematics.pose(Vector(0.0, 3000.0), Angle.from_degrees(2.0))
        vehicle.rate = Kinematics.rate(Vector(speed, 0.0))

        solver = TrimSolver(vehicle)
        try:
            trim = solver.trim_elevator()
        except ValueError as e:
            print(f"{speed:<10.0f} no trim: {e}")
            continue

        print(f"{speed:<10.0f} {trim.elevator.signed_degrees:<16.3f} "
              f"{trim.residual_moment:<16.3e} {trim.iterations:<6d}")


if __name__ == "__main__":
    main()
