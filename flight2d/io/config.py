"""
Vehicle Configuration System

Provides YAML-based configuration loading for vehicle parameters,
coefficient tables, control law and simulation setup.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union

import numpy as np
import yaml

from ..control.autopilot import ProportionalPitchTrim
from ..core.aerodynamics import Aerofoil
from ..core.dynamics import GRAVITY, Vehicle
from ..core.geometry import Angle, Vector
from ..core.interpolation import Linear
from ..core.propulsion import ConstantThrust, NoThrust, TangentialCancellingThrust
from ..core.state import Kinematics
from ..simulation.simulator import SimulationConfig
from .tables import AeroTables, load_coefficient_table


class VehicleConfig:
    """
    Vehicle configuration loaded from YAML.

    Angles in the configuration are degrees (angular velocity in deg/s);
    coefficient tables are CSV paths (relative to ``base_dir``) or inline
    lists of [alpha_deg, coefficient] pairs.

    Attributes
    ----------
    name : str
        Vehicle name
    mass : float
        Vehicle mass (kg)
    length : float
        Body length (m)
    gravity : Vector
        Gravitational acceleration (m/s^2)
    initial_state : dict
        Initial position, orientation, speed, flight path and pitch rate
    wing, elevator : dict
        Aerofoil parameters (area, chord, pitch)
    thrust : dict
        Thrust model configuration
    tables : dict
        Coefficient table sources
    control : dict
        Control law configuration
    simulation : dict
        Time stepping configuration
    """

    def __init__(self, config_dict: Dict[str, Any], base_dir: Optional[Union[str, Path]] = None):
        self.raw_config = config_dict
        self.base_dir = Path(base_dir) if base_dir is not None else Path('.')
        self._parse_config()

    def _parse_config(self):
        vehicle = self.raw_config.get('vehicle', {})

        self.name = vehicle.get('name', 'Unnamed Vehicle')
        self.mass = float(vehicle.get('mass', 10.0))
        self.length = float(vehicle.get('length', 1.0))

        gx, gy = vehicle.get('gravity', [GRAVITY.x, GRAVITY.y])
        self.gravity = Vector(float(gx), float(gy))

        self.initial_state = vehicle.get('initial_state', {})
        self.wing = vehicle.get('wing', {})
        self.elevator = vehicle.get('elevator', {})
        self.thrust = vehicle.get('thrust', {})

        self.tables = self.raw_config.get('tables', {})
        self.control = self.raw_config.get('control', {})
        self.simulation = self.raw_config.get('simulation', {})

    def _load_table(self, source, extrapolate: bool) -> Linear:
        if isinstance(source, (str, Path)):
            path = Path(source)
            if not path.is_absolute():
                path = self.base_dir / path
            return load_coefficient_table(path, extrapolate=extrapolate)
        return Linear(source, extrapolate=extrapolate)

    def create_tables(self) -> AeroTables:
        """Load or build the CL, CD and Cm tables."""
        extrapolate = self.tables.get('extrapolate', True)
        missing = [k for k in ('lift', 'drag', 'moment') if k not in self.tables]
        if missing:
            raise ValueError(f"Missing coefficient tables: {', '.join(missing)}")

        return AeroTables(
            cl=self._load_table(self.tables['lift'], extrapolate),
            cd=self._load_table(self.tables['drag'], extrapolate),
            cm=self._load_table(self.tables['moment'], extrapolate),
        )

    @staticmethod
    def _create_aerofoil(params: Dict[str, Any], tables: AeroTables) -> Aerofoil:
        return Aerofoil(
            area=float(params.get('area', 0.0)),
            chord=float(params.get('chord', 1.0)),
            pitch=Angle.from_degrees(params.get('pitch', 0.0)),
            cl=tables.cl,
            cd=tables.cd,
            cm=tables.cm,
        )

    def create_thrust_model(self):
        """Create the thrust model from configuration."""
        thrust_type = self.thrust.get('type', 'none')

        if thrust_type == 'none':
            return NoThrust()
        elif thrust_type == 'constant':
            return ConstantThrust(thrust=float(self.thrust.get('thrust', 0.0)))
        elif thrust_type == 'tangential_cancelling':
            return TangentialCancellingThrust()
        else:
            raise ValueError(f"Unknown thrust model type: {thrust_type}")

    def create_initial_kinematics(self):
        """(pose, rate) from the initial_state section."""
        init = self.initial_state
        x, y = init.get('position', [0.0, 100.0])

        pose = Kinematics.pose(
            Vector(float(x), float(y)),
            Angle.from_degrees(init.get('orientation', 0.0)),
        )
        rate = Kinematics.rate(
            Vector.from_degrees(float(init.get('speed', 0.0)), init.get('flight_path', 0.0)),
            float(np.radians(init.get('angular_velocity', 0.0))),
        )
        return pose, rate

    def create_vehicle(self, tables: Optional[AeroTables] = None) -> Vehicle:
        """
        Build a Vehicle from configuration.

        Parameters
        ----------
        tables : AeroTables, optional
            Pre-loaded tables to share; loaded from configuration if None
        """
        if tables is None:
            tables = self.create_tables()

        pose, rate = self.create_initial_kinematics()

        return Vehicle(
            mass=self.mass,
            length=self.length,
            pose=pose,
            rate=rate,
            wing=self._create_aerofoil(self.wing, tables),
            elevator=self._create_aerofoil(self.elevator, tables),
            thrust_model=self.create_thrust_model(),
            gravity=self.gravity,
        )

    def create_control_law(self) -> Optional[ProportionalPitchTrim]:
        """Control law, or None when disabled."""
        if not self.control.get('enabled', False):
            return None

        limit = self.control.get('pitch_limit')
        return ProportionalPitchTrim(
            gain=float(self.control.get('gain', 1e-3)),
            pitch_limit=float(np.radians(limit)) if limit is not None else None,
        )

    def create_simulation_config(self) -> SimulationConfig:
        sim = self.simulation
        return SimulationConfig(
            steps_per_second=int(sim.get('steps_per_second', 1000)),
            max_steps=int(sim.get('max_steps', 1_000_000)),
            sample_interval=int(sim.get('sample_interval', 100)),
        )

    def __repr__(self):
        return (f"VehicleConfig(name='{self.name}', "
                f"mass={self.mass}, "
                f"length={self.length})")


def load_vehicle_config(yaml_file: Union[str, Path]) -> VehicleConfig:
    """
    Load vehicle configuration from a YAML file.

    Relative table paths are resolved against the YAML file's directory.

    Examples
    --------
    >>> config = load_vehicle_config('examples/glider.yaml')
    >>> vehicle = config.create_vehicle()
    """
    with open(yaml_file, 'r') as f:
        config_dict = yaml.safe_load(f)

    return VehicleConfig(config_dict, base_dir=Path(yaml_file).parent)


def save_vehicle_config(config: VehicleConfig, yaml_file: Union[str, Path]):
    """Write a configuration's raw dictionary to YAML."""
    with open(yaml_file, 'w') as f:
        yaml.dump(config.raw_config, f, default_flow_style=False, sort_keys=False)


def create_example_config() -> Dict[str, Any]:
    """
    Example configuration: a heavy glider launched at 45 degrees from 6 km.

    Tables are inline thin-aerofoil approximations, linear to +/-15 deg.
    """
    return {
        'vehicle': {
            'name': 'Example glider',
            'mass': 10000.0,     # kg
            'length': 10.0,      # m
            'gravity': [0.0, -9.81],
            'initial_state': {
                'position': [0.0, 6000.0],   # m
                'orientation': 45.0,         # deg
                'speed': 250.0,              # m/s
                'flight_path': 45.0,         # deg
                'angular_velocity': 0.0,     # deg/s
            },
            'wing': {'area': 100.0, 'chord': 1.0, 'pitch': 0.0},
            'elevator': {'area': 20.0, 'chord': 1.0, 'pitch': 0.0},
            'thrust': {'type': 'none'},
        },
        'tables': {
            'lift': [[-180.0, 0.0], [-90.0, 0.0], [-15.0, -1.25], [15.0, 1.75],
                     [90.0, 0.0], [180.0, 0.0]],
            'drag': [[-180.0, 0.05], [-90.0, 1.8], [0.0, 0.02], [90.0, 1.8],
                     [180.0, 0.05]],
            'moment': [[-180.0, 0.0], [-20.0, 0.15], [20.0, -0.25], [180.0, 0.0]],
            'extrapolate': True,
        },
        'control': {'enabled': False, 'gain': 1e-3, 'pitch_limit': 20.0},
        'simulation': {'steps_per_second': 100, 'max_steps': 100_000, 'sample_interval': 50},
    }
