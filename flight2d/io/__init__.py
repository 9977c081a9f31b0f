"""
Input/output: coefficient table files and YAML vehicle configuration.
"""

from .tables import AeroTables, read_table_csv, load_coefficient_table, load_coefficient_tables
from .config import (
    VehicleConfig,
    load_vehicle_config,
    save_vehicle_config,
    create_example_config,
)

__all__ = [
    'AeroTables',
    'read_table_csv',
    'load_coefficient_table',
    'load_coefficient_tables',
    'VehicleConfig',
    'load_vehicle_config',
    'save_vehicle_config',
    'create_example_config',
]
