"""
International Standard Atmosphere (two-layer)

Provides atmospheric properties as a function of altitude:
- Temperature
- Pressure
- Density (dimensional and normalized to sea level)
- Viscosity
- Speed of sound

Units: SI (metres, kelvin, pascals, kg/m^3)
"""

from functools import lru_cache

import numpy as np

# Sea level conditions
T0 = 288.15  # K
P0 = 101325.0  # Pa
RHO0 = 1.225  # kg/m^3

LAPSE_RATE = 0.0065  # K/m, troposphere
G0 = 9.80665  # m/s^2
R_AIR = 287.058  # J/(kg K)
GAMMA = 1.4

# Tropopause
H_TROPOPAUSE = 11000.0  # m
T_TROPOPAUSE = 216.65  # K
P_TROPOPAUSE = P0 * (T_TROPOPAUSE / T0) ** (G0 / (LAPSE_RATE * R_AIR))

# Sutherland's law
SUTHERLAND_C1 = 1.458e-6  # kg/(m s K^0.5)
SUTHERLAND_S = 110.4  # K


def isa_temperature(altitude: float) -> float:
    """Static temperature (K); isothermal at and above the tropopause."""
    if altitude < H_TROPOPAUSE:
        return T0 - LAPSE_RATE * altitude
    return T_TROPOPAUSE


def isa_pressure(altitude: float) -> float:
    """Static pressure (Pa): barometric formula below 11 km, isothermal decay above."""
    if altitude < H_TROPOPAUSE:
        temperature = T0 - LAPSE_RATE * altitude
        return P0 * (temperature / T0) ** (G0 / (LAPSE_RATE * R_AIR))
    return P_TROPOPAUSE * float(np.exp(-G0 * (altitude - H_TROPOPAUSE) / (R_AIR * T_TROPOPAUSE)))


def isa_density(altitude: float) -> float:
    """Air density (kg/m^3) from the ideal-gas ratio to sea-level conditions."""
    temperature = isa_temperature(altitude)
    pressure = isa_pressure(altitude)
    return RHO0 * (pressure / P0) * (T0 / temperature)


@lru_cache(maxsize=None)
def sea_level_density() -> float:
    """isa_density(0), computed once per process."""
    return isa_density(0.0)


def density_ratio(altitude: float) -> float:
    """Density normalized to sea level (1.0 at altitude 0)."""
    return isa_density(altitude) / sea_level_density()


def dynamic_viscosity(altitude: float) -> float:
    """Dynamic viscosity (Pa s), Sutherland's law."""
    temperature = isa_temperature(altitude)
    return SUTHERLAND_C1 * temperature ** 1.5 / (temperature + SUTHERLAND_S)


class StandardAtmosphere:
    """
    ISA atmosphere evaluated at a fixed altitude.

    Parameters
    ----------
    altitude : float
        Geometric altitude in metres

    Attributes
    ----------
    temperature : float
        Static temperature (K)
    pressure : float
        Static pressure (Pa)
    density : float
        Air density (kg/m^3)
    density_ratio : float
        Density relative to sea level
    speed_of_sound : float
        Speed of sound (m/s)
    dynamic_viscosity : float
        Dynamic viscosity (Pa s)
    kinematic_viscosity : float
        Kinematic viscosity (m^2/s)

    Notes
    -----
    Two layers only: the troposphere (0 - 11 km, -6.5 K/km) and the
    isothermal lower stratosphere above it. The stratospheric formula is
    applied at all higher altitudes.
    """

    def __init__(self, altitude: float = 0.0):
        self.altitude = altitude
        self._compute_properties()

    def _compute_properties(self):
        h = self.altitude

        self.temperature = isa_temperature(h)
        self.pressure = isa_pressure(h)
        self.density = isa_density(h)
        self.density_ratio = self.density / sea_level_density()
        self.speed_of_sound = float(np.sqrt(GAMMA * R_AIR * self.temperature))
        self.dynamic_viscosity = dynamic_viscosity(h)
        self.kinematic_viscosity = self.dynamic_viscosity / self.density

    def update(self, altitude: float):
        """Re-evaluate properties at a new altitude (m)."""
        self.altitude = altitude
        self._compute_properties()

    def get_properties(self) -> dict:
        """All atmospheric properties as a dictionary."""
        return {
            'altitude': self.altitude,
            'temperature': self.temperature,
            'pressure': self.pressure,
            'density': self.density,
            'density_ratio': self.density_ratio,
            'speed_of_sound': self.speed_of_sound,
            'dynamic_viscosity': self.dynamic_viscosity,
            'kinematic_viscosity': self.kinematic_viscosity,
        }

    def get_mach_number(self, velocity: float) -> float:
        return velocity / self.speed_of_sound

    def get_dynamic_pressure(self, velocity: float) -> float:
        """Dimensional dynamic pressure q = 0.5 * rho * V^2 (Pa)."""
        return 0.5 * self.density * velocity**2

    def get_reynolds_number(self, velocity: float, length: float) -> float:
        """
        Reynolds number for a reference length.

        Parameters
        ----------
        velocity : float
            True airspeed (m/s)
        length : float
            Reference length, e.g. chord (m)
        """
        return velocity * length / self.kinematic_viscosity

    def __repr__(self):
        return (f"StandardAtmosphere(altitude={self.altitude:.0f} m, "
                f"T={self.temperature:.2f} K, "
                f"P={self.pressure:.0f} Pa, "
                f"rho={self.density:.4f} kg/m^3)")


if __name__ == "__main__":
    print(f"{'Alt (m)':<10} {'T (K)':<10} {'P (Pa)':<12} {'rho (kg/m3)':<13} {'sigma':<8}")
    print("-" * 55)
    for alt in [0, 1000, 5000, 11000, 15000, 20000]:
        atm = StandardAtmosphere(alt)
        print(f"{alt:<10.0f} {atm.temperature:<10.2f} {atm.pressure:<12.1f} "
              f"{atm.density:<13.5f} {atm.density_ratio:<8.4f}")
