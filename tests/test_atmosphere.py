"""
Unit tests for the ISA atmosphere.
"""

import numpy as np
import pytest

from flight2d.environment.atmosphere import (
    StandardAtmosphere,
    density_ratio,
    dynamic_viscosity,
    isa_density,
    isa_pressure,
    isa_temperature,
)


class TestIsaFunctions:
    """Test the altitude functions."""

    def test_sea_level(self):
        assert isa_temperature(0.0) == pytest.approx(288.15)
        assert isa_pressure(0.0) == pytest.approx(101325.0)
        assert isa_density(0.0) == pytest.approx(1.225)
        assert density_ratio(0.0) == pytest.approx(1.0)

    def test_tropopause(self):
        assert isa_temperature(11000.0) == pytest.approx(216.65)
        assert isa_pressure(11000.0) == pytest.approx(22632.0, rel=1e-3)
        assert isa_density(11000.0) == pytest.approx(0.3639, rel=1e-2)

    def test_stratosphere_isothermal(self):
        assert isa_temperature(15000.0) == pytest.approx(216.65)
        assert isa_temperature(20000.0) == pytest.approx(216.65)

    def test_pressure_continuous_at_tropopause(self):
        assert isa_pressure(11000.0 - 1e-6) == pytest.approx(isa_pressure(11000.0), rel=1e-9)

    def test_density_decreases(self):
        altitudes = np.linspace(0.0, 20000.0, 41)
        densities = [isa_density(h) for h in altitudes]
        assert np.all(np.diff(densities) < 0.0)

    def test_sea_level_viscosity(self):
        assert dynamic_viscosity(0.0) == pytest.approx(1.789e-5, rel=1e-3)


class TestStandardAtmosphere:
    """Test the altitude-bound atmosphere object."""

    def test_properties(self):
        atm = StandardAtmosphere(0.0)
        props = atm.get_properties()

        assert props['density'] == pytest.approx(1.225)
        assert props['speed_of_sound'] == pytest.approx(340.29, rel=1e-3)
        assert props['kinematic_viscosity'] == pytest.approx(1.46e-5, rel=1e-2)

    def test_update(self):
        atm = StandardAtmosphere(0.0)
        atm.update(5000.0)
        assert atm.altitude == 5000.0
        assert atm.density == pytest.approx(isa_density(5000.0))

    def test_derived_quantities(self):
        atm = StandardAtmosphere(0.0)
        assert atm.get_mach_number(atm.speed_of_sound) == pytest.approx(1.0)
        assert atm.get_dynamic_pressure(10.0) == pytest.approx(0.5 * 1.225 * 100.0)
        assert atm.get_reynolds_number(100.0, 1.0) == pytest.approx(
            1.225 * 100.0 / dynamic_viscosity(0.0))
