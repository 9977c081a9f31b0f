"""
Unit tests for piecewise-linear coefficient tables.
"""

import numpy as np
import pytest

from flight2d.core.interpolation import Linear


class TestLinear:
    """Test lookup, extrapolation and validation."""

    @pytest.fixture
    def table(self):
        return Linear([(-10.0, -1.0), (0.0, 0.5), (10.0, 2.0)])

    def test_exact_at_samples(self, table):
        for x, y in [(-10.0, -1.0), (0.0, 0.5), (10.0, 2.0)]:
            assert table.interpolate(x) == pytest.approx(y, abs=1e-15)

    @pytest.mark.parametrize("x,expected", [(5.0, 0.5), (2.5, 0.25), (7.5, 0.75)])
    def test_linear_within_segment(self, x, expected):
        table = Linear([(0.0, 0.0), (10.0, 1.0)])
        assert table(x) == pytest.approx(expected)

    def test_segment_selection(self, table):
        assert table(-5.0) == pytest.approx(-0.25)
        assert table(5.0) == pytest.approx(1.25)

    def test_extrapolates_past_both_ends(self):
        table = Linear([(0.0, 0.0), (10.0, 1.0)])
        assert table(20.0) == pytest.approx(2.0)
        assert table(-10.0) == pytest.approx(-1.0)

    def test_clamp_mode(self):
        table = Linear([(0.0, 0.0), (10.0, 1.0)], extrapolate=False)
        assert table(20.0) == pytest.approx(1.0)
        assert table(-10.0) == pytest.approx(0.0)
        assert table(5.0) == pytest.approx(0.5)

    def test_returns_float(self, table):
        assert isinstance(table(3.0), float)

    def test_accepts_array(self):
        data = np.array([[0.0, 1.0], [1.0, 3.0]])
        table = Linear(data)
        assert len(table) == 2
        assert table.domain == (0.0, 1.0)

    def test_read_only(self, table):
        with pytest.raises(ValueError):
            table.x[0] = 100.0

    def test_too_few_samples(self):
        with pytest.raises(ValueError, match="at least two"):
            Linear([(0.0, 1.0)])

    def test_non_increasing(self):
        with pytest.raises(ValueError, match="strictly increasing"):
            Linear([(0.0, 1.0), (0.0, 2.0)])
        with pytest.raises(ValueError, match="strictly increasing"):
            Linear([(1.0, 1.0), (0.0, 2.0)])

    def test_non_finite(self):
        with pytest.raises(ValueError, match="non-finite"):
            Linear([(0.0, np.nan), (1.0, 2.0)])

    def test_bad_shape(self):
        with pytest.raises(ValueError, match="shape"):
            Linear([(0.0, 1.0, 2.0), (1.0, 2.0, 3.0)])
