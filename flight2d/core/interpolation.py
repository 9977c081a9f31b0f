"""
Tabulated aerodynamic coefficients.

A coefficient table is an ordered list of (angle of attack in degrees,
coefficient) samples with strictly increasing abscissae. Lookups are
piecewise linear; outside the table the end segments are extended
(linear extrapolation), not clamped, unless ``extrapolate=False``.
"""

from typing import Iterable, Sequence, Tuple

import numpy as np


class Linear:
    """
    Piecewise-linear interpolation over (x, y) samples.

    Tables are read-only once built and may be shared by any number of
    aerofoils and simulation runs.

    Parameters
    ----------
    data : sequence of (x, y) pairs or array, shape (N, 2)
        Samples with strictly increasing x, N >= 2
    extrapolate : bool, optional
        Extend the first/last segment past the table bounds (default).
        When False, x is clamped to the table domain before lookup.

    Raises
    ------
    ValueError
        If fewer than two samples are given, x is not strictly increasing,
        or any sample is not finite.
    """

    def __init__(self, data: Iterable[Sequence[float]], extrapolate: bool = True):
        table = np.array(data, dtype=float)

        if table.ndim != 2 or table.shape[1] != 2:
            raise ValueError(f"Coefficient table must have shape (N, 2), got {table.shape}")
        if table.shape[0] < 2:
            raise ValueError(f"Coefficient table needs at least two samples, got {table.shape[0]}")
        if not np.all(np.isfinite(table)):
            raise ValueError("Coefficient table contains non-finite values")
        if np.any(np.diff(table[:, 0]) <= 0.0):
            raise ValueError("Coefficient table x values must be strictly increasing")

        self._x = np.ascontiguousarray(table[:, 0])
        self._y = np.ascontiguousarray(table[:, 1])
        self._x.flags.writeable = False
        self._y.flags.writeable = False
        self.extrapolate = extrapolate

    @property
    def x(self) -> np.ndarray:
        """Sample abscissae (read-only)."""
        return self._x

    @property
    def y(self) -> np.ndarray:
        """Sample values (read-only)."""
        return self._y

    @property
    def domain(self) -> Tuple[float, float]:
        """(first x, last x) of the table."""
        return float(self._x[0]), float(self._x[-1])

    def interpolate(self, x: float) -> float:
        """
        Piecewise-linear estimate at ``x``.

        The segment is [i, i+1] where i is the greatest sample index with
        x_i <= x, pinned to the first segment below the table and to the
        last segment at/after the final sample.
        """
        xs, ys = self._x, self._y

        if not self.extrapolate:
            x = min(max(x, xs[0]), xs[-1])

        i = int(np.searchsorted(xs, x, side='right')) - 1
        i = min(max(i, 0), len(xs) - 2)
        j = i + 1

        t = (x - xs[i]) / (xs[j] - xs[i])
        return float(ys[i] + t * (ys[j] - ys[i]))

    def __call__(self, x: float) -> float:
        return self.interpolate(x)

    def __len__(self) -> int:
        return len(self._x)

    def __repr__(self) -> str:
        lo, hi = self.domain
        mode = "extrapolate" if self.extrapolate else "clamp"
        return f"Linear({len(self)} samples, x in [{lo:g}, {hi:g}], {mode})"
