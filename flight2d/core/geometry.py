"""
Planar geometry primitives for 2-D flight dynamics.

Provides:
- Vector: immutable (x, y) pair with the usual vector algebra
- Angle: phase in radians, always normalized to [0, 2*pi)

Convention: x is horizontal distance, y is altitude (positive up).
Angles are measured counter-clockwise from the +x axis, so a positive
angular rate pitches the nose up when flying in the +x direction.
"""

import numbers

import numpy as np

from archimedes import struct

TWO_PI = 2.0 * np.pi


def wrap_radians(radians: float) -> float:
    """Wrap an angle in radians into the half-open interval [0, 2*pi)."""
    wrapped = float(radians) % TWO_PI
    # Tiny negative inputs round up to exactly 2*pi
    if wrapped >= TWO_PI:
        wrapped = 0.0
    return wrapped


@struct(frozen=True)
class Vector:
    """
    Immutable 2-D vector.

    Arithmetic is plain IEEE-754 double precision with no normalization
    or clamping. ``*`` and ``/`` take scalars only; use ``dot`` and
    ``cross`` for vector products.
    """

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def from_radians(cls, magnitude: float, radians: float) -> 'Vector':
        """Build a vector from polar form (angle in radians)."""
        return cls(magnitude * float(np.cos(radians)),
                   magnitude * float(np.sin(radians)))

    @classmethod
    def from_degrees(cls, magnitude: float, degrees: float) -> 'Vector':
        """Build a vector from polar form (angle in degrees)."""
        return cls.from_radians(magnitude, np.radians(degrees))

    @classmethod
    def from_angle(cls, magnitude: float, angle: 'Angle') -> 'Vector':
        """Build a vector of given magnitude pointing along ``angle``."""
        return cls.from_radians(magnitude, angle.radians)

    @property
    def magnitude(self) -> float:
        """Euclidean length."""
        return float(np.hypot(self.x, self.y))

    @property
    def orientation(self) -> 'Angle':
        """
        Direction of the vector, atan2(y, x).

        Degenerate for the zero vector, where atan2(0, 0) = 0 is returned.
        """
        return Angle(float(np.arctan2(self.y, self.x)))

    def unit(self) -> 'Vector':
        """Unit vector in the same direction (zero vector maps to itself)."""
        norm = self.magnitude
        if norm == 0.0:
            return Vector(0.0, 0.0)
        return Vector(self.x / norm, self.y / norm)

    def dot(self, other: 'Vector') -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: 'Vector') -> float:
        """Scalar z-component of the 3-D cross product self x other."""
        return self.x * other.y - self.y * other.x

    def is_finite(self) -> bool:
        return bool(np.isfinite(self.x) and np.isfinite(self.y))

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y])

    def __add__(self, other: 'Vector') -> 'Vector':
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: 'Vector') -> 'Vector':
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x - other.x, self.y - other.y)

    def __neg__(self) -> 'Vector':
        return Vector(-self.x, -self.y)

    def __mul__(self, scalar: float) -> 'Vector':
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return Vector(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> 'Vector':
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return Vector(self.x / scalar, self.y / scalar)

    def __repr__(self) -> str:
        return f"Vector({self.x:.6g}, {self.y:.6g})"


@struct(frozen=True)
class Angle:
    """
    Angle stored in radians, normalized to [0, 2*pi) on construction.

    Addition and subtraction (with another Angle or a plain number of
    radians) re-normalize, so ``Angle.from_degrees(1) - Angle.from_degrees(3)``
    is 358 degrees. Use ``signed_degrees`` / ``signed_radians`` to read an
    angle as a signed offset in (-180, 180] degrees.
    """

    radians: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, 'radians', wrap_radians(self.radians))

    @classmethod
    def from_radians(cls, radians: float) -> 'Angle':
        return cls(radians)

    @classmethod
    def from_degrees(cls, degrees: float) -> 'Angle':
        return cls(float(np.radians(degrees)))

    @classmethod
    def from_vector(cls, vector: Vector) -> 'Angle':
        return vector.orientation

    @property
    def degrees(self) -> float:
        """Angle in degrees, [0, 360)."""
        return float(np.degrees(self.radians))

    @property
    def signed_radians(self) -> float:
        """Angle in radians mapped to (-pi, pi]."""
        if self.radians > np.pi:
            return self.radians - TWO_PI
        return self.radians

    @property
    def signed_degrees(self) -> float:
        """Angle in degrees mapped to (-180, 180]."""
        return float(np.degrees(self.signed_radians))

    def unit(self) -> Vector:
        """Unit vector pointing along this angle."""
        return Vector.from_radians(1.0, self.radians)

    def __add__(self, other) -> 'Angle':
        if isinstance(other, Angle):
            return Angle(self.radians + other.radians)
        if isinstance(other, numbers.Real):
            return Angle(self.radians + float(other))
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other) -> 'Angle':
        if isinstance(other, Angle):
            return Angle(self.radians - other.radians)
        if isinstance(other, numbers.Real):
            return Angle(self.radians - float(other))
        return NotImplemented

    def __rsub__(self, other) -> 'Angle':
        if isinstance(other, numbers.Real):
            return Angle(float(other) - self.radians)
        return NotImplemented

    def __repr__(self) -> str:
        return f"Angle({self.degrees:.4f} deg)"
