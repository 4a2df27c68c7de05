"""Quaternion value type.

Quaternion Convention: (w, x, y, z) - scalar first

Unit norm is not enforced. Call ``normalize`` after operations that can drift
(repeated multiplication) or after building a quaternion from an un-normalized
source.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from xform3d.core.vector3 import Vector3, cross, dot

if TYPE_CHECKING:
    from xform3d.types import QuaternionLike


@dataclass(frozen=True)
class Quaternion:
    """Immutable quaternion (w, x, y, z) with exact component-wise equality."""

    w: float
    x: float
    y: float
    z: float

    # NumPy scalars on the left are not supported operands
    __array_ufunc__ = None

    @classmethod
    def identity(cls) -> Quaternion:
        """Return the identity rotation (1, 0, 0, 0)."""
        return cls(1.0, 0.0, 0.0, 0.0)

    @classmethod
    def from_scalar_vector(cls, w: float, v: Vector3) -> Quaternion:
        return cls(w, v.x, v.y, v.z)

    @classmethod
    def from_array(cls, values: QuaternionLike) -> Quaternion:
        """Create a quaternion from a length-4 sequence or array (w, x, y, z).

        :raises ValueError: If values does not hold exactly four components
        """
        arr = np.asarray(values, dtype=np.float64).reshape(-1)
        if arr.shape != (4,):
            raise ValueError(f"Quaternion must be shape (4,), got {arr.shape}")
        return cls(float(arr[0]), float(arr[1]), float(arr[2]), float(arr[3]))

    def to_array(self) -> np.ndarray:
        """Return components as a float64 array [4] (w, x, y, z)."""
        return np.array([self.w, self.x, self.y, self.z], dtype=np.float64)

    @property
    def vector(self) -> Vector3:
        """Vector part (x, y, z)."""
        return Vector3(self.x, self.y, self.z)

    def __neg__(self) -> Quaternion:
        return Quaternion(-self.w, -self.x, -self.y, -self.z)

    def __add__(self, other: Quaternion) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion(self.w + other.w, self.x + other.x, self.y + other.y, self.z + other.z)

    def __mul__(self, other: Quaternion) -> Quaternion:
        """Hamilton product self * other."""
        if not isinstance(other, Quaternion):
            return NotImplemented
        va = self.vector
        vb = other.vector
        w = self.w * other.w - dot(va, vb)
        v = cross(va, vb) + vb * self.w + va * other.w
        return Quaternion(w, v.x, v.y, v.z)

    def conjugate(self) -> Quaternion:
        return Quaternion(self.w, -self.x, -self.y, -self.z)

    def magnitude_squared(self) -> float:
        return self.w * self.w + self.x * self.x + self.y * self.y + self.z * self.z

    def magnitude(self) -> float:
        return math.sqrt(self.magnitude_squared())

    def normalize(self) -> Quaternion:
        """Divide every component by the magnitude.

        :raises ZeroDivisionError: If the quaternion has zero magnitude
        """
        n = self.magnitude()
        if n == 0.0:
            raise ZeroDivisionError("Cannot normalize a zero-magnitude quaternion")
        return Quaternion(self.w / n, self.x / n, self.y / n, self.z / n)


def identity() -> Quaternion:
    return Quaternion.identity()


def conjugate(q: Quaternion) -> Quaternion:
    return q.conjugate()


def magnitude_squared(q: Quaternion) -> float:
    return q.magnitude_squared()


def normalize(q: Quaternion) -> Quaternion:
    return q.normalize()
