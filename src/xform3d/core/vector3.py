"""3D vector value type.

A Vector3 is either a point or a free direction; the distinction only matters
at the transform boundary, where points carry an implicit homogeneous
coordinate of 1 and directions of 0.

Example:
    >>> a = Vector3(1.0, 0.0, 0.0)
    >>> b = Vector3(0.0, 1.0, 0.0)
    >>> a * b  # dot product
    0.0
    >>> a * 2.0  # uniform scale
    Vector3(x=2.0, y=0.0, z=0.0)
    >>> cross(a, b)
    Vector3(x=0.0, y=0.0, z=1.0)
"""

from __future__ import annotations

import math
import operator
from collections.abc import Iterator
from dataclasses import dataclass
from numbers import Real
from typing import TYPE_CHECKING, overload

import numpy as np

if TYPE_CHECKING:
    from xform3d.types import Vector3Like


@dataclass(frozen=True)
class Vector3:
    """Immutable 3D vector with exact component-wise equality.

    Indexing by 0, 1, 2 yields x, y, z; index 3 yields the implicit
    homogeneous coordinate 1.0 (read-only).
    """

    x: float
    y: float
    z: float

    # NumPy scalars on the left defer to __rmul__
    __array_ufunc__ = None

    @classmethod
    def zero(cls) -> Vector3:
        """Return the additive identity."""
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def from_array(cls, values: Vector3Like) -> Vector3:
        """Create a vector from a length-3 sequence or array.

        :param values: Three components (x, y, z)
        :returns: New Vector3
        :raises ValueError: If values does not hold exactly three components
        """
        arr = np.asarray(values, dtype=np.float64).reshape(-1)
        if arr.shape != (3,):
            raise ValueError(f"Vector3 must have 3 components, got shape {arr.shape}")
        return cls(float(arr[0]), float(arr[1]), float(arr[2]))

    def to_array(self) -> np.ndarray:
        """Return components as a float64 array [3]."""
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def __getitem__(self, i: int) -> float:
        if isinstance(i, bool):
            raise TypeError("Vector3 indices must be integers, got bool")
        try:
            i = operator.index(i)
        except TypeError:
            raise TypeError(
                f"Vector3 indices must be integers, got {type(i).__name__}"
            ) from None
        if i == 0:
            return self.x
        if i == 1:
            return self.y
        if i == 2:
            return self.z
        if i == 3:
            return 1.0
        raise IndexError(f"Vector3 index out of range: {i}")

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __str__(self) -> str:
        return f"({self.x},{self.y},{self.z})"

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __add__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self + (-other)

    @overload
    def __mul__(self, other: Vector3) -> float: ...

    @overload
    def __mul__(self, other: float) -> Vector3: ...

    def __mul__(self, other):
        """Dot product for a Vector3 operand, uniform scale for a real operand."""
        if isinstance(other, Vector3):
            return dot(self, other)
        if isinstance(other, Real):
            return scale(self, other)
        return NotImplemented

    def __rmul__(self, other: float) -> Vector3:
        if isinstance(other, Real):
            return scale(self, other)
        return NotImplemented

    def dot(self, other: Vector3) -> float:
        return dot(self, other)

    def cross(self, other: Vector3) -> Vector3:
        return cross(self, other)

    def length_squared(self) -> float:
        return dot(self, self)

    def length(self) -> float:
        return math.sqrt(dot(self, self))


def dot(a: Vector3, b: Vector3) -> float:
    """Dot product of two vectors."""
    return a.x * b.x + a.y * b.y + a.z * b.z


def scale(v: Vector3, s: float) -> Vector3:
    """Scale every component of v by s."""
    return Vector3(s * v.x, s * v.y, s * v.z)


def cross(a: Vector3, b: Vector3) -> Vector3:
    """Right-handed cross product a x b."""
    return Vector3(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


def zero() -> Vector3:
    """Return the zero vector."""
    return Vector3.zero()
