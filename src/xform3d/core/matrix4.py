"""4x4 homogeneous matrix value type.

Matrices are row-major: ``m[i]`` is row i and ``m[i][j]`` (or ``m[i, j]``) is
the entry in row i, column j. Storage is a read-only float64 NumPy array, so a
Matrix4 can be shared freely.

Rotation constructors follow the right-handed, counter-clockwise convention
and agree with ``quaternion_to_matrix(from_axis_angle(axis, angle))``.

Example:
    >>> m = translation(1.0, 2.0, 3.0) * scale_matrix(2.0, 2.0, 2.0)
    >>> float(m[0][3])
    1.0
    >>> transpose(identity()) == identity()
    True
"""

from __future__ import annotations

import math
import operator
from collections.abc import Iterator
from numbers import Real
from typing import TYPE_CHECKING, overload

import numpy as np

if TYPE_CHECKING:
    from xform3d.types import Matrix4Like


def _checked_index(index, axis: str) -> int:
    if isinstance(index, bool):
        raise TypeError(f"Matrix4 {axis} index must be an integer, got bool")
    try:
        i = operator.index(index)
    except TypeError:
        raise TypeError(
            f"Matrix4 {axis} index must be an integer, got {type(index).__name__}"
        ) from None
    if not 0 <= i < 4:
        raise IndexError(f"Matrix4 {axis} index out of range: {i}")
    return i


class MatrixRow:
    """Read-only view of one Matrix4 row with bounds-checked column access."""

    __slots__ = ("_row",)

    def __init__(self, row: np.ndarray):
        self._row = row

    def __getitem__(self, j) -> float:
        return float(self._row[_checked_index(j, "column")])

    def __iter__(self) -> Iterator[float]:
        for value in self._row:
            yield float(value)

    def __len__(self) -> int:
        return 4

    def __array__(self, dtype=None, copy=None) -> np.ndarray:
        return np.array(self._row, dtype=dtype)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, MatrixRow):
            return bool(np.array_equal(self._row, other._row))
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        return f"MatrixRow({tuple(self)!r})"


class Matrix4:
    """Immutable row-major 4x4 matrix with exact entry-wise equality."""

    __slots__ = ("_m",)

    # NumPy scalars on the left defer to __rmul__
    __array_ufunc__ = None

    def __init__(self, rows: Matrix4Like):
        m = np.array(rows, dtype=np.float64)
        if m.shape != (4, 4):
            raise ValueError(f"Matrix4 must be shape (4, 4), got {m.shape}")
        m.setflags(write=False)
        self._m = m

    @classmethod
    def from_rows(cls, rows: Matrix4Like) -> Matrix4:
        """Create a matrix from four rows of four values."""
        return cls(rows)

    @classmethod
    def from_array(cls, arr: np.ndarray) -> Matrix4:
        """Create a matrix from a 4x4 array (copied)."""
        return cls(arr)

    @classmethod
    def zero(cls) -> Matrix4:
        return cls(np.zeros((4, 4)))

    @classmethod
    def identity(cls) -> Matrix4:
        return cls(np.eye(4))

    @classmethod
    def translation(cls, x: float, y: float, z: float) -> Matrix4:
        """Identity with the rightmost column's first three rows set to x, y, z."""
        T = np.eye(4)
        T[:3, 3] = (x, y, z)
        return cls(T)

    @classmethod
    def scale(cls, x: float, y: float, z: float) -> Matrix4:
        """Diagonal matrix (x, y, z, 1)."""
        return cls(np.diag([x, y, z, 1.0]))

    @classmethod
    def rotation_x(cls, angle: float) -> Matrix4:
        """Counter-clockwise rotation about +x by angle radians."""
        c, s = math.cos(angle), math.sin(angle)
        return cls(
            [
                [1.0, 0.0, 0.0, 0.0],
                [0.0, c, -s, 0.0],
                [0.0, s, c, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )

    @classmethod
    def rotation_y(cls, angle: float) -> Matrix4:
        """Counter-clockwise rotation about +y by angle radians."""
        c, s = math.cos(angle), math.sin(angle)
        return cls(
            [
                [c, 0.0, s, 0.0],
                [0.0, 1.0, 0.0, 0.0],
                [-s, 0.0, c, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )

    @classmethod
    def rotation_z(cls, angle: float) -> Matrix4:
        """Counter-clockwise rotation about +z by angle radians."""
        c, s = math.cos(angle), math.sin(angle)
        return cls(
            [
                [c, -s, 0.0, 0.0],
                [s, c, 0.0, 0.0],
                [0.0, 0.0, 1.0, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )

    def to_array(self) -> np.ndarray:
        """Return a writable float64 copy [4, 4]."""
        return self._m.copy()

    def rows(self) -> tuple[tuple[float, ...], ...]:
        return tuple(tuple(float(v) for v in row) for row in self._m)

    def transpose(self) -> Matrix4:
        return Matrix4(self._m.T)

    def __getitem__(self, index):
        """Row ``m[i]`` or entry ``m[i, j]``; indices must be integers in 0..3.

        :raises IndexError: If an index is outside 0..3
        :raises TypeError: If an index is not an integer
        """
        if isinstance(index, tuple):
            if len(index) != 2:
                raise IndexError(f"Matrix4 takes (row, column), got {len(index)} indices")
            i = _checked_index(index[0], "row")
            j = _checked_index(index[1], "column")
            return float(self._m[i, j])
        return MatrixRow(self._m[_checked_index(index, "row")])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix4):
            return NotImplemented
        return bool(np.array_equal(self._m, other._m))

    __hash__ = None

    def __repr__(self) -> str:
        return f"Matrix4({self.rows()!r})"

    def __neg__(self) -> Matrix4:
        return Matrix4(-self._m)

    def __add__(self, other: Matrix4) -> Matrix4:
        if not isinstance(other, Matrix4):
            return NotImplemented
        return Matrix4(self._m + other._m)

    def __sub__(self, other: Matrix4) -> Matrix4:
        if not isinstance(other, Matrix4):
            return NotImplemented
        return self + (-other)

    @overload
    def __mul__(self, other: Matrix4) -> Matrix4: ...

    @overload
    def __mul__(self, other: float) -> Matrix4: ...

    def __mul__(self, other):
        """Matrix product for a Matrix4 operand, entry-wise scale for a real operand."""
        if isinstance(other, Matrix4):
            return Matrix4(self._m @ other._m)
        if isinstance(other, Real):
            return Matrix4(self._m * float(other))
        return NotImplemented

    def __rmul__(self, other: float) -> Matrix4:
        if isinstance(other, Real):
            return Matrix4(float(other) * self._m)
        return NotImplemented

    def __matmul__(self, other: Matrix4) -> Matrix4:
        if not isinstance(other, Matrix4):
            return NotImplemented
        return Matrix4(self._m @ other._m)


def zero() -> Matrix4:
    return Matrix4.zero()


def identity() -> Matrix4:
    return Matrix4.identity()


def translation(x: float, y: float, z: float) -> Matrix4:
    return Matrix4.translation(x, y, z)


def scale_matrix(x: float, y: float, z: float) -> Matrix4:
    return Matrix4.scale(x, y, z)


def rotate_x(angle: float) -> Matrix4:
    return Matrix4.rotation_x(angle)


def rotate_y(angle: float) -> Matrix4:
    return Matrix4.rotation_y(angle)


def rotate_z(angle: float) -> Matrix4:
    return Matrix4.rotation_z(angle)


def transpose(m: Matrix4) -> Matrix4:
    return m.transpose()
