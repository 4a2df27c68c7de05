"""
Conversions between rotation representations and application to points.

Functions:

- ``apply()`` / ``apply_direction()``: homogeneous matrix times point (w=1) or
  direction (w=0).
- ``from_axis_angle()`` / ``to_axis_angle()``: axis-angle <-> quaternion.
- ``quaternion_to_matrix()`` / ``matrix_to_quaternion()``: quaternion <->
  rotation matrix (Shepperd's method for the extraction).
- ``from_euler()`` / ``to_euler()``: XYZ Euler angles <-> quaternion.
- ``rotate()``: rotate a vector by a unit quaternion.

Quaternion Convention: (w, x, y, z) - scalar first. All angles in radians.
"""

from __future__ import annotations

import logging
import math
from typing import Literal, TypeAlias

from xform3d.config.tolerances import DEFAULT_TOLERANCES
from xform3d.core.matrix4 import Matrix4
from xform3d.core.quaternion import Quaternion
from xform3d.core.vector3 import Vector3

logger = logging.getLogger(__name__)

Pivot: TypeAlias = Literal["w", "x", "y", "z"]


# ============================================================================
# Matrix application
# ============================================================================


def apply(m: Matrix4, v: Vector3) -> Vector3:
    """Apply m to the homogeneous point (v.x, v.y, v.z, 1).

    Row 3 is not evaluated; the result is assumed to remain a point.

    :param m: 4x4 transform
    :param v: Point
    :returns: Transformed point
    """
    result = [0.0, 0.0, 0.0]
    for i in range(3):
        for j in range(4):
            result[i] += m[i][j] * v[j]
    return Vector3(float(result[0]), float(result[1]), float(result[2]))


def matrix_vector_transform(v: Vector3, m: Matrix4) -> Vector3:
    """Same as ``apply(m, v)`` with the vector first."""
    return apply(m, v)


def apply_direction(m: Matrix4, v: Vector3) -> Vector3:
    """Apply m to the homogeneous direction (v.x, v.y, v.z, 0).

    Translation has no effect on directions.
    """
    result = [0.0, 0.0, 0.0]
    for i in range(3):
        for j in range(3):
            result[i] += m[i][j] * v[j]
    return Vector3(float(result[0]), float(result[1]), float(result[2]))


# ============================================================================
# Axis-angle
# ============================================================================


def from_axis_angle(axis: Vector3, angle: float) -> Quaternion:
    """Convert axis-angle to quaternion.

    :param axis: Rotation axis, assumed unit length
    :param angle: Rotation angle in radians
    :returns: Quaternion (cos(angle/2), axis * sin(angle/2))
    """
    half_angle = angle / 2.0
    sin_half = math.sin(half_angle)
    return Quaternion(
        math.cos(half_angle),
        axis.x * sin_half,
        axis.y * sin_half,
        axis.z * sin_half,
    )


def to_axis_angle(q: Quaternion, threshold: float | None = None) -> tuple[Vector3, float]:
    """Convert a unit quaternion to axis-angle.

    When sin(angle/2) is below ``threshold`` the axis is undefined (angle near
    0 or 2*pi) and the raw vector part is returned instead of dividing by a
    near-zero term.

    :param q: Unit quaternion
    :param threshold: Singularity threshold, defaults to
        ``DEFAULT_TOLERANCES.axis_singularity``
    :returns: Tuple of (axis, angle in [0, 2*pi])
    """
    if threshold is None:
        threshold = DEFAULT_TOLERANCES.axis_singularity

    # Clamp rounding drift so acos/sqrt stay in their domain
    w = max(-1.0, min(1.0, q.w))
    angle = 2.0 * math.acos(w)
    s = math.sqrt(max(0.0, 1.0 - w * w))

    if s < threshold:
        logger.debug("[to_axis_angle] Degenerate axis (s=%g), returning vector part", s)
        return Vector3(q.x, q.y, q.z), angle
    return Vector3(q.x / s, q.y / s, q.z / s), angle


# ============================================================================
# Rotation matrix
# ============================================================================


def quaternion_to_matrix(q: Quaternion) -> Matrix4:
    """Convert a unit quaternion to a 4x4 rotation matrix.

    The input is not normalized; call ``normalize`` first if it may have
    drifted.

    :param q: Unit quaternion
    :returns: Rotation in the upper 3x3, zero translation, [3][3] = 1
    """
    w, x, y, z = q.w, q.x, q.y, q.z
    return Matrix4(
        [
            [1 - 2 * (y * y + z * z), 2 * (x * y - w * z), 2 * (x * z + w * y), 0.0],
            [2 * (x * y + w * z), 1 - 2 * (x * x + z * z), 2 * (y * z - w * x), 0.0],
            [2 * (x * z - w * y), 2 * (y * z + w * x), 1 - 2 * (x * x + y * y), 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def _select_pivot(qw: float, qx: float, qy: float, qz: float) -> Pivot:
    """Tag of the largest candidate magnitude; ties resolve in order w, x, y, z."""
    candidates: tuple[tuple[Pivot, float], ...] = (("w", qw), ("x", qx), ("y", qy), ("z", qz))
    pivot, largest = candidates[0]
    for tag, value in candidates[1:]:
        if value > largest:
            pivot, largest = tag, value
    return pivot


def matrix_to_quaternion(m: Matrix4) -> Quaternion:
    """Extract the quaternion of a rotation matrix (Shepperd's method).

    The four candidate magnitudes come from the diagonal. The largest is taken
    as pivot with a positive sign; the other three components are the
    off-diagonal sums and differences divided by 4 * pivot, which fixes their
    signs relative to the pivot. The pivot is always >= 0.5 because the four
    squared candidates sum to 1. The input must be a valid rotation
    (orthonormal upper 3x3, determinant +1); this is not checked.

    :param m: Rotation matrix
    :returns: Unit quaternion (either of q, -q may represent the rotation)
    :raises AssertionError: If no pivot branch matches (programming fault)
    """
    m00, m11, m22 = float(m[0][0]), float(m[1][1]), float(m[2][2])

    # Clamp rounding noise before the square root
    qw = math.sqrt(max(0.0, (m00 + m11 + m22 + 1.0) / 4.0))
    qx = math.sqrt(max(0.0, (m00 - m11 - m22 + 1.0) / 4.0))
    qy = math.sqrt(max(0.0, (-m00 + m11 - m22 + 1.0) / 4.0))
    qz = math.sqrt(max(0.0, (-m00 - m11 + m22 + 1.0) / 4.0))

    pivot = _select_pivot(qw, qx, qy, qz)
    logger.debug("[matrix_to_quaternion] pivot=%s", pivot)

    if pivot == "w":
        d = 4.0 * qw
        w = qw
        x = (m[2][1] - m[1][2]) / d
        y = (m[0][2] - m[2][0]) / d
        z = (m[1][0] - m[0][1]) / d
    elif pivot == "x":
        d = 4.0 * qx
        w = (m[2][1] - m[1][2]) / d
        x = qx
        y = (m[1][0] + m[0][1]) / d
        z = (m[0][2] + m[2][0]) / d
    elif pivot == "y":
        d = 4.0 * qy
        w = (m[0][2] - m[2][0]) / d
        x = (m[1][0] + m[0][1]) / d
        y = qy
        z = (m[2][1] + m[1][2]) / d
    elif pivot == "z":
        d = 4.0 * qz
        w = (m[1][0] - m[0][1]) / d
        x = (m[0][2] + m[2][0]) / d
        y = (m[2][1] + m[1][2]) / d
        z = qz
    else:
        raise AssertionError(f"Unreachable pivot branch: {pivot!r}")

    return Quaternion(float(w), float(x), float(y), float(z)).normalize()


# ============================================================================
# Euler angles
# ============================================================================


def from_euler(roll: float, pitch: float, yaw: float) -> Quaternion:
    """Convert XYZ Euler angles to quaternion.

    Extrinsic XYZ order: roll about the fixed x axis is applied first, then
    pitch about y, then yaw about z (equivalently intrinsic z-y'-x''). Matches
    ``to_euler``, which inverts it away from pitch = +-pi/2.

    :param roll: Rotation about x in radians
    :param pitch: Rotation about y in radians
    :param yaw: Rotation about z in radians
    :returns: Unit quaternion equal to yaw * pitch * roll
    """
    cr, sr = math.cos(roll / 2), math.sin(roll / 2)
    cp, sp = math.cos(pitch / 2), math.sin(pitch / 2)
    cy, sy = math.cos(yaw / 2), math.sin(yaw / 2)

    return Quaternion(
        cr * cp * cy + sr * sp * sy,
        sr * cp * cy - cr * sp * sy,
        cr * sp * cy + sr * cp * sy,
        cr * cp * sy - sr * sp * cy,
    )


def to_euler(q: Quaternion) -> tuple[float, float, float]:
    """Convert a unit quaternion to XYZ Euler angles.

    Uses the same order as ``from_euler`` (q = yaw * pitch * roll). At gimbal
    lock roll and yaw are not separable; the split returned there is arbitrary.

    :param q: Unit quaternion
    :returns: (roll, pitch, yaw) in radians; pitch is clamped to +-pi/2 at
        gimbal lock
    """
    w, x, y, z = q.w, q.x, q.y, q.z

    # Roll (x-axis rotation)
    roll = math.atan2(2 * (w * x + y * z), 1 - 2 * (x * x + y * y))

    # Pitch (y-axis rotation)
    sinp = 2 * (w * y - z * x)
    if abs(sinp) >= 1:
        pitch = math.copysign(math.pi / 2, sinp)
    else:
        pitch = math.asin(sinp)

    # Yaw (z-axis rotation)
    yaw = math.atan2(2 * (w * z + x * y), 1 - 2 * (y * y + z * z))

    return roll, pitch, yaw


# ============================================================================
# Vector rotation
# ============================================================================


def rotate(v: Vector3, q: Quaternion) -> Vector3:
    """Rotate v by the unit quaternion q.

    Computes the vector part of q * (0, v) * conjugate(q).
    """
    qr = q * Quaternion.from_scalar_vector(0.0, v) * q.conjugate()
    return qr.vector
