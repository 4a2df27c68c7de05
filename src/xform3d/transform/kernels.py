"""
Numba-optimized kernels for batched point transforms.

Provides JIT-compiled kernels that apply a single transform to many points.
"""

from __future__ import annotations

import numpy as np
from numba import njit, prange
from numpy.typing import NDArray


@njit(parallel=True, fastmath=True, cache=True, nogil=True)
def apply_points_numba(
    points: NDArray[np.float64],
    matrix: NDArray[np.float64],
    out: NDArray[np.float64],
) -> None:
    """
    Apply a 4x4 homogeneous transform to points (w=1).

    Args:
        points: Input points [N, 3]
        matrix: Row-major transform [4, 4]
        out: Output points [N, 3] (modified in-place, may alias points)
    """
    n = points.shape[0]

    for i in prange(n):
        px = points[i, 0]
        py = points[i, 1]
        pz = points[i, 2]

        out[i, 0] = matrix[0, 0] * px + matrix[0, 1] * py + matrix[0, 2] * pz + matrix[0, 3]
        out[i, 1] = matrix[1, 0] * px + matrix[1, 1] * py + matrix[1, 2] * pz + matrix[1, 3]
        out[i, 2] = matrix[2, 0] * px + matrix[2, 1] * py + matrix[2, 2] * pz + matrix[2, 3]


@njit(parallel=True, fastmath=True, cache=True, nogil=True)
def rotate_points_numba(
    points: NDArray[np.float64],
    quat: NDArray[np.float64],
    out: NDArray[np.float64],
) -> None:
    """
    Rotate points by a unit quaternion.

    Uses the expansion v' = v + 2w(u x v) + 2u x (u x v), which equals the
    vector part of q * (0, v) * conj(q) for unit q = (w, u).

    Args:
        points: Input points [N, 3]
        quat: Unit quaternion [4] (w, x, y, z)
        out: Output points [N, 3] (modified in-place, may alias points)
    """
    n = points.shape[0]
    w = quat[0]
    ux = quat[1]
    uy = quat[2]
    uz = quat[3]

    for i in prange(n):
        vx = points[i, 0]
        vy = points[i, 1]
        vz = points[i, 2]

        # t = 2 * (u x v)
        tx = 2.0 * (uy * vz - uz * vy)
        ty = 2.0 * (uz * vx - ux * vz)
        tz = 2.0 * (ux * vy - uy * vx)

        # v' = v + w * t + u x t
        out[i, 0] = vx + w * tx + (uy * tz - uz * ty)
        out[i, 1] = vy + w * ty + (uz * tx - ux * tz)
        out[i, 2] = vz + w * tz + (ux * ty - uy * tx)
