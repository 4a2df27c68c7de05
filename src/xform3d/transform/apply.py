"""Apply a single transform to a batch of points.

This module validates array inputs and dispatches to the Numba kernels.
"""

from __future__ import annotations

import logging

import numpy as np

from xform3d.core.matrix4 import Matrix4
from xform3d.core.quaternion import Quaternion
from xform3d.transform.kernels import apply_points_numba, rotate_points_numba
from xform3d.types import PointArray

logger = logging.getLogger(__name__)


def _as_points(points: PointArray) -> np.ndarray:
    arr = np.ascontiguousarray(points, dtype=np.float64)
    if arr.ndim == 1 and arr.size == 0:
        return arr.reshape(0, 3)
    if arr.ndim != 2 or arr.shape[1] != 3:
        raise ValueError(f"Points must be shape (N, 3), got {arr.shape}")
    return arr


def _prepare_out(points: np.ndarray, out: np.ndarray | None) -> np.ndarray:
    if out is None:
        return np.empty_like(points)
    if not isinstance(out, np.ndarray) or out.dtype != np.float64:
        raise ValueError("Output buffer must be a float64 ndarray")
    if out.shape != points.shape:
        raise ValueError(f"Output must be shape {points.shape}, got {out.shape}")
    return out


def apply_points(m: Matrix4, points: PointArray, out: np.ndarray | None = None) -> np.ndarray:
    """Apply a homogeneous transform to every point (w=1).

    :param m: 4x4 transform
    :param points: Points [N, 3]
    :param out: Optional pre-allocated float64 output [N, 3]; may be ``points``
    :returns: Transformed points [N, 3]
    :raises ValueError: If points or out have the wrong shape

    Example:
        >>> pts = np.zeros((2, 3))
        >>> apply_points(Matrix4.translation(1, 2, 3), pts)
        array([[1., 2., 3.],
               [1., 2., 3.]])
    """
    pts = _as_points(points)
    result = _prepare_out(pts, out)
    logger.debug("[apply_points] Transforming %d points", pts.shape[0])
    apply_points_numba(pts, m.to_array(), result)
    return result


def rotate_points(q: Quaternion, points: PointArray, out: np.ndarray | None = None) -> np.ndarray:
    """Rotate every point by a unit quaternion.

    :param q: Unit quaternion (not normalized here)
    :param points: Points [N, 3]
    :param out: Optional pre-allocated float64 output [N, 3]; may be ``points``
    :returns: Rotated points [N, 3]
    :raises ValueError: If points or out have the wrong shape
    """
    pts = _as_points(points)
    result = _prepare_out(pts, out)
    logger.debug("[rotate_points] Rotating %d points", pts.shape[0])
    rotate_points_numba(pts, q.to_array(), result)
    return result
