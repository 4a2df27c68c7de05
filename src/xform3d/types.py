"""Type aliases for xform3d.

Provides unified type hints for array-like parameters across all modules.
"""

from collections.abc import Sequence
from typing import TypeAlias

import numpy as np

# 3-component input (position, direction, axis)
Vector3Like: TypeAlias = tuple[float, float, float] | Sequence[float] | np.ndarray

# Quaternion input (w, x, y, z)
QuaternionLike: TypeAlias = tuple[float, float, float, float] | Sequence[float] | np.ndarray

# Row-major 4x4 input
Matrix4Like: TypeAlias = Sequence[Sequence[float]] | np.ndarray

# Batch of points [N, 3]
PointArray: TypeAlias = Sequence[Sequence[float]] | np.ndarray
