"""
xform3d - Spatial transform algebra

Points and directions in 3D, affine transforms as 4x4 homogeneous matrices,
and rotations as quaternions, with conversions between axis-angle, quaternion
and rotation-matrix representations.

Features:
- Immutable value types: Vector3, Matrix4 (row-major), Quaternion (w, x, y, z)
- Operators: +, -, negation, * (dot/scale for vectors, product/scale for matrices,
  Hamilton product for quaternions)
- Constructors: identity, zero, translation, scale, rotations about x/y/z
- Conversions: axis-angle <-> quaternion <-> rotation matrix, Euler angles
- Batched point transforms over (N, 3) arrays (Numba kernels)

All angles are radians; coordinates are right-handed.

Example - Transform chain:
    >>> from xform3d import Vector3, translation, scale_matrix, apply
    >>>
    >>> m = translation(1, 0, 0) * scale_matrix(2, 2, 2)
    >>> apply(m, Vector3(1.0, 1.0, 1.0))
    Vector3(x=3.0, y=2.0, z=2.0)

Example - Rotation conversions:
    >>> import math
    >>> from xform3d import Vector3, from_axis_angle, quaternion_to_matrix, rotate
    >>>
    >>> q = from_axis_angle(Vector3(0.0, 0.0, 1.0), math.pi / 2)
    >>> R = quaternion_to_matrix(q)
    >>> rotate(Vector3(1.0, 0.0, 0.0), q)  # ~ (0, 1, 0)
"""

__version__ = "0.1.0"

from xform3d.config import DEFAULT_TOLERANCES, ToleranceConfig
from xform3d.core import (
    Matrix4,
    Quaternion,
    Vector3,
    conjugate,
    cross,
    dot,
    identity,
    magnitude_squared,
    normalize,
    rotate_x,
    rotate_y,
    rotate_z,
    scale,
    scale_matrix,
    translation,
    transpose,
)
from xform3d.transform import (
    apply,
    apply_direction,
    apply_points,
    from_axis_angle,
    from_euler,
    matrix_to_quaternion,
    matrix_vector_transform,
    quaternion_to_matrix,
    rotate,
    rotate_points,
    to_axis_angle,
    to_euler,
)
from xform3d.verification import TransformVerifier

__all__ = [
    "__version__",
    # Value types
    "Vector3",
    "Matrix4",
    "Quaternion",
    # Vector3 operations
    "dot",
    "scale",
    "cross",
    # Matrix4 operations
    "identity",
    "translation",
    "scale_matrix",
    "rotate_x",
    "rotate_y",
    "rotate_z",
    "transpose",
    # Quaternion operations
    "conjugate",
    "magnitude_squared",
    "normalize",
    # Transform layer
    "apply",
    "apply_direction",
    "matrix_vector_transform",
    "from_axis_angle",
    "to_axis_angle",
    "quaternion_to_matrix",
    "matrix_to_quaternion",
    "from_euler",
    "to_euler",
    "rotate",
    "apply_points",
    "rotate_points",
    # Configuration and verification
    "ToleranceConfig",
    "DEFAULT_TOLERANCES",
    "TransformVerifier",
]
