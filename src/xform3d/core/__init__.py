"""Value types: Vector3, Matrix4 and Quaternion."""

from xform3d.core.matrix4 import (
    Matrix4,
    identity,
    rotate_x,
    rotate_y,
    rotate_z,
    scale_matrix,
    translation,
    transpose,
)
from xform3d.core.quaternion import (
    Quaternion,
    conjugate,
    magnitude_squared,
    normalize,
)
from xform3d.core.vector3 import Vector3, cross, dot, scale

__all__ = [
    # Vector3
    "Vector3",
    "dot",
    "scale",
    "cross",
    # Matrix4
    "Matrix4",
    "identity",
    "translation",
    "scale_matrix",
    "rotate_x",
    "rotate_y",
    "rotate_z",
    "transpose",
    # Quaternion
    "Quaternion",
    "conjugate",
    "magnitude_squared",
    "normalize",
]
