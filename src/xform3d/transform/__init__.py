"""Transform layer: application and rotation conversions."""

from xform3d.transform.api import (
    apply,
    apply_direction,
    from_axis_angle,
    from_euler,
    matrix_to_quaternion,
    matrix_vector_transform,
    quaternion_to_matrix,
    rotate,
    to_axis_angle,
    to_euler,
)
from xform3d.transform.apply import apply_points, rotate_points

__all__ = [
    # Single values
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
    # Batched
    "apply_points",
    "rotate_points",
]
