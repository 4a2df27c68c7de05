"""
Example: building and applying transform chains.

Demonstrates how to use xform3d for:
- Composing translation, rotation and scale matrices
- Converting between axis-angle, quaternion and rotation matrix
- Rotating vectors with quaternions
- Transforming a batch of points
"""

import logging
import math

import numpy as np

from xform3d import (
    Quaternion,
    TransformVerifier,
    Vector3,
    apply,
    apply_points,
    from_axis_angle,
    matrix_to_quaternion,
    normalize,
    quaternion_to_matrix,
    rotate,
    rotate_z,
    scale_matrix,
    to_axis_angle,
    translation,
)

# Configure logging to see pivot selection and batch sizes
logging.basicConfig(level=logging.DEBUG, format="%(levelname)s: %(message)s")


def example_1_transform_chain():
    """Example 1: Compose translate * rotate * scale and apply to a point."""
    print("\n" + "=" * 70)
    print("EXAMPLE 1: Transform Chain")
    print("=" * 70)

    # Applied right-to-left: scale, then rotate, then translate
    model = translation(1.0, 2.0, 3.0) * rotate_z(math.pi / 2) * scale_matrix(2.0, 2.0, 2.0)

    point = Vector3(1.0, 0.0, 0.0)
    print(f"Point:       {point}")
    print(f"Transformed: {apply(model, point)}")


def example_2_conversions():
    """Example 2: Axis-angle -> quaternion -> matrix -> quaternion -> axis-angle."""
    print("\n" + "=" * 70)
    print("EXAMPLE 2: Rotation Conversions")
    print("=" * 70)

    axis = Vector3(1.0, 1.0, 0.0) * (1.0 / math.sqrt(2.0))
    angle = math.radians(120.0)

    q = from_axis_angle(axis, angle)
    R = quaternion_to_matrix(q)
    q_back = matrix_to_quaternion(R)
    axis_back, angle_back = to_axis_angle(q_back)

    print(f"Quaternion:  {q}")
    print(f"Recovered:   {q_back}")
    print(f"Same rotation: {TransformVerifier.same_rotation(q, q_back)}")
    print(f"Axis: {axis_back}, angle: {math.degrees(angle_back):.3f} deg")


def example_3_quaternion_rotation():
    """Example 3: Compose rotations as quaternions and renormalize."""
    print("\n" + "=" * 70)
    print("EXAMPLE 3: Quaternion Rotation")
    print("=" * 70)

    step = from_axis_angle(Vector3(0.0, 0.0, 1.0), math.radians(1.0))
    q = Quaternion.identity()
    for _ in range(90):
        q = q * step
    q = normalize(q)

    print(f"90 x 1 deg about z applied to +x: {rotate(Vector3(1.0, 0.0, 0.0), q)}")


def example_4_batch():
    """Example 4: Transform many points at once."""
    print("\n" + "=" * 70)
    print("EXAMPLE 4: Batched Points")
    print("=" * 70)

    rng = np.random.default_rng(42)
    points = rng.standard_normal((100_000, 3))

    model = translation(0.0, 0.0, -5.0) * rotate_z(0.25)
    result = apply_points(model, points)

    print(f"Input centroid:  {points.mean(axis=0)}")
    print(f"Output centroid: {result.mean(axis=0)}")


if __name__ == "__main__":
    example_1_transform_chain()
    example_2_conversions()
    example_3_quaternion_rotation()
    example_4_batch()
