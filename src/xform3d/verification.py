"""Tolerance-based comparison and precondition checks.

Value types compare exactly with ``==``. This module provides the approximate
comparisons needed after floating-point round trips, and opt-in checks for the
preconditions the conversion layer does not verify.

Example:
    >>> from xform3d.verification import TransformVerifier
    >>>
    >>> q = matrix_to_quaternion(m)
    >>> TransformVerifier.assert_close(quaternion_to_matrix(q), m)
    >>>
    >>> if not TransformVerifier.is_rotation_matrix(m):
    ...     raise ValueError("expected a rotation")
"""

from __future__ import annotations

import logging
from typing import TypeAlias

import numpy as np

from xform3d.config.tolerances import DEFAULT_TOLERANCES, ToleranceConfig
from xform3d.core.matrix4 import Matrix4
from xform3d.core.quaternion import Quaternion
from xform3d.core.vector3 import Vector3

logger = logging.getLogger(__name__)

Comparable: TypeAlias = Vector3 | Matrix4 | Quaternion


class TransformVerifier:
    """Utilities for approximate comparison of vectors, matrices and quaternions."""

    @staticmethod
    def _as_array(value: Comparable) -> np.ndarray:
        if isinstance(value, Vector3 | Matrix4 | Quaternion):
            return value.to_array()
        raise TypeError(f"Expected Vector3, Matrix4 or Quaternion, got {type(value).__name__}")

    @staticmethod
    def allclose(a: Comparable, b: Comparable, tolerances: ToleranceConfig | None = None) -> bool:
        """Check two values of the same type are equal within tolerance.

        :param a: First value
        :param b: Second value (same type as a)
        :param tolerances: Tolerances to use, defaults to DEFAULT_TOLERANCES
        :return: True if every component matches within rtol/atol
        :raises TypeError: If a and b are not the same supported type
        """
        if type(a) is not type(b):
            raise TypeError(f"Cannot compare {type(a).__name__} with {type(b).__name__}")
        tol = tolerances or DEFAULT_TOLERANCES
        return bool(
            np.allclose(
                TransformVerifier._as_array(a),
                TransformVerifier._as_array(b),
                rtol=tol.rtol,
                atol=tol.atol,
            )
        )

    @staticmethod
    def assert_close(
        a: Comparable, b: Comparable, tolerances: ToleranceConfig | None = None
    ) -> None:
        """Assert two values are equal within tolerance.

        :raises AssertionError: If the values differ

        Example:
            >>> TransformVerifier.assert_close(apply(identity(), v), v)
        """
        if not TransformVerifier.allclose(a, b, tolerances):
            diff = np.max(
                np.abs(TransformVerifier._as_array(a) - TransformVerifier._as_array(b))
            )
            logger.debug("[TransformVerifier] Mismatch: %r vs %r", a, b)
            raise AssertionError(
                f"{type(a).__name__} mismatch: max abs diff {diff:.3e}\n  {a!r}\n  {b!r}"
            )

    @staticmethod
    def same_rotation(
        q1: Quaternion, q2: Quaternion, tolerances: ToleranceConfig | None = None
    ) -> bool:
        """Check two quaternions represent the same rotation (q1 == +-q2)."""
        return TransformVerifier.allclose(q1, q2, tolerances) or TransformVerifier.allclose(
            q1, -q2, tolerances
        )

    @staticmethod
    def assert_same_rotation(
        q1: Quaternion, q2: Quaternion, tolerances: ToleranceConfig | None = None
    ) -> None:
        """Assert two quaternions represent the same rotation.

        :raises AssertionError: If neither q2 nor -q2 matches q1
        """
        if not TransformVerifier.same_rotation(q1, q2, tolerances):
            raise AssertionError(f"Quaternions differ beyond sign:\n  {q1!r}\n  {q2!r}")

    @staticmethod
    def is_unit(q: Quaternion, tolerances: ToleranceConfig | None = None) -> bool:
        """Check q has unit norm within ``rotation_atol``."""
        tol = tolerances or DEFAULT_TOLERANCES
        return abs(q.magnitude_squared() - 1.0) <= tol.rotation_atol

    @staticmethod
    def is_rotation_matrix(m: Matrix4, tolerances: ToleranceConfig | None = None) -> bool:
        """Check m is a pure rotation in homogeneous form.

        The upper 3x3 must be orthonormal with determinant +1, the translation
        column zero and the bottom row (0, 0, 0, 1).

        :param m: Matrix to check
        :param tolerances: Tolerances to use (``rotation_atol``)
        :return: True if m satisfies the rotation-conversion preconditions
        """
        tol = tolerances or DEFAULT_TOLERANCES
        M = m.to_array()
        R = M[:3, :3]

        if not np.allclose(M[3], [0.0, 0.0, 0.0, 1.0], atol=tol.rotation_atol):
            return False
        if not np.allclose(M[:3, 3], 0.0, atol=tol.rotation_atol):
            return False
        if not np.allclose(R @ R.T, np.eye(3), atol=tol.rotation_atol):
            return False
        return bool(abs(np.linalg.det(R) - 1.0) <= tol.rotation_atol)
