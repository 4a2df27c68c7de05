"""Tests for the Vector3 value type.

Tests cover:
- Exact equality
- Addition, subtraction, negation
- Dot product vs. scale via the same * operator
- Cross product
- Homogeneous indexing
"""

import numpy as np
import pytest

from xform3d.core.vector3 import Vector3, cross, dot, scale, zero


class TestVector3Equality:
    """Test exact component-wise equality."""

    def test_equal_components(self):
        """Test vectors with identical components are equal both ways."""
        a = Vector3(1.0, 1.0, 1.0)
        b = Vector3(1.0, 1.0, 1.0)
        assert a == b
        assert a == a
        assert b == a

    def test_no_tolerance(self):
        """Test equality is exact, not tolerance-based."""
        assert Vector3(0.1 + 0.2, 0.0, 0.0) != Vector3(0.3, 0.0, 0.0)

    def test_hashable(self):
        """Test equal vectors hash equally."""
        assert len({Vector3(1.0, 2.0, 3.0), Vector3(1.0, 2.0, 3.0)}) == 1


class TestVector3Arithmetic:
    """Test linear-algebra operators."""

    def test_addition(self):
        """Test component-wise addition."""
        a = Vector3(1.0, 1.0, 1.0)
        assert a + a == Vector3(2.0, 2.0, 2.0)

    def test_subtraction(self):
        """Test self-subtraction yields zero."""
        a = Vector3(1.0, 1.0, 1.0)
        assert a - a == zero()

    def test_negation(self):
        """Test negation flips every component."""
        assert -Vector3(1.0, -2.0, 3.0) == Vector3(-1.0, 2.0, -3.0)

    def test_zero_is_additive_identity(self):
        """Test v + zero == v."""
        v = Vector3(4.0, 5.0, 6.0)
        assert v + zero() == v
        assert Vector3.zero() == Vector3(0.0, 0.0, 0.0)

    def test_unsupported_operand(self):
        """Test adding a non-vector raises TypeError."""
        with pytest.raises(TypeError):
            Vector3(1.0, 2.0, 3.0) + 1.0


class TestVector3Multiplication:
    """Test * dispatch on the right operand type."""

    def test_dot_product(self):
        """Test Vector3 * Vector3 yields a scalar."""
        a = Vector3(1.0, 1.0, 1.0)
        b = Vector3(0.0, 0.0, 0.0)
        assert a * b == 0.0
        assert Vector3(1.0, 2.0, 3.0) * Vector3(4.0, 5.0, 6.0) == 32.0

    def test_scale(self):
        """Test Vector3 * real yields a Vector3."""
        result = Vector3(1.0, 2.0, 3.0) * 2.0
        assert isinstance(result, Vector3)
        assert result == Vector3(2.0, 4.0, 6.0)

    def test_scale_left_operand(self):
        """Test real * Vector3 scales as well."""
        assert 2.0 * Vector3(1.0, 2.0, 3.0) == Vector3(2.0, 4.0, 6.0)
        assert 3 * Vector3(1.0, 0.0, 0.0) == Vector3(3.0, 0.0, 0.0)

    def test_numpy_scalar_left_operand(self):
        """Test NumPy scalars on the left defer to Vector3."""
        assert np.float64(2.0) * Vector3(1.0, 2.0, 3.0) == Vector3(2.0, 4.0, 6.0)

    def test_named_operations(self):
        """Test dot() and scale() match the operator forms."""
        a = Vector3(1.0, -2.0, 0.5)
        b = Vector3(3.0, 1.0, 4.0)
        assert dot(a, b) == a * b
        assert scale(a, 1.5) == a * 1.5
        assert a.dot(b) == dot(a, b)

    def test_unsupported_operand(self):
        """Test multiplying by a string raises TypeError."""
        with pytest.raises(TypeError):
            Vector3(1.0, 2.0, 3.0) * "x"


class TestCrossProduct:
    """Test right-handed cross product."""

    def test_basis(self):
        """Test x cross y == z."""
        assert cross(Vector3(1.0, 0.0, 0.0), Vector3(0.0, 1.0, 0.0)) == Vector3(0.0, 0.0, 1.0)
        assert cross(Vector3(0.0, 1.0, 0.0), Vector3(0.0, 0.0, 1.0)) == Vector3(1.0, 0.0, 0.0)
        assert cross(Vector3(0.0, 0.0, 1.0), Vector3(1.0, 0.0, 0.0)) == Vector3(0.0, 1.0, 0.0)

    def test_anticommutative(self):
        """Test a x b == -(b x a)."""
        a = Vector3(1.0, 2.0, 3.0)
        b = Vector3(-4.0, 0.5, 2.0)
        assert cross(a, b) == -cross(b, a)

    def test_orthogonal_to_inputs(self):
        """Test the cross product is orthogonal to both inputs."""
        a = Vector3(1.0, 2.0, 3.0)
        b = Vector3(-4.0, 0.5, 2.0)
        c = a.cross(b)
        assert abs(c * a) < 1e-12
        assert abs(c * b) < 1e-12


class TestVector3Indexing:
    """Test positional and homogeneous indexing."""

    def test_components(self):
        """Test indices 0, 1, 2 yield x, y, z."""
        v = Vector3(1.0, 2.0, 3.0)
        assert v[0] == 1.0
        assert v[1] == 2.0
        assert v[2] == 3.0

    def test_homogeneous_coordinate(self):
        """Test index 3 yields the implicit 1.0."""
        assert Vector3(1.0, 2.0, 3.0)[3] == 1.0

    def test_out_of_range(self):
        """Test indices outside 0..3 raise IndexError."""
        v = Vector3(1.0, 2.0, 3.0)
        with pytest.raises(IndexError, match="out of range"):
            v[4]
        with pytest.raises(IndexError):
            v[-1]

    def test_non_integer_index(self):
        """Test non-integer indices raise TypeError."""
        with pytest.raises(TypeError, match="must be integers"):
            Vector3(1.0, 2.0, 3.0)[1.0]
        with pytest.raises(TypeError, match="must be integers"):
            Vector3(1.0, 2.0, 3.0)[True]

    def test_numpy_integer_index(self):
        """Test NumPy integer scalars index like Python ints."""
        v = Vector3(1.0, 2.0, 3.0)
        assert v[np.int64(1)] == 2.0
        assert v[np.int32(3)] == 1.0
        with pytest.raises(IndexError):
            v[np.int64(4)]

    def test_iteration_excludes_homogeneous(self):
        """Test iteration yields exactly x, y, z."""
        assert list(Vector3(1.0, 2.0, 3.0)) == [1.0, 2.0, 3.0]

    def test_immutable(self):
        """Test components cannot be reassigned."""
        v = Vector3(1.0, 2.0, 3.0)
        with pytest.raises(AttributeError):
            v.x = 5.0


class TestVector3Conversion:
    """Test array conversion and display."""

    def test_from_array(self):
        """Test construction from a sequence and an array."""
        assert Vector3.from_array([1, 2, 3]) == Vector3(1.0, 2.0, 3.0)
        assert Vector3.from_array(np.array([1.0, 2.0, 3.0])) == Vector3(1.0, 2.0, 3.0)

    def test_from_array_wrong_size(self):
        """Test wrong component count raises ValueError."""
        with pytest.raises(ValueError, match="3 components"):
            Vector3.from_array([1.0, 2.0])

    def test_to_array(self):
        """Test to_array returns a float64 array."""
        arr = Vector3(1.0, 2.0, 3.0).to_array()
        assert arr.dtype == np.float64
        np.testing.assert_array_equal(arr, [1.0, 2.0, 3.0])

    def test_str(self):
        """Test display form."""
        assert str(Vector3(1.0, 2.0, 3.0)) == "(1.0,2.0,3.0)"

    def test_length(self):
        """Test Euclidean length."""
        assert Vector3(3.0, 4.0, 0.0).length() == 5.0
