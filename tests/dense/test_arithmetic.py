"""
Tests for matrix arithmetic, equality and text rendering.
"""

import numpy as np
import pytest

from pymatrix import Matrix, identity
from pymatrix.core.compute import EXACT
from pymatrix.core.exceptions import DimensionError


@pytest.fixture
def a():
    return Matrix.from_rows([[1, 2], [3, 4]])


@pytest.fixture
def b():
    return Matrix.from_rows([[5, 6], [7, 8]])


# ═══════════════════════════════════════════════════════════════════════
# Element-wise operations
# ═══════════════════════════════════════════════════════════════════════


class TestElementwise:

    def test_add(self, a, b):
        assert (a + b).to_list() == [[6, 8], [10, 12]]

    def test_sub(self, a, b):
        assert (b - a).to_list() == [[4, 4], [4, 4]]

    def test_neg(self, a):
        assert (-a).to_list() == [[-1, -2], [-3, -4]]

    def test_shape_mismatch(self, a, rect_2x3):
        with pytest.raises(DimensionError):
            a + rect_2x3

    def test_with_view(self, a):
        assert (a + a.t()).to_list() == [[2, 5], [5, 8]]

    def test_operands_untouched(self, a, b):
        a + b
        assert a.to_list() == [[1, 2], [3, 4]]

    def test_scalar_add_unsupported(self, a):
        with pytest.raises(TypeError):
            a + 1


class TestScalar:

    def test_right_multiply(self, a):
        assert (a * 2).to_list() == [[2, 4], [6, 8]]

    def test_left_multiply(self, a):
        assert (2 * a).to_list() == [[2, 4], [6, 8]]

    def test_divide(self, a):
        assert (a / 2).to_list() == [[0.5, 1.0], [1.5, 2.0]]
        assert (a / 2).element_type is float

    def test_float_scalar_promotes_integers(self, a):
        assert (a * 0.5).element_type is float
        assert (0.5 * a).element_type is float

    def test_integer_scalar_keeps_type(self, a):
        assert (a * 2).element_type is int


class TestMatmul:

    def test_product(self, a, b):
        assert (a @ b).to_list() == [[19, 22], [43, 50]]

    def test_identity(self, a):
        assert a @ identity(2) == a

    def test_integer_times_float_is_float(self, a, b):
        product = a @ (b * 1.0)
        assert product.element_type is float
        assert product.allclose(a @ b)

    def test_rectangular(self, a, rect_2x3):
        product = a @ rect_2x3
        assert product.shape == (2, 3)
        assert product.to_list() == [[9, 12, 15], [19, 26, 33]]

    def test_inner_dimension_mismatch(self, a, rect_2x3):
        with pytest.raises(DimensionError, match="Inner dimensions"):
            rect_2x3 @ a

    def test_transpose_product_symmetric(self, rect_2x3):
        gram = rect_2x3 @ rect_2x3.t()
        assert gram == gram.t()

    def test_matches_numpy(self, rng):
        x = rng.standard_normal((3, 4))
        y = rng.standard_normal((4, 2))
        result = Matrix.from_array(x) @ Matrix.from_array(y)
        np.testing.assert_allclose(result.to_numpy(), x @ y, rtol=1e-12)


# ═══════════════════════════════════════════════════════════════════════
# Equality
# ═══════════════════════════════════════════════════════════════════════


class TestEquality:

    def test_equal(self, a):
        assert a == Matrix.from_rows([[1, 2], [3, 4]])

    def test_mixed_numeric_types_equal(self, a):
        assert a == Matrix.from_rows([[1.0, 2.0], [3.0, 4.0]])

    def test_not_equal(self, a, b):
        assert a != b
        assert not (a == b)

    def test_shape_mismatch_is_false(self, a, rect_2x3):
        assert (a == rect_2x3) is False

    def test_non_matrix_is_false(self, a):
        assert (a == [[1, 2], [3, 4]]) is False

    def test_unhashable(self, a):
        with pytest.raises(TypeError):
            hash(a)

    def test_allclose(self, a):
        nudged = Matrix.from_rows([[1.0 + 1e-13, 2.0], [3.0, 4.0]])
        assert nudged.allclose(a)
        assert not nudged.allclose(a, EXACT)

    def test_allclose_shape_mismatch(self, a, rect_2x3):
        assert not a.allclose(rect_2x3)


# ═══════════════════════════════════════════════════════════════════════
# Rendering
# ═══════════════════════════════════════════════════════════════════════


class TestRendering:

    def test_str_row_major(self, rect_2x3):
        assert str(rect_2x3) == "1 2 3\n4 5 6"

    def test_str_floats(self):
        assert str(Matrix.from_rows([[0.5, 1.0], [-2.25, 1e-20]])) == "0.5 1\n-2.25 1e-20"

    def test_str_of_view(self, rect_2x3):
        assert str(rect_2x3.t()) == "1 4\n2 5\n3 6"

    def test_repr(self, rect_2x3):
        assert repr(rect_2x3) == "<Matrix shape=(2, 3)>"
        assert repr(rect_2x3.t()) == "<TransposeView shape=(3, 2)>"
