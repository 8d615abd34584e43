"""
Tests for Vector: single-index access, reductions and dot product.
"""

import math

import pytest

from pymatrix import FILL_ONES, Matrix, Vector
from pymatrix.core.exceptions import DimensionError, EmptyError, OutOfBoundsError
from pymatrix.dense import dot


class TestConstruction:

    def test_column_default(self):
        v = Vector(3)
        assert v.shape == (3, 1)
        assert v.orientation == 'col'

    def test_row(self):
        v = Vector(4, 'row', FILL_ONES)
        assert v.shape == (1, 4)
        assert v.orientation == 'row'
        assert v.to_values() == [1.0, 1.0, 1.0, 1.0]

    def test_zero_length(self):
        with pytest.raises(EmptyError):
            Vector(0)

    def test_negative_length(self):
        with pytest.raises(DimensionError):
            Vector(-2)

    def test_bad_orientation(self):
        with pytest.raises(ValueError, match="orientation"):
            Vector(3, 'diagonal')

    def test_from_values(self):
        v = Vector.from_values([1, 2, 3], orientation='row')
        assert v.shape == (1, 3)
        assert v.element_type is int

    def test_from_empty_values(self):
        with pytest.raises(EmptyError):
            Vector.from_values([])

    def test_is_a_matrix(self):
        assert isinstance(Vector(2), Matrix)


class TestAccess:

    def test_single_index(self):
        v = Vector.from_values([10, 20, 30])
        assert v.at(1) == 20
        assert v[2] == 30

    def test_two_index_still_works(self):
        v = Vector.from_values([10, 20, 30])
        assert v.at(2, 0) == 30

    def test_single_index_write(self):
        v = Vector.from_values([1, 2, 3], orientation='row')
        v[0] = 9
        v.set(1, 8)
        assert v.to_values() == [9, 8, 3]
        assert v.at(0, 0) == 9

    def test_out_of_bounds(self):
        v = Vector.from_values([1, 2, 3])
        with pytest.raises(OutOfBoundsError):
            v.at(3)

    def test_len_and_iter(self):
        v = Vector.from_values([4, 5, 6])
        assert len(v) == 3
        assert list(v) == [4, 5, 6]

    def test_set_arity(self):
        v = Vector(2)
        with pytest.raises(TypeError):
            v.set(0)


class TestReductions:

    def test_sum(self):
        assert Vector.from_values([1, 2, 3, 4]).sum() == 10

    def test_prod(self):
        assert Vector.from_values([1, 2, 3, 4]).prod() == 24

    def test_norm(self):
        assert Vector.from_values([3.0, 4.0]).norm() == pytest.approx(5.0)

    def test_norm_complex(self):
        v = Vector.from_values([3j, 4.0])
        assert v.norm() == pytest.approx(5.0)

    def test_dot(self):
        v = Vector.from_values([1, 2, 3])
        w = Vector.from_values([4, 5, 6], orientation='row')
        assert v.dot(w) == 32
        assert dot(w, v) == 32

    def test_dot_length_mismatch(self):
        with pytest.raises(DimensionError, match="lengths differ"):
            dot(Vector.from_values([1, 2]), Vector.from_values([1, 2, 3]))

    def test_dot_with_projection(self, rect_2x3):
        assert rect_2x3.row(0).dot(rect_2x3.row(1)) == 4 + 10 + 18


class TestArithmeticKeepsVector:

    def test_add(self):
        v = Vector.from_values([1.0, 2.0])
        result = v + v
        assert isinstance(result, Vector)
        assert result.to_values() == [2.0, 4.0]

    def test_scale(self):
        result = 3 * Vector.from_values([1, 2], orientation='row')
        assert isinstance(result, Vector)
        assert result.orientation == 'row'

    def test_outer_product_is_matrix(self):
        col = Vector.from_values([1, 2])
        row = Vector.from_values([3, 4], orientation='row')
        outer = col @ row
        assert outer.shape == (2, 2)
        assert outer.to_list() == [[3, 4], [6, 8]]

    def test_matrix_times_column_vector(self, square_2x2):
        result = square_2x2 @ Vector.from_values([1.0, 1.0])
        assert isinstance(result, Vector)
        assert result.orientation == 'col'
        assert result.to_values() == [3.0, 7.0]

    def test_row_vector_times_matrix(self, square_2x2):
        result = Vector.from_values([1.0, 1.0], orientation='row') @ square_2x2
        assert isinstance(result, Vector)
        assert result.orientation == 'row'
        assert result.to_values() == [4.0, 6.0]

    def test_copy_keeps_type(self):
        assert isinstance(Vector.from_values([1.0]).copy(), Vector)


class TestDiag:

    def test_diag_is_column_vector(self, rect_2x3):
        d = rect_2x3.diag()
        assert isinstance(d, Vector)
        assert d.orientation == 'col'
        assert d.to_values() == [1, 5]

    def test_trace(self, square_2x2):
        assert square_2x2.trace() == 5.0

    def test_diag_length_is_min_extent(self):
        m = Matrix.from_rows([[1], [2], [3]])
        assert len(m.diag()) == 1

    def test_sqrt_of_norm_squared(self):
        v = Vector.from_values([1.0, 1.0])
        assert v.norm() == pytest.approx(math.sqrt(2.0))
