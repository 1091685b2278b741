"""
Tests for FlatMatrix construction and accessors.
"""

import numpy as np
import pytest

from pymatstat.core.exceptions import DimensionError, ValidationError
from pymatstat.core.matrix import FlatMatrix


class TestConstruction:

    def test_from_buffer(self):
        m = FlatMatrix.from_buffer([1, 2, 3, 4, 5, 6], rows=2, cols=3)
        assert m.shape == (2, 3)
        assert m.buffer.dtype == np.float64
        np.testing.assert_array_equal(m.as_2d(), [[1, 2, 3], [4, 5, 6]])

    def test_from_nested_is_row_major(self):
        m = FlatMatrix.from_nested([[1, 2], [3, 4], [5, 6]])
        assert m.shape == (3, 2)
        np.testing.assert_array_equal(m.buffer, [1, 2, 3, 4, 5, 6])

    def test_from_array(self):
        m = FlatMatrix.from_array(np.eye(3))
        assert m.is_square
        np.testing.assert_array_equal(m.buffer, np.eye(3).ravel())

    def test_from_array_fortran_order(self):
        arr = np.asfortranarray([[1.0, 2.0], [3.0, 4.0]])
        m = FlatMatrix.from_array(arr)
        np.testing.assert_array_equal(m.buffer, [1, 2, 3, 4])

    def test_buffer_length_mismatch(self):
        with pytest.raises(DimensionError, match="expected rows \\* cols"):
            FlatMatrix.from_buffer([1, 2, 3], rows=2, cols=2)

    def test_zero_rows_rejected(self):
        with pytest.raises(ValidationError):
            FlatMatrix.from_buffer([], rows=0, cols=2)

    def test_empty_array_rejected(self):
        with pytest.raises(DimensionError, match="1x1"):
            FlatMatrix.from_array(np.zeros((0, 3)))

    def test_jagged_rejected(self):
        with pytest.raises(DimensionError, match="inconsistent"):
            FlatMatrix.from_nested([[1, 2], [3]])

    def test_flat_list_rejected_as_grid(self):
        with pytest.raises(DimensionError):
            FlatMatrix.from_nested([1, 2, 3])

    def test_vector_rejected_by_from_array(self):
        with pytest.raises(DimensionError, match="expected 2D"):
            FlatMatrix.from_array([1.0, 2.0])


class TestImmutability:

    def test_buffer_is_read_only(self):
        m = FlatMatrix.from_buffer([1, 2, 3, 4], rows=2, cols=2)
        with pytest.raises(ValueError):
            m.buffer[0] = 99.0

    def test_source_not_aliased(self):
        source = np.array([1.0, 2.0, 3.0, 4.0])
        m = FlatMatrix.from_buffer(source, rows=2, cols=2)
        source[0] = 99.0
        assert m[0, 0] == 1.0


class TestAccessors:

    @pytest.fixture
    def m(self):
        return FlatMatrix.from_nested([[1, 2, 3], [4, 5, 6]])

    def test_getitem(self, m):
        assert m[1, 2] == 6.0
        assert isinstance(m[0, 0], float)

    def test_row_and_column(self, m):
        np.testing.assert_array_equal(m.row(1), [4, 5, 6])
        np.testing.assert_array_equal(m.column(0), [1, 4])

    def test_to_nested(self, m):
        assert m.to_nested() == [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]]

    def test_repr(self, m):
        assert repr(m) == "FlatMatrix(rows=2, cols=3)"


class TestEquality:

    def test_equal_by_value(self):
        a = FlatMatrix.from_buffer([1, 2, 3, 4], rows=2, cols=2)
        b = FlatMatrix.from_nested([[1, 2], [3, 4]])
        assert a == b
        assert hash(a) == hash(b)

    def test_shape_distinguishes(self):
        a = FlatMatrix.from_buffer([1, 2, 3, 4], rows=2, cols=2)
        b = FlatMatrix.from_buffer([1, 2, 3, 4], rows=1, cols=4)
        assert a != b

    def test_elements_distinguish(self):
        a = FlatMatrix.from_nested([[1, 2], [3, 4]])
        b = FlatMatrix.from_nested([[1, 2], [3, 5]])
        assert a != b

    def test_signed_zero_hashes_equally(self):
        a = FlatMatrix.from_nested([[0.0]])
        b = FlatMatrix.from_nested([[-0.0]])
        assert a == b
        assert hash(a) == hash(b)

    def test_usable_as_dict_key(self):
        m = FlatMatrix.from_nested([[1, 2], [3, 4]])
        cache = {m: "cached"}
        assert cache[FlatMatrix.from_nested([[1, 2], [3, 4]])] == "cached"

    def test_not_equal_to_other_types(self):
        m = FlatMatrix.from_nested([[1, 2], [3, 4]])
        assert m != [[1, 2], [3, 4]]
