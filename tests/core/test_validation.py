"""
Tests for pymatstat.core.validation.

Each validator checks one thing and raises with the parameter name in
the message.
"""

import numpy as np
import pytest

from pymatstat.core.exceptions import (
    DegenerateStatisticError,
    DimensionError,
    ValidationError,
)
from pymatstat.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_buffer_shape,
    check_dimension,
    check_normalization_flag,
    check_not_empty,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:

    def test_list_converted_to_float64(self):
        result = check_array([1, 2, 3], "x")
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_float64_passthrough(self):
        x = np.array([1.5, 2.5])
        result = check_array(x, "x")
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, x)

    def test_object_dtype_rejected(self):
        with pytest.raises(ValidationError, match="x"):
            check_array(np.array([1, "a"], dtype=object), "x")

    def test_strings_rejected(self):
        with pytest.raises(ValidationError, match="non-numeric"):
            check_array(["a", "b"], "x")

    def test_booleans_rejected(self):
        with pytest.raises(ValidationError, match="non-numeric"):
            check_array([True, False], "x")

    def test_complex_rejected(self):
        with pytest.raises(ValidationError, match="complex"):
            check_array([1 + 2j], "x")


# ═══════════════════════════════════════════════════════════════════════
# Shape checks
# ═══════════════════════════════════════════════════════════════════════


class TestShapeChecks:

    def test_check_1d_accepts_vector(self):
        check_1d(np.zeros(3), "x")

    def test_check_1d_rejects_matrix(self):
        with pytest.raises(DimensionError, match="expected 1D"):
            check_1d(np.zeros((2, 2)), "x")

    def test_check_2d_rejects_vector(self):
        with pytest.raises(DimensionError, match="expected 2D"):
            check_2d(np.zeros(3), "x")

    def test_buffer_shape_matches(self):
        check_buffer_shape(np.zeros(6), 2, 3, "buffer")

    def test_buffer_shape_wrong_length(self):
        with pytest.raises(DimensionError, match="2 \\* 3"):
            check_buffer_shape(np.zeros(5), 2, 3, "buffer")

    def test_buffer_shape_rejects_nested(self):
        with pytest.raises(DimensionError):
            check_buffer_shape(np.zeros((2, 3)), 2, 3, "buffer")


# ═══════════════════════════════════════════════════════════════════════
# Scalar arguments
# ═══════════════════════════════════════════════════════════════════════


class TestCheckDimension:

    def test_positive_int(self):
        assert check_dimension(4, "rows") == 4

    def test_numpy_integer(self):
        result = check_dimension(np.int64(3), "rows")
        assert result == 3
        assert type(result) is int

    def test_zero_rejected_by_default(self):
        with pytest.raises(ValidationError, match=">= 1"):
            check_dimension(0, "rows")

    def test_zero_allowed(self):
        assert check_dimension(0, "n", allow_zero=True) == 0

    def test_negative_rejected(self):
        with pytest.raises(ValidationError):
            check_dimension(-1, "n", allow_zero=True)

    def test_float_rejected(self):
        with pytest.raises(ValidationError, match="float"):
            check_dimension(2.0, "rows")

    def test_bool_rejected(self):
        with pytest.raises(ValidationError):
            check_dimension(True, "rows")


class TestCheckNormalizationFlag:

    @pytest.mark.parametrize("flag", [0, 1])
    def test_valid(self, flag):
        assert check_normalization_flag(flag) == flag

    @pytest.mark.parametrize("flag", [2, -1, 0.0, True, "1", None])
    def test_invalid(self, flag):
        with pytest.raises(ValidationError, match="flag"):
            check_normalization_flag(flag)


# ═══════════════════════════════════════════════════════════════════════
# Content checks
# ═══════════════════════════════════════════════════════════════════════


class TestContentChecks:

    def test_empty_is_degenerate(self):
        with pytest.raises(DegenerateStatisticError, match="empty"):
            check_not_empty(np.array([]), "x")

    def test_degenerate_is_validation_error(self):
        with pytest.raises(ValidationError):
            check_not_empty(np.array([]), "x")
