"""
Tests for the pymatstat exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyMatStatError)
    - Diagnostic attributes on SingularMatrixError
    - SingularMatrixWarning is a RuntimeWarning, not an exception subclass
"""

import pytest

from pymatstat.core.exceptions import (
    DegenerateStatisticError,
    DimensionError,
    NumericalError,
    PyMatStatError,
    SingularMatrixError,
    SingularMatrixWarning,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyMatStatError."""

    def test_validation_error_is_pymatstat_error(self):
        with pytest.raises(PyMatStatError):
            raise ValidationError("bad input")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("wrong shape")

    def test_degenerate_statistic_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DegenerateStatisticError("empty")

    def test_singular_matrix_error_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise SingularMatrixError("singular")

    def test_singular_matrix_error_is_pymatstat_error(self):
        with pytest.raises(PyMatStatError):
            raise SingularMatrixError("singular")

    def test_numerical_error_is_not_validation_error(self):
        err = NumericalError("computation failed")
        assert not isinstance(err, ValidationError)

    def test_singular_warning_is_runtime_warning(self):
        assert issubclass(SingularMatrixWarning, RuntimeWarning)
        assert not issubclass(SingularMatrixWarning, PyMatStatError)


# ═══════════════════════════════════════════════════════════════════════
# SingularMatrixError attributes
# ═══════════════════════════════════════════════════════════════════════


class TestSingularMatrixError:

    def test_defaults_are_none(self):
        err = SingularMatrixError("singular")
        assert err.matrix_name is None
        assert err.determinant is None
        assert err.rank is None
        assert err.expected_rank is None

    def test_all_attributes(self):
        err = SingularMatrixError(
            "singular", matrix_name="A", determinant=0.0, rank=1, expected_rank=2
        )
        assert err.matrix_name == "A"
        assert err.determinant == 0.0
        assert err.rank == 1
        assert err.expected_rank == 2

    def test_message_preserved(self):
        err = SingularMatrixError("Matrix is singular (determinant = 0, n=2)")
        assert "determinant = 0" in str(err)
