"""
Core infrastructure for pymatstat.

This module provides shared abstractions, utilities, and numeric kernels
used by the public linalg and stats surfaces.

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    matrix: FlatMatrix, the explicit row-major matrix type
    compute: Timing, tolerances, Welford, covariance and linear algebra kernels
"""

from pymatstat.core.result import Result
from pymatstat.core.matrix import FlatMatrix
from pymatstat.core.exceptions import (
    PyMatStatError,
    ValidationError,
    DimensionError,
    DegenerateStatisticError,
    NumericalError,
    SingularMatrixError,
    SingularMatrixWarning,
)

__all__ = [
    # Result
    "Result",
    # Matrix
    "FlatMatrix",
    # Exceptions
    "PyMatStatError",
    "ValidationError",
    "DimensionError",
    "DegenerateStatisticError",
    "NumericalError",
    "SingularMatrixError",
    "SingularMatrixWarning",
]
