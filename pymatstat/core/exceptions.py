"""
Exception hierarchy for pymatstat.

All exceptions inherit from PyMatStatError to allow catching any
library-specific error. Shape and emptiness problems are hard
preconditions and raise; numerical edge cases (division by zero,
singular inverses) propagate IEEE-754 NaN/Inf unless the caller
explicitly asks for an exception.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyMatStatError(Exception):
    """Base exception for all pymatstat errors."""
    pass


class ValidationError(PyMatStatError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when a buffer length does not match its declared rows/cols,
    when a square matrix is required but not supplied, or when the inner
    dimensions of a product do not agree.
    """
    pass


class DegenerateStatisticError(ValidationError):
    """
    Statistic is undefined for the given input.

    Raised for empty input to mean, variance, standard deviation,
    z-score and covariance. Single-observation sample variance is NOT
    an error: it evaluates to NaN.
    """
    pass


class NumericalError(PyMatStatError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular.

    Raised when an operation requires invertibility and the caller asked
    for an exception instead of a NaN-filled result.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        determinant: Determinant computed from the LU pivots, if available
        rank: Numerical rank, if computed
        expected_rank: Expected rank (typically n)
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        determinant: float | None = None,
        rank: int | None = None,
        expected_rank: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.determinant = determinant
        self.rank = rank
        self.expected_rank = expected_rank


class SingularMatrixWarning(RuntimeWarning):
    """Emitted when a singular inverse is returned as a NaN-filled matrix."""
    pass
