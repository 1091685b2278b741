"""
Public dense linear-algebra functions.

Every function takes matrices as flat row-major buffers plus explicit
dimensions, validates them at this boundary, and delegates to the
kernels in pymatstat.core.compute.linalg. Outputs are flat float64
buffers (or scalars / LUResult).

    lu(buffer, rows, cols)                  -> LUResult
    det(buffer, n)                          -> float
    inv(buffer, n, on_singular='nan')       -> buffer (n*n)
    mtimes(a, b, rows_a, cols_a, cols_b)    -> buffer (rows_a*cols_b)
    linsolve(a, b, n, nrhs=1)               -> buffer (n*nrhs)
    mldivide(a, b, n, nrhs=1)               -> buffer (n*nrhs)
    mrdivide(a, b, rows_a, n)               -> buffer (rows_a*n)
    mpower(buffer, n, k)                    -> buffer (n*n)
"""

from __future__ import annotations

import numbers
import warnings
from typing import Any, Literal
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatstat.core.exceptions import (
    DimensionError,
    SingularMatrixError,
    SingularMatrixWarning,
    ValidationError,
)
from pymatstat.core.validation import (
    check_array,
    check_buffer_shape,
    check_dimension,
)
from pymatstat.core.compute.linalg import (
    LUResult,
    lu_decompose,
    lu_inverse,
    lu_solve,
    matmul_flat,
    nan_matrix,
)


SingularPolicy = Literal['nan', 'raise']


def _as_buffer(
    buffer: ArrayLike,
    rows: int,
    cols: int,
    name: str,
) -> NDArray[np.float64]:
    """Convert to float64 and check the buffer holds rows * cols values."""
    data = check_array(buffer, name)
    check_buffer_shape(data, rows, cols, name)
    return data


def _as_square(
    buffer: ArrayLike,
    n: int,
    name: str,
    *,
    allow_empty: bool = False,
) -> NDArray[np.float64]:
    """
    Validate an n x n buffer.

    A buffer whose length is not n * n is reported as non-square, since
    that is the only way a flat buffer with a single size can disagree.
    """
    n = check_dimension(n, 'n', allow_zero=allow_empty)
    data = check_array(buffer, name)
    if data.ndim == 1 and data.size != n * n:
        raise DimensionError(
            f"{name}: matrix must be square n x n with n={n}, "
            f"got a buffer of {data.size} elements"
        )
    check_buffer_shape(data, n, n, name)
    return data


def lu(buffer: ArrayLike, rows: int, cols: int) -> LUResult:
    """
    LU decomposition with partial pivoting.

    Parameters
    ----------
    buffer : array-like
        Flat row-major matrix, rows * cols values. Never modified.
    rows, cols : int
        Matrix dimensions. Rectangular input is accepted.

    Returns
    -------
    LUResult with sign, pivot, and the combined L/U buffer. L and U are
    available as properties.
    """
    rows = check_dimension(rows, 'rows')
    cols = check_dimension(cols, 'cols')
    data = _as_buffer(buffer, rows, cols, 'buffer')
    return lu_decompose(data, rows, cols)


def det(buffer: ArrayLike, n: int) -> float:
    """
    Determinant of a square matrix: sign * product of the LU pivots.

    The determinant of the empty (0 x 0) matrix is 1. No tolerance is
    applied: a nearly singular matrix returns its tiny determinant.

    Raises
    ------
    DimensionError
        If the buffer does not hold an n x n matrix.
    """
    data = _as_square(buffer, n, 'buffer', allow_empty=True)
    n = int(n)
    return lu_decompose(data, n, n).determinant()


def inv(
    buffer: ArrayLike,
    n: int,
    *,
    on_singular: SingularPolicy = 'nan',
) -> NDArray[np.float64]:
    """
    Inverse of a square matrix.

    Parameters
    ----------
    buffer : array-like
        Flat row-major n x n matrix.
    n : int
        Matrix order.
    on_singular : str
        'nan' (default): a singular matrix (an exact-zero pivot in U) yields
        an n x n buffer of NaN and a SingularMatrixWarning.
        'raise': a singular matrix raises SingularMatrixError.

    Returns
    -------
    Flat row-major n x n buffer.
    """
    if on_singular not in ('nan', 'raise'):
        raise ValidationError(
            f"on_singular: expected 'nan' or 'raise', got {on_singular!r}"
        )
    data = _as_square(buffer, n, 'buffer', allow_empty=True)
    n = int(n)

    factors = lu_decompose(data, n, n)

    # The pivots decide singularity; their product can overflow to inf
    # (inf * 0 = NaN) or underflow to 0 for an invertible matrix.
    if factors.is_singular:
        zero_pivots = int(np.sum(factors.diagonal == 0.0))
        message = f"Matrix is singular ({zero_pivots} zero pivot(s), n={n})"
        if on_singular == 'raise':
            raise SingularMatrixError(
                message,
                matrix_name='buffer',
                determinant=factors.determinant(),
                rank=n - zero_pivots,
                expected_rank=n,
            )
        warnings.warn(
            f"{message}; returning a NaN-filled inverse",
            SingularMatrixWarning,
            stacklevel=2,
        )
        return nan_matrix(n)

    return lu_inverse(factors)


def mtimes(
    a: ArrayLike,
    b: ArrayLike,
    rows_a: int,
    cols_a: int,
    cols_b: int,
) -> NDArray[np.float64]:
    """
    Matrix product A B.

    Parameters
    ----------
    a : array-like
        Flat row-major A, rows_a x cols_a.
    b : array-like
        Flat row-major B, cols_a x cols_b (its row count must equal
        A's column count).

    Returns
    -------
    Flat row-major rows_a x cols_b buffer.

    Raises
    ------
    DimensionError
        If either buffer does not match the declared dimensions, i.e.
        when B does not have cols_a rows.
    """
    rows_a = check_dimension(rows_a, 'rows_a')
    cols_a = check_dimension(cols_a, 'cols_a')
    cols_b = check_dimension(cols_b, 'cols_b')
    a_data = _as_buffer(a, rows_a, cols_a, 'a')
    b_data = check_array(b, 'b')
    if b_data.ndim == 1 and b_data.size != cols_a * cols_b:
        raise DimensionError(
            f"Matrix dimensions must agree: a is {rows_a}x{cols_a}, so b must be "
            f"{cols_a}x{cols_b} ({cols_a * cols_b} elements), got {b_data.size} elements"
        )
    check_buffer_shape(b_data, cols_a, cols_b, 'b')
    return matmul_flat(a_data, b_data, rows_a, cols_a, cols_b)


def _solve_nonsingular(factors: LUResult, rhs: NDArray[np.float64]) -> NDArray[np.float64]:
    """LU solve that refuses exact-zero pivots."""
    if factors.is_singular:
        zero_pivots = int(np.sum(factors.diagonal == 0.0))
        raise SingularMatrixError(
            "Matrix is singular",
            matrix_name='a',
            determinant=0.0,
            rank=factors.rows - zero_pivots,
            expected_rank=factors.rows,
        )
    return lu_solve(factors, rhs)


def linsolve(
    a: ArrayLike,
    b: ArrayLike,
    n: int,
    nrhs: int = 1,
) -> NDArray[np.float64]:
    """
    Solve the linear system A X = B using LU factorization with row pivoting.

    Parameters
    ----------
    a : array-like
        Flat row-major n x n coefficient matrix.
    b : array-like
        Flat row-major n x nrhs right-hand side.
    n : int
        Order of A.
    nrhs : int
        Number of right-hand-side columns.

    Returns
    -------
    Flat row-major n x nrhs solution.

    Raises
    ------
    SingularMatrixError
        If any pivot of U is exactly zero.
    """
    a_data = _as_square(a, n, 'a')
    nrhs = check_dimension(nrhs, 'nrhs')
    b_data = _as_buffer(b, n, nrhs, 'b')
    n = int(n)

    factors = lu_decompose(a_data, n, n)
    x = _solve_nonsingular(factors, b_data.reshape(n, nrhs))
    return x.ravel()


def mldivide(
    a: ArrayLike,
    b: ArrayLike,
    n: int,
    nrhs: int = 1,
) -> NDArray[np.float64]:
    """
    Matrix left division A \\ B, computed as inv(A) B.

    Raises SingularMatrixError when A is singular.
    """
    a_data = _as_square(a, n, 'a')
    nrhs = check_dimension(nrhs, 'nrhs')
    b_data = _as_buffer(b, n, nrhs, 'b')
    n = int(n)

    inverse = inv(a_data, n, on_singular='raise')
    return matmul_flat(inverse, b_data, n, n, nrhs)


def mrdivide(
    a: ArrayLike,
    b: ArrayLike,
    rows_a: int,
    n: int,
) -> NDArray[np.float64]:
    """
    Matrix right division A / B, computed as A inv(B).

    A is rows_a x n, B is n x n. Raises SingularMatrixError when B is
    singular.
    """
    rows_a = check_dimension(rows_a, 'rows_a')
    b_data = _as_square(b, n, 'b')
    n = int(n)
    a_data = _as_buffer(a, rows_a, n, 'a')

    inverse = inv(b_data, n, on_singular='raise')
    return matmul_flat(a_data, inverse, rows_a, n, n)


def mpower(buffer: ArrayLike, n: int, k: Any) -> NDArray[np.float64]:
    """
    Square matrix raised to a non-negative integer power by repeated
    multiplication. A^0 is the identity.
    """
    if isinstance(k, bool) or not isinstance(k, numbers.Integral) or k < 0:
        raise ValidationError(f"k: expected a non-negative integer exponent, got {k!r}")
    data = _as_square(buffer, n, 'buffer')
    n = int(n)

    if k == 0:
        return np.eye(n, dtype=np.float64).ravel()

    out = data.copy()
    for _ in range(1, int(k)):
        out = matmul_flat(out, data, n, n, n)
    return out
