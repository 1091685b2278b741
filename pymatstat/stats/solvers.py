"""
Public statistics functions.

Vector statistics take a 1-D buffer. Passing a FlatMatrix instead
computes the statistic along a dimension (dim=0 per column, dim=1 per
row); the shape is never guessed from nesting.

    mean(x)                         -> float
    var(x, flag=1)                  -> float
    std(x, flag=1)                  -> float
    zscore(x, flag=1)               -> buffer
    cov(buffer, rows, cols, flag=1) -> buffer (cols*cols)
    corrcoef(buffer, rows, cols, flag=1) -> buffer (cols*cols)
    describe(matrix, flag=1)        -> StatsSolution
"""

from __future__ import annotations

from typing import Any, Literal
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatstat.core.matrix import FlatMatrix
from pymatstat.core.validation import (
    check_array,
    check_1d,
    check_buffer_shape,
    check_dimension,
    check_not_empty,
    check_normalization_flag,
)
from pymatstat.core.exceptions import ValidationError
from pymatstat.core.compute.welford import welford_moments, welford_columns
from pymatstat.core.compute.covariance import (
    covariance_flat,
    correlation_from_covariance,
)
from pymatstat.stats.solution import StatsSolution
from pymatstat.stats.backends.cpu import CPUStatsBackend


NormalizationFlag = Literal[0, 1]
Dim = Literal[0, 1]


def _vector(x: ArrayLike, name: str = 'x') -> NDArray[np.float64]:
    """Validate a non-empty 1-D observation buffer."""
    data = check_array(x, name)
    check_1d(data, name)
    check_not_empty(data, name)
    return data


def _oriented(matrix: FlatMatrix, dim: Any) -> NDArray[np.float64]:
    """2-D array whose columns are the vectors to reduce."""
    if dim == 0:
        return matrix.as_2d()
    if dim == 1:
        return matrix.as_2d().T
    raise ValidationError(f"dim: expected 0 or 1, got {dim!r}")


def _ensure_matrix(data: ArrayLike | FlatMatrix) -> FlatMatrix:
    """Convert a raw 2-D array to FlatMatrix if needed."""
    if isinstance(data, FlatMatrix):
        return data
    return FlatMatrix.from_array(data)


def mean(
    x: ArrayLike | FlatMatrix,
    *,
    dim: Dim = 0,
) -> float | NDArray[np.float64]:
    """
    Arithmetic mean (sum / n).

    Parameters
    ----------
    x : array-like or FlatMatrix
        1-D observations, or a matrix reduced along ``dim``.

    Raises
    ------
    DegenerateStatisticError
        If x is empty.
    """
    if isinstance(x, FlatMatrix):
        data = _oriented(x, dim)
        return data.sum(axis=0) / data.shape[0]
    data = _vector(x)
    return float(data.sum() / data.size)


def var(
    x: ArrayLike | FlatMatrix,
    flag: NormalizationFlag = 1,
    *,
    dim: Dim = 0,
) -> float | NDArray[np.float64]:
    """
    Variance via Welford's algorithm.

    Parameters
    ----------
    x : array-like or FlatMatrix
        1-D observations, or a matrix reduced along ``dim``.
    flag : int
        0 normalizes by n (population), 1 by n - 1 (sample).

    A single observation with flag=1 returns NaN rather than raising.
    """
    flag = check_normalization_flag(flag)
    if isinstance(x, FlatMatrix):
        _, variances = welford_columns(_oriented(x, dim), flag)
        return variances
    _, variance = welford_moments(_vector(x), flag)
    return variance


def std(
    x: ArrayLike | FlatMatrix,
    flag: NormalizationFlag = 1,
    *,
    dim: Dim = 0,
) -> float | NDArray[np.float64]:
    """Standard deviation: square root of var(x, flag)."""
    variance = var(x, flag, dim=dim)
    if isinstance(variance, np.ndarray):
        return np.sqrt(variance)
    return float(np.sqrt(variance))


def _standardize(
    data: NDArray[np.float64],
    means: NDArray[np.float64],
    sds: NDArray[np.float64],
) -> NDArray[np.float64]:
    """(x - mean) / sd per column; constant or single-row columns become 0."""
    degenerate = (sds == 0.0) | (data.shape[0] == 1)
    safe_sd = np.where(degenerate, 1.0, sds)
    z = (data - means) / safe_sd
    z[:, degenerate] = 0.0
    return z


def zscore(
    x: ArrayLike | FlatMatrix,
    flag: NormalizationFlag = 1,
    *,
    dim: Dim = 0,
) -> NDArray[np.float64] | FlatMatrix:
    """
    Standardized scores (x - mean) / std, from one Welford pass.

    A constant input (std == 0) or a single observation standardizes
    to zeros. FlatMatrix input returns a FlatMatrix of the same shape.
    """
    flag = check_normalization_flag(flag)
    if isinstance(x, FlatMatrix):
        data = _oriented(x, dim)
        means, variances = welford_columns(data, flag)
        z = _standardize(data, means, np.sqrt(variances))
        return FlatMatrix.from_array(z if dim == 0 else z.T)

    data = _vector(x)
    mu, variance = welford_moments(data, flag)
    z = _standardize(
        data.reshape(-1, 1),
        np.array([mu]),
        np.sqrt(np.array([variance])),
    )
    return z.ravel()


def _data_buffer(
    buffer: ArrayLike,
    rows: int,
    cols: int,
) -> tuple[NDArray[np.float64], int, int]:
    rows = check_dimension(rows, 'rows')
    cols = check_dimension(cols, 'cols')
    data = check_array(buffer, 'buffer')
    check_not_empty(data, 'buffer')
    check_buffer_shape(data, rows, cols, 'buffer')
    return data, rows, cols


def cov(
    buffer: ArrayLike,
    rows: int,
    cols: int,
    flag: NormalizationFlag = 1,
) -> NDArray[np.float64]:
    """
    Covariance matrix of a data matrix (rows observations x cols variables).

    Parameters
    ----------
    buffer : array-like
        Flat row-major data, rows * cols values.
    flag : int
        0 normalizes by rows, 1 by rows - 1.

    Returns
    -------
    Flat row-major cols x cols buffer, exactly symmetric. Its diagonal
    matches var() of each column.
    """
    flag = check_normalization_flag(flag)
    data, rows, cols = _data_buffer(buffer, rows, cols)
    return covariance_flat(data, rows, cols, flag)


def corrcoef(
    buffer: ArrayLike,
    rows: int,
    cols: int,
    flag: NormalizationFlag = 1,
) -> NDArray[np.float64]:
    """
    Correlation coefficients derived from cov().

    Columns with zero variance produce NaN entries.
    """
    flag = check_normalization_flag(flag)
    data, rows, cols = _data_buffer(buffer, rows, cols)
    return correlation_from_covariance(covariance_flat(data, rows, cols, flag), cols)


def describe(
    data: ArrayLike | FlatMatrix,
    flag: NormalizationFlag = 1,
) -> StatsSolution:
    """
    Compute mean, variance, sd, covariance and correlation in one call.

    Parameters
    ----------
    data : FlatMatrix or 2-D array-like
        rows observations x cols variables.
    flag : int
        0 population, 1 sample normalization.

    Returns
    -------
    StatsSolution with all statistics populated, per-section timing and
    any non-fatal warnings.
    """
    flag = check_normalization_flag(flag)
    matrix = _ensure_matrix(data)
    backend = CPUStatsBackend()

    result = backend.solve(
        matrix,
        compute={'mean', 'var', 'sd', 'cov', 'cor'},
        flag=flag,
    )

    return StatsSolution(_result=result, _matrix=matrix)
