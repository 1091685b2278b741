"""
Covariance engine.

Column means come from one multi-column Welford pass over the rows;
the data are then centred and each pair (p, q) with p <= q is reduced
to sum_i (x[i, p] - mean[p]) * (x[i, q] - mean[q]) / (rows - flag).
The upper triangle is mirrored into the lower, so the result is exactly
symmetric regardless of how the cross-products were summed.
"""

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pymatstat.core.compute.welford import WelfordAccumulator


def covariance_flat(
    buffer: NDArray[np.floating[Any]],
    rows: int,
    cols: int,
    flag: int,
) -> NDArray[np.float64]:
    """
    Covariance matrix of a (rows observations x cols variables) buffer.

    rows == 1 with flag == 1 divides by zero and yields NaN entries.

    Returns:
        Flat row-major cols x cols buffer
    """
    data = np.asarray(buffer, dtype=np.float64).reshape(rows, cols)

    means = WelfordAccumulator(width=cols).extend(data).mean
    centered = data - means

    cov = np.empty((cols, cols), dtype=np.float64)
    denom = np.float64(rows - flag)
    with np.errstate(divide='ignore', invalid='ignore'):
        for p in range(cols):
            cross = centered[:, p] @ centered[:, p:]
            cov[p, p:] = cross / denom
            cov[p:, p] = cov[p, p:]
    return cov.ravel()


def correlation_from_covariance(
    cov: NDArray[np.float64],
    cols: int,
) -> NDArray[np.float64]:
    """
    C[i, j] / (sd_i * sd_j), from a flat covariance buffer.

    Zero-variance columns give NaN rows/columns.
    """
    c = cov.reshape(cols, cols)
    sd = np.sqrt(np.diagonal(c))
    with np.errstate(divide='ignore', invalid='ignore'):
        cor = c / np.outer(sd, sd)
    return cor.ravel()
