"""
Matrix inverse from an LU factorization.
"""

import numpy as np
from numpy.typing import NDArray

from pymatstat.core.compute.linalg.lu import LUResult
from pymatstat.core.compute.linalg.triangular import lu_solve


def lu_inverse(factors: LUResult) -> NDArray[np.float64]:
    """
    Solve A X = I column by column.

    Each basis column e_j is permuted by the pivot, pushed through the
    unit-lower forward substitution and the upper back substitution, and
    written as column j of the result. The caller is responsible for
    rejecting singular factorizations first.

    Returns:
        Flat row-major n x n buffer
    """
    n = factors.rows
    inverse = np.empty((n, n), dtype=np.float64)
    for j in range(n):
        e_j = np.zeros(n, dtype=np.float64)
        e_j[j] = 1.0
        inverse[:, j] = lu_solve(factors, e_j)
    return inverse.ravel()


def nan_matrix(n: int) -> NDArray[np.float64]:
    """Flat n x n buffer of NaN, the singular-inverse sentinel."""
    return np.full(n * n, np.nan, dtype=np.float64)
