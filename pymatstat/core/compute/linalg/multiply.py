"""
Dense matrix multiplication over flat row-major buffers.
"""

from typing import Any
import numpy as np
from numpy.typing import NDArray


def matmul_flat(
    a: NDArray[np.floating[Any]],
    b: NDArray[np.floating[Any]],
    rows_a: int,
    cols_a: int,
    cols_b: int,
) -> NDArray[np.float64]:
    """
    C = A B for A (rows_a x cols_a) and B (cols_a x cols_b).

    C[i, j] = sum_k A[i, k] * B[k, j], accumulated in ascending k: one
    rank-1 update per k, vectorised over (i, j). The summation order is
    that of the plain triple loop, so results do not depend on BLAS
    blocking.

    Returns:
        Flat row-major buffer of length rows_a * cols_b
    """
    a2 = np.asarray(a, dtype=np.float64).reshape(rows_a, cols_a)
    b2 = np.asarray(b, dtype=np.float64).reshape(cols_a, cols_b)
    c = np.zeros((rows_a, cols_b), dtype=np.float64)
    for k in range(cols_a):
        c += np.outer(a2[:, k], b2[k, :])
    return c.ravel()
