"""
Triangular solves against a combined LU buffer.

Used by the inverse (one solve per basis column) and by linsolve. Both
triangles live in the same (n, n) array; LAPACK's trtrs reads only the
triangle it is asked for, so no copy is split out.
"""

from typing import Any
import numpy as np
from numpy.typing import NDArray
import scipy.linalg as sla

from pymatstat.core.compute.linalg.lu import LUResult


def forward_substitution_unit(
    lu: NDArray[np.float64],
    b: NDArray[np.floating[Any]],
) -> NDArray[np.float64]:
    """
    Solve L y = b where L is unit lower-triangular.

    Args:
        lu: (n, n) combined factors; only the strict lower triangle is read
        b: Right-hand side, shape (n,) or (n, k)

    Returns:
        y with the same shape as b
    """
    return sla.solve_triangular(
        lu, b, lower=True, unit_diagonal=True, check_finite=False,
    )


def back_substitution(
    lu: NDArray[np.float64],
    y: NDArray[np.floating[Any]],
) -> NDArray[np.float64]:
    """
    Solve U x = y where U is the upper triangle of lu (diagonal included).

    Callers reject zero pivots first (LUResult.is_singular); NaN/Inf in
    the factors propagate into x.
    """
    return sla.solve_triangular(lu, y, lower=False, check_finite=False)


def lu_solve(
    factors: LUResult,
    b: NDArray[np.floating[Any]],
) -> NDArray[np.float64]:
    """
    Solve A X = B given the factorization P A = L U.

    Args:
        factors: Square, nonsingular LU decomposition of A (n x n)
        b: Right-hand side, shape (n,) or (n, k)

    Returns:
        X with the same shape as b
    """
    lu = factors.as_2d()
    permuted = np.asarray(b, dtype=np.float64)[list(factors.pivot)]
    y = forward_substitution_unit(lu, permuted)
    return back_substitution(lu, y)
