"""
Dense linear algebra module.

MATLAB-style operations over flat row-major buffers with explicit
dimensions. Double precision, direct methods, modest matrix sizes.

Public API:
    lu(buffer, rows, cols)              - LU decomposition with partial pivoting
    det(buffer, n)                      - Determinant from the LU pivots
    inv(buffer, n)                      - Inverse (NaN-filled or raising on singular input)
    mtimes(a, b, rows_a, cols_a, cols_b) - Matrix product
    linsolve(a, b, n, nrhs)             - Solve A X = B
    mldivide(a, b, n, nrhs)             - A \\ B
    mrdivide(a, b, rows_a, n)           - A / B
    mpower(buffer, n, k)                - A ^ k for integer k >= 0
"""

from pymatstat.core.compute.linalg.lu import LUResult
from pymatstat.linalg.solvers import (
    lu,
    det,
    inv,
    mtimes,
    linsolve,
    mldivide,
    mrdivide,
    mpower,
)

__all__ = [
    "lu",
    "det",
    "inv",
    "mtimes",
    "linsolve",
    "mldivide",
    "mrdivide",
    "mpower",
    "LUResult",
]
