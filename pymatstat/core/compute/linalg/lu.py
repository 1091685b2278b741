"""
LU decomposition with partial pivoting.

Doolittle elimination over a private copy of a row-major buffer:

    P A = L U

where U occupies the upper triangle (diagonal included) of the combined
buffer, L's multipliers occupy the strict lower triangle, and L's unit
diagonal is implicit. Rectangular input is decomposed over its leading
min(rows, cols) pivot columns.

No exception is raised for singular input: a zero pivot skips
elimination for that column, and the zero propagates into the
determinant.
"""

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class LUResult:
    """
    Result of LU decomposition.

    Attributes:
        sign: Parity of the row permutation (+1 or -1)
        pivot: Original row index now occupying each row position
        lu: Combined L/U factors, flat row-major rows x cols buffer
        rows: Number of rows of the decomposed matrix
        cols: Number of columns of the decomposed matrix
    """
    sign: int
    pivot: tuple[int, ...]
    lu: NDArray[np.float64]
    rows: int
    cols: int

    def as_2d(self) -> NDArray[np.float64]:
        """Combined factors as a (rows, cols) view."""
        return self.lu.reshape(self.rows, self.cols)

    @property
    def diagonal(self) -> NDArray[np.float64]:
        """Pivots: the leading diagonal of U."""
        return np.diagonal(self.as_2d()).copy()

    @property
    def L(self) -> NDArray[np.float64]:
        """Unit lower-triangular factor, shape (rows, min(rows, cols))."""
        k = min(self.rows, self.cols)
        lower = np.tril(self.as_2d()[:, :k], k=-1)
        lower[np.arange(k), np.arange(k)] = 1.0
        return lower

    @property
    def U(self) -> NDArray[np.float64]:
        """Upper-triangular factor, shape (min(rows, cols), cols)."""
        k = min(self.rows, self.cols)
        return np.triu(self.as_2d()[:k, :])

    @property
    def is_singular(self) -> bool:
        """True if any pivot on the leading diagonal is exactly zero."""
        return bool(np.any(self.diagonal == 0.0))

    def determinant(self) -> float:
        """
        sign * product of the pivots, multiplied in diagonal order.

        Only meaningful for square decompositions. The empty product
        (0x0 matrix) is 1.
        """
        det = float(self.sign)
        for pivot_value in self.diagonal.tolist():
            det *= pivot_value
        return det


def lu_decompose(
    buffer: NDArray[np.floating[Any]],
    rows: int,
    cols: int,
) -> LUResult:
    """
    LU decomposition with partial (row) pivoting.

    At each pivot column k the row with the largest |a[p, k]| among
    rows k..rows-1 becomes the pivot row; ties go to the first such row.
    Elimination subtracts one rank-1 term per pivot column, so every
    element receives the same sequence of scalar updates as the
    textbook triple loop.

    Args:
        buffer: Flat row-major matrix (rows * cols), never modified
        rows: Number of rows
        cols: Number of columns

    Returns:
        LUResult with sign, pivot and the combined factors
    """
    a = np.array(buffer, dtype=np.float64, copy=True).reshape(rows, cols)
    pivot = list(range(rows))
    sign = 1

    for k in range(min(rows, cols)):
        # argmax returns the first maximum
        p = k + int(np.argmax(np.abs(a[k:, k])))

        if p != k:
            a[[k, p], :] = a[[p, k], :]
            pivot[k], pivot[p] = pivot[p], pivot[k]
            sign = -sign

        pivot_value = a[k, k]
        if pivot_value != 0.0:
            a[k + 1:, k] /= pivot_value
            a[k + 1:, k + 1:] -= np.outer(a[k + 1:, k], a[k, k + 1:])

    lu = a.ravel()
    lu.setflags(write=False)
    return LUResult(sign=sign, pivot=tuple(pivot), lu=lu, rows=rows, cols=cols)
