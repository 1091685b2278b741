"""
Linear algebra kernels for pymatstat.

Dense, double-precision, direct methods over flat row-major buffers.

All functions follow these conventions:
    - Inputs are validated by the caller (pymatstat.linalg); kernels
      assume consistent shapes
    - Inputs are never mutated; factorizations work on private copies
    - Singular input never raises here: zero pivots propagate

Submodules:
    lu: LU decomposition with partial pivoting
    triangular: Forward/back substitution against combined LU factors
    inverse: Inverse via n triangular solves
    multiply: Dense matrix product
"""

from pymatstat.core.compute.linalg.lu import LUResult, lu_decompose
from pymatstat.core.compute.linalg.triangular import (
    forward_substitution_unit,
    back_substitution,
    lu_solve,
)
from pymatstat.core.compute.linalg.inverse import lu_inverse, nan_matrix
from pymatstat.core.compute.linalg.multiply import matmul_flat

__all__ = [
    # LU decomposition
    "LUResult",
    "lu_decompose",
    # Triangular solves
    "forward_substitution_unit",
    "back_substitution",
    "lu_solve",
    # Inverse
    "lu_inverse",
    "nan_matrix",
    # Multiplication
    "matmul_flat",
]
