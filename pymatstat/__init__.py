"""
pymatstat: dense linear algebra and statistics kernels for Python.

MATLAB-style matrix operations over flat row-major buffers with
explicit dimensions, and numerically stable single-pass statistics.

Submodules:
    linalg: LU decomposition, determinant, inverse, products, linear solves
    stats: Mean, variance, standard deviation, z-score, covariance
    core: Exceptions, validation, FlatMatrix, result envelope, kernels
"""

__version__ = "0.1.0"

from pymatstat import linalg
from pymatstat import stats
from pymatstat.core.matrix import FlatMatrix

__all__ = [
    "__version__",
    "linalg",
    "stats",
    "FlatMatrix",
]
