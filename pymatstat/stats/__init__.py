"""
Statistics module.

Mean, variance, standard deviation and z-scores from Welford's
single-pass algorithm, plus covariance and correlation matrices over
flat row-major data buffers.

Public API:
    mean(x)                          - Arithmetic mean
    var(x, flag)                     - Variance (flag 0 population, 1 sample)
    std(x, flag)                     - Standard deviation
    zscore(x, flag)                  - Standardized scores
    cov(buffer, rows, cols, flag)    - Covariance matrix
    corrcoef(buffer, rows, cols, flag) - Correlation matrix
    describe(matrix, flag)           - All of the above at once
"""

from pymatstat.stats.solution import StatsParams, StatsSolution
from pymatstat.stats.solvers import (
    mean,
    var,
    std,
    zscore,
    cov,
    corrcoef,
    describe,
)

__all__ = [
    "mean",
    "var",
    "std",
    "zscore",
    "cov",
    "corrcoef",
    "describe",
    "StatsParams",
    "StatsSolution",
]
