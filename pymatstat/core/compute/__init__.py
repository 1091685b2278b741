"""
Shared compute infrastructure for pymatstat.

This module provides the numeric kernels and timing utilities shared by
the public linalg and stats surfaces.

IMPORTANT: This is NOT where input validation lives. Kernels assume
shapes were checked at the public boundary.

Submodules:
    timing: Execution timing utilities
    tolerances: Tolerance tiers for numerical comparison
    welford: Single-pass mean/variance accumulator
    covariance: Covariance and correlation matrices
    linalg: LU, triangular solves, inverse, multiplication
"""

from pymatstat.core.compute.timing import Timer, timed
from pymatstat.core.compute.welford import (
    WelfordAccumulator,
    welford_moments,
    welford_columns,
)
from pymatstat.core.compute.covariance import (
    covariance_flat,
    correlation_from_covariance,
)

__all__ = [
    # Timing
    "Timer",
    "timed",
    # Welford
    "WelfordAccumulator",
    "welford_moments",
    "welford_columns",
    # Covariance
    "covariance_flat",
    "correlation_from_covariance",
]
