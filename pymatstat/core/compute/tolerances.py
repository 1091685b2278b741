"""
Tolerance tiers for numerical validation.

Defines precision expectations for the double-precision CPU kernels on
well-conditioned input: agreement with LAPACK to near machine precision.

Used by the test suite and by describe() to check that the covariance
diagonal matches the per-column variance.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision, well-conditioned input',
)

# Per-element absolute tolerance for A @ inv(A) == I.
ROUND_TRIP_ATOL = 1e-9

# Relative tolerance for Welford vs. two-pass variance on wide-range data.
WELFORD_RTOL = 1e-6
