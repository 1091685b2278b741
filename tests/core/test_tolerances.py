"""
Tests for tolerance tiers.
"""

import pytest

from pymatstat.core.compute.tolerances import CPU_FP64, ROUND_TRIP_ATOL, WELFORD_RTOL


class TestTolerances:

    def test_cpu_tier(self):
        assert CPU_FP64.rtol == 1e-10
        assert CPU_FP64.atol == 1e-12
        assert CPU_FP64.name == 'cpu_fp64'

    def test_round_trip_looser_than_tier(self):
        assert ROUND_TRIP_ATOL > CPU_FP64.atol

    def test_welford_tolerance(self):
        assert WELFORD_RTOL == 1e-6

    def test_frozen(self):
        with pytest.raises(AttributeError):
            CPU_FP64.rtol = 1.0
