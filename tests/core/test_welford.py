"""
Tests for the Welford accumulator.
"""

import numpy as np
import pytest

from pymatstat.core.compute.tolerances import WELFORD_RTOL
from pymatstat.core.compute.welford import (
    WelfordAccumulator,
    welford_columns,
    welford_moments,
)


class TestScalarAccumulator:

    def test_known_values(self):
        acc = WelfordAccumulator().extend([1.0, 2.0, 3.0, 4.0, 5.0])
        assert acc.count == 5
        assert acc.mean == pytest.approx(3.0)
        assert acc.m2 == pytest.approx(10.0)
        assert acc.variance(0) == pytest.approx(2.0)
        assert acc.variance(1) == pytest.approx(2.5)
        assert acc.std(1) == pytest.approx(np.sqrt(2.5))

    def test_extend_returns_self(self):
        acc = WelfordAccumulator()
        assert acc.extend([1.0]) is acc

    def test_no_observations_is_nan(self):
        acc = WelfordAccumulator()
        assert np.isnan(acc.variance(0))
        assert np.isnan(acc.variance(1))

    def test_single_observation(self):
        acc = WelfordAccumulator().extend([7.0])
        assert acc.variance(0) == 0.0
        assert np.isnan(acc.variance(1))

    def test_scalar_results_are_floats(self):
        acc = WelfordAccumulator().extend([1.0, 2.0])
        assert isinstance(acc.mean, float)
        assert isinstance(acc.variance(1), float)
        assert isinstance(acc.std(1), float)

    def test_large_offset_no_cancellation(self):
        # Naive sum-of-squares loses every digit here
        values = 1e9 + np.array([4.0, 7.0, 13.0, 16.0])
        acc = WelfordAccumulator().extend(values.tolist())
        assert acc.variance(1) == pytest.approx(30.0, rel=1e-9)


class TestMultiColumnAccumulator:

    def test_matches_per_column(self, rng):
        data = rng.standard_normal((40, 3))
        acc = WelfordAccumulator(width=3).extend(data)
        np.testing.assert_allclose(acc.mean, data.mean(axis=0), rtol=1e-12)
        np.testing.assert_allclose(acc.variance(1), data.var(axis=0, ddof=1), rtol=1e-12)

    def test_wrong_row_width(self):
        acc = WelfordAccumulator(width=3)
        with pytest.raises(ValueError, match="row of 3"):
            acc.update([1.0, 2.0])

    def test_mean_is_a_copy(self):
        acc = WelfordAccumulator(width=2).extend([[1.0, 2.0]])
        snapshot = acc.mean
        snapshot[0] = 99.0
        assert acc.mean[0] == 1.0

    def test_empty_is_nan(self):
        acc = WelfordAccumulator(width=2)
        assert np.all(np.isnan(acc.variance(1)))


class TestHelpers:

    def test_welford_moments_wide_range(self, rng):
        values = rng.uniform(-1e6, 1e6, size=1000)
        mu, variance = welford_moments(values, 1)
        assert mu == pytest.approx(values.mean(), rel=WELFORD_RTOL, abs=1e-6)
        assert variance == pytest.approx(np.var(values, ddof=1), rel=WELFORD_RTOL)

    def test_welford_columns(self, rng):
        data = rng.standard_normal((25, 4))
        means, variances = welford_columns(data, 0)
        np.testing.assert_allclose(means, data.mean(axis=0), rtol=1e-12, atol=1e-14)
        np.testing.assert_allclose(variances, data.var(axis=0), rtol=1e-12)
