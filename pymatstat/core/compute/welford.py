"""
Welford's single-pass mean/variance accumulator.

Maintains the running mean and the running sum of squared deviations
(M2) so variance never suffers the catastrophic cancellation of the
naive sum-of-squares formula:

    delta = x - mean
    mean += delta / count
    M2   += delta * (x - mean)

    variance = M2 / (n - flag)      flag 0: population, 1: sample

An accumulator built with ``width=p`` tracks p columns at once: each
update takes one row of p observations and the state becomes arrays of
length p. The per-column arithmetic is identical to the scalar case.
"""

from __future__ import annotations

from typing import Any, Iterable
import numpy as np
from numpy.typing import ArrayLike, NDArray


class WelfordAccumulator:
    """
    Running mean and M2.

    Usage:
        acc = WelfordAccumulator()
        acc.extend(buffer)
        acc.mean, acc.variance(flag=1), acc.std(flag=0)

        cols = WelfordAccumulator(width=3)
        for row in data_2d:
            cols.update(row)
        cols.mean              # shape (3,)
    """

    def __init__(self, width: int | None = None):
        self._width = width
        self._count = 0
        if width is None:
            self._mean: Any = 0.0
            self._m2: Any = 0.0
        else:
            self._mean = np.zeros(width, dtype=np.float64)
            self._m2 = np.zeros(width, dtype=np.float64)

    @property
    def count(self) -> int:
        return self._count

    @property
    def mean(self) -> float | NDArray[np.float64]:
        """Running mean (copy for multi-column accumulators)."""
        if self._width is None:
            return float(self._mean)
        return self._mean.copy()

    @property
    def m2(self) -> float | NDArray[np.float64]:
        """Running sum of squared deviations from the mean."""
        if self._width is None:
            return float(self._m2)
        return self._m2.copy()

    def update(self, x: float | ArrayLike) -> None:
        """Fold one observation (or one row, for multi-column) into the state."""
        if self._width is not None:
            x = np.asarray(x, dtype=np.float64)
            if x.shape != (self._width,):
                raise ValueError(
                    f"expected a row of {self._width} observations, got shape {x.shape}"
                )
        self._count += 1
        delta = x - self._mean
        self._mean = self._mean + delta / self._count
        self._m2 = self._m2 + delta * (x - self._mean)

    def extend(self, values: Iterable[Any]) -> WelfordAccumulator:
        """Fold every observation from an iterable; returns self for chaining."""
        for x in values:
            self.update(x)
        return self

    def variance(self, flag: int = 1) -> float | NDArray[np.float64]:
        """
        M2 / (n - flag).

        n == 1 with flag == 1 evaluates 0/0 and yields NaN. No
        observations at all yields NaN for either flag.
        """
        if self._count == 0:
            result = np.full_like(self._m2, np.nan, dtype=np.float64)
        else:
            with np.errstate(divide='ignore', invalid='ignore'):
                result = np.divide(self._m2, np.float64(self._count - flag))
        if self._width is None:
            return float(result)
        return result

    def std(self, flag: int = 1) -> float | NDArray[np.float64]:
        """Square root of variance(flag)."""
        result = np.sqrt(self.variance(flag))
        if self._width is None:
            return float(result)
        return result


def welford_moments(
    values: NDArray[np.float64],
    flag: int,
) -> tuple[float, float]:
    """
    Single pass over a 1-D buffer.

    Returns:
        (mean, variance) with variance normalized by n - flag
    """
    acc = WelfordAccumulator()
    acc.extend(values.tolist())
    return acc.mean, acc.variance(flag)


def welford_columns(
    data: NDArray[np.float64],
    flag: int,
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """
    Single pass over the rows of a (rows, cols) array, per column.

    Returns:
        (means, variances), each of shape (cols,)
    """
    acc = WelfordAccumulator(width=data.shape[1])
    acc.extend(data)
    return acc.mean, acc.variance(flag)
