"""
Statistics solution types.

Contains the parameter payload and user-facing solution wrapper
returned by describe().
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pymatstat.core.matrix import FlatMatrix
from pymatstat.core.result import Result


@dataclass(frozen=True)
class StatsParams:
    """
    Parameter payload for describe().

    Per-column vectors have shape (cols,); matrices are flat row-major
    cols x cols buffers. Fields are None when not requested.
    """
    mean: NDArray[np.floating[Any]] | None = None
    variance: NDArray[np.floating[Any]] | None = None
    sd: NDArray[np.floating[Any]] | None = None
    covariance: NDArray[np.floating[Any]] | None = None
    correlation: NDArray[np.floating[Any]] | None = None
    flag: int | None = None


@dataclass
class StatsSolution:
    """
    User-facing describe() results.

    Wraps Result[StatsParams] and provides convenient accessors.
    """
    _result: Result[StatsParams]
    _matrix: FlatMatrix

    @property
    def mean(self) -> NDArray[np.floating[Any]] | None:
        """Per-column means, shape (cols,)."""
        return self._result.params.mean

    @property
    def variance(self) -> NDArray[np.floating[Any]] | None:
        """Per-column variance, shape (cols,)."""
        return self._result.params.variance

    @property
    def sd(self) -> NDArray[np.floating[Any]] | None:
        """Per-column standard deviation, shape (cols,)."""
        return self._result.params.sd

    @property
    def covariance(self) -> NDArray[np.floating[Any]] | None:
        """Flat row-major cols x cols covariance buffer."""
        return self._result.params.covariance

    @property
    def covariance_matrix(self) -> NDArray[np.floating[Any]] | None:
        """Covariance as a (cols, cols) array."""
        cov = self._result.params.covariance
        if cov is None:
            return None
        return cov.reshape(self._matrix.cols, self._matrix.cols)

    @property
    def correlation(self) -> NDArray[np.floating[Any]] | None:
        """Flat row-major cols x cols correlation buffer."""
        return self._result.params.correlation

    @property
    def flag(self) -> int | None:
        """Normalization flag used (0 population, 1 sample)."""
        return self._result.params.flag

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """One line per column: mean, sd, var."""
        lines = ["Descriptive Statistics:"]
        if self.mean is None:
            return lines[0]
        for j in range(len(self.mean)):
            parts = [f"  V{j + 1}:", f"mean={self.mean[j]:.6f}"]
            if self.sd is not None:
                parts.append(f"sd={self.sd[j]:.6f}")
            if self.variance is not None:
                parts.append(f"var={self.variance[j]:.6f}")
            lines.append(", ".join(parts))
        return "\n".join(lines)

    def __repr__(self) -> str:
        computed = self._result.info.get('computed', [])
        stats_str = ", ".join(computed) if computed else "none"
        return (
            f"StatsSolution(rows={self._matrix.rows}, cols={self._matrix.cols}, "
            f"computed=[{stats_str}])"
        )
