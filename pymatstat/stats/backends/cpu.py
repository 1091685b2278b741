"""
CPU backend for describe().

All per-column moments come from one multi-column Welford pass.
"""

from __future__ import annotations

import numpy as np

from pymatstat.core.matrix import FlatMatrix
from pymatstat.core.result import Result, _default_provenance
from pymatstat.core.compute.timing import Timer
from pymatstat.core.compute.tolerances import CPU_FP64
from pymatstat.core.compute.welford import WelfordAccumulator
from pymatstat.core.compute.covariance import (
    covariance_flat,
    correlation_from_covariance,
)
from pymatstat.stats.solution import StatsParams


ALL_STATISTICS = frozenset({'mean', 'var', 'sd', 'cov', 'cor'})


class CPUStatsBackend:
    """CPU reference backend for descriptive statistics."""

    @property
    def name(self) -> str:
        return 'cpu_welford'

    def solve(
        self,
        matrix: FlatMatrix,
        *,
        compute: set[str],
        flag: int = 1,
    ) -> Result[StatsParams]:
        """
        Compute requested statistics.

        Parameters
        ----------
        matrix : FlatMatrix
            rows observations x cols variables.
        compute : set of str
            Subset of {'mean', 'var', 'sd', 'cov', 'cor'}.
        flag : int
            0 population, 1 sample normalization.
        """
        unknown = set(compute) - ALL_STATISTICS
        if unknown:
            raise ValueError(f"Unknown statistics requested: {sorted(unknown)}")

        timer = Timer()
        timer.start()

        data = matrix.as_2d()
        rows, cols = matrix.shape
        warnings_list: list[str] = []

        mean = None
        variance = None
        sd = None
        covariance = None
        correlation = None

        with timer.section('welford'):
            acc = WelfordAccumulator(width=cols).extend(data)

        if 'mean' in compute:
            mean = acc.mean

        if compute & {'var', 'sd', 'cor'}:
            with timer.section('variance'):
                var_all = acc.variance(flag)
            if rows - flag == 0:
                warnings_list.append(
                    "single observation with sample normalization: variance is NaN"
                )
            if 'var' in compute:
                variance = var_all
            if 'sd' in compute:
                sd = np.sqrt(var_all)

        if compute & {'cov', 'cor'}:
            with timer.section('covariance'):
                cov_all = covariance_flat(matrix.buffer, rows, cols, flag)
            if 'cov' in compute:
                covariance = cov_all

        if 'cor' in compute:
            with timer.section('correlation'):
                correlation = correlation_from_covariance(cov_all, cols)
            zero_var = np.flatnonzero(var_all == 0.0)
            if zero_var.size > 0:
                warnings_list.append(
                    f"columns {zero_var.tolist()} have zero variance: correlation is NaN"
                )

        info: dict = {'flag': flag, 'computed': sorted(compute)}
        if covariance is not None and variance is not None:
            info['diagonal_matches_variance'] = bool(np.allclose(
                np.diagonal(covariance.reshape(cols, cols)),
                variance,
                rtol=CPU_FP64.rtol,
                atol=CPU_FP64.atol,
                equal_nan=True,
            ))

        timer.stop()

        params = StatsParams(
            mean=mean,
            variance=variance,
            sd=sd,
            covariance=covariance,
            correlation=correlation,
            flag=flag,
        )

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
            provenance={**_default_provenance(), 'algorithm': 'welford'},
        )
