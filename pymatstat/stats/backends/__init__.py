"""Compute backends for the stats module."""

from pymatstat.stats.backends.cpu import CPUStatsBackend

__all__ = ["CPUStatsBackend"]
