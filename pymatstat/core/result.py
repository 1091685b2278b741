"""
Generic result container for pymatstat computations.

The Result class provides a standardized envelope for computations that
report more than a single array: timing, warnings and provenance travel
with the numeric payload.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (normalization, computed sections)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

import numpy as np

P = TypeVar('P')  # Parameter payload type


def _default_provenance() -> dict[str, str]:
    """Version metadata attached to every Result unless overridden."""
    from pymatstat import __version__

    return {
        'pymatstat_version': __version__,
        'numpy_version': np.__version__,
    }


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific parameters (means, covariance, etc.)
        info: Structured metadata (normalization flag, computed sections)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation
        provenance: Library versions used to produce the result

    Examples:
        >>> Result(
        ...     params=StatsParams(mean=mu),
        ...     info={'flag': 1, 'computed': ['mean']},
        ...     timing={'total_seconds': 0.01},
        ...     backend_name='cpu_welford'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, str] = field(default_factory=_default_provenance)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
