"""
FlatMatrix: row-major view over a contiguous buffer of doubles.

Matrices cross every kernel boundary as a flat buffer plus explicit
row/column counts. FlatMatrix bundles the three so callers that hold a
matrix (rather than a vector) say so explicitly instead of having the
kernel guess the shape.

Construction:
    FlatMatrix.from_buffer([1, 2, 3, 4], rows=2, cols=2)
    FlatMatrix.from_nested([[1, 2], [3, 4]])
    FlatMatrix.from_array(np.eye(3))
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatstat.core.exceptions import DimensionError
from pymatstat.core.validation import (
    check_array,
    check_2d,
    check_buffer_shape,
    check_dimension,
)


@dataclass(frozen=True, eq=False)
class FlatMatrix:
    """
    Immutable rows x cols matrix stored row-major in a 1-D float64 buffer.

    The buffer is marked read-only; kernels copy it before mutating.
    Two matrices compare equal when their shapes and elements match.
    """
    _buffer: NDArray[np.float64]
    _rows: int
    _cols: int

    @classmethod
    def from_buffer(cls, buffer: ArrayLike, rows: int, cols: int) -> FlatMatrix:
        """
        Build a FlatMatrix from a flat row-major buffer.

        Parameters
        ----------
        buffer : array-like
            1-D sequence of rows * cols numbers.
        rows, cols : int
            Matrix dimensions, both >= 1.
        """
        rows = check_dimension(rows, 'rows')
        cols = check_dimension(cols, 'cols')
        data = check_array(buffer, 'buffer')
        check_buffer_shape(data, rows, cols, 'buffer')
        return cls._build(data, rows, cols)

    @classmethod
    def from_array(cls, array: ArrayLike) -> FlatMatrix:
        """Build a FlatMatrix from a 2-D array (copied, C order)."""
        data = check_array(array, 'array')
        check_2d(data, 'array')
        rows, cols = data.shape
        if rows < 1 or cols < 1:
            raise DimensionError(f"array: need at least a 1x1 matrix, got {rows}x{cols}")
        return cls._build(data.ravel(order='C'), rows, cols)

    @classmethod
    def from_nested(cls, grid: Any) -> FlatMatrix:
        """
        Build a FlatMatrix from a list of equal-length rows.

        Jagged input is rejected rather than padded.
        """
        try:
            lengths = {len(row) for row in grid}
        except TypeError as e:
            raise DimensionError(f"grid: expected a sequence of rows: {e}") from e
        if len(lengths) > 1:
            raise DimensionError(
                f"grid: rows have inconsistent lengths {sorted(lengths)}"
            )
        return cls.from_array(grid)

    @classmethod
    def _build(cls, data: NDArray, rows: int, cols: int) -> FlatMatrix:
        """Internal builder: private read-only copy of the buffer."""
        buffer = np.array(data, dtype=np.float64, copy=True)
        buffer.setflags(write=False)
        return cls(_buffer=buffer, _rows=rows, _cols=cols)

    @property
    def buffer(self) -> NDArray[np.float64]:
        """Flat row-major buffer (read-only)."""
        return self._buffer

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        return (self._rows, self._cols)

    @property
    def is_square(self) -> bool:
        return self._rows == self._cols

    def as_2d(self) -> NDArray[np.float64]:
        """Read-only (rows, cols) view of the buffer."""
        return self._buffer.reshape(self._rows, self._cols)

    def to_nested(self) -> list[list[float]]:
        """Nested list of rows."""
        return self.as_2d().tolist()

    def row(self, i: int) -> NDArray[np.float64]:
        return self.as_2d()[i]

    def column(self, j: int) -> NDArray[np.float64]:
        return self.as_2d()[:, j]

    def __getitem__(self, index: tuple[int, int]) -> float:
        i, j = index
        return float(self.as_2d()[i, j])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FlatMatrix):
            return NotImplemented
        return self.shape == other.shape and np.array_equal(self._buffer, other._buffer)

    def __hash__(self) -> int:
        # -0.0 + 0.0 is 0.0, so equal buffers hash equally
        return hash((self._rows, self._cols, (self._buffer + 0.0).tobytes()))

    def __repr__(self) -> str:
        return f"FlatMatrix(rows={self._rows}, cols={self._cols})"
