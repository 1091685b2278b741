"""
Input validation utilities for pymatstat.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray + float64 promotion)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pymatstat.core.exceptions import (
    ValidationError,
    DimensionError,
    DegenerateStatisticError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.float64]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types, jagged nesting
    or non-numeric data) and complex input.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype

    Raises:
        ValidationError: If input cannot be converted to a real numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex input is not supported")

    # Booleans are not numbers here; reject along with strings, datetimes etc.
    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    return result.astype(np.float64, copy=False)


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 1-dimensional.

    Flat buffers are the only matrix representation accepted at the
    kernel boundary; nested grids must be flattened first.

    Raises:
        DimensionError: If array is not 1D
    """
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 2-dimensional.

    Raises:
        DimensionError: If array is not 2D
    """
    check_ndim(array, 2, name)


def check_dimension(value: Any, name: str, *, allow_zero: bool = False) -> int:
    """
    Validate a row/column count.

    Args:
        value: Candidate dimension
        name: Parameter name for error messages
        allow_zero: Accept 0 (only the determinant accepts an empty matrix)

    Returns:
        The dimension as a plain int

    Raises:
        ValidationError: If value is not an integer or is out of range
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValidationError(
            f"{name}: expected a non-negative integer, got {type(value).__name__} {value!r}"
        )
    value = int(value)
    minimum = 0 if allow_zero else 1
    if value < minimum:
        raise ValidationError(f"{name}: must be >= {minimum}, got {value}")
    return value


def check_buffer_shape(
    buffer: NDArray[np.floating[Any]],
    rows: int,
    cols: int,
    name: str,
) -> None:
    """
    Verify a flat buffer holds exactly rows * cols elements.

    Raises:
        DimensionError: If the buffer is not 1D or has the wrong length
    """
    check_1d(buffer, name)
    if buffer.size != rows * cols:
        raise DimensionError(
            f"{name}: buffer has {buffer.size} elements, expected "
            f"rows * cols = {rows} * {cols} = {rows * cols}"
        )


def check_not_empty(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array has at least one element.

    Raises:
        DegenerateStatisticError: If array is empty
    """
    if array.size == 0:
        raise DegenerateStatisticError(
            f"{name}: statistic is undefined for empty input"
        )


def check_normalization_flag(flag: Any, name: str = "flag") -> int:
    """
    Verify a normalization flag is 0 (population) or 1 (sample).

    Returns:
        The flag as a plain int

    Raises:
        ValidationError: If flag is anything other than 0 or 1
    """
    if isinstance(flag, bool) or not isinstance(flag, numbers.Integral) or flag not in (0, 1):
        raise ValidationError(
            f"{name}: expected normalization flag 0 or 1, got {flag!r}"
        )
    return int(flag)
